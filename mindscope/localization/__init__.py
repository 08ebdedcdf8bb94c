"""
Localization
Language configuration, emergency numbers and translation tables
"""

from .languages import (
    LANGUAGE_CONFIGS,
    CulturalContext,
    EmergencyNumbers,
    Language,
    LanguageConfig,
    get_language_config,
)
from .translations import TRANSLATIONS, get_translation, has_translation

__all__ = [
    "Language",
    "LanguageConfig",
    "EmergencyNumbers",
    "CulturalContext",
    "LANGUAGE_CONFIGS",
    "get_language_config",
    "TRANSLATIONS",
    "get_translation",
    "has_translation",
]
