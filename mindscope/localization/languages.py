"""
Language configuration
Supported languages, regional emergency numbers and cultural context
"""

from dataclasses import dataclass
from enum import Enum


class Language(Enum):
    """Supported language codes"""

    EN = "en"  # English
    HI = "hi"  # Hindi
    TA = "ta"  # Tamil
    TE = "te"  # Telugu
    BN = "bn"  # Bengali
    MR = "mr"  # Marathi
    GU = "gu"  # Gujarati
    PA = "pa"  # Punjabi
    ML = "ml"  # Malayalam
    KN = "kn"  # Kannada
    OR = "or"  # Odia
    AS = "as"  # Assamese
    UR = "ur"  # Urdu
    ES = "es"  # Spanish
    FR = "fr"  # French
    DE = "de"  # German
    ZH = "zh"  # Chinese
    JA = "ja"  # Japanese
    KO = "ko"  # Korean
    AR = "ar"  # Arabic
    PT = "pt"  # Portuguese
    RU = "ru"  # Russian

    @classmethod
    def parse(cls, value: "Language | str | None") -> "Language":
        """Accept an enum or a code such as "hi" / "en-US"; unknown codes map to English"""
        if isinstance(value, Language):
            return value
        if not value:
            return cls.EN
        code = value.strip().lower().replace("_", "-").split("-")[0]
        try:
            return cls(code)
        except ValueError:
            return cls.EN


class Level(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SocialOrientation(Enum):
    COLLECTIVE = "collective"
    INDIVIDUAL = "individual"
    MIXED = "mixed"


@dataclass(frozen=True)
class EmergencyNumbers:
    suicide: str
    crisis: str
    emergency: str


@dataclass(frozen=True)
class CulturalContext:
    family_importance: Level
    stigma_level: Level
    religious_influence: Level
    orientation: SocialOrientation


@dataclass(frozen=True)
class LanguageConfig:
    code: Language
    name: str
    native_name: str
    emergency_numbers: EmergencyNumbers
    cultural_context: CulturalContext
    rtl: bool = False


def _config(code: Language, name: str, native_name: str, numbers: tuple[str, str, str],
            culture: tuple[str, str, str, str], rtl: bool = False) -> LanguageConfig:
    family, stigma, religion, orientation = culture
    return LanguageConfig(
        code=code,
        name=name,
        native_name=native_name,
        emergency_numbers=EmergencyNumbers(*numbers),
        cultural_context=CulturalContext(
            family_importance=Level(family),
            stigma_level=Level(stigma),
            religious_influence=Level(religion),
            orientation=SocialOrientation(orientation),
        ),
        rtl=rtl,
    )


# (suicide, crisis, emergency)
_INDIA = ("9152987821", "9820466726", "112")
_INDIA_SOUTH = ("104", "9820466726", "112")
_COLLECTIVE_HIGH = ("high", "high", "high", "collective")

LANGUAGE_CONFIGS: dict[Language, LanguageConfig] = {
    Language.EN: _config(Language.EN, "English", "English", ("988", "741741", "911"),
                         ("medium", "medium", "low", "individual")),
    Language.HI: _config(Language.HI, "Hindi", "हिंदी", _INDIA, _COLLECTIVE_HIGH),
    Language.TA: _config(Language.TA, "Tamil", "தமிழ்", _INDIA_SOUTH, _COLLECTIVE_HIGH),
    Language.TE: _config(Language.TE, "Telugu", "తెలుగు", _INDIA_SOUTH, _COLLECTIVE_HIGH),
    Language.BN: _config(Language.BN, "Bengali", "বাংলা", ("9831775959", "9820466726", "112"),
                         _COLLECTIVE_HIGH),
    Language.MR: _config(Language.MR, "Marathi", "मराठी", _INDIA, _COLLECTIVE_HIGH),
    Language.GU: _config(Language.GU, "Gujarati", "ગુજરાતી", _INDIA, _COLLECTIVE_HIGH),
    Language.PA: _config(Language.PA, "Punjabi", "ਪੰਜਾਬੀ", _INDIA,
                         ("high", "medium", "high", "collective")),
    Language.ML: _config(Language.ML, "Malayalam", "മലയാളം", _INDIA_SOUTH,
                         ("high", "medium", "high", "collective")),
    Language.KN: _config(Language.KN, "Kannada", "ಕನ್ನಡ", _INDIA_SOUTH, _COLLECTIVE_HIGH),
    Language.OR: _config(Language.OR, "Odia", "ଓଡ଼ିଆ", _INDIA_SOUTH, _COLLECTIVE_HIGH),
    Language.AS: _config(Language.AS, "Assamese", "অসমীয়া", _INDIA_SOUTH, _COLLECTIVE_HIGH),
    Language.UR: _config(Language.UR, "Urdu", "اردو", _INDIA, _COLLECTIVE_HIGH, rtl=True),
    Language.ES: _config(Language.ES, "Spanish", "Español", ("988", "741741", "911"),
                         ("high", "medium", "medium", "mixed")),
    Language.FR: _config(Language.FR, "French", "Français", ("3114", "0800235236", "15"),
                         ("medium", "low", "low", "individual")),
    Language.DE: _config(Language.DE, "German", "Deutsch", ("0800-1110111", "0800-1110222", "112"),
                         ("medium", "low", "low", "individual")),
    Language.ZH: _config(Language.ZH, "Chinese", "中文", ("400-161-9995", "400-161-9995", "120"),
                         ("high", "high", "low", "collective")),
    Language.JA: _config(Language.JA, "Japanese", "日本語", ("0570-783-556", "0120-279-338", "119"),
                         ("high", "high", "low", "collective")),
    Language.KO: _config(Language.KO, "Korean", "한국어", ("1393", "1588-9191", "119"),
                         ("high", "high", "low", "collective")),
    Language.AR: _config(Language.AR, "Arabic", "العربية", ("920033360", "8002474357", "999"),
                         _COLLECTIVE_HIGH, rtl=True),
    Language.PT: _config(Language.PT, "Portuguese", "Português", ("213-164-174", "808-200-204", "112"),
                         ("high", "medium", "medium", "mixed")),
    Language.RU: _config(Language.RU, "Russian", "Русский", ("8-800-2000-122", "8-495-989-50-50", "112"),
                         ("high", "medium", "medium", "collective")),
}


def get_language_config(language: Language | str | None) -> LanguageConfig:
    """Configuration for a language, English when unknown"""
    return LANGUAGE_CONFIGS.get(Language.parse(language), LANGUAGE_CONFIGS[Language.EN])
