"""
MindScope - conversational response engine for a mental-health companion

Routes each user message through edge-case interception, conversation-type
detection, emotion/context detection and crisis-severity scoring, then
answers with a fixed crisis protocol, an LLM reply or a template.
"""

from pathlib import Path
import tomllib

_pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
if _pyproject.exists():
    with _pyproject.open("rb") as _f:
        __version__: str = tomllib.load(_f)["project"]["version"]
else:
    from importlib.metadata import version as _version

    __version__ = _version("mindscope")

# ===== Domain Models =====
from .domain.models import (
    ClassificationResult,
    ConversationHistory,
    ConversationMessage,
    ConversationType,
    CrisisLevel,
    EdgeCaseKind,
    Emotion,
    LifeContext,
    ResponseSource,
    Role,
    TherapistResponse,
)

# ===== Ports (Interfaces) =====
from .domain.ports import ChatMessage, IAIProvider

# ===== Domain Services =====
from .domain.services import MessageRouter, RouterStatus

# ===== Localization =====
from .localization import Language, get_language_config, get_translation


# ===== Adapters (lazy import) =====
def get_openai_adapter():
    from .adapters.ai.openai import OpenAICompatibleAdapter

    return OpenAICompatibleAdapter


# ===== API (lazy import) =====
def create_app():
    from .api import create_app as _create_app

    return _create_app()


__all__ = [
    # Version
    "__version__",
    # Domain Models
    "ConversationType",
    "Emotion",
    "LifeContext",
    "CrisisLevel",
    "EdgeCaseKind",
    "ClassificationResult",
    "Role",
    "ConversationMessage",
    "ConversationHistory",
    "ResponseSource",
    "TherapistResponse",
    # Ports
    "ChatMessage",
    "IAIProvider",
    # Domain Services
    "MessageRouter",
    "RouterStatus",
    # Localization
    "Language",
    "get_language_config",
    "get_translation",
    # Adapters (lazy)
    "get_openai_adapter",
    # API (lazy)
    "create_app",
]
