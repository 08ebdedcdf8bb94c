"""
API Dependencies
Dependency injection wiring
"""

from typing import Optional

from ..adapters.ai.openai import OpenAICompatibleAdapter
from ..core.config import get_settings
from ..domain.ports.ai_port import IAIProvider
from ..domain.services.router import MessageRouter

# === Singletons ===

_ai_provider: Optional[IAIProvider] = None
_ai_provider_resolved = False
_router: Optional[MessageRouter] = None


# === Providers ===

def get_ai_provider() -> Optional[IAIProvider]:
    """AI provider, None when no usable API key is configured"""
    global _ai_provider, _ai_provider_resolved
    if not _ai_provider_resolved:
        _ai_provider = OpenAICompatibleAdapter.from_settings(get_settings().ai)
        _ai_provider_resolved = True
    return _ai_provider


def get_message_router() -> MessageRouter:
    global _router
    if _router is None:
        _router = MessageRouter(
            ai_provider=get_ai_provider(),
            settings=get_settings().ai,
        )
    return _router


# === Test helpers ===

def reset_dependencies() -> None:
    """Reset all singletons (tests)"""
    global _ai_provider, _ai_provider_resolved, _router
    _ai_provider = None
    _ai_provider_resolved = False
    _router = None


def set_ai_provider(ai_provider: Optional[IAIProvider]) -> None:
    """Override the AI provider (tests); rebuilds the router on next use"""
    global _ai_provider, _ai_provider_resolved, _router
    _ai_provider = ai_provider
    _ai_provider_resolved = True
    _router = None
