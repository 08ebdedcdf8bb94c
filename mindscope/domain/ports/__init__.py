"""
Domain ports
Interfaces for dependency inversion
"""

from .ai_port import ChatMessage, IAIProvider

__all__ = [
    "ChatMessage",
    "IAIProvider",
]
