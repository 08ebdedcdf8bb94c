"""
API Routes
Endpoint definitions
"""

from .chat import router as chat_router
from .classify import router as classify_router
from .status import router as status_router

__all__ = [
    "chat_router",
    "classify_router",
    "status_router",
]
