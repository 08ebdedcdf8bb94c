"""
Domain Services
Detection, response building and message routing
"""

from .detection import ConversationTypeDetector, CrisisAssessor, EmotionDetector
from .edge_cases import EdgeCaseInterceptor
from .router import MessageRouter, RouterStatus

__all__ = [
    "EdgeCaseInterceptor",
    "ConversationTypeDetector",
    "EmotionDetector",
    "CrisisAssessor",
    "MessageRouter",
    "RouterStatus",
]
