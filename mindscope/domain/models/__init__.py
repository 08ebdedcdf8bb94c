"""
Domain models
"""

from .classification import (
    ClassificationResult,
    ConversationType,
    CrisisAssessment,
    CrisisLevel,
    EdgeCaseKind,
    Emotion,
    LifeContext,
)
from .conversation import (
    ConversationHistory,
    ConversationMessage,
    Role,
)
from .response import (
    ResponseSource,
    TherapistResponse,
)

__all__ = [
    # classification
    "ConversationType",
    "Emotion",
    "LifeContext",
    "CrisisLevel",
    "EdgeCaseKind",
    "CrisisAssessment",
    "ClassificationResult",
    # conversation (caller-owned, never persisted here)
    "Role",
    "ConversationMessage",
    "ConversationHistory",
    # response
    "ResponseSource",
    "TherapistResponse",
]
