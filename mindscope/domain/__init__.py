"""
MindScope Domain Layer
Classification models, the AI provider port and the message router
"""

from __future__ import annotations

from .models import (
    ClassificationResult,
    ConversationHistory,
    ConversationMessage,
    ConversationType,
    CrisisAssessment,
    CrisisLevel,
    EdgeCaseKind,
    Emotion,
    LifeContext,
    ResponseSource,
    Role,
    TherapistResponse,
)

__all__ = [
    # classification (computed per message, never stored)
    "ConversationType",
    "Emotion",
    "LifeContext",
    "CrisisLevel",
    "EdgeCaseKind",
    "CrisisAssessment",
    "ClassificationResult",
    # conversation
    "Role",
    "ConversationMessage",
    "ConversationHistory",
    # response
    "ResponseSource",
    "TherapistResponse",
]
