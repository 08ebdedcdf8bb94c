"""
API Schemas
Pydantic request and response models
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from ..domain.models import ConversationMessage

MAX_MESSAGE_LENGTH = 4000
MAX_HISTORY_MESSAGES = 50


# === Chat ===


class HistoryMessage(BaseModel):
    """One prior turn supplied by the client"""

    role: str = Field(..., pattern="^(user|assistant|system)$")
    content: str = Field(..., max_length=MAX_MESSAGE_LENGTH)
    timestamp: datetime | None = None
    emotion: str | None = None

    def to_domain(self) -> ConversationMessage:
        return ConversationMessage.from_dict(self.model_dump())


class ChatRequest(BaseModel):
    """Chat request (empty messages are answered, not rejected)"""

    message: str = Field("", max_length=MAX_MESSAGE_LENGTH, description="User message")
    conversation_history: list[HistoryMessage] = Field(
        default_factory=list,
        max_length=MAX_HISTORY_MESSAGES,
        description="Prior turns, oldest first",
    )
    language: str = Field("en", max_length=10, description="Language code, e.g. en or hi")


class ChatResponse(BaseModel):
    """Therapist response"""

    message: str
    emotion: str
    therapeutic_technique: str | None
    crisis_level: str
    follow_up_suggestions: list[str]
    conversation_type: str
    source: str
    is_crisis: bool


# === Classification ===


class ClassifyRequest(BaseModel):
    message: str = Field("", max_length=MAX_MESSAGE_LENGTH)


class ClassifyResponse(BaseModel):
    conversation_type: str
    emotion: str
    context: str
    crisis_level: str
    authenticity: int
    edge_case: str | None


# === System ===


class StatusResponse(BaseModel):
    """LLM configuration status"""

    configured: bool
    model: str
    fallback_mode: bool


class HealthResponse(BaseModel):
    """Health check response"""

    status: str
    timestamp: datetime
    version: str
    components: dict[str, bool]


class APIInfoResponse(BaseModel):
    """API information"""

    service: str
    version: str
    description: str
    features: list[str]
