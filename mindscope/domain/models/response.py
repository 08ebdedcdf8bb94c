"""
Response model
The value handed back to the presentation layer once per user turn
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .classification import ConversationType, CrisisLevel


class ResponseSource(Enum):
    """Which branch of the pipeline produced the response"""
    EDGE_CASE = "edge_case"
    CASUAL_LLM = "casual_llm"
    CASUAL_TEMPLATE = "casual_template"
    CRISIS = "crisis"
    LLM = "llm"
    TEMPLATE = "template"


@dataclass(frozen=True)
class TherapistResponse:
    """Structured therapist reply"""
    message: str
    emotion: str
    crisis_level: CrisisLevel
    follow_up_suggestions: list[str] = field(default_factory=list)
    therapeutic_technique: str | None = None
    conversation_type: ConversationType = ConversationType.THERAPEUTIC
    source: ResponseSource = ResponseSource.TEMPLATE

    @property
    def is_crisis(self) -> bool:
        return self.crisis_level.is_crisis

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "emotion": self.emotion,
            "therapeutic_technique": self.therapeutic_technique,
            "crisis_level": self.crisis_level.value,
            "follow_up_suggestions": list(self.follow_up_suggestions),
            "conversation_type": self.conversation_type.value,
            "source": self.source.value,
        }
