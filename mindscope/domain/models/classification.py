"""
Classification model
Closed variant tags for routing plus the per-message classification value
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ConversationType(Enum):
    """Top-level routing tag"""
    CASUAL = "casual"
    THERAPEUTIC = "therapeutic"
    CRISIS = "crisis"


class Emotion(Enum):
    """Detected user emotion"""
    ANXIETY = "anxiety"
    DEPRESSION = "depression"
    HAPPINESS = "happiness"
    ANGER = "anger"
    GRIEF = "grief"
    STRESS = "stress"
    TRAUMA = "trauma"
    CONFUSION = "confusion"
    LONELINESS = "loneliness"
    EXCITEMENT = "excitement"
    OVERWHELMED = "overwhelmed"
    GUILT = "guilt"
    FEAR = "fear"
    MIXED = "mixed"
    GENERAL = "general"


class LifeContext(Enum):
    """Life domain the message is about"""
    WORK = "work"
    RELATIONSHIP = "relationship"
    FAMILY = "family"
    HEALTH = "health"
    FINANCIAL = "financial"
    ACADEMIC = "academic"
    SOCIAL = "social"
    GENERAL = "general"


class CrisisLevel(Enum):
    """Four-tier self-harm risk severity"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _CRISIS_RANK[self]

    @property
    def is_crisis(self) -> bool:
        """High and critical are answered by the fixed crisis protocol"""
        return self in (CrisisLevel.HIGH, CrisisLevel.CRITICAL)

    def step_down(self) -> "CrisisLevel":
        """One tier lower (low stays low)"""
        return _CRISIS_ORDER[max(self.rank - 1, 0)]


_CRISIS_ORDER = (CrisisLevel.LOW, CrisisLevel.MEDIUM, CrisisLevel.HIGH, CrisisLevel.CRITICAL)
_CRISIS_RANK = {level: index for index, level in enumerate(_CRISIS_ORDER)}


class EdgeCaseKind(Enum):
    """Input categories intercepted before classification"""
    EMPTY = "empty"
    NONSENSE = "nonsense"
    PROMPT_INJECTION = "prompt_injection"
    HOSTILITY = "hostility"
    MEDICAL_ADVICE = "medical_advice"
    DATING_ADVICE = "dating_advice"


@dataclass(frozen=True)
class CrisisAssessment:
    """Severity level and the authenticity score it was derived with"""
    level: CrisisLevel
    authenticity: int = 0
    escalated: bool = False

    @property
    def is_test_mode(self) -> bool:
        """Very negative authenticity reads as hypothetical/probing language"""
        return self.authenticity <= -2


@dataclass(frozen=True)
class ClassificationResult:
    """
    Per-message classification

    Computed fresh for each message and never stored.
    """
    conversation_type: ConversationType
    emotion: Emotion = Emotion.GENERAL
    context: LifeContext = LifeContext.GENERAL
    crisis_level: CrisisLevel = CrisisLevel.LOW
    authenticity: int = 0
    edge_case: EdgeCaseKind | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "conversation_type": self.conversation_type.value,
            "emotion": self.emotion.value,
            "context": self.context.value,
            "crisis_level": self.crisis_level.value,
            "authenticity": self.authenticity,
            "edge_case": self.edge_case.value if self.edge_case else None,
        }
