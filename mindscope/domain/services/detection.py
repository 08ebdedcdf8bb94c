"""
Detection services
Conversation type, emotion, life context and crisis severity
"""

import re

from ..models.classification import (
    ConversationType,
    CrisisAssessment,
    CrisisLevel,
    Emotion,
    LifeContext,
)
from .casual import match_casual_topic
from .keywords import (
    CONTEXT_KEYWORDS,
    CRISIS_FAMILIES,
    EMOTION_FAMILIES,
    GLOBAL_TEST_INDICATORS,
    INTENSIFIERS,
    SUBSTANCE_KEYWORDS,
    TEMPORAL_MARKERS,
    VIOLENCE_KEYWORDS,
    contains_any,
    count_hits,
    normalize,
)

SHORT_MESSAGE_WORDS = 3
LONG_MESSAGE_CHARS = 50
TEST_MODE_THRESHOLD = -2

AUTHENTIC_WEIGHT = 2
TEST_WEIGHT = -3
LENGTH_WEIGHT = 1
INTENSIFIER_WEIGHT = 1
TEMPORAL_WEIGHT = 2


class ConversationTypeDetector:
    """
    Conversation type detector

    crisis -> therapeutic (emotional content) -> casual patterns ->
    short text is casual -> therapeutic
    """

    def __init__(self):
        self._crisis_keywords: tuple[str, ...] = tuple(
            keyword
            for level, family in CRISIS_FAMILIES
            if level.is_crisis
            for keyword in family.primary
        ) + SUBSTANCE_KEYWORDS + VIOLENCE_KEYWORDS

        self._emotional_keywords: tuple[str, ...] = tuple(
            keyword
            for _, family in EMOTION_FAMILIES
            for keyword in family.primary
        ) + tuple(
            keyword
            for level, family in CRISIS_FAMILIES
            if not level.is_crisis
            for keyword in family.primary
        )

        self._emotional_patterns: list[re.Pattern] = [
            re.compile(r"\bi (feel|felt)\b"),
            re.compile(r"\bi('m| am) feeling\b"),
            re.compile(r"\bfeel(s|ing)? like\b"),
            re.compile(r"\bwrong with me\b"),
            re.compile(r"\bcan't (sleep|stop|handle|deal|breathe|focus)\b"),
            re.compile(r"\bneed (help|to talk|someone|support)\b"),
            re.compile(r"\bmy (life|mental health|therapist|anxiety|depression)\b"),
            re.compile(r"\bstruggl\w*"),
            re.compile(r"\bhurt(s|ing)?\b"),
            re.compile(r"\b(cry|crying|cried)\b"),
        ]

    def detect(self, message: str) -> ConversationType:
        text = normalize(message.strip())

        if contains_any(self._crisis_keywords, text):
            return ConversationType.CRISIS

        if contains_any(self._emotional_keywords, text) or any(
            pattern.search(text) for pattern in self._emotional_patterns
        ):
            return ConversationType.THERAPEUTIC

        if match_casual_topic(text) is not None:
            return ConversationType.CASUAL

        if len(text.split()) <= SHORT_MESSAGE_WORDS:
            return ConversationType.CASUAL

        return ConversationType.THERAPEUTIC


class EmotionDetector:
    """Emotion and life-context detector (first match wins)"""

    def detect_emotion(self, message: str) -> Emotion:
        text = normalize(message)
        for emotion, family in EMOTION_FAMILIES:
            if family.matches(text):
                return emotion
        return Emotion.GENERAL

    def detect_context(self, message: str) -> LifeContext:
        text = normalize(message)
        for context, keywords in CONTEXT_KEYWORDS:
            if contains_any(keywords, text):
                return context
        return LifeContext.GENERAL

    def detect(self, message: str) -> tuple[Emotion, LifeContext]:
        return self.detect_emotion(message), self.detect_context(message)


class CrisisAssessor:
    """
    Crisis severity assessor

    The matched tier is the highest one whose primary keywords occur.
    Authenticity is scored once per message and drives both the severity
    adjustment and crisis template selection:

    - authentic marker of the matched tier: +2 each
    - test marker of the matched tier: -3 each
    - longer than 50 characters: +1
    - any intensifier ("really", "very"): +1 once
    - any temporal urgency word ("tonight", "today", "now"): +2 once

    Global test indicators force `low`. Substance or violence language
    raises low/medium to high. A score of -2 or less steps a level down one
    tier unless the level is critical or came from that escalation.
    """

    def assess(self, message: str) -> CrisisAssessment:
        text = normalize(message)

        level = CrisisLevel.LOW
        matched = None
        for tier, family in CRISIS_FAMILIES:
            if family.matches(text):
                level, matched = tier, family
                break

        authenticity = self.score_authenticity(text, matched)

        if contains_any(GLOBAL_TEST_INDICATORS, text):
            return CrisisAssessment(level=CrisisLevel.LOW, authenticity=authenticity)

        escalated = False
        if level.rank < CrisisLevel.HIGH.rank and (
            contains_any(SUBSTANCE_KEYWORDS, text) or contains_any(VIOLENCE_KEYWORDS, text)
        ):
            level, escalated = CrisisLevel.HIGH, True

        if (
            authenticity <= TEST_MODE_THRESHOLD
            and level is not CrisisLevel.CRITICAL
            and not escalated
        ):
            level = level.step_down()

        return CrisisAssessment(level=level, authenticity=authenticity, escalated=escalated)

    @staticmethod
    def score_authenticity(text: str, family=None) -> int:
        """Authenticity score for normalised text against the matched tier"""
        score = 0
        if family is not None:
            score += AUTHENTIC_WEIGHT * count_hits(family.authentic, text)
            score += TEST_WEIGHT * count_hits(family.test, text)
        if len(text) > LONG_MESSAGE_CHARS:
            score += LENGTH_WEIGHT
        if contains_any(INTENSIFIERS, text):
            score += INTENSIFIER_WEIGHT
        if contains_any(TEMPORAL_MARKERS, text):
            score += TEMPORAL_WEIGHT
        return score
