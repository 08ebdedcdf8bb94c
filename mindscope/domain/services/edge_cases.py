"""
Edge-case interception
Catches input that should never reach classification
"""

import re

from ..models.classification import CrisisLevel, EdgeCaseKind
from .keywords import (
    CRISIS_FAMILIES,
    SUBSTANCE_KEYWORDS,
    VIOLENCE_KEYWORDS,
    contains_any,
    normalize,
)

MIN_MESSAGE_LENGTH = 2


class EdgeCaseInterceptor:
    """
    Edge-case interceptor

    Checked in order: empty, nonsense, prompt injection, hostility,
    medical advice, dating advice. Messages that carry explicit crisis
    language are never intercepted by the last four categories so that
    crisis detection still sees them.
    """

    def __init__(self):
        # whole-message patterns
        self._nonsense_patterns: list[re.Pattern] = [
            re.compile(r"^\d+$"),
            re.compile(r"^[!?.,;:*~#@$%^&()\[\]{}<>/\\|'\"`+=_-]+$"),
            re.compile(r"^(ha|he|hah|heh)+h?!*$"),
            re.compile(r"^(lol|lmao|lmfao|rofl|kek)+!*$"),
            re.compile(r"^h+m+\.*$"),
            re.compile(r"^(.)\1{3,}$"),
            re.compile(r"^(asdf\w*|qwerty\w*|zxcv\w*|jkl;?|sdfg\w*|fdsa)$"),
            re.compile(r"^(test|testing|tests?)( ?\d+)*[.!]*$"),
        ]

        self._injection_patterns: list[re.Pattern] = [
            re.compile(r"\b(ignore|disregard|forget)\b.{0,20}\b(previous|prior|above|earlier|all|your)\b.{0,15}"
                       r"\b(instructions?|prompts?|rules|guidelines|directions)\b"),
            re.compile(r"\bsystem prompt\b"),
            re.compile(r"\b(jailbreak|developer mode|dan mode)\b"),
            re.compile(r"\byou are (now|no longer)\b"),
            re.compile(r"\bpretend (to be|you are|you're)\b"),
            re.compile(r"\b(reveal|show|print|repeat) (me )?(your|the) (instructions|prompt|rules)\b"),
        ]

        # abuse aimed at the assistant, not profanity in general
        self._hostility_patterns: list[re.Pattern] = [
            re.compile(r"\b(fuck|screw|f\*\*k) (you|off)\b"),
            re.compile(r"\byou('re| are) (so )?(stupid|useless|dumb|an idiot|pathetic|worthless|a joke|trash|garbage)\b"),
            re.compile(r"\b(stupid|dumb|useless) (bot|ai|app|machine)\b"),
            re.compile(r"\bi hate (you|this bot|this app)\b"),
            re.compile(r"\byou suck\b"),
            re.compile(r"\bshut up\b"),
        ]

        self._medical_patterns: list[re.Pattern] = [
            re.compile(r"\bdiagnose (me|my|this)\b"),
            re.compile(r"\b(can|could|will) you diagnose\b"),
            re.compile(r"\bwhat (medication|medicine|meds|drug|antidepressant)s? should i\b"),
            re.compile(r"\bprescri(be|ption)\b"),
            re.compile(r"\b(dosage|dose of|how many mg)\b"),
            re.compile(r"\bhow much \w+ should i take\b"),
        ]

        self._dating_patterns: list[re.Pattern] = [
            re.compile(r"\bdating (advice|tips)\b"),
            re.compile(r"\bpick ?up lines?\b"),
            re.compile(r"\bhow (do i|to|can i|should i) (get|attract|impress|ask out) (a |my )?"
                       r"(girl|guy|boy|date|girlfriend|boyfriend|crush)\b"),
            re.compile(r"\bask (her|him|them) out\b"),
            re.compile(r"\bget (her|him|them) to like me\b"),
            re.compile(r"\b(tinder|bumble|hinge) (profile|bio)\b"),
        ]

        self._crisis_keywords: tuple[str, ...] = tuple(
            keyword
            for level, family in CRISIS_FAMILIES
            if level.rank >= CrisisLevel.HIGH.rank
            for keyword in family.primary
        ) + SUBSTANCE_KEYWORDS + VIOLENCE_KEYWORDS

    def detect(self, message: str | None) -> EdgeCaseKind | None:
        """
        Classify a raw message as an edge case

        Returns:
            EdgeCaseKind | None: None when the message should be classified normally
        """
        stripped = (message or "").strip()
        if len(stripped) < MIN_MESSAGE_LENGTH:
            return EdgeCaseKind.EMPTY

        text = normalize(stripped)

        if self._matches(self._nonsense_patterns, text):
            return EdgeCaseKind.NONSENSE

        if contains_any(self._crisis_keywords, text):
            return None

        if self._matches(self._injection_patterns, text):
            return EdgeCaseKind.PROMPT_INJECTION
        if self._matches(self._hostility_patterns, text):
            return EdgeCaseKind.HOSTILITY
        if self._matches(self._medical_patterns, text):
            return EdgeCaseKind.MEDICAL_ADVICE
        if self._matches(self._dating_patterns, text):
            return EdgeCaseKind.DATING_ADVICE
        return None

    @staticmethod
    def _matches(patterns: list[re.Pattern], text: str) -> bool:
        return any(pattern.search(text) for pattern in patterns)
