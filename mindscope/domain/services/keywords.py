"""
Keyword tables

Single data-driven source for the emotion, context and crisis detectors.

Matching rules:
- text is lowercased and curly apostrophes are normalised
- keywords match on word boundaries on both sides
- a trailing `*` marks a stem ("panic*" matches "panic", "panicking")
- a hit count is the number of distinct keywords found
"""

import re
from dataclasses import dataclass
from functools import lru_cache

from ..models.classification import CrisisLevel, Emotion, LifeContext


def normalize(text: str) -> str:
    """Lowercase and straighten apostrophes"""
    return text.lower().replace("’", "'").replace("‘", "'")


@lru_cache(maxsize=None)
def _compile(keyword: str) -> re.Pattern:
    if keyword.endswith("*"):
        return re.compile(r"\b" + re.escape(keyword[:-1]) + r"\w*\b")
    return re.compile(r"\b" + re.escape(keyword) + r"\b")


def count_hits(keywords: tuple[str, ...], text: str) -> int:
    """Number of distinct keywords present in already-normalised text"""
    return sum(1 for keyword in keywords if _compile(keyword).search(text))


def contains_any(keywords: tuple[str, ...], text: str) -> bool:
    return any(_compile(keyword).search(text) for keyword in keywords)


@dataclass(frozen=True)
class KeywordFamily:
    """Primary trigger words plus authenticity and test markers"""

    primary: tuple[str, ...]
    authentic: tuple[str, ...] = ()
    test: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        return contains_any(self.primary, text)


# === Emotion (first match wins, in this order) ===

EMOTION_FAMILIES: tuple[tuple[Emotion, KeywordFamily], ...] = (
    (Emotion.ANXIETY, KeywordFamily((
        "anxious", "anxiety", "worried", "nervous", "panic*", "fear", "overwhelmed", "stress",
    ))),
    (Emotion.DEPRESSION, KeywordFamily((
        "sad", "depressed", "depression", "hopeless", "empty", "numb", "worthless", "tired",
    ))),
    (Emotion.HAPPINESS, KeywordFamily((
        "happy", "great", "awesome", "fantastic", "wonderful", "excited", "amazing",
    ))),
    (Emotion.ANGER, KeywordFamily((
        "angry", "mad", "furious", "frustrated", "irritated", "rage", "annoyed",
    ))),
    (Emotion.GRIEF, KeywordFamily((
        "loss", "death", "died", "grief", "grieving", "mourning", "miss", "goodbye", "passed away",
    ))),
    (Emotion.STRESS, KeywordFamily((
        "stressed", "pressure", "overwhelming", "busy", "deadline*", "exhausted",
    ))),
    (Emotion.TRAUMA, KeywordFamily((
        "trauma*", "abuse*", "ptsd", "flashback*", "triggered", "nightmare*", "assault*",
    ))),
    (Emotion.CONFUSION, KeywordFamily((
        "confused", "confusing", "unsure", "uncertain", "lost",
        "don't know what to do", "don't understand",
    ))),
    (Emotion.LONELINESS, KeywordFamily((
        "lonely", "loneliness", "alone", "isolated", "no friends", "nobody cares", "left out",
    ))),
    (Emotion.EXCITEMENT, KeywordFamily((
        "thrilled", "can't wait", "pumped", "looking forward", "stoked",
    ))),
    (Emotion.OVERWHELMED, KeywordFamily((
        "too much to handle", "can't cope", "swamped", "overloaded", "drowning in", "falling apart",
    ))),
    (Emotion.GUILT, KeywordFamily((
        "guilty", "guilt", "ashamed", "shame", "my fault", "regret*", "blame myself",
    ))),
    (Emotion.FEAR, KeywordFamily((
        "afraid", "scared", "terrified", "frightened", "fearful",
    ))),
    (Emotion.MIXED, KeywordFamily((
        "mixed feelings", "conflicted", "torn", "bittersweet", "don't know how i feel",
    ))),
)


# === Life context (first match wins, in this order) ===

CONTEXT_KEYWORDS: tuple[tuple[LifeContext, tuple[str, ...]], ...] = (
    (LifeContext.WORK, (
        "work", "working", "job", "boss", "colleague*", "office", "career", "workplace", "meeting*",
    )),
    (LifeContext.RELATIONSHIP, (
        "relationship*", "partner", "boyfriend", "girlfriend", "spouse", "dating", "marriage",
        "husband", "wife",
    )),
    (LifeContext.FAMILY, (
        "family", "parents", "mother", "father", "sibling*", "children", "relatives", "mom", "dad",
    )),
    (LifeContext.HEALTH, (
        "health", "sick", "illness", "doctor", "medical", "pain", "symptom*", "hospital",
    )),
    (LifeContext.FINANCIAL, (
        "money", "financial", "debt", "bills", "income", "job loss", "expenses", "rent",
    )),
    (LifeContext.ACADEMIC, (
        "school", "college", "university", "exam*", "test", "grades", "homework", "study",
        "studying",
    )),
    (LifeContext.SOCIAL, (
        "friends", "social", "party", "alone", "lonely", "isolated", "people",
    )),
)


# === Crisis severity (highest tier first) ===

CRISIS_FAMILIES: tuple[tuple[CrisisLevel, KeywordFamily], ...] = (
    (CrisisLevel.CRITICAL, KeywordFamily(
        primary=(
            "suicide", "kill myself", "end my life", "want to die", "hurt myself", "have pills",
            "loaded gun", "take my own life", "end it all",
        ),
        authentic=(
            "plan to", "going to", "can't take it", "no other way", "already decided",
            "final decision",
        ),
        test=(
            "hypothetically", "what if someone", "just testing", "asking for a friend",
            "not really going to",
        ),
    )),
    (CrisisLevel.HIGH, KeywordFamily(
        primary=(
            "self-harm", "self harm", "cutting", "suicidal thoughts", "thoughts of death",
            "not worth living", "better off dead",
        ),
        authentic=(
            "been thinking about", "keeps coming back", "can't stop thinking",
            "feels like the only way",
        ),
        test=("curious about", "reading about", "heard someone"),
    )),
    (CrisisLevel.MEDIUM, KeywordFamily(
        primary=(
            "hopeless", "can't go on", "everything is pointless", "no way out", "trapped",
            "overwhelming",
        ),
        authentic=("every day", "for weeks", "getting worse", "can't escape", "drowning"),
        test=("sometimes feel", "little hopeless", "not too bad"),
    )),
    (CrisisLevel.LOW, KeywordFamily(
        primary=("sad", "tired", "difficult", "struggling", "hard time"),
        authentic=("every single day", "for months", "can't remember when", "used to be different"),
        test=("bit sad", "just tired", "having an okay day"),
    )),
)

# Escalate low/medium to high
SUBSTANCE_KEYWORDS: tuple[str, ...] = (
    "overdose", "too many pills", "drinking and driving", "mixing alcohol", "can't stop using",
)
VIOLENCE_KEYWORDS: tuple[str, ...] = (
    "hurt someone else", "want to kill", "make them pay", "losing control", "violent thoughts",
)

# Force low regardless of tier
GLOBAL_TEST_INDICATORS: tuple[str, ...] = (
    "just testing", "hypothetically", "asking for a friend", "what would you do if",
)

TEMPORAL_MARKERS: tuple[str, ...] = ("tonight", "today", "now")
INTENSIFIERS: tuple[str, ...] = ("really", "very")
