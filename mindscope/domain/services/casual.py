"""
Casual conversation
Topic patterns for light messages and the canned answers used without an LLM
"""

import re
from enum import Enum

from ...localization import Language, get_translation
from .keywords import normalize


class CasualTopic(Enum):
    WEATHER = "weather"
    TIME = "time"
    GREETING = "greeting"
    THANKS = "thanks"
    SMALL_TALK = "small_talk"
    FACT = "fact"


# First match wins
CASUAL_PATTERNS: tuple[tuple[CasualTopic, tuple[re.Pattern, ...]], ...] = (
    (CasualTopic.WEATHER, (
        re.compile(r"\bweather\b"),
        re.compile(r"\b(forecast|temperature outside)\b"),
        re.compile(r"\b(is it|will it) (going to )?(rain|snow|be sunny|be hot|be cold)\b"),
    )),
    (CasualTopic.TIME, (
        re.compile(r"\bwhat time\b"),
        re.compile(r"\bwhat('s| is) the (time|date)\b"),
        re.compile(r"\bwhat day is (it|today)\b"),
        re.compile(r"\btoday'?s date\b"),
    )),
    (CasualTopic.GREETING, (
        re.compile(r"^(hi|hello|hey|hiya|howdy|yo|greetings)\b"),
        re.compile(r"^good (morning|afternoon|evening|day)\b"),
    )),
    (CasualTopic.THANKS, (
        re.compile(r"\b(thanks|thank you|thx|ty|cheers)\b"),
    )),
    (CasualTopic.SMALL_TALK, (
        re.compile(r"\bhow are you\b"),
        re.compile(r"\bhow('s| is) it going\b"),
        re.compile(r"\bwhat('s| is) up\b"),
        re.compile(r"\bwho are you\b"),
        re.compile(r"\bwhat('s| is) your name\b"),
        re.compile(r"\bwhat can you do\b"),
    )),
    (CasualTopic.FACT, (
        re.compile(r"\bcapital of\b"),
        re.compile(r"\bhow (many|much|far|old|tall|big|long)\b"),
        re.compile(r"^(what|who|where|when|which)('s| is| are| was| were| did)\b"),
        re.compile(r"\b(tell me a joke|fun fact|random fact)\b"),
        re.compile(r"\b(define|meaning of|translate)\b"),
    )),
)

CASUAL_SYSTEM_PROMPT = (
    "You are MindScope, a friendly wellness companion answering a light, everyday message. "
    "Reply in one to three short sentences. Be accurate and plain; if you cannot know "
    "something live (weather, current time, news), say so briefly and suggest where to look. "
    "Do not offer therapy, diagnoses or coping techniques unless the user asks for them."
)

CASUAL_FOLLOW_UPS: tuple[str, ...] = (
    "Share how your day is going",
    "Tell me if anything is on your mind",
    "Try a quick breathing exercise",
)


def match_casual_topic(message: str) -> CasualTopic | None:
    """Topic of a casual message, None when no casual pattern matches"""
    text = normalize(message.strip())
    for topic, patterns in CASUAL_PATTERNS:
        if any(pattern.search(text) for pattern in patterns):
            return topic
    return None


def canned_answer(message: str, language: Language | str | None = None) -> str:
    """Canned casual reply for the message's topic, a neutral one when none matches"""
    topic = match_casual_topic(message)
    key = topic.value if topic is not None else "default"
    return get_translation(language, f"casual.{key}")
