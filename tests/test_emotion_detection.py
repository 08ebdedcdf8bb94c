"""
EmotionDetector tests

First matching family wins; unmatched text is `general`.
"""

import pytest

from mindscope.domain.models import Emotion, LifeContext
from mindscope.domain.services.detection import EmotionDetector
from mindscope.domain.services.keywords import count_hits, normalize


@pytest.fixture
def detector() -> EmotionDetector:
    return EmotionDetector()


class TestEmotion:
    @pytest.mark.parametrize("message,emotion", [
        ("I'm so anxious about the exam", Emotion.ANXIETY),
        ("I'm panicking right now", Emotion.ANXIETY),
        ("I feel so sad and empty", Emotion.DEPRESSION),
        ("I'm so happy today!", Emotion.HAPPINESS),
        ("My boss makes me furious", Emotion.ANGER),
        ("My grandmother passed away last week", Emotion.GRIEF),
        ("I'm stressed about the deadlines", Emotion.STRESS),
        ("I'm having flashbacks again", Emotion.TRAUMA),
        ("I don’t know what to do anymore", Emotion.CONFUSION),
        ("I feel so isolated", Emotion.LONELINESS),
        ("I can't wait for the concert", Emotion.EXCITEMENT),
        ("Everything is too much to handle", Emotion.OVERWHELMED),
        ("I feel guilty, it was my fault", Emotion.GUILT),
        ("I'm terrified of the dark", Emotion.FEAR),
        ("I have mixed feelings about moving", Emotion.MIXED),
        ("Tell me about the history of Rome", Emotion.GENERAL),
    ])
    def test_detect_emotion(self, detector, message, emotion):
        assert detector.detect_emotion(message) is emotion

    def test_earlier_family_wins(self, detector):
        assert detector.detect_emotion("I'm anxious and sad") is Emotion.ANXIETY

    def test_word_boundaries(self, detector):
        # "stressed" is not the anxiety keyword "stress"
        assert detector.detect_emotion("I'm stressed") is Emotion.STRESS
        # "madness" is not "mad"
        assert detector.detect_emotion("March madness starts soon") is Emotion.GENERAL


class TestContext:
    @pytest.mark.parametrize("message,context", [
        ("My boss keeps yelling at me", LifeContext.WORK),
        ("My girlfriend and I keep fighting", LifeContext.RELATIONSHIP),
        ("My parents don't understand me", LifeContext.FAMILY),
        ("I've been sick for weeks", LifeContext.HEALTH),
        ("I can't pay my rent", LifeContext.FINANCIAL),
        ("I'm worried about my exams", LifeContext.ACADEMIC),
        ("I never get invited to any party", LifeContext.SOCIAL),
        ("Tell me about the history of Rome", LifeContext.GENERAL),
    ])
    def test_detect_context(self, detector, message, context):
        assert detector.detect_context(message) is context

    def test_substring_does_not_match(self, detector):
        # "grandmother" is not "mother"
        assert detector.detect_context("My grandmother visited") is LifeContext.GENERAL

    def test_detect_returns_both(self, detector):
        assert detector.detect("I'm worried about money and rent") == (
            Emotion.ANXIETY,
            LifeContext.FINANCIAL,
        )


class TestKeywordMatching:
    def test_normalize_lowercases_and_straightens_apostrophes(self):
        assert normalize("I CAN’T Cope") == "i can't cope"

    def test_hits_count_distinct_keywords(self):
        assert count_hits(("sad", "tired"), "sad sad sad and tired") == 2

    def test_stem_keyword(self):
        assert count_hits(("deadline*",), "three deadlines this week") == 1
        assert count_hits(("deadline",), "three deadlines this week") == 0
