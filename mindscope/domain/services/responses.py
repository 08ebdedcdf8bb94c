"""
Response building
Affect tags, technique and suggestion lookups, and the template responses
for the edge-case, casual, crisis and fallback branches
"""

from ...localization import Language, get_translation
from ..models.classification import (
    ConversationType,
    CrisisAssessment,
    CrisisLevel,
    EdgeCaseKind,
    Emotion,
    LifeContext,
)
from ..models.response import ResponseSource, TherapistResponse
from .casual import CASUAL_FOLLOW_UPS, canned_answer

CRISIS_AFFECT = "concerned"
CRISIS_TECHNIQUE = "crisis_intervention"
DEFAULT_TECHNIQUE = "supportive_conversation"

# === Lookup tables ===

AFFECT_BY_EMOTION: dict[Emotion, str] = {
    Emotion.ANXIETY: "calming",
    Emotion.DEPRESSION: "compassionate",
    Emotion.HAPPINESS: "joyful",
    Emotion.ANGER: "understanding",
    Emotion.GRIEF: "gentle",
    Emotion.STRESS: "supportive",
    Emotion.TRAUMA: "gentle",
    Emotion.CONFUSION: "patient",
    Emotion.LONELINESS: "warm",
    Emotion.EXCITEMENT: "enthusiastic",
    Emotion.OVERWHELMED: "calming",
    Emotion.GUILT: "compassionate",
    Emotion.FEAR: "reassuring",
    Emotion.MIXED: "empathetic",
    Emotion.GENERAL: "empathetic",
}

TECHNIQUE_BY_EMOTION: dict[Emotion, str] = {
    Emotion.ANXIETY: "CBT_grounding_5_4_3_2_1",
    Emotion.DEPRESSION: "behavioral_activation_CBT",
    Emotion.ANGER: "DBT_emotion_regulation",
    Emotion.GRIEF: "grief_processing_therapy",
    Emotion.STRESS: "DBT_TIPP_technique",
    Emotion.TRAUMA: "grounding_stabilization",
    Emotion.OVERWHELMED: "DBT_TIPP_technique",
    Emotion.FEAR: "CBT_grounding_5_4_3_2_1",
    Emotion.GUILT: "self_compassion_practice",
    Emotion.LONELINESS: "behavioral_activation_CBT",
    Emotion.GENERAL: "person_centered_active_listening",
}

TECHNIQUE_BY_CONTEXT: dict[LifeContext, str] = {
    LifeContext.RELATIONSHIP: "DBT_interpersonal_effectiveness",
    LifeContext.WORK: "CBT_stress_management",
    LifeContext.FAMILY: "family_systems_approach",
}

SUGGESTIONS_BY_EMOTION: dict[Emotion, list[str]] = {
    Emotion.ANXIETY: [
        "Practice the 4-7-8 breathing technique (inhale 4, hold 7, exhale 8)",
        "Try progressive muscle relaxation starting with your toes",
        "Use the 5-4-3-2-1 grounding technique when anxiety peaks",
        'Challenge anxious thoughts: "Is this thought helpful or harmful?"',
        "Consider a guided meditation for anxiety relief",
    ],
    Emotion.DEPRESSION: [
        "Schedule one small pleasant activity today (behavioral activation)",
        "Practice three things you're grateful for (gratitude intervention)",
        "Take a 10-minute walk outside if possible (nature therapy)",
        "Reach out to one supportive person in your life",
        "Challenge negative self-talk with evidence-based thinking",
    ],
    Emotion.STRESS: [
        "Try the DBT TIPP technique when overwhelmed",
        "Practice paced breathing for 5 minutes",
        'Use the "wise mind" DBT skill to make decisions',
        "Create a priority list using the urgent/important matrix",
        "Set boundaries using assertiveness techniques",
    ],
    Emotion.ANGER: [
        "Use the DBT STOP skill (Stop, Take a breath, Observe, Proceed mindfully)",
        "Try opposite action - do something gentle when feeling angry",
        "Practice radical acceptance of things you cannot change",
        'Use "I" statements to express needs without blame',
        "Take a cooling-off period before responding",
    ],
    Emotion.GRIEF: [
        "Allow yourself to feel without judgment",
        "Create a memory ritual or keepsake",
        "Consider joining a grief support group",
        "Practice self-compassion during difficult moments",
        "Maintain routines while allowing for grief waves",
    ],
    Emotion.TRAUMA: [
        "Practice grounding techniques when triggered",
        "Use bilateral stimulation (butterfly hug or cross-lateral movements)",
        "Consider EMDR therapy with a qualified professional",
        "Create a safety plan for overwhelming moments",
        'Practice the "container" visualization for difficult memories',
    ],
    Emotion.LONELINESS: [
        "Send a short message to someone you haven't talked to in a while",
        "Look for a local group or online community around an interest",
        "Plan one small social activity this week",
        "Practice self-compassion when loneliness feels heavy",
    ],
    Emotion.OVERWHELMED: [
        "Write down everything on your mind, then pick just one thing",
        "Break the next task into the smallest possible step",
        "Try the DBT TIPP technique when overwhelmed",
        "Ask for help with one item on your list",
    ],
    Emotion.GUILT: [
        "Ask yourself what you would say to a friend in the same situation",
        "Separate what you did from who you are",
        "Consider whether there is a small step toward repair",
        "Practice a self-compassion break",
    ],
    Emotion.FEAR: [
        "Use the 5-4-3-2-1 grounding technique to return to the present",
        "Slow your breathing: breathe out longer than you breathe in",
        "Name the fear out loud or write it down",
        "Remind yourself where you are and that you are safe right now",
    ],
    Emotion.HAPPINESS: [
        "Take a moment to savor what is going well",
        "Write down what contributed to this good feeling",
        "Share the good news with someone you care about",
    ],
    Emotion.EXCITEMENT: [
        "Channel this energy into a first concrete step",
        "Share your excitement with someone close to you",
        "Note what you are looking forward to most",
    ],
    Emotion.CONFUSION: [
        "Write down the options you are weighing",
        "Talk the situation through with someone you trust",
        "Give yourself permission not to have every answer yet",
    ],
    Emotion.MIXED: [
        "Name each feeling separately, even the conflicting ones",
        "Journal about what each feeling is telling you",
        "Allow both feelings to exist without choosing one",
    ],
}

SUGGESTIONS_BY_CONTEXT: dict[LifeContext, list[str]] = {
    LifeContext.RELATIONSHIP: [
        "Use the DEARMAN skill for effective communication",
        "Practice validation of others' perspectives",
        "Set healthy boundaries using assertiveness",
        "Consider couples therapy for relationship issues",
        "Work on emotional regulation before difficult conversations",
    ],
}

GENERAL_SUGGESTIONS: list[str] = [
    "Continue to check in with your feelings throughout the day",
    "Practice mindfulness meditation for 5-10 minutes",
    "Consider journaling about your thoughts and emotions",
    "Engage in self-care activities that nurture you",
    "Consider professional therapy for ongoing support",
]

EDGE_CASE_FOLLOW_UPS: dict[EdgeCaseKind, list[str]] = {
    EdgeCaseKind.EMPTY: [
        "Share how you're feeling right now",
        "Tell me about your day",
        "Try a short breathing exercise",
    ],
    EdgeCaseKind.NONSENSE: [
        "Tell me how your day is going",
        "Share one word that describes your mood",
        "Ask me about coping techniques",
    ],
    EdgeCaseKind.PROMPT_INJECTION: [
        "Share what's on your mind",
        "Ask about stress or anxiety management",
        "Try a grounding exercise",
    ],
    EdgeCaseKind.HOSTILITY: [
        "Tell me what's frustrating you",
        "Try taking a few slow breaths",
        "Take a short break and come back anytime",
    ],
    EdgeCaseKind.MEDICAL_ADVICE: [
        "Talk to a doctor or psychiatrist about medication questions",
        "Write down your symptoms to share with a professional",
        "Share how you've been feeling emotionally",
    ],
    EdgeCaseKind.DATING_ADVICE: [
        "Share how your relationships make you feel",
        "Reflect on what you value in a connection",
        "Practice self-compassion around dating stress",
    ],
}

_CRISIS_FOLLOW_UP_KEYS = ("hotline", "trustedPerson", "emergencyRoom", "emergencyServices")


# === Lookups ===

def affect_tag(emotion: Emotion) -> str:
    return AFFECT_BY_EMOTION.get(emotion, "empathetic")


def select_technique(emotion: Emotion, context: LifeContext) -> str:
    """Technique by emotion, then context, then supportive conversation"""
    return (
        TECHNIQUE_BY_EMOTION.get(emotion)
        or TECHNIQUE_BY_CONTEXT.get(context)
        or DEFAULT_TECHNIQUE
    )


def select_suggestions(emotion: Emotion, context: LifeContext) -> list[str]:
    """Suggestions by emotion, then context, then general"""
    suggestions = (
        SUGGESTIONS_BY_EMOTION.get(emotion)
        or SUGGESTIONS_BY_CONTEXT.get(context)
        or GENERAL_SUGGESTIONS
    )
    return list(suggestions)


# === Responses ===

def edge_case_response(kind: EdgeCaseKind, language: Language | str | None = None) -> TherapistResponse:
    return TherapistResponse(
        message=get_translation(language, f"edgeCases.{kind.value}"),
        emotion="empathetic",
        crisis_level=CrisisLevel.LOW,
        follow_up_suggestions=list(EDGE_CASE_FOLLOW_UPS[kind]),
        therapeutic_technique=None,
        conversation_type=ConversationType.CASUAL,
        source=ResponseSource.EDGE_CASE,
    )


def casual_response(message: str, language: Language | str | None = None,
                    reply: str | None = None) -> TherapistResponse:
    """Casual response; canned text unless an LLM reply is supplied"""
    return TherapistResponse(
        message=reply if reply is not None else canned_answer(message, language),
        emotion="friendly",
        crisis_level=CrisisLevel.LOW,
        follow_up_suggestions=list(CASUAL_FOLLOW_UPS),
        therapeutic_technique=None,
        conversation_type=ConversationType.CASUAL,
        source=ResponseSource.CASUAL_LLM if reply is not None else ResponseSource.CASUAL_TEMPLATE,
    )


def crisis_message(assessment: CrisisAssessment, language: Language | str | None = None) -> str:
    """One of the four fixed crisis templates"""
    key = assessment.level.value
    if assessment.is_test_mode:
        key += "TestMode"
    return get_translation(language, f"crisisTemplates.{key}")


def crisis_response(assessment: CrisisAssessment, language: Language | str | None = None) -> TherapistResponse:
    return TherapistResponse(
        message=crisis_message(assessment, language),
        emotion=CRISIS_AFFECT,
        crisis_level=assessment.level,
        follow_up_suggestions=[
            get_translation(language, f"crisisFollowUps.{key}") for key in _CRISIS_FOLLOW_UP_KEYS
        ],
        therapeutic_technique=CRISIS_TECHNIQUE,
        conversation_type=ConversationType.CRISIS,
        source=ResponseSource.CRISIS,
    )


def therapeutic_response(emotion: Emotion, context: LifeContext, crisis_level: CrisisLevel,
                         language: Language | str | None = None,
                         reply: str | None = None,
                         conversation_type: ConversationType = ConversationType.THERAPEUTIC) -> TherapistResponse:
    """Therapeutic response; the per-emotion template unless an LLM reply is supplied"""
    if reply is None:
        message = get_translation(language, f"therapeuticResponses.{emotion.value}")
        source = ResponseSource.TEMPLATE
    else:
        message = reply
        source = ResponseSource.LLM

    return TherapistResponse(
        message=message,
        emotion=affect_tag(emotion),
        crisis_level=crisis_level,
        follow_up_suggestions=select_suggestions(emotion, context),
        therapeutic_technique=select_technique(emotion, context),
        conversation_type=conversation_type,
        source=source,
    )
