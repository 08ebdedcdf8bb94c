"""
Message router
Routes one user message to an edge-case, casual, crisis, LLM or template response
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ...core.config import AISettings
from ...core.exceptions import ExternalServiceError, RoutingError
from ...core.logging import get_logger, log_business_event, log_error
from ...localization import Language
from ..models.classification import (
    ClassificationResult,
    ConversationType,
    CrisisAssessment,
    CrisisLevel,
    Emotion,
    LifeContext,
)
from ..models.conversation import ConversationMessage, Role
from ..models.response import TherapistResponse
from ..ports.ai_port import ChatMessage, IAIProvider
from .casual import CASUAL_SYSTEM_PROMPT
from .detection import ConversationTypeDetector, CrisisAssessor, EmotionDetector
from .edge_cases import EdgeCaseInterceptor
from .responses import (
    casual_response,
    crisis_response,
    edge_case_response,
    therapeutic_response,
)

logger = get_logger(__name__)

THERAPEUTIC_SYSTEM_PROMPT = """You are MindScope, a compassionate and professional AI wellness companion. Your role is to provide supportive, empathetic, and helpful responses to users seeking mental health guidance.

You work in two modes:
- Everyday conversation: when the user is simply chatting, answer naturally and briefly without forcing therapy into the exchange.
- Therapeutic support: when the user shares feelings or difficulties, respond as a supportive therapeutic presence.

Core Guidelines:
- Always respond with empathy and validation
- Use evidence-based therapeutic techniques (CBT, DBT, ACT, Mindfulness)
- Ask open-ended questions to encourage deeper reflection
- Provide practical coping strategies when appropriate
- Maintain professional boundaries while being warm and approachable
- If detecting crisis indicators, acknowledge the severity and suggest professional help
- Adapt your language to the user's communication style

Response Style:
- Be concise but thorough (2-4 sentences typically)
- Use "I" statements to show engagement ("I hear you saying...")
- Reflect emotions back to validate feelings
- Offer gentle reframes when helpful
- End with thoughtful questions when appropriate

Each user message starts with a bracketed tag such as [Context: work, Emotion: stress, Crisis Level: low]. Use it to inform your reply but never repeat it.

Remember: You are a supportive presence, not a replacement for professional therapy or crisis services."""


@dataclass(frozen=True)
class RouterStatus:
    """LLM configuration status"""

    configured: bool
    model: str
    fallback_mode: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "configured": self.configured,
            "model": self.model,
            "fallback_mode": self.fallback_mode,
        }


class MessageRouter:
    """
    Message router

    Pipeline:
    1. edge-case interception
    2. conversation type (casual / therapeutic / crisis)
    3. casual: LLM with a terse prompt, canned answers on failure
    4. emotion, context and crisis severity
    5. high / critical: fixed crisis template, never the LLM
    6. otherwise: LLM with the therapeutic prompt, template on failure

    The router keeps no per-call state; every call is independent.
    """

    def __init__(
        self,
        ai_provider: IAIProvider | None = None,
        settings: AISettings | None = None,
    ):
        self._ai_provider = ai_provider
        self._settings = settings or AISettings()

        self._edge_cases = EdgeCaseInterceptor()
        self._type_detector = ConversationTypeDetector()
        self._emotion_detector = EmotionDetector()
        self._crisis_assessor = CrisisAssessor()

        log_business_event(
            logger,
            "router_initialized",
            llm_configured=self.is_configured,
            model=self.model_name,
        )

    # === Status ===

    @property
    def is_configured(self) -> bool:
        return self._ai_provider is not None

    @property
    def model_name(self) -> str:
        if self._ai_provider is not None:
            return self._ai_provider.model_name
        return self._settings.model

    def status(self) -> RouterStatus:
        return RouterStatus(
            configured=self.is_configured,
            model=self.model_name,
            fallback_mode=not self.is_configured,
        )

    # === Classification ===

    def classify(self, message: str | None) -> ClassificationResult:
        """
        Classify a message without producing a response

        Casual messages and edge cases are always low severity. Messages
        that go through severity assessment are `crisis` exactly when the
        final level is high or critical.
        """
        return self._classify(message or "")[0]

    def _classify(self, message: str) -> tuple[ClassificationResult, CrisisAssessment | None]:
        edge_case = self._edge_cases.detect(message)
        if edge_case is not None:
            return ClassificationResult(
                conversation_type=ConversationType.CASUAL,
                edge_case=edge_case,
            ), None

        if self._type_detector.detect(message) is ConversationType.CASUAL:
            return ClassificationResult(conversation_type=ConversationType.CASUAL), None

        emotion, context = self._emotion_detector.detect(message)
        assessment = self._crisis_assessor.assess(message)

        result = ClassificationResult(
            conversation_type=(
                ConversationType.CRISIS if assessment.level.is_crisis
                else ConversationType.THERAPEUTIC
            ),
            emotion=emotion,
            context=context,
            crisis_level=assessment.level,
            authenticity=assessment.authenticity,
        )
        return result, assessment

    # === Routing ===

    async def route(
        self,
        message: str | None,
        history: Sequence[ConversationMessage] | None = None,
        language: Language | str | None = None,
    ) -> TherapistResponse:
        """
        Produce the response for one user turn

        Never raises: unexpected failures are logged and answered with the
        general template at low severity.

        Args:
            message: raw user text
            history: prior turns, oldest first (read only)
            language: language code for templates and hotline numbers
        """
        lang = Language.parse(language)
        try:
            return await self._route(message or "", history or (), lang)
        except Exception as e:
            error = RoutingError(
                f"Unexpected failure while routing a message: {e}",
                details={"cause": type(e).__name__},
            )
            error.__cause__ = e
            log_error(logger, error, {"stage": "route", "language": lang.value})
            return therapeutic_response(
                Emotion.GENERAL, LifeContext.GENERAL, CrisisLevel.LOW, lang
            )

    async def _route(
        self,
        message: str,
        history: Sequence[ConversationMessage],
        language: Language,
    ) -> TherapistResponse:
        result, assessment = self._classify(message)

        if result.edge_case is not None:
            log_business_event(logger, "edge_case_intercepted", kind=result.edge_case.value)
            return edge_case_response(result.edge_case, language)

        if result.conversation_type is ConversationType.CASUAL:
            return await self._casual(message, history, language)

        if assessment.level.is_crisis:
            log_business_event(
                logger,
                "crisis_detected",
                crisis_level=assessment.level.value,
                authenticity=assessment.authenticity,
                escalated=assessment.escalated,
            )
            return crisis_response(assessment, language)

        reply = None
        if self._ai_provider is not None:
            user_turn = (
                f"[Context: {result.context.value}, Emotion: {result.emotion.value}, "
                f"Crisis Level: {result.crisis_level.value}] {message}"
            )
            reply = await self._generate(
                user_turn,
                THERAPEUTIC_SYSTEM_PROMPT,
                history,
                self._settings.history_window,
                self._settings.max_tokens,
                self._settings.temperature,
            )

        return therapeutic_response(
            result.emotion,
            result.context,
            result.crisis_level,
            language,
            reply=reply,
            conversation_type=result.conversation_type,
        )

    async def _casual(
        self,
        message: str,
        history: Sequence[ConversationMessage],
        language: Language,
    ) -> TherapistResponse:
        reply = None
        if self._ai_provider is not None:
            reply = await self._generate(
                message,
                CASUAL_SYSTEM_PROMPT,
                history,
                self._settings.casual_history_window,
                self._settings.casual_max_tokens,
                self._settings.casual_temperature,
            )
        return casual_response(message, language, reply=reply)

    async def _generate(
        self,
        user_turn: str,
        system_prompt: str,
        history: Sequence[ConversationMessage],
        window: int,
        max_tokens: int,
        temperature: float,
    ) -> str | None:
        """Single LLM attempt; None on any provider failure"""
        try:
            reply = await self._ai_provider.generate(
                message=user_turn,
                system_prompt=system_prompt,
                max_tokens=max_tokens,
                temperature=temperature,
                conversation_history=self._history_window(history, window),
            )
        except ExternalServiceError as e:
            logger.warning(f"LLM unavailable, using templates: {e.message}", extra=e.details)
            return None
        except Exception as e:
            logger.warning(f"LLM call failed, using templates: {type(e).__name__}")
            return None

        if not reply or not reply.strip():
            logger.warning("LLM returned an empty reply, using templates")
            return None
        return reply.strip()

    @staticmethod
    def _history_window(history: Sequence[ConversationMessage], size: int) -> list[ChatMessage]:
        """Last `size` user/assistant turns as provider messages"""
        if size <= 0:
            return []
        turns = [m for m in history if m.role in (Role.USER, Role.ASSISTANT)]
        return [ChatMessage(role=m.role.value, content=m.content) for m in turns[-size:]]
