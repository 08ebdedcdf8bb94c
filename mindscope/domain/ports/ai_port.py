"""
AI provider port
Abstracts access to a chat-completion LLM API
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ChatMessage:
    """Chat message sent to the provider"""

    role: str  # "user" or "assistant"
    content: str


class IAIProvider(ABC):
    """
    AI provider interface

    Hides the concrete LLM API (Groq, OpenAI, ...) from the router.
    """

    @abstractmethod
    async def generate(
        self,
        message: str,
        system_prompt: str,
        max_tokens: int | None = None,
        temperature: float | None = None,
        conversation_history: list[ChatMessage] | None = None,
    ) -> str:
        """
        Generate a reply

        Args:
            message: current user turn
            system_prompt: system prompt
            max_tokens: output token budget (optional)
            temperature: sampling temperature (optional)
            conversation_history: prior turns, oldest first (optional)

        Returns:
            str: reply text

        Raises:
            ExternalServiceError: the provider failed or returned nothing usable
        """

    @abstractmethod
    async def health_check(self) -> bool:
        """Whether the provider answers"""

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Model identifier in use"""
