"""
OpenAI-compatible AI adapter
Chat completions over aiohttp (Groq by default)
"""

from typing import Any

import aiohttp

from ...core.config import AISettings
from ...core.exceptions import ConfigurationError, ExternalServiceError
from ...domain.ports.ai_port import ChatMessage, IAIProvider

SERVICE_NAME = "llm"


class OpenAICompatibleAdapter(IAIProvider):
    """
    OpenAI-compatible AI adapter

    Talks to any `/chat/completions` endpoint that follows the OpenAI
    schema. One attempt per call; failures raise ExternalServiceError.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "llama3-8b-8192",
        timeout: int = 30,
        base_url: str = "https://api.groq.com/openai/v1",
        max_tokens: int = 1000,
        temperature: float = 0.7,
    ):
        if not api_key:
            raise ConfigurationError("An API key is required for the LLM adapter")

        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")
        self.max_tokens = max_tokens
        self.temperature = temperature

    @classmethod
    def from_settings(cls, settings: AISettings) -> "OpenAICompatibleAdapter | None":
        """Adapter for the configured provider, None without a usable API key"""
        if not settings.is_configured:
            return None
        return cls(
            api_key=settings.api_key,
            model=settings.model,
            timeout=settings.timeout,
            base_url=settings.base_url,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
        )

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

        Raises:
            ExternalServiceError: HTTP error, transport failure or unusable response
        """
        request_body = self._build_request_body(
            message, system_prompt, max_tokens, temperature, conversation_history
        )
        try:
            return await self._call_api(request_body)
        except (aiohttp.ClientError, ValueError) as e:
            raise ExternalServiceError(
                f"LLM request failed: {type(e).__name__}", service_name=SERVICE_NAME
            ) from e
        except TimeoutError as e:
            raise ExternalServiceError(
                f"LLM request timed out after {self.timeout}s", service_name=SERVICE_NAME
            ) from e

    def _build_request_body(
        self,
        message: str,
        system_prompt: str,
        max_tokens: int | None = None,
        temperature: float | None = None,
        conversation_history: list[ChatMessage] | None = None,
    ) -> dict[str, Any]:
        messages = [{"role": "system", "content": system_prompt}]

        if conversation_history:
            for msg in conversation_history:
                messages.append({"role": msg.role, "content": msg.content})

        messages.append({"role": "user", "content": message})

        return {
            "model": self.model,
            "messages": messages,
            "max_tokens": max_tokens or self.max_tokens,
            "temperature": self.temperature if temperature is None else temperature,
            "stream": False,
        }

    async def _call_api(self, request_body: dict[str, Any]) -> str:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        timeout = aiohttp.ClientTimeout(total=self.timeout)

        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(
                f"{self.base_url}/chat/completions",
                headers=headers,
                json=request_body,
            ) as response:
                if response.status != 200:
                    error_text = await response.text()
                    raise ExternalServiceError(
                        f"LLM API error: HTTP {response.status} - {error_text[:200]}",
                        service_name=SERVICE_NAME,
                        status_code=response.status,
                    )

                response_data = await response.json()
                return self._extract_text(response_data)

    @staticmethod
    def _extract_text(response_data: dict[str, Any]) -> str:
        """First choice text of a chat completion"""
        choices = response_data.get("choices")
        if not choices:
            raise ExternalServiceError("No choices in LLM response", service_name=SERVICE_NAME)

        content = (choices[0].get("message") or {}).get("content")
        if not content or not content.strip():
            raise ExternalServiceError("Empty response from LLM API", service_name=SERVICE_NAME)

        return content

    async def health_check(self) -> bool:
        """Whether the endpoint answers a trivial prompt"""
        try:
            response = await self.generate(
                message="Hello",
                system_prompt="Reply with 'OK' only.",
                max_tokens=10,
            )
            return len(response) > 0
        except ExternalServiceError:
            return False

    @property
    def model_name(self) -> str:
        return self.model
