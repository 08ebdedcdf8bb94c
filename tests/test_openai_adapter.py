"""
OpenAI-compatible adapter tests
HTTP is mocked at aiohttp.ClientSession.post
"""

import pytest
from unittest.mock import AsyncMock, patch

import aiohttp

from mindscope.adapters.ai.openai import OpenAICompatibleAdapter
from mindscope.core.config import AISettings
from mindscope.core.exceptions import ConfigurationError, ExternalServiceError
from mindscope.domain.ports.ai_port import ChatMessage

API_KEY = "gsk_test_key_1234567890"


def completion(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class TestFromSettings:
    def test_configured(self):
        adapter = OpenAICompatibleAdapter.from_settings(
            AISettings(api_key=API_KEY, model="llama3-70b-8192", base_url="https://example.test/v1/")
        )

        assert adapter is not None
        assert adapter.model_name == "llama3-70b-8192"
        assert adapter.base_url == "https://example.test/v1"

    @pytest.mark.parametrize("api_key", ["", "your_groq_api_key_here", "short"])
    def test_not_configured(self, api_key):
        assert OpenAICompatibleAdapter.from_settings(AISettings(api_key=api_key)) is None

    def test_empty_key_is_rejected(self):
        with pytest.raises(ConfigurationError):
            OpenAICompatibleAdapter(api_key="")


class TestRequestBody:
    def setup_method(self):
        self.adapter = OpenAICompatibleAdapter(api_key=API_KEY)

    def test_message_order(self):
        body = self.adapter._build_request_body(
            "How do I calm down?",
            "system prompt",
            conversation_history=[
                ChatMessage(role="user", content="hi"),
                ChatMessage(role="assistant", content="hello"),
            ],
        )

        assert body["messages"] == [
            {"role": "system", "content": "system prompt"},
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": "hello"},
            {"role": "user", "content": "How do I calm down?"},
        ]
        assert body["model"] == "llama3-8b-8192"
        assert body["stream"] is False

    def test_defaults(self):
        body = self.adapter._build_request_body("hi", "system prompt")

        assert body["max_tokens"] == 1000
        assert body["temperature"] == 0.7

    def test_overrides(self):
        body = self.adapter._build_request_body("hi", "system prompt", max_tokens=150, temperature=0.0)

        assert body["max_tokens"] == 150
        # zero is a real temperature
        assert body["temperature"] == 0.0


class TestGenerate:
    def setup_method(self):
        self.adapter = OpenAICompatibleAdapter(api_key=API_KEY, base_url="https://example.test/v1")

    @pytest.mark.asyncio
    async def test_success(self):
        with patch('aiohttp.ClientSession.post') as mock_post:
            mock_response = AsyncMock()
            mock_response.status = 200
            mock_response.json.return_value = completion("I'm here for you.")
            mock_post.return_value.__aenter__.return_value = mock_response

            reply = await self.adapter.generate("I feel low", "system prompt")

            assert reply == "I'm here for you."

            args, kwargs = mock_post.call_args
            assert args[0] == "https://example.test/v1/chat/completions"
            assert kwargs["headers"]["Authorization"] == f"Bearer {API_KEY}"
            assert kwargs["json"]["messages"][-1] == {"role": "user", "content": "I feel low"}

    @pytest.mark.asyncio
    async def test_http_error(self):
        with patch('aiohttp.ClientSession.post') as mock_post:
            mock_response = AsyncMock()
            mock_response.status = 500
            mock_response.text.return_value = "Internal Server Error"
            mock_post.return_value.__aenter__.return_value = mock_response

            with pytest.raises(ExternalServiceError) as exc_info:
                await self.adapter.generate("I feel low", "system prompt")

            assert exc_info.value.details["status_code"] == 500
            assert exc_info.value.details["service_name"] == "llm"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("data", [
        {},
        {"choices": []},
        completion(""),
        completion("   "),
    ])
    async def test_unusable_response(self, data):
        with patch('aiohttp.ClientSession.post') as mock_post:
            mock_response = AsyncMock()
            mock_response.status = 200
            mock_response.json.return_value = data
            mock_post.return_value.__aenter__.return_value = mock_response

            with pytest.raises(ExternalServiceError):
                await self.adapter.generate("I feel low", "system prompt")

    @pytest.mark.asyncio
    async def test_transport_error_is_wrapped(self):
        with patch('aiohttp.ClientSession.post') as mock_post:
            mock_post.return_value.__aenter__.side_effect = aiohttp.ClientConnectionError("refused")

            with pytest.raises(ExternalServiceError) as exc_info:
                await self.adapter.generate("I feel low", "system prompt")

            assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)

    @pytest.mark.asyncio
    async def test_timeout_is_wrapped(self):
        with patch('aiohttp.ClientSession.post') as mock_post:
            mock_post.return_value.__aenter__.side_effect = TimeoutError()

            with pytest.raises(ExternalServiceError, match="timed out"):
                await self.adapter.generate("I feel low", "system prompt")


class TestHealthCheck:
    @pytest.mark.asyncio
    async def test_healthy(self):
        adapter = OpenAICompatibleAdapter(api_key=API_KEY)

        with patch('aiohttp.ClientSession.post') as mock_post:
            mock_response = AsyncMock()
            mock_response.status = 200
            mock_response.json.return_value = completion("OK")
            mock_post.return_value.__aenter__.return_value = mock_response

            assert await adapter.health_check() is True

    @pytest.mark.asyncio
    async def test_unhealthy(self):
        adapter = OpenAICompatibleAdapter(api_key=API_KEY)

        with patch('aiohttp.ClientSession.post') as mock_post:
            mock_response = AsyncMock()
            mock_response.status = 401
            mock_post.return_value.__aenter__.return_value = mock_response

            assert await adapter.health_check() is False
