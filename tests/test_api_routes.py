"""
HTTP API tests
"""

import pytest
from fastapi.testclient import TestClient

from mindscope.api.auth import reset_rate_limiter
from mindscope.api.dependencies import reset_dependencies, set_ai_provider
from mindscope.api.main import API_VERSION, create_app
from mindscope.core.config import reload_settings
from mindscope.core.exceptions import ExternalServiceError
from mindscope.domain.ports.ai_port import IAIProvider


class MockAIProvider(IAIProvider):
    def __init__(self, reply: str = "I hear you.", healthy: bool = True):
        self.reply = reply
        self.healthy = healthy

    async def generate(self, message, system_prompt, max_tokens=None,
                       temperature=None, conversation_history=None) -> str:
        if not self.healthy:
            raise ExternalServiceError("down", service_name="llm")
        return self.reply

    async def health_check(self) -> bool:
        return self.healthy

    @property
    def model_name(self) -> str:
        return "mock-model"


def _reset():
    reload_settings()
    reset_dependencies()
    reset_rate_limiter()


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("GROQ_API_KEY", "MINDSCOPE_API_KEYS", "MINDSCOPE_RATE_LIMIT_REQUESTS"):
        monkeypatch.delenv(name, raising=False)
    _reset()
    yield monkeypatch
    monkeypatch.undo()
    _reset()


@pytest.fixture
def client(clean_env) -> TestClient:
    set_ai_provider(None)
    return TestClient(create_app())


class TestSystemEndpoints:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert "MindScope" in data["service"]
        assert data["version"] == API_VERSION

    def test_health_without_llm(self, client):
        response = client.get("/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["components"] == {"router": True, "ai_provider": True}

    def test_health_degraded(self, clean_env):
        set_ai_provider(MockAIProvider(healthy=False))
        client = TestClient(create_app())

        data = client.get("/v1/health").json()

        assert data["status"] == "degraded"
        assert data["components"]["ai_provider"] is False

    def test_status_fallback_mode(self, client):
        data = client.get("/v1/status").json()

        assert data["configured"] is False
        assert data["fallback_mode"] is True
        assert data["model"] == "llama3-8b-8192"

    def test_status_configured(self, clean_env):
        set_ai_provider(MockAIProvider())
        client = TestClient(create_app())

        data = client.get("/v1/status").json()

        assert data == {"configured": True, "model": "mock-model", "fallback_mode": False}

    def test_response_headers(self, client):
        response = client.get("/v1/status")

        assert response.headers["X-API-Version"] == API_VERSION
        assert "X-Request-ID" in response.headers


class TestChatEndpoint:
    def test_crisis_message(self, client):
        response = client.post("/v1/chat", json={
            "message": "I want to kill myself tonight, I already decided",
            "language": "en",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["is_crisis"] is True
        assert data["crisis_level"] == "critical"
        assert data["source"] == "crisis"
        assert data["therapeutic_technique"] == "crisis_intervention"
        assert "988" in data["message"]

    def test_hindi_crisis_message(self, client):
        data = client.post("/v1/chat", json={
            "message": "I want to end my life",
            "language": "hi",
        }).json()

        assert "9152987821" in data["message"]

    def test_empty_message_is_answered(self, client):
        response = client.post("/v1/chat", json={"message": ""})

        assert response.status_code == 200
        data = response.json()
        assert data["message"].startswith("I'm here and ready to listen")
        assert data["source"] == "edge_case"

    def test_template_reply_with_history(self, client):
        response = client.post("/v1/chat", json={
            "message": "I'm feeling really anxious about tomorrow",
            "conversation_history": [
                {"role": "user", "content": "hi", "timestamp": "2024-05-01T10:00:00"},
                {"role": "assistant", "content": "Hello! How are you feeling?"},
            ],
        })

        assert response.status_code == 200
        data = response.json()
        assert data["emotion"] == "calming"
        assert data["source"] == "template"
        assert data["conversation_type"] == "therapeutic"

    def test_llm_reply(self, clean_env):
        set_ai_provider(MockAIProvider(reply="That sounds stressful."))
        client = TestClient(create_app())

        data = client.post("/v1/chat", json={
            "message": "I'm stressed about my boss and the deadlines",
        }).json()

        assert data["message"] == "That sounds stressful."
        assert data["source"] == "llm"

    def test_message_too_long(self, client):
        response = client.post("/v1/chat", json={"message": "x" * 4001})
        assert response.status_code == 422

    def test_invalid_history_role(self, client):
        response = client.post("/v1/chat", json={
            "message": "hello",
            "conversation_history": [{"role": "robot", "content": "beep"}],
        })
        assert response.status_code == 422


class TestClassifyEndpoint:
    def test_nonsense(self, client):
        data = client.post("/v1/classify", json={"message": "lol"}).json()

        assert data["edge_case"] == "nonsense"
        assert data["conversation_type"] == "casual"

    def test_crisis(self, client):
        data = client.post("/v1/classify", json={
            "message": "I've been thinking about self-harm and it keeps coming back",
        }).json()

        assert data["conversation_type"] == "crisis"
        assert data["crisis_level"] == "high"
        assert data["authenticity"] == 5
        assert data["edge_case"] is None


class TestAuthentication:
    @pytest.fixture
    def secured_client(self, clean_env) -> TestClient:
        clean_env.setenv("MINDSCOPE_API_KEYS", "secret-key")
        reload_settings()
        set_ai_provider(None)
        return TestClient(create_app())

    def test_missing_key(self, secured_client):
        response = secured_client.post("/v1/classify", json={"message": "hello"})
        assert response.status_code == 401

    def test_invalid_key(self, secured_client):
        response = secured_client.post(
            "/v1/classify", json={"message": "hello"}, headers={"X-API-Key": "wrong"}
        )
        assert response.status_code == 403

    def test_valid_key(self, secured_client):
        response = secured_client.post(
            "/v1/classify", json={"message": "hello"}, headers={"X-API-Key": "secret-key"}
        )
        assert response.status_code == 200

    def test_health_needs_no_key(self, secured_client):
        assert secured_client.get("/v1/health").status_code == 200


class TestRateLimiting:
    def test_too_many_requests(self, clean_env):
        clean_env.setenv("MINDSCOPE_RATE_LIMIT_REQUESTS", "2")
        reload_settings()
        set_ai_provider(None)
        client = TestClient(create_app())

        statuses = [
            client.post("/v1/classify", json={"message": "hello"}).status_code
            for _ in range(3)
        ]

        assert statuses == [200, 200, 429]

    def test_health_is_exempt(self, clean_env):
        clean_env.setenv("MINDSCOPE_RATE_LIMIT_REQUESTS", "1")
        reload_settings()
        set_ai_provider(None)
        client = TestClient(create_app())

        statuses = [client.get("/v1/health").status_code for _ in range(3)]

        assert statuses == [200, 200, 200]

    def test_status_is_not_throttled(self, clean_env):
        clean_env.setenv("MINDSCOPE_RATE_LIMIT_REQUESTS", "1")
        reload_settings()
        set_ai_provider(None)
        client = TestClient(create_app())

        statuses = [client.get("/v1/status").status_code for _ in range(3)]

        assert statuses == [200, 200, 200]

    def test_chat_and_classify_share_a_window(self, clean_env):
        clean_env.setenv("MINDSCOPE_RATE_LIMIT_REQUESTS", "1")
        reload_settings()
        set_ai_provider(None)
        client = TestClient(create_app())

        first = client.post("/v1/chat", json={"message": "hello"})
        second = client.post("/v1/classify", json={"message": "hello"})

        assert first.status_code == 200
        assert first.headers["X-RateLimit-Limit"] == "1"
        assert first.headers["X-RateLimit-Remaining"] == "0"
        assert second.status_code == 429
        assert second.headers["Retry-After"] == "60"
        assert second.json()["error"] == "too_many_requests"


class TestAccessLog:
    def test_request_id_is_echoed(self, client):
        response = client.get("/v1/status", headers={"X-Request-ID": "req-42"})
        assert response.headers["X-Request-ID"] == "req-42"

    def test_health_is_not_logged(self, client):
        response = client.get("/v1/health")
        assert "X-Request-ID" not in response.headers
