"""
API authentication and rate limiting tests
"""

from unittest.mock import MagicMock, patch

import pytest
from fastapi import HTTPException

from mindscope.api.auth import (
    DEVELOPMENT_KEY,
    MAX_TRACKED_CALLERS,
    SlidingWindowLimiter,
    caller_id,
    verify_api_key,
)
from mindscope.core.config import SecuritySettings


def make_request(host: str = "10.0.0.1", forwarded: str | None = None) -> MagicMock:
    request = MagicMock()
    request.headers = {"X-Forwarded-For": forwarded} if forwarded else {}
    request.client.host = host
    return request


class TestVerifyAPIKey:
    """API key verification"""

    @pytest.mark.asyncio
    async def test_development_mode_without_keys(self):
        """No keys configured means no authentication"""
        with patch("mindscope.api.auth.get_settings") as mock_settings:
            mock_settings.return_value.security.api_keys = []

            assert await verify_api_key(None) == DEVELOPMENT_KEY

    @pytest.mark.asyncio
    async def test_missing_key(self):
        with patch("mindscope.api.auth.get_settings") as mock_settings:
            mock_settings.return_value.security.api_keys = ["secret-key"]
            mock_settings.return_value.security.api_key_header = "X-API-Key"

            with pytest.raises(HTTPException) as exc_info:
                await verify_api_key(None)

            assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_key(self):
        with patch("mindscope.api.auth.get_settings") as mock_settings:
            mock_settings.return_value.security.api_keys = ["secret-key"]

            with pytest.raises(HTTPException) as exc_info:
                await verify_api_key("wrong-key")

            assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_valid_key(self):
        with patch("mindscope.api.auth.get_settings") as mock_settings:
            mock_settings.return_value.security.api_keys = ["secret-key", "other-key"]

            assert await verify_api_key("other-key") == "other-key"


class TestCallerId:
    def test_api_key_wins(self):
        assert caller_id(make_request(), api_key="key-a") == "key:key-a"

    def test_development_key_is_not_an_identity(self):
        assert caller_id(make_request(host="10.0.0.9"), api_key=DEVELOPMENT_KEY) == "ip:10.0.0.9"

    def test_forwarded_for_first_hop(self):
        request = make_request(forwarded="203.0.113.7, 10.0.0.1")
        assert caller_id(request) == "ip:203.0.113.7"

    def test_client_address(self):
        assert caller_id(make_request(host="10.0.0.2")) == "ip:10.0.0.2"


class TestSlidingWindowLimiter:
    """Per-caller sliding window"""

    def test_allows_up_to_limit(self):
        limiter = SlidingWindowLimiter(max_requests=3, window_seconds=60)

        results = [limiter.check("ip:10.0.0.1").allowed for _ in range(4)]

        assert results == [True, True, True, False]

    def test_decision_counts(self):
        limiter = SlidingWindowLimiter(max_requests=3, window_seconds=60)

        with patch("mindscope.api.auth.time.time", return_value=1000.0):
            decision = limiter.check("ip:10.0.0.1")

        assert decision.allowed
        assert decision.limit == 3
        assert decision.remaining == 2
        assert decision.reset_at == 1060
        assert decision.window == 60

    def test_rejection_headers(self):
        limiter = SlidingWindowLimiter(max_requests=1, window_seconds=30)
        limiter.check("ip:10.0.0.1")

        decision = limiter.check("ip:10.0.0.1")

        assert not decision.allowed
        assert decision.remaining == 0
        assert decision.headers()["Retry-After"] == "30"
        assert decision.headers()["X-RateLimit-Remaining"] == "0"

    def test_accepted_headers_have_no_retry_after(self):
        decision = SlidingWindowLimiter().check("ip:10.0.0.1")
        assert "Retry-After" not in decision.headers()

    def test_callers_are_counted_separately(self):
        limiter = SlidingWindowLimiter(max_requests=1, window_seconds=60)

        assert limiter.check("ip:10.0.0.1").allowed
        assert limiter.check("ip:10.0.0.2").allowed
        assert not limiter.check("ip:10.0.0.1").allowed

    def test_window_expiry(self):
        limiter = SlidingWindowLimiter(max_requests=1, window_seconds=60)

        with patch("mindscope.api.auth.time.time", return_value=1000.0):
            assert limiter.check("ip:10.0.0.1").allowed
            assert not limiter.check("ip:10.0.0.1").allowed

        with patch("mindscope.api.auth.time.time", return_value=1061.0):
            assert limiter.check("ip:10.0.0.1").allowed

    def test_idle_callers_are_forgotten_when_full(self):
        limiter = SlidingWindowLimiter(max_requests=1, window_seconds=60)

        with patch("mindscope.api.auth.time.time", return_value=1000.0):
            for i in range(MAX_TRACKED_CALLERS):
                limiter.check(f"ip:caller-{i}")
        assert limiter.tracked_callers == MAX_TRACKED_CALLERS

        with patch("mindscope.api.auth.time.time", return_value=1100.0):
            assert limiter.check("ip:newcomer").allowed

        assert limiter.tracked_callers == 1

    def test_from_settings(self):
        limiter = SlidingWindowLimiter.from_settings(
            SecuritySettings(rate_limit_requests=5, rate_limit_window=10)
        )

        assert limiter.max_requests == 5
        assert limiter.window_seconds == 10
