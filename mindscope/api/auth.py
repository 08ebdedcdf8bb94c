"""
Access control for the HTTP API

API keys come from MINDSCOPE_API_KEYS; with none configured the API is
open. The routing endpoints are throttled per caller over a sliding
window sized by MINDSCOPE_RATE_LIMIT_REQUESTS / MINDSCOPE_RATE_LIMIT_WINDOW.
"""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass

from fastapi import HTTPException, Request, Security
from fastapi.security import APIKeyHeader
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import JSONResponse, Response

from ..core.config import SecuritySettings, get_settings
from ..core.logging import get_logger

logger = get_logger("api.auth")

DEVELOPMENT_KEY = "development-mode"

# Endpoints that run the message router
THROTTLED_PATHS = frozenset({"/v1/chat", "/v1/classify"})

# Idle callers are forgotten once this many are tracked
MAX_TRACKED_CALLERS = 10000

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(api_key: str | None = Security(api_key_header)) -> str:
    """
    Accepted API key, or DEVELOPMENT_KEY when no keys are configured

    Raises:
        HTTPException: 401 when the key is missing, 403 when it is not accepted
    """
    security = get_settings().security
    accepted = security.api_keys

    if not accepted:
        return DEVELOPMENT_KEY
    if not api_key:
        raise HTTPException(status_code=401, detail={
            "error": "unauthorized",
            "message": "An API key is required",
            "header": security.api_key_header,
        })
    if api_key not in accepted:
        raise HTTPException(status_code=403, detail={
            "error": "forbidden",
            "message": "Invalid API key",
        })
    return api_key


def caller_id(request: Request, api_key: str | None = None) -> str:
    """Throttling identity: the API key when one is sent, else the client address"""
    if api_key and api_key != DEVELOPMENT_KEY:
        return f"key:{api_key}"

    # first hop of a proxy chain
    address = request.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    if not address and request.client:
        address = request.client.host
    return f"ip:{address or 'unknown'}"


@dataclass(frozen=True)
class QuotaDecision:
    """Outcome of one throttling check"""
    allowed: bool
    limit: int
    remaining: int
    reset_at: int
    window: int

    def headers(self) -> dict[str, str]:
        headers = {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": str(self.reset_at),
        }
        if not self.allowed:
            headers["Retry-After"] = str(self.window)
        return headers


class SlidingWindowLimiter:
    """In-memory request timestamps per caller over the last `window_seconds`"""

    def __init__(self, max_requests: int = 60, window_seconds: int = 60):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._hits: dict[str, deque[float]] = {}

    @classmethod
    def from_settings(cls, security: SecuritySettings) -> SlidingWindowLimiter:
        return cls(
            max_requests=security.rate_limit_requests,
            window_seconds=security.rate_limit_window,
        )

    @property
    def tracked_callers(self) -> int:
        return len(self._hits)

    def check(self, caller: str) -> QuotaDecision:
        """Count one request for `caller` if the window still has room"""
        now = time.time()
        cutoff = now - self.window_seconds

        if caller not in self._hits and len(self._hits) >= MAX_TRACKED_CALLERS:
            self._forget_idle(cutoff)

        hits = self._hits.setdefault(caller, deque())
        while hits and hits[0] <= cutoff:
            hits.popleft()

        allowed = len(hits) < self.max_requests
        if allowed:
            hits.append(now)

        oldest = hits[0] if hits else now
        return QuotaDecision(
            allowed=allowed,
            limit=self.max_requests,
            remaining=max(0, self.max_requests - len(hits)),
            reset_at=int(oldest + self.window_seconds),
            window=self.window_seconds,
        )

    def _forget_idle(self, cutoff: float) -> None:
        self._hits = {
            caller: hits for caller, hits in self._hits.items()
            if hits and hits[-1] > cutoff
        }


_limiter: SlidingWindowLimiter | None = None


def get_rate_limiter() -> SlidingWindowLimiter:
    global _limiter
    if _limiter is None:
        _limiter = SlidingWindowLimiter.from_settings(get_settings().security)
    return _limiter


def reset_rate_limiter() -> None:
    """Forget all callers and re-read the limits on next use"""
    global _limiter
    _limiter = None


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Throttle chat and classify; 429 once a caller's window is full"""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        security = get_settings().security
        if not security.rate_limit_enabled or request.url.path not in THROTTLED_PATHS:
            return await call_next(request)

        caller = caller_id(request, request.headers.get(security.api_key_header))
        decision = get_rate_limiter().check(caller)

        if not decision.allowed:
            logger.warning(
                "Rate limit exceeded",
                extra={
                    "event_type": "rate_limited",
                    "path": request.url.path,
                    "limit": decision.limit,
                    "window": decision.window,
                },
            )
            return JSONResponse(
                status_code=429,
                content={
                    "error": "too_many_requests",
                    "message": "Too many requests. Please wait a moment and try again.",
                    "retry_after": decision.window,
                },
                headers=decision.headers(),
            )

        response = await call_next(request)
        response.headers.update(decision.headers())
        return response
