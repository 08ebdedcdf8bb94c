"""
Response middleware: API version header and access log
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from ..core.logging import get_logger

API_VERSION = "1.0.0"

# No access log for health checks and docs
QUIET_PATHS = frozenset({"/v1/health", "/docs", "/redoc", "/openapi.json"})

access_logger = get_logger("api.access")


class APIVersionMiddleware(BaseHTTPMiddleware):
    """Add the API version to every response"""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        response.headers["X-API-Version"] = API_VERSION
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """
    One structured record per request

    Request bodies carry user messages and are never logged. The caller's
    X-Request-ID is reused when present and echoed on the response.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:16]
        fields = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
        }
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            access_logger.exception(
                f"{request.method} {request.url.path} failed",
                extra={"event_type": "request_error", **fields, "duration_ms": _elapsed_ms(started)},
            )
            raise

        access_logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "event_type": "request_complete",
                **fields,
                "status_code": response.status_code,
                "duration_ms": _elapsed_ms(started),
            },
        )
        response.headers["X-Request-ID"] = request_id
        return response
