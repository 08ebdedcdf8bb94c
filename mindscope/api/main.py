"""
MindScope API - main application
"""

from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..core.config import get_settings
from ..core.logging import MindScopeLogger, get_logger
from .auth import RateLimitMiddleware
from .dependencies import get_ai_provider
from .middleware import API_VERSION, AccessLogMiddleware, APIVersionMiddleware
from .routes import chat_router, classify_router, status_router
from .schemas import APIInfoResponse, HealthResponse

logger = get_logger("api.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    logger.info(f"MindScope API v{API_VERSION} starting...")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"LLM configured: {settings.ai.is_configured} (model {settings.ai.model})")
    logger.info(f"Rate limiting: {settings.security.rate_limit_enabled}")
    logger.info(f"API keys configured: {len(settings.security.api_keys)} key(s)")

    if not settings.security.api_keys:
        logger.warning("No API keys configured - running in development mode (no auth)")
    if not settings.ai.is_configured:
        logger.warning("No LLM API key configured - responses come from templates")

    yield

    logger.info("MindScope API shutting down...")


def create_app() -> FastAPI:
    """Create the FastAPI application"""
    settings = get_settings()
    MindScopeLogger.configure(settings.log_level)

    application = FastAPI(
        title="MindScope API",
        description=(
            "Conversational response engine for a mental-health companion\n\n"
            "**Pipeline:**\n"
            "- edge-case interception\n"
            "- casual / therapeutic / crisis detection\n"
            "- crisis severity scoring with fixed crisis protocols\n"
            "- LLM replies with template fallback\n"
        ),
        version=API_VERSION,
        lifespan=lifespan,
    )

    # executed bottom to top
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    application.add_middleware(RateLimitMiddleware)
    application.add_middleware(AccessLogMiddleware)
    application.add_middleware(APIVersionMiddleware)

    application.include_router(chat_router)
    application.include_router(classify_router)
    application.include_router(status_router)

    @application.get("/", response_model=APIInfoResponse)
    async def root() -> APIInfoResponse:
        return APIInfoResponse(
            service="MindScope - conversational wellness API",
            version=API_VERSION,
            description="Routes user messages to crisis protocols, LLM replies or templates",
            features=[
                "Edge-case interception",
                "Conversation type detection",
                "Emotion and life-context detection",
                "Crisis severity assessment",
                "Localized crisis resources",
                "LLM replies with template fallback",
            ],
        )

    @application.get("/v1/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """
        Health check

        The service stays healthy without an LLM (template mode); a
        configured provider that does not answer makes it degraded.
        """
        components = {"router": True, "ai_provider": True}

        ai = get_ai_provider()
        if ai is not None:
            components["ai_provider"] = await ai.health_check()

        status = "healthy" if all(components.values()) else "degraded"

        return HealthResponse(
            status=status,
            timestamp=datetime.now(),
            version=API_VERSION,
            components=components,
        )

    return application
