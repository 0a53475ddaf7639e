"""
Senior Care Assistant - Backend
FastAPI relay between the senior care front-end and the Anthropic API.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from anthropic import AsyncAnthropic
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from senior_care.api.endpoints import frontend
from senior_care.api.routers import api_router
from senior_care.config.logging import configure_logging
from senior_care.config.settings import Settings, get_settings
from senior_care.controllers.chat_controller import build_anthropic_client
from senior_care.middleware.body_limit import BodySizeLimitMiddleware
from senior_care.middleware.error_handling import ErrorHandlingMiddleware, register_exception_handlers
from senior_care.middleware.rate_limiting import RateLimitMiddleware
from senior_care.middleware.request_logging import RequestLoggingMiddleware
from senior_care.middleware.security_headers import SecurityHeadersMiddleware
from senior_care.utils.rate_limiter import SlidingWindowRateLimiter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Senior Care Assistant server running on port {settings.port}")
    logger.info(f"Frontend available at: http://localhost:{settings.port}")
    logger.info(f"API available at: http://localhost:{settings.port}/api")

    if not settings.anthropic_api_key:
        logger.warning("ANTHROPIC_API_KEY not found in environment variables")
    else:
        logger.info("Claude API key configured")

    yield

    # Shutdown
    logger.info("Shutting down gracefully")
    if app.state.owns_anthropic_client and app.state.anthropic_client is not None:
        await app.state.anthropic_client.close()


def create_app(
    settings: Optional[Settings] = None,
    anthropic_client: Optional[AsyncAnthropic] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        settings: Configuration; read from the environment when omitted
        anthropic_client: Upstream client to use instead of building one from settings
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Chat relay for the senior care assistant front-end",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.state.settings = settings
    app.state.owns_anthropic_client = anthropic_client is None
    app.state.anthropic_client = anthropic_client or build_anthropic_client(settings)
    app.state.rate_limiter = SlidingWindowRateLimiter(
        max_requests=settings.rate_limit_max_requests,
        window_seconds=settings.rate_limit_window_seconds,
    )

    register_exception_handlers(app)

    # Middleware added last runs first
    app.add_middleware(ErrorHandlingMiddleware, expose_details=settings.is_development)
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_body_bytes)
    app.add_middleware(
        RateLimitMiddleware,
        limiter=app.state.rate_limiter,
        message=settings.rate_limit_message,
        path_prefix="/api",
        trust_proxy_headers=settings.trust_proxy_headers,
    )
    if settings.enable_request_logging:
        app.add_middleware(
            RequestLoggingMiddleware, trust_proxy_headers=settings.trust_proxy_headers
        )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_origin_regex=settings.allowed_origin_regex,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)

    # Include API router
    app.include_router(api_router, prefix="/api")

    # Catch-all front-end route must come after the API routes
    app.include_router(frontend.router)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
    )
