"""Application middlewares."""

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.poolsite.core.config import Settings
from src.poolsite.core.rate_limit import global_rate_limit_middleware

from .logging_context import logging_context_middleware
from .request_tracking import request_tracking_middleware
from .security_headers import SecurityHeadersMiddleware

__all__ = [
    "setup_middlewares",
    "SecurityHeadersMiddleware",
    "logging_context_middleware",
    "request_tracking_middleware",
    "global_rate_limit_middleware",
]


def setup_middlewares(app: FastAPI, settings: Settings) -> None:
    """Configure all application middlewares.

    Starlette runs the last added middleware first, so the list below goes
    from innermost to outermost.
    """
    # Global rate limiting - innermost, after logging context is bound
    @app.middleware("http")
    async def _global_rate_limit(request, call_next):  # type: ignore[no-untyped-def]
        return await global_rate_limit_middleware(request, call_next)

    # Request tracking - for graceful shutdown
    @app.middleware("http")
    async def _request_tracking(request, call_next):  # type: ignore[no-untyped-def]
        return await request_tracking_middleware(request, call_next)

    # Logging context - binds request_id to structlog context
    @app.middleware("http")
    async def _logging_context(request, call_next):  # type: ignore[no-untyped-def]
        return await logging_context_middleware(request, call_next)

    # Security headers (Helmet-style); strict CSP when Swagger UI is not served
    csp = None if settings.enable_openapi else SecurityHeadersMiddleware.PRODUCTION_CSP
    app.add_middleware(SecurityHeadersMiddleware, content_security_policy=csp)

    # CORS - the admin SPA sends the token cookie, so credentials are allowed
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # Correlation ID - generates/propagates X-Request-ID (outermost)
    app.add_middleware(CorrelationIdMiddleware)
