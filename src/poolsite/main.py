from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.poolsite.api.middlewares import setup_middlewares
from src.poolsite.api.v1.router import api_router
from src.poolsite.core.config import get_settings
from src.poolsite.core.db import dispose_engine, run_migrations_async
from src.poolsite.core.exceptions import setup_exception_handlers
from src.poolsite.core.health import setup_health_endpoint, setup_metrics
from src.poolsite.core.logging import get_logger, setup_logging
from src.poolsite.core.rate_limit import limiter
from src.poolsite.core.shutdown import request_tracker

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    logger.info("Starting application", app_name=settings.app_name, env=settings.app_env)

    if settings.auto_migrate:
        await run_migrations_async()

    yield

    # Graceful shutdown with request draining
    await request_tracker.start_shutdown()
    drained = await request_tracker.wait_for_drain(timeout=settings.shutdown_grace_period)
    if not drained:
        logger.warning(
            "Requests still in flight at shutdown",
            in_flight=request_tracker.in_flight_count,
        )

    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "auth", "description": "Login, logout and password changes"},
    {"name": "projects", "description": "Pool construction projects and timeline updates"},
    {
        "name": "project documents",
        "description": "Specifications, images, documents, notes, milestones and issues",
    },
    {"name": "contacts", "description": "Contact form leads and follow-ups"},
    {"name": "admin", "description": "Dashboard statistics and user management"},
    {"name": "professional info", "description": "Bilingual content pages"},
    {"name": "content sections", "description": "Ordered sections of content pages"},
]


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.debug)

    app = FastAPI(
        title=settings.app_name,
        description="Content management API for a pool construction company",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        docs_url="/docs" if settings.enable_openapi else None,
        redoc_url="/redoc" if settings.enable_openapi else None,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )

    setup_exception_handlers(app)

    # Endpoint rate limits (login, contact form)
    app.state.limiter = limiter
    app.add_exception_handler(
        RateLimitExceeded, _rate_limit_exceeded_handler  # type: ignore[arg-type]
    )

    setup_middlewares(app, settings)

    app.include_router(api_router)
    setup_health_endpoint(app)
    setup_metrics(app)

    return app


app = create_app()
