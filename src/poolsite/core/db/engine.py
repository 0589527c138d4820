"""Database engine management."""

import ssl
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from src.poolsite.core.config import get_settings

_engine: AsyncEngine | None = None


def _is_sqlite(database_url: str) -> bool:
    return database_url.startswith("sqlite")


def _get_connect_args(database_url: str) -> dict[str, Any]:
    """Get connection arguments including SSL configuration."""
    if _is_sqlite(database_url):
        return {"check_same_thread": False}

    settings = get_settings()
    connect_args: dict[str, Any] = {}

    ssl_mode = settings.database_ssl_mode
    if ssl_mode != "disable":
        ssl_context = ssl.create_default_context()
        if ssl_mode == "prefer" or ssl_mode == "require":
            ssl_context.check_hostname = False
            ssl_context.verify_mode = ssl.CERT_NONE
        elif ssl_mode in ("verify-ca", "verify-full"):
            ssl_context.check_hostname = ssl_mode == "verify-full"
            ssl_context.verify_mode = ssl.CERT_REQUIRED
        connect_args["ssl"] = ssl_context

    return connect_args


def create_engine_for_url(database_url: str) -> AsyncEngine:
    """Build an async engine with pool settings suited to the backend.

    SQLite (local development and tests) shares a single connection so an
    in-memory database survives across sessions.
    """
    if _is_sqlite(database_url):
        return create_async_engine(
            database_url,
            poolclass=StaticPool,
            connect_args=_get_connect_args(database_url),
        )

    settings = get_settings()
    return create_async_engine(
        database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_pre_ping=True,
        connect_args=_get_connect_args(database_url),
    )


def get_engine() -> AsyncEngine:
    """Get or create the database engine singleton."""
    global _engine
    if _engine is None:
        _engine = create_engine_for_url(get_settings().database_url)
    return _engine


async def dispose_engine() -> None:
    """Dispose the database engine. Call during shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
