"""Integration test fixtures for database and HTTP client operations.

The app and the fixtures share one in-memory SQLite engine (StaticPool),
so rows written through ``db_session`` are visible to request handlers.
Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlmodel import SQLModel

from src.poolsite import models  # noqa: F401 - registers tables on the metadata
from src.poolsite.core import db
from src.poolsite.core.health import reset_health_cache
from src.poolsite.core.security import create_access_token
from src.poolsite.core.shutdown import request_tracker
from src.poolsite.main import create_app
from src.poolsite.models import User
from tests.factories import UserFactory


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh schema per test on the application's engine."""
    await db.dispose_engine()
    test_engine = db.get_engine()

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await db.dispose_engine()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    The session does NOT auto-commit; tests must call ``await session.commit()``
    before the data is visible to the app.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def admin_user(db_session: AsyncSession) -> User:
    user = UserFactory.build(name="Admin")
    db_session.add(user)
    await db_session.commit()
    return user


@pytest.fixture
async def editor_user(db_session: AsyncSession) -> User:
    user = UserFactory.editor()
    db_session.add(user)
    await db_session.commit()
    return user


@pytest.fixture
def auth_headers() -> Callable[[User], dict[str, str]]:
    """Build a Bearer header for any user without going through /login."""

    def _headers(user: User) -> dict[str, str]:
        token = create_access_token(user.id, user.email, user.role)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def admin_headers(admin_user: User, auth_headers) -> dict[str, str]:
    return auth_headers(admin_user)


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client against a fresh app instance."""
    request_tracker.reset()
    reset_health_cache()
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    request_tracker.reset()
