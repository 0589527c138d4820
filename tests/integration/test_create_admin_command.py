"""create-admin against a real database."""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from src.poolsite.cli import create_user
from src.poolsite.core.security import verify_password
from src.poolsite.models import User

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture(autouse=True)
def _keep_engine():
    """The in-memory database lives only as long as its engine."""
    with patch("src.poolsite.cli.dispose_engine", new_callable=AsyncMock):
        yield


async def test_create_user(db_session: AsyncSession):
    code = await create_user("owner@example.com", "Owner", "owner-pass", "admin")

    assert code == 0
    user = (await db_session.execute(select(User))).scalar_one()
    assert user.email == "owner@example.com"
    assert verify_password("owner-pass", user.hashed_password)


async def test_duplicate_email_fails(db_session: AsyncSession):
    assert await create_user("owner@example.com", "Owner", "owner-pass", "admin") == 0

    assert await create_user("owner@example.com", "Again", "owner-pass", "editor") == 1
