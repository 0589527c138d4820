"""Shared repository behaviour inherited from BaseRepository."""

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.poolsite.repositories import ContactRepository, ProjectRepository
from tests.factories import ContactFactory, ProjectFactory

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class TestGetForUpdate:
    async def test_locks_and_returns_project(self, db_session: AsyncSession):
        project = ProjectFactory.build()
        db_session.add(project)
        await db_session.commit()

        locked = await ProjectRepository(db_session).get_for_update(project.id)

        assert locked is not None
        assert locked.id == project.id

    async def test_locks_and_returns_contact(self, db_session: AsyncSession):
        contact = ContactFactory.build()
        db_session.add(contact)
        await db_session.commit()

        locked = await ContactRepository(db_session).get_for_update(contact.id)

        assert locked is not None
        assert locked.id == contact.id

    async def test_missing_row_returns_none(self, db_session: AsyncSession):
        assert await ProjectRepository(db_session).get_for_update(uuid4()) is None
