"""Database session dependency."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.poolsite.core.db import get_session


async def get_db_session() -> AsyncGenerator[AsyncSession]:
    """One session per request, closed when the response is sent."""
    async with get_session() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
