"""Repository for Contact entity."""

from typing import Any

from sqlalchemy import func, or_
from sqlmodel import col, select

from src.poolsite.models import Contact
from src.poolsite.repositories.base import BaseRepository


class ContactRepository(BaseRepository[Contact]):
    """Repository for contact form submissions."""

    model = Contact

    async def list_filtered(
        self,
        cursor: str | None = None,
        limit: int = 20,
        status: str | None = None,
        search: str | None = None,
    ) -> tuple[list[Contact], str | None, bool]:
        """List contacts newest first; search covers name, email and message."""
        query = select(Contact)
        if status:
            query = query.where(Contact.status == status)
        if search:
            pattern = f"%{search}%"
            query = query.where(
                or_(
                    col(Contact.name).ilike(pattern),
                    col(Contact.email).ilike(pattern),
                    col(Contact.message).ilike(pattern),
                )
            )
        return await self.paginate(query, cursor, limit, Contact.created_at)

    async def list_recent(self, limit: int = 5) -> list[Contact]:
        query = select(Contact).order_by(col(Contact.created_at).desc()).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_by(self, column: Any) -> dict[Any, int]:
        result = await self.session.execute(
            select(column, func.count()).select_from(Contact).group_by(column)
        )
        return {value: count for value, count in result.all()}

    async def delete(self, contact: Contact) -> None:
        await self.session.delete(contact)
