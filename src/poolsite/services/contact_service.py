"""Contact form submissions and lead management."""

from collections.abc import Callable
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.poolsite.core import project_data
from src.poolsite.core.logging import get_logger
from src.poolsite.models import Contact, User
from src.poolsite.models.base import utc_now
from src.poolsite.repositories import ContactRepository, UserRepository
from src.poolsite.schemas.contact import ContactCreate, ContactUpdate
from src.poolsite.schemas.project_data import (
    ContactCommunication,
    ContactCommunicationCreate,
    FollowUp,
    FollowUpCreate,
    Qualification,
)

logger = get_logger(__name__)


class ContactService:
    """Lead pipeline: public submission, triage, assignment and notes."""

    def __init__(
        self,
        contact_repo: ContactRepository,
        user_repo: UserRepository,
        session: AsyncSession,
    ):
        self.contact_repo = contact_repo
        self.user_repo = user_repo
        self.session = session

    async def submit(self, data: ContactCreate) -> Contact:
        try:
            contact = Contact(**data.model_dump())
            self.contact_repo.add(contact)
            await self.session.commit()
            await self.session.refresh(contact)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Contact submitted", contact_id=str(contact.id), pool_type=contact.pool_type)
        return contact

    async def list_contacts(
        self,
        cursor: str | None,
        limit: int,
        status: str | None = None,
        search: str | None = None,
    ) -> tuple[list[Contact], str | None, bool]:
        return await self.contact_repo.list_filtered(cursor, limit, status, search)

    async def get(self, contact_id: UUID) -> Contact | None:
        return await self.contact_repo.get_by_id(contact_id)

    async def _save(self, contact: Contact) -> Contact:
        try:
            contact.updated_at = utc_now()
            self.session.add(contact)
            await self.session.commit()
            await self.session.refresh(contact)
        except Exception:
            await self.session.rollback()
            raise
        return contact

    async def update(self, contact: Contact, data: ContactUpdate) -> Contact:
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        if "status" in update_data:
            update_data["status"] = update_data["status"].value

        for field, value in update_data.items():
            setattr(contact, field, value)
        await self._save(contact)

        logger.info("Contact updated", contact_id=str(contact.id), fields=sorted(update_data))
        return contact

    async def delete(self, contact: Contact) -> None:
        contact_id = contact.id
        try:
            await self.contact_repo.delete(contact)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Contact deleted", contact_id=str(contact_id))

    async def assign(self, contact: Contact, user_id: UUID | None) -> Contact:
        """Assign a contact to a user, or clear the assignment.

        Raises:
            ValueError: If the user does not exist
        """
        if user_id is not None and await self.user_repo.get_by_id(user_id) is None:
            raise ValueError("Assigned user not found")

        contact.assigned_to = user_id
        await self._save(contact)

        logger.info(
            "Contact assigned",
            contact_id=str(contact.id),
            assigned_to=str(user_id) if user_id else None,
        )
        return contact

    async def _mutate_notes(
        self,
        contact_id: UUID,
        transform: Callable[[dict[str, Any] | None], dict[str, Any]],
    ) -> Contact | None:
        """Read-modify-write of the notes column under a row lock."""
        try:
            contact = await self.contact_repo.get_for_update(contact_id)
            if contact is None:
                await self.session.rollback()
                return None

            contact.notes = transform(contact.notes)
            contact.updated_at = utc_now()
            self.session.add(contact)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Contact notes updated", contact_id=str(contact_id))
        return contact

    async def add_communication(
        self, contact_id: UUID, data: ContactCommunicationCreate, user: User
    ) -> tuple[Contact, dict[str, Any]] | None:
        entry = ContactCommunication(**data.model_dump(), created_by=str(user.id)).to_document()
        contact = await self._mutate_notes(
            contact_id, lambda notes: project_data.add_contact_communication(notes, entry)
        )
        return (contact, entry) if contact else None

    async def add_follow_up(
        self, contact_id: UUID, data: FollowUpCreate, user: User
    ) -> tuple[Contact, dict[str, Any]] | None:
        values = data.model_dump()
        values["assigned_to"] = values["assigned_to"] or str(user.id)
        follow_up = FollowUp(**values).to_document()
        contact = await self._mutate_notes(
            contact_id, lambda notes: project_data.add_follow_up(notes, follow_up)
        )
        return (contact, follow_up) if contact else None

    async def update_qualification(
        self, contact_id: UUID, data: Qualification
    ) -> Contact | None:
        changes = data.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return await self._mutate_notes(
            contact_id, lambda notes: project_data.update_qualification(notes, changes)
        )
