"""Contact form submission (lead) model."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import Column
from sqlmodel import Field, SQLModel

from src.poolsite.models.base import JSONDocument, utc_now
from src.poolsite.models.enums import ContactStatus


class Contact(SQLModel, table=True):
    __tablename__ = "contacts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255, index=True)
    phone: str | None = Field(default=None, max_length=50)
    pool_type: str | None = Field(default=None, max_length=100)
    message: str
    status: str = Field(default=ContactStatus.NEW.value, max_length=50, index=True)
    assigned_to: UUID | None = Field(default=None, foreign_key="users.id")
    notes: dict[str, Any] | None = Field(default=None, sa_column=Column(JSONDocument))
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
