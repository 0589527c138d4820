"""Contact (lead) schemas."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from src.poolsite.models.enums import ContactStatus


class ContactCreate(BaseModel):
    """Public contact form submission."""

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=50)
    pool_type: str | None = Field(default=None, max_length=100)
    message: str = Field(min_length=1, max_length=5000)


class ContactSubmitted(BaseModel):
    message: str = "Contact form submitted successfully"
    id: UUID


class ContactUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=50)
    pool_type: str | None = Field(default=None, max_length=100)
    message: str | None = Field(default=None, min_length=1)
    status: ContactStatus | None = None


class ContactAssign(BaseModel):
    """Assign to a user, or unassign with null."""

    assigned_to: UUID | None


class ContactRead(BaseModel):
    id: UUID
    name: str
    email: str
    phone: str | None
    pool_type: str | None
    message: str
    status: str
    assigned_to: UUID | None
    notes: dict[str, Any] | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
