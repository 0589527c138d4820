"""Project schemas for API request/response."""

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.poolsite.models.enums import ProjectStatus


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Title cannot be empty or whitespace only")
    return v


class ProjectCreate(BaseModel):
    """Schema for creating a project. JSON documents may be seeded here."""

    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    client_name: str | None = Field(default=None, max_length=255)
    client_email: EmailStr | None = None
    client_phone: str | None = Field(default=None, max_length=50)
    status: ProjectStatus = ProjectStatus.PENDING
    pool_type: str | None = Field(default=None, max_length=100)
    pool_size: str | None = Field(default=None, max_length=100)
    budget: Decimal | None = Field(default=None, max_digits=12, decimal_places=2)
    location: str | None = Field(default=None, max_length=255)
    start_date: datetime | None = None
    completion_date: datetime | None = None
    specifications: dict[str, Any] | None = None
    images: dict[str, Any] | None = None
    documents: dict[str, Any] | None = None
    notes: dict[str, Any] | None = None
    is_public: bool = False
    featured: bool = False

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _strip_required(v)


class ProjectUpdate(BaseModel):
    """Partial update. Omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    client_name: str | None = Field(default=None, max_length=255)
    client_email: EmailStr | None = None
    client_phone: str | None = Field(default=None, max_length=50)
    status: ProjectStatus | None = None
    pool_type: str | None = Field(default=None, max_length=100)
    pool_size: str | None = Field(default=None, max_length=100)
    budget: Decimal | None = Field(default=None, max_digits=12, decimal_places=2)
    location: str | None = Field(default=None, max_length=255)
    start_date: datetime | None = None
    completion_date: datetime | None = None
    is_public: bool | None = None
    featured: bool | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        if v is not None:
            return _strip_required(v)
        return v


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: UUID
    title: str
    description: str | None
    client_name: str | None
    client_email: str | None
    client_phone: str | None
    status: str
    pool_type: str | None
    pool_size: str | None
    budget: Decimal | None
    location: str | None
    start_date: datetime | None
    completion_date: datetime | None
    specifications: dict[str, Any] | None
    images: dict[str, Any] | None
    documents: dict[str, Any] | None
    notes: dict[str, Any] | None
    slug: str | None
    is_public: bool
    featured: bool
    created_at: datetime
    updated_at: datetime
    created_by: UUID | None

    model_config = {"from_attributes": True}


class ProjectPublicRead(BaseModel):
    """Portfolio card for the public site; no client or internal data."""

    id: UUID
    title: str
    description: str | None
    pool_type: str | None
    pool_size: str | None
    location: str | None
    images: dict[str, Any] | None
    slug: str | None
    featured: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class ProjectUpdateCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    status: ProjectStatus | None = None
    images: list[str] | None = None


class ProjectUpdateRead(BaseModel):
    id: UUID
    project_id: UUID
    title: str
    description: str | None
    status: str | None
    images: list[str] | None
    created_at: datetime
    created_by: UUID | None

    model_config = {"from_attributes": True}


class ProjectDetail(ProjectRead):
    updates: list[ProjectUpdateRead] = Field(default_factory=list)
