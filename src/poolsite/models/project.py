"""Project and project update models.

The specifications, images, documents and notes columns hold JSON documents
shaped by ``schemas.project_data`` and mutated through ``core.project_data``.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import Column, Numeric
from sqlmodel import Field, SQLModel

from src.poolsite.models.base import JSONDocument, utc_now
from src.poolsite.models.enums import ProjectStatus


class Project(SQLModel, table=True):
    """Pool construction project, public portfolio entry when is_public."""

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=255, index=True)
    description: str | None = Field(default=None)
    client_name: str | None = Field(default=None, max_length=255)
    client_email: str | None = Field(default=None, max_length=255)
    client_phone: str | None = Field(default=None, max_length=50)
    status: str = Field(default=ProjectStatus.PENDING.value, max_length=50, index=True)
    pool_type: str | None = Field(default=None, max_length=100)
    pool_size: str | None = Field(default=None, max_length=100)
    budget: Decimal | None = Field(default=None, sa_column=Column(Numeric(12, 2)))
    location: str | None = Field(default=None, max_length=255)
    start_date: datetime | None = Field(default=None)
    completion_date: datetime | None = Field(default=None)
    specifications: dict[str, Any] | None = Field(default=None, sa_column=Column(JSONDocument))
    images: dict[str, Any] | None = Field(default=None, sa_column=Column(JSONDocument))
    documents: dict[str, Any] | None = Field(default=None, sa_column=Column(JSONDocument))
    notes: dict[str, Any] | None = Field(default=None, sa_column=Column(JSONDocument))
    slug: str | None = Field(default=None, max_length=255, unique=True)
    is_public: bool = Field(default=False)
    featured: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
    created_by: UUID | None = Field(default=None, foreign_key="users.id")


class ProjectUpdate(SQLModel, table=True):
    """Timeline entry on a project; may carry a status change."""

    __tablename__ = "project_updates"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", index=True)
    title: str = Field(max_length=255)
    description: str | None = Field(default=None)
    status: str | None = Field(default=None, max_length=50)
    images: list[str] | None = Field(default=None, sa_column=Column(JSONDocument))
    created_at: datetime = Field(default_factory=utc_now)
    created_by: UUID | None = Field(default=None, foreign_key="users.id")
