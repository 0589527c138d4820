"""Professional info pages and their content sections, media and taxonomy."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import Column
from sqlmodel import Field, SQLModel

from src.poolsite.models.base import JSONDocument, utc_now


class ProfessionalInfoPage(SQLModel, table=True):
    """Bilingual (Hebrew / English) informational page."""

    __tablename__ = "professional_info_pages"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    slug: str = Field(max_length=255, unique=True, index=True)
    title: str = Field(max_length=255)
    title_en: str = Field(max_length=255)
    description: str | None = Field(default=None)
    description_en: str | None = Field(default=None)
    content: list[Any] = Field(default_factory=list, sa_column=Column(JSONDocument, nullable=False))
    meta_title: str | None = Field(default=None, max_length=255)
    meta_title_en: str | None = Field(default=None, max_length=255)
    meta_description: str | None = Field(default=None)
    meta_description_en: str | None = Field(default=None)
    is_active: bool = Field(default=True)
    sort_order: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class ContentSection(SQLModel, table=True):
    """Ordered block of a page; content shape depends on section_type."""

    __tablename__ = "content_sections"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    page_id: UUID = Field(foreign_key="professional_info_pages.id", index=True)
    section_type: str = Field(max_length=50)
    title: str | None = Field(default=None, max_length=255)
    title_en: str | None = Field(default=None, max_length=255)
    content: dict[str, Any] = Field(
        default_factory=dict, sa_column=Column(JSONDocument, nullable=False)
    )
    sort_order: int = Field(default=0)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class ContentMedia(SQLModel, table=True):
    __tablename__ = "content_media"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    section_id: UUID = Field(foreign_key="content_sections.id", index=True)
    media_type: str = Field(max_length=50)
    file_name: str = Field(max_length=255)
    original_name: str = Field(max_length=255)
    file_path: str = Field(max_length=1024)
    file_size: int | None = Field(default=None)
    mime_type: str = Field(max_length=100)
    alt_text: str | None = Field(default=None)
    alt_text_en: str | None = Field(default=None)
    caption: str | None = Field(default=None)
    caption_en: str | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)


class ContentCategory(SQLModel, table=True):
    __tablename__ = "content_categories"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    name_en: str = Field(max_length=255)
    slug: str = Field(max_length=255, unique=True)
    description: str | None = Field(default=None)
    description_en: str | None = Field(default=None)
    icon: str | None = Field(default=None, max_length=255)
    color: str | None = Field(default=None, max_length=20)
    is_active: bool = Field(default=True)
    sort_order: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class ContentTag(SQLModel, table=True):
    __tablename__ = "content_tags"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    name_en: str = Field(max_length=255)
    slug: str = Field(max_length=255, unique=True)
    color: str | None = Field(default=None, max_length=20)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)


class PageTag(SQLModel, table=True):
    """Junction table for page-tag relationships."""

    __tablename__ = "page_tags"

    page_id: UUID = Field(foreign_key="professional_info_pages.id", primary_key=True)
    tag_id: UUID = Field(foreign_key="content_tags.id", primary_key=True)
    created_at: datetime = Field(default_factory=utc_now)


class PageCategory(SQLModel, table=True):
    """Junction table for page-category relationships."""

    __tablename__ = "page_categories"

    page_id: UUID = Field(foreign_key="professional_info_pages.id", primary_key=True)
    category_id: UUID = Field(foreign_key="content_categories.id", primary_key=True)
    created_at: datetime = Field(default_factory=utc_now)
