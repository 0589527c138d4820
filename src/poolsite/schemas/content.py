"""Professional info page and content section schemas."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.poolsite.core.security import validate_slug_format
from src.poolsite.models.enums import SectionType


class PageCreate(BaseModel):
    slug: str = Field(min_length=1, max_length=255)
    title: str = Field(min_length=1, max_length=255)
    title_en: str = Field(min_length=1, max_length=255)
    description: str | None = None
    description_en: str | None = None
    content: list[Any] = Field(default_factory=list)
    meta_title: str | None = Field(default=None, max_length=255)
    meta_title_en: str | None = Field(default=None, max_length=255)
    meta_description: str | None = None
    meta_description_en: str | None = None
    sort_order: int = 0

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        return validate_slug_format(v)


class PageUpdate(BaseModel):
    slug: str | None = Field(default=None, min_length=1, max_length=255)
    title: str | None = Field(default=None, min_length=1, max_length=255)
    title_en: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    description_en: str | None = None
    content: list[Any] | None = None
    meta_title: str | None = Field(default=None, max_length=255)
    meta_title_en: str | None = Field(default=None, max_length=255)
    meta_description: str | None = None
    meta_description_en: str | None = None
    is_active: bool | None = None
    sort_order: int | None = None

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str | None) -> str | None:
        if v is not None:
            return validate_slug_format(v)
        return v


class SectionRead(BaseModel):
    id: UUID
    page_id: UUID
    section_type: str
    title: str | None
    title_en: str | None
    content: dict[str, Any]
    sort_order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PageRead(BaseModel):
    id: UUID
    slug: str
    title: str
    title_en: str
    description: str | None
    description_en: str | None
    content: list[Any]
    meta_title: str | None
    meta_title_en: str | None
    meta_description: str | None
    meta_description_en: str | None
    is_active: bool
    sort_order: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PageWithSections(PageRead):
    """Page as rendered publicly: content replaced by its active sections."""

    content: list[SectionRead]  # type: ignore[assignment]


class SectionCreate(BaseModel):
    page_id: UUID
    section_type: SectionType
    title: str | None = Field(default=None, max_length=255)
    title_en: str | None = Field(default=None, max_length=255)
    content: dict[str, Any]
    sort_order: int = 0


class SectionUpdate(BaseModel):
    section_type: SectionType | None = None
    title: str | None = Field(default=None, max_length=255)
    title_en: str | None = Field(default=None, max_length=255)
    content: dict[str, Any] | None = None
    sort_order: int | None = None
    is_active: bool | None = None


class SectionReorder(BaseModel):
    """Section ids in their new display order."""

    section_ids: list[UUID]
