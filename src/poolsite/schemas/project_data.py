"""Typed sub-entities of the project and contact JSON documents.

Request bodies are validated here; the entry models build the dicts that
``core.project_data`` splices into the stored documents. Stored keys are
camelCase, so every model dumps by alias.
"""

from datetime import UTC, datetime
from typing import Any, Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.poolsite.models.enums import (
    FollowUpStatus,
    IssueSeverity,
    IssueStatus,
    MilestoneStatus,
)


def new_entry_id(prefix: str) -> str:
    """Unique id for a list entry, e.g. ``img_9f1c...``."""
    return f"{prefix}_{uuid4().hex}"


def now_iso() -> str:
    return datetime.now(UTC).isoformat()


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase input, dumps camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# --- Specifications ---


class Depth(CamelModel):
    shallow: float
    deep: float


class Dimensions(CamelModel):
    model_config = ConfigDict(extra="allow")

    length: float
    width: float
    depth: Depth | None = None
    volume: float | None = None


class Materials(CamelModel):
    model_config = ConfigDict(extra="allow")

    pool_shell: str | None = None
    finish: str | None = None
    coping: str | None = None
    decking: str | None = None


class Safety(CamelModel):
    model_config = ConfigDict(extra="allow")

    fence: bool | None = None
    alarm: bool | None = None
    cover: bool | None = None
    handrails: bool | None = None
    steps: bool | None = None
    compliance: list[str] | None = None


class Environmental(CamelModel):
    model_config = ConfigDict(extra="allow")

    solar_heating: bool | None = None
    energy_efficient_pump: bool | None = None
    salt_water_system: bool | None = None
    ozone_system: bool | None = None
    uv_system: bool | None = None


class PoolSpecifications(CamelModel):
    """Specifications document. Unknown sections are kept as given."""

    model_config = ConfigDict(extra="allow")

    dimensions: Dimensions | None = None
    materials: Materials | None = None
    # pump, filter, heater, cleaner, lighting; each may carry a "type"
    equipment: dict[str, dict[str, Any]] | None = None
    # waterfalls/fountains/jets are counts, the rest flags
    water_features: dict[str, bool | int] | None = None
    safety: Safety | None = None
    environmental: Environmental | None = None


# --- Images ---


class GalleryImageCreate(CamelModel):
    url: str = Field(min_length=1)
    alt: str = ""
    caption: str = ""
    category: str = "gallery"


class GalleryImage(GalleryImageCreate):
    id: str = Field(default_factory=lambda: new_entry_id("img"))
    order: int = 0
    uploaded_at: str = Field(default_factory=now_iso)
    uploaded_by: str


class ProgressImageCreate(CamelModel):
    url: str = Field(min_length=1)
    caption: str = ""
    phase: Literal[
        "excavation", "structure", "plumbing", "electrical", "finishing", "landscaping"
    ]
    date: str = Field(default_factory=now_iso)
    order: int = 0


class ProgressImage(ProgressImageCreate):
    id: str = Field(default_factory=lambda: new_entry_id("progress"))
    uploaded_by: str


# --- Documents ---


class ProjectDocumentCreate(CamelModel):
    """Contract, permit, technical or financial document reference.

    Category-specific fields (signedAt, issuedBy, amount, ...) pass through.
    """

    model_config = ConfigDict(extra="allow")

    name: str = Field(min_length=1, max_length=255)
    url: str = Field(min_length=1)
    type: str = Field(min_length=1, max_length=50)


class ProjectDocument(ProjectDocumentCreate):
    id: str = Field(default_factory=lambda: new_entry_id("doc"))
    uploaded_at: str = Field(default_factory=now_iso)
    uploaded_by: str


# --- Project notes ---


class InternalNoteCreate(CamelModel):
    content: str = Field(min_length=1)
    category: Literal["general", "technical", "client_communication", "issue", "milestone"] = (
        "general"
    )
    priority: Literal["low", "medium", "high", "urgent"] = "medium"
    tags: list[str] = Field(default_factory=list)


class InternalNote(InternalNoteCreate):
    id: str = Field(default_factory=lambda: new_entry_id("note"))
    created_at: str = Field(default_factory=now_iso)
    created_by: str


class CommunicationCreate(CamelModel):
    type: Literal["email", "phone", "meeting", "site_visit", "text"]
    subject: str | None = None
    content: str = Field(min_length=1)
    direction: Literal["inbound", "outbound"]
    client_name: str | None = None
    client_email: str | None = None
    client_phone: str | None = None
    attachments: list[str] | None = None


class CommunicationLog(CommunicationCreate):
    id: str = Field(default_factory=lambda: new_entry_id("comm"))
    created_at: str = Field(default_factory=now_iso)
    created_by: str


class MilestoneCreate(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    planned_date: str = Field(min_length=1)
    priority: str = "medium"
    dependencies: list[str] | None = None

    @field_validator("planned_date")
    @classmethod
    def validate_planned_date(cls, v: str) -> str:
        try:
            datetime.fromisoformat(v)
        except ValueError as e:
            raise ValueError("plannedDate must be an ISO 8601 date") from e
        return v


class Milestone(MilestoneCreate):
    id: str = Field(default_factory=lambda: new_entry_id("milestone"))
    status: MilestoneStatus = MilestoneStatus.PENDING
    actual_date: str | None = None
    created_at: str = Field(default_factory=now_iso)
    created_by: str


class MilestoneStatusUpdate(CamelModel):
    status: MilestoneStatus
    actual_date: str | None = None


class IssueCreate(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    # Clients send the severity as "priority"
    priority: IssueSeverity = IssueSeverity.MEDIUM
    category: str = "general"
    assigned_to: str | None = None


class Issue(CamelModel):
    id: str = Field(default_factory=lambda: new_entry_id("issue"))
    title: str
    description: str = ""
    severity: IssueSeverity = IssueSeverity.MEDIUM
    status: IssueStatus = IssueStatus.OPEN
    category: str = "general"
    reported_at: str = Field(default_factory=now_iso)
    reported_by: str
    assigned_to: str | None = None
    tags: list[str] = Field(default_factory=list)


class IssueResolve(CamelModel):
    resolution: str = Field(min_length=1)


# --- Contact notes ---


class ContactCommunicationCreate(CamelModel):
    type: Literal["email", "phone", "meeting", "site_visit"]
    subject: str | None = None
    content: str = Field(min_length=1)
    direction: Literal["inbound", "outbound"]
    attachments: list[str] | None = None


class ContactCommunication(ContactCommunicationCreate):
    id: str = Field(default_factory=lambda: new_entry_id("comm"))
    created_at: str = Field(default_factory=now_iso)
    created_by: str


class FollowUpCreate(CamelModel):
    task: str = Field(min_length=1)
    due_date: str = Field(min_length=1)
    assigned_to: str | None = None
    notes: str | None = None


class FollowUp(FollowUpCreate):
    id: str = Field(default_factory=lambda: new_entry_id("followup"))
    status: FollowUpStatus = FollowUpStatus.PENDING
    created_at: str = Field(default_factory=now_iso)


class Qualification(CamelModel):
    """Partial lead qualification; only the given fields are merged."""

    budget: float | None = None
    timeline: str | None = None
    decision_maker: str | None = None
    competition: list[str] | None = None
    pain_points: list[str] | None = None
    requirements: list[str] | None = None


# --- Analytics and search ---


class ProgressRange(BaseModel):
    min: int = Field(ge=0, le=100)
    max: int = Field(ge=0, le=100)


class ProjectSearchRequest(CamelModel):
    pool_type: str | None = None
    equipment: str | None = None
    water_features: str | None = None
    has_issues: bool = False
    progress_range: ProgressRange | None = None


class ProjectSearchResult(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    status: str
    pool_type: str | None
    specifications: dict[str, Any] | None
    notes: dict[str, Any] | None
    created_at: datetime


class ProjectAnalytics(CamelModel):
    progress_percentage: int
    active_issues_count: int
    upcoming_milestones: list[dict[str, Any]]
    total_images: int
    has_water_features: bool


# --- Route envelopes: {"success": true, <entity>, <column>} ---


class _Envelope(CamelModel):
    success: bool = True


class SpecificationsResponse(_Envelope):
    specifications: dict[str, Any] | None


class ImagesResponse(_Envelope):
    images: dict[str, Any] | None


class ImageAddedResponse(ImagesResponse):
    image: dict[str, Any]


class DocumentsResponse(_Envelope):
    documents: dict[str, Any] | None


class DocumentAddedResponse(DocumentsResponse):
    document: dict[str, Any]


class NotesResponse(_Envelope):
    notes: dict[str, Any] | None


class NoteAddedResponse(NotesResponse):
    note: dict[str, Any]


class CommunicationAddedResponse(NotesResponse):
    communication: dict[str, Any]


class MilestoneAddedResponse(NotesResponse):
    milestone: dict[str, Any]


class IssueAddedResponse(NotesResponse):
    issue: dict[str, Any]


class FollowUpAddedResponse(NotesResponse):
    follow_up: dict[str, Any]
