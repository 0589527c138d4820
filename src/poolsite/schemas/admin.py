"""Dashboard statistics schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class ProjectStats(BaseModel):
    total: int = 0
    pending: int = 0
    in_progress: int = 0
    completed: int = 0
    cancelled: int = 0
    public: int = 0
    featured: int = 0


class ContactStats(BaseModel):
    total: int = 0
    new: int = 0
    contacted: int = 0
    qualified: int = 0
    converted: int = 0


class RecentProject(BaseModel):
    id: UUID
    title: str
    client_name: str | None
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}


class RecentContact(BaseModel):
    id: UUID
    name: str
    email: str
    pool_type: str | None
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}


class PoolTypeCount(BaseModel):
    pool_type: str | None
    count: int


class MonthlyCount(BaseModel):
    month: str  # YYYY-MM
    count: int


class DashboardStats(BaseModel):
    projects: ProjectStats
    contacts: ContactStats
    recent_projects: list[RecentProject]
    recent_contacts: list[RecentContact]
    projects_by_type: list[PoolTypeCount]
    monthly_stats: list[MonthlyCount]
