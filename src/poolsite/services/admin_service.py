"""Admin service - dashboard statistics."""

from collections import Counter
from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from src.poolsite.models import Contact, Project
from src.poolsite.models.base import utc_now
from src.poolsite.repositories import ContactRepository, ProjectRepository
from src.poolsite.schemas.admin import (
    ContactStats,
    DashboardStats,
    MonthlyCount,
    PoolTypeCount,
    ProjectStats,
    RecentContact,
    RecentProject,
)

RECENT_LIMIT = 5
MONTHLY_WINDOW_DAYS = 365


class AdminService:
    """Aggregates for the back-office dashboard.

    Grouping by month is done in Python so the same code runs on PostgreSQL
    and SQLite.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        contact_repo: ContactRepository,
        session: AsyncSession,
    ):
        self.project_repo = project_repo
        self.contact_repo = contact_repo
        self.session = session

    async def _project_stats(self) -> ProjectStats:
        by_status = await self.project_repo.count_by(Project.status)
        by_public = await self.project_repo.count_by(Project.is_public)
        by_featured = await self.project_repo.count_by(Project.featured)
        per_status = {s: n for s, n in by_status.items() if s in ProjectStats.model_fields}
        return ProjectStats(
            total=sum(by_status.values()),
            public=by_public.get(True, 0),
            featured=by_featured.get(True, 0),
            **per_status,
        )

    async def _contact_stats(self) -> ContactStats:
        by_status = await self.contact_repo.count_by(Contact.status)
        per_status = {s: n for s, n in by_status.items() if s in ContactStats.model_fields}
        return ContactStats(total=sum(by_status.values()), **per_status)

    async def _projects_by_type(self) -> list[PoolTypeCount]:
        by_type = await self.project_repo.count_by(Project.pool_type)
        ranked = sorted(by_type.items(), key=lambda item: item[1], reverse=True)
        return [PoolTypeCount(pool_type=pool_type, count=count) for pool_type, count in ranked]

    async def _monthly_stats(self) -> list[MonthlyCount]:
        since = utc_now() - timedelta(days=MONTHLY_WINDOW_DAYS)
        dates = await self.project_repo.created_dates_since(since)
        per_month = Counter(created_at.strftime("%Y-%m") for created_at in dates)
        return [MonthlyCount(month=month, count=per_month[month]) for month in sorted(per_month)]

    async def dashboard_stats(self) -> DashboardStats:
        recent_projects = await self.project_repo.list_recent(RECENT_LIMIT)
        recent_contacts = await self.contact_repo.list_recent(RECENT_LIMIT)
        return DashboardStats(
            projects=await self._project_stats(),
            contacts=await self._contact_stats(),
            recent_projects=[RecentProject.model_validate(p) for p in recent_projects],
            recent_contacts=[RecentContact.model_validate(c) for c in recent_contacts],
            projects_by_type=await self._projects_by_type(),
            monthly_stats=await self._monthly_stats(),
        )
