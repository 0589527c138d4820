"""Repositories for Project and ProjectUpdate entities."""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import delete, func, or_
from sqlmodel import col, select

from src.poolsite.models import Project, ProjectUpdate
from src.poolsite.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for pool construction projects."""

    model = Project

    async def get_by_slug(self, slug: str) -> Project | None:
        result = await self.session.execute(select(Project).where(Project.slug == slug))
        return result.scalar_one_or_none()

    async def list_filtered(
        self,
        cursor: str | None = None,
        limit: int = 20,
        status: str | None = None,
        search: str | None = None,
    ) -> tuple[list[Project], str | None, bool]:
        """List projects newest first, filtered by status and a text search.

        The search matches title, client name or client email (case-insensitive).
        """
        query = select(Project)
        if status:
            query = query.where(Project.status == status)
        if search:
            pattern = f"%{search}%"
            query = query.where(
                or_(
                    col(Project.title).ilike(pattern),
                    col(Project.client_name).ilike(pattern),
                    col(Project.client_email).ilike(pattern),
                )
            )
        return await self.paginate(query, cursor, limit, Project.created_at)

    async def list_public(self, limit: int, featured_only: bool = False) -> list[Project]:
        """Public portfolio projects, featured first then newest."""
        query = select(Project).where(Project.is_public == True)  # noqa: E712
        if featured_only:
            query = query.where(Project.featured == True)  # noqa: E712
        query = query.order_by(col(Project.featured).desc(), col(Project.created_at).desc())
        result = await self.session.execute(query.limit(limit))
        return list(result.scalars().all())

    async def list_all(self) -> list[Project]:
        result = await self.session.execute(select(Project))
        return list(result.scalars().all())

    async def list_recent(self, limit: int = 5) -> list[Project]:
        query = select(Project).order_by(col(Project.created_at).desc()).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_by(self, column: Any) -> dict[Any, int]:
        """Row counts grouped by one column."""
        result = await self.session.execute(
            select(column, func.count()).select_from(Project).group_by(column)
        )
        return {value: count for value, count in result.all()}

    async def created_dates_since(self, since: datetime) -> list[datetime]:
        """Creation timestamps of projects created at or after ``since``."""
        result = await self.session.execute(
            select(Project.created_at).where(Project.created_at >= since)
        )
        return list(result.scalars().all())

    async def delete(self, project: Project) -> None:
        """Delete a project together with its updates (no flush/commit)."""
        await self.session.execute(
            delete(ProjectUpdate).where(col(ProjectUpdate.project_id) == project.id)
        )
        await self.session.delete(project)


class ProjectUpdateRepository(BaseRepository[ProjectUpdate]):
    """Repository for project timeline updates."""

    model = ProjectUpdate

    async def list_for_project(self, project_id: UUID) -> list[ProjectUpdate]:
        """Updates of one project, newest first."""
        query = (
            select(ProjectUpdate)
            .where(ProjectUpdate.project_id == project_id)
            .order_by(col(ProjectUpdate.created_at).desc())
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
