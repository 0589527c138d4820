"""Project CRUD and timeline updates."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.poolsite.core.logging import get_logger
from src.poolsite.core.security import make_slug
from src.poolsite.models import Project, ProjectUpdate, User
from src.poolsite.models.base import utc_now
from src.poolsite.repositories import ProjectRepository, ProjectUpdateRepository
from src.poolsite.schemas.project import ProjectCreate, ProjectUpdateCreate
from src.poolsite.schemas.project import ProjectUpdate as ProjectChanges

logger = get_logger(__name__)


class ProjectService:
    """Project management: listing, CRUD and status updates."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        update_repo: ProjectUpdateRepository,
        session: AsyncSession,
    ):
        self.project_repo = project_repo
        self.update_repo = update_repo
        self.session = session

    async def _ensure_slug_available(self, slug: str | None, project_id: UUID | None) -> None:
        if slug is None:
            return
        existing = await self.project_repo.get_by_slug(slug)
        if existing is not None and existing.id != project_id:
            raise ValueError("A project with this title already exists")

    async def list_projects(
        self,
        cursor: str | None,
        limit: int,
        status: str | None = None,
        search: str | None = None,
    ) -> tuple[list[Project], str | None, bool]:
        return await self.project_repo.list_filtered(cursor, limit, status, search)

    async def list_public(self, limit: int, featured_only: bool = False) -> list[Project]:
        return await self.project_repo.list_public(limit, featured_only)

    async def get(self, project_id: UUID) -> Project | None:
        return await self.project_repo.get_by_id(project_id)

    async def get_with_updates(
        self, project_id: UUID
    ) -> tuple[Project, list[ProjectUpdate]] | None:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            return None
        updates = await self.update_repo.list_for_project(project_id)
        return project, updates

    async def create(self, data: ProjectCreate, creator: User) -> Project:
        """Create a project; the slug is derived from the title.

        Raises:
            ValueError: If another project already uses the derived slug
        """
        slug = make_slug(data.title)
        await self._ensure_slug_available(slug, None)

        try:
            project = Project(
                **data.model_dump(exclude={"status"}),
                status=data.status.value,
                slug=slug,
                created_by=creator.id,
            )
            self.project_repo.add(project)
            await self.session.commit()
            await self.session.refresh(project)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project created", project_id=str(project.id), slug=slug)
        return project

    async def update(self, project: Project, data: ProjectChanges) -> Project:
        """Apply a partial update. A new title regenerates the slug.

        Raises:
            ValueError: If the regenerated slug collides with another project
        """
        update_data = data.model_dump(exclude_unset=True)
        if update_data.get("status") is not None:
            update_data["status"] = update_data["status"].value

        if update_data.get("title"):
            update_data["slug"] = make_slug(update_data["title"])
            await self._ensure_slug_available(update_data["slug"], project.id)

        try:
            for field, value in update_data.items():
                setattr(project, field, value)
            project.updated_at = utc_now()
            self.session.add(project)
            await self.session.commit()
            await self.session.refresh(project)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project updated", project_id=str(project.id), fields=sorted(update_data))
        return project

    async def delete(self, project: Project) -> None:
        """Delete a project and its timeline updates."""
        project_id = project.id
        try:
            await self.project_repo.delete(project)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project deleted", project_id=str(project_id))

    async def add_update(
        self, project: Project, data: ProjectUpdateCreate, author: User
    ) -> ProjectUpdate:
        """Record a timeline update. A status on the update propagates to the project."""
        status = data.status.value if data.status else None
        try:
            update = ProjectUpdate(
                project_id=project.id,
                title=data.title,
                description=data.description,
                status=status,
                images=data.images,
                created_by=author.id,
            )
            self.update_repo.add(update)

            if status:
                project.status = status
                project.updated_at = utc_now()
                self.session.add(project)

            await self.session.commit()
            await self.session.refresh(update)
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Project update added",
            project_id=str(project.id),
            update_id=str(update.id),
            status=status,
        )
        return update
