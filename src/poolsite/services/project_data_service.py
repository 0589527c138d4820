"""Read-modify-write of the JSON documents stored on a project.

Each mutation loads the project row locked for update, applies exactly one
helper from ``core.project_data`` to one column, and writes the whole column
back in the same transaction.
"""

from collections.abc import Callable
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.poolsite.core import project_data
from src.poolsite.core.config import get_settings
from src.poolsite.core.logging import get_logger
from src.poolsite.models import Project, User
from src.poolsite.models.base import utc_now
from src.poolsite.repositories import ProjectRepository
from src.poolsite.schemas.project_data import (
    CommunicationCreate,
    CommunicationLog,
    GalleryImage,
    GalleryImageCreate,
    InternalNote,
    InternalNoteCreate,
    Issue,
    IssueCreate,
    Milestone,
    MilestoneCreate,
    MilestoneStatusUpdate,
    PoolSpecifications,
    ProgressImage,
    ProgressImageCreate,
    ProjectAnalytics,
    ProjectDocument,
    ProjectDocumentCreate,
    ProjectSearchRequest,
)

logger = get_logger(__name__)

JSONDoc = dict[str, Any]

# Keys checked by the analytics "has water features" flag
ANALYTICS_WATER_FEATURES = ("waterfall", "fountain", "spa")


class EntryNotFoundError(Exception):
    """A milestone or issue id did not match any entry in the project's notes."""


class ProjectDataService:
    """Mutations and derived views over a project's JSON columns."""

    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        self.project_repo = project_repo
        self.session = session

    async def _mutate(
        self,
        project_id: UUID,
        column: str,
        transform: Callable[[JSONDoc | None], JSONDoc | None],
        not_found: str | None = None,
    ) -> Project | None:
        """Apply ``transform`` to one JSON column and persist the result.

        Returns None if the project does not exist. When ``not_found`` is set
        and the transform hands back its input unchanged, the transaction is
        rolled back and EntryNotFoundError is raised with that message.
        """
        try:
            project = await self.project_repo.get_for_update(project_id)
            if project is None:
                await self.session.rollback()
                return None

            current = getattr(project, column)
            updated = transform(current)
            if not_found is not None and updated is current:
                raise EntryNotFoundError(not_found)

            setattr(project, column, updated)
            project.updated_at = utc_now()
            self.session.add(project)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project document updated", project_id=str(project_id), column=column)
        return project

    # --- Specifications ---

    async def replace_specifications(
        self, project_id: UUID, specifications: PoolSpecifications
    ) -> Project | None:
        document = project_data.create_specifications(specifications.to_document())
        return await self._mutate(project_id, "specifications", lambda _: document)

    async def merge_specifications(
        self, project_id: UUID, updates: PoolSpecifications
    ) -> Project | None:
        changes = updates.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return await self._mutate(
            project_id,
            "specifications",
            lambda current: project_data.update_specifications(current, changes),
        )

    # --- Images ---

    async def add_gallery_image(
        self, project_id: UUID, data: GalleryImageCreate, user: User
    ) -> tuple[Project, JSONDoc] | None:
        image = GalleryImage(**data.model_dump(), uploaded_by=str(user.id)).to_document()
        project = await self._mutate(
            project_id,
            "images",
            lambda current: project_data.add_image_to_gallery(current, image),
        )
        return (project, image) if project else None

    async def remove_gallery_image(self, project_id: UUID, image_id: str) -> Project | None:
        return await self._mutate(
            project_id,
            "images",
            lambda current: project_data.remove_image_from_gallery(current, image_id),
        )

    async def add_progress_image(
        self, project_id: UUID, data: ProgressImageCreate, user: User
    ) -> tuple[Project, JSONDoc] | None:
        image = ProgressImage(**data.model_dump(), uploaded_by=str(user.id)).to_document()
        project = await self._mutate(
            project_id,
            "images",
            lambda current: project_data.add_progress_image(current, image),
        )
        return (project, image) if project else None

    # --- Documents ---

    async def add_document(
        self, project_id: UUID, category: str, data: ProjectDocumentCreate, user: User
    ) -> tuple[Project, JSONDoc] | None:
        document = ProjectDocument(**data.model_dump(), uploaded_by=str(user.id)).to_document()
        project = await self._mutate(
            project_id,
            "documents",
            lambda current: project_data.add_document(current, category, document),
        )
        return (project, document) if project else None

    async def remove_document(
        self, project_id: UUID, category: str, document_id: str
    ) -> Project | None:
        return await self._mutate(
            project_id,
            "documents",
            lambda current: project_data.remove_document(current, category, document_id),
        )

    # --- Notes ---

    async def add_internal_note(
        self, project_id: UUID, data: InternalNoteCreate, user: User
    ) -> tuple[Project, JSONDoc] | None:
        note = InternalNote(**data.model_dump(), created_by=str(user.id)).to_document()
        project = await self._mutate(
            project_id,
            "notes",
            lambda current: project_data.add_internal_note(current, note),
        )
        return (project, note) if project else None

    async def add_communication(
        self, project_id: UUID, data: CommunicationCreate, user: User
    ) -> tuple[Project, JSONDoc] | None:
        entry = CommunicationLog(**data.model_dump(), created_by=str(user.id)).to_document()
        project = await self._mutate(
            project_id,
            "notes",
            lambda current: project_data.add_communication_log(current, entry),
        )
        return (project, entry) if project else None

    async def add_milestone(
        self, project_id: UUID, data: MilestoneCreate, user: User
    ) -> tuple[Project, JSONDoc] | None:
        milestone = Milestone(**data.model_dump(), created_by=str(user.id)).to_document()
        project = await self._mutate(
            project_id,
            "notes",
            lambda current: project_data.add_milestone(current, milestone),
        )
        return (project, milestone) if project else None

    async def update_milestone(
        self, project_id: UUID, milestone_id: str, data: MilestoneStatusUpdate
    ) -> Project | None:
        """Set a milestone's status.

        Raises:
            EntryNotFoundError: If the project has no milestone with that id
        """
        return await self._mutate(
            project_id,
            "notes",
            lambda current: project_data.update_milestone_status(
                current, milestone_id, data.status.value, data.actual_date
            ),
            not_found="Milestone not found",
        )

    async def add_issue(
        self, project_id: UUID, data: IssueCreate, user: User
    ) -> tuple[Project, JSONDoc] | None:
        issue = Issue(
            title=data.title,
            description=data.description,
            severity=data.priority,
            category=data.category,
            assigned_to=data.assigned_to,
            reported_by=str(user.id),
        ).to_document()
        project = await self._mutate(
            project_id,
            "notes",
            lambda current: project_data.add_issue(current, issue),
        )
        return (project, issue) if project else None

    async def resolve_issue(
        self, project_id: UUID, issue_id: str, resolution: str, user: User
    ) -> Project | None:
        """Mark an issue resolved by the given user.

        Raises:
            EntryNotFoundError: If the project has no issue with that id
        """
        return await self._mutate(
            project_id,
            "notes",
            lambda current: project_data.resolve_issue(
                current, issue_id, resolution, str(user.id)
            ),
            not_found="Issue not found",
        )

    # --- Derived views ---

    async def analytics(self, project_id: UUID) -> ProjectAnalytics | None:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            return None

        settings = get_settings()
        gallery = (project.images or {}).get("gallery") or []
        return ProjectAnalytics(
            progress_percentage=project_data.get_progress_percentage(project.notes),
            active_issues_count=project_data.get_active_issues_count(project.notes),
            upcoming_milestones=project_data.get_upcoming_milestones(
                project.notes, settings.upcoming_milestone_days
            ),
            total_images=len(gallery),
            has_water_features=any(
                project_data.has_water_feature(project.specifications, feature)
                for feature in ANALYTICS_WATER_FEATURES
            ),
        )

    async def search(self, criteria: ProjectSearchRequest) -> list[Project]:
        """Projects matching every given criterion, capped at search_result_limit.

        Matching runs over the decoded documents with the same helpers the
        analytics use, so results are identical on every database backend.
        """
        limit = get_settings().search_result_limit
        matches: list[Project] = []
        for project in await self.project_repo.list_all():
            if self._matches(project, criteria):
                matches.append(project)
                if len(matches) >= limit:
                    break
        return matches

    @staticmethod
    def _matches(project: Project, criteria: ProjectSearchRequest) -> bool:
        specs = project.specifications
        if criteria.pool_type and not project_data.search_by_pool_type(specs, criteria.pool_type):
            return False
        if criteria.equipment and not project_data.search_by_equipment(specs, criteria.equipment):
            return False
        if criteria.water_features and not project_data.has_water_feature(
            specs, criteria.water_features
        ):
            return False
        if criteria.has_issues and project_data.get_active_issues_count(project.notes) == 0:
            return False
        if criteria.progress_range is not None:
            progress = project_data.get_progress_ratio(project.notes)
            if not criteria.progress_range.min <= progress <= criteria.progress_range.max:
                return False
        return True
