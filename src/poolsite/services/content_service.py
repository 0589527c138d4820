"""Professional info pages and their content sections."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.poolsite.core.logging import get_logger
from src.poolsite.models import ContentSection, ProfessionalInfoPage
from src.poolsite.models.base import utc_now
from src.poolsite.repositories import ContentSectionRepository, ProfessionalInfoPageRepository
from src.poolsite.schemas.content import (
    PageCreate,
    PageUpdate,
    SectionCreate,
    SectionUpdate,
)

logger = get_logger(__name__)


class ContentService:
    """CMS operations for pages and sections. Deletes are soft (is_active=False)."""

    def __init__(
        self,
        page_repo: ProfessionalInfoPageRepository,
        section_repo: ContentSectionRepository,
        session: AsyncSession,
    ):
        self.page_repo = page_repo
        self.section_repo = section_repo
        self.session = session

    async def _commit(self, *entities: ProfessionalInfoPage | ContentSection) -> None:
        try:
            for entity in entities:
                self.session.add(entity)
            await self.session.commit()
            for entity in entities:
                await self.session.refresh(entity)
        except Exception:
            await self.session.rollback()
            raise

    # --- Pages ---

    async def list_pages(self, active_only: bool = True) -> list[ProfessionalInfoPage]:
        return await self.page_repo.list_pages(active_only)

    async def get_page(self, page_id: UUID) -> ProfessionalInfoPage | None:
        return await self.page_repo.get_by_id(page_id)

    async def get_published_page(
        self, slug: str
    ) -> tuple[ProfessionalInfoPage, list[ContentSection]] | None:
        """Active page by slug with its active sections in display order."""
        page = await self.page_repo.get_active_by_slug(slug)
        if page is None:
            return None
        sections = await self.section_repo.list_active_for_page(page.id)
        return page, sections

    async def create_page(self, data: PageCreate) -> ProfessionalInfoPage:
        """Raises ValueError if the slug is taken."""
        if await self.page_repo.get_by_slug(data.slug) is not None:
            raise ValueError("A page with this slug already exists")

        page = ProfessionalInfoPage(**data.model_dump())
        await self._commit(page)
        logger.info("Page created", page_id=str(page.id), slug=page.slug)
        return page

    async def update_page(
        self, page: ProfessionalInfoPage, data: PageUpdate
    ) -> ProfessionalInfoPage:
        """Raises ValueError if the new slug belongs to another page."""
        update_data = data.model_dump(exclude_unset=True)
        new_slug = update_data.get("slug")
        if new_slug and new_slug != page.slug:
            if await self.page_repo.get_by_slug(new_slug) is not None:
                raise ValueError("A page with this slug already exists")

        for field, value in update_data.items():
            if value is None and field in {"slug", "title", "title_en", "content", "is_active"}:
                continue
            setattr(page, field, value)
        page.updated_at = utc_now()
        await self._commit(page)
        logger.info("Page updated", page_id=str(page.id), fields=sorted(update_data))
        return page

    async def deactivate_page(self, page: ProfessionalInfoPage) -> ProfessionalInfoPage:
        page.is_active = False
        page.updated_at = utc_now()
        await self._commit(page)
        logger.info("Page deactivated", page_id=str(page.id))
        return page

    # --- Sections ---

    async def list_sections(self, page_id: UUID) -> list[ContentSection]:
        return await self.section_repo.list_active_for_page(page_id)

    async def get_section(self, section_id: UUID) -> ContentSection | None:
        return await self.section_repo.get_by_id(section_id)

    async def create_section(self, data: SectionCreate) -> ContentSection:
        """Raises ValueError if the page does not exist."""
        if await self.page_repo.get_by_id(data.page_id) is None:
            raise ValueError("Page not found")

        section = ContentSection(
            **data.model_dump(exclude={"section_type"}),
            section_type=data.section_type.value,
        )
        await self._commit(section)
        logger.info("Section created", section_id=str(section.id), page_id=str(data.page_id))
        return section

    async def update_section(self, section: ContentSection, data: SectionUpdate) -> ContentSection:
        update_data = data.model_dump(exclude_unset=True)
        if update_data.get("section_type") is not None:
            update_data["section_type"] = update_data["section_type"].value

        for field, value in update_data.items():
            if value is None and field in {"section_type", "content", "sort_order", "is_active"}:
                continue
            setattr(section, field, value)
        section.updated_at = utc_now()
        await self._commit(section)
        logger.info("Section updated", section_id=str(section.id), fields=sorted(update_data))
        return section

    async def deactivate_section(self, section: ContentSection) -> ContentSection:
        section.is_active = False
        section.updated_at = utc_now()
        await self._commit(section)
        logger.info("Section deactivated", section_id=str(section.id))
        return section

    async def reorder_sections(
        self, page_id: UUID, section_ids: list[UUID]
    ) -> list[ContentSection]:
        """Set sort_order from list position. Ids not on this page are ignored.

        Returns the page's active sections in their new order.
        """
        sections = await self.section_repo.get_many_for_page(page_id, section_ids)
        now = utc_now()
        for position, section_id in enumerate(section_ids):
            section = sections.get(section_id)
            if section is not None:
                section.sort_order = position
                section.updated_at = now

        try:
            for section in sections.values():
                self.session.add(section)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Sections reordered", page_id=str(page_id), count=len(sections))
        return await self.section_repo.list_active_for_page(page_id)
