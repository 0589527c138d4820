"""Repositories for professional info pages and content sections."""

from uuid import UUID

from sqlmodel import col, select

from src.poolsite.models import ContentSection, ProfessionalInfoPage
from src.poolsite.repositories.base import BaseRepository


class ProfessionalInfoPageRepository(BaseRepository[ProfessionalInfoPage]):
    model = ProfessionalInfoPage

    async def list_pages(self, active_only: bool = True) -> list[ProfessionalInfoPage]:
        """Pages ordered by sort_order."""
        query = select(ProfessionalInfoPage)
        if active_only:
            query = query.where(ProfessionalInfoPage.is_active == True)  # noqa: E712
        query = query.order_by(col(ProfessionalInfoPage.sort_order))
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_active_by_slug(self, slug: str) -> ProfessionalInfoPage | None:
        result = await self.session.execute(
            select(ProfessionalInfoPage).where(
                ProfessionalInfoPage.slug == slug,
                ProfessionalInfoPage.is_active == True,  # noqa: E712
            )
        )
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> ProfessionalInfoPage | None:
        result = await self.session.execute(
            select(ProfessionalInfoPage).where(ProfessionalInfoPage.slug == slug)
        )
        return result.scalar_one_or_none()


class ContentSectionRepository(BaseRepository[ContentSection]):
    model = ContentSection

    async def list_active_for_page(self, page_id: UUID) -> list[ContentSection]:
        """Active sections of a page in display order."""
        query = (
            select(ContentSection)
            .where(
                ContentSection.page_id == page_id,
                ContentSection.is_active == True,  # noqa: E712
            )
            .order_by(col(ContentSection.sort_order))
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_many_for_page(
        self, page_id: UUID, section_ids: list[UUID]
    ) -> dict[UUID, ContentSection]:
        """Sections of one page keyed by id; ids from other pages are left out."""
        if not section_ids:
            return {}
        query = select(ContentSection).where(
            ContentSection.page_id == page_id,
            col(ContentSection.id).in_(section_ids),
        )
        result = await self.session.execute(query)
        return {section.id: section for section in result.scalars().all()}
