"""Content sections: ordered building blocks of a professional info page."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from src.poolsite.api.dependencies import AdminUser, ContentServiceDep
from src.poolsite.models import ContentSection
from src.poolsite.schemas.common import DataResponse
from src.poolsite.schemas.content import (
    SectionCreate,
    SectionRead,
    SectionReorder,
    SectionUpdate,
)

router = APIRouter(prefix="/content-sections", tags=["content sections"])


async def _get_section_or_404(service: ContentServiceDep, section_id: UUID) -> ContentSection:
    section = await service.get_section(section_id)
    if section is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Section not found")
    return section


@router.get(
    "/page/{page_id}",
    response_model=DataResponse[list[SectionRead]],
    summary="Active sections of a page",
)
async def list_sections(
    page_id: UUID, service: ContentServiceDep
) -> DataResponse[list[SectionRead]]:
    sections = await service.list_sections(page_id)
    return DataResponse(data=[SectionRead.model_validate(s) for s in sections])


@router.get(
    "/{section_id}",
    response_model=DataResponse[SectionRead],
    responses={404: {"description": "Section not found"}},
)
async def get_section(section_id: UUID, service: ContentServiceDep) -> DataResponse[SectionRead]:
    section = await _get_section_or_404(service, section_id)
    return DataResponse(data=SectionRead.model_validate(section))


@router.post(
    "",
    response_model=DataResponse[SectionRead],
    status_code=status.HTTP_201_CREATED,
    responses={404: {"description": "Page not found"}},
)
async def create_section(
    data: SectionCreate, service: ContentServiceDep, _admin: AdminUser
) -> DataResponse[SectionRead]:
    try:
        section = await service.create_section(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return DataResponse(data=SectionRead.model_validate(section))


@router.put(
    "/reorder/{page_id}",
    response_model=DataResponse[list[SectionRead]],
    summary="Reorder sections",
    description="sort_order follows the position in section_ids; unknown ids are ignored.",
)
async def reorder_sections(
    page_id: UUID,
    data: SectionReorder,
    service: ContentServiceDep,
    _admin: AdminUser,
) -> DataResponse[list[SectionRead]]:
    sections = await service.reorder_sections(page_id, data.section_ids)
    return DataResponse(data=[SectionRead.model_validate(s) for s in sections])


@router.put(
    "/{section_id}",
    response_model=DataResponse[SectionRead],
    responses={404: {"description": "Section not found"}},
)
async def update_section(
    section_id: UUID,
    data: SectionUpdate,
    service: ContentServiceDep,
    _admin: AdminUser,
) -> DataResponse[SectionRead]:
    section = await _get_section_or_404(service, section_id)
    section = await service.update_section(section, data)
    return DataResponse(data=SectionRead.model_validate(section))


@router.delete(
    "/{section_id}",
    response_model=DataResponse[SectionRead],
    summary="Deactivate section",
    responses={404: {"description": "Section not found"}},
)
async def delete_section(
    section_id: UUID, service: ContentServiceDep, _admin: AdminUser
) -> DataResponse[SectionRead]:
    section = await _get_section_or_404(service, section_id)
    section = await service.deactivate_section(section)
    return DataResponse(data=SectionRead.model_validate(section))
