"""Professional info pages (bilingual content pages for architects and builders)."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from src.poolsite.api.dependencies import AdminUser, ContentServiceDep
from src.poolsite.models import ProfessionalInfoPage
from src.poolsite.schemas.common import DataResponse
from src.poolsite.schemas.content import (
    PageCreate,
    PageRead,
    PageUpdate,
    PageWithSections,
    SectionRead,
)

router = APIRouter(prefix="/professional-info", tags=["professional info"])


async def _get_page_or_404(service: ContentServiceDep, page_id: UUID) -> ProfessionalInfoPage:
    page = await service.get_page(page_id)
    if page is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page not found")
    return page


@router.get(
    "",
    response_model=DataResponse[list[PageRead]],
    summary="List active pages",
)
async def list_pages(service: ContentServiceDep) -> DataResponse[list[PageRead]]:
    pages = await service.list_pages(active_only=True)
    return DataResponse(data=[PageRead.model_validate(p) for p in pages])


@router.get(
    "/admin/all",
    response_model=DataResponse[list[PageRead]],
    summary="List all pages",
    description="Includes deactivated pages.",
)
async def list_all_pages(
    service: ContentServiceDep, _admin: AdminUser
) -> DataResponse[list[PageRead]]:
    pages = await service.list_pages(active_only=False)
    return DataResponse(data=[PageRead.model_validate(p) for p in pages])


@router.get(
    "/{slug}",
    response_model=DataResponse[PageWithSections],
    summary="Get page by slug",
    description="Active page with its active sections in display order as content.",
    responses={404: {"description": "Page not found"}},
)
async def get_page(slug: str, service: ContentServiceDep) -> DataResponse[PageWithSections]:
    result = await service.get_published_page(slug)
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page not found")

    page, sections = result
    page_data = PageRead.model_validate(page).model_dump(exclude={"content"})
    return DataResponse(
        data=PageWithSections(
            **page_data,
            content=[SectionRead.model_validate(s) for s in sections],
        )
    )


@router.post(
    "",
    response_model=DataResponse[PageRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create page",
    responses={409: {"description": "Slug already in use"}},
)
async def create_page(
    data: PageCreate, service: ContentServiceDep, _admin: AdminUser
) -> DataResponse[PageRead]:
    try:
        page = await service.create_page(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return DataResponse(data=PageRead.model_validate(page))


@router.put(
    "/{page_id}",
    response_model=DataResponse[PageRead],
    summary="Update page",
    responses={
        404: {"description": "Page not found"},
        409: {"description": "Slug already in use"},
    },
)
async def update_page(
    page_id: UUID, data: PageUpdate, service: ContentServiceDep, _admin: AdminUser
) -> DataResponse[PageRead]:
    page = await _get_page_or_404(service, page_id)
    try:
        page = await service.update_page(page, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return DataResponse(data=PageRead.model_validate(page))


@router.delete(
    "/{page_id}",
    response_model=DataResponse[PageRead],
    summary="Deactivate page",
    description="Soft delete: the page is hidden from the public site but kept.",
    responses={404: {"description": "Page not found"}},
)
async def delete_page(
    page_id: UUID, service: ContentServiceDep, _admin: AdminUser
) -> DataResponse[PageRead]:
    page = await _get_page_or_404(service, page_id)
    page = await service.deactivate_page(page)
    return DataResponse(data=PageRead.model_validate(page))
