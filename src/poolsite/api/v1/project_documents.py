"""Routes over the JSON documents stored on a project.

Every mutation rewrites one whole column (specifications, images, documents
or notes) and answers ``{"success": true, <entity>, <column>}``.
"""

from typing import NoReturn
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from src.poolsite.api.dependencies import AdminUser, ProjectDataServiceDep
from src.poolsite.models import Project
from src.poolsite.models.enums import DocumentCategory
from src.poolsite.schemas.project_data import (
    CommunicationAddedResponse,
    CommunicationCreate,
    DocumentAddedResponse,
    DocumentsResponse,
    GalleryImageCreate,
    ImageAddedResponse,
    ImagesResponse,
    InternalNoteCreate,
    IssueAddedResponse,
    IssueCreate,
    IssueResolve,
    MilestoneAddedResponse,
    MilestoneCreate,
    MilestoneStatusUpdate,
    NoteAddedResponse,
    NotesResponse,
    PoolSpecifications,
    ProgressImageCreate,
    ProjectAnalytics,
    ProjectDocumentCreate,
    ProjectSearchRequest,
    ProjectSearchResult,
    SpecificationsResponse,
)
from src.poolsite.services import EntryNotFoundError

router = APIRouter(prefix="/projects", tags=["project documents"])

_NOT_FOUND = {404: {"description": "Project not found"}}


def _project_not_found() -> NoReturn:
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")


def _found(project: Project | None) -> Project:
    if project is None:
        _project_not_found()
    return project


# --- Specifications ---


@router.put(
    "/{project_id}/specifications",
    response_model=SpecificationsResponse,
    summary="Replace specifications",
    responses=_NOT_FOUND,
)
async def replace_specifications(
    project_id: UUID,
    data: PoolSpecifications,
    service: ProjectDataServiceDep,
    _admin: AdminUser,
) -> SpecificationsResponse:
    project = _found(await service.replace_specifications(project_id, data))
    return SpecificationsResponse(specifications=project.specifications)


@router.patch(
    "/{project_id}/specifications",
    response_model=SpecificationsResponse,
    summary="Merge specifications",
    description="Top-level sections in the body replace the stored ones; others are kept.",
    responses=_NOT_FOUND,
)
async def merge_specifications(
    project_id: UUID,
    data: PoolSpecifications,
    service: ProjectDataServiceDep,
    _admin: AdminUser,
) -> SpecificationsResponse:
    project = _found(await service.merge_specifications(project_id, data))
    return SpecificationsResponse(specifications=project.specifications)


# --- Images ---


@router.post(
    "/{project_id}/images/gallery",
    response_model=ImageAddedResponse,
    summary="Add gallery image",
    responses=_NOT_FOUND,
)
async def add_gallery_image(
    project_id: UUID,
    data: GalleryImageCreate,
    service: ProjectDataServiceDep,
    admin: AdminUser,
) -> ImageAddedResponse:
    result = await service.add_gallery_image(project_id, data, admin)
    if result is None:
        _project_not_found()
    project, image = result
    return ImageAddedResponse(image=image, images=project.images)


@router.delete(
    "/{project_id}/images/gallery/{image_id}",
    response_model=ImagesResponse,
    summary="Remove gallery image",
    description="Unknown image ids are ignored. Emptying every list clears the column.",
    responses=_NOT_FOUND,
)
async def remove_gallery_image(
    project_id: UUID,
    image_id: str,
    service: ProjectDataServiceDep,
    _admin: AdminUser,
) -> ImagesResponse:
    project = _found(await service.remove_gallery_image(project_id, image_id))
    return ImagesResponse(images=project.images)


@router.post(
    "/{project_id}/images/progress",
    response_model=ImageAddedResponse,
    summary="Add construction progress image",
    responses=_NOT_FOUND,
)
async def add_progress_image(
    project_id: UUID,
    data: ProgressImageCreate,
    service: ProjectDataServiceDep,
    admin: AdminUser,
) -> ImageAddedResponse:
    result = await service.add_progress_image(project_id, data, admin)
    if result is None:
        _project_not_found()
    project, image = result
    return ImageAddedResponse(image=image, images=project.images)


# --- Documents ---


@router.post(
    "/{project_id}/documents/{category}",
    response_model=DocumentAddedResponse,
    summary="Add document",
    responses=_NOT_FOUND,
)
async def add_document(
    project_id: UUID,
    category: DocumentCategory,
    data: ProjectDocumentCreate,
    service: ProjectDataServiceDep,
    admin: AdminUser,
) -> DocumentAddedResponse:
    result = await service.add_document(project_id, category.value, data, admin)
    if result is None:
        _project_not_found()
    project, document = result
    return DocumentAddedResponse(document=document, documents=project.documents)


@router.delete(
    "/{project_id}/documents/{category}/{document_id}",
    response_model=DocumentsResponse,
    summary="Remove document",
    responses=_NOT_FOUND,
)
async def remove_document(
    project_id: UUID,
    category: DocumentCategory,
    document_id: str,
    service: ProjectDataServiceDep,
    _admin: AdminUser,
) -> DocumentsResponse:
    project = _found(await service.remove_document(project_id, category.value, document_id))
    return DocumentsResponse(documents=project.documents)


# --- Notes ---


@router.post(
    "/{project_id}/notes/internal",
    response_model=NoteAddedResponse,
    summary="Add internal note",
    responses=_NOT_FOUND,
)
async def add_internal_note(
    project_id: UUID,
    data: InternalNoteCreate,
    service: ProjectDataServiceDep,
    admin: AdminUser,
) -> NoteAddedResponse:
    result = await service.add_internal_note(project_id, data, admin)
    if result is None:
        _project_not_found()
    project, note = result
    return NoteAddedResponse(note=note, notes=project.notes)


@router.post(
    "/{project_id}/notes/communication",
    response_model=CommunicationAddedResponse,
    summary="Log client communication",
    responses=_NOT_FOUND,
)
async def add_communication(
    project_id: UUID,
    data: CommunicationCreate,
    service: ProjectDataServiceDep,
    admin: AdminUser,
) -> CommunicationAddedResponse:
    result = await service.add_communication(project_id, data, admin)
    if result is None:
        _project_not_found()
    project, communication = result
    return CommunicationAddedResponse(communication=communication, notes=project.notes)


@router.post(
    "/{project_id}/milestones",
    response_model=MilestoneAddedResponse,
    summary="Add milestone",
    responses=_NOT_FOUND,
)
async def add_milestone(
    project_id: UUID,
    data: MilestoneCreate,
    service: ProjectDataServiceDep,
    admin: AdminUser,
) -> MilestoneAddedResponse:
    result = await service.add_milestone(project_id, data, admin)
    if result is None:
        _project_not_found()
    project, milestone = result
    return MilestoneAddedResponse(milestone=milestone, notes=project.notes)


@router.put(
    "/{project_id}/milestones/{milestone_id}",
    response_model=NotesResponse,
    summary="Update milestone status",
    responses={404: {"description": "Project or milestone not found"}},
)
async def update_milestone(
    project_id: UUID,
    milestone_id: str,
    data: MilestoneStatusUpdate,
    service: ProjectDataServiceDep,
    _admin: AdminUser,
) -> NotesResponse:
    try:
        project = _found(await service.update_milestone(project_id, milestone_id, data))
    except EntryNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return NotesResponse(notes=project.notes)


@router.post(
    "/{project_id}/issues",
    response_model=IssueAddedResponse,
    summary="Report issue",
    responses=_NOT_FOUND,
)
async def add_issue(
    project_id: UUID,
    data: IssueCreate,
    service: ProjectDataServiceDep,
    admin: AdminUser,
) -> IssueAddedResponse:
    result = await service.add_issue(project_id, data, admin)
    if result is None:
        _project_not_found()
    project, issue = result
    return IssueAddedResponse(issue=issue, notes=project.notes)


@router.put(
    "/{project_id}/issues/{issue_id}/resolve",
    response_model=NotesResponse,
    summary="Resolve issue",
    responses={404: {"description": "Project or issue not found"}},
)
async def resolve_issue(
    project_id: UUID,
    issue_id: str,
    data: IssueResolve,
    service: ProjectDataServiceDep,
    admin: AdminUser,
) -> NotesResponse:
    try:
        project = _found(
            await service.resolve_issue(project_id, issue_id, data.resolution, admin)
        )
    except EntryNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return NotesResponse(notes=project.notes)


# --- Derived views ---


@router.get(
    "/{project_id}/analytics",
    response_model=ProjectAnalytics,
    summary="Project analytics",
    description="Progress, active issues, milestones due soon and gallery size.",
    responses=_NOT_FOUND,
)
async def get_analytics(
    project_id: UUID,
    service: ProjectDataServiceDep,
    _admin: AdminUser,
) -> ProjectAnalytics:
    analytics = await service.analytics(project_id)
    if analytics is None:
        _project_not_found()
    return analytics


@router.post(
    "/search",
    response_model=list[ProjectSearchResult],
    summary="Search projects by document contents",
    description="All given criteria must match. Results are capped by search_result_limit.",
)
async def search_projects(
    criteria: ProjectSearchRequest,
    service: ProjectDataServiceDep,
    _admin: AdminUser,
) -> list[ProjectSearchResult]:
    projects = await service.search(criteria)
    return [ProjectSearchResult.model_validate(p) for p in projects]
