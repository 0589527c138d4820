"""Project endpoints: portfolio listing, CRUD and timeline updates."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from src.poolsite.api.dependencies import AdminUser, ProjectServiceDep
from src.poolsite.core.config import get_settings
from src.poolsite.models import Project
from src.poolsite.models.enums import ProjectStatus
from src.poolsite.schemas.pagination import PaginatedResponse
from src.poolsite.schemas.project import (
    ProjectCreate,
    ProjectDetail,
    ProjectPublicRead,
    ProjectRead,
    ProjectUpdate,
    ProjectUpdateCreate,
    ProjectUpdateRead,
)

router = APIRouter(prefix="/projects", tags=["projects"])


async def _get_project_or_404(service: ProjectServiceDep, project_id: UUID) -> Project:
    project = await service.get(project_id)
    if project is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found",
        )
    return project


@router.get(
    "",
    response_model=PaginatedResponse[ProjectRead],
    summary="List projects",
    description="Newest first, with cursor-based pagination. Admin only.",
    responses={200: {"description": "Paginated list of projects"}},
)
async def list_projects(
    service: ProjectServiceDep,
    _admin: AdminUser,
    cursor: Annotated[str | None, Query(description="Cursor for pagination")] = None,
    limit: Annotated[int, Query(ge=1, le=100, description="Max items to return")] = 20,
    status_filter: Annotated[ProjectStatus | None, Query(alias="status")] = None,
    search: Annotated[
        str | None,
        Query(max_length=255, description="Matches title, client name or client email"),
    ] = None,
) -> PaginatedResponse[ProjectRead]:
    try:
        projects, next_cursor, has_more = await service.list_projects(
            cursor,
            limit,
            status=status_filter.value if status_filter else None,
            search=search,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return PaginatedResponse(
        items=[ProjectRead.model_validate(p) for p in projects],
        next_cursor=next_cursor,
        has_more=has_more,
    )


@router.get(
    "/public/list",
    response_model=list[ProjectPublicRead],
    summary="Public portfolio",
    description="Public projects for the website, featured first. No authentication.",
)
async def list_public_projects(
    service: ProjectServiceDep,
    limit: Annotated[int | None, Query(ge=1, le=50)] = None,
    featured: Annotated[bool, Query(description="Only featured projects")] = False,
) -> list[ProjectPublicRead]:
    limit = limit or get_settings().public_projects_default_limit
    projects = await service.list_public(limit, featured_only=featured)
    return [ProjectPublicRead.model_validate(p) for p in projects]


@router.get(
    "/{project_id}",
    response_model=ProjectDetail,
    summary="Get project",
    description="Project with its timeline updates, newest first.",
    responses={
        200: {"description": "Project details"},
        404: {"description": "Project not found"},
    },
)
async def get_project(
    project_id: UUID,
    service: ProjectServiceDep,
    _admin: AdminUser,
) -> ProjectDetail:
    result = await service.get_with_updates(project_id)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found",
        )

    project, updates = result
    return ProjectDetail(
        **ProjectRead.model_validate(project).model_dump(),
        updates=[ProjectUpdateRead.model_validate(u) for u in updates],
    )


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description="The slug is generated from the title.",
    responses={
        201: {"description": "Project created"},
        409: {"description": "A project with this title already exists"},
    },
)
async def create_project(
    data: ProjectCreate,
    service: ProjectServiceDep,
    admin: AdminUser,
) -> ProjectRead:
    try:
        project = await service.create(data, admin)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return ProjectRead.model_validate(project)


@router.put(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    description="Partial update; a new title regenerates the slug.",
    responses={
        200: {"description": "Project updated"},
        404: {"description": "Project not found"},
        409: {"description": "A project with this title already exists"},
    },
)
async def update_project(
    project_id: UUID,
    data: ProjectUpdate,
    service: ProjectServiceDep,
    _admin: AdminUser,
) -> ProjectRead:
    project = await _get_project_or_404(service, project_id)
    try:
        project = await service.update(project, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    description="Deletes the project and its timeline updates.",
    responses={
        204: {"description": "Project deleted"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(
    project_id: UUID,
    service: ProjectServiceDep,
    _admin: AdminUser,
) -> None:
    project = await _get_project_or_404(service, project_id)
    await service.delete(project)


@router.post(
    "/{project_id}/updates",
    response_model=ProjectUpdateRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add timeline update",
    description="A status on the update is copied to the project.",
    responses={
        201: {"description": "Update recorded"},
        404: {"description": "Project not found"},
    },
)
async def add_project_update(
    project_id: UUID,
    data: ProjectUpdateCreate,
    service: ProjectServiceDep,
    admin: AdminUser,
) -> ProjectUpdateRead:
    project = await _get_project_or_404(service, project_id)
    update = await service.add_update(project, data, admin)
    return ProjectUpdateRead.model_validate(update)
