"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.poolsite.api.dependencies.db import DBSession
from src.poolsite.api.dependencies.repositories import (
    ContactRepo,
    PageRepo,
    ProjectRepo,
    ProjectUpdateRepo,
    SectionRepo,
    UserRepo,
)
from src.poolsite.services import (
    AdminService,
    AuthService,
    ContactService,
    ContentService,
    ProjectDataService,
    ProjectService,
    UserService,
)


def get_user_service(user_repo: UserRepo, session: DBSession) -> UserService:
    return UserService(user_repo, session)


def get_auth_service(user_repo: UserRepo, session: DBSession) -> AuthService:
    return AuthService(user_repo, session)


def get_project_service(
    project_repo: ProjectRepo,
    update_repo: ProjectUpdateRepo,
    session: DBSession,
) -> ProjectService:
    return ProjectService(project_repo, update_repo, session)


def get_project_data_service(project_repo: ProjectRepo, session: DBSession) -> ProjectDataService:
    """Service for the JSON document routes (specifications, images, notes...)."""
    return ProjectDataService(project_repo, session)


def get_contact_service(
    contact_repo: ContactRepo,
    user_repo: UserRepo,
    session: DBSession,
) -> ContactService:
    return ContactService(contact_repo, user_repo, session)


def get_content_service(
    page_repo: PageRepo,
    section_repo: SectionRepo,
    session: DBSession,
) -> ContentService:
    return ContentService(page_repo, section_repo, session)


def get_admin_service(
    project_repo: ProjectRepo,
    contact_repo: ContactRepo,
    session: DBSession,
) -> AdminService:
    return AdminService(project_repo, contact_repo, session)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
ProjectDataServiceDep = Annotated[ProjectDataService, Depends(get_project_data_service)]
ContactServiceDep = Annotated[ContactService, Depends(get_contact_service)]
ContentServiceDep = Annotated[ContentService, Depends(get_content_service)]
AdminServiceDep = Annotated[AdminService, Depends(get_admin_service)]
