"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.poolsite.api.dependencies.db import DBSession
from src.poolsite.repositories import (
    ContactRepository,
    ContentSectionRepository,
    ProfessionalInfoPageRepository,
    ProjectRepository,
    ProjectUpdateRepository,
    UserRepository,
)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_project_update_repository(session: DBSession) -> ProjectUpdateRepository:
    return ProjectUpdateRepository(session)


def get_contact_repository(session: DBSession) -> ContactRepository:
    return ContactRepository(session)


def get_page_repository(session: DBSession) -> ProfessionalInfoPageRepository:
    return ProfessionalInfoPageRepository(session)


def get_section_repository(session: DBSession) -> ContentSectionRepository:
    return ContentSectionRepository(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
ProjectUpdateRepo = Annotated[ProjectUpdateRepository, Depends(get_project_update_repository)]
ContactRepo = Annotated[ContactRepository, Depends(get_contact_repository)]
PageRepo = Annotated[ProfessionalInfoPageRepository, Depends(get_page_repository)]
SectionRepo = Annotated[ContentSectionRepository, Depends(get_section_repository)]
