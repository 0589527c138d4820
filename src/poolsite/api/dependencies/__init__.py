"""FastAPI dependency injection definitions."""

from src.poolsite.api.dependencies.auth import (
    AdminUser,
    CurrentUser,
    get_current_user,
    require_admin,
)
from src.poolsite.api.dependencies.db import DBSession, get_db_session
from src.poolsite.api.dependencies.repositories import (
    ContactRepo,
    PageRepo,
    ProjectRepo,
    ProjectUpdateRepo,
    SectionRepo,
    UserRepo,
)
from src.poolsite.api.dependencies.services import (
    AdminServiceDep,
    AuthServiceDep,
    ContactServiceDep,
    ContentServiceDep,
    ProjectDataServiceDep,
    ProjectServiceDep,
    UserServiceDep,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "AdminUser",
    "CurrentUser",
    "get_current_user",
    "require_admin",
    # Repositories
    "ContactRepo",
    "PageRepo",
    "ProjectRepo",
    "ProjectUpdateRepo",
    "SectionRepo",
    "UserRepo",
    # Services
    "AdminServiceDep",
    "AuthServiceDep",
    "ContactServiceDep",
    "ContentServiceDep",
    "ProjectDataServiceDep",
    "ProjectServiceDep",
    "UserServiceDep",
]
