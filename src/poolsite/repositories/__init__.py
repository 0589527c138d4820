"""Repository layer - data access abstraction."""

from src.poolsite.repositories.base import BaseRepository
from src.poolsite.repositories.contact import ContactRepository
from src.poolsite.repositories.content import (
    ContentSectionRepository,
    ProfessionalInfoPageRepository,
)
from src.poolsite.repositories.project import ProjectRepository, ProjectUpdateRepository
from src.poolsite.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "ContactRepository",
    "ContentSectionRepository",
    "ProfessionalInfoPageRepository",
    "ProjectRepository",
    "ProjectUpdateRepository",
    "UserRepository",
]
