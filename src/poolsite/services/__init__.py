from src.poolsite.services.admin_service import AdminService
from src.poolsite.services.auth_service import AuthService
from src.poolsite.services.contact_service import ContactService
from src.poolsite.services.content_service import ContentService
from src.poolsite.services.project_data_service import EntryNotFoundError, ProjectDataService
from src.poolsite.services.project_service import ProjectService
from src.poolsite.services.user_service import UserService

__all__ = [
    "AdminService",
    "AuthService",
    "ContactService",
    "ContentService",
    "EntryNotFoundError",
    "ProjectDataService",
    "ProjectService",
    "UserService",
]
