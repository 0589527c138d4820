from fastapi import APIRouter

from src.poolsite.api.v1 import (
    admin,
    auth,
    contacts,
    content_sections,
    professional_info,
    project_documents,
    projects,
)

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth.router)
api_router.include_router(projects.router)
api_router.include_router(project_documents.router)
api_router.include_router(contacts.router)
api_router.include_router(admin.router)
api_router.include_router(professional_info.router)
api_router.include_router(content_sections.router)
