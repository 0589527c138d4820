"""Model exports.

Import from here: `from src.poolsite.models import User, Project`
"""

# Enums
from src.poolsite.models.enums import (
    ContactStatus,
    DocumentCategory,
    FollowUpStatus,
    IssueSeverity,
    IssueStatus,
    MediaType,
    MilestoneStatus,
    ProjectStatus,
    SectionType,
    UserRole,
)

# Tables
from src.poolsite.models.contact import Contact
from src.poolsite.models.content import (
    ContentCategory,
    ContentMedia,
    ContentSection,
    ContentTag,
    PageCategory,
    PageTag,
    ProfessionalInfoPage,
)
from src.poolsite.models.project import Project, ProjectUpdate
from src.poolsite.models.user import User

__all__ = [
    # Enums
    "ContactStatus",
    "DocumentCategory",
    "FollowUpStatus",
    "IssueSeverity",
    "IssueStatus",
    "MediaType",
    "MilestoneStatus",
    "ProjectStatus",
    "SectionType",
    "UserRole",
    # Tables
    "Contact",
    "ContentCategory",
    "ContentMedia",
    "ContentSection",
    "ContentTag",
    "PageCategory",
    "PageTag",
    "ProfessionalInfoPage",
    "Project",
    "ProjectUpdate",
    "User",
]
