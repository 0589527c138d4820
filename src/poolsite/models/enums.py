"""Shared enums for models and JSON documents."""

from enum import Enum


class UserRole(str, Enum):
    """Back-office user role."""

    ADMIN = "admin"
    EDITOR = "editor"


class ProjectStatus(str, Enum):
    """Construction project lifecycle."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ContactStatus(str, Enum):
    """Lead pipeline status for contact form submissions."""

    NEW = "new"
    CONTACTED = "contacted"
    QUALIFIED = "qualified"
    CONVERTED = "converted"


class MilestoneStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    DELAYED = "delayed"
    CANCELLED = "cancelled"


class IssueSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class IssueStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class FollowUpStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    OVERDUE = "overdue"


class DocumentCategory(str, Enum):
    """Named lists inside a project's documents column."""

    CONTRACTS = "contracts"
    PERMITS = "permits"
    TECHNICAL = "technical"
    FINANCIAL = "financial"


class SectionType(str, Enum):
    """Content section renderers on professional info pages."""

    HERO = "hero"
    TEXT = "text"
    IMAGE = "image"
    GALLERY = "gallery"
    VIDEO = "video"
    LIST = "list"
    TABLE = "table"
    CTA = "cta"


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    DOCUMENT = "document"
