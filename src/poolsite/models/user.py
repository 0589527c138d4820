"""Back-office user model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.poolsite.models.base import utc_now
from src.poolsite.models.enums import UserRole


class User(SQLModel, table=True):
    """Admin or editor account for the CMS."""

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    hashed_password: str = Field(max_length=255)
    name: str = Field(max_length=255)
    role: str = Field(default=UserRole.ADMIN.value, max_length=50)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
