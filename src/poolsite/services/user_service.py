from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.poolsite.core.logging import get_logger
from src.poolsite.core.security import hash_password
from src.poolsite.models import User
from src.poolsite.models.base import utc_now
from src.poolsite.repositories import UserRepository
from src.poolsite.schemas.user import UserCreate, UserUpdate

logger = get_logger(__name__)


class UserService:
    """User management service."""

    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    async def get_by_id(self, user_id: UUID) -> User | None:
        """Get user by ID."""
        return await self.user_repo.get_by_id(user_id)

    async def list_users(self) -> list[User]:
        return await self.user_repo.list_all()

    async def create(self, data: UserCreate) -> User:
        """Create a back-office user.

        Raises:
            ValueError: If the email is already registered
        """
        if await self.user_repo.exists_by_email(data.email):
            raise ValueError("User with this email already exists")

        try:
            user = User(
                email=data.email,
                hashed_password=hash_password(data.password),
                name=data.name,
                role=data.role.value,
            )
            self.user_repo.add(user)
            await self.session.commit()
            await self.session.refresh(user)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("User created", user_id=str(user.id), role=user.role)
        return user

    async def update(self, user: User, data: UserUpdate) -> User:
        """Update user with provided data.

        Raises:
            ValueError: If the new email belongs to another user
        """
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)

        new_email = update_data.get("email")
        if new_email and new_email != user.email:
            if await self.user_repo.exists_by_email(new_email):
                raise ValueError("User with this email already exists")

        if "role" in update_data:
            update_data["role"] = update_data["role"].value

        try:
            for field, value in update_data.items():
                setattr(user, field, value)
            user.updated_at = utc_now()
            self.session.add(user)
            await self.session.commit()
            await self.session.refresh(user)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("User updated", user_id=str(user.id), fields=sorted(update_data))
        return user
