"""Authentication service - login and password changes."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.poolsite.core.logging import get_logger
from src.poolsite.core.security import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    hash_password,
    verify_password,
)
from src.poolsite.models import User
from src.poolsite.models.base import utc_now
from src.poolsite.repositories import UserRepository

logger = get_logger(__name__)


class TokenType:
    """Token type constants."""

    ACCESS = "access"


class AuthService:
    """Authentication service - validates credentials and issues access tokens."""

    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    async def authenticate(self, email: str, password: str) -> tuple[User, str] | None:
        """Check credentials and return (user, access_token).

        Returns None when the email is unknown, the password is wrong or the
        account is deactivated.
        """
        user = await self.user_repo.get_by_email(email)

        # Always verify so response timing does not reveal whether the email exists
        password_hash = user.hashed_password if user else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if user is None or not password_valid:
            logger.info("Login failed", reason="invalid_credentials")
            return None

        if not user.is_active:
            logger.info("Login failed", reason="inactive", user_id=str(user.id))
            return None

        token = create_access_token(user.id, user.email, user.role)
        logger.info("Login succeeded", user_id=str(user.id))
        return user, token

    async def change_password(self, user: User, current_password: str, new_password: str) -> bool:
        """Replace the user's password. Returns False if current_password is wrong."""
        if not verify_password(current_password, user.hashed_password):
            return False

        try:
            user.hashed_password = hash_password(new_password)
            user.updated_at = utc_now()
            self.session.add(user)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Password changed", user_id=str(user.id))
        return True
