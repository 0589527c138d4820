"""Authentication and authorization dependencies."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, Request, status

from src.poolsite.api.dependencies.services import UserServiceDep
from src.poolsite.core.config import get_settings
from src.poolsite.core.logging import bind_user_context
from src.poolsite.core.security import decode_token
from src.poolsite.models import User, UserRole
from src.poolsite.services.auth_service import TokenType


def _extract_token(authorization: str | None, cookie_token: str | None) -> str | None:
    """Bearer header first, then the auth cookie set at login."""
    if authorization:
        if not authorization.startswith("Bearer "):
            return None
        return authorization[7:]
    return cookie_token


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


async def get_current_user(
    request: Request,
    user_service: UserServiceDep,
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Validate the access token and return the active user it belongs to.

    The token comes from the ``Authorization: Bearer`` header or, for the
    admin SPA, from the httponly cookie named by ``auth_cookie_name``.
    """
    cookie_token = request.cookies.get(get_settings().auth_cookie_name)
    raw = _extract_token(authorization, cookie_token)
    if not raw:
        raise _unauthorized("Not authenticated")

    payload = decode_token(raw)
    if payload is None:
        raise _unauthorized("Invalid or expired token")

    if payload.get("type") != TokenType.ACCESS:
        raise _unauthorized("Invalid token type")

    try:
        user_id = UUID(str(payload.get("sub")))
    except ValueError as e:
        raise _unauthorized("Invalid token payload") from e

    user = await user_service.get_by_id(user_id)
    if user is None or not user.is_active:
        raise _unauthorized("User not found or inactive")

    bind_user_context(user.id, user.role)
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


async def require_admin(current_user: CurrentUser) -> User:
    """Require the admin role; editors get 403."""
    if current_user.role != UserRole.ADMIN.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


AdminUser = Annotated[User, Depends(require_admin)]
