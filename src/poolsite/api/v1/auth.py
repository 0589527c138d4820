"""Authentication endpoints."""

from fastapi import APIRouter, HTTPException, Response, status
from starlette.requests import Request

from src.poolsite.api.dependencies import AuthServiceDep, CurrentUser
from src.poolsite.core.config import get_settings
from src.poolsite.core.rate_limit import limiter
from src.poolsite.schemas.auth import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    MeResponse,
    MessageResponse,
)
from src.poolsite.schemas.user import UserRead

router = APIRouter(prefix="/auth", tags=["auth"])

settings = get_settings()


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        200: {
            "description": "Successful authentication; the token is also set as a cookie",
            "content": {
                "application/json": {
                    "example": {
                        "message": "Login successful",
                        "user": {
                            "id": "2f1c7d9e-8a41-4b39-9b1a-3c0c2b4e5f60",
                            "email": "admin@example.com",
                            "name": "Admin",
                            "role": "admin",
                        },
                        "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "token_type": "bearer",
                    }
                }
            },
        },
        401: {"description": "Invalid credentials"},
        429: {"description": "Too many login attempts"},
    },
)
@limiter.limit(settings.login_rate_limit)
async def login(
    request: Request,
    response: Response,
    login_data: LoginRequest,
    service: AuthServiceDep,
) -> LoginResponse:
    """Authenticate with email and password.

    Returns the access token and sets it as an httponly cookie for the admin SPA.
    """
    result = await service.authenticate(login_data.email, login_data.password)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    user, access_token = result
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=access_token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite="strict",
    )
    return LoginResponse(user=UserRead.model_validate(user), access_token=access_token)


@router.post(
    "/logout",
    response_model=MessageResponse,
    responses={200: {"description": "Auth cookie cleared"}},
)
async def logout(response: Response) -> MessageResponse:
    """Clear the auth cookie. Bearer tokens stay valid until they expire."""
    response.delete_cookie(
        key=settings.auth_cookie_name,
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite="strict",
    )
    return MessageResponse(message="Logout successful")


@router.get(
    "/me",
    response_model=MeResponse,
    responses={
        200: {"description": "The authenticated user"},
        401: {"description": "Missing, invalid or expired token"},
    },
)
async def me(current_user: CurrentUser) -> MeResponse:
    return MeResponse(user=UserRead.model_validate(current_user))


@router.post(
    "/change-password",
    response_model=MessageResponse,
    responses={
        200: {"description": "Password changed"},
        400: {"description": "Current password is incorrect"},
        401: {"description": "Not authenticated"},
    },
)
async def change_password(
    data: ChangePasswordRequest,
    current_user: CurrentUser,
    service: AuthServiceDep,
) -> MessageResponse:
    changed = await service.change_password(
        current_user, data.current_password, data.new_password
    )
    if not changed:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Current password is incorrect",
        )
    return MessageResponse(message="Password changed successfully")
