from src.poolsite.schemas.auth import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    MeResponse,
    MessageResponse,
)
from src.poolsite.schemas.common import DataResponse
from src.poolsite.schemas.pagination import PaginatedResponse
from src.poolsite.schemas.user import UserCreate, UserRead, UserUpdate

__all__ = [
    # Auth
    "ChangePasswordRequest",
    "LoginRequest",
    "LoginResponse",
    "MeResponse",
    "MessageResponse",
    # Envelopes
    "DataResponse",
    "PaginatedResponse",
    # User
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
