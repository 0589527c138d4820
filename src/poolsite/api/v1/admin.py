"""Admin dashboard and back-office user management."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from src.poolsite.api.dependencies import AdminServiceDep, AdminUser, UserServiceDep
from src.poolsite.schemas.admin import DashboardStats
from src.poolsite.schemas.user import UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get(
    "/stats",
    response_model=DashboardStats,
    summary="Dashboard statistics",
    description=(
        "Project and contact counts by status, the five newest of each, "
        "projects per pool type and project creations per month over the last year."
    ),
)
async def get_stats(service: AdminServiceDep, _admin: AdminUser) -> DashboardStats:
    return await service.dashboard_stats()


@router.get("/users", response_model=list[UserRead], summary="List users")
async def list_users(service: UserServiceDep, _admin: AdminUser) -> list[UserRead]:
    users = await service.list_users()
    return [UserRead.model_validate(u) for u in users]


@router.post(
    "/users",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    responses={409: {"description": "Email already registered"}},
)
async def create_user(
    data: UserCreate,
    service: UserServiceDep,
    _admin: AdminUser,
) -> UserRead:
    try:
        user = await service.create(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return UserRead.model_validate(user)


@router.put(
    "/users/{user_id}",
    response_model=UserRead,
    summary="Update user",
    responses={
        404: {"description": "User not found"},
        409: {"description": "Email already registered"},
    },
)
async def update_user(
    user_id: UUID,
    data: UserUpdate,
    service: UserServiceDep,
    _admin: AdminUser,
) -> UserRead:
    user = await service.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    try:
        user = await service.update(user, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return UserRead.model_validate(user)
