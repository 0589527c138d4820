from pydantic import BaseModel, EmailStr, Field

from src.poolsite.schemas.user import UserRead


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    message: str = "Login successful"
    user: UserRead
    access_token: str
    token_type: str = "bearer"


class MeResponse(BaseModel):
    user: UserRead


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6, max_length=100)


class MessageResponse(BaseModel):
    message: str
