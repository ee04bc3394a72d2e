"""User Schemas: staff account input, public user shape and login exchange."""

from pydantic import Field

from gastromed.core.domain_types import UserRole
from gastromed.schemas.base import CamelModel, ResponseModel, UtcTimestamp, partial_model


class UserCreate(CamelModel):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1)
    full_name: str = Field(min_length=1)
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    role: UserRole = UserRole.RECEPTIONIST
    is_active: bool = True


UserUpdate = partial_model(UserCreate, "UserUpdate")


class UserResponse(ResponseModel):
    """Public user shape: everything except the password hash."""
    id: str
    username: str
    full_name: str
    email: str
    role: UserRole
    is_active: bool
    created_at: UtcTimestamp


class LoginRequest(CamelModel):
    username: str
    password: str


class LoginResponse(CamelModel):
    user: UserResponse
    token: str
