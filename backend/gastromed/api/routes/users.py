"""User Routes: staff directory and account administration.

Invariants:
    - Listing returns active users only, optionally filtered by role
    - Passwords are hashed before storage and never returned
    - Account administration needs an authenticated doctor even when auth is optional
"""

from fastapi import APIRouter, Depends, Query, status

from gastromed.api.dependencies import get_user_repository, require
from gastromed.core.domain_types import UserRole
from gastromed.core.errors import ResourceNotFoundError
from gastromed.core.permissions import Capability
from gastromed.core.repository_protocols import UserRepository
from gastromed.schemas.user import UserCreate, UserResponse, UserUpdate
from gastromed.services.accounts import register_user, update_user

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get(
    "", response_model=list[UserResponse],
    dependencies=[Depends(require(Capability.READ))],
)
async def list_users(
    role: UserRole | None = Query(None),
    users: UserRepository = Depends(get_user_repository),
):
    return await users.list(role.value if role else None)


@router.get(
    "/{user_id}", response_model=UserResponse,
    dependencies=[Depends(require(Capability.READ))],
)
async def get_user(
    user_id: str, users: UserRepository = Depends(get_user_repository),
):
    user = await users.get_by_id(user_id)
    if user is None:
        raise ResourceNotFoundError("User", user_id)
    return user


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require(Capability.MANAGE_USERS, always_authenticated=True))],
)
async def create_user(
    body: UserCreate, users: UserRepository = Depends(get_user_repository),
):
    return await register_user(users, body.model_dump())


@router.patch(
    "/{user_id}", response_model=UserResponse,
    dependencies=[Depends(require(Capability.MANAGE_USERS, always_authenticated=True))],
)
async def patch_user(
    user_id: str,
    body: UserUpdate,
    users: UserRepository = Depends(get_user_repository),
):
    user = await update_user(users, user_id, body.model_dump(exclude_unset=True))
    if user is None:
        raise ResourceNotFoundError("User", user_id)
    return user
