"""Auth Routes: username/password login returning the public user and an access token.

Invariants:
    - Failed logins answer 401 "Invalid credentials" whatever the cause
    - The password hash never leaves the server
"""

from fastapi import APIRouter, Depends

from gastromed.api.dependencies import get_user_repository
from gastromed.config import Settings, get_settings
from gastromed.core.repository_protocols import UserRepository
from gastromed.infrastructure.security import create_access_token
from gastromed.schemas.user import LoginRequest, LoginResponse, UserResponse
from gastromed.services.accounts import authenticate

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
):
    user = await authenticate(users, body.username, body.password)
    token = create_access_token(
        user.id, user.role, settings.secret_key,
        settings.access_token_expire_minutes,
    )
    return LoginResponse(user=UserResponse.model_validate(user), token=token)
