"""Accounts Service: staff authentication, registration and default-user bootstrap.

Invariants:
    - Plaintext passwords never reach a repository: register/update hash first
    - authenticate() gives the same AuthenticationError for unknown user, wrong
      password and deactivated account
    - ensure_default_users() is idempotent
"""

import logging

from gastromed.core.domain_types import UserId, UserRole
from gastromed.core.errors import AuthenticationError
from gastromed.core.repository_protocols import UserRepository
from gastromed.infrastructure.security import hash_password, verify_password

logger = logging.getLogger(__name__)

DEFAULT_USERS = (
    {
        "username": "doctor",
        "full_name": "Dr. Sarah Smith",
        "email": "doctor@gastromed.com",
        "role": UserRole.DOCTOR.value,
    },
    {
        "username": "receptionist",
        "full_name": "Jane Doe",
        "email": "receptionist@gastromed.com",
        "role": UserRole.RECEPTIONIST.value,
    },
)


async def authenticate(users: UserRepository, username: str, password: str):
    user = await users.get_by_username(username)
    if user is None or not user.is_active or not verify_password(password, user.password):
        logger.warning("Failed login attempt", extra={"username": username})
        raise AuthenticationError()
    logger.info("User logged in", extra={"entity": "user", "entity_id": user.id})
    return user


async def register_user(users: UserRepository, data: dict):
    return await users.create({**data, "password": hash_password(data["password"])})


async def update_user(users: UserRepository, user_id: UserId, data: dict):
    if data.get("password"):
        data = {**data, "password": hash_password(data["password"])}
    return await users.update(user_id, data)


async def ensure_default_users(users: UserRepository, password: str) -> int:
    """Create the default doctor/receptionist accounts that do not exist yet."""
    created = 0
    for account in DEFAULT_USERS:
        if await users.get_by_username(account["username"]) is not None:
            continue
        await register_user(users, {**account, "password": password, "is_active": True})
        created += 1
    if created:
        logger.info(f"Seeded {created} default user(s)")
    return created
