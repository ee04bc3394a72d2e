"""User Repository: staff accounts.

Invariants:
    - list() returns active users only, optionally narrowed to one role
    - Passwords arrive here already hashed (services/accounts.py)
    - No delete operation exists
"""

from typing import Any, Sequence

from sqlalchemy import select

from gastromed.core.domain_types import UserId
from gastromed.models.user import User
from gastromed.repositories.base import SqlRepository


class SqlUserRepository(SqlRepository):
    model = User
    entity = "user"
    stamps_updated_at = False

    async def get_by_id(self, user_id: UserId) -> User | None:
        return await self._fetch_one(select(User).where(User.id == user_id))

    async def get_by_username(self, username: str) -> User | None:
        return await self._fetch_one(select(User).where(User.username == username))

    async def list(self, role: str | None = None) -> Sequence[User]:
        stmt = select(User).where(User.is_active.is_(True))
        if role:
            stmt = stmt.where(User.role == role)
        return await self._fetch_all(stmt.order_by(User.full_name))

    async def create(self, data: dict) -> User:
        return await self._insert(data)

    async def update(self, user_id: UserId, data: dict) -> Any | None:
        return await self._update(user_id, data)
