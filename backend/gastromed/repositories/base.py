"""SQLAlchemy Repository Base: shared statement execution, error mapping and CRUD primitives.

Invariants:
    - Every statement runs inside _guard: IntegrityError -> ConstraintError,
      any other SQLAlchemyError -> PersistenceError, after a rollback
    - _update is one UPDATE ... RETURNING that stamps updated_at (when the table has one)
    - _delete reports whether a row was affected
    - Only entity names and ids are logged, never column values
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator, ClassVar, Sequence

from sqlalchemy import Select, delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gastromed.core.errors import ConstraintError, ErrorContext, PersistenceError

logger = logging.getLogger(__name__)


class SqlRepository:
    """Base for the per-entity repositories."""

    model: ClassVar[type]
    entity: ClassVar[str]
    stamps_updated_at: ClassVar[bool] = True

    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except IntegrityError as e:
            await self.session.rollback()
            logger.error(
                f"Integrity error during {self.entity} {operation}: {e.orig}",
                extra={"entity": self.entity, "error_code": "CONSTRAINT_VIOLATION"},
            )
            raise ConstraintError(
                operation, ErrorContext(entity=self.entity),
            ) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(
                f"Database error during {self.entity} {operation}: {e}",
                extra={"entity": self.entity, "error_code": "DATABASE_ERROR"},
            )
            raise PersistenceError(
                operation, context=ErrorContext(entity=self.entity),
            ) from e

    async def _fetch_all(self, stmt: Select) -> Sequence[Any]:
        async with self._guard("select"):
            result = await self.session.execute(stmt)
            return result.scalars().unique().all()

    async def _fetch_one(self, stmt: Select) -> Any | None:
        async with self._guard("select"):
            result = await self.session.execute(stmt.limit(1))
            return result.scalars().unique().one_or_none()

    async def _scalar(self, stmt: Select) -> Any:
        async with self._guard("select"):
            return (await self.session.execute(stmt)).scalar_one()

    async def _insert(self, data: dict) -> Any:
        row = self.model(**data)
        async with self._guard("insert"):
            self.session.add(row)
            await self.session.commit()
        logger.info(
            f"Created {self.entity}",
            extra={"entity": self.entity, "entity_id": row.id},
        )
        return row

    async def _update(self, row_id: str, data: dict) -> Any | None:
        values = dict(data)
        if self.stamps_updated_at:
            values["updated_at"] = datetime.now(timezone.utc)
        if not values:
            return await self._fetch_one(
                self._select_plain().where(self.model.id == row_id),
            )
        stmt = (
            update(self.model)
            .where(self.model.id == row_id)
            .values(**values)
            .returning(self.model)
            .execution_options(populate_existing=True)
        )
        async with self._guard("update"):
            result = await self.session.execute(stmt)
            row = result.scalars().one_or_none()
            await self.session.commit()
        if row is not None:
            logger.info(
                f"Updated {self.entity}",
                extra={"entity": self.entity, "entity_id": row_id},
            )
        return row

    async def _delete(self, row_id: str) -> bool:
        async with self._guard("delete"):
            result = await self.session.execute(
                delete(self.model).where(self.model.id == row_id),
            )
            await self.session.commit()
        deleted = result.rowcount > 0
        if deleted:
            logger.info(
                f"Deleted {self.entity}",
                extra={"entity": self.entity, "entity_id": row_id},
            )
        return deleted

    def _select_plain(self) -> Select:
        return select(self.model)
