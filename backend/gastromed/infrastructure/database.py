"""Database Session Manager: async connection pool, per-request sessions and health checks.

Invariants:
    - One DatabaseSessionManager per process, built in the FastAPI lifespan and kept on app.state
    - Every session is closed when the request ends; an unfinished transaction is rolled back
    - Connection pool uses pool_pre_ping for stale connection detection
    - SQLite engines enforce foreign keys (PRAGMA foreign_keys=ON)

Design Decisions:
    - No module-level engine: get_db reads the manager injected on app.state
    - expire_on_commit=False: rows stay readable after commit in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_for(database_url: str, pool_size: int = 20, max_overflow: int = 10):
    """Build the async engine; pool sizing only applies to server databases."""
    if make_url(database_url).get_backend_name() == "sqlite":
        engine = create_async_engine(database_url)
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_async_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


class DatabaseSessionManager:
    """Owns the engine and hands out sessions."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_engine_for(database_url, pool_size, max_overflow)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session; roll back anything left uncommitted."""
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    manager: DatabaseSessionManager | None = getattr(
        request.app.state, "db_manager", None,
    )
    if manager is None:
        raise RuntimeError("Database not initialized")
    async with manager.session() as session:
        yield session
