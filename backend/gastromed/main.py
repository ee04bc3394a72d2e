"""GastroMed API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ClinicError to {"message", "code"} responses
    - CORS configured from settings (not hardcoded)
    - The DatabaseSessionManager is built in the lifespan and kept on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Default staff accounts are seeded at startup; a database that is not
      migrated yet only produces a warning
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gastromed.api.error_handlers import register_error_handlers
from gastromed.api.routes import (
    appointments, auth, billing, dashboard, health, patient_evolutions,
    patients, procedures, users,
)
from gastromed.config import Settings, get_settings
from gastromed.core.errors import PersistenceError
from gastromed.infrastructure.database import DatabaseSessionManager
from gastromed.infrastructure.observability import setup_logging
from gastromed.repositories.users import SqlUserRepository
from gastromed.services.accounts import ensure_default_users

logger = logging.getLogger(__name__)


async def seed_default_users(manager: DatabaseSessionManager, settings: Settings) -> None:
    try:
        async with manager.session() as db:
            await ensure_default_users(
                SqlUserRepository(db), settings.default_user_password,
            )
    except PersistenceError:
        logger.warning("Could not initialize default users; is the database migrated?")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.db_manager = manager
    if settings.seed_default_users:
        await seed_default_users(manager, settings)
    logger.info("GastroMed API started")
    yield
    logger.info("GastroMed API shutting down")
    await manager.dispose()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="GastroMed API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes: explicit registration
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(dashboard.router)
    app.include_router(patients.router)
    app.include_router(appointments.router)
    app.include_router(procedures.router)
    app.include_router(billing.router)
    app.include_router(patient_evolutions.router)

    register_error_handlers(app)

    return app


app = create_app()
