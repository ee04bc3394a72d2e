"""API test fixtures: FastAPI test client over the in-memory database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - app.state.db_manager points at the test engine (readiness probe)
    - Dependency overrides are cleared after every test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from gastromed.config import Settings, get_settings
from gastromed.infrastructure.database import DatabaseSessionManager, get_db
from gastromed.infrastructure.security import create_access_token
from gastromed.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    del app.state.db_manager


@pytest.fixture
def require_auth(client):
    """Turn on mandatory authentication for the duration of a test."""
    settings = Settings(auth_required=True)
    app.dependency_overrides[get_settings] = lambda: settings
    return settings


def bearer(user) -> dict:
    token = create_access_token(
        user.id, user.role, get_settings().secret_key, expires_minutes=5,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def doctor_headers(doctor):
    return bearer(doctor)


@pytest.fixture
def receptionist_headers(receptionist):
    return bearer(receptionist)
