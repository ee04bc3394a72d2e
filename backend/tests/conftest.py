"""Root conftest: shared test configuration and database fixtures.

Invariants:
    - Required settings are present before any gastromed module builds Settings
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for repository
      and route tests (PostgreSQL-only JSONB is exercised as plain JSON)
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("SEED_DEFAULT_USERS", "false")

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: E402

from gastromed.db.base import Base  # noqa: E402
import gastromed.models  # noqa: E402,F401
from gastromed.infrastructure.database import create_engine_for  # noqa: E402
from gastromed.infrastructure.security import hash_password  # noqa: E402
from gastromed.models.appointment import Appointment  # noqa: E402
from gastromed.models.patient import Patient  # noqa: E402
from gastromed.models.user import User  # noqa: E402

TEST_PASSWORD = "password"


@pytest.fixture
async def test_engine():
    engine = create_engine_for("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def doctor(test_db):
    user = User(
        username="doctor",
        password=hash_password(TEST_PASSWORD),
        full_name="Dr. Sarah Smith",
        email="doctor@gastromed.com",
        role="doctor",
    )
    test_db.add(user)
    await test_db.commit()
    return user


@pytest.fixture
async def receptionist(test_db):
    user = User(
        username="receptionist",
        password=hash_password(TEST_PASSWORD),
        full_name="Jane Doe",
        email="receptionist@gastromed.com",
        role="receptionist",
    )
    test_db.add(user)
    await test_db.commit()
    return user


@pytest.fixture
async def patient(test_db):
    row = Patient(
        first_name="Maria",
        last_name="Lopez",
        date_of_birth="1980-04-12",
        phone="555-0101",
        email="maria.lopez@example.com",
        allergies=["penicillin"],
    )
    test_db.add(row)
    await test_db.commit()
    return row


@pytest.fixture
async def appointment(test_db, patient, doctor):
    row = Appointment(
        patient_id=patient.id,
        doctor_id=doctor.id,
        appointment_date=datetime.now(timezone.utc) + timedelta(days=3),
        duration=30,
        type="consultation",
        reason="Abdominal pain",
        created_by=doctor.id,
    )
    test_db.add(row)
    await test_db.commit()
    return row
