"""API Dependencies: per-request repositories and the authenticated principal.

Invariants:
    - Repositories are constructed per request around the request's AsyncSession
    - A supplied bearer token is always verified, and must belong to an active user
    - require(capability) rejects anonymous callers when settings.auth_required is set or the
      route asks for always_authenticated, and always checks the capability of an authenticated caller
"""

from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from gastromed.config import Settings, get_settings
from gastromed.core.errors import AuthenticationError, PermissionDeniedError
from gastromed.core.permissions import Capability, has_capability
from gastromed.core.repository_protocols import (
    AppointmentRepository, BillingRepository, EvolutionRepository,
    PatientRepository, ProcedureRepository, StatsRepository, UserRepository,
)
from gastromed.infrastructure.database import get_db
from gastromed.infrastructure.security import decode_access_token
from gastromed.repositories.appointments import SqlAppointmentRepository
from gastromed.repositories.billing import SqlBillingRepository
from gastromed.repositories.evolutions import SqlEvolutionRepository
from gastromed.repositories.patients import SqlPatientRepository
from gastromed.repositories.procedures import SqlProcedureRepository
from gastromed.repositories.stats import SqlStatsRepository
from gastromed.repositories.users import SqlUserRepository

bearer_scheme = HTTPBearer(auto_error=False)


# ─── Repositories ───────────────────────────────────────────────

def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return SqlUserRepository(db)


def get_patient_repository(db: AsyncSession = Depends(get_db)) -> PatientRepository:
    return SqlPatientRepository(db)


def get_appointment_repository(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AppointmentRepository:
    return SqlAppointmentRepository(db, settings.clinic_zone)


def get_procedure_repository(db: AsyncSession = Depends(get_db)) -> ProcedureRepository:
    return SqlProcedureRepository(db)


def get_billing_repository(db: AsyncSession = Depends(get_db)) -> BillingRepository:
    return SqlBillingRepository(db)


def get_evolution_repository(db: AsyncSession = Depends(get_db)) -> EvolutionRepository:
    return SqlEvolutionRepository(db)


def get_stats_repository(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> StatsRepository:
    return SqlStatsRepository(db, settings.clinic_zone)


# ─── Principal ──────────────────────────────────────────────────

@dataclass(frozen=True)
class Principal:
    user_id: str
    role: str


async def get_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
    users: UserRepository = Depends(get_user_repository),
) -> Principal | None:
    if credentials is None:
        return None
    payload = decode_access_token(credentials.credentials, settings.secret_key)
    user = await users.get_by_id(payload["sub"])
    if user is None or not user.is_active:
        raise AuthenticationError("Invalid token")
    return Principal(user_id=user.id, role=user.role)


def require(capability: Capability, always_authenticated: bool = False):
    """Dependency factory enforcing one capability on a route.

    always_authenticated rejects anonymous callers even when auth is optional.
    """

    async def check(
        principal: Principal | None = Depends(get_principal),
        settings: Settings = Depends(get_settings),
    ) -> Principal | None:
        if principal is None:
            if settings.auth_required or always_authenticated:
                raise AuthenticationError("Authentication required")
            return None
        if not has_capability(principal.role, capability):
            raise PermissionDeniedError(capability.value)
        return principal

    return check
