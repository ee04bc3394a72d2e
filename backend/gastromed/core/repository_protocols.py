"""Boundary Protocols: persistence contracts between the API and the database.

Invariants:
    - Routes and services depend on these Protocols, never on a concrete repository
    - "Not found" is a None/False result, never an exception
    - create/update take plain dicts of snake_case column values (validated upstream)
    - Implementations raise ConstraintError / PersistenceError on database failures

Design Decisions:
    - Protocol over ABC: structural subtyping, one concrete SQLAlchemy adapter per entity
    - Async in Protocol: every implementation does IO
"""

from datetime import datetime
from typing import Any, Protocol, Sequence

from gastromed.core.domain_types import (
    AppointmentId, BillingId, EvolutionId, PatientId, ProcedureId, UserId,
)


class UserRepository(Protocol):
    """Staff accounts. No delete: deactivate via is_active."""
    async def get_by_id(self, user_id: UserId) -> Any | None: ...
    async def get_by_username(self, username: str) -> Any | None: ...
    async def list(self, role: str | None = None) -> Sequence[Any]: ...
    async def create(self, data: dict) -> Any: ...
    async def update(self, user_id: UserId, data: dict) -> Any | None: ...


class PatientRepository(Protocol):
    """Patients. delete() is a soft delete."""
    async def create(self, data: dict) -> Any: ...
    async def get_by_id(self, patient_id: PatientId) -> Any | None: ...
    async def list(self, limit: int = 50, offset: int = 0) -> Sequence[Any]: ...
    async def search(self, query: str) -> Sequence[Any]: ...
    async def update(self, patient_id: PatientId, data: dict) -> Any | None: ...
    async def delete(self, patient_id: PatientId) -> bool: ...


class AppointmentRepository(Protocol):
    """Appointments. Reads are enriched with patient and doctor; delete() is hard."""
    async def create(self, data: dict) -> Any: ...
    async def get_by_id(self, appointment_id: AppointmentId) -> Any | None: ...
    async def list(
        self, start: datetime | None = None, end: datetime | None = None,
    ) -> Sequence[Any]: ...
    async def list_today(self, now: datetime | None = None) -> Sequence[Any]: ...
    async def list_by_patient(self, patient_id: PatientId) -> Sequence[Any]: ...
    async def update(self, appointment_id: AppointmentId, data: dict) -> Any | None: ...
    async def delete(self, appointment_id: AppointmentId) -> bool: ...


class ProcedureRepository(Protocol):
    """Procedures. Never deleted."""
    async def create(self, data: dict) -> Any: ...
    async def get_by_id(self, procedure_id: ProcedureId) -> Any | None: ...
    async def list(self, limit: int = 50, offset: int = 0) -> Sequence[Any]: ...
    async def list_by_patient(self, patient_id: PatientId) -> Sequence[Any]: ...
    async def update(self, procedure_id: ProcedureId, data: dict) -> Any | None: ...


class BillingRepository(Protocol):
    """Billing records. Never deleted."""
    async def create(self, data: dict) -> Any: ...
    async def get_by_id(self, billing_id: BillingId) -> Any | None: ...
    async def list(self, patient_id: PatientId | None = None) -> Sequence[Any]: ...
    async def update(self, billing_id: BillingId, data: dict) -> Any | None: ...


class EvolutionRepository(Protocol):
    """Clinical evolution notes. delete() is hard."""
    async def create(self, data: dict) -> Any: ...
    async def get_by_id(self, evolution_id: EvolutionId) -> Any | None: ...
    async def list_by_patient(
        self, patient_id: PatientId, limit: int = 50, offset: int = 0,
    ) -> Sequence[Any]: ...
    async def update(self, evolution_id: EvolutionId, data: dict) -> Any | None: ...
    async def delete(self, evolution_id: EvolutionId) -> bool: ...


class StatsRepository(Protocol):
    """Aggregate counters for the dashboard."""
    async def get_dashboard_stats(self, now: datetime | None = None) -> dict: ...
