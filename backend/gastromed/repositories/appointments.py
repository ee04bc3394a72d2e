"""Appointment Repository: scheduling with patient/doctor enriched reads.

Invariants:
    - Enriched reads inner-join patient and doctor (both FKs are NOT NULL)
    - list(start, end) applies each bound independently and inclusively
    - list_today() uses the half-open local day window [midnight, next midnight)
    - delete() is a hard delete
"""

from datetime import datetime, timezone, tzinfo
from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager

from gastromed.core.clinic_time import day_window
from gastromed.core.domain_types import AppointmentId, PatientId
from gastromed.models.appointment import Appointment
from gastromed.repositories.base import SqlRepository


class SqlAppointmentRepository(SqlRepository):
    model = Appointment
    entity = "appointment"

    def __init__(self, session: AsyncSession, tz: tzinfo = timezone.utc):
        super().__init__(session)
        self.tz = tz

    def _enriched(self) -> Select:
        return (
            select(Appointment)
            .join(Appointment.patient)
            .join(Appointment.doctor)
            .options(
                contains_eager(Appointment.patient),
                contains_eager(Appointment.doctor),
            )
            .execution_options(populate_existing=True)
        )

    async def create(self, data: dict) -> Appointment:
        return await self._insert(data)

    async def get_by_id(self, appointment_id: AppointmentId) -> Appointment | None:
        return await self._fetch_one(
            self._enriched().where(Appointment.id == appointment_id),
        )

    async def list(
        self, start: datetime | None = None, end: datetime | None = None,
    ) -> Sequence[Appointment]:
        stmt = self._enriched()
        if start is not None:
            stmt = stmt.where(Appointment.appointment_date >= start)
        if end is not None:
            stmt = stmt.where(Appointment.appointment_date <= end)
        return await self._fetch_all(
            stmt.order_by(Appointment.appointment_date.desc()),
        )

    async def list_today(self, now: datetime | None = None) -> Sequence[Appointment]:
        start, end = day_window(now or datetime.now(timezone.utc), self.tz)
        stmt = (
            self._enriched()
            .where(
                Appointment.appointment_date >= start,
                Appointment.appointment_date < end,
            )
            .order_by(Appointment.appointment_date.desc())
        )
        return await self._fetch_all(stmt)

    async def list_by_patient(self, patient_id: PatientId) -> Sequence[Appointment]:
        stmt = (
            select(Appointment)
            .join(Appointment.doctor)
            .options(contains_eager(Appointment.doctor))
            .where(Appointment.patient_id == patient_id)
            .order_by(Appointment.appointment_date.desc())
            .execution_options(populate_existing=True)
        )
        return await self._fetch_all(stmt)

    async def update(self, appointment_id: AppointmentId, data: dict) -> Appointment | None:
        return await self._update(appointment_id, data)

    async def delete(self, appointment_id: AppointmentId) -> bool:
        return await self._delete(appointment_id)
