"""Procedure Repository.

Invariants:
    - list() joins patient and doctor, newest scheduled first
    - get_by_id() joins patient, doctor and the originating appointment
    - update() never writes medications (same rule as the patient list fields)
    - No delete operation exists
"""

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.orm import contains_eager

from gastromed.core.domain_types import PatientId, ProcedureId
from gastromed.models.procedure import Procedure
from gastromed.repositories.base import SqlRepository

logger = logging.getLogger(__name__)


class SqlProcedureRepository(SqlRepository):
    model = Procedure
    entity = "procedure"

    async def create(self, data: dict) -> Procedure:
        return await self._insert(data)

    async def get_by_id(self, procedure_id: ProcedureId) -> Procedure | None:
        stmt = (
            select(Procedure)
            .join(Procedure.patient)
            .join(Procedure.doctor)
            .join(Procedure.appointment)
            .options(
                contains_eager(Procedure.patient),
                contains_eager(Procedure.doctor),
                contains_eager(Procedure.appointment),
            )
            .where(Procedure.id == procedure_id)
            .execution_options(populate_existing=True)
        )
        return await self._fetch_one(stmt)

    async def list(self, limit: int = 50, offset: int = 0) -> Sequence[Procedure]:
        stmt = (
            select(Procedure)
            .join(Procedure.patient)
            .join(Procedure.doctor)
            .options(
                contains_eager(Procedure.patient),
                contains_eager(Procedure.doctor),
            )
            .order_by(Procedure.scheduled_date.desc())
            .limit(limit)
            .offset(offset)
            .execution_options(populate_existing=True)
        )
        return await self._fetch_all(stmt)

    async def list_by_patient(self, patient_id: PatientId) -> Sequence[Procedure]:
        stmt = (
            select(Procedure)
            .join(Procedure.doctor)
            .join(Procedure.appointment)
            .options(
                contains_eager(Procedure.doctor),
                contains_eager(Procedure.appointment),
            )
            .where(Procedure.patient_id == patient_id)
            .order_by(Procedure.scheduled_date.desc())
            .execution_options(populate_existing=True)
        )
        return await self._fetch_all(stmt)

    async def update(self, procedure_id: ProcedureId, data: dict) -> Procedure | None:
        if "medications" in data:
            logger.warning(
                "Ignoring medications on procedure update",
                extra={"entity": self.entity, "entity_id": procedure_id},
            )
        values = {k: v for k, v in data.items() if k != "medications"}
        return await self._update(procedure_id, values)
