"""Patient Evolution Repository.

Invariants:
    - Reads inner-join patient and doctor and LEFT-join the appointment;
      a note without a visit comes back with appointment=None
    - list_by_patient() is newest evolution_date first
    - delete() is a hard delete
"""

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.orm import contains_eager

from gastromed.core.domain_types import EvolutionId, PatientId
from gastromed.models.patient_evolution import PatientEvolution
from gastromed.repositories.base import SqlRepository


class SqlEvolutionRepository(SqlRepository):
    model = PatientEvolution
    entity = "patient_evolution"

    def _enriched(self) -> Select:
        return (
            select(PatientEvolution)
            .join(PatientEvolution.patient)
            .join(PatientEvolution.doctor)
            .outerjoin(PatientEvolution.appointment)
            .options(
                contains_eager(PatientEvolution.patient),
                contains_eager(PatientEvolution.doctor),
                contains_eager(PatientEvolution.appointment),
            )
            .execution_options(populate_existing=True)
        )

    async def create(self, data: dict) -> PatientEvolution:
        return await self._insert(data)

    async def get_by_id(self, evolution_id: EvolutionId) -> PatientEvolution | None:
        return await self._fetch_one(
            self._enriched().where(PatientEvolution.id == evolution_id),
        )

    async def list_by_patient(
        self, patient_id: PatientId, limit: int = 50, offset: int = 0,
    ) -> Sequence[PatientEvolution]:
        stmt = (
            self._enriched()
            .where(PatientEvolution.patient_id == patient_id)
            .order_by(PatientEvolution.evolution_date.desc())
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_all(stmt)

    async def update(
        self, evolution_id: EvolutionId, data: dict,
    ) -> PatientEvolution | None:
        return await self._update(evolution_id, data)

    async def delete(self, evolution_id: EvolutionId) -> bool:
        return await self._delete(evolution_id)
