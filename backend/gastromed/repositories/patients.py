"""Patient Repository: intake, lookup, search and soft deletion.

Invariants:
    - list() and search() only see active patients; get_by_id() sees every patient
    - search() treats %, _ and \\ in the query as literal characters
    - delete() is a soft delete that only flips an active row, so repeating it returns False
    - update() never writes the list fields (medical_history, allergies, medications)

Design Decisions:
    - The list fields are dropped on update and the drop is logged. This reproduces
      the established behaviour of the clinic system; see DESIGN.md open questions.
"""

import logging
from datetime import datetime, timezone
from typing import Sequence

from sqlalchemy import func, or_, select, update

from gastromed.core.domain_types import PatientId
from gastromed.models.patient import Patient
from gastromed.repositories.base import SqlRepository

logger = logging.getLogger(__name__)

FROZEN_ON_UPDATE = ("medical_history", "allergies", "medications")


def _contains(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SqlPatientRepository(SqlRepository):
    model = Patient
    entity = "patient"

    async def create(self, data: dict) -> Patient:
        return await self._insert(data)

    async def get_by_id(self, patient_id: PatientId) -> Patient | None:
        return await self._fetch_one(select(Patient).where(Patient.id == patient_id))

    async def list(self, limit: int = 50, offset: int = 0) -> Sequence[Patient]:
        stmt = (
            select(Patient)
            .where(Patient.is_active.is_(True))
            .order_by(Patient.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_all(stmt)

    async def search(self, query: str) -> Sequence[Patient]:
        """Case-insensitive substring match on name and email, substring on phone."""
        term = _contains(query.lower())
        stmt = (
            select(Patient)
            .where(
                Patient.is_active.is_(True),
                or_(
                    func.lower(Patient.first_name).like(term, escape="\\"),
                    func.lower(Patient.last_name).like(term, escape="\\"),
                    func.lower(Patient.email).like(term, escape="\\"),
                    Patient.phone.like(_contains(query), escape="\\"),
                ),
            )
            .order_by(Patient.last_name, Patient.first_name)
        )
        return await self._fetch_all(stmt)

    async def update(self, patient_id: PatientId, data: dict) -> Patient | None:
        dropped = [name for name in FROZEN_ON_UPDATE if name in data]
        if dropped:
            logger.warning(
                f"Ignoring list fields on patient update: {', '.join(dropped)}",
                extra={"entity": self.entity, "entity_id": patient_id},
            )
        values = {k: v for k, v in data.items() if k not in FROZEN_ON_UPDATE}
        return await self._update(patient_id, values)

    async def delete(self, patient_id: PatientId) -> bool:
        stmt = (
            update(Patient)
            .where(Patient.id == patient_id, Patient.is_active.is_(True))
            .values(is_active=False, updated_at=datetime.now(timezone.utc))
        )
        async with self._guard("soft delete"):
            result = await self.session.execute(stmt)
            await self.session.commit()
        deactivated = result.rowcount > 0
        if deactivated:
            logger.info(
                "Deactivated patient",
                extra={"entity": self.entity, "entity_id": patient_id},
            )
        return deactivated
