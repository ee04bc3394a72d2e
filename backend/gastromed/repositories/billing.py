"""Billing Repository.

Invariants:
    - Reads inner-join the owning patient
    - list() is newest-created first, optionally narrowed to one patient
    - No delete operation exists
"""

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.orm import contains_eager

from gastromed.core.domain_types import BillingId, PatientId
from gastromed.models.billing import Billing
from gastromed.repositories.base import SqlRepository


class SqlBillingRepository(SqlRepository):
    model = Billing
    entity = "billing"

    def _with_patient(self) -> Select:
        return (
            select(Billing)
            .join(Billing.patient)
            .options(contains_eager(Billing.patient))
            .execution_options(populate_existing=True)
        )

    async def create(self, data: dict) -> Billing:
        return await self._insert(data)

    async def get_by_id(self, billing_id: BillingId) -> Billing | None:
        return await self._fetch_one(self._with_patient().where(Billing.id == billing_id))

    async def list(self, patient_id: PatientId | None = None) -> Sequence[Billing]:
        stmt = self._with_patient()
        if patient_id:
            stmt = stmt.where(Billing.patient_id == patient_id)
        return await self._fetch_all(stmt.order_by(Billing.created_at.desc()))

    async def update(self, billing_id: BillingId, data: dict) -> Billing | None:
        return await self._update(billing_id, data)
