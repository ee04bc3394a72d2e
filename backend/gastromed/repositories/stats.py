"""Dashboard Stats Repository: aggregate counters over appointments, procedures, patients, billing.

Invariants:
    - today_appointments counts the half-open local day window [midnight, next midnight)
    - monthly_revenue sums paid billing amounts with paid_date >= local first of month
    - monthly_revenue is 0.0 when nothing qualifies, never None
"""

from datetime import datetime, timezone, tzinfo
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from gastromed.core.clinic_time import day_window, month_start
from gastromed.core.domain_types import BillingStatus, ProcedureStatus
from gastromed.models.appointment import Appointment
from gastromed.models.billing import Billing
from gastromed.models.patient import Patient
from gastromed.models.procedure import Procedure
from gastromed.repositories.base import SqlRepository


class SqlStatsRepository(SqlRepository):
    entity = "dashboard_stats"

    def __init__(self, session: AsyncSession, tz: tzinfo = timezone.utc):
        super().__init__(session)
        self.tz = tz

    async def get_dashboard_stats(self, now: datetime | None = None) -> dict:
        now = now or datetime.now(timezone.utc)
        day_start, day_end = day_window(now, self.tz)

        today_appointments = await self._scalar(
            select(func.count()).select_from(Appointment).where(
                Appointment.appointment_date >= day_start,
                Appointment.appointment_date < day_end,
            ),
        )
        pending_procedures = await self._scalar(
            select(func.count()).select_from(Procedure).where(
                Procedure.status == ProcedureStatus.SCHEDULED.value,
            ),
        )
        active_patients = await self._scalar(
            select(func.count()).select_from(Patient).where(
                Patient.is_active.is_(True),
            ),
        )
        revenue = await self._scalar(
            select(func.coalesce(func.sum(Billing.amount), 0)).where(
                Billing.status == BillingStatus.PAID.value,
                Billing.paid_date >= month_start(now, self.tz),
            ),
        )
        return {
            "today_appointments": int(today_appointments or 0),
            "pending_procedures": int(pending_procedures or 0),
            "active_patients": int(active_patients or 0),
            "monthly_revenue": float(round(Decimal(str(revenue or 0)), 2)),
        }
