"""Dashboard Stats Repository: headline counters.

Invariants:
    - today_appointments counts the half-open day window, so next midnight belongs to tomorrow
    - Revenue is 0 (not null) when nothing is paid this month
    - Only paid billing with paid_date in the current local month counts as revenue
    - Only active patients and scheduled procedures are counted
"""

from datetime import datetime, timezone
from decimal import Decimal

from gastromed.repositories.appointments import SqlAppointmentRepository
from gastromed.repositories.billing import SqlBillingRepository
from gastromed.repositories.patients import SqlPatientRepository
from gastromed.repositories.stats import SqlStatsRepository

NOW = datetime(2026, 5, 15, 12, 0, tzinfo=timezone.utc)


async def test_empty_database_has_zero_revenue(test_db):
    stats = await SqlStatsRepository(test_db).get_dashboard_stats(now=NOW)
    assert stats == {
        "today_appointments": 0,
        "pending_procedures": 0,
        "active_patients": 0,
        "monthly_revenue": 0.0,
    }


async def test_revenue_counts_paid_this_month_only(test_db, patient):
    repo = SqlBillingRepository(test_db)

    async def bill(amount, status, paid_date):
        await repo.create({
            "patient_id": patient.id,
            "description": "Visit",
            "amount": Decimal(amount),
            "patient_responsibility": Decimal(amount),
            "status": status,
            "due_date": NOW,
            "paid_date": paid_date,
        })

    await bill("150.00", "paid", datetime(2026, 5, 1, 0, 0, tzinfo=timezone.utc))
    await bill("99.50", "paid", datetime(2026, 5, 10, tzinfo=timezone.utc))
    await bill("500.00", "paid", datetime(2026, 4, 30, 23, 59, tzinfo=timezone.utc))
    await bill("75.00", "pending", None)

    stats = await SqlStatsRepository(test_db).get_dashboard_stats(now=NOW)
    assert stats["monthly_revenue"] == 249.5


async def test_active_patients_excludes_soft_deleted(test_db, patient):
    patients = SqlPatientRepository(test_db)
    other = await patients.create({
        "first_name": "John", "last_name": "Adams",
        "date_of_birth": "1970-01-01", "phone": "555-0202",
    })
    await patients.delete(other.id)
    stats = await SqlStatsRepository(test_db).get_dashboard_stats(now=NOW)
    assert stats["active_patients"] == 1


async def test_today_appointments_excludes_next_midnight(test_db, patient, doctor):
    repo = SqlAppointmentRepository(test_db)
    for when in (
        datetime(2026, 5, 14, 23, 59, 59, tzinfo=timezone.utc),
        datetime(2026, 5, 15, 23, 59, 59, tzinfo=timezone.utc),
        datetime(2026, 5, 16, 0, 0, 0, tzinfo=timezone.utc),
    ):
        await repo.create({
            "patient_id": patient.id,
            "doctor_id": doctor.id,
            "appointment_date": when,
            "type": "consultation",
            "reason": "Follow-up",
            "created_by": doctor.id,
        })

    stats = await SqlStatsRepository(test_db).get_dashboard_stats(now=NOW)
    assert stats["today_appointments"] == 1
