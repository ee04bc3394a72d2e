"""Procedure, Billing and Evolution Repositories.

Invariants:
    - Procedures reference existing rows: a dangling FK is a ConstraintError
    - Procedure updates never write medications
    - Billing list is scoped to one patient when asked
    - Evolutions left-join the appointment: a note without a visit still lists
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from gastromed.core.errors import ConstraintError
from gastromed.repositories.billing import SqlBillingRepository
from gastromed.repositories.evolutions import SqlEvolutionRepository
from gastromed.repositories.patients import SqlPatientRepository
from gastromed.repositories.procedures import SqlProcedureRepository

WHEN = datetime(2026, 5, 4, 8, 0, tzinfo=timezone.utc)


def _procedure(appointment, patient, doctor, **overrides) -> dict:
    return {
        "appointment_id": appointment.id,
        "patient_id": patient.id,
        "doctor_id": doctor.id,
        "procedure_type": "Colonoscopy",
        "scheduled_date": WHEN,
        "medications": [{"name": "Propofol", "dosage": "100mg", "instructions": ""}],
        **overrides,
    }


async def test_procedure_create_and_detail(test_db, appointment, patient, doctor):
    repo = SqlProcedureRepository(test_db)
    created = await repo.create(_procedure(appointment, patient, doctor))
    assert created.status == "scheduled"
    assert created.pathology_ordered is False

    row = await repo.get_by_id(created.id)
    assert row.patient.id == patient.id
    assert row.doctor.id == doctor.id
    assert row.appointment.id == appointment.id


async def test_procedure_with_unknown_appointment_is_constraint_error(test_db, patient, doctor):
    class Missing:
        id = "00000000-0000-0000-0000-000000000000"

    with pytest.raises(ConstraintError):
        await SqlProcedureRepository(test_db).create(
            _procedure(Missing, patient, doctor),
        )


async def test_procedure_update_ignores_medications(test_db, appointment, patient, doctor):
    repo = SqlProcedureRepository(test_db)
    created = await repo.create(_procedure(appointment, patient, doctor))
    row = await repo.update(created.id, {
        "status": "completed",
        "findings": "Normal mucosa",
        "medications": [],
    })
    assert row.status == "completed"
    assert row.findings == "Normal mucosa"
    assert row.medications == [{"name": "Propofol", "dosage": "100mg", "instructions": ""}]


async def test_procedures_by_patient(test_db, appointment, patient, doctor):
    repo = SqlProcedureRepository(test_db)
    created = await repo.create(_procedure(appointment, patient, doctor))
    rows = await repo.list_by_patient(patient.id)
    assert [r.id for r in rows] == [created.id]
    assert rows[0].appointment.reason == "Abdominal pain"


async def test_billing_list_scoped_to_patient(test_db, patient):
    other = await SqlPatientRepository(test_db).create({
        "first_name": "John", "last_name": "Adams",
        "date_of_birth": "1970-01-01", "phone": "555-0202",
    })
    repo = SqlBillingRepository(test_db)
    for owner in (patient, other):
        await repo.create({
            "patient_id": owner.id,
            "description": "Consultation",
            "amount": Decimal("150.00"),
            "patient_responsibility": Decimal("150.00"),
            "due_date": WHEN,
        })
    assert len(await repo.list()) == 2
    rows = await repo.list(patient.id)
    assert [r.patient_id for r in rows] == [patient.id]
    assert rows[0].patient.last_name == "Lopez"
    assert rows[0].amount == Decimal("150.00")
    assert rows[0].status == "pending"


async def test_evolution_without_appointment_lists_with_null_appointment(test_db, patient, doctor):
    repo = SqlEvolutionRepository(test_db)
    created = await repo.create({
        "patient_id": patient.id,
        "doctor_id": doctor.id,
        "evolution_date": WHEN,
        "assessment": "Stable",
    })
    rows = await repo.list_by_patient(patient.id)
    assert [r.id for r in rows] == [created.id]
    assert rows[0].appointment is None
    assert rows[0].doctor.id == doctor.id


async def test_evolutions_newest_first_and_hard_delete(test_db, patient, doctor, appointment):
    repo = SqlEvolutionRepository(test_db)
    older = await repo.create({
        "patient_id": patient.id, "doctor_id": doctor.id,
        "evolution_date": datetime(2026, 1, 1, tzinfo=timezone.utc),
    })
    newer = await repo.create({
        "patient_id": patient.id, "doctor_id": doctor.id,
        "appointment_id": appointment.id,
        "evolution_date": datetime(2026, 2, 1, tzinfo=timezone.utc),
    })
    rows = await repo.list_by_patient(patient.id)
    assert [r.id for r in rows] == [newer.id, older.id]
    assert rows[0].appointment.id == appointment.id

    assert await repo.delete(older.id) is True
    assert await repo.get_by_id(older.id) is None
