"""Procedure, Billing and Evolution Routes.

Invariants:
    - A dangling reference is a generic 500, never a leaked driver message
    - Money fields are strings with two decimals
    - Evolutions: plural collection paths, singular detail path, hard delete
"""

from datetime import datetime, timezone


def _procedure(appointment, patient, doctor, **overrides) -> dict:
    return {
        "appointmentId": appointment.id,
        "patientId": patient.id,
        "doctorId": doctor.id,
        "procedureType": "Colonoscopy",
        "scheduledDate": "2026-05-04T08:00:00Z",
        **overrides,
    }


# --- Procedures ---------------------------------------------------------------

async def test_procedure_create_and_detail(client, appointment, patient, doctor):
    res = await client.post("/api/procedures", json=_procedure(appointment, patient, doctor))
    assert res.status_code == 201
    created = res.json()
    assert created["status"] == "scheduled"
    assert created["medications"] == []

    res = await client.get(f"/api/procedures/{created['id']}")
    assert res.status_code == 200
    detail = res.json()
    assert detail["patient"]["id"] == patient.id
    assert detail["doctor"]["id"] == doctor.id
    assert detail["appointment"]["id"] == appointment.id

    res = await client.get("/api/procedures")
    assert [p["id"] for p in res.json()] == [created["id"]]


async def test_procedure_with_unknown_appointment_is_500(client, patient, doctor):
    class Missing:
        id = "00000000-0000-0000-0000-000000000000"

    res = await client.post("/api/procedures", json=_procedure(Missing, patient, doctor))
    assert res.status_code == 500
    assert res.json() == {
        "message": "Database operation failed", "code": "CONSTRAINT_VIOLATION",
    }


async def test_procedure_patch(client, appointment, patient, doctor):
    created = (await client.post(
        "/api/procedures", json=_procedure(appointment, patient, doctor),
    )).json()
    res = await client.patch(f"/api/procedures/{created['id']}", json={
        "status": "completed",
        "endTime": "2026-05-04T09:00:00Z",
        "pathologyOrdered": True,
    })
    assert res.status_code == 200
    assert res.json()["status"] == "completed"
    assert res.json()["pathologyOrdered"] is True
    assert res.json()["endTime"].startswith("2026-05-04T09:00:00")


async def test_unknown_procedure_is_404(client):
    assert (await client.get("/api/procedures/missing")).status_code == 404


# --- Billing ------------------------------------------------------------------

async def test_billing_create_defaults_and_money(client, patient):
    before = datetime.now(timezone.utc)
    res = await client.post("/api/billing", json={
        "patientId": patient.id,
        "description": "Consultation",
        "amount": 150,
        "patientResponsibility": "150",
        "dueDate": "2026-06-01",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["amount"] == "150.00"
    assert body["insuranceCovered"] == "0.00"
    assert body["status"] == "pending"
    assert datetime.fromisoformat(body["billingDate"]) >= before.replace(microsecond=0)


async def test_billing_list_filter_and_patch(client, patient):
    created = (await client.post("/api/billing", json={
        "patientId": patient.id,
        "description": "Colonoscopy",
        "amount": "450.00",
        "patientResponsibility": "90.00",
        "dueDate": "2026-06-01",
    })).json()

    res = await client.get("/api/billing", params={"patientId": patient.id})
    assert [b["id"] for b in res.json()] == [created["id"]]
    assert res.json()[0]["patient"]["lastName"] == "Lopez"
    assert (await client.get("/api/billing", params={"patientId": "other"})).json() == []

    res = await client.patch(f"/api/billing/{created['id']}", json={
        "status": "paid", "paidDate": "2026-05-20T14:00:00Z", "paymentMethod": "card",
    })
    assert res.status_code == 200
    assert res.json()["status"] == "paid"

    res = await client.get(f"/api/billing/{created['id']}")
    assert res.json()["paymentMethod"] == "card"


async def test_unknown_billing_is_404(client):
    res = await client.get("/api/billing/missing")
    assert res.status_code == 404
    assert res.json()["message"] == "Billing record not found"


# --- Evolutions ---------------------------------------------------------------

async def test_evolution_lifecycle(client, patient, doctor):
    res = await client.post("/api/patient-evolutions", json={
        "patientId": patient.id,
        "doctorId": doctor.id,
        "chiefComplaint": "Heartburn",
        "prescriptions": [{"medication": "Omeprazole", "dosage": "20mg",
                           "frequency": "daily", "duration": "4 weeks"}],
    })
    assert res.status_code == 201
    evolution_id = res.json()["id"]

    res = await client.get(f"/api/patient-evolutions/{patient.id}")
    assert res.status_code == 200
    listed = res.json()
    assert [e["id"] for e in listed] == [evolution_id]
    assert listed[0]["appointment"] is None
    assert listed[0]["doctor"]["fullName"] == "Dr. Sarah Smith"

    res = await client.get(f"/api/patient-evolution/{evolution_id}")
    assert res.json()["prescriptions"][0]["medication"] == "Omeprazole"

    res = await client.patch(
        f"/api/patient-evolutions/{evolution_id}", json={"assessment": "Improving"},
    )
    assert res.json()["assessment"] == "Improving"

    res = await client.delete(f"/api/patient-evolutions/{evolution_id}")
    assert res.json() == {"message": "Patient evolution deleted successfully"}
    assert (await client.get(f"/api/patient-evolution/{evolution_id}")).status_code == 404
    assert (await client.delete(f"/api/patient-evolutions/{evolution_id}")).status_code == 404
