"""Patient Routes: HTTP surface of the patient registry.

Invariants:
    - POST returns 201 with a generated id and camelCase fields
    - Malformed payloads are 400 with per-field errors
    - /search without q is 400; unknown ids are 404
    - DELETE is soft and a second DELETE is 404
"""

ANA = {
    "firstName": "Ana",
    "lastName": "Souza",
    "dateOfBirth": "1990-01-01",
    "phone": "5551234",
}


async def test_create_then_get(client):
    res = await client.post("/api/patients", json=ANA)
    assert res.status_code == 201
    body = res.json()
    assert body["id"]
    assert body["isActive"] is True
    assert body["allergies"] == []

    res = await client.get(f"/api/patients/{body['id']}")
    assert res.status_code == 200
    assert {k: res.json()[k] for k in ANA} == ANA


async def test_create_missing_fields_is_400_with_field_errors(client):
    res = await client.post("/api/patients", json={"firstName": "Ana"})
    assert res.status_code == 400
    body = res.json()
    assert body["message"] == "Invalid request data"
    fields = {e["field"] for e in body["errors"]}
    assert "body.lastName" in fields
    assert "body.phone" in fields


async def test_get_unknown_patient_is_404(client):
    res = await client.get("/api/patients/does-not-exist")
    assert res.status_code == 404
    assert res.json()["message"] == "Patient not found"


async def test_search_requires_query(client):
    res = await client.get("/api/patients/search")
    assert res.status_code == 400
    assert res.json()["message"] == "Search query is required"


async def test_search_is_case_insensitive(client):
    await client.post("/api/patients", json={**ANA, "firstName": "Maria", "lastName": "Silva"})
    for q in ("mar", "SILVA", "1234"):
        res = await client.get("/api/patients/search", params={"q": q})
        assert [p["lastName"] for p in res.json()] == ["Silva"], q
    res = await client.get("/api/patients/search", params={"q": "zzz"})
    assert res.json() == []


async def test_patch_updates_and_ignores_list_fields(client, patient):
    res = await client.patch(
        f"/api/patients/{patient.id}",
        json={"phone": "555-9999", "allergies": ["latex"]},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["phone"] == "555-9999"
    assert body["allergies"] == ["penicillin"]
    assert body["id"] == patient.id


async def test_patch_rejects_invalid_field(client, patient):
    res = await client.patch(f"/api/patients/{patient.id}", json={"firstName": ""})
    assert res.status_code == 400


async def test_patch_unknown_patient_is_404(client):
    res = await client.patch("/api/patients/missing", json={"phone": "1"})
    assert res.status_code == 404


async def test_soft_delete(client, patient):
    res = await client.delete(f"/api/patients/{patient.id}")
    assert res.status_code == 200
    assert res.json() == {"message": "Patient deleted successfully"}

    assert (await client.delete(f"/api/patients/{patient.id}")).status_code == 404
    assert (await client.get("/api/patients")).json() == []
    res = await client.get(f"/api/patients/{patient.id}")
    assert res.json()["isActive"] is False


async def test_list_paging(client):
    for i in range(3):
        await client.post("/api/patients", json={**ANA, "firstName": f"P{i}"})
    res = await client.get("/api/patients", params={"limit": 2, "offset": 1})
    assert [p["firstName"] for p in res.json()] == ["P1", "P0"]


async def test_patient_history_endpoints(client, patient, appointment):
    res = await client.get(f"/api/patients/{patient.id}/appointments")
    assert res.status_code == 200
    assert [a["id"] for a in res.json()] == [appointment.id]
    assert res.json()[0]["doctor"]["fullName"] == "Dr. Sarah Smith"

    res = await client.get(f"/api/patients/{patient.id}/procedures")
    assert res.json() == []

    assert (await client.get("/api/patients/missing/appointments")).status_code == 404
