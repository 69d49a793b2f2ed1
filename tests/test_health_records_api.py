# tests/test_health_records_api.py
from datetime import datetime, timedelta


def record_payload(patient_id, **overrides):
    payload = {
        "patientId": patient_id,
        "checkupDate": "2024-03-01",
        "symptoms": "Cough for three weeks",
        "diagnosis": "Suspected tuberculosis",
        "treatment": "Sputum test ordered",
    }
    payload.update(overrides)
    return payload


def test_create_health_record(client, make_patient):
    patient = make_patient()

    response = client.post("/api/health-records", json=record_payload(patient["id"]))

    assert response.status_code == 201
    record = response.json()
    assert record["id"]
    assert record["patientId"] == patient["id"]
    assert record["followupRequired"] is False
    assert record["followupDate"] is None
    assert datetime.fromisoformat(record["createdAt"].replace("Z", "+00:00")).utcoffset() == timedelta(0)


def test_create_health_record_for_unknown_patient_is_rejected(client):
    response = client.post("/api/health-records", json=record_payload("ghost"))

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid health record data"
    assert body["errors"][0]["field"] == "patientId"
    assert client.get("/api/health-records").json() == []


def test_create_health_record_requires_checkup_date(client, make_patient):
    patient = make_patient()
    payload = record_payload(patient["id"])
    del payload["checkupDate"]

    response = client.post("/api/health-records", json=payload)

    assert response.status_code == 400
    assert "checkupDate" in [error["field"] for error in response.json()["errors"]]


def test_list_health_records_for_patient_latest_first(client, make_patient):
    ravi = make_patient()
    meena = make_patient(name="Meena Das")
    client.post("/api/health-records", json=record_payload(ravi["id"], checkupDate="2024-01-10"))
    client.post("/api/health-records", json=record_payload(ravi["id"], checkupDate="2024-04-22"))
    client.post("/api/health-records", json=record_payload(meena["id"], checkupDate="2024-02-15"))

    everything = client.get("/api/health-records").json()
    ravis = client.get("/api/health-records", params={"patientId": ravi["id"]}).json()

    assert [r["checkupDate"] for r in everything] == ["2024-04-22", "2024-02-15", "2024-01-10"]
    assert [r["checkupDate"] for r in ravis] == ["2024-04-22", "2024-01-10"]


def test_get_health_record_round_trip(client, make_patient):
    patient = make_patient()
    created = client.post(
        "/api/health-records",
        json=record_payload(patient["id"], followupRequired=True, followupDate="2024-03-15"),
    ).json()

    response = client.get(f"/api/health-records/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_missing_health_record_returns_404(client):
    response = client.get("/api/health-records/missing")

    assert response.status_code == 404
    assert response.json()["message"] == "Health record not found"
