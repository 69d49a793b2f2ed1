# tests/test_dashboard_api.py
from sqlalchemy.exc import OperationalError

from app.shared import dashboard_routes


def test_empty_dashboard(client):
    response = client.get("/api/dashboard/stats")

    assert response.status_code == 200
    assert response.json() == {
        "totalPatients": 0,
        "activeAlerts": 0,
        "totalScreenings": 0,
        "totalDiseaseCases": 0,
    }


def test_dashboard_counts(client, make_patient, make_disease):
    patient = make_patient()
    make_patient(name="Meena Das")
    dengue = make_disease("Dengue")
    client.post("/api/health-records", json={"patientId": patient["id"], "checkupDate": "2024-03-01"})
    client.post(
        "/api/disease-cases",
        json={"patientId": patient["id"], "diseaseId": dengue["id"], "diagnosisDate": "2024-03-01"},
    )
    alert = {"title": "Dengue cluster", "description": "Camp outbreak", "severity": "medium"}
    client.post("/api/health-alerts", json=alert)
    client.post("/api/health-alerts", json={**alert, "isActive": False})

    stats = client.get("/api/dashboard/stats").json()

    assert stats == {
        "totalPatients": 2,
        "activeAlerts": 1,
        "totalScreenings": 1,
        "totalDiseaseCases": 1,
    }


def test_dashboard_storage_failure(client, monkeypatch):
    async def unavailable(db):
        raise OperationalError("SELECT", {}, ConnectionRefusedError("connection refused"))

    monkeypatch.setattr(dashboard_routes, "get_dashboard_stats", unavailable)

    response = client.get("/api/dashboard/stats")

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to fetch dashboard stats"}


def test_liveness_endpoint(client):
    assert client.get("/health").json() == {"status": "ok"}
