# tests/test_disease_cases_api.py
import pytest


@pytest.fixture
def outbreak(client, make_patient, make_disease):
    dengue = make_disease("Dengue")
    malaria = make_disease("Malaria")
    ravi = make_patient(name="Ravi Kumar", district="Ernakulam")
    meena = make_patient(name="Meena Das", district="Kollam")

    def report(patient, disease, **overrides):
        payload = {"patientId": patient["id"], "diseaseId": disease["id"], "diagnosisDate": "2024-06-01"}
        payload.update(overrides)
        response = client.post("/api/disease-cases", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    cases = [
        report(ravi, dengue),
        report(meena, dengue, status="recovered"),
        report(meena, malaria, severity="severe"),
    ]
    return {"dengue": dengue, "malaria": malaria, "ravi": ravi, "meena": meena, "cases": cases}


def test_case_defaults(outbreak):
    first = outbreak["cases"][0]

    assert first["status"] == "active"
    assert first["severity"] == "mild"
    assert first["reportedAt"]


def test_cases_are_denormalized(client, outbreak):
    cases = client.get("/api/disease-cases").json()

    assert len(cases) == 3
    by_id = {c["id"]: c for c in cases}
    first = by_id[outbreak["cases"][0]["id"]]
    assert first["patientName"] == "Ravi Kumar"
    assert first["patientDistrict"] == "Ernakulam"
    assert first["diseaseName"] == "Dengue"
    reported = [c["reportedAt"] for c in cases]
    assert reported == sorted(reported, reverse=True)


def test_filter_by_district_uses_patient_district(client, outbreak):
    cases = client.get("/api/disease-cases", params={"district": "Koll"}).json()

    assert len(cases) == 2
    assert all(c["patientDistrict"] == "Kollam" for c in cases)


def test_filter_by_district_is_case_sensitive(client, outbreak):
    assert client.get("/api/disease-cases", params={"district": "kollam"}).json() == []
    assert client.get("/api/disease-cases", params={"district": "KOLLAM"}).json() == []


def test_filter_by_status_and_disease(client, outbreak):
    cases = client.get(
        "/api/disease-cases",
        params={"diseaseId": outbreak["dengue"]["id"], "status": "active"},
    ).json()

    assert [c["patientName"] for c in cases] == ["Ravi Kumar"]


def test_filter_by_patient(client, outbreak):
    cases = client.get("/api/disease-cases", params={"patientId": outbreak["meena"]["id"]}).json()

    assert {c["diseaseName"] for c in cases} == {"Dengue", "Malaria"}


def test_case_for_unknown_disease_is_rejected(client, make_patient):
    patient = make_patient()

    response = client.post(
        "/api/disease-cases",
        json={"patientId": patient["id"], "diseaseId": "ghost", "diagnosisDate": "2024-06-01"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid disease case data"
    assert body["errors"][0]["field"] == "diseaseId"


def test_case_requires_diagnosis_date(client, outbreak):
    response = client.post(
        "/api/disease-cases",
        json={"patientId": outbreak["ravi"]["id"], "diseaseId": outbreak["malaria"]["id"]},
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "diagnosisDate"
