# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from config.appconfig import settings
from app.database import models  # noqa: F401
from app.database.connection import build_engine, build_session_factory, create_tables
from app.main import app


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'surveillance.db'}"


@pytest.fixture
def client(monkeypatch, database_url):
    # lifespan reads the URL at startup, so each test gets a fresh database
    monkeypatch.setattr(settings, "DATABASE_URL", database_url)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def patient_payload():
    return {
        "name": "Ravi Kumar",
        "age": 34,
        "gender": "male",
        "district": "Ernakulam",
        "workplace": "Kochi Shipyard",
        "employerName": "Coastal Builders",
        "emergencyContact": "Anita Kumar",
        "emergencyPhone": "+91 98470 00000",
    }


@pytest.fixture
def make_patient(client, patient_payload):
    def _make(**overrides):
        response = client.post("/api/patients", json={**patient_payload, **overrides})
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_disease(client):
    def _make(name="Dengue", **overrides):
        payload = {"name": name, "type": "infectious", "infectious": True, "reportable": True}
        response = client.post("/api/diseases", json={**payload, **overrides})
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
async def engine(database_url):
    engine = build_engine(database_url)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db(engine):
    async with build_session_factory(engine)() as session:
        yield session
