# tests/test_services.py
from datetime import date

import pytest

from app.database.connection import build_engine, build_session_factory, create_tables
from app.system_models.disease_case_model.disease_case_model import DiseaseCase
from app.system_models.disease_case_model.disease_case_schemas import DiseaseCaseFilters
from app.system_models.patient_model.patient_model import Patient
from app.system_models.patient_model.patient_schemas import PatientCreate, PatientFilters, PatientUpdate
from app.system_services.disease_case_services import get_disease_cases
from app.system_services.exceptions import DuplicateRecordError, RecordNotFoundError
from app.system_services.patient_services import (
    PATIENT_SEQUENCE,
    create_patient,
    ensure_counter,
    format_patient_id,
    get_patients,
    next_patient_number,
    update_patient,
)
from app.users.security import verify_password
from app.users.user_models.schemas import UserCreate
from app.users.user_services import create_user, get_user, get_user_by_username, password_matches


def new_patient(**overrides):
    data = {"name": "Ravi Kumar", "age": 34, "gender": "male", "district": "Ernakulam"}
    data.update(overrides)
    return PatientCreate(**data)


def test_format_patient_id():
    assert format_patient_id(42) == "MW000042"
    assert format_patient_id(1) == "MW000001"


async def test_sequence_continues_from_existing_patients(db):
    # Rows that predate the counter table
    for n in (1, 2, 3):
        db.add(Patient(patient_id=format_patient_id(n), name=f"Legacy {n}", age=30, gender="female", district="Kollam"))
    await db.commit()

    first = await create_patient(db, new_patient())
    second = await create_patient(db, new_patient(name="Meena Das"))

    assert first.patient_id == "MW000004"
    assert second.patient_id == "MW000005"


async def test_counter_seed_leaves_an_existing_counter_alone(db):
    first = await create_patient(db, new_patient())

    # A second seeder losing the race must not reset the counter
    await ensure_counter(db, PATIENT_SEQUENCE, 0)
    await ensure_counter(db, PATIENT_SEQUENCE, 0)
    await db.commit()

    second = await create_patient(db, new_patient(name="Meena Das"))

    assert first.patient_id == "MW000001"
    assert second.patient_id == "MW000002"
    assert await next_patient_number(db) == 3


async def test_get_patients_without_filters_returns_everyone(db):
    await create_patient(db, new_patient())
    await create_patient(db, new_patient(name="Meena Das", district="Kollam"))

    assert len(await get_patients(db)) == 2
    assert len(await get_patients(db, PatientFilters())) == 2


async def test_district_filter_escapes_wildcards(db):
    await create_patient(db, new_patient(district="Ward_5"))
    await create_patient(db, new_patient(district="Ward15"))

    matches = await get_patients(db, PatientFilters(district="d_5"))

    assert [p.district for p in matches] == ["Ward_5"]


async def test_update_missing_patient_raises(db):
    with pytest.raises(RecordNotFoundError):
        await update_patient(db, "missing", PatientUpdate(age=40))


async def test_update_only_touches_given_fields(db):
    patient = await create_patient(db, new_patient(phone="111"))

    updated = await update_patient(db, patient.id, PatientUpdate(phone="222"))

    assert updated.phone == "222"
    assert updated.district == "Ernakulam"
    assert updated.health_status == "healthy"


async def test_dangling_references_keep_the_case_row(database_url):
    engine = build_engine(database_url, enforce_foreign_keys=False)
    await create_tables(engine)
    try:
        async with build_session_factory(engine)() as db:
            db.add(DiseaseCase(patient_id="gone", disease_id="gone", diagnosis_date=date(2024, 6, 1)))
            await db.commit()

            cases = await get_disease_cases(db)
            filtered = await get_disease_cases(db, DiseaseCaseFilters(status="active"))
    finally:
        await engine.dispose()

    assert len(cases) == 1
    assert cases[0].patient_name is None
    assert cases[0].patient_district is None
    assert cases[0].disease_name is None
    assert len(filtered) == 1


async def test_user_lookup_returns_none_when_absent(db):
    assert await get_user(db, "missing") is None
    assert await get_user_by_username(db, "nobody") is None


async def test_create_user_hashes_password(db):
    user = await create_user(db, UserCreate(username="asha", password="s3cure-pass", name="Asha Nair"))

    assert user.role == "health_worker"
    assert user.password != "s3cure-pass"
    assert verify_password("s3cure-pass", user.password)
    assert password_matches(user, "s3cure-pass")
    assert not password_matches(user, "wrong-pass")
    assert (await get_user_by_username(db, "asha")).id == user.id
    assert (await get_user(db, user.id)).username == "asha"


async def test_duplicate_username_raises(db):
    await create_user(db, UserCreate(username="asha", password="s3cure-pass", name="Asha Nair"))

    with pytest.raises(DuplicateRecordError):
        await create_user(db, UserCreate(username="asha", password="other-pass", name="Asha N"))
