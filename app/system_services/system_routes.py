# app/system_services/system_routes.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.connection import get_db
from app.shared.error_handlers import format_validation_errors, invalid_payload
from app.system_models.disease_case_model.disease_case_schemas import (
    DiseaseCaseCreate,
    DiseaseCaseDetail,
    DiseaseCaseFilters,
    DiseaseCaseResponse,
)
from app.system_models.disease_model.disease_schemas import DiseaseCreate, DiseaseResponse, DiseaseStat
from app.system_models.health_alert_model.health_alert_schemas import (
    HealthAlertCreate,
    HealthAlertResponse,
    HealthAlertUpdate,
)
from app.system_models.health_record_model.health_record_schemas import HealthRecordCreate, HealthRecordResponse
from app.system_models.patient_model.patient_schemas import (
    PatientCount,
    PatientCreate,
    PatientFilters,
    PatientResponse,
    PatientUpdate,
)
from app.system_services.disease_case_services import create_disease_case, get_disease_cases
from app.system_services.disease_services import create_disease, get_disease_stats, get_diseases
from app.system_services.exceptions import DuplicateRecordError, InvalidReferenceError, RecordNotFoundError
from app.system_services.health_alert_services import create_health_alert, get_health_alerts, update_health_alert
from app.system_services.health_record_services import (
    create_health_record,
    get_health_record_by_id,
    get_health_records,
)
from app.system_services.patient_services import (
    create_patient,
    get_patient_by_id,
    get_patients,
    get_patients_count,
    update_patient,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Raised by the database driver when storage is unreachable or a query fails
STORAGE_ERRORS = (SQLAlchemyError, OSError)


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """Form clients send ?district= for "any district"."""
    if value is None or value == "":
        return None
    return value


def storage_failure(message: str) -> HTTPException:
    logger.exception(message)
    return HTTPException(status_code=500, detail=message)


def invalid_filters(error: ValidationError) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={"message": "Invalid request data", "errors": format_validation_errors(error.errors())},
    )


# ============================================================
# ✅ PATIENTS
# ============================================================
@router.get("/patients", response_model=List[PatientResponse])
async def get_patients_endpoint(
    district: Optional[str] = Query(None),
    health_status: Optional[str] = Query(None, alias="healthStatus"),
    search: Optional[str] = Query(None),
    limit: Optional[int] = Query(None, ge=1),
    offset: Optional[int] = Query(None, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """List patients, newest first. All filters combine with AND."""
    try:
        filters = PatientFilters.model_validate(
            {
                "district": blank_to_none(district),
                "healthStatus": blank_to_none(health_status),
                "search": blank_to_none(search),
                "limit": limit,
                "offset": offset,
            }
        )
    except ValidationError as e:
        raise invalid_filters(e)

    try:
        return await get_patients(db, filters)
    except STORAGE_ERRORS:
        raise storage_failure("Failed to fetch patients")


@router.get("/patients/count", response_model=PatientCount)
async def get_patients_count_endpoint(db: AsyncSession = Depends(get_db)):
    try:
        return PatientCount(count=await get_patients_count(db))
    except STORAGE_ERRORS:
        raise storage_failure("Failed to fetch patients count")


@router.get("/patients/{patient_id}", response_model=PatientResponse)
async def get_patient_endpoint(patient_id: str, db: AsyncSession = Depends(get_db)):
    try:
        patient = await get_patient_by_id(db, patient_id)
    except STORAGE_ERRORS:
        raise storage_failure("Failed to fetch patient")
    if patient is None:
        raise HTTPException(status_code=404, detail="Patient not found")
    return patient


@router.post("/patients", response_model=PatientResponse, status_code=201)
async def create_patient_endpoint(patient: PatientCreate, db: AsyncSession = Depends(get_db)):
    """Register a migrant worker. The staff-facing patientId is generated here."""
    try:
        return await create_patient(db, patient)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=400, detail=invalid_payload("Invalid patient data", e))
    except STORAGE_ERRORS:
        raise storage_failure("Failed to create patient")


@router.put("/patients/{patient_id}", response_model=PatientResponse)
async def update_patient_endpoint(
    patient_id: str, updates: PatientUpdate, db: AsyncSession = Depends(get_db)
):
    try:
        return await update_patient(db, patient_id, updates)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Patient not found")
    except InvalidReferenceError as e:
        raise HTTPException(status_code=400, detail=invalid_payload("Invalid patient data", e))
    except STORAGE_ERRORS:
        raise storage_failure("Failed to update patient")


# ============================================================
# ✅ HEALTH RECORDS
# ============================================================
@router.get("/health-records", response_model=List[HealthRecordResponse])
async def get_health_records_endpoint(
    patient_id: Optional[str] = Query(None, alias="patientId"),
    db: AsyncSession = Depends(get_db),
):
    try:
        return await get_health_records(db, blank_to_none(patient_id))
    except STORAGE_ERRORS:
        raise storage_failure("Failed to fetch health records")


@router.get("/health-records/{record_id}", response_model=HealthRecordResponse)
async def get_health_record_endpoint(record_id: str, db: AsyncSession = Depends(get_db)):
    try:
        record = await get_health_record_by_id(db, record_id)
    except STORAGE_ERRORS:
        raise storage_failure("Failed to fetch health record")
    if record is None:
        raise HTTPException(status_code=404, detail="Health record not found")
    return record


@router.post("/health-records", response_model=HealthRecordResponse, status_code=201)
async def create_health_record_endpoint(record: HealthRecordCreate, db: AsyncSession = Depends(get_db)):
    try:
        return await create_health_record(db, record)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=400, detail=invalid_payload("Invalid health record data", e))
    except STORAGE_ERRORS:
        raise storage_failure("Failed to create health record")


# ============================================================
# ✅ DISEASES
# ============================================================
@router.get("/diseases", response_model=List[DiseaseResponse])
async def get_diseases_endpoint(db: AsyncSession = Depends(get_db)):
    try:
        return await get_diseases(db)
    except STORAGE_ERRORS:
        raise storage_failure("Failed to fetch diseases")


@router.post("/diseases", response_model=DiseaseResponse, status_code=201)
async def create_disease_endpoint(disease: DiseaseCreate, db: AsyncSession = Depends(get_db)):
    try:
        return await create_disease(db, disease)
    except DuplicateRecordError as e:
        raise HTTPException(status_code=400, detail=invalid_payload("Invalid disease data", e))
    except STORAGE_ERRORS:
        raise storage_failure("Failed to create disease")


# ============================================================
# ✅ DISEASE CASES
# ============================================================
@router.get("/disease-cases", response_model=List[DiseaseCaseDetail])
async def get_disease_cases_endpoint(
    patient_id: Optional[str] = Query(None, alias="patientId"),
    disease_id: Optional[str] = Query(None, alias="diseaseId"),
    district: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Cases joined with patient name/district and disease name."""
    filters = DiseaseCaseFilters(
        patient_id=blank_to_none(patient_id),
        disease_id=blank_to_none(disease_id),
        district=blank_to_none(district),
        status=blank_to_none(status),
    )
    try:
        return await get_disease_cases(db, filters)
    except STORAGE_ERRORS:
        raise storage_failure("Failed to fetch disease cases")


@router.post("/disease-cases", response_model=DiseaseCaseResponse, status_code=201)
async def create_disease_case_endpoint(disease_case: DiseaseCaseCreate, db: AsyncSession = Depends(get_db)):
    try:
        return await create_disease_case(db, disease_case)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=400, detail=invalid_payload("Invalid disease case data", e))
    except STORAGE_ERRORS:
        raise storage_failure("Failed to create disease case")


@router.get("/disease-cases/stats", response_model=List[DiseaseStat])
async def get_disease_stats_endpoint(db: AsyncSession = Depends(get_db)):
    """Case count per disease, including diseases with no cases."""
    try:
        return await get_disease_stats(db)
    except STORAGE_ERRORS:
        raise storage_failure("Failed to fetch disease stats")


# ============================================================
# ✅ HEALTH ALERTS
# ============================================================
@router.get("/health-alerts", response_model=List[HealthAlertResponse])
async def get_health_alerts_endpoint(
    active_only: Optional[str] = Query(None, alias="activeOnly"),
    db: AsyncSession = Depends(get_db),
):
    # Only the literal "true" narrows the list
    try:
        return await get_health_alerts(db, active_only=active_only == "true")
    except STORAGE_ERRORS:
        raise storage_failure("Failed to fetch health alerts")


@router.post("/health-alerts", response_model=HealthAlertResponse, status_code=201)
async def create_health_alert_endpoint(alert: HealthAlertCreate, db: AsyncSession = Depends(get_db)):
    try:
        return await create_health_alert(db, alert)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=400, detail=invalid_payload("Invalid alert data", e))
    except STORAGE_ERRORS:
        raise storage_failure("Failed to create health alert")


@router.put("/health-alerts/{alert_id}", response_model=HealthAlertResponse)
async def update_health_alert_endpoint(
    alert_id: str, updates: HealthAlertUpdate, db: AsyncSession = Depends(get_db)
):
    try:
        return await update_health_alert(db, alert_id, updates)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Health alert not found")
    except InvalidReferenceError as e:
        raise HTTPException(status_code=400, detail=invalid_payload("Invalid alert data", e))
    except STORAGE_ERRORS:
        raise storage_failure("Failed to update health alert")
