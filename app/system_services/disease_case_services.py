# app/system_services/disease_case_services.py
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.system_models.disease_case_model.disease_case_model import DiseaseCase
from app.system_models.disease_case_model.disease_case_schemas import (
    DiseaseCaseCreate,
    DiseaseCaseDetail,
    DiseaseCaseFilters,
    DiseaseCaseResponse,
)
from app.system_models.disease_model.disease_model import Disease
from app.system_models.patient_model.patient_model import Patient
from app.system_services.exceptions import InvalidReferenceError
from app.system_services.references import ensure_exists
from app.users.user_models.user_model import User

logger = logging.getLogger(__name__)


async def get_disease_cases(
    db: AsyncSession, filters: Optional[DiseaseCaseFilters] = None
) -> List[DiseaseCaseDetail]:
    """Cases with patient name/district and disease name, most recently reported first."""
    filters = filters or DiseaseCaseFilters()
    query = (
        select(
            DiseaseCase,
            Patient.name.label("patient_name"),
            Patient.district.label("patient_district"),
            Disease.name.label("disease_name"),
        )
        .outerjoin(Patient, DiseaseCase.patient_id == Patient.id)
        .outerjoin(Disease, DiseaseCase.disease_id == Disease.id)
    )

    if filters.patient_id is not None:
        query = query.where(DiseaseCase.patient_id == filters.patient_id)
    if filters.disease_id is not None:
        query = query.where(DiseaseCase.disease_id == filters.disease_id)
    if filters.district is not None:
        query = query.where(Patient.district.contains(filters.district, autoescape=True))
    if filters.status is not None:
        query = query.where(DiseaseCase.status == filters.status)

    query = query.order_by(DiseaseCase.reported_at.desc())

    result = await db.execute(query)
    return [
        DiseaseCaseDetail(
            **DiseaseCaseResponse.model_validate(case).model_dump(),
            patient_name=patient_name,
            patient_district=patient_district,
            disease_name=disease_name,
        )
        for case, patient_name, patient_district, disease_name in result.all()
    ]


async def create_disease_case(db: AsyncSession, disease_case: DiseaseCaseCreate) -> DiseaseCase:
    """Report a diagnosed case. Patient and disease must already exist."""
    if await db.get(Patient, disease_case.patient_id) is None:
        raise InvalidReferenceError("patientId", disease_case.patient_id)
    if await db.get(Disease, disease_case.disease_id) is None:
        raise InvalidReferenceError("diseaseId", disease_case.disease_id)
    await ensure_exists(db, User, disease_case.reported_by, "reportedBy")

    db_case = DiseaseCase(**disease_case.model_dump())
    db.add(db_case)
    await db.commit()
    await db.refresh(db_case)
    logger.info(f"Disease case reported: disease={db_case.disease_id} patient={db_case.patient_id}")
    return db_case
