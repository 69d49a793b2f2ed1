# app/system_services/health_record_services.py
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.system_models.health_record_model.health_record_model import HealthRecord
from app.system_models.health_record_model.health_record_schemas import HealthRecordCreate
from app.system_models.patient_model.patient_model import Patient
from app.system_services.exceptions import InvalidReferenceError
from app.system_services.references import ensure_exists
from app.users.user_models.user_model import User


async def get_health_records(db: AsyncSession, patient_id: Optional[str] = None) -> List[HealthRecord]:
    """All checkups, or one patient's, latest checkup date first."""
    query = select(HealthRecord)
    if patient_id is not None:
        query = query.where(HealthRecord.patient_id == patient_id)
    query = query.order_by(HealthRecord.checkup_date.desc())

    result = await db.execute(query)
    return list(result.scalars().all())


async def get_health_record_by_id(db: AsyncSession, record_id: str) -> Optional[HealthRecord]:
    return await db.get(HealthRecord, record_id)


async def create_health_record(db: AsyncSession, record: HealthRecordCreate) -> HealthRecord:
    """Log a checkup against an existing patient."""
    if await db.get(Patient, record.patient_id) is None:
        raise InvalidReferenceError("patientId", record.patient_id)
    await ensure_exists(db, User, record.created_by, "createdBy")

    db_record = HealthRecord(**record.model_dump())
    db.add(db_record)
    await db.commit()
    await db.refresh(db_record)
    return db_record
