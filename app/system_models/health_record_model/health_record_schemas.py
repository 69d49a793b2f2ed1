# app/system_models/health_record_model/health_record_schemas.py
from typing import Optional
from datetime import date, datetime

from app.shared.schema_base import CamelModel


class HealthRecordBase(CamelModel):
    patient_id: str
    checkup_date: date
    symptoms: Optional[str] = None
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None
    medications: Optional[str] = None
    notes: Optional[str] = None
    followup_required: bool = False
    followup_date: Optional[date] = None
    created_by: Optional[str] = None


class HealthRecordCreate(HealthRecordBase):
    pass


class HealthRecordResponse(HealthRecordBase):
    id: str
    followup_required: Optional[bool] = False
    created_at: datetime
