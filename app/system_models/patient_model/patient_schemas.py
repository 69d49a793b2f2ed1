# app/system_models/patient_model/patient_schemas.py
from typing import Optional
from datetime import date, datetime

from pydantic import Field, field_validator

from app.shared.schema_base import CamelModel
from app.system_models.enums import GENDER, HEALTH_STATUS


class PatientBase(CamelModel):
    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0, le=150)
    gender: GENDER
    phone: Optional[str] = None
    address: Optional[str] = None
    district: str = Field(..., min_length=1)
    workplace: Optional[str] = None
    employer_name: Optional[str] = None
    emergency_contact: Optional[str] = None
    emergency_phone: Optional[str] = None
    health_status: HEALTH_STATUS = "healthy"
    last_checkup: Optional[date] = None
    registered_by: Optional[str] = None


class PatientCreate(PatientBase):
    pass


class PatientUpdate(CamelModel):
    """Partial update. patientId, id and registeredAt are not accepted."""

    name: Optional[str] = Field(None, min_length=1)
    age: Optional[int] = Field(None, ge=0, le=150)
    gender: Optional[GENDER] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    district: Optional[str] = Field(None, min_length=1)
    workplace: Optional[str] = None
    employer_name: Optional[str] = None
    emergency_contact: Optional[str] = None
    emergency_phone: Optional[str] = None
    health_status: Optional[HEALTH_STATUS] = None
    last_checkup: Optional[date] = None
    registered_by: Optional[str] = None

    @field_validator("name", "age", "gender", "district", "health_status")
    def required_columns_not_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v


class PatientResponse(PatientBase):
    id: str
    patient_id: str
    registered_at: datetime


class PatientCount(CamelModel):
    count: int


class PatientFilters(CamelModel):
    """Listing filters. None means no constraint; all given filters are ANDed."""

    district: Optional[str] = None  # substring, case-sensitive
    health_status: Optional[HEALTH_STATUS] = None  # exact
    search: Optional[str] = None  # name or patient_id, case-insensitive
    limit: Optional[int] = Field(None, ge=1)
    offset: Optional[int] = Field(None, ge=0)
