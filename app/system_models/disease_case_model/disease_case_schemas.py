# app/system_models/disease_case_model/disease_case_schemas.py
from typing import Optional
from datetime import date, datetime

from pydantic import Field

from app.shared.schema_base import CamelModel


class DiseaseCaseBase(CamelModel):
    patient_id: str
    disease_id: str
    diagnosis_date: date
    status: str = Field("active", min_length=1)  # active, recovered, chronic
    severity: str = Field("mild", min_length=1)  # mild, moderate, severe
    notes: Optional[str] = None
    reported_by: Optional[str] = None


class DiseaseCaseCreate(DiseaseCaseBase):
    pass


class DiseaseCaseResponse(DiseaseCaseBase):
    id: str
    reported_at: datetime


class DiseaseCaseDetail(DiseaseCaseResponse):
    """Case row joined with its patient and disease. Dangling references give None."""

    patient_name: Optional[str] = None
    patient_district: Optional[str] = None
    disease_name: Optional[str] = None


class DiseaseCaseFilters(CamelModel):
    patient_id: Optional[str] = None  # exact
    disease_id: Optional[str] = None  # exact
    district: Optional[str] = None  # substring of the patient's district
    status: Optional[str] = None  # exact
