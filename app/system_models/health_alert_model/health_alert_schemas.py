# app/system_models/health_alert_model/health_alert_schemas.py
from typing import Optional
from datetime import datetime

from pydantic import Field, field_validator

from app.shared.schema_base import CamelModel
from app.system_models.enums import ALERT_SEVERITY


class HealthAlertBase(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    severity: ALERT_SEVERITY
    district: Optional[str] = None
    disease_id: Optional[str] = None
    affected_count: int = Field(0, ge=0)
    is_active: bool = True
    created_by: Optional[str] = None


class HealthAlertCreate(HealthAlertBase):
    pass


class HealthAlertUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    severity: Optional[ALERT_SEVERITY] = None
    district: Optional[str] = None
    disease_id: Optional[str] = None
    affected_count: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None

    @field_validator("title", "description", "severity", "affected_count", "is_active")
    def required_columns_not_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v


class HealthAlertResponse(HealthAlertBase):
    id: str
    affected_count: Optional[int] = 0
    is_active: Optional[bool] = True
    created_at: datetime
