# app/system_models/disease_model/disease_schemas.py
from typing import Optional

from pydantic import Field, field_validator

from app.shared.schema_base import CamelModel
from app.system_models.enums import DISEASE_TYPE


class DiseaseBase(CamelModel):
    name: str = Field(..., min_length=1)
    type: DISEASE_TYPE
    description: Optional[str] = None
    symptoms: Optional[str] = None
    infectious: bool = False
    reportable: bool = False

    @field_validator("name", mode="before")
    def strip_name(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class DiseaseCreate(DiseaseBase):
    pass


class DiseaseResponse(DiseaseBase):
    id: str
    infectious: Optional[bool] = False
    reportable: Optional[bool] = False


class DiseaseStat(CamelModel):
    name: str
    count: int
