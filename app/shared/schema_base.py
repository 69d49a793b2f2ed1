# app/shared/schema_base.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for every wire schema.
    Python side stays snake_case, JSON side is camelCase (patientId, healthStatus, ...).
    Unknown keys are rejected so clients cannot smuggle in system-generated fields.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="forbid",
    )
