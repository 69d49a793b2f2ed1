# app/system_models/health_record_model/health_record_model.py
import uuid

from sqlalchemy import Column, String, Text, Boolean, Date, ForeignKey
from sqlalchemy.orm import relationship

from app.database.connection import Base
from app.database.types import UTCDateTime
from app.helpers.time import utcnow


class HealthRecord(Base):
    __tablename__ = "health_records"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    patient_id = Column(String(36), ForeignKey("patients.id"), nullable=False, index=True)

    checkup_date = Column(Date, nullable=False)
    symptoms = Column(Text, nullable=True)
    diagnosis = Column(Text, nullable=True)
    treatment = Column(Text, nullable=True)
    medications = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    followup_required = Column(Boolean, default=False)
    followup_date = Column(Date, nullable=True)  # only meaningful with followup_required

    created_by = Column(String(36), ForeignKey("users.id"), nullable=True)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)

    patient = relationship("Patient", back_populates="health_records")
