# app/system_models/disease_case_model/disease_case_model.py
import uuid

from sqlalchemy import Column, String, Text, Date, ForeignKey
from sqlalchemy.orm import relationship

from app.database.connection import Base
from app.database.types import UTCDateTime
from app.helpers.time import utcnow


class DiseaseCase(Base):
    __tablename__ = "disease_cases"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    patient_id = Column(String(36), ForeignKey("patients.id"), nullable=False, index=True)
    disease_id = Column(String(36), ForeignKey("diseases.id"), nullable=False, index=True)

    diagnosis_date = Column(Date, nullable=False)
    status = Column(Text, nullable=False, default="active")  # active, recovered, chronic
    severity = Column(Text, nullable=False, default="mild")  # mild, moderate, severe
    notes = Column(Text, nullable=True)

    reported_at = Column(UTCDateTime, nullable=False, default=utcnow)
    reported_by = Column(String(36), ForeignKey("users.id"), nullable=True)

    patient = relationship("Patient", back_populates="disease_cases")
    disease = relationship("Disease", back_populates="cases")
