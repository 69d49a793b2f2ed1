# app/system_models/patient_model/patient_model.py
import uuid

from sqlalchemy import Column, Integer, String, Text, Date, Enum, ForeignKey
from sqlalchemy.orm import relationship

from app.database.connection import Base
from app.database.types import UTCDateTime
from app.helpers.time import utcnow
from app.system_models.enums import GENDERS, HEALTH_STATUSES


class Patient(Base):
    __tablename__ = "patients"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    patient_id = Column(String, unique=True, nullable=False, index=True)  # e.g. MW000042

    name = Column(Text, nullable=False)
    age = Column(Integer, nullable=False)
    gender = Column(Enum(*GENDERS, name="gender", create_constraint=True), nullable=False)
    phone = Column(Text, nullable=True)
    address = Column(Text, nullable=True)
    district = Column(Text, nullable=False, index=True)
    workplace = Column(Text, nullable=True)
    employer_name = Column(Text, nullable=True)
    emergency_contact = Column(Text, nullable=True)
    emergency_phone = Column(Text, nullable=True)
    health_status = Column(
        Enum(*HEALTH_STATUSES, name="health_status", create_constraint=True), nullable=False, default="healthy"
    )

    registered_at = Column(UTCDateTime, nullable=False, default=utcnow)
    last_checkup = Column(Date, nullable=True)
    registered_by = Column(String(36), ForeignKey("users.id"), nullable=True)

    health_records = relationship("HealthRecord", back_populates="patient")
    disease_cases = relationship("DiseaseCase", back_populates="patient")

    def __repr__(self):
        return f"<Patient {self.patient_id}: {self.name}>"
