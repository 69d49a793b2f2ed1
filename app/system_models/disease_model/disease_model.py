# app/system_models/disease_model/disease_model.py
import uuid

from sqlalchemy import Column, String, Text, Boolean, Enum
from sqlalchemy.orm import relationship

from app.database.connection import Base
from app.system_models.enums import DISEASE_TYPES


class Disease(Base):
    __tablename__ = "diseases"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Text, unique=True, nullable=False)
    type = Column(Enum(*DISEASE_TYPES, name="disease_type", create_constraint=True), nullable=False)
    description = Column(Text, nullable=True)
    symptoms = Column(Text, nullable=True)
    infectious = Column(Boolean, default=False)
    reportable = Column(Boolean, default=False)

    cases = relationship("DiseaseCase", back_populates="disease")
    alerts = relationship("HealthAlert", back_populates="disease")

    def __repr__(self):
        return f"<Disease(id={self.id}, name='{self.name}')>"
