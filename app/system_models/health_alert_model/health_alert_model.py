# app/system_models/health_alert_model/health_alert_model.py
import uuid

from sqlalchemy import Column, Integer, String, Text, Boolean, Enum, ForeignKey
from sqlalchemy.orm import relationship

from app.database.connection import Base
from app.database.types import UTCDateTime
from app.helpers.time import utcnow
from app.system_models.enums import ALERT_SEVERITIES


class HealthAlert(Base):
    __tablename__ = "health_alerts"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    severity = Column(Enum(*ALERT_SEVERITIES, name="alert_severity", create_constraint=True), nullable=False)
    district = Column(Text, nullable=True)
    disease_id = Column(String(36), ForeignKey("diseases.id"), nullable=True)
    affected_count = Column(Integer, default=0)
    is_active = Column(Boolean, default=True)  # false = retired alert, rows are never deleted

    created_at = Column(UTCDateTime, nullable=False, default=utcnow)
    created_by = Column(String(36), ForeignKey("users.id"), nullable=True)

    disease = relationship("Disease", back_populates="alerts")
