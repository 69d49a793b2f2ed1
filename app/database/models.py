# app/database/models.py
# Every ORM model, imported once so Base.metadata knows all tables.
from app.users.user_models.user_model import User
from app.system_models.patient_model.patient_model import Patient
from app.system_models.health_record_model.health_record_model import HealthRecord
from app.system_models.disease_model.disease_model import Disease
from app.system_models.disease_case_model.disease_case_model import DiseaseCase
from app.system_models.health_alert_model.health_alert_model import HealthAlert
from app.system_models.sequence_model.sequence_model import SequenceCounter

__all__ = [
    "User",
    "Patient",
    "HealthRecord",
    "Disease",
    "DiseaseCase",
    "HealthAlert",
    "SequenceCounter",
]
