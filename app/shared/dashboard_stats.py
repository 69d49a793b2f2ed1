# app/shared/dashboard_stats.py
"""
Dashboard Statistics
Four independent head counts shown on the administrator dashboard.
"""
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.schema_base import CamelModel
from app.system_models.disease_case_model.disease_case_model import DiseaseCase
from app.system_models.health_alert_model.health_alert_model import HealthAlert
from app.system_models.health_record_model.health_record_model import HealthRecord
from app.system_models.patient_model.patient_model import Patient


class DashboardStats(CamelModel):
    total_patients: int
    active_alerts: int
    total_screenings: int  # health records
    total_disease_cases: int


async def _count(db: AsyncSession, model, *conditions) -> int:
    query = select(func.count()).select_from(model)
    if conditions:
        query = query.where(*conditions)
    result = await db.execute(query)
    return result.scalar_one()


async def get_dashboard_stats(db: AsyncSession) -> DashboardStats:
    return DashboardStats(
        total_patients=await _count(db, Patient),
        active_alerts=await _count(db, HealthAlert, HealthAlert.is_active.is_(True)),
        total_screenings=await _count(db, HealthRecord),
        total_disease_cases=await _count(db, DiseaseCase),
    )
