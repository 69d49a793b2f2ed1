# app/system_services/health_alert_services.py
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.system_models.disease_model.disease_model import Disease
from app.system_models.health_alert_model.health_alert_model import HealthAlert
from app.system_models.health_alert_model.health_alert_schemas import HealthAlertCreate, HealthAlertUpdate
from app.system_services.exceptions import RecordNotFoundError
from app.system_services.references import ensure_exists
from app.users.user_models.user_model import User

logger = logging.getLogger(__name__)


async def get_health_alerts(db: AsyncSession, active_only: bool = False) -> List[HealthAlert]:
    query = select(HealthAlert)
    if active_only:
        query = query.where(HealthAlert.is_active.is_(True))
    query = query.order_by(HealthAlert.created_at.desc())

    result = await db.execute(query)
    return list(result.scalars().all())


async def create_health_alert(db: AsyncSession, alert: HealthAlertCreate) -> HealthAlert:
    await ensure_exists(db, Disease, alert.disease_id, "diseaseId")
    await ensure_exists(db, User, alert.created_by, "createdBy")

    db_alert = HealthAlert(**alert.model_dump())
    db.add(db_alert)
    await db.commit()
    await db.refresh(db_alert)
    logger.info(f"Health alert issued [{db_alert.severity}]: {db_alert.title}")
    return db_alert


async def update_health_alert(db: AsyncSession, alert_id: str, updates: HealthAlertUpdate) -> HealthAlert:
    """Merge the supplied fields; setting isActive=false retires the alert."""
    db_alert = await db.get(HealthAlert, alert_id)
    if db_alert is None:
        raise RecordNotFoundError("Health alert", alert_id)

    changes = updates.model_dump(exclude_unset=True)
    if "disease_id" in changes:
        await ensure_exists(db, Disease, changes["disease_id"], "diseaseId")

    for field, value in changes.items():
        setattr(db_alert, field, value)

    await db.commit()
    await db.refresh(db_alert)
    return db_alert
