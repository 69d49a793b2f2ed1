# app/system_services/disease_services.py
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.system_models.disease_case_model.disease_case_model import DiseaseCase
from app.system_models.disease_model.disease_model import Disease
from app.system_models.disease_model.disease_schemas import DiseaseCreate, DiseaseStat
from app.system_services.exceptions import DuplicateRecordError


async def get_diseases(db: AsyncSession) -> List[Disease]:
    result = await db.execute(select(Disease).order_by(Disease.name))
    return list(result.scalars().all())


async def get_disease_by_name(db: AsyncSession, name: str) -> Optional[Disease]:
    result = await db.execute(select(Disease).where(Disease.name == name))
    return result.scalars().first()


async def create_disease(db: AsyncSession, disease: DiseaseCreate) -> Disease:
    """Add a disease to the catalogue. Names are unique."""
    if await get_disease_by_name(db, disease.name) is not None:
        raise DuplicateRecordError("name", disease.name)

    db_disease = Disease(**disease.model_dump())
    db.add(db_disease)
    await db.commit()
    await db.refresh(db_disease)
    return db_disease


async def get_disease_stats(db: AsyncSession) -> List[DiseaseStat]:
    """
    Case count per disease, highest first.
    Outer join keeps diseases without any case (count 0).
    """
    case_count = func.count(DiseaseCase.id)
    query = (
        select(Disease.name, case_count.label("count"))
        .outerjoin(DiseaseCase, DiseaseCase.disease_id == Disease.id)
        .group_by(Disease.id, Disease.name)
        .order_by(case_count.desc())
    )
    result = await db.execute(query)
    return [DiseaseStat(name=name, count=count) for name, count in result.all()]
