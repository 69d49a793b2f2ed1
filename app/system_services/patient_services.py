# app/system_services/patient_services.py
import logging
from typing import List, Optional

from sqlalchemy import func, or_, select, update
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from config.appconfig import settings
from app.system_models.patient_model.patient_model import Patient
from app.system_models.patient_model.patient_schemas import PatientCreate, PatientFilters, PatientUpdate
from app.system_models.sequence_model.sequence_model import SequenceCounter
from app.system_services.exceptions import RecordNotFoundError
from app.system_services.references import ensure_exists
from app.users.user_models.user_model import User

logger = logging.getLogger(__name__)

PATIENT_SEQUENCE = "patient"


def format_patient_id(number: int) -> str:
    """42 -> MW000042 (prefix and width come from settings)."""
    return f"{settings.PATIENT_ID_PREFIX}{number:0{settings.PATIENT_ID_WIDTH}d}"


async def get_patients(db: AsyncSession, filters: Optional[PatientFilters] = None) -> List[Patient]:
    """List patients, newest registration first. Every given filter must match."""
    filters = filters or PatientFilters()
    query = select(Patient)

    if filters.district is not None:
        query = query.where(Patient.district.contains(filters.district, autoescape=True))
    if filters.health_status is not None:
        query = query.where(Patient.health_status == filters.health_status)
    if filters.search is not None:
        pattern = filters.search
        query = query.where(
            or_(
                Patient.name.icontains(pattern, autoescape=True),
                Patient.patient_id.icontains(pattern, autoescape=True),
            )
        )

    query = query.order_by(Patient.registered_at.desc())

    if filters.limit is not None:
        query = query.limit(filters.limit)
    if filters.offset is not None:
        query = query.offset(filters.offset)

    result = await db.execute(query)
    return list(result.scalars().all())


async def get_patients_count(db: AsyncSession) -> int:
    result = await db.execute(select(func.count()).select_from(Patient))
    return result.scalar_one()


async def get_patient_by_id(db: AsyncSession, patient_id: str) -> Optional[Patient]:
    return await db.get(Patient, patient_id)


def counter_insert(db: AsyncSession):
    """Dialect-specific INSERT so the counter seed can use ON CONFLICT DO NOTHING."""
    if db.get_bind().dialect.name == "postgresql":
        return postgresql_insert(SequenceCounter)
    return sqlite_insert(SequenceCounter)


async def ensure_counter(db: AsyncSession, name: str, start: int) -> None:
    """Create counter ``name`` at ``start`` unless another transaction already did."""
    await db.execute(
        counter_insert(db)
        .values(name=name, value=start)
        .on_conflict_do_nothing(index_elements=["name"])
    )


async def bump_counter(db: AsyncSession, name: str) -> Optional[int]:
    result = await db.execute(
        update(SequenceCounter)
        .where(SequenceCounter.name == name)
        .values(value=SequenceCounter.value + 1)
        .returning(SequenceCounter.value)
        .execution_options(synchronize_session=False)
    )
    return result.scalar_one_or_none()


async def next_patient_number(db: AsyncSession) -> int:
    """
    Bump the patient counter inside the caller's transaction.
    The UPDATE takes a row lock, so concurrent registrations queue up instead of
    reading the same count. A missing counter row is seeded from the current count
    and the bump is retried, so racing first registrations still get distinct numbers.
    """
    number = await bump_counter(db, PATIENT_SEQUENCE)
    if number is None:
        start = await get_patients_count(db)
        await ensure_counter(db, PATIENT_SEQUENCE, start)
        logger.info(f"Seeded patient sequence at {start}")
        number = await bump_counter(db, PATIENT_SEQUENCE)
    return number


async def create_patient(db: AsyncSession, patient: PatientCreate) -> Patient:
    """Register a new patient and assign the next staff-facing patient id."""
    await ensure_exists(db, User, patient.registered_by, "registeredBy")

    number = await next_patient_number(db)
    db_patient = Patient(**patient.model_dump(), patient_id=format_patient_id(number))
    db.add(db_patient)
    await db.commit()
    await db.refresh(db_patient)
    logger.info(f"Registered patient {db_patient.patient_id} in {db_patient.district}")
    return db_patient


async def update_patient(db: AsyncSession, patient_id: str, updates: PatientUpdate) -> Patient:
    """Merge the supplied fields into an existing patient."""
    db_patient = await db.get(Patient, patient_id)
    if db_patient is None:
        raise RecordNotFoundError("Patient", patient_id)

    changes = updates.model_dump(exclude_unset=True)
    if "registered_by" in changes:
        await ensure_exists(db, User, changes["registered_by"], "registeredBy")

    for field, value in changes.items():
        setattr(db_patient, field, value)

    await db.commit()
    await db.refresh(db_patient)
    return db_patient
