# app/system_services/references.py
from typing import Optional, Type

from sqlalchemy.ext.asyncio import AsyncSession

from app.database.connection import Base
from app.system_services.exceptions import InvalidReferenceError


async def ensure_exists(
    db: AsyncSession,
    model: Type[Base],
    record_id: Optional[str],
    field: str,
) -> None:
    """Raise InvalidReferenceError when an optional foreign key points nowhere."""
    if record_id is None:
        return
    if await db.get(model, record_id) is None:
        raise InvalidReferenceError(field, record_id)
