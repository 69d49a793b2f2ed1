# app/users/user_services.py
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.system_services.exceptions import DuplicateRecordError
from app.users.security import get_password_hash, verify_password
from app.users.user_models.schemas import UserCreate
from app.users.user_models.user_model import User

logger = logging.getLogger(__name__)


# ============================================================
# ✅ GET USER
# ============================================================
async def get_user(db: AsyncSession, user_id: str) -> Optional[User]:
    return await db.get(User, user_id)


async def get_user_by_username(db: AsyncSession, username: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalars().first()


# ============================================================
# ✅ CREATE USER
# ============================================================
async def create_user(db: AsyncSession, user_data: UserCreate) -> User:
    # Check if user already exists
    if await get_user_by_username(db, user_data.username) is not None:
        raise DuplicateRecordError("username", user_data.username)

    new_user = User(
        username=user_data.username,
        password=get_password_hash(user_data.password),
        name=user_data.name,
        role=user_data.role,
    )

    db.add(new_user)
    await db.commit()
    await db.refresh(new_user)
    logger.info(f"Created user {new_user.username} ({new_user.role})")
    return new_user


# ============================================================
# ✅ CHECK PASSWORD
# ============================================================
def password_matches(user: User, password: str) -> bool:
    return verify_password(password, user.password)
