# app/users/user_models/user_model.py
import uuid

from sqlalchemy import Column, String, Text

from app.database.connection import Base
from app.database.types import UTCDateTime
from app.helpers.time import utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(Text, unique=True, index=True, nullable=False)
    password = Column(Text, nullable=False)  # argon2 hash, never the plain value
    name = Column(Text, nullable=False)
    role = Column(Text, default="health_worker", nullable=False)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', role='{self.role}')>"
