# app/users/user_models/schemas.py
from datetime import datetime

from pydantic import Field, field_validator

from app.shared.schema_base import CamelModel


# ✅ Request schema for creating a health worker account
class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=8, max_length=100)
    name: str = Field(..., min_length=1)
    role: str = "health_worker"

    @field_validator("username", mode="before")
    def normalize_username(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


# ✅ Response schema for user info (password hash is never exposed)
class UserResponse(CamelModel):
    id: str
    username: str
    name: str
    role: str
    created_at: datetime
