"""
Admin model - Back office accounts
"""
from datetime import datetime
from typing import Optional

from pydantic import EmailStr
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from services.clock import utc_now


class Admin(SQLModel, table=True):
    __tablename__ = "admins"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(max_length=100, unique=True, index=True)
    email: str = Field(max_length=255, unique=True)
    password_hash: str = Field(description="bcrypt hash, never returned by the API")
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


class AdminCreate(SQLModel):
    """Plain-text password, hashed by the storage layer"""

    username: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=1)


class AdminLogin(SQLModel):
    username: Optional[str] = None
    password: Optional[str] = None


class AdminPublic(SQLModel):
    id: int
    username: str
