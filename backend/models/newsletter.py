"""
Newsletter model - Email subscriptions, one row per address
"""
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, field_validator
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from services.clock import utc_now


class Newsletter(SQLModel, table=True):
    __tablename__ = "newsletters"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


class NewsletterCreate(SQLModel):
    email: EmailStr

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()
