"""
Contact model - Messages sent through the public contact form
"""
from datetime import datetime
from typing import Optional

from pydantic import EmailStr
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from services.clock import utc_now


class ContactBase(SQLModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    subject: str = Field(min_length=1, max_length=255)
    message: str = Field(min_length=1)


class Contact(ContactBase, table=True):
    __tablename__ = "contacts"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


class ContactCreate(ContactBase):
    email: EmailStr
