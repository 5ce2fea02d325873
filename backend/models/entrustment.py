"""
Entrustment model - Owners asking the agency to sell or rent their property
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import EmailStr
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from services.clock import utc_now


class ServiceType(str, Enum):
    """What the owner wants the agency to do"""
    rent = "rent"
    sell = "sell"


class EntrustmentBase(SQLModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255)
    phone: str = Field(min_length=1, max_length=50)
    property_type: str = Field(min_length=1, max_length=100)
    location: str = Field(min_length=1, max_length=255)
    size: Optional[int] = Field(default=None, ge=0)
    bedrooms: Optional[int] = Field(default=None, ge=0)
    bathrooms: Optional[int] = Field(default=None, ge=0)
    description: str = Field(min_length=1)
    service_type: ServiceType = Field(description="'rent' or 'sell'")


class Entrustment(EntrustmentBase, table=True):
    __tablename__ = "entrustments"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


class EntrustmentCreate(EntrustmentBase):
    email: EmailStr
