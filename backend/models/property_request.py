"""
Property request model - Buyers describing the property they are looking for
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import EmailStr
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from services.clock import utc_now


class PropertyRequestBase(SQLModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    property_type: Optional[str] = Field(default=None, max_length=100)
    location: Optional[str] = Field(default=None, max_length=255)
    min_price: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    max_price: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    min_size: Optional[int] = Field(default=None, ge=0)
    max_size: Optional[int] = Field(default=None, ge=0)
    bedrooms: Optional[int] = Field(default=None, ge=0)
    bathrooms: Optional[int] = Field(default=None, ge=0)
    message: str = Field(min_length=1)


class PropertyRequest(PropertyRequestBase, table=True):
    __tablename__ = "property_requests"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


class PropertyRequestCreate(PropertyRequestBase):
    email: EmailStr
