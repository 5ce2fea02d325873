"""
Search filters accepted by POST /api/properties/search
"""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from models.partial_update import MAX_INT


class SearchFilters(BaseModel):
    """All fields optional; an absent (or empty) field imposes no constraint"""

    min_price: Optional[Decimal] = Field(default=None, ge=0)
    max_price: Optional[Decimal] = Field(default=None, ge=0)
    min_size: Optional[int] = Field(default=None, ge=0, le=MAX_INT)
    max_size: Optional[int] = Field(default=None, ge=0, le=MAX_INT)
    property_type: Optional[str] = None
    bedrooms: Optional[int] = Field(default=None, ge=0, le=MAX_INT, description="Minimum bedrooms")
    bathrooms: Optional[int] = Field(default=None, ge=0, le=MAX_INT, description="Minimum bathrooms")
    location: Optional[str] = Field(default=None, description="Case-insensitive substring")
    governorate_id: Optional[int] = Field(default=None, ge=1, le=MAX_INT)
    directorate_id: Optional[int] = Field(default=None, ge=1, le=MAX_INT)

    @field_validator("*", mode="before")
    @classmethod
    def blank_is_absent(cls, value):
        # Form selects post "" for "any"
        if isinstance(value, str) and value.strip() == "":
            return None
        return value
