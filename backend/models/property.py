"""
Property model - Land and real estate listings shown on the public site
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import field_validator
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field, Column, JSON

from models.partial_update import MAX_INT, PartialUpdate
from services.clock import utc_now

PLACEHOLDER_IMAGE = "/uploads/land-property-1.svg"


def _default_images() -> List[str]:
    return [PLACEHOLDER_IMAGE]


class PropertyBase(SQLModel):
    """Fields shared by the table, create and read schemas"""

    title: str = Field(min_length=1, max_length=255, description="Listing title")
    description: str = Field(min_length=1, description="Listing description")
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2, description="Asking price in JOD")
    size: int = Field(ge=0, le=MAX_INT, description="Area in square meters")
    bedrooms: int = Field(default=0, ge=0, le=MAX_INT)
    bathrooms: int = Field(default=0, ge=0, le=MAX_INT)
    property_type: str = Field(min_length=1, description="Free text type tag, e.g. 'land' or 'أرض سكنية'")

    # Free text location plus the Jordanian land registry description
    location: str = Field(min_length=1, description="Area / neighbourhood shown on cards")
    address: Optional[str] = Field(default=None)
    governorate_id: Optional[int] = Field(default=None, ge=1, le=MAX_INT, foreign_key="governorates.id")
    directorate_id: Optional[int] = Field(default=None, ge=1, le=MAX_INT, foreign_key="directorates.id")
    village: Optional[str] = Field(default=None, description="Village (قرية)")
    basin: Optional[str] = Field(default=None, description="Basin (حوض)")
    neighborhood: Optional[str] = Field(default=None, description="Neighborhood (حي)")
    plot_number: Optional[str] = Field(default=None, description="Plot number (رقم القطعة)")

    images: List[str] = Field(
        default_factory=_default_images,
        sa_column=Column(JSON, nullable=False),
        description="Ordered image URLs, first one is the cover",
    )
    featured: bool = Field(default=False)
    available: bool = Field(default=True, description="Published on the public site")


class Property(PropertyBase, table=True):
    """Property table"""

    __tablename__ = "properties"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


class PropertyCreate(PropertyBase):
    """Validated body for POST /api/admin/properties"""

    @field_validator("images", mode="before")
    @classmethod
    def images_never_empty(cls, value):
        if not value:
            return _default_images()
        return value


class PropertyUpdate(PartialUpdate):
    """Partial update, only the fields present in the body are applied"""

    nullable_fields = frozenset({
        "address", "governorate_id", "directorate_id",
        "village", "basin", "neighborhood", "plot_number",
    })

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, min_length=1)
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    size: Optional[int] = Field(default=None, ge=0, le=MAX_INT)
    bedrooms: Optional[int] = Field(default=None, ge=0, le=MAX_INT)
    bathrooms: Optional[int] = Field(default=None, ge=0, le=MAX_INT)
    property_type: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1)
    address: Optional[str] = None
    governorate_id: Optional[int] = Field(default=None, ge=1, le=MAX_INT)
    directorate_id: Optional[int] = Field(default=None, ge=1, le=MAX_INT)
    village: Optional[str] = None
    basin: Optional[str] = None
    neighborhood: Optional[str] = None
    plot_number: Optional[str] = None
    images: Optional[List[str]] = None
    featured: Optional[bool] = None
    available: Optional[bool] = None

    @field_validator("images")
    @classmethod
    def images_never_empty(cls, value):
        if value is not None and len(value) == 0:
            return _default_images()
        return value


class PropertyRead(PropertyBase):
    """Property as returned by the API, with resolved location names"""

    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None
    governorate_name: Optional[str] = None
    directorate_name: Optional[str] = None

    @classmethod
    def from_row(cls, prop: Property, governorate=None, directorate=None) -> "PropertyRead":
        return cls(
            **prop.model_dump(),
            governorate_name=governorate.name_ar if governorate else None,
            directorate_name=directorate.name_ar if directorate else None,
        )
