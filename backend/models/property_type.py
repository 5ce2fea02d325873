"""
Property type model - Admin-managed taxonomy offered in the search filters
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from models.partial_update import PartialUpdate
from services.clock import utc_now


class PropertyTypeBase(SQLModel):
    name_ar: str = Field(min_length=1, max_length=100)
    name_en: Optional[str] = Field(default=None, max_length=100)
    is_active: bool = Field(default=True)


class PropertyType(PropertyTypeBase, table=True):
    """Property type table

    Not referenced by a foreign key from properties.property_type, which stays
    free text so listings keep their label when a type is renamed or removed.
    """

    __tablename__ = "property_types"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


class PropertyTypeCreate(PropertyTypeBase):
    pass


class PropertyTypeUpdate(PartialUpdate):
    nullable_fields = frozenset({"name_en"})

    name_ar: Optional[str] = Field(default=None, min_length=1, max_length=100)
    name_en: Optional[str] = Field(default=None, max_length=100)
    is_active: Optional[bool] = None
