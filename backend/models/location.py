"""
Location models - Jordanian governorates and their directorates
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from models.partial_update import MAX_INT, PartialUpdate
from services.clock import utc_now


class GovernorateBase(SQLModel):
    name_ar: str = Field(min_length=1, max_length=100, description="Arabic name, e.g. 'عمان'")
    name_en: Optional[str] = Field(default=None, max_length=100, description="English name")


class Governorate(GovernorateBase, table=True):
    """Governorate table (محافظة)"""

    __tablename__ = "governorates"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


class GovernorateCreate(GovernorateBase):
    pass


class GovernorateUpdate(PartialUpdate):
    nullable_fields = frozenset({"name_en"})

    name_ar: Optional[str] = Field(default=None, min_length=1, max_length=100)
    name_en: Optional[str] = Field(default=None, max_length=100)


class DirectorateBase(SQLModel):
    governorate_id: int = Field(ge=1, le=MAX_INT, foreign_key="governorates.id", index=True)
    name_ar: str = Field(min_length=1, max_length=100)
    name_en: Optional[str] = Field(default=None, max_length=100)


class Directorate(DirectorateBase, table=True):
    """Directorate table (مديرية), many per governorate"""

    __tablename__ = "directorates"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


class DirectorateCreate(DirectorateBase):
    pass


class DirectorateUpdate(PartialUpdate):
    nullable_fields = frozenset({"name_en"})

    governorate_id: Optional[int] = Field(default=None, ge=1, le=MAX_INT)
    name_ar: Optional[str] = Field(default=None, min_length=1, max_length=100)
    name_en: Optional[str] = Field(default=None, max_length=100)
