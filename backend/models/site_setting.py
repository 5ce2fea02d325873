"""
Site setting model - Editable site copy (footer address, phones, ...)
"""
from datetime import datetime
from typing import Dict, Optional

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from services.clock import utc_now


class SiteSetting(SQLModel, table=True):
    __tablename__ = "site_settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    setting_key: str = Field(max_length=100, unique=True, index=True)
    setting_value: str
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


class SiteSettingsUpdate(SQLModel):
    """Body of POST /api/admin/site-settings"""

    settings: Dict[str, str]
