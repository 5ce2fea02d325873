"""
Database models for the Rand real estate API
"""

from .partial_update import MAX_INT
from .admin import Admin, AdminCreate, AdminLogin, AdminPublic
from .contact import Contact, ContactCreate
from .entrustment import Entrustment, EntrustmentCreate, ServiceType
from .location import (
    Directorate, DirectorateCreate, DirectorateUpdate,
    Governorate, GovernorateCreate, GovernorateUpdate,
)
from .newsletter import Newsletter, NewsletterCreate
from .property import PLACEHOLDER_IMAGE, Property, PropertyCreate, PropertyRead, PropertyUpdate
from .property_request import PropertyRequest, PropertyRequestCreate
from .property_type import PropertyType, PropertyTypeCreate, PropertyTypeUpdate
from .search import SearchFilters
from .site_setting import SiteSetting, SiteSettingsUpdate

__all__ = [
    "MAX_INT",
    "Admin", "AdminCreate", "AdminLogin", "AdminPublic",
    "Contact", "ContactCreate",
    "Entrustment", "EntrustmentCreate", "ServiceType",
    "Directorate", "DirectorateCreate", "DirectorateUpdate",
    "Governorate", "GovernorateCreate", "GovernorateUpdate",
    "Newsletter", "NewsletterCreate",
    "PLACEHOLDER_IMAGE", "Property", "PropertyCreate", "PropertyRead", "PropertyUpdate",
    "PropertyRequest", "PropertyRequestCreate",
    "PropertyType", "PropertyTypeCreate", "PropertyTypeUpdate",
    "SearchFilters",
    "SiteSetting", "SiteSettingsUpdate",
]
