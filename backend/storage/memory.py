"""
In-memory storage - zero configuration backend used for development and tests

State lives in insertion-ordered dicts keyed by auto-increment ids and is lost
on restart. Every method runs synchronously, so id allocation and the write
happen in one step without interleaving.
"""
import itertools
import logging
from typing import Dict, List, Optional

from config.settings import Settings
from exceptions import AlreadySubscribedError
from models import (
    Admin, AdminCreate,
    Contact, ContactCreate,
    Directorate, DirectorateCreate, DirectorateUpdate,
    Entrustment, EntrustmentCreate,
    Governorate, GovernorateCreate, GovernorateUpdate,
    Newsletter, NewsletterCreate,
    Property, PropertyCreate, PropertyRead, PropertyUpdate,
    PropertyRequest, PropertyRequestCreate,
    PropertyType, PropertyTypeCreate, PropertyTypeUpdate,
    SearchFilters,
    SiteSetting,
)
from services.auth_service import hash_password, verify_password
from services.clock import utc_now
from services.property_filters import matches_filters
from storage.base import Storage
from storage.seed_data import (
    AMMAN_DIRECTORATES, DEFAULT_PROPERTY_TYPES, DEFAULT_SITE_SETTINGS,
    JORDAN_GOVERNORATES, sample_property_payloads,
)

logger = logging.getLogger(__name__)


def _copy(row):
    """Detached copy so callers cannot mutate stored rows"""
    return type(row)(**row.model_dump())


def _newest_first(rows):
    return sorted(rows, key=lambda row: (row.created_at, row.id), reverse=True)


class Table:
    """One entity type: ordered rows plus its id sequence"""

    def __init__(self):
        self.rows: Dict[int, object] = {}
        self._ids = itertools.count(1)

    def insert(self, row):
        row.id = next(self._ids)
        self.rows[row.id] = row
        return row

    def get(self, row_id: int):
        return self.rows.get(row_id)

    def delete(self, row_id: int) -> bool:
        self.rows.pop(row_id, None)
        return True

    def values(self) -> List:
        return list(self.rows.values())


class MemStorage(Storage):
    """Storage backed by Python dicts, seeded at construction"""

    def __init__(self, settings: Optional[Settings] = None, seed: bool = True):
        self.settings = settings or Settings.from_env()
        self.properties = Table()
        self.contacts = Table()
        self.newsletters = Table()
        self.entrustments = Table()
        self.property_requests = Table()
        self.admins = Table()
        self.governorates = Table()
        self.directorates = Table()
        self.property_types = Table()
        self.site_settings: Dict[str, SiteSetting] = {}
        self._site_setting_ids = itertools.count(1)

        if seed:
            self._seed()

    def _seed(self):
        self._initialize_admin()
        self._initialize_site_settings()
        governorate_id, directorate_ids = self._initialize_jordan_locations()
        self._initialize_property_types()
        for payload in sample_property_payloads(governorate_id, directorate_ids):
            self.create_property(PropertyCreate(**payload))
        logger.info("In-memory storage seeded with %d sample properties", len(self.properties.rows))

    def _initialize_admin(self):
        if self.settings.uses_default_admin_credentials:
            logger.warning(
                "Using default admin credentials. Set ADMIN_USERNAME and ADMIN_PASSWORD for production!"
            )
        self.create_admin(AdminCreate(
            username=self.settings.admin_username,
            email=self.settings.admin_email,
            password=self.settings.admin_password,
        ))

    def _initialize_site_settings(self):
        for key, value in DEFAULT_SITE_SETTINGS:
            if key not in self.site_settings:
                self.update_site_setting(key, value)

    def _initialize_jordan_locations(self):
        governorate_ids = [
            self.create_governorate(GovernorateCreate(name_ar=name_ar, name_en=name_en)).id
            for name_ar, name_en in JORDAN_GOVERNORATES
        ]
        amman_id = governorate_ids[0]
        directorate_ids = [
            self.create_directorate(DirectorateCreate(governorate_id=amman_id, name_ar=name_ar, name_en=name_en)).id
            for name_ar, name_en in AMMAN_DIRECTORATES
        ]
        return amman_id, directorate_ids

    def _initialize_property_types(self):
        for name_ar, name_en in DEFAULT_PROPERTY_TYPES:
            self.create_property_type(PropertyTypeCreate(name_ar=name_ar, name_en=name_en))

    # Properties

    def _read(self, prop: Property) -> PropertyRead:
        governorate = self.governorates.get(prop.governorate_id) if prop.governorate_id else None
        directorate = self.directorates.get(prop.directorate_id) if prop.directorate_id else None
        return PropertyRead.from_row(prop, governorate, directorate)

    def _published(self, include_unpublished: bool = False) -> List[Property]:
        rows = self.properties.values()
        if not include_unpublished:
            rows = [prop for prop in rows if prop.available]
        return _newest_first(rows)

    def get_all_properties(self, include_unpublished: bool = False) -> List[PropertyRead]:
        return [self._read(prop) for prop in self._published(include_unpublished)]

    def get_property_by_id(self, property_id: int, include_unpublished: bool = False) -> Optional[PropertyRead]:
        prop = self.properties.get(property_id)
        if prop is None or (not prop.available and not include_unpublished):
            return None
        return self._read(prop)

    def search_properties(self, filters: SearchFilters) -> List[PropertyRead]:
        return [self._read(prop) for prop in self._published() if matches_filters(prop, filters)]

    def get_featured_properties(self) -> List[PropertyRead]:
        return [self._read(prop) for prop in self._published() if prop.featured]

    def create_property(self, data: PropertyCreate) -> PropertyRead:
        now = utc_now()
        prop = self.properties.insert(Property(**data.model_dump(), created_at=now, updated_at=now))
        return self._read(prop)

    def update_property(self, property_id: int, data: PropertyUpdate) -> Optional[PropertyRead]:
        prop = self.properties.get(property_id)
        if prop is None:
            return None
        for key, value in data.changes().items():
            setattr(prop, key, value)
        prop.updated_at = utc_now()
        return self._read(prop)

    def delete_property(self, property_id: int) -> bool:
        return self.properties.delete(property_id)

    # Contacts

    def get_all_contacts(self) -> List[Contact]:
        return [_copy(row) for row in _newest_first(self.contacts.values())]

    def create_contact(self, data: ContactCreate) -> Contact:
        return _copy(self.contacts.insert(Contact(**data.model_dump())))

    def delete_contact(self, contact_id: int) -> bool:
        return self.contacts.delete(contact_id)

    # Newsletter

    def get_all_newsletters(self) -> List[Newsletter]:
        return [_copy(row) for row in _newest_first(self.newsletters.values())]

    def subscribe_newsletter(self, data: NewsletterCreate) -> Newsletter:
        if any(row.email == data.email for row in self.newsletters.values()):
            raise AlreadySubscribedError(data.email)
        return _copy(self.newsletters.insert(Newsletter(email=data.email)))

    def delete_newsletter(self, newsletter_id: int) -> bool:
        return self.newsletters.delete(newsletter_id)

    # Entrustments

    def get_all_entrustments(self) -> List[Entrustment]:
        return [_copy(row) for row in _newest_first(self.entrustments.values())]

    def create_entrustment(self, data: EntrustmentCreate) -> Entrustment:
        return _copy(self.entrustments.insert(Entrustment(**data.model_dump())))

    def delete_entrustment(self, entrustment_id: int) -> bool:
        return self.entrustments.delete(entrustment_id)

    # Property requests

    def get_all_property_requests(self) -> List[PropertyRequest]:
        return [_copy(row) for row in _newest_first(self.property_requests.values())]

    def create_property_request(self, data: PropertyRequestCreate) -> PropertyRequest:
        return _copy(self.property_requests.insert(PropertyRequest(**data.model_dump())))

    def delete_property_request(self, request_id: int) -> bool:
        return self.property_requests.delete(request_id)

    # Admin

    def create_admin(self, data: AdminCreate) -> Admin:
        admin = Admin(
            username=data.username,
            email=data.email,
            password_hash=hash_password(data.password),
        )
        return _copy(self.admins.insert(admin))

    def get_admin_by_username(self, username: str) -> Optional[Admin]:
        for admin in self.admins.values():
            if admin.username == username:
                return _copy(admin)
        return None

    def verify_admin(self, username: str, password: str) -> Optional[Admin]:
        admin = self.get_admin_by_username(username)
        if admin is None:
            return None
        return admin if verify_password(password, admin.password_hash) else None

    # Site settings

    def get_site_setting(self, key: str) -> Optional[SiteSetting]:
        setting = self.site_settings.get(key)
        return _copy(setting) if setting else None

    def get_all_site_settings(self) -> List[SiteSetting]:
        return [_copy(setting) for setting in self.site_settings.values()]

    def update_site_setting(self, key: str, value: str) -> SiteSetting:
        existing = self.site_settings.get(key)
        setting = SiteSetting(
            id=existing.id if existing else next(self._site_setting_ids),
            setting_key=key,
            setting_value=value,
            updated_at=utc_now(),
        )
        self.site_settings[key] = setting
        return _copy(setting)

    # Governorates

    def get_all_governorates(self) -> List[Governorate]:
        return [_copy(row) for row in sorted(self.governorates.values(), key=lambda row: row.name_ar)]

    def get_governorate_by_id(self, governorate_id: int) -> Optional[Governorate]:
        governorate = self.governorates.get(governorate_id)
        return _copy(governorate) if governorate else None

    def create_governorate(self, data: GovernorateCreate) -> Governorate:
        return _copy(self.governorates.insert(Governorate(**data.model_dump())))

    def update_governorate(self, governorate_id: int, data: GovernorateUpdate) -> Optional[Governorate]:
        governorate = self.governorates.get(governorate_id)
        if governorate is None:
            return None
        for key, value in data.changes().items():
            setattr(governorate, key, value)
        return _copy(governorate)

    def delete_governorate(self, governorate_id: int) -> bool:
        for directorate in self.directorates.values():
            if directorate.governorate_id == governorate_id:
                self.delete_directorate(directorate.id)
        for prop in self.properties.values():
            if prop.governorate_id == governorate_id:
                prop.governorate_id = None
        return self.governorates.delete(governorate_id)

    # Directorates

    def get_all_directorates(self) -> List[Directorate]:
        return [_copy(row) for row in self.directorates.values()]

    def get_directorate_by_id(self, directorate_id: int) -> Optional[Directorate]:
        directorate = self.directorates.get(directorate_id)
        return _copy(directorate) if directorate else None

    def get_directorates_by_governorate(self, governorate_id: int) -> List[Directorate]:
        return [_copy(row) for row in self.directorates.values() if row.governorate_id == governorate_id]

    def create_directorate(self, data: DirectorateCreate) -> Directorate:
        return _copy(self.directorates.insert(Directorate(**data.model_dump())))

    def update_directorate(self, directorate_id: int, data: DirectorateUpdate) -> Optional[Directorate]:
        directorate = self.directorates.get(directorate_id)
        if directorate is None:
            return None
        for key, value in data.changes().items():
            setattr(directorate, key, value)
        return _copy(directorate)

    def delete_directorate(self, directorate_id: int) -> bool:
        for prop in self.properties.values():
            if prop.directorate_id == directorate_id:
                prop.directorate_id = None
        return self.directorates.delete(directorate_id)

    # Property types

    def get_all_property_types(self) -> List[PropertyType]:
        return [_copy(row) for row in self.property_types.values()]

    def get_active_property_types(self) -> List[PropertyType]:
        return [_copy(row) for row in self.property_types.values() if row.is_active]

    def create_property_type(self, data: PropertyTypeCreate) -> PropertyType:
        return _copy(self.property_types.insert(PropertyType(**data.model_dump())))

    def update_property_type(self, type_id: int, data: PropertyTypeUpdate) -> Optional[PropertyType]:
        property_type = self.property_types.get(type_id)
        if property_type is None:
            return None
        for key, value in data.changes().items():
            setattr(property_type, key, value)
        return _copy(property_type)

    def delete_property_type(self, type_id: int) -> bool:
        return self.property_types.delete(type_id)
