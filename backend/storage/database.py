"""
Database storage - PostgreSQL (or any SQLAlchemy URL) through SQLModel sessions
"""
import logging
from typing import List, Optional

from sqlalchemy import and_, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from config.db_connection import init_db
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
from services.property_filters import build_search_conditions
from storage.base import Storage
from storage.seed_data import (
    AMMAN_DIRECTORATES, DEFAULT_PROPERTY_TYPES, DEFAULT_SITE_SETTINGS,
    JORDAN_GOVERNORATES, sample_property_payloads,
)

logger = logging.getLogger(__name__)


def _property_query():
    return (
        select(Property, Governorate, Directorate)
        .outerjoin(Governorate, Property.governorate_id == Governorate.id)
        .outerjoin(Directorate, Property.directorate_id == Directorate.id)
    )


def _newest_first(query, model):
    return query.order_by(model.created_at.desc(), model.id.desc())


class DbStorage(Storage):
    """Storage backed by a relational database

    Every method opens its own session and commits before returning, so rows
    handed back to the routers are detached and fully loaded.
    """

    def __init__(self, engine: Engine, settings: Optional[Settings] = None, seed: bool = True):
        self.engine = engine
        self.settings = settings or Settings.from_env()
        init_db(engine)
        if seed:
            self.seed_defaults()

    def seed_defaults(self) -> bool:
        """Seed a fresh database; skipped once any admin exists"""
        with Session(self.engine) as session:
            if session.exec(select(Admin.id).limit(1)).first() is not None:
                logger.info("Database already initialized, skipping seed")
                return False

        self._initialize_admin()
        for key, value in DEFAULT_SITE_SETTINGS:
            self.update_site_setting(key, value)
        for name_ar, name_en in DEFAULT_PROPERTY_TYPES:
            self.create_property_type(PropertyTypeCreate(name_ar=name_ar, name_en=name_en))
        amman_id, directorate_ids = self._initialize_jordan_locations()
        count = 0
        for payload in sample_property_payloads(amman_id, directorate_ids):
            self.create_property(PropertyCreate(**payload))
            count += 1
        logger.info("Database seeded with %d sample properties", count)
        return True

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
        logger.info("Created admin user '%s'", self.settings.admin_username)

    def _initialize_jordan_locations(self):
        governorates = [
            self.create_governorate(GovernorateCreate(name_ar=name_ar, name_en=name_en))
            for name_ar, name_en in JORDAN_GOVERNORATES
        ]
        amman_id = governorates[0].id
        directorate_ids = [
            self.create_directorate(DirectorateCreate(governorate_id=amman_id, name_ar=name_ar, name_en=name_en)).id
            for name_ar, name_en in AMMAN_DIRECTORATES
        ]
        return amman_id, directorate_ids

    # Properties

    def get_all_properties(self, include_unpublished: bool = False) -> List[PropertyRead]:
        with Session(self.engine) as session:
            query = _property_query()
            if not include_unpublished:
                query = query.where(Property.available == True)  # noqa: E712
            results = session.exec(_newest_first(query, Property)).all()
            return [PropertyRead.from_row(prop, gov, dire) for prop, gov, dire in results]

    def get_property_by_id(self, property_id: int, include_unpublished: bool = False) -> Optional[PropertyRead]:
        with Session(self.engine) as session:
            query = _property_query().where(Property.id == property_id)
            if not include_unpublished:
                query = query.where(Property.available == True)  # noqa: E712
            result = session.exec(query).first()
            if result is None:
                return None
            prop, gov, dire = result
            return PropertyRead.from_row(prop, gov, dire)

    def search_properties(self, filters: SearchFilters) -> List[PropertyRead]:
        with Session(self.engine) as session:
            conditions = [Property.available == True]  # noqa: E712
            conditions.extend(build_search_conditions(Property, filters))
            query = _property_query().where(and_(*conditions))
            results = session.exec(_newest_first(query, Property)).all()
            return [PropertyRead.from_row(prop, gov, dire) for prop, gov, dire in results]

    def get_featured_properties(self) -> List[PropertyRead]:
        with Session(self.engine) as session:
            query = _property_query().where(
                and_(Property.featured == True, Property.available == True)  # noqa: E712
            )
            results = session.exec(_newest_first(query, Property)).all()
            return [PropertyRead.from_row(prop, gov, dire) for prop, gov, dire in results]

    def create_property(self, data: PropertyCreate) -> PropertyRead:
        with Session(self.engine) as session:
            now = utc_now()
            prop = Property(**data.model_dump(), created_at=now, updated_at=now)
            session.add(prop)
            session.commit()
            session.refresh(prop)
            property_id = prop.id
        return self.get_property_by_id(property_id, include_unpublished=True)

    def update_property(self, property_id: int, data: PropertyUpdate) -> Optional[PropertyRead]:
        with Session(self.engine) as session:
            prop = session.get(Property, property_id)
            if prop is None:
                return None
            for key, value in data.changes().items():
                setattr(prop, key, value)
            prop.updated_at = utc_now()
            session.add(prop)
            session.commit()
        return self.get_property_by_id(property_id, include_unpublished=True)

    def delete_property(self, property_id: int) -> bool:
        return self._delete(Property, property_id)

    # Generic helpers for the lead tables

    def _list(self, model) -> list:
        with Session(self.engine) as session:
            return list(session.exec(_newest_first(select(model), model)).all())

    def _insert(self, row):
        with Session(self.engine) as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            return row

    def _delete(self, model, row_id: int) -> bool:
        with Session(self.engine) as session:
            row = session.get(model, row_id)
            if row is None:
                return False
            session.delete(row)
            session.commit()
            return True

    # Contacts

    def get_all_contacts(self) -> List[Contact]:
        return self._list(Contact)

    def create_contact(self, data: ContactCreate) -> Contact:
        return self._insert(Contact(**data.model_dump()))

    def delete_contact(self, contact_id: int) -> bool:
        return self._delete(Contact, contact_id)

    # Newsletter

    def get_all_newsletters(self) -> List[Newsletter]:
        return self._list(Newsletter)

    def subscribe_newsletter(self, data: NewsletterCreate) -> Newsletter:
        with Session(self.engine) as session:
            existing = session.exec(select(Newsletter).where(Newsletter.email == data.email)).first()
            if existing is not None:
                raise AlreadySubscribedError(data.email)

            subscription = Newsletter(email=data.email)
            session.add(subscription)
            try:
                session.commit()
            except IntegrityError as e:
                # Concurrent subscribe won the unique index race
                session.rollback()
                raise AlreadySubscribedError(data.email) from e
            session.refresh(subscription)
            return subscription

    def delete_newsletter(self, newsletter_id: int) -> bool:
        return self._delete(Newsletter, newsletter_id)

    # Entrustments

    def get_all_entrustments(self) -> List[Entrustment]:
        return self._list(Entrustment)

    def create_entrustment(self, data: EntrustmentCreate) -> Entrustment:
        return self._insert(Entrustment(**data.model_dump()))

    def delete_entrustment(self, entrustment_id: int) -> bool:
        return self._delete(Entrustment, entrustment_id)

    # Property requests

    def get_all_property_requests(self) -> List[PropertyRequest]:
        return self._list(PropertyRequest)

    def create_property_request(self, data: PropertyRequestCreate) -> PropertyRequest:
        return self._insert(PropertyRequest(**data.model_dump()))

    def delete_property_request(self, request_id: int) -> bool:
        return self._delete(PropertyRequest, request_id)

    # Admin

    def create_admin(self, data: AdminCreate) -> Admin:
        return self._insert(Admin(
            username=data.username,
            email=data.email,
            password_hash=hash_password(data.password),
        ))

    def get_admin_by_username(self, username: str) -> Optional[Admin]:
        with Session(self.engine) as session:
            return session.exec(select(Admin).where(Admin.username == username)).first()

    def verify_admin(self, username: str, password: str) -> Optional[Admin]:
        admin = self.get_admin_by_username(username)
        if admin is None:
            return None
        return admin if verify_password(password, admin.password_hash) else None

    # Site settings

    def get_site_setting(self, key: str) -> Optional[SiteSetting]:
        with Session(self.engine) as session:
            return session.exec(select(SiteSetting).where(SiteSetting.setting_key == key)).first()

    def get_all_site_settings(self) -> List[SiteSetting]:
        with Session(self.engine) as session:
            return list(session.exec(select(SiteSetting).order_by(SiteSetting.id)).all())

    def update_site_setting(self, key: str, value: str) -> SiteSetting:
        with Session(self.engine) as session:
            setting = session.exec(select(SiteSetting).where(SiteSetting.setting_key == key)).first()
            if setting is None:
                setting = SiteSetting(setting_key=key, setting_value=value)
            else:
                setting.setting_value = value
                setting.updated_at = utc_now()
            session.add(setting)
            session.commit()
            session.refresh(setting)
            return setting

    # Governorates

    def get_all_governorates(self) -> List[Governorate]:
        with Session(self.engine) as session:
            return list(session.exec(select(Governorate).order_by(Governorate.name_ar)).all())

    def get_governorate_by_id(self, governorate_id: int) -> Optional[Governorate]:
        with Session(self.engine) as session:
            return session.get(Governorate, governorate_id)

    def create_governorate(self, data: GovernorateCreate) -> Governorate:
        return self._insert(Governorate(**data.model_dump()))

    def _apply_update(self, model, row_id: int, data):
        with Session(self.engine) as session:
            row = session.get(model, row_id)
            if row is None:
                return None
            for key, value in data.changes().items():
                setattr(row, key, value)
            session.add(row)
            session.commit()
            session.refresh(row)
            return row

    def update_governorate(self, governorate_id: int, data: GovernorateUpdate) -> Optional[Governorate]:
        return self._apply_update(Governorate, governorate_id, data)

    def delete_governorate(self, governorate_id: int) -> bool:
        with Session(self.engine) as session:
            governorate = session.get(Governorate, governorate_id)
            if governorate is None:
                return False
            directorate_ids = session.exec(
                select(Directorate.id).where(Directorate.governorate_id == governorate_id)
            ).all()
            if directorate_ids:
                session.execute(
                    update(Property)
                    .where(Property.directorate_id.in_(directorate_ids))
                    .values(directorate_id=None)
                )
            session.execute(
                update(Property)
                .where(Property.governorate_id == governorate_id)
                .values(governorate_id=None)
            )
            for directorate in session.exec(
                select(Directorate).where(Directorate.governorate_id == governorate_id)
            ).all():
                session.delete(directorate)
            session.flush()
            session.delete(governorate)
            session.commit()
            return True

    # Directorates

    def get_all_directorates(self) -> List[Directorate]:
        with Session(self.engine) as session:
            return list(session.exec(select(Directorate).order_by(Directorate.id)).all())

    def get_directorate_by_id(self, directorate_id: int) -> Optional[Directorate]:
        with Session(self.engine) as session:
            return session.get(Directorate, directorate_id)

    def get_directorates_by_governorate(self, governorate_id: int) -> List[Directorate]:
        with Session(self.engine) as session:
            return list(session.exec(
                select(Directorate)
                .where(Directorate.governorate_id == governorate_id)
                .order_by(Directorate.id)
            ).all())

    def create_directorate(self, data: DirectorateCreate) -> Directorate:
        return self._insert(Directorate(**data.model_dump()))

    def update_directorate(self, directorate_id: int, data: DirectorateUpdate) -> Optional[Directorate]:
        return self._apply_update(Directorate, directorate_id, data)

    def delete_directorate(self, directorate_id: int) -> bool:
        with Session(self.engine) as session:
            directorate = session.get(Directorate, directorate_id)
            if directorate is None:
                return False
            session.execute(
                update(Property)
                .where(Property.directorate_id == directorate_id)
                .values(directorate_id=None)
            )
            session.delete(directorate)
            session.commit()
            return True

    # Property types

    def get_all_property_types(self) -> List[PropertyType]:
        with Session(self.engine) as session:
            return list(session.exec(select(PropertyType).order_by(PropertyType.id)).all())

    def get_active_property_types(self) -> List[PropertyType]:
        with Session(self.engine) as session:
            return list(session.exec(
                select(PropertyType).where(PropertyType.is_active == True).order_by(PropertyType.id)  # noqa: E712
            ).all())

    def create_property_type(self, data: PropertyTypeCreate) -> PropertyType:
        return self._insert(PropertyType(**data.model_dump()))

    def update_property_type(self, type_id: int, data: PropertyTypeUpdate) -> Optional[PropertyType]:
        return self._apply_update(PropertyType, type_id, data)

    def delete_property_type(self, type_id: int) -> bool:
        return self._delete(PropertyType, type_id)
