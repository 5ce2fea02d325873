"""
Storage interface shared by the in-memory and database backends
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from exceptions import NotFoundError
from models import (
    Admin, AdminCreate,
    Contact, ContactCreate,
    Directorate, DirectorateCreate, DirectorateUpdate,
    Entrustment, EntrustmentCreate,
    Governorate, GovernorateCreate, GovernorateUpdate,
    Newsletter, NewsletterCreate,
    PropertyCreate, PropertyRead, PropertyUpdate,
    PropertyRequest, PropertyRequestCreate,
    PropertyType, PropertyTypeCreate, PropertyTypeUpdate,
    SearchFilters,
    SiteSetting,
)


class Storage(ABC):
    """CRUD contract used by the routers.

    Listing methods return newest first. ``update_*`` return ``None`` for an
    unknown id and ``delete_*`` return a success flag. Public property reads
    only see published (``available``) rows unless ``include_unpublished``.
    """

    # Properties
    @abstractmethod
    def get_all_properties(self, include_unpublished: bool = False) -> List[PropertyRead]: ...

    @abstractmethod
    def get_property_by_id(self, property_id: int, include_unpublished: bool = False) -> Optional[PropertyRead]: ...

    @abstractmethod
    def search_properties(self, filters: SearchFilters) -> List[PropertyRead]: ...

    @abstractmethod
    def get_featured_properties(self) -> List[PropertyRead]: ...

    @abstractmethod
    def create_property(self, data: PropertyCreate) -> PropertyRead: ...

    @abstractmethod
    def update_property(self, property_id: int, data: PropertyUpdate) -> Optional[PropertyRead]: ...

    @abstractmethod
    def delete_property(self, property_id: int) -> bool: ...

    # Contacts
    @abstractmethod
    def get_all_contacts(self) -> List[Contact]: ...

    @abstractmethod
    def create_contact(self, data: ContactCreate) -> Contact: ...

    @abstractmethod
    def delete_contact(self, contact_id: int) -> bool: ...

    # Newsletter
    @abstractmethod
    def get_all_newsletters(self) -> List[Newsletter]: ...

    @abstractmethod
    def subscribe_newsletter(self, data: NewsletterCreate) -> Newsletter:
        """Raises AlreadySubscribedError when the email is already stored"""

    @abstractmethod
    def delete_newsletter(self, newsletter_id: int) -> bool: ...

    # Entrustments
    @abstractmethod
    def get_all_entrustments(self) -> List[Entrustment]: ...

    @abstractmethod
    def create_entrustment(self, data: EntrustmentCreate) -> Entrustment: ...

    @abstractmethod
    def delete_entrustment(self, entrustment_id: int) -> bool: ...

    # Property requests
    @abstractmethod
    def get_all_property_requests(self) -> List[PropertyRequest]: ...

    @abstractmethod
    def create_property_request(self, data: PropertyRequestCreate) -> PropertyRequest: ...

    @abstractmethod
    def delete_property_request(self, request_id: int) -> bool: ...

    # Admin
    @abstractmethod
    def create_admin(self, data: AdminCreate) -> Admin: ...

    @abstractmethod
    def get_admin_by_username(self, username: str) -> Optional[Admin]: ...

    @abstractmethod
    def verify_admin(self, username: str, password: str) -> Optional[Admin]: ...

    # Site settings
    @abstractmethod
    def get_site_setting(self, key: str) -> Optional[SiteSetting]: ...

    @abstractmethod
    def get_all_site_settings(self) -> List[SiteSetting]: ...

    @abstractmethod
    def update_site_setting(self, key: str, value: str) -> SiteSetting:
        """Create the setting if absent, otherwise overwrite its value"""

    def update_site_settings(self, settings: dict) -> List[SiteSetting]:
        return [self.update_site_setting(key, value) for key, value in settings.items()]

    # Governorates
    @abstractmethod
    def get_all_governorates(self) -> List[Governorate]: ...

    @abstractmethod
    def get_governorate_by_id(self, governorate_id: int) -> Optional[Governorate]: ...

    @abstractmethod
    def create_governorate(self, data: GovernorateCreate) -> Governorate: ...

    @abstractmethod
    def update_governorate(self, governorate_id: int, data: GovernorateUpdate) -> Optional[Governorate]: ...

    @abstractmethod
    def delete_governorate(self, governorate_id: int) -> bool:
        """Also removes the governorate's directorates"""

    # Directorates
    @abstractmethod
    def get_all_directorates(self) -> List[Directorate]: ...

    @abstractmethod
    def get_directorate_by_id(self, directorate_id: int) -> Optional[Directorate]: ...

    @abstractmethod
    def get_directorates_by_governorate(self, governorate_id: int) -> List[Directorate]: ...

    @abstractmethod
    def create_directorate(self, data: DirectorateCreate) -> Directorate: ...

    @abstractmethod
    def update_directorate(self, directorate_id: int, data: DirectorateUpdate) -> Optional[Directorate]: ...

    @abstractmethod
    def delete_directorate(self, directorate_id: int) -> bool: ...

    def check_location(self, governorate_id: Optional[int], directorate_id: Optional[int]) -> None:
        """Raise NotFoundError unless both ids exist and the directorate lies in the governorate

        Either id may be None, in which case it is not checked.
        """
        if governorate_id is not None and self.get_governorate_by_id(governorate_id) is None:
            raise NotFoundError(f"Governorate {governorate_id} does not exist")
        if directorate_id is None:
            return
        directorate = self.get_directorate_by_id(directorate_id)
        if directorate is None:
            raise NotFoundError(f"Directorate {directorate_id} does not exist")
        if governorate_id is not None and directorate.governorate_id != governorate_id:
            raise NotFoundError(f"Directorate {directorate_id} does not belong to governorate {governorate_id}")

    # Property types
    @abstractmethod
    def get_all_property_types(self) -> List[PropertyType]: ...

    @abstractmethod
    def get_active_property_types(self) -> List[PropertyType]: ...

    @abstractmethod
    def create_property_type(self, data: PropertyTypeCreate) -> PropertyType: ...

    @abstractmethod
    def update_property_type(self, type_id: int, data: PropertyTypeUpdate) -> Optional[PropertyType]: ...

    @abstractmethod
    def delete_property_type(self, type_id: int) -> bool: ...
