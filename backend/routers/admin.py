"""
Admin router - Back office CRUD, every route requires an admin session
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from exceptions import NotFoundError
from models import (
    MAX_INT,
    Contact,
    Directorate, DirectorateCreate, DirectorateUpdate,
    Entrustment,
    Governorate, GovernorateCreate, GovernorateUpdate,
    Newsletter,
    PropertyCreate, PropertyRead, PropertyUpdate,
    PropertyRequest,
    PropertyType, PropertyTypeCreate, PropertyTypeUpdate,
    SiteSetting, SiteSettingsUpdate,
)
from routers.dependencies import RowId, get_storage, get_uploader
from services.auth_service import require_admin
from services.image_upload import ImageUploader
from storage.base import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


def _server_error(action: str) -> HTTPException:
    logger.exception("Admin request failed: %s", action)
    return HTTPException(status_code=500, detail=f"Failed to {action}")


def _require_found(row, label: str):
    if row is None or row is False:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return row


def _invalid_reference(error: NotFoundError) -> HTTPException:
    return HTTPException(status_code=400, detail=str(error))


# Properties

@router.get("/properties", response_model=List[PropertyRead])
async def admin_get_properties(storage: Storage = Depends(get_storage)):
    """All properties, published or not"""
    try:
        return storage.get_all_properties(include_unpublished=True)
    except Exception:
        raise _server_error("fetch properties")


@router.get("/properties/{property_id}", response_model=PropertyRead)
async def admin_get_property(property_id: RowId, storage: Storage = Depends(get_storage)):
    try:
        prop = storage.get_property_by_id(property_id, include_unpublished=True)
    except Exception:
        raise _server_error("fetch property")
    return _require_found(prop, "Property")


@router.post("/properties", status_code=201)
async def admin_create_property(data: PropertyCreate, storage: Storage = Depends(get_storage)):
    try:
        storage.check_location(data.governorate_id, data.directorate_id)
        prop = storage.create_property(data)
    except NotFoundError as e:
        raise _invalid_reference(e)
    except Exception:
        raise _server_error("create property")

    logger.info("Property %s created", prop.id)
    return {"message": "Property created successfully", "property": prop}


@router.put("/properties/{property_id}")
async def admin_update_property(
    property_id: RowId,
    data: PropertyUpdate,
    storage: Storage = Depends(get_storage),
    uploader: ImageUploader = Depends(get_uploader),
):
    """Partial update

    Uploaded images dropped from the list are deleted from disk unless another
    property still lists them.
    """
    changes = data.changes()
    others = []
    try:
        previous = storage.get_property_by_id(property_id, include_unpublished=True)
        if previous is not None and ("governorate_id" in changes or "directorate_id" in changes):
            storage.check_location(
                changes.get("governorate_id", previous.governorate_id),
                changes.get("directorate_id", previous.directorate_id),
            )
        prop = storage.update_property(property_id, data) if previous else None
        if prop is not None and "images" in changes:
            others = storage.get_all_properties(include_unpublished=True)
    except NotFoundError as e:
        raise _invalid_reference(e)
    except Exception:
        raise _server_error("update property")

    _require_found(prop, "Property")

    if "images" in changes:
        still_used = {url for other in others if other.id != property_id for url in other.images}
        for image_url in set(previous.images) - set(prop.images) - still_used:
            uploader.cleanup_image(image_url)

    return {"message": "Property updated successfully", "property": prop}


@router.delete("/properties/{property_id}")
async def admin_delete_property(property_id: RowId, storage: Storage = Depends(get_storage)):
    try:
        deleted = storage.delete_property(property_id)
    except Exception:
        raise _server_error("delete property")

    _require_found(deleted, "Property")
    logger.info("Property %s deleted", property_id)
    return {"message": "Property deleted successfully"}


# Leads

@router.get("/contacts", response_model=List[Contact])
async def admin_get_contacts(storage: Storage = Depends(get_storage)):
    try:
        return storage.get_all_contacts()
    except Exception:
        raise _server_error("fetch contacts")


@router.delete("/contacts/{contact_id}")
async def admin_delete_contact(contact_id: RowId, storage: Storage = Depends(get_storage)):
    try:
        deleted = storage.delete_contact(contact_id)
    except Exception:
        raise _server_error("delete contact")
    _require_found(deleted, "Contact")
    return {"message": "Contact deleted successfully"}


@router.get("/newsletters", response_model=List[Newsletter])
async def admin_get_newsletters(storage: Storage = Depends(get_storage)):
    try:
        return storage.get_all_newsletters()
    except Exception:
        raise _server_error("fetch newsletter subscriptions")


@router.delete("/newsletters/{newsletter_id}")
async def admin_delete_newsletter(newsletter_id: RowId, storage: Storage = Depends(get_storage)):
    try:
        deleted = storage.delete_newsletter(newsletter_id)
    except Exception:
        raise _server_error("delete newsletter subscription")
    _require_found(deleted, "Newsletter subscription")
    return {"message": "Newsletter subscription deleted successfully"}


@router.get("/entrustments", response_model=List[Entrustment])
async def admin_get_entrustments(storage: Storage = Depends(get_storage)):
    try:
        return storage.get_all_entrustments()
    except Exception:
        raise _server_error("fetch entrustments")


@router.delete("/entrustments/{entrustment_id}")
async def admin_delete_entrustment(entrustment_id: RowId, storage: Storage = Depends(get_storage)):
    try:
        deleted = storage.delete_entrustment(entrustment_id)
    except Exception:
        raise _server_error("delete entrustment")
    _require_found(deleted, "Entrustment")
    return {"message": "Entrustment deleted successfully"}


@router.get("/property-requests", response_model=List[PropertyRequest])
async def admin_get_property_requests(storage: Storage = Depends(get_storage)):
    try:
        return storage.get_all_property_requests()
    except Exception:
        raise _server_error("fetch property requests")


@router.delete("/property-requests/{request_id}")
async def admin_delete_property_request(request_id: RowId, storage: Storage = Depends(get_storage)):
    try:
        deleted = storage.delete_property_request(request_id)
    except Exception:
        raise _server_error("delete property request")
    _require_found(deleted, "Property request")
    return {"message": "Property request deleted successfully"}


# Site settings

@router.get("/site-settings", response_model=List[SiteSetting])
async def admin_get_site_settings(storage: Storage = Depends(get_storage)):
    try:
        return storage.get_all_site_settings()
    except Exception:
        raise _server_error("fetch site settings")


@router.post("/site-settings")
async def admin_update_site_settings(data: SiteSettingsUpdate, storage: Storage = Depends(get_storage)):
    try:
        settings = storage.update_site_settings(data.settings)
    except Exception:
        raise _server_error("update site settings")

    logger.info("Updated %d site settings", len(settings))
    return {"message": "Site settings updated successfully", "settings": settings}


# Governorates

@router.get("/governorates", response_model=List[Governorate])
async def admin_get_governorates(storage: Storage = Depends(get_storage)):
    try:
        return storage.get_all_governorates()
    except Exception:
        raise _server_error("fetch governorates")


@router.post("/governorates", status_code=201)
async def admin_create_governorate(data: GovernorateCreate, storage: Storage = Depends(get_storage)):
    try:
        governorate = storage.create_governorate(data)
    except Exception:
        raise _server_error("create governorate")
    return {"message": "Governorate created successfully", "governorate": governorate}


@router.put("/governorates/{governorate_id}")
async def admin_update_governorate(
    governorate_id: RowId, data: GovernorateUpdate, storage: Storage = Depends(get_storage)
):
    try:
        governorate = storage.update_governorate(governorate_id, data)
    except Exception:
        raise _server_error("update governorate")
    _require_found(governorate, "Governorate")
    return {"message": "Governorate updated successfully", "governorate": governorate}


@router.delete("/governorates/{governorate_id}")
async def admin_delete_governorate(governorate_id: RowId, storage: Storage = Depends(get_storage)):
    """Deletes the governorate together with its directorates"""
    try:
        deleted = storage.delete_governorate(governorate_id)
    except Exception:
        raise _server_error("delete governorate")
    _require_found(deleted, "Governorate")
    return {"message": "Governorate deleted successfully"}


# Directorates

@router.get("/directorates", response_model=List[Directorate])
async def admin_get_directorates(
    governorate_id: Optional[int] = Query(default=None, ge=1, le=MAX_INT),
    storage: Storage = Depends(get_storage),
):
    try:
        if governorate_id is not None:
            return storage.get_directorates_by_governorate(governorate_id)
        return storage.get_all_directorates()
    except Exception:
        raise _server_error("fetch directorates")


@router.post("/directorates", status_code=201)
async def admin_create_directorate(data: DirectorateCreate, storage: Storage = Depends(get_storage)):
    try:
        storage.check_location(data.governorate_id, None)
        directorate = storage.create_directorate(data)
    except NotFoundError as e:
        raise _invalid_reference(e)
    except Exception:
        raise _server_error("create directorate")
    return {"message": "Directorate created successfully", "directorate": directorate}


@router.put("/directorates/{directorate_id}")
async def admin_update_directorate(
    directorate_id: RowId, data: DirectorateUpdate, storage: Storage = Depends(get_storage)
):
    try:
        if "governorate_id" in data.changes():
            storage.check_location(data.governorate_id, None)
        directorate = storage.update_directorate(directorate_id, data)
    except NotFoundError as e:
        raise _invalid_reference(e)
    except Exception:
        raise _server_error("update directorate")
    _require_found(directorate, "Directorate")
    return {"message": "Directorate updated successfully", "directorate": directorate}


@router.delete("/directorates/{directorate_id}")
async def admin_delete_directorate(directorate_id: RowId, storage: Storage = Depends(get_storage)):
    try:
        deleted = storage.delete_directorate(directorate_id)
    except Exception:
        raise _server_error("delete directorate")
    _require_found(deleted, "Directorate")
    return {"message": "Directorate deleted successfully"}


# Property types

@router.get("/property-types", response_model=List[PropertyType])
async def admin_get_property_types(storage: Storage = Depends(get_storage)):
    """All property types, including inactive ones"""
    try:
        return storage.get_all_property_types()
    except Exception:
        raise _server_error("fetch property types")


@router.post("/property-types", status_code=201)
async def admin_create_property_type(data: PropertyTypeCreate, storage: Storage = Depends(get_storage)):
    try:
        property_type = storage.create_property_type(data)
    except Exception:
        raise _server_error("create property type")
    return {"message": "Property type created successfully", "property_type": property_type}


@router.put("/property-types/{type_id}")
async def admin_update_property_type(
    type_id: RowId, data: PropertyTypeUpdate, storage: Storage = Depends(get_storage)
):
    try:
        property_type = storage.update_property_type(type_id, data)
    except Exception:
        raise _server_error("update property type")
    _require_found(property_type, "Property type")
    return {"message": "Property type updated successfully", "property_type": property_type}


@router.delete("/property-types/{type_id}")
async def admin_delete_property_type(type_id: RowId, storage: Storage = Depends(get_storage)):
    try:
        deleted = storage.delete_property_type(type_id)
    except Exception:
        raise _server_error("delete property type")
    _require_found(deleted, "Property type")
    return {"message": "Property type deleted successfully"}
