"""
Leads router - Public forms: contact, newsletter, entrustment and property request
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from exceptions import AlreadySubscribedError
from models import ContactCreate, EntrustmentCreate, NewsletterCreate, PropertyRequestCreate
from routers.dependencies import get_storage
from storage.base import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["leads"])


@router.post("/contacts", status_code=201)
async def create_contact(data: ContactCreate, storage: Storage = Depends(get_storage)):
    try:
        contact = storage.create_contact(data)
    except Exception:
        logger.exception("Error saving contact form")
        raise HTTPException(status_code=500, detail="Failed to submit contact form")

    logger.info("Contact form received (id=%s)", contact.id)
    return {"message": "Contact form submitted successfully", "contact": contact}


@router.post("/newsletter", status_code=201)
async def subscribe_newsletter(data: NewsletterCreate, storage: Storage = Depends(get_storage)):
    """Subscribe an email; 409 if it is already on the list"""
    try:
        newsletter = storage.subscribe_newsletter(data)
    except AlreadySubscribedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception:
        logger.exception("Error subscribing to newsletter")
        raise HTTPException(status_code=500, detail="Failed to subscribe to newsletter")

    return {"message": "Successfully subscribed to newsletter", "newsletter": newsletter}


@router.post("/entrustments", status_code=201)
async def create_entrustment(data: EntrustmentCreate, storage: Storage = Depends(get_storage)):
    try:
        entrustment = storage.create_entrustment(data)
    except Exception:
        logger.exception("Error saving entrustment request")
        raise HTTPException(status_code=500, detail="Failed to submit entrustment request")

    return {"message": "Entrustment request submitted successfully", "entrustment": entrustment}


@router.post("/property-requests", status_code=201)
async def create_property_request(data: PropertyRequestCreate, storage: Storage = Depends(get_storage)):
    try:
        property_request = storage.create_property_request(data)
    except Exception:
        logger.exception("Error saving property request")
        raise HTTPException(status_code=500, detail="Failed to submit property request")

    return {"message": "Property request submitted successfully", "property_request": property_request}
