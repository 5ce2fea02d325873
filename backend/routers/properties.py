"""
Properties router - Public listing, featured, detail and search endpoints
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from models import PropertyRead, SearchFilters
from routers.dependencies import RowId, get_storage
from storage.base import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["properties"])


@router.get("/properties", response_model=List[PropertyRead])
async def get_properties(storage: Storage = Depends(get_storage)):
    """Published properties, newest first"""
    try:
        return storage.get_all_properties()
    except Exception:
        logger.exception("Error fetching properties")
        raise HTTPException(status_code=500, detail="Failed to fetch properties")


@router.get("/properties/featured", response_model=List[PropertyRead])
async def get_featured_properties(storage: Storage = Depends(get_storage)):
    """Published properties flagged for the home page"""
    try:
        return storage.get_featured_properties()
    except Exception:
        logger.exception("Error fetching featured properties")
        raise HTTPException(status_code=500, detail="Failed to fetch featured properties")


@router.get("/properties/{property_id}", response_model=PropertyRead)
async def get_property(property_id: RowId, storage: Storage = Depends(get_storage)):
    try:
        prop = storage.get_property_by_id(property_id)
    except Exception:
        logger.exception("Error fetching property %s", property_id)
        raise HTTPException(status_code=500, detail="Failed to fetch property")

    if prop is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return prop


@router.post("/properties/search", response_model=List[PropertyRead])
async def search_properties(
    filters: Optional[SearchFilters] = Body(default=None), storage: Storage = Depends(get_storage)
):
    """Filter published properties; the body and each of its fields are optional"""
    try:
        return storage.search_properties(filters or SearchFilters())
    except Exception:
        logger.exception("Error searching properties")
        raise HTTPException(status_code=500, detail="Failed to search properties")
