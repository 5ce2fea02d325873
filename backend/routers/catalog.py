"""
Catalog router - Public lookups used by the site: settings, locations, property types
"""
import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException

from models import Directorate, Governorate, PropertyType
from routers.dependencies import RowId, get_storage
from storage.base import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/site-settings", response_model=Dict[str, str])
async def get_site_settings(storage: Storage = Depends(get_storage)):
    """Settings as a flat key -> value object for the footer and contact page"""
    try:
        settings = storage.get_all_site_settings()
    except Exception:
        logger.exception("Error fetching site settings")
        raise HTTPException(status_code=500, detail="Failed to fetch site settings")
    return {setting.setting_key: setting.setting_value for setting in settings}


@router.get("/governorates", response_model=List[Governorate])
async def get_governorates(storage: Storage = Depends(get_storage)):
    try:
        return storage.get_all_governorates()
    except Exception:
        logger.exception("Error fetching governorates")
        raise HTTPException(status_code=500, detail="Failed to fetch governorates")


@router.get("/governorates/{governorate_id}/directorates", response_model=List[Directorate])
async def get_governorate_directorates(governorate_id: RowId, storage: Storage = Depends(get_storage)):
    try:
        return storage.get_directorates_by_governorate(governorate_id)
    except Exception:
        logger.exception("Error fetching directorates for governorate %s", governorate_id)
        raise HTTPException(status_code=500, detail="Failed to fetch directorates")


@router.get("/directorates", response_model=List[Directorate])
async def get_directorates(storage: Storage = Depends(get_storage)):
    try:
        return storage.get_all_directorates()
    except Exception:
        logger.exception("Error fetching directorates")
        raise HTTPException(status_code=500, detail="Failed to fetch directorates")


@router.get("/property-types", response_model=List[PropertyType])
async def get_property_types(storage: Storage = Depends(get_storage)):
    """Active property types only"""
    try:
        return storage.get_active_property_types()
    except Exception:
        logger.exception("Error fetching property types")
        raise HTTPException(status_code=500, detail="Failed to fetch property types")
