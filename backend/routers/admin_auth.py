"""
Admin auth router - Session login, logout and status
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from models import AdminLogin
from routers.dependencies import get_storage
from services.auth_service import current_admin, login_session
from storage.base import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin-auth"])


@router.post("/login")
async def login(credentials: AdminLogin, request: Request, storage: Storage = Depends(get_storage)):
    if not credentials.username or not credentials.password:
        raise HTTPException(status_code=400, detail="Username and password required")

    try:
        admin = storage.verify_admin(credentials.username, credentials.password)
    except Exception:
        logger.exception("Error verifying admin credentials")
        raise HTTPException(status_code=500, detail="Login failed")

    if admin is None:
        logger.warning("Failed admin login for '%s'", credentials.username)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    session_admin = login_session(request, admin)
    logger.info("Admin '%s' logged in", admin.username)
    return {"message": "Login successful", "admin": session_admin}


@router.post("/logout")
async def logout(request: Request):
    request.session.clear()
    return {"message": "Logout successful"}


@router.get("/auth")
async def auth_status(request: Request):
    admin = current_admin(request)
    if admin:
        return {"authenticated": True, "admin": admin}
    return {"authenticated": False}
