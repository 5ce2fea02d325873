"""
Admin authentication - bcrypt password hashing and the session dependency
"""
import logging
from typing import Optional

import bcrypt
from fastapi import HTTPException, Request

from models.admin import AdminPublic

logger = logging.getLogger(__name__)

SESSION_ADMIN_KEY = "admin"
BCRYPT_ROUNDS = 10


def hash_password(raw_password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(raw_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(raw_password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(raw_password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash stored in the table
        logger.warning("Stored admin password hash is not a valid bcrypt hash")
        return False


def login_session(request: Request, admin) -> AdminPublic:
    """Store the admin identity in the signed session cookie"""
    session_admin = AdminPublic(id=admin.id, username=admin.username)
    request.session[SESSION_ADMIN_KEY] = session_admin.model_dump()
    return session_admin


def current_admin(request: Request) -> Optional[AdminPublic]:
    data = request.session.get(SESSION_ADMIN_KEY)
    return AdminPublic(**data) if data else None


async def require_admin(request: Request) -> AdminPublic:
    """Dependency guarding every /api/admin/* route"""
    admin = current_admin(request)
    if admin is None:
        raise HTTPException(status_code=401, detail="Admin authentication required")
    return admin
