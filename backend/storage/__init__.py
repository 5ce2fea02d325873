# Storage package
import logging
from typing import Optional

from config.settings import Settings
from storage.base import Storage
from storage.memory import MemStorage

logger = logging.getLogger(__name__)


def create_storage(settings: Optional[Settings] = None) -> Storage:
    """DbStorage when DATABASE_URL is set, otherwise the in-memory store"""
    settings = settings or Settings.from_env()

    if settings.database_url:
        from config.db_connection import create_db_engine
        from storage.database import DbStorage

        engine = create_db_engine(settings.database_url, echo=settings.debug)
        logger.info("Using database storage (%s)", engine.url.render_as_string(hide_password=True))
        return DbStorage(engine, settings)

    logger.info("DATABASE_URL not set, using in-memory storage")
    return MemStorage(settings)


__all__ = ["Storage", "MemStorage", "create_storage"]
