#!/usr/bin/env python3
"""
Initialize database tables and seed default rows

Usage: DATABASE_URL=postgresql://... python init_db.py
"""
import logging
import sys

from config.db_connection import create_db_engine
from config.logging_config import setup_logging
from config.settings import Settings
from exceptions import ConfigurationError
from storage.database import DbStorage

logger = logging.getLogger(__name__)


def init_tables(settings: Settings) -> bool:
    """Create missing tables and seed a fresh database; returns True if it seeded"""
    if not settings.database_url:
        raise ConfigurationError("DATABASE_URL environment variable is required")

    engine = create_db_engine(settings.database_url, echo=settings.debug)
    logger.info("Connecting to database: %s", engine.url.render_as_string(hide_password=True))

    storage = DbStorage(engine, settings, seed=False)
    seeded = storage.seed_defaults()
    logger.info("Tables created successfully")
    return seeded


if __name__ == "__main__":
    settings = Settings.from_env()
    setup_logging(settings.log_level, settings.log_format)
    try:
        init_tables(settings)
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)
