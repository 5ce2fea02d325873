"""
Database connection configuration using SQLModel and PostgreSQL
"""
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from config.settings import normalize_database_url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite leaves FK enforcement off per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the SQLModel engine for a database URL"""
    database_url = normalize_database_url(database_url)

    if database_url.startswith("sqlite"):
        # In-memory SQLite must share one connection across sessions
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(
        database_url,
        echo=echo,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
    )


def init_db(engine: Engine):
    """Initialize database tables (CREATE TABLE IF NOT EXISTS)"""
    # Register every table on the metadata before create_all
    import models  # noqa: F401

    SQLModel.metadata.create_all(engine, checkfirst=True)
