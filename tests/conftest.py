"""Pytest configuration and fixtures."""

import io
from decimal import Decimal
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from config.db_connection import create_db_engine
from config.settings import Settings
from main import create_app
from models import PropertyCreate
from services.image_upload import ImageUploader
from storage.database import DbStorage
from storage.memory import MemStorage


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings isolated from the environment, uploads under tmp_path."""
    return Settings(
        database_url=None,
        session_secret="test-session-secret",
        upload_dir=tmp_path / "uploads",
    )


@pytest.fixture
def mem_storage(settings: Settings) -> MemStorage:
    """Seeded in-memory store."""
    return MemStorage(settings)


@pytest.fixture
def db_storage(settings: Settings) -> DbStorage:
    """Seeded SQLite in-memory database store."""
    return DbStorage(create_db_engine("sqlite://"), settings)


@pytest.fixture(params=["memory", "database"])
def storage(request, settings: Settings):
    """Seeded store behind the app, once per backend."""
    if request.param == "memory":
        return MemStorage(settings)
    return DbStorage(create_db_engine("sqlite://"), settings)


@pytest.fixture(params=["memory", "database"])
def empty_storage(request, settings: Settings):
    """Unseeded store, once per backend."""
    if request.param == "memory":
        return MemStorage(settings, seed=False)
    return DbStorage(create_db_engine("sqlite://"), settings, seed=False)


@pytest.fixture
def uploader(settings: Settings) -> ImageUploader:
    return ImageUploader(settings.upload_dir)


@pytest.fixture
def app(storage, settings: Settings, uploader: ImageUploader):
    return create_app(storage=storage, settings=settings, uploader=uploader)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def admin_client(client: TestClient) -> TestClient:
    """Client holding a logged-in admin session."""
    response = client.post("/api/admin/login", json={"username": "admin", "password": "admin123"})
    assert response.status_code == 200
    return client


def make_property(**overrides) -> PropertyCreate:
    data = {
        "title": "أرض سكنية للبيع",
        "description": "قطعة أرض مستوية",
        "price": Decimal("100000"),
        "size": 500,
        "property_type": "land",
        "location": "عبدون، عمان",
    }
    data.update(overrides)
    return PropertyCreate(**data)


def make_image_bytes(size=(1600, 1000), image_format="PNG", color=(120, 160, 90)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture
def property_payload() -> dict:
    """JSON body for POST /api/admin/properties."""
    return {
        "title": "Residential land in Dabouq",
        "description": "Flat plot with street frontage",
        "price": "250000",
        "size": 900,
        "property_type": "land",
        "location": "Dabouq, Amman",
        "village": "Dabouq",
        "plot_number": "77",
    }
