"""Tests for settings, logging setup and app construction."""

import json
import logging

import pytest

from config.logging_config import JsonFormatter, setup_logging
from config.settings import Settings, normalize_database_url
from exceptions import ConfigurationError
from main import create_app
from storage import create_storage
from storage.memory import MemStorage


class TestSettings:

    def test_normalize_database_url(self):
        assert normalize_database_url("postgres://u:p@h/db") == "postgresql://u:p@h/db"
        assert normalize_database_url("postgresql://u:p@h/db") == "postgresql://u:p@h/db"
        assert normalize_database_url(None) is None

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DATABASE_URL", "postgres://u:p@h/db")
        monkeypatch.setenv("SESSION_MAX_AGE", "60")
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://rand.jo, https://admin.rand.jo")
        monkeypatch.setenv("UPLOAD_DIR", str(tmp_path))
        monkeypatch.setenv("DEBUG", "true")

        settings = Settings.from_env()

        assert settings.database_url == "postgresql://u:p@h/db"
        assert settings.session_max_age == 60
        assert settings.allowed_origins == ["https://rand.jo", "https://admin.rand.jo"]
        assert settings.upload_dir == tmp_path
        assert settings.debug is True

    def test_default_credentials_flag(self):
        assert Settings().uses_default_admin_credentials
        assert not Settings(admin_password="s3cret").uses_default_admin_credentials


class TestStorageSelection:

    def test_memory_without_database_url(self, settings):
        assert isinstance(create_storage(settings), MemStorage)

    def test_database_with_url(self, settings):
        settings.database_url = "sqlite://"
        storage = create_storage(settings)
        assert type(storage).__name__ == "DbStorage"
        assert storage.get_admin_by_username("admin") is not None


class TestCreateApp:

    def test_empty_session_secret_rejected(self, settings, mem_storage):
        settings.session_secret = ""
        with pytest.raises(ConfigurationError):
            create_app(storage=mem_storage, settings=settings)

    def test_unknown_route_uses_message_envelope(self, client):
        response = client.get("/api/nowhere")
        assert response.status_code == 404
        assert "message" in response.json()


class TestLogging:

    def test_json_formatter(self):
        record = logging.LogRecord("storage", logging.INFO, __file__, 1, "seeded %d rows", (6,), None)

        payload = json.loads(JsonFormatter().format(record))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "storage"
        assert payload["message"] == "seeded 6 rows"

    def test_setup_logging_sets_level(self):
        root = logging.getLogger()
        previous_level, previous_handlers = root.level, root.handlers[:]
        try:
            setup_logging("warning", "json")
            assert root.level == logging.WARNING
            assert isinstance(root.handlers[-1].formatter, JsonFormatter)
        finally:
            root.handlers[:] = previous_handlers
            root.setLevel(previous_level)
