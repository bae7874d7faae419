"""Tests for application settings."""

import pytest
from fastapi.testclient import TestClient

from coursehub.config import Settings, get_settings
from coursehub.main import build_storage, create_app


class TestSettings:
    """Tests for Settings."""

    def test_environment_flags(self):
        settings = Settings(environment="production")
        assert settings.is_production
        assert not settings.is_development
        assert not settings.is_testing

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        """Values come from environment variables, case-insensitively."""
        monkeypatch.setenv("SEED_DEMO_DATA", "false")
        monkeypatch.setenv("api_port", "9000")
        settings = Settings()
        assert settings.seed_demo_data is False
        assert settings.api_port == 9000

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()


class TestBuildStorage:
    """Tests for startup storage construction."""

    def test_seeded(self, settings: Settings):
        storage = build_storage(settings)
        assert storage.store.counts()["course"] == 6

    def test_empty(self, settings: Settings):
        storage = build_storage(settings.model_copy(update={"seed_demo_data": False}))
        assert sum(storage.store.counts().values()) == 0


class TestApiDocs:
    """Docs are exposed in development or when debug is on."""

    def test_hidden_by_default_outside_development(self, settings: Settings):
        assert settings.debug is False
        with TestClient(create_app(settings=settings)) as client:
            assert client.get("/docs").status_code == 404

    def test_debug_exposes_docs(self, settings: Settings):
        debug_settings = settings.model_copy(update={"debug": True})
        with TestClient(create_app(settings=debug_settings)) as client:
            assert client.get("/openapi.json").status_code == 200
            assert client.get("/health/ready").json()["debug"] is True
