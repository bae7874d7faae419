"""Shared fixtures."""

import os
from collections.abc import AsyncIterator, Iterator


# Must be set before coursehub.main is imported (it builds the app at import)
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_REQUESTS", "false")

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from coursehub.config import Settings, get_settings  # noqa: E402
from coursehub.main import create_app  # noqa: E402
from coursehub.store import MemoryStore, StorageService, seed_store  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    """Test settings (no log files, no request logging)."""
    get_settings.cache_clear()
    return Settings(
        environment="testing",
        log_to_file=False,
        log_level="WARNING",
        log_requests=False,
    )


@pytest.fixture
def store() -> MemoryStore:
    """Empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def storage(store: MemoryStore) -> StorageService:
    """Storage service over an empty store."""
    return StorageService(store)


@pytest.fixture
def seeded_storage() -> StorageService:
    """Storage service over a store loaded with the demo catalog."""
    return seed_store(MemoryStore())


@pytest.fixture
def client(settings: Settings, seeded_storage: StorageService) -> Iterator[TestClient]:
    """Test client for an app backed by the demo catalog."""
    app = create_app(settings=settings, storage=seeded_storage)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def async_client(
    settings: Settings, seeded_storage: StorageService
) -> AsyncIterator[httpx.AsyncClient]:
    """Async client talking to the app in-process over ASGI.

    The transport skips lifespan, so the storage is attached up front.
    """
    app = create_app(settings=settings, storage=seeded_storage)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as ac:
        yield ac
