"""Shared test fixtures for gcache tests."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from gcache.app.main import create_app
from gcache.infra.cache import LRUCache
from gcache.infra.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Clear the lru_cache on get_settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Minimal Settings instance for unit tests."""
    return Settings(max_size=5, log_level="WARNING", log_file=None)


@pytest.fixture
def cache() -> LRUCache[str, str]:
    """Empty cache with capacity 5."""
    return LRUCache(5)


@pytest.fixture
def app(cache: LRUCache, test_settings: Settings):
    """FastAPI app wired to the ``cache`` fixture."""
    return create_app(cache_override=cache, settings=test_settings)


@pytest.fixture
async def client(app) -> AsyncClient:
    """Create an async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
