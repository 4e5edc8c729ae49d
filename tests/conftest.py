"""Pytest configuration and fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from shortlinks.abbreviation import AbbreviationGenerator
from shortlinks.database.memory import InMemoryLinkStore
from shortlinks.service import LinkShortenerService
from shortlinks.common import setup_logging
from web_app import create_app


class FakeCache:
    """Stand-in for RedisCache keeping entries in a dict."""

    def __init__(self):
        self.enabled = True
        self.entries = {}

    def get_cache_key(self, abbreviation):
        return f"link:shortener:{abbreviation}"

    async def get(self, key):
        return self.entries.get(key)

    async def set(self, key, value, ttl=None):
        self.entries[key] = value
        return True

    async def delete(self, key):
        return self.entries.pop(key, None) is not None

    async def ping(self):
        return True

    async def close(self):
        pass


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger):
    """Create an empty in-memory link store."""
    return InMemoryLinkStore(logger=logger)


@pytest.fixture
def generator():
    return AbbreviationGenerator()


@pytest.fixture
def service(store, generator, logger) -> LinkShortenerService:
    """Create service instance without cache."""
    return LinkShortenerService(
        store=store,
        cache=None,
        generator=generator,
        logger=logger,
    )


@pytest.fixture
def fake_cache():
    return FakeCache()


@pytest.fixture
def config():
    return Config(
        database_url="memory://",
        base_url="http://testserver",
        _env_file=None,
    )


@pytest.fixture
def app(store, service, config):
    """Create test FastAPI app."""
    return create_app(
        store_instance=store,
        cache_instance=None,
        service_instance=service,
        config=config,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://sub.example.com/path/to/index.html",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
