"""Pytest configuration and fixtures for the produce registry service."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.services.produce_registry import ProduceRegistry, get_registry


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "stress: marks high-concurrency tests")
    config.addinivalue_line("markers", "asyncio: marks tests as async tests")


@pytest.fixture()
def registry():
    """Provide an empty registry for each test."""
    return ProduceRegistry()


@pytest.fixture()
def app_registry(registry):
    """Inject the per-test registry into the FastAPI app."""
    from src.main import app

    app.dependency_overrides[get_registry] = lambda: registry
    yield registry
    app.dependency_overrides.pop(get_registry, None)


@pytest_asyncio.fixture()
async def client(app_registry):
    """Return an HTTPX async client pointing at the FastAPI app."""
    from src.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client
