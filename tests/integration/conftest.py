"""
Fixtures for integration tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.dependencies import get_cache, get_data_source
from app.main import app


@pytest.fixture
def data_source(game_data):
    """Data source the API will read from; override in a test module to swap it."""
    return game_data


@pytest.fixture
async def client(data_source, cache):
    """
    HTTP client for testing API endpoints.

    Overrides the data source and cache dependencies, so no MongoDB is needed.
    """
    app.dependency_overrides[get_data_source] = lambda: data_source
    app.dependency_overrides[get_cache] = lambda: cache

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
