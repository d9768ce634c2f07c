"""API test fixtures - FastAPI test client with a scripted page fetcher.

Invariants:
    - get_page_fetcher dependency overridden with a ScriptedFetcher per test
    - _browsers registry cleared after every test
    - Lifespan does not run under ASGITransport (no real HTTP client is opened)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from city_search.api.routes.browsers import _browsers, get_page_fetcher
from city_search.main import app
from tests.services.fake_fetcher import ScriptedFetcher


@pytest.fixture
def fetcher():
    return ScriptedFetcher()


@pytest.fixture
async def client(fetcher):
    """FastAPI test client with the page fetcher overridden."""
    app.dependency_overrides[get_page_fetcher] = lambda: fetcher

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    _browsers.clear()
