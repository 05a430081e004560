"""Shared fixtures: the app wired to a fake upstream."""

import httpx
import pytest
from fastapi.testclient import TestClient

from cheer_api.cache import QuoteListCache
from cheer_api.config import Settings, get_settings
from cheer_api.dependencies import get_http_client, get_quote_cache
from cheer_api.main import app

from fakes import TIMEOUT_FIELDS, FakeUpstream


@pytest.fixture
def settings():
    """Settings with tight timeouts so slow upstreams fail fast."""
    return Settings(**{name: 0.2 for name in TIMEOUT_FIELDS})


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def quote_cache(settings):
    return QuoteListCache(settings)


@pytest.fixture
def client(upstream, settings, quote_cache):
    """Test client wired to the fake upstream."""

    async def fake_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(upstream)) as http:
            yield http

    app.dependency_overrides[get_http_client] = fake_http_client
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_quote_cache] = lambda: quote_cache
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
