"""
tests/conftest.py

Shared pytest fixtures used by both unit and integration test suites.
All HTTP fixtures use respx.mock, so no real network calls are made in any test.
"""

from __future__ import annotations

import httpx
import pytest
import respx

from config import Settings
from services.address_cache import AddressCache

# Upstream URL used by every test; never the real icanhazip.com.
UPSTREAM_URL = "https://upstream.test/"


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------


@pytest.fixture()
def settings() -> Settings:
    """
    Returns Settings pointing at the mocked upstream with a short timeout.

    The interval is long enough that only the startup probe runs during a test.
    """
    return Settings(
        ip_provider_url=UPSTREAM_URL,
        refresh_interval=60,
        probe_timeout=1.0,
        host="127.0.0.1",
        port=6969,
    )


# ---------------------------------------------------------------------------
# HTTP mock fixture: intercepts all httpx calls
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_http():
    """
    Yields a respx router that intercepts all httpx.AsyncClient calls.

    No real network traffic is allowed during tests. Use this fixture
    wherever a service or client would normally make an outbound request.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ---------------------------------------------------------------------------
# Shared httpx.AsyncClient fixture
# ---------------------------------------------------------------------------


@pytest.fixture()
async def http_client():
    """
    Yields a real httpx.AsyncClient instance for use in tests.

    Pair with the mock_http fixture so all requests are intercepted by respx.
    The client is closed after each test.
    """
    async with httpx.AsyncClient() as client:
        yield client


# ---------------------------------------------------------------------------
# Cache fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def address_cache() -> AddressCache:
    """Returns a fresh, un-populated AddressCache."""
    return AddressCache()


@pytest.fixture()
def populated_cache() -> AddressCache:
    """Returns an AddressCache already holding 1.2.3.4."""
    cache = AddressCache()
    cache.write("1.2.3.4")
    return cache
