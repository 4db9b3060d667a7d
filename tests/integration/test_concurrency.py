"""
tests/integration/test_concurrency.py

Concurrency tests for the HTTP surface and the refresh cycle, driven
in-process through httpx.ASGITransport on a single event loop.
"""

from __future__ import annotations

import asyncio
import contextlib
import json

import httpx
import pytest

from app import create_app
from dependencies import get_address_cache
from services.refresh_service import RefreshService


def _asgi_client(settings, cache) -> httpx.AsyncClient:
    # NOTE: ASGITransport does not run the lifespan, so no refresh job starts.
    application = create_app(settings)
    application.dependency_overrides[get_address_cache] = lambda: cache
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=application),
        base_url="http://testserver",
    )


@pytest.mark.asyncio
async def test_readers_see_whole_values_while_address_changes(settings, populated_cache):
    """100 polling clients only ever see the old or the new address."""
    values = {"1.2.3.4", "5.6.7.8"}
    stop = asyncio.Event()

    async def poll(client: httpx.AsyncClient) -> list[str]:
        seen = []
        while not stop.is_set():
            response = await client.get("/")
            assert response.status_code == 200
            seen.append(json.loads(response.content)["ip"])
        return seen

    async def flip() -> None:
        for i in range(50):
            populated_cache.write("5.6.7.8" if i % 2 == 0 else "1.2.3.4")
            await asyncio.sleep(0.005)
        stop.set()

    async with _asgi_client(settings, populated_cache) as client:
        results = await asyncio.gather(flip(), *(poll(client) for _ in range(100)))

    observed = {ip for seen in results[1:] for ip in seen}
    assert observed <= values
    assert "5.6.7.8" in observed


@pytest.mark.asyncio
async def test_hung_probe_does_not_block_readers(settings, populated_cache):
    """A refresh stuck on the upstream leaves GET / answering promptly."""
    never = asyncio.Event()

    class _HangingIpService:
        async def get_public_ip(self) -> str:
            await never.wait()
            return "9.9.9.9"

    refresh = asyncio.create_task(
        RefreshService(_HangingIpService(), populated_cache).refresh_once()
    )
    try:
        await asyncio.sleep(0)
        async with _asgi_client(settings, populated_cache) as client:
            response = await asyncio.wait_for(client.get("/"), timeout=1.0)
        assert not refresh.done()
    finally:
        refresh.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await refresh

    assert response.status_code == 200
    assert response.json() == {"ip": "1.2.3.4"}
