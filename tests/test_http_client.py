"""Transport: base URL, default headers, per-call overrides and health check."""

import httpx
import pytest

from adapters.http_client import ApiClient, build_async_client, check_health
from core.config import ClientSettings


def test_build_async_client_defaults():
    settings = ClientSettings(base_url="http://api.local:8080/api/v1", http_timeout_seconds=7, user_agent="ua/1")
    client = build_async_client(settings, extra_headers={"X-Trace": "1"})

    assert str(client.base_url) == "http://api.local:8080/api/v1/"
    assert client.headers["content-type"] == "application/json"
    assert client.headers["user-agent"] == "ua/1"
    assert client.headers["x-trace"] == "1"
    assert client.timeout.read == 7


@pytest.mark.asyncio
async def test_paths_are_relative_to_base_url(client, backend):
    backend.reply({"success": True, "message": "ok"})

    await client.get("/students?limit=1&offset=0")

    assert str(backend.requests[0].url) == "http://testserver/api/v1/students?limit=1&offset=0"


@pytest.mark.asyncio
async def test_per_call_headers_override_defaults(client, backend):
    backend.reply({"success": True, "message": "ok"})

    await client.post("/students", {"a": 1}, headers={"Content-Type": "application/vnd.custom+json"})

    assert backend.requests[0].headers["content-type"] == "application/vnd.custom+json"


@pytest.mark.asyncio
async def test_non_2xx_is_returned_not_raised(client, backend):
    backend.reply({"success": False, "message": "boom"}, status_code=500)

    response = await client.delete("/students/s1")

    assert response.status_code == 500


@pytest.mark.asyncio
async def test_check_health_targets_server_root(client, backend):
    backend.reply({"status": "ok", "service": "coordinador-api", "version": "0.1.0", "database": "ok"})

    health = await check_health(client)

    assert str(backend.requests[0].url) == "http://testserver/health"
    assert health["service"] == "coordinador-api"


@pytest.mark.asyncio
async def test_check_health_raises_on_error_status(client, backend):
    backend.reply({"status": "down"}, status_code=503)

    with pytest.raises(httpx.HTTPStatusError):
        await check_health(client)


@pytest.mark.asyncio
async def test_context_manager_closes_client(settings, backend):
    async with ApiClient(settings, transport=httpx.MockTransport(backend)) as api:
        assert str(api.base_url) == "http://testserver/api/v1/"
    assert api._client.is_closed
