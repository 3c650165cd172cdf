import asyncio
import json

import httpx
import pytest

from shortflix.client import CatalogClient
from shortflix.models import ShortCreate

from .conftest import valid_payload

SHORT = {"id": 1, "videoUrl": "https://example.com/1.mp4", "title": "One", "tags": ["a"]}


def run(coro):
    return asyncio.run(coro)


def recording_transport(seen, status=200, body=None):
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.method == "POST":
            payload = json.loads(request.content)
            return httpx.Response(status, json=body if body is not None else {"id": 11, **payload})
        return httpx.Response(status, json=body if body is not None else [SHORT])

    return httpx.MockTransport(handler)


def test_get_shorts_without_query_sends_no_params():
    seen = []

    async def go():
        async with CatalogClient("http://api.test/api", transport=recording_transport(seen)) as client:
            return await client.get_shorts()

    shorts = run(go())
    assert [s.id for s in shorts] == [1]
    assert str(seen[0].url) == "http://api.test/api/shorts"
    assert seen[0].headers["content-type"] == "application/json"


@pytest.mark.parametrize("query", ["", "   ", None])
def test_blank_query_is_omitted(query):
    seen = []

    async def go():
        async with CatalogClient("http://api.test/api", transport=recording_transport(seen)) as client:
            await client.get_shorts(query)

    run(go())
    assert "q" not in seen[0].url.params


def test_query_is_trimmed():
    seen = []

    async def go():
        async with CatalogClient("http://api.test/api/", transport=recording_transport(seen)) as client:
            await client.get_shorts("  relax ", tag="nature")

    run(go())
    assert seen[0].url.path == "/api/shorts"
    assert seen[0].url.params["q"] == "relax"
    assert seen[0].url.params["tag"] == "nature"


def test_create_short_posts_camel_case_body():
    seen = []

    async def go():
        async with CatalogClient("http://api.test/api", transport=recording_transport(seen, status=201)) as client:
            return await client.create_short(
                ShortCreate(video_url="https://example.com/c.mp4", title="C", tags=["x"])
            )

    created = run(go())
    assert created.id == 11
    assert json.loads(seen[0].content) == {"videoUrl": "https://example.com/c.mp4", "title": "C", "tags": ["x"]}


def test_error_status_propagates():
    async def go():
        async with CatalogClient("http://api.test/api", transport=recording_transport([], status=500, body={})) as client:
            await client.get_shorts()

    with pytest.raises(httpx.HTTPStatusError):
        run(go())


def test_transport_error_propagates():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async def go():
        async with CatalogClient("http://api.test/api", transport=httpx.MockTransport(handler)) as client:
            await client.get_shorts()

    with pytest.raises(httpx.ConnectError):
        run(go())


def test_default_base_url_from_settings(monkeypatch):
    from shortflix import client as client_module
    from shortflix.config import Settings

    monkeypatch.setattr(client_module, "get_settings", lambda: Settings(api_base_url="http://configured/api"))

    async def go():
        c = CatalogClient()
        base = c.base
        await c.aclose()
        return base

    assert run(go()) == "http://configured/api"


def test_against_running_app(app, store):
    transport = httpx.ASGITransport(app=app)

    async def go():
        async with CatalogClient("http://testserver/api", transport=transport) as client:
            created = await client.create_short(valid_payload(title="Relaxing Rain", tags=["rain"]))
            found = await client.get_shorts("relax")
            with pytest.raises(httpx.HTTPStatusError) as excinfo:
                await client.create_short({"videoUrl": "not-a-url", "title": "X", "tags": ["a"]})
            return created, found, excinfo.value.response.status_code

    created, found, status = run(go())
    assert created.id == 11
    assert [s.id for s in found] == [7, 10, 11]
    assert status == 400
    assert len(store) == 11
