from __future__ import annotations

import asyncio
import json

import httpx

from eventportal.adapters.http_resilience import ResilientClient
from eventportal.config import RateLimit, ResilienceConfig


def test_client_applies_base_url_and_default_headers() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    config = ResilienceConfig(
        base_url="https://example.com/api/v2/",
        default_headers={"Accept": "application/json"},
        ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
    )

    async def run() -> None:
        async with ResilientClient(config, transport=httpx.MockTransport(handler)) as client:
            await client.request("GET", "things", params={"pageSize": "5"})
            await client.request("PATCH", "things/1", json={"a": 1})

    asyncio.run(run())

    assert [str(request.url) for request in seen] == [
        "https://example.com/api/v2/things?pageSize=5",
        "https://example.com/api/v2/things/1",
    ]
    assert seen[0].headers["Accept"] == "application/json"
    assert seen[1].method == "PATCH"
    assert json.loads(seen[1].content) == {"a": 1}


def test_response_hooks_are_called() -> None:
    statuses: list[int] = []

    async def hook(response: httpx.Response) -> None:
        statuses.append(response.status_code)

    config = ResilienceConfig(base_url="https://example.com/", response_hooks=(hook,))
    transport = httpx.MockTransport(lambda request: httpx.Response(204))

    async def run() -> None:
        async with ResilientClient(config, transport=transport) as client:
            await client.request("POST", "things")

    asyncio.run(run())

    assert statuses == [204]


def test_client_is_closed_after_context() -> None:
    client = ResilientClient(
        ResilienceConfig(base_url="https://example.com/"),
        transport=httpx.MockTransport(lambda request: httpx.Response(200)),
    )

    async def run() -> None:
        async with client:
            await client.request("GET", "things")

    asyncio.run(run())

    assert client._client.is_closed
