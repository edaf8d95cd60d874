"""Shared async HTTP client with an optional client-side rate limit."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict, Unpack

import httpx
from aiolimiter import AsyncLimiter

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._types import QueryParamTypes, URLTypes

    from eventportal.config.http_resilience import ResilienceConfig


class RequestOptions(TypedDict, total=False):
    json: object
    params: QueryParamTypes | None
    headers: dict[str, str]


def _client_options(config: ResilienceConfig) -> dict[str, object]:
    options: dict[str, object] = {"timeout": config.timeout_seconds}
    if config.base_url is not None:
        options["base_url"] = config.base_url
    if config.default_headers:
        options["headers"] = dict(config.default_headers)
    if config.response_hooks:
        options["event_hooks"] = {"response": list(config.response_hooks)}
    return options


class ResilientClient:
    """``httpx.AsyncClient`` configured from a ``ResilienceConfig``.

    One instance backs one unit of work; close it (or use it as an async
    context manager) once the work is done. When ``config.ratelimit`` is set
    every request waits for a slot of the shared ``AsyncLimiter``.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._limiter = (
            AsyncLimiter(config.ratelimit.max_calls, config.ratelimit.per_seconds)
            if config.ratelimit
            else None
        )
        self._client = httpx.AsyncClient(transport=transport, **_client_options(config))

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        if self._limiter is None:
            return await self._client.request(method, url, **kwargs)
        async with self._limiter:
            return await self._client.request(method, url, **kwargs)
