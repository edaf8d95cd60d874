from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import httpx
import pytest

from eventportal.adapters.eventportal import EventPortalTransport, classify_error
from eventportal.adapters.http_resilience import ResilientClient
from eventportal.config import EVENT_PORTAL_BASE_URL, ConfigurationError, ResilienceConfig
from eventportal.domain.errors import ErrorKind, TransportError

if TYPE_CHECKING:
    from collections.abc import Callable

    from eventportal.domain.ports.transport import QueryParams


def _send(
    handler: Callable[[httpx.Request], httpx.Response],
    method: str,
    endpoint: str,
    *,
    body: dict[str, object] | None = None,
    params: QueryParams | None = None,
    token: str = "secret",
) -> dict[str, object]:
    config = ResilienceConfig(base_url=EVENT_PORTAL_BASE_URL)

    async def run() -> dict[str, object]:
        async with ResilientClient(config, transport=httpx.MockTransport(handler)) as client:
            transport = EventPortalTransport(client, token=token)
            return await transport.send(method, endpoint, body=body, params=params)

    return asyncio.run(run())


def test_send_injects_bearer_token_and_base_url() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"data": {"id": "abc"}})

    payload = _send(handler, "post", "schemas", body={"name": "Schema1"})

    assert payload == {"data": {"id": "abc"}}
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.solace.cloud/api/v2/architecture/schemas"
    assert request.headers["Authorization"] == "Bearer secret"
    assert b'"Schema1"' in request.content


def test_send_appends_opaque_query_string() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": []})

    _send(handler, "GET", "events", params="pageSize=5&name=Order%20Created")

    assert seen[0].url.params["pageSize"] == "5"
    assert seen[0].url.params["name"] == "Order Created"
    assert seen[0].url.path == "/api/v2/architecture/events"


def test_send_encodes_mapping_params() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": []})

    _send(handler, "GET", "schemas", params={"name": "My Schema", "pageSize": "100"})

    assert seen[0].url.params["name"] == "My Schema"


def test_send_returns_empty_mapping_for_empty_body() -> None:
    assert _send(lambda request: httpx.Response(204), "PATCH", "schemas/1/versions/2") == {}


def test_error_envelope_message_is_kept_verbatim() -> None:
    message = "The name 'Schema1' must be unique within application domain."

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"message": message, "errorId": "e-1"})

    with pytest.raises(TransportError) as excinfo:
        _send(handler, "POST", "schemas", body={"name": "Schema1"})

    error = excinfo.value
    assert error.message == message
    assert str(error) == message
    assert error.kind is ErrorKind.DUPLICATE_NAME
    assert error.status_code == 400
    assert error.payload == {"message": message, "errorId": "e-1"}


def test_non_json_error_falls_back_to_text() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad gateway")

    with pytest.raises(TransportError) as excinfo:
        _send(handler, "GET", "schemas")

    assert excinfo.value.kind is ErrorKind.SERVER_ERROR
    assert excinfo.value.message == "Bad gateway"


def test_network_failure_is_raised_as_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError) as excinfo:
        _send(handler, "GET", "schemas")

    assert excinfo.value.kind is ErrorKind.NETWORK
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


@pytest.mark.parametrize(
    ("method", "endpoint", "token"),
    [("", "schemas", "secret"), ("GET", "", "secret"), ("GET", "schemas", "")],
)
def test_missing_call_arguments_are_configuration_errors(
    method: str, endpoint: str, token: str
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(ConfigurationError):
        _send(handler, method, endpoint, token=token)


@pytest.mark.parametrize(
    ("status", "message", "expected"),
    [
        (400, "The name 'X' must be unique within application domain.", ErrorKind.DUPLICATE_NAME),
        (400, "Application domain with name 'Acme' already exists", ErrorKind.DUPLICATE_NAME),
        (400, "Version '1.0.0' is already in use", ErrorKind.VERSION_CONFLICT),
        (400, "eventVersion has been passed in an invalid format", ErrorKind.VERSION_CONFLICT),
        (409, "Something new the service started saying", ErrorKind.CONFLICT),
        (404, "Not found", ErrorKind.NOT_FOUND),
        (401, "Unauthorized", ErrorKind.UNAUTHORIZED),
        (403, None, ErrorKind.UNAUTHORIZED),
        (400, "Bad payload", ErrorKind.INVALID_REQUEST),
        (503, "Service unavailable", ErrorKind.SERVER_ERROR),
        (418, None, ErrorKind.UNKNOWN),
        (None, None, ErrorKind.UNKNOWN),
    ],
)
def test_classify_error(status: int | None, message: str | None, expected: ErrorKind) -> None:
    assert classify_error(status, message) is expected
