"""HTTP transport for the Event Portal architecture API."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from eventportal.config.errors import ConfigurationError
from eventportal.domain.errors import ErrorKind, TransportError

from .schema import ErrorEnvelope

if TYPE_CHECKING:
    from collections.abc import Mapping

    from eventportal.adapters.http_resilience import ResilientClient
    from eventportal.domain.ports.transport import CatalogTransport, QueryParams

log = getLogger(__name__)

# Upstream wordings that identify a conflict; matched case-insensitively.
ERROR_SIGNATURES: tuple[tuple[str, ErrorKind], ...] = (
    ("must be unique within application domain", ErrorKind.DUPLICATE_NAME),
    ("already exists", ErrorKind.DUPLICATE_NAME),
    ("already in use", ErrorKind.VERSION_CONFLICT),
    ("has been passed in an invalid format", ErrorKind.VERSION_CONFLICT),
)

_STATUS_KINDS: dict[int, ErrorKind] = {
    400: ErrorKind.INVALID_REQUEST,
    401: ErrorKind.UNAUTHORIZED,
    403: ErrorKind.UNAUTHORIZED,
    404: ErrorKind.NOT_FOUND,
    409: ErrorKind.CONFLICT,
    422: ErrorKind.INVALID_REQUEST,
}


def classify_error(status_code: int | None, message: str | None) -> ErrorKind:
    """Return the ``ErrorKind`` for an upstream failure.

    Known message signatures win; otherwise the HTTP status decides, so a
    ``409`` still reads as a conflict when the upstream wording changes.
    """

    if message:
        lowered = message.lower()
        for signature, kind in ERROR_SIGNATURES:
            if signature in lowered:
                return kind
    if status_code is None:
        return ErrorKind.UNKNOWN
    if status_code in _STATUS_KINDS:
        return _STATUS_KINDS[status_code]
    if status_code >= 500:
        return ErrorKind.SERVER_ERROR
    return ErrorKind.UNKNOWN


def error_from_response(response: httpx.Response) -> TransportError:
    payload: dict[str, object] | None = None
    message: str | None = None
    try:
        decoded = response.json()
    except ValueError:
        decoded = None
    if isinstance(decoded, dict):
        payload = decoded
        try:
            message = ErrorEnvelope.model_validate(decoded).message
        except ValidationError:
            message = None
    if not message:
        message = response.text.strip() or response.reason_phrase or "Request failed"

    kind = classify_error(response.status_code, message)
    return TransportError(message, kind=kind, status_code=response.status_code, payload=payload)


class EventPortalTransport:
    """Send authenticated JSON requests relative to the configured base URL."""

    def __init__(self, client: ResilientClient, *, token: str) -> None:
        self._client = client
        self._token = token

    async def send(
        self,
        method: str,
        endpoint: str,
        *,
        body: Mapping[str, object] | None = None,
        params: QueryParams | None = None,
    ) -> dict[str, object]:
        if not self._token or not method or not endpoint:
            raise ConfigurationError("You must pass an Event Portal token, method, and endpoint")

        url = endpoint.lstrip("/")
        query: dict[str, str] | None = None
        if isinstance(params, str):
            if params:
                url = f"{url}?{params.lstrip('?')}"
        elif params:
            query = params

        try:
            response = await self._client.request(
                method.upper(),
                url,
                json=dict(body) if body is not None else None,
                params=query,
                headers={"Authorization": f"Bearer {self._token}"},
            )
        except httpx.HTTPError as exc:
            log.error(f"Event Portal request {method.upper()} {url} failed: {exc}")
            raise TransportError(
                str(exc) or exc.__class__.__name__,
                kind=ErrorKind.NETWORK,
            ) from exc

        if response.is_error:
            error = error_from_response(response)
            log.error(
                f"Event Portal error {response.status_code} ({error.kind}) for "
                f"{method.upper()} {url}: {error.message}"
            )
            raise error

        if not response.content:
            return {}
        try:
            payload = response.json()
        except ValueError as exc:
            raise TransportError(
                "Event Portal returned a non-JSON response",
                status_code=response.status_code,
            ) from exc
        if not isinstance(payload, dict):
            raise TransportError(
                "Unexpected Event Portal response payload",
                status_code=response.status_code,
            )
        return payload


if TYPE_CHECKING:
    _transport_check: type[CatalogTransport] = EventPortalTransport
