"""Port for sending one authenticated call to the catalog API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

QueryParams = str | dict[str, str]


@runtime_checkable
class CatalogTransport(Protocol):
    """Send one request and return the decoded JSON body.

    Failures are raised as ``TransportError`` carrying an ``ErrorKind``.
    ``params`` given as a string is an opaque pre-encoded query string that is
    appended unchanged.
    """

    async def send(
        self,
        method: str,
        endpoint: str,
        *,
        body: Mapping[str, object] | None = None,
        params: QueryParams | None = None,
    ) -> dict[str, object]:
        ...


__all__ = ["CatalogTransport", "QueryParams"]
