"""Read-only lookups used by the reconciler and exposed on the client.

Lookups return ``None`` or an empty list when nothing matches; failures of the
underlying call propagate unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING

from eventportal.domain.errors import ErrorKind, TransportError
from eventportal.domain.model import VersionState

from .families import APPLICATION_DOMAINS

if TYPE_CHECKING:
    from eventportal.domain.ports.transport import CatalogTransport, QueryParams

    from .families import ResourceFamily

log = getLogger(__name__)

LOOKUP_PAGE_SIZE = "100"


def data_items(payload: Mapping[str, object]) -> list[Mapping[str, object]]:
    data = payload.get("data")
    if not isinstance(data, list):
        return []
    return [item for item in data if isinstance(item, Mapping)]


def created_id(payload: Mapping[str, object], *, label: str) -> str:
    """Return ``data.id`` from a create/update response."""

    data = payload.get("data")
    if isinstance(data, Mapping):
        value = data.get("id")
        if value:
            return str(value)
    raise TransportError(
        f"{label.capitalize()} response did not include an id",
        kind=ErrorKind.UNKNOWN,
        payload=payload,
    )


async def fetch(
    transport: CatalogTransport,
    endpoint: str,
    params: QueryParams | None = None,
) -> dict[str, object]:
    """Return the decoded response of ``endpoint``; ``params`` are passed through untouched."""

    return await transport.send("GET", endpoint, params=params or None)


async def find_object_ids(
    transport: CatalogTransport,
    family: ResourceFamily,
    name: str,
    *,
    domain_id: str | None = None,
) -> list[str]:
    """Return the ids of objects named exactly ``name``, optionally within one domain."""

    log.info(f"Fetching {family.label} id(s) for name: {name}")
    params = {"name": name, "pageSize": LOOKUP_PAGE_SIZE}
    if domain_id and family.domain_scoped:
        params["applicationDomainId"] = domain_id
    payload = await transport.send("GET", family.endpoint, params=params)

    ids: list[str] = []
    for item in data_items(payload):
        if item.get("name", name) != name:
            continue
        if domain_id and family.domain_scoped:
            if item.get("applicationDomainId", domain_id) != domain_id:
                continue
        if item.get("id"):
            ids.append(str(item["id"]))
    return ids


async def get_application_domain_id(transport: CatalogTransport, name: str) -> str | None:
    ids = await find_object_ids(transport, APPLICATION_DOMAINS, name)
    return ids[0] if ids else None


async def get_object_name(
    transport: CatalogTransport,
    family: ResourceFamily,
    object_id: str | None,
) -> str | None:
    if not object_id:
        return None
    log.info(f"Fetching {family.label} name for id: {object_id}")
    payload = await transport.send("GET", family.endpoint, params={"ids": object_id})
    for item in data_items(payload):
        if str(item.get("id")) == object_id and isinstance(item.get("name"), str):
            return str(item["name"])
    return None


async def find_version(
    transport: CatalogTransport,
    family: ResourceFamily,
    parent_id: str,
    version: str,
) -> Mapping[str, object] | None:
    """Return the version record of ``parent_id`` whose version string is ``version``."""

    payload = await transport.send(
        "GET",
        family.versions_path(parent_id),
        params={"version": version, "pageSize": LOOKUP_PAGE_SIZE},
    )
    for item in data_items(payload):
        if item.get("version") == version:
            return item
    return None


async def get_version_state(
    transport: CatalogTransport,
    family: ResourceFamily,
    parent_id: str,
    version: str,
) -> VersionState | None:
    record = await find_version(transport, family, parent_id, version)
    if record is None:
        return None
    return VersionState.from_state_id(record.get("stateId"))


async def get_version_id(
    transport: CatalogTransport,
    family: ResourceFamily,
    parent_id: str,
    version: str,
) -> str | None:
    record = await find_version(transport, family, parent_id, version)
    if record is None or not record.get("id"):
        return None
    return str(record["id"])
