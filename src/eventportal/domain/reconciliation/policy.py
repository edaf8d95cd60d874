"""Create-or-reuse and create-or-patch reconciliation.

Both operations are create-then-reconcile-on-conflict: the create request is
sent first and only a conflict failure triggers the lookup fallback. Two
concurrent creates for the same name can both end up reusing the object the
other one created; uniqueness itself is enforced by the remote service.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from eventportal.domain.errors import (
    AmbiguousMatchError,
    ErrorKind,
    ImmutableStateError,
    TransportError,
)
from eventportal.domain.model import IMMUTABLE_STATES, VersionState

from .lookups import created_id, find_object_ids, find_version

if TYPE_CHECKING:
    from eventportal.domain.model import ObjectRequest, VersionRequest
    from eventportal.domain.ports.transport import CatalogTransport

    from .families import ResourceFamily

log = getLogger(__name__)

DUPLICATE_NAME_KINDS = frozenset({ErrorKind.DUPLICATE_NAME, ErrorKind.CONFLICT})
VERSION_CONFLICT_KINDS = frozenset(
    {ErrorKind.VERSION_CONFLICT, ErrorKind.DUPLICATE_NAME, ErrorKind.CONFLICT}
)


async def create_object(
    transport: CatalogTransport,
    family: ResourceFamily,
    request: ObjectRequest,
) -> str:
    """Create an object and return its id, reusing an existing object with the same name.

    A duplicate-name failure resolves to the single existing object with that
    name (within the request's application domain). No match re-raises the
    original failure; several matches raise ``AmbiguousMatchError``.
    """

    log.info(f"Creating {family.label} {request.name}")
    try:
        payload = await transport.send("POST", family.endpoint, body=request.to_payload())
    except TransportError as exc:
        if exc.kind not in DUPLICATE_NAME_KINDS:
            raise
        log.info(f"{family.label.capitalize()} {request.name} already exists: {exc.message}")
        ids = await find_object_ids(
            transport,
            family,
            request.name,
            domain_id=request.domain_id,
        )
        if not ids:
            raise
        if len(ids) > 1:
            raise AmbiguousMatchError(family.label, request.name, ids) from exc
        log.info(f"Reusing existing {family.label} {request.name} ({ids[0]})")
        return ids[0]

    object_id = created_id(payload, label=family.label)
    log.info(f"{family.label.capitalize()} {request.name} created ({object_id})")
    return object_id


async def create_version(
    transport: CatalogTransport,
    family: ResourceFamily,
    request: VersionRequest,
    *,
    overwrite: bool = False,
) -> str:
    """Create a version and return its id.

    With ``overwrite`` a version-string conflict is resolved against the
    existing version: a DRAFT version is patched in place and its id returned,
    a RELEASED, DEPRECATED or RETIRED version raises ``ImmutableStateError``.
    When no existing version is found, or its state is unknown, the original
    failure is re-raised.
    """

    parent_id = request.parent_id
    log.info(f"Creating {family.label} version {request.version} for {parent_id}")
    try:
        payload = await transport.send(
            "POST",
            family.versions_path(parent_id),
            body=request.to_payload(),
        )
    except TransportError as exc:
        if not overwrite or exc.kind not in VERSION_CONFLICT_KINDS:
            raise
        existing = await find_version(transport, family, parent_id, request.version)
        if existing is None:
            raise
        state = VersionState.from_state_id(existing.get("stateId"))
        if state in IMMUTABLE_STATES:
            raise ImmutableStateError(family.label, request.label, request.version, state) from exc
        if not state.is_mutable or not existing.get("id"):
            log.warning(
                f"{family.label.capitalize()} version {request.version} exists in state "
                f"{state.name}; not overwriting"
            )
            raise
        version_id = str(existing["id"])
        await transport.send(
            "PATCH",
            family.version_path(parent_id, version_id),
            body=request.to_payload(),
        )
        log.info(f"Patched {family.label} {request.label} version {request.version} ({version_id})")
        return version_id

    version_id = created_id(payload, label=f"{family.label} version")
    log.info(f"{family.label.capitalize()} version {request.version} created ({version_id})")
    return version_id
