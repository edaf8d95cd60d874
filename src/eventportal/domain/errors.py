"""Runtime error taxonomy shared by the transport and the reconciler."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from eventportal.domain.model.enums import VersionState


class ErrorKind(StrEnum):
    """Machine-readable classification of a failed remote call."""

    DUPLICATE_NAME = "duplicate_name"
    VERSION_CONFLICT = "version_conflict"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    INVALID_REQUEST = "invalid_request"
    SERVER_ERROR = "server_error"
    NETWORK = "network"
    UNKNOWN = "unknown"


class EventPortalError(RuntimeError):
    """Base class for runtime failures raised by the client."""


class TransportError(EventPortalError):
    """Raised when a remote call fails; ``message`` keeps the upstream wording."""

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind = ErrorKind.UNKNOWN,
        status_code: int | None = None,
        payload: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.payload = payload


class ConflictError(EventPortalError):
    """Raised when a create conflict cannot be reconciled."""


class AmbiguousMatchError(ConflictError):
    """Raised when a duplicate-name lookup returns more than one object."""

    def __init__(self, label: str, name: str, ids: Sequence[str]) -> None:
        super().__init__(
            f"{label.capitalize()} name {name!r} matches {len(ids)} existing objects: "
            f"{', '.join(ids)}"
        )
        self.name = name
        self.ids = tuple(ids)


class ImmutableStateError(ConflictError):
    """Raised when overwriting a version that is no longer in DRAFT."""

    def __init__(
        self,
        label: str,
        display_name: str,
        version: str,
        state: VersionState,
    ) -> None:
        super().__init__(
            f"{label.capitalize()} {display_name} version {version} is {state.name} "
            "and cannot be overwritten"
        )
        self.display_name = display_name
        self.version = version
        self.state = state


__all__ = [
    "AmbiguousMatchError",
    "ConflictError",
    "ErrorKind",
    "EventPortalError",
    "ImmutableStateError",
    "TransportError",
]
