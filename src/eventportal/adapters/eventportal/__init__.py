"""Public interface for the Event Portal adapter."""

from __future__ import annotations

from .client import ERROR_SIGNATURES, EventPortalTransport, classify_error, error_from_response
from .schema import (
    ApplicationDomainPayload,
    ApplicationPayload,
    ApplicationVersionPayload,
    ErrorEnvelope,
    EventPayload,
    EventVersionPayload,
    ItemResponse,
    ListResponse,
    SchemaPayload,
    SchemaVersionPayload,
    VersionPayload,
)

__all__ = [
    "ERROR_SIGNATURES",
    "ApplicationDomainPayload",
    "ApplicationPayload",
    "ApplicationVersionPayload",
    "ErrorEnvelope",
    "EventPayload",
    "EventPortalTransport",
    "EventVersionPayload",
    "ItemResponse",
    "ListResponse",
    "SchemaPayload",
    "SchemaVersionPayload",
    "VersionPayload",
    "classify_error",
    "error_from_response",
]
