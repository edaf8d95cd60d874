"""Public domain model surface."""

from __future__ import annotations

from eventportal.domain.model.enums import IMMUTABLE_STATES, AddressLevelType, VersionState
from eventportal.domain.model.requests import (
    Address,
    AddressLevel,
    ApplicationDomainRequest,
    ApplicationRequest,
    ApplicationVersionRequest,
    CatalogObjectRequest,
    DeliveryDescriptor,
    EventRequest,
    EventVersionRequest,
    ObjectRequest,
    SchemaRequest,
    SchemaVersionRequest,
    VersionRequest,
    topic_address,
)

__all__ = [
    "IMMUTABLE_STATES",
    "Address",
    "AddressLevel",
    "AddressLevelType",
    "ApplicationDomainRequest",
    "ApplicationRequest",
    "ApplicationVersionRequest",
    "CatalogObjectRequest",
    "DeliveryDescriptor",
    "EventRequest",
    "EventVersionRequest",
    "ObjectRequest",
    "SchemaRequest",
    "SchemaVersionRequest",
    "VersionRequest",
    "VersionState",
    "topic_address",
]
