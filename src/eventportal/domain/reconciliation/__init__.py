"""Resource reconciliation for the catalog resource families."""

from __future__ import annotations

from .families import (
    APPLICATION_DOMAINS,
    APPLICATIONS,
    EVENTS,
    SCHEMAS,
    ResourceFamily,
)
from .lookups import (
    created_id,
    data_items,
    fetch,
    find_object_ids,
    find_version,
    get_application_domain_id,
    get_object_name,
    get_version_id,
    get_version_state,
)
from .policy import create_object, create_version

__all__ = [
    "APPLICATIONS",
    "APPLICATION_DOMAINS",
    "EVENTS",
    "SCHEMAS",
    "ResourceFamily",
    "create_object",
    "create_version",
    "created_id",
    "data_items",
    "fetch",
    "find_object_ids",
    "find_version",
    "get_application_domain_id",
    "get_object_name",
    "get_version_id",
    "get_version_state",
]
