"""Domain port definitions for adapters."""

from __future__ import annotations

from .transport import CatalogTransport, QueryParams

__all__ = ["CatalogTransport", "QueryParams"]
