"""Descriptors for the four catalog resource families."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ResourceFamily:
    """Endpoints and naming of one resource family.

    ``endpoint`` is the object collection (``schemas``); versions live under
    ``<endpoint>/{id}/versions`` and are addressable directly through
    ``version_endpoint`` (``schemaVersions``). Families without versions leave
    ``version_endpoint`` unset.
    """

    label: str
    endpoint: str
    version_endpoint: str | None = None
    domain_scoped: bool = True

    @property
    def has_versions(self) -> bool:
        return self.version_endpoint is not None

    def object_path(self, object_id: str) -> str:
        return f"{self.endpoint}/{object_id}"

    def versions_path(self, parent_id: str) -> str:
        self._require_versions()
        return f"{self.endpoint}/{parent_id}/versions"

    def version_path(self, parent_id: str, version_id: str) -> str:
        return f"{self.versions_path(parent_id)}/{version_id}"

    def version_by_id_path(self, version_id: str) -> str:
        self._require_versions()
        return f"{self.version_endpoint}/{version_id}"

    def _require_versions(self) -> None:
        if not self.has_versions:
            raise ValueError(f"{self.label.capitalize()} resources have no versions")


APPLICATION_DOMAINS = ResourceFamily(
    label="application domain",
    endpoint="applicationDomains",
    domain_scoped=False,
)
SCHEMAS = ResourceFamily(label="schema", endpoint="schemas", version_endpoint="schemaVersions")
EVENTS = ResourceFamily(label="event", endpoint="events", version_endpoint="eventVersions")
APPLICATIONS = ResourceFamily(
    label="application",
    endpoint="applications",
    version_endpoint="applicationVersions",
)
