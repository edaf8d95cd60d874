"""Typed request structures for the create operations.

Each model is validated before any network call and serialized to the
camelCase JSON body the Event Portal API expects via ``to_payload``.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel

from .enums import AddressLevelType, VersionState

NonBlank = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class RequestModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ApplicationDomainRequest(RequestModel):
    name: NonBlank
    description: str | None = None
    unique_topic_address_enforcement_enabled: bool = False
    topic_domain_enforcement_enabled: bool = False
    type: str = "ApplicationDomain"

    @property
    def domain_id(self) -> str | None:
        return None


class CatalogObjectRequest(RequestModel):
    """Common fields of objects that live inside an application domain."""

    application_domain_id: NonBlank
    name: NonBlank

    @property
    def domain_id(self) -> str | None:
        return self.application_domain_id


class SchemaRequest(CatalogObjectRequest):
    shared: bool = False
    content_type: str = "json"
    schema_type: str = "jsonSchema"


class EventRequest(CatalogObjectRequest):
    shared: bool = False


class ApplicationRequest(CatalogObjectRequest):
    application_type: str = "standard"


class VersionRequest(RequestModel):
    """Common fields of version resources.

    ``state_id`` defaults to DRAFT; any caller-supplied value is sent verbatim.
    """

    version: NonBlank
    display_name: str | None = None
    description: str | None = None
    state_id: str = VersionState.DRAFT.state_id

    @field_validator("state_id", mode="before")
    @classmethod
    def _coerce_state_id(cls, value: object) -> object:
        if isinstance(value, VersionState):
            return value.state_id
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    @abstractmethod
    def parent_id(self) -> str: ...

    @property
    def label(self) -> str:
        return self.display_name or self.version


class SchemaVersionRequest(VersionRequest):
    schema_id: NonBlank
    content: str

    @property
    def parent_id(self) -> str:
        return self.schema_id


class AddressLevel(RequestModel):
    name: NonBlank
    address_level_type: AddressLevelType = AddressLevelType.LITERAL


class Address(RequestModel):
    address_levels: list[AddressLevel] = Field(min_length=1)
    address_type: str | None = None


class DeliveryDescriptor(RequestModel):
    broker_type: str = "solace"
    address: Address


class EventVersionRequest(VersionRequest):
    event_id: NonBlank
    schema_version_id: str | None = None
    delivery_descriptor: DeliveryDescriptor | None = None

    @property
    def parent_id(self) -> str:
        return self.event_id


class ApplicationVersionRequest(VersionRequest):
    application_id: NonBlank
    declared_produced_event_version_ids: list[str] = Field(default_factory=list)
    declared_consumed_event_version_ids: list[str] = Field(default_factory=list)
    type: str = "application"

    @property
    def parent_id(self) -> str:
        return self.application_id


ObjectRequest = ApplicationDomainRequest | SchemaRequest | EventRequest | ApplicationRequest


def topic_address(*levels: tuple[str, AddressLevelType | str]) -> Address:
    """Build a topic address from ``(name, type)`` pairs in order."""

    return Address(
        address_levels=[
            AddressLevel(name=name, address_level_type=AddressLevelType(level_type))
            for name, level_type in levels
        ]
    )
