"""Pydantic models describing the Event Portal API payloads."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from eventportal.domain.model import VersionState


def _state_id_to_str(value: object) -> object:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class EventPortalBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True, alias_generator=to_camel)


class ErrorEnvelope(EventPortalBaseModel):
    message: str | None = None
    error_key: str | None = None
    error_id: str | None = None
    status_code: int | None = None
    validation_details: dict[str, object] | None = None


class ApplicationDomainPayload(EventPortalBaseModel):
    id: str
    name: str
    description: str | None = None
    unique_topic_address_enforcement_enabled: bool | None = None
    topic_domain_enforcement_enabled: bool | None = None
    type: str | None = None


class SchemaPayload(EventPortalBaseModel):
    id: str
    name: str
    application_domain_id: str | None = None
    shared: bool | None = None
    content_type: str | None = None
    schema_type: str | None = None
    number_of_versions: int | None = None


class EventPayload(EventPortalBaseModel):
    id: str
    name: str
    application_domain_id: str | None = None
    shared: bool | None = None
    number_of_versions: int | None = None


class ApplicationPayload(EventPortalBaseModel):
    id: str
    name: str
    application_domain_id: str | None = None
    application_type: str | None = None
    number_of_versions: int | None = None


class VersionPayload(EventPortalBaseModel):
    id: str
    version: str
    display_name: str | None = None
    description: str | None = None
    state_id: str | None = None

    _normalize_state_id = field_validator("state_id", mode="before")(_state_id_to_str)

    @property
    def state(self) -> VersionState:
        return VersionState.from_state_id(self.state_id)


class SchemaVersionPayload(VersionPayload):
    schema_id: str | None = None
    content: str | None = None


class EventVersionPayload(VersionPayload):
    event_id: str | None = None
    schema_version_id: str | None = None
    delivery_descriptor: dict[str, object] | None = None


class ApplicationVersionPayload(VersionPayload):
    application_id: str | None = None
    declared_produced_event_version_ids: list[str] = Field(default_factory=list)
    declared_consumed_event_version_ids: list[str] = Field(default_factory=list)


T = TypeVar("T", bound=EventPortalBaseModel)


class ItemResponse(BaseModel, Generic[T]):
    model_config = ConfigDict(extra="allow")

    data: T
    meta: dict[str, object] | None = None


class ListResponse(BaseModel, Generic[T]):
    """One page of results; pagination metadata stays in ``meta``."""

    model_config = ConfigDict(extra="allow")

    data: list[T] = Field(default_factory=list)
    meta: dict[str, object] | None = None
