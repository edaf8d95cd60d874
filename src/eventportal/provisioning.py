"""Build a sample catalog: domain, schema, event and application with one version each."""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from logging import getLogger
from typing import TYPE_CHECKING

from eventportal.config import ConfigurationError
from eventportal.domain.model import (
    AddressLevelType,
    ApplicationDomainRequest,
    ApplicationRequest,
    ApplicationVersionRequest,
    DeliveryDescriptor,
    EventRequest,
    EventVersionRequest,
    SchemaRequest,
    SchemaVersionRequest,
    topic_address,
)

if TYPE_CHECKING:
    from eventportal.app import EventPortal

log = getLogger(__name__)

DEFAULT_TOPIC_LEVELS: tuple[tuple[str, AddressLevelType], ...] = (
    ("level1", AddressLevelType.LITERAL),
    ("level2", AddressLevelType.VARIABLE),
    ("level3", AddressLevelType.LITERAL),
    ("level4", AddressLevelType.VARIABLE),
)


def load_sample_schema() -> str:
    return resources.files("eventportal.data").joinpath("sample_schema.json").read_text()


@dataclass(frozen=True, slots=True)
class CatalogBlueprint:
    """Names and payloads of the catalog built by ``provision_catalog``."""

    domain_name: str
    schema_content: str = field(default_factory=load_sample_schema)
    domain_description: str = "This is an application domain created via script"
    schema_name: str = "Schema1"
    event_name: str = "Scripted Event"
    application_name: str = "My Scripted Application"
    version: str = "0.0.1"
    topic_levels: tuple[tuple[str, AddressLevelType], ...] = DEFAULT_TOPIC_LEVELS

    def __post_init__(self) -> None:
        if not self.domain_name or not self.domain_name.strip():
            raise ConfigurationError("Define an application domain name")


@dataclass(frozen=True, slots=True)
class ProvisioningResult:
    domain_id: str
    schema_id: str
    schema_version_id: str
    event_id: str
    event_version_id: str
    application_id: str
    application_version_id: str


def provision_catalog(
    portal: EventPortal,
    blueprint: CatalogBlueprint,
    *,
    overwrite: bool = False,
) -> ProvisioningResult:
    """Create (or reuse) every catalog entry of ``blueprint`` in order.

    The first failure aborts the sequence and propagates to the caller.
    """

    log.info(f"Provisioning catalog in application domain {blueprint.domain_name}")

    domain_id = portal.create_application_domain(
        ApplicationDomainRequest(
            name=blueprint.domain_name,
            description=blueprint.domain_description,
            unique_topic_address_enforcement_enabled=True,
            topic_domain_enforcement_enabled=False,
        )
    )

    schema_id = portal.create_schema_object(
        SchemaRequest(
            application_domain_id=domain_id,
            name=blueprint.schema_name,
            shared=False,
            content_type="json",
            schema_type="jsonSchema",
        )
    )
    schema_version_id = portal.create_schema_version(
        SchemaVersionRequest(
            schema_id=schema_id,
            description="This is the schema version description",
            version=blueprint.version,
            display_name="This is the Display name of the schema",
            content=blueprint.schema_content,
        ),
        overwrite=overwrite,
    )

    event_id = portal.create_event_object(
        EventRequest(application_domain_id=domain_id, name=blueprint.event_name, shared=False)
    )
    event_version_id = portal.create_event_version(
        EventVersionRequest(
            event_id=event_id,
            display_name="Scripted Version",
            version=blueprint.version,
            schema_version_id=schema_version_id,
            delivery_descriptor=DeliveryDescriptor(
                broker_type="solace",
                address=topic_address(*blueprint.topic_levels),
            ),
        ),
        overwrite=overwrite,
    )

    application_id = portal.create_application_object(
        ApplicationRequest(
            application_domain_id=domain_id,
            name=blueprint.application_name,
            application_type="standard",
        )
    )
    application_version_id = portal.create_application_version(
        ApplicationVersionRequest(
            application_id=application_id,
            display_name="Display Name",
            description="This is the scripted description",
            version=blueprint.version,
            declared_produced_event_version_ids=[event_version_id],
        ),
        overwrite=overwrite,
    )

    log.info("Catalog provisioning done")
    return ProvisioningResult(
        domain_id=domain_id,
        schema_id=schema_id,
        schema_version_id=schema_version_id,
        event_id=event_id,
        event_version_id=event_version_id,
        application_id=application_id,
        application_version_id=application_version_id,
    )
