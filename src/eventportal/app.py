"""Client facade exposing the per-family Event Portal operations."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from logging import getLogger
from typing import TYPE_CHECKING

from eventportal.adapters.eventportal import (
    ApplicationDomainPayload,
    ApplicationPayload,
    ApplicationVersionPayload,
    EventPayload,
    EventPortalTransport,
    EventVersionPayload,
    ItemResponse,
    ListResponse,
    SchemaPayload,
    SchemaVersionPayload,
)
from eventportal.adapters.eventportal.schema import EventPortalBaseModel
from eventportal.adapters.http_resilience import ResilientClient
from eventportal.config import EventPortalConfig, ResilienceConfig, get_eventportal_config
from eventportal.domain.reconciliation import (
    APPLICATION_DOMAINS,
    APPLICATIONS,
    EVENTS,
    SCHEMAS,
    create_object,
    create_version,
    fetch,
    find_object_ids,
    get_application_domain_id,
    get_object_name,
    get_version_id,
    get_version_state,
)

if TYPE_CHECKING:
    from eventportal.domain.model import (
        ApplicationDomainRequest,
        ApplicationRequest,
        ApplicationVersionRequest,
        EventRequest,
        EventVersionRequest,
        SchemaRequest,
        SchemaVersionRequest,
        VersionState,
    )
    from eventportal.domain.ports.transport import CatalogTransport, QueryParams

log = getLogger(__name__)

ClientFactory = Callable[[ResilienceConfig], ResilientClient]


class EventPortal:
    """Synchronous client for the Event Portal architecture API.

    Every public method is one unit of work: it opens an HTTP client, issues
    one to three sequential calls and closes the client before returning.
    The bearer token is resolved once at construction, explicitly or from
    ``SOLACE_CLOUD_TOKEN``; ``MissingConfigurationError`` is raised when
    neither is available.

    The methods drive their own event loop through ``asyncio.run`` and refuse
    to run inside an already running loop; async callers should offload them
    with ``asyncio.to_thread``.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        config: EventPortalConfig | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config or get_eventportal_config(token)
        self._client_factory: ClientFactory = client_factory or ResilientClient

    @property
    def config(self) -> EventPortalConfig:
        return self._config

    def _run[T](self, operation: Callable[[CatalogTransport], Awaitable[T]]) -> T:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            raise RuntimeError(
                "EventPortal cannot be called from a running event loop; use asyncio.to_thread"
            )
        return asyncio.run(self._with_transport(operation))

    async def _with_transport[T](
        self,
        operation: Callable[[CatalogTransport], Awaitable[T]],
    ) -> T:
        async with self._client_factory(self._config.resilience) as client:
            return await operation(EventPortalTransport(client, token=self._config.token))

    def _get_item[T: EventPortalBaseModel](
        self,
        model: type[T],
        endpoint: str,
        params: QueryParams | None = None,
    ) -> ItemResponse[T]:
        payload = self._run(lambda transport: fetch(transport, endpoint, params))
        return ItemResponse[model].model_validate(payload)

    def _get_list[T: EventPortalBaseModel](
        self,
        model: type[T],
        endpoint: str,
        params: QueryParams | None = None,
    ) -> ListResponse[T]:
        payload = self._run(lambda transport: fetch(transport, endpoint, params))
        return ListResponse[model].model_validate(payload)

    # Application domains

    def create_application_domain(self, domain: ApplicationDomainRequest) -> str:
        """Create an application domain, reusing an existing domain with the same name."""

        return self._run(lambda transport: create_object(transport, APPLICATION_DOMAINS, domain))

    def get_application_domain_id(self, domain_name: str) -> str | None:
        return self._run(lambda transport: get_application_domain_id(transport, domain_name))

    def get_application_domain_name(self, domain_id: str | None) -> str | None:
        if not domain_id:
            return None
        return self._run(
            lambda transport: get_object_name(transport, APPLICATION_DOMAINS, domain_id)
        )

    def get_application_domains(
        self, params: QueryParams | None = None
    ) -> ListResponse[ApplicationDomainPayload]:
        log.info("Fetching application domains")
        return self._get_list(ApplicationDomainPayload, APPLICATION_DOMAINS.endpoint, params)

    def get_application_domain_by_id(
        self, domain_id: str, params: QueryParams | None = None
    ) -> ItemResponse[ApplicationDomainPayload]:
        log.info(f"Fetching application domain {domain_id}")
        return self._get_item(
            ApplicationDomainPayload, APPLICATION_DOMAINS.object_path(domain_id), params
        )

    # Schemas

    def create_schema_object(self, schema: SchemaRequest) -> str:
        """Create a schema object, reusing an existing schema with the same name."""

        return self._run(lambda transport: create_object(transport, SCHEMAS, schema))

    def create_schema_version(
        self, schema_version: SchemaVersionRequest, *, overwrite: bool = False
    ) -> str:
        """Create a schema version; ``overwrite`` patches an existing DRAFT version."""

        return self._run(
            lambda transport: create_version(
                transport, SCHEMAS, schema_version, overwrite=overwrite
            )
        )

    def get_schema_state(self, schema_id: str, version: str) -> VersionState | None:
        return self._run(
            lambda transport: get_version_state(transport, SCHEMAS, schema_id, version)
        )

    def get_schema_version_id(self, schema_id: str, version: str) -> str | None:
        return self._run(lambda transport: get_version_id(transport, SCHEMAS, schema_id, version))

    def get_schema_name(self, schema_id: str) -> str | None:
        return self._run(lambda transport: get_object_name(transport, SCHEMAS, schema_id))

    def get_schema_ids(self, schema_name: str, *, domain_id: str | None = None) -> list[str]:
        return self._run(
            lambda transport: find_object_ids(transport, SCHEMAS, schema_name, domain_id=domain_id)
        )

    def get_schemas(self, params: QueryParams | None = None) -> ListResponse[SchemaPayload]:
        log.info("Fetching schemas")
        return self._get_list(SchemaPayload, SCHEMAS.endpoint, params)

    def get_schema_by_id(self, schema_id: str) -> ItemResponse[SchemaPayload]:
        log.info(f"Fetching schema {schema_id}")
        return self._get_item(SchemaPayload, SCHEMAS.object_path(schema_id))

    def get_schema_versions(
        self, schema_id: str, params: QueryParams | None = None
    ) -> ListResponse[SchemaVersionPayload]:
        log.info(f"Fetching schema versions of {schema_id}")
        return self._get_list(SchemaVersionPayload, SCHEMAS.versions_path(schema_id), params)

    def get_schema_version_by_id(self, version_id: str) -> ItemResponse[SchemaVersionPayload]:
        log.info(f"Fetching schema version {version_id}")
        return self._get_item(SchemaVersionPayload, SCHEMAS.version_by_id_path(version_id))

    # Events

    def create_event_object(self, event: EventRequest) -> str:
        """Create an event object, reusing an existing event with the same name."""

        return self._run(lambda transport: create_object(transport, EVENTS, event))

    def create_event_version(
        self, event_version: EventVersionRequest, *, overwrite: bool = False
    ) -> str:
        """Create an event version; ``overwrite`` patches an existing DRAFT version."""

        return self._run(
            lambda transport: create_version(transport, EVENTS, event_version, overwrite=overwrite)
        )

    def get_event_state(self, event_id: str, version: str) -> VersionState | None:
        return self._run(lambda transport: get_version_state(transport, EVENTS, event_id, version))

    def get_event_version_id(self, event_id: str, version: str) -> str | None:
        return self._run(lambda transport: get_version_id(transport, EVENTS, event_id, version))

    def get_event_name(self, event_id: str) -> str | None:
        return self._run(lambda transport: get_object_name(transport, EVENTS, event_id))

    def get_event_ids(self, event_name: str, *, domain_id: str | None = None) -> list[str]:
        return self._run(
            lambda transport: find_object_ids(transport, EVENTS, event_name, domain_id=domain_id)
        )

    def get_events(self, params: QueryParams | None = None) -> ListResponse[EventPayload]:
        log.info("Fetching events")
        return self._get_list(EventPayload, EVENTS.endpoint, params)

    def get_event_by_id(self, event_id: str) -> ItemResponse[EventPayload]:
        log.info(f"Fetching event {event_id}")
        return self._get_item(EventPayload, EVENTS.object_path(event_id))

    def get_event_versions(
        self, event_id: str, params: QueryParams | None = None
    ) -> ListResponse[EventVersionPayload]:
        log.info(f"Fetching event versions of {event_id}")
        return self._get_list(EventVersionPayload, EVENTS.versions_path(event_id), params)

    def get_event_version_by_id(
        self, version_id: str, params: QueryParams | None = None
    ) -> ItemResponse[EventVersionPayload]:
        log.info(f"Fetching event version {version_id}")
        return self._get_item(EventVersionPayload, EVENTS.version_by_id_path(version_id), params)

    # Applications

    def create_application_object(self, application: ApplicationRequest) -> str:
        """Create an application object, reusing an existing application with the same name."""

        return self._run(lambda transport: create_object(transport, APPLICATIONS, application))

    def create_application_version(
        self, application_version: ApplicationVersionRequest, *, overwrite: bool = False
    ) -> str:
        """Create an application version; ``overwrite`` patches an existing DRAFT version."""

        return self._run(
            lambda transport: create_version(
                transport, APPLICATIONS, application_version, overwrite=overwrite
            )
        )

    def get_application_state(self, application_id: str, version: str) -> VersionState | None:
        return self._run(
            lambda transport: get_version_state(transport, APPLICATIONS, application_id, version)
        )

    def get_application_version_id(self, application_id: str, version: str) -> str | None:
        return self._run(
            lambda transport: get_version_id(transport, APPLICATIONS, application_id, version)
        )

    def get_application_name(self, application_id: str) -> str | None:
        return self._run(
            lambda transport: get_object_name(transport, APPLICATIONS, application_id)
        )

    def get_application_ids(
        self, application_name: str, *, domain_id: str | None = None
    ) -> list[str]:
        return self._run(
            lambda transport: find_object_ids(
                transport, APPLICATIONS, application_name, domain_id=domain_id
            )
        )

    def get_applications(
        self, params: QueryParams | None = None
    ) -> ListResponse[ApplicationPayload]:
        log.info("Fetching applications")
        return self._get_list(ApplicationPayload, APPLICATIONS.endpoint, params)

    def get_application_by_id(self, application_id: str) -> ItemResponse[ApplicationPayload]:
        log.info(f"Fetching application {application_id}")
        return self._get_item(ApplicationPayload, APPLICATIONS.object_path(application_id))

    def get_application_versions(
        self, application_id: str, params: QueryParams | None = None
    ) -> ListResponse[ApplicationVersionPayload]:
        log.info(f"Fetching application versions of {application_id}")
        return self._get_list(
            ApplicationVersionPayload, APPLICATIONS.versions_path(application_id), params
        )

    def get_application_version_by_id(
        self, version_id: str
    ) -> ItemResponse[ApplicationVersionPayload]:
        log.info(f"Fetching application version {version_id}")
        return self._get_item(
            ApplicationVersionPayload, APPLICATIONS.version_by_id_path(version_id)
        )
