from __future__ import annotations

import pytest

from eventportal.app import EventPortal
from eventportal.config import EVENT_PORTAL_BASE_URL, EventPortalConfig, ResilienceConfig
from tests.support.fake_portal import TOKEN, FakeEventPortal, make_client_factory


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SOLACE_CLOUD_TOKEN", raising=False)
    monkeypatch.delenv("SOLACE_APPLICATION_DOMAIN", raising=False)


@pytest.fixture
def portal_config() -> EventPortalConfig:
    return EventPortalConfig(
        token=TOKEN,
        resilience=ResilienceConfig(base_url=EVENT_PORTAL_BASE_URL),
    )


@pytest.fixture
def fake_portal() -> FakeEventPortal:
    return FakeEventPortal()


@pytest.fixture
def portal(fake_portal: FakeEventPortal, portal_config: EventPortalConfig) -> EventPortal:
    return EventPortal(config=portal_config, client_factory=make_client_factory(fake_portal))
