"""Event Portal configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import get_env_var, require_env_var
from .http_resilience import RateLimit, ResilienceConfig

EVENT_PORTAL_BASE_URL = "https://api.solace.cloud/api/v2/architecture/"
EVENT_PORTAL_TIMEOUT_SECONDS = 30.0
TOKEN_ENV_VAR = "SOLACE_CLOUD_TOKEN"
DOMAIN_ENV_VAR = "SOLACE_APPLICATION_DOMAIN"


@dataclass(frozen=True, slots=True)
class EventPortalConfig:
    """Holds the bearer token and HTTP settings for one client instance."""

    token: str
    resilience: ResilienceConfig

    def __repr__(self) -> str:
        return f"EventPortalConfig(token='***', resilience={self.resilience!r})"


def default_resilience_config() -> ResilienceConfig:
    return ResilienceConfig(
        base_url=EVENT_PORTAL_BASE_URL,
        timeout_seconds=EVENT_PORTAL_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        default_headers={"Accept": "application/json"},
    )


def get_eventportal_config(
    token: str | None = None,
    *,
    resilience: ResilienceConfig | None = None,
) -> EventPortalConfig:
    """Resolve the bearer token explicitly or from ``SOLACE_CLOUD_TOKEN``."""

    resolved = token.strip() if token and token.strip() else require_env_var(TOKEN_ENV_VAR)
    return EventPortalConfig(
        token=resolved,
        resilience=resilience or default_resilience_config(),
    )


def get_default_domain_name() -> str | None:
    return get_env_var(DOMAIN_ENV_VAR)
