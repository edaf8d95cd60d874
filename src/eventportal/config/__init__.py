"""Application configuration helpers."""

from __future__ import annotations

from .env import get_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .eventportal import (
    EVENT_PORTAL_BASE_URL,
    EventPortalConfig,
    default_resilience_config,
    get_default_domain_name,
    get_eventportal_config,
)
from .http_resilience import RateLimit, ResilienceConfig
from .logging import configure_logging

__all__ = [
    "EVENT_PORTAL_BASE_URL",
    "ConfigurationError",
    "EventPortalConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "configure_logging",
    "default_resilience_config",
    "get_default_domain_name",
    "get_env_var",
    "get_eventportal_config",
    "require_env_var",
    "require_env_vars",
]
