"""Runtime configuration for the API client and data-access caches."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5220"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_CACHE_TTL_SECONDS = 300

# Seconds each resource stays cached before it is fetched again
DEFAULT_RESOURCE_TTLS: Dict[str, int] = {
    "versions": 60,
    "versions:project": 120,
    "version": 300,
    "project": 300,
}


@dataclass(frozen=True)
class AppConfig:
    """Configuration for talking to the project/version API."""

    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    default_ttl: int = DEFAULT_CACHE_TTL_SECONDS
    resource_ttls: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_RESOURCE_TTLS))
    default_page_size: int = 10

    def ttl_for(self, resource: str) -> int:
        """Return the cache TTL for a resource namespace."""
        return self.resource_ttls.get(resource, self.default_ttl)


def _env_number(name: str, cast, default):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        logger.warning(
            "Ignoring invalid value for %s: %r",
            name,
            raw,
            extra={"event": "config.invalid_env", "variable": name},
        )
        return default


def load_app_config(api_url: Optional[str] = None) -> AppConfig:
    """Build an AppConfig from TPS_* environment variables.

    ``api_url`` takes precedence over ``TPS_API_URL`` when given.
    """
    url = api_url or os.environ.get("TPS_API_URL") or DEFAULT_API_URL
    timeout = _env_number("TPS_API_TIMEOUT", float, DEFAULT_TIMEOUT_SECONDS)
    default_ttl = _env_number("TPS_CACHE_TTL", int, DEFAULT_CACHE_TTL_SECONDS)
    return AppConfig(api_url=url.rstrip("/"), timeout=timeout, default_ttl=default_ttl)


__all__ = ["AppConfig", "load_app_config", "DEFAULT_RESOURCE_TTLS"]
