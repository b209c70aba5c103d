"""Application configuration helpers."""

from __future__ import annotations

from .catalog import (
    DEFAULT_CATALOG_URL_TEMPLATE,
    CatalogConfig,
    catalog_url,
    get_catalog_config,
)
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig
from .logging import configure_logging

__all__ = [
    "DEFAULT_CATALOG_URL_TEMPLATE",
    "CatalogConfig",
    "ConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "catalog_url",
    "configure_logging",
    "get_catalog_config",
]
