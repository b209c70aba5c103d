"""Public interface for the catalog adapter."""

from __future__ import annotations

from .client import CatalogClient
from .fetcher import CatalogFetcher, build_catalog_fetcher
from .schema import CatalogDocument, CatalogEntryPayload
from .translator import parse_catalog_entry, translate_document

__all__ = [
    "CatalogClient",
    "CatalogDocument",
    "CatalogEntryPayload",
    "CatalogFetcher",
    "build_catalog_fetcher",
    "parse_catalog_entry",
    "translate_document",
]
