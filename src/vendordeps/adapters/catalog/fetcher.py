"""Catalog acquisition entry points.

The fetcher is the boundary where acquisition errors stop: it logs them and
returns an empty result, so a run always proceeds.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from vendordeps.domain.errors import CatalogFetchError
from vendordeps.domain.ports.fetching import CatalogFetchResult, CatalogSource

from .client import CatalogClient

if TYPE_CHECKING:
    from vendordeps.config.catalog import CatalogConfig

log = getLogger(__name__)


@dataclass(slots=True)
class CatalogFetcher:
    client: CatalogClient = field(default_factory=CatalogClient)

    def __call__(self, url: str) -> CatalogFetchResult:
        return asyncio.run(self.fetch_async(url))

    async def fetch_async(self, url: str) -> CatalogFetchResult:
        try:
            entries = await self.client.fetch_entries_async(url)
        except CatalogFetchError as exc:
            log.warning("Catalog unavailable (%s): %s", type(exc).__name__, exc)
            return CatalogFetchResult(error=exc)
        log.info("Fetched %s catalog entries from %s", len(entries), url)
        return CatalogFetchResult(entries=entries)


def build_catalog_fetcher(config: CatalogConfig) -> CatalogFetcher:
    return CatalogFetcher(client=CatalogClient(resilience=config.resilience))


if TYPE_CHECKING:
    _fetcher_check: CatalogSource = CatalogFetcher()
