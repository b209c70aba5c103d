"""HTTP client for the published vendor catalog."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from vendordeps.adapters.http_resilience import ResilientClient
from vendordeps.config.catalog import CATALOG_TIMEOUT_SECONDS
from vendordeps.config.http_resilience import ResilienceConfig
from vendordeps.domain.errors import (
    BadStatusError,
    FetchFailedError,
    MalformedPayloadError,
    SchemaMismatchError,
)

from .schema import CatalogDocument
from .translator import translate_document

if TYPE_CHECKING:
    from collections.abc import Callable

    from vendordeps.domain.model import CatalogEntry

log = getLogger(__name__)

SUCCESS_STATUS_MIN = 200
SUCCESS_STATUS_MAX = 300


def _default_resilience_config() -> ResilienceConfig:
    return ResilienceConfig(name="catalog", timeout_seconds=CATALOG_TIMEOUT_SECONDS)


class CatalogClient:
    """Low-level client: one GET, then status, JSON and schema checks.

    Every failure surfaces as a ``CatalogFetchError`` subclass.
    """

    def __init__(
        self,
        *,
        resilience: ResilienceConfig | None = None,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._resilience = resilience or _default_resilience_config()
        self._client_factory = client_factory or ResilientClient

    def fetch_entries(self, url: str) -> tuple[CatalogEntry, ...]:
        return asyncio.run(self.fetch_entries_async(url))

    async def fetch_entries_async(self, url: str) -> tuple[CatalogEntry, ...]:
        response = await self._perform_request(url)
        document = self._decode(response, url=url)
        log.debug("Decoded %s catalog entries from %s", len(document), url)
        return translate_document(document)

    async def _perform_request(self, url: str) -> httpx.Response:
        log.debug("Fetching catalog from %s", url)
        try:
            async with self._client_factory(self._resilience) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchFailedError(f"Failed to fetch catalog: {exc}", url=url) from exc

        if not SUCCESS_STATUS_MIN <= response.status_code <= SUCCESS_STATUS_MAX:
            raise BadStatusError(response.status_code, url=url)
        return response

    @staticmethod
    def _decode(response: httpx.Response, *, url: str) -> CatalogDocument:
        # deeply nested arrays exhaust the decoder stack with RecursionError
        try:
            payload = response.json()
        except (ValueError, RecursionError) as exc:
            raise MalformedPayloadError(f"Catalog is not valid JSON: {exc}", url=url) from exc

        try:
            return CatalogDocument.model_validate(payload)
        except ValidationError as exc:
            raise SchemaMismatchError(
                f"Incorrect catalog format ({exc.error_count()} errors)", url=url
            ) from exc
