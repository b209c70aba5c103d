"""Reusable builders and fakes for catalog and reconciliation tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from vendordeps.adapters.http_resilience import ResilientClient
from vendordeps.domain.model import CatalogEntry, InstalledComponent
from vendordeps.domain.ports.fetching import CatalogFetchResult

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from vendordeps.config.http_resilience import ResilienceConfig
    from vendordeps.domain.errors import CatalogFetchError

PHOENIX_ID = "ab676553-b602-441f-a38d-f1296eff6537"
REVLIB_ID = "3f48eb8c-50fe-43a6-9cb7-44c86353c4cb"
PHOTON_ID = "515fe07e-bfc6-11fa-b3de-0242ac130004"


def make_entry(
    identity: str,
    version: str,
    *,
    name: str | None = None,
    path: str | None = None,
) -> CatalogEntry:
    return CatalogEntry(
        path=path or f"{identity}/{version}.json",
        name=name or f"lib-{identity[:8]}",
        version=version,
        identity=identity,
        description=f"Library {identity[:8]}",
        website="https://example.com",
    )


def make_installed(identity: str, version: str, *, name: str | None = None) -> InstalledComponent:
    return InstalledComponent(identity=identity, name=name or f"lib-{identity[:8]}", version=version)


def entry_payload(identity: str, version: str, /, **overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "path": f"https://example.com/{identity}/{version}.json",
        "name": f"lib-{identity[:8]}",
        "version": version,
        "uuid": identity,
        "description": "A vendor library",
        "website": "https://example.com",
    }
    payload.update(overrides)
    return payload


def make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[[ResilienceConfig], ResilientClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        client = ResilientClient(resilience)
        client._client = httpx.AsyncClient(transport=httpx.MockTransport(async_handler))  # noqa: SLF001  # type: ignore[reportPrivateUsage]
        return client

    return factory


class FakeCatalogSource:
    """In-memory catalog source recording the URLs it was asked for."""

    def __init__(
        self,
        entries: Iterable[CatalogEntry] = (),
        *,
        error: CatalogFetchError | None = None,
    ) -> None:
        self.entries = tuple(entries)
        self.error = error
        self.urls: list[str] = []

    def __call__(self, url: str) -> CatalogFetchResult:
        self.urls.append(url)
        if self.error is not None:
            return CatalogFetchResult(error=self.error)
        return CatalogFetchResult(entries=self.entries)

    async def fetch_async(self, url: str) -> CatalogFetchResult:
        return self(url)
