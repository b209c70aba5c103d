"""Ports for acquiring the remote catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from vendordeps.domain.errors import CatalogFetchError
    from vendordeps.domain.model import CatalogEntry


@dataclass(frozen=True, slots=True)
class CatalogFetchResult:
    """Entries of one catalog document, or the reason there are none.

    A failed acquisition is an empty result carrying ``error``; callers never
    see the exception raised.
    """

    entries: tuple[CatalogEntry, ...] = ()
    error: CatalogFetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@runtime_checkable
class CatalogSource(Protocol):
    """Callable port that fetches and validates one catalog document."""

    def __call__(self, url: str) -> CatalogFetchResult: ...

    async def fetch_async(self, url: str) -> CatalogFetchResult: ...


class CatalogUrlProvider(Protocol):
    """Build the catalog URL for a project year."""

    def __call__(self, year: int) -> str: ...


__all__ = ["CatalogFetchResult", "CatalogSource", "CatalogUrlProvider"]
