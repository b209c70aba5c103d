"""Derived reconciliation output. Recomputed on every run, never persisted."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vendordeps.domain.errors import CatalogFetchError

    from .components import CatalogEntry
    from .enums import VersionAction
    from .primitives import Identity, VersionString


@dataclass(frozen=True, slots=True)
class VersionRecommendation:
    version: VersionString
    action: VersionAction


@dataclass(frozen=True, slots=True)
class InstalledRecommendation:
    """Candidate versions offered for one installed component."""

    identity: Identity
    name: str
    current_version: VersionString
    candidates: tuple[VersionRecommendation, ...] = ()


type DeduplicatedCatalog = tuple[CatalogEntry, ...]


@dataclass(frozen=True, slots=True)
class ReconciliationResult:
    """The pair published to the presentation layer after one run.

    ``catalog_error`` holds the absorbed acquisition failure, if any, so a view
    can tell "nothing to update" apart from "catalog unavailable".
    """

    installed: tuple[InstalledRecommendation, ...] = ()
    available: DeduplicatedCatalog = ()
    catalog_error: CatalogFetchError | None = field(default=None, compare=False)

    @property
    def catalog_available(self) -> bool:
        return self.catalog_error is None
