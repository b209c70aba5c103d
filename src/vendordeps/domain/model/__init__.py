"""Public domain model surface."""

from __future__ import annotations

from vendordeps.domain.model.components import CatalogEntry, InstalledComponent
from vendordeps.domain.model.enums import VersionAction
from vendordeps.domain.model.primitives import Identity, VersionString
from vendordeps.domain.model.recommendations import (
    DeduplicatedCatalog,
    InstalledRecommendation,
    ReconciliationResult,
    VersionRecommendation,
)

__all__ = [
    "CatalogEntry",
    "DeduplicatedCatalog",
    "Identity",
    "InstalledComponent",
    "InstalledRecommendation",
    "ReconciliationResult",
    "VersionAction",
    "VersionRecommendation",
    "VersionString",
]
