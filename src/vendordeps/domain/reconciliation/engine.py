"""Orchestrator for one reconciliation run.

The engine composes the stage callables but does not fetch anything itself;
callers hand it an installed snapshot and the raw catalog entries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from vendordeps.domain.model import ReconciliationResult

from .classify import reconcile
from .deduplicate import deduplicate
from .ordering import order_recommendations

if TYPE_CHECKING:
    from collections.abc import Sequence

    from vendordeps.domain.errors import CatalogFetchError
    from vendordeps.domain.model import CatalogEntry, InstalledComponent

    from .classify import ClassifyInstalled
    from .deduplicate import DeduplicateCatalog
    from .ordering import OrderRecommendations

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ReconciliationEngine:
    """Run classify, order and deduplicate over already-materialised inputs."""

    classify: ClassifyInstalled = field(default=reconcile)
    order: OrderRecommendations = field(default=order_recommendations)
    deduplicate: DeduplicateCatalog = field(default=deduplicate)

    def run(
        self,
        installed: Sequence[InstalledComponent],
        catalog: Sequence[CatalogEntry],
        *,
        catalog_error: CatalogFetchError | None = None,
    ) -> ReconciliationResult:
        """Reconcile ``installed`` against ``catalog`` into a fresh result."""

        recommendations = self.order(self.classify(installed, catalog))
        available = self.deduplicate(catalog)
        log.debug(
            "Reconciled %s installed against %s catalog entries (%s unique)",
            len(installed),
            len(catalog),
            len(available),
        )
        return ReconciliationResult(
            installed=recommendations,
            available=available,
            catalog_error=catalog_error,
        )

