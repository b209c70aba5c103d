"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from vendordeps.adapters.catalog import build_catalog_fetcher
from vendordeps.adapters.workspace import DirectoryWorkspaceResolver, load_installed_components
from vendordeps.config import get_catalog_config
from vendordeps.domain.errors import NoWorkspaceError
from vendordeps.domain.model import ReconciliationResult
from vendordeps.domain.reconciliation import ReconciliationEngine

if TYPE_CHECKING:
    from vendordeps.config import CatalogConfig
    from vendordeps.domain.ports import (
        CatalogSource,
        CatalogUrlProvider,
        InstalledComponentProvider,
        RecommendationPublisher,
        Workspace,
        WorkspaceResolver,
    )

log = getLogger(__name__)


def _discard(_result: ReconciliationResult) -> None:
    return None


@dataclass(slots=True)
class DependencyViewService:
    """Recompute and publish recommendations for the active workspace.

    Every refresh is an independent run over a fresh installed snapshot and a
    fresh catalog fetch. The only state kept is the last published result.
    When async refreshes overlap, a run publishes only if no later run has
    started, so the observed result is always the latest one.
    """

    resolve_workspace: WorkspaceResolver
    installed_components: InstalledComponentProvider
    catalog_url: CatalogUrlProvider
    catalog_source: CatalogSource
    publish: RecommendationPublisher = field(default=_discard)
    engine: ReconciliationEngine = field(default_factory=ReconciliationEngine)
    _latest: ReconciliationResult = field(default_factory=ReconciliationResult, init=False)
    _generation: int = field(default=0, init=False)

    def get_recommendations(self) -> ReconciliationResult:
        """Return the result of the last completed run."""

        return self._latest

    def require_workspace(self, context: object) -> Workspace:
        workspace = self.resolve_workspace(context)
        if workspace is None:
            raise NoWorkspaceError(f"No workspace for context {context!r}")
        return workspace

    def refresh(self, context: object) -> ReconciliationResult | None:
        """Run one reconciliation for ``context`` and publish it.

        Returns ``None`` without publishing when there is no workspace.
        """

        return asyncio.run(self.arefresh(context))

    async def arefresh(self, context: object) -> ReconciliationResult | None:
        try:
            workspace = self.require_workspace(context)
        except NoWorkspaceError:
            log.warning("No workspace, skipping refresh")
            return None

        # skipped runs do not supersede a run in flight
        self._generation += 1
        generation = self._generation

        installed = tuple(self.installed_components(workspace))
        url = self.catalog_url(workspace.year)
        fetched = await self.catalog_source.fetch_async(url)

        result = self.engine.run(installed, fetched.entries, catalog_error=fetched.error)
        log.info(
            "Reconciled %s installed components against %s catalog entries%s",
            len(result.installed),
            len(fetched.entries),
            "" if fetched.ok else " (catalog unavailable)",
        )

        if generation != self._generation:
            log.debug("Discarding result of superseded refresh %s", generation)
            return result
        self._latest = result
        self.publish(result)
        return result


def build_dependency_view(
    *,
    config: CatalogConfig | None = None,
    publish: RecommendationPublisher | None = None,
    catalog_source: CatalogSource | None = None,
    year: int | None = None,
) -> DependencyViewService:
    """Wire the service with the filesystem and HTTP adapters.

    ``year`` pins the catalog year instead of reading it from the project.
    """

    effective_config = config or get_catalog_config()
    return DependencyViewService(
        resolve_workspace=DirectoryWorkspaceResolver(
            default_year=lambda: effective_config.default_year,
            year_override=year,
        ),
        installed_components=load_installed_components,
        catalog_url=effective_config.url_for,
        catalog_source=catalog_source or build_catalog_fetcher(effective_config),
        publish=publish or _discard,
    )
