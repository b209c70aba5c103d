"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import CatalogFetchResult, CatalogSource, CatalogUrlProvider
from .publishing import RecommendationPublisher
from .workspace import InstalledComponentProvider, Workspace, WorkspaceResolver

__all__ = [
    "CatalogFetchResult",
    "CatalogSource",
    "CatalogUrlProvider",
    "InstalledComponentProvider",
    "RecommendationPublisher",
    "Workspace",
    "WorkspaceResolver",
]
