"""Match installed components against catalog entries and classify each match.

Responsibilities of this stage:
- join installed components and catalog entries on ``identity`` only
- classify every matching catalog version relative to the installed one
- keep catalog order inside each candidate list (sorting is a separate stage)
"""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING, Protocol

from vendordeps.domain.model import (
    InstalledRecommendation,
    VersionAction,
    VersionRecommendation,
)
from vendordeps.domain.versions import is_newer

if TYPE_CHECKING:
    from collections.abc import Sequence

    from vendordeps.domain.model import CatalogEntry, Identity, InstalledComponent


class ClassifyInstalled(Protocol):
    """Produce one recommendation per installed component."""

    def __call__(
        self,
        installed: Sequence[InstalledComponent],
        catalog: Sequence[CatalogEntry],
    ) -> tuple[InstalledRecommendation, ...]: ...


def classify_version(candidate: str, installed: str) -> VersionAction:
    """Return the action offered for moving from ``installed`` to ``candidate``."""

    if is_newer(candidate, installed):
        return VersionAction.UPDATE
    if candidate == installed:
        return VersionAction.HOLD_AT_LATEST
    return VersionAction.DOWNGRADE


def reconcile(
    installed: Sequence[InstalledComponent],
    catalog: Sequence[CatalogEntry],
) -> tuple[InstalledRecommendation, ...]:
    """Build unsorted recommendations for ``installed``, in input order."""

    versions_by_identity: dict[Identity, list[str]] = defaultdict(list)
    for entry in catalog:
        versions_by_identity[entry.identity].append(entry.version)

    return tuple(
        InstalledRecommendation(
            identity=component.identity,
            name=component.name,
            current_version=component.version,
            candidates=tuple(
                VersionRecommendation(
                    version=version,
                    action=classify_version(version, component.version),
                )
                for version in versions_by_identity.get(component.identity, ())
            ),
        )
        for component in installed
    )


if TYPE_CHECKING:
    _classify_check: ClassifyInstalled = reconcile
