"""Newest-first ordering of candidate versions."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Protocol

from vendordeps.domain.versions import version_key

if TYPE_CHECKING:
    from collections.abc import Iterable

    from vendordeps.domain.model import InstalledRecommendation, VersionRecommendation


class OrderRecommendations(Protocol):
    """Sort the candidates of every recommendation."""

    def __call__(
        self,
        recommendations: Iterable[InstalledRecommendation],
    ) -> tuple[InstalledRecommendation, ...]: ...


def sort_newest_first(
    candidates: Iterable[VersionRecommendation],
) -> tuple[VersionRecommendation, ...]:
    """Return ``candidates`` newest first.

    The sort is stable: versions of equal rank keep their input order
    (``sorted(..., reverse=True)`` preserves the order of equal items).
    """

    return tuple(sorted(candidates, key=lambda item: version_key(item.version), reverse=True))


def order_recommendations(
    recommendations: Iterable[InstalledRecommendation],
) -> tuple[InstalledRecommendation, ...]:
    """Return copies of ``recommendations`` with newest-first candidates."""

    return tuple(
        replace(recommendation, candidates=sort_newest_first(recommendation.candidates))
        for recommendation in recommendations
    )


if TYPE_CHECKING:
    _order_check: OrderRecommendations = order_recommendations
