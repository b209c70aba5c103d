"""Port for handing results to the presentation layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from vendordeps.domain.model import ReconciliationResult


class RecommendationPublisher(Protocol):
    """Receive the result of every completed run."""

    def __call__(self, result: ReconciliationResult) -> None: ...


__all__ = ["RecommendationPublisher"]
