"""Reconciliation core: installed components against a published catalog.

Layered flow of one run:
1) classify every catalog version matching an installed component
2) order each candidate list newest first
3) deduplicate the catalog to one newest entry per identity
"""

from __future__ import annotations

from .classify import classify_version, reconcile
from .deduplicate import deduplicate
from .engine import ReconciliationEngine
from .ordering import order_recommendations, sort_newest_first

__all__ = [
    "ReconciliationEngine",
    "classify_version",
    "deduplicate",
    "order_recommendations",
    "reconcile",
    "sort_newest_first",
]
