"""Collapse a raw catalog to one entry per component identity.

Responsibilities of this stage:
- keep the newest version seen for every identity
- fix each identity at the position of its first occurrence
- start from an empty result on every call; nothing carries over between runs
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from vendordeps.domain.versions import is_newer

if TYPE_CHECKING:
    from collections.abc import Iterable

    from vendordeps.domain.model import CatalogEntry, DeduplicatedCatalog, Identity


class DeduplicateCatalog(Protocol):
    """Reduce catalog entries to a latest-wins view."""

    def __call__(self, catalog: Iterable[CatalogEntry]) -> DeduplicatedCatalog: ...


def deduplicate(catalog: Iterable[CatalogEntry]) -> DeduplicatedCatalog:
    """Return one entry per identity, newest version wins.

    A later entry replaces the kept one in place only when its version is
    strictly newer; entries of equal rank keep the earlier one.
    """

    kept: list[CatalogEntry] = []
    position_by_identity: dict[Identity, int] = {}

    for entry in catalog:
        position = position_by_identity.get(entry.identity)
        if position is None:
            position_by_identity[entry.identity] = len(kept)
            kept.append(entry)
        elif is_newer(entry.version, kept[position].version):
            kept[position] = entry

    return tuple(kept)


if TYPE_CHECKING:
    _deduplicate_check: DeduplicateCatalog = deduplicate
