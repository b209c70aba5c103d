"""Installed components and published catalog entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .primitives import Identity, VersionString


@dataclass(frozen=True, slots=True)
class InstalledComponent:
    """A vendor library currently present in the workspace."""

    identity: Identity
    name: str
    version: VersionString


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One published version of one component, as listed by the remote catalog.

    Several entries may share ``identity``: one per published version, and exact
    duplicates when the catalog merges several source lists.
    """

    path: str
    name: str
    version: VersionString
    identity: Identity
    description: str
    website: str
