"""Ports for the workspace and the components installed in it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from vendordeps.domain.model import InstalledComponent


@dataclass(frozen=True, slots=True)
class Workspace:
    """The project a reconciliation run is computed for."""

    root: Path
    year: int


@runtime_checkable
class WorkspaceResolver(Protocol):
    """Resolve the active workspace from a caller-supplied context.

    Returns ``None`` when there is no workspace to reconcile against.
    """

    def __call__(self, context: object) -> Workspace | None: ...


@runtime_checkable
class InstalledComponentProvider(Protocol):
    """List the components installed in ``workspace``."""

    def __call__(self, workspace: Workspace) -> Sequence[InstalledComponent]: ...


__all__ = ["InstalledComponentProvider", "Workspace", "WorkspaceResolver"]
