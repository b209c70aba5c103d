"""Filesystem adapters for the active workspace and its installed vendor libraries.

A workspace is a project directory. Installed libraries are the vendordep JSON
files under ``vendordeps/``; the project year comes from
``.wpilib/wpilib_preferences.json``.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from vendordeps.domain.model import InstalledComponent
from vendordeps.domain.ports.workspace import (
    InstalledComponentProvider,
    Workspace,
    WorkspaceResolver,
)

if TYPE_CHECKING:
    from collections.abc import Callable

log = getLogger(__name__)

VENDORDEPS_DIR: Final[str] = "vendordeps"
PREFERENCES_PATH: Final[tuple[str, str]] = (".wpilib", "wpilib_preferences.json")
_YEAR_RE: Final = re.compile(r"\d{4}")


class VendordepFile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    version: StrictStr
    uuid: StrictStr


class ProjectPreferences(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    project_year: str | int | None = Field(default=None, alias="projectYear")

    def year(self) -> int | None:
        if self.project_year is None:
            return None
        match = _YEAR_RE.search(str(self.project_year))
        return int(match.group()) if match else None


@dataclass(frozen=True, slots=True)
class DirectoryWorkspaceResolver:
    """Treat an existing directory as the workspace."""

    default_year: Callable[[], int]
    year_override: int | None = None

    def __call__(self, context: object) -> Workspace | None:
        if not isinstance(context, (str, os.PathLike)):
            return None
        root = Path(context).expanduser()
        if not root.is_dir():
            return None
        year = self.year_override or _read_project_year(root)
        return Workspace(root=root.resolve(), year=year if year is not None else self.default_year())


def load_installed_components(workspace: Workspace) -> tuple[InstalledComponent, ...]:
    """Return the vendordeps installed in ``workspace``, ordered by file name.

    Unreadable or invalid vendordep files are logged and skipped.
    """

    directory = workspace.root / VENDORDEPS_DIR
    if not directory.is_dir():
        return ()

    components: list[InstalledComponent] = []
    for path in sorted(directory.glob("*.json")):
        try:
            vendordep = VendordepFile.model_validate_json(path.read_bytes())
        except (OSError, ValidationError) as exc:
            log.warning("Skipping unreadable vendordep %s: %s", path.name, exc)
            continue
        components.append(
            InstalledComponent(
                identity=vendordep.uuid,
                name=vendordep.name,
                version=vendordep.version,
            )
        )
    return tuple(components)


def _read_project_year(root: Path) -> int | None:
    path = root.joinpath(*PREFERENCES_PATH)
    if not path.is_file():
        return None
    try:
        preferences = ProjectPreferences.model_validate_json(path.read_bytes())
    except (OSError, ValidationError) as exc:
        log.warning("Ignoring unreadable project preferences %s: %s", path, exc)
        return None
    return preferences.year()


if TYPE_CHECKING:
    _resolver_check: WorkspaceResolver = DirectoryWorkspaceResolver(default_year=lambda: 2024)
    _provider_check: InstalledComponentProvider = load_installed_components
