"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class VersionAction(StrEnum):
    """Action offered for one catalog version of an installed component.

    Values are the labels shown next to a version in the dependency view.
    """

    UPDATE = "Update"
    HOLD_AT_LATEST = "To Latest"
    DOWNGRADE = "Downgrade"
