"""Domain primitives: scalar aliases.

Aliases may be promoted to proper value objects later without changing imports.
"""

from __future__ import annotations

type Identity = str
type VersionString = str
