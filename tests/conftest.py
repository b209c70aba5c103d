from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def catalog_document_bytes() -> bytes:
    """A published 2024 catalog with a duplicated library and an extra field."""

    path = Path(__file__).resolve().parent / "data" / "vendor_catalog_2024.json"
    return path.read_bytes()
