"""Translate catalog payloads into domain entries."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from vendordeps.domain.model import CatalogEntry

from .schema import CatalogEntryPayload

CatalogEntryInput = CatalogEntryPayload | Mapping[str, object]


def parse_catalog_entry(payload: CatalogEntryInput) -> CatalogEntry:
    """Validate ``payload`` if needed and convert it to a ``CatalogEntry``."""

    model = (
        payload
        if isinstance(payload, CatalogEntryPayload)
        else CatalogEntryPayload.model_validate(payload)
    )
    return CatalogEntry(
        path=model.path,
        name=model.name,
        version=model.version,
        identity=model.uuid,
        description=model.description,
        website=model.website,
    )


def translate_document(payloads: Iterable[CatalogEntryInput]) -> tuple[CatalogEntry, ...]:
    return tuple(parse_catalog_entry(payload) for payload in payloads)
