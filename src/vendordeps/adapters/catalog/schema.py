"""Pydantic models describing the vendor catalog document."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, RootModel, StrictStr

if TYPE_CHECKING:
    from collections.abc import Iterator


class CatalogBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class CatalogEntryPayload(CatalogBaseModel):
    """One element of the catalog array. Every field is a required string."""

    path: StrictStr
    name: StrictStr
    version: StrictStr
    uuid: StrictStr
    description: StrictStr
    website: StrictStr


class CatalogDocument(RootModel[list[CatalogEntryPayload]]):
    """The whole catalog; one invalid element invalidates the document."""

    def __iter__(self) -> Iterator[CatalogEntryPayload]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)
