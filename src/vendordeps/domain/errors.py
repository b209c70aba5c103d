"""Error taxonomy for catalog acquisition and workspace resolution.

Acquisition errors are raised by the catalog client and absorbed at the fetch
boundary; they never reach the reconciliation stages.
"""

from __future__ import annotations


class CatalogFetchError(RuntimeError):
    """Base class for every reason a catalog could not be acquired."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class FetchFailedError(CatalogFetchError):
    """Transport failure or timeout."""


class BadStatusError(CatalogFetchError):
    """The catalog host answered with a status outside the success range."""

    def __init__(self, status_code: int, *, url: str | None = None) -> None:
        super().__init__(f"Bad status {status_code}", url=url)
        self.status_code = status_code


class MalformedPayloadError(CatalogFetchError):
    """The response body is not valid JSON."""


class SchemaMismatchError(CatalogFetchError):
    """The JSON document does not have the catalog shape.

    Raised for the whole document as soon as one element is invalid.
    """


class NoWorkspaceError(LookupError):
    """No active workspace to reconcile against."""
