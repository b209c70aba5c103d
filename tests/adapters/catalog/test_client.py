from __future__ import annotations

import json

import httpx
import pytest

from vendordeps.adapters.catalog import CatalogClient, CatalogFetcher
from vendordeps.config import ResilienceConfig
from vendordeps.domain.errors import (
    BadStatusError,
    FetchFailedError,
    MalformedPayloadError,
    SchemaMismatchError,
)
from vendordeps.domain.model import CatalogEntry
from tests.helpers.catalog import PHOENIX_ID, PHOTON_ID, entry_payload, make_client_factory

CATALOG_URL = "https://catalog.example.com/2024.json"


def _client(handler) -> CatalogClient:  # noqa: ANN001
    return CatalogClient(
        resilience=ResilienceConfig(name="catalog", timeout_seconds=1.0),
        client_factory=make_client_factory(handler),
    )


def _json_response(payload: object, *, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode())


def test_fetch_entries_translates_catalog_document() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return _json_response(
            [
                entry_payload(PHOENIX_ID, "24.1.0", extra="ignored"),
                entry_payload(PHOTON_ID, "2024.3.1"),
            ]
        )

    entries = _client(handler).fetch_entries(CATALOG_URL)

    assert str(requests[0].url) == CATALOG_URL
    assert requests[0].method == "GET"
    assert entries[0] == CatalogEntry(
        path=f"https://example.com/{PHOENIX_ID}/24.1.0.json",
        name=f"lib-{PHOENIX_ID[:8]}",
        version="24.1.0",
        identity=PHOENIX_ID,
        description="A vendor library",
        website="https://example.com",
    )
    assert entries[1].identity == PHOTON_ID


def test_fetch_entries_accepts_empty_catalog() -> None:
    assert _client(lambda _request: _json_response([])).fetch_entries(CATALOG_URL) == ()


@pytest.mark.parametrize("status_code", [199, 301, 404, 500])
def test_fetch_entries_rejects_status_outside_success_range(status_code: int) -> None:
    client = _client(lambda _request: _json_response([], status_code=status_code))

    with pytest.raises(BadStatusError) as exc:
        client.fetch_entries(CATALOG_URL)

    assert exc.value.status_code == status_code
    assert exc.value.url == CATALOG_URL


@pytest.mark.parametrize("status_code", [200, 204, 300])
def test_fetch_entries_accepts_success_range(status_code: int) -> None:
    client = _client(lambda _request: _json_response([], status_code=status_code))

    assert client.fetch_entries(CATALOG_URL) == ()


def test_fetch_entries_wraps_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(FetchFailedError):
        _client(handler).fetch_entries(CATALOG_URL)


def test_fetch_entries_rejects_invalid_json() -> None:
    client = _client(lambda _request: httpx.Response(200, content=b"<html>not json</html>"))

    with pytest.raises(MalformedPayloadError):
        client.fetch_entries(CATALOG_URL)


def test_fetch_entries_rejects_deeply_nested_json() -> None:
    nested = b"[" * 200_000 + b"]" * 200_000
    client = _client(lambda _request: httpx.Response(200, content=nested))

    with pytest.raises(MalformedPayloadError):
        client.fetch_entries(CATALOG_URL)


def test_fetcher_absorbs_deeply_nested_json() -> None:
    nested = b"[" * 200_000 + b"]" * 200_000
    fetcher = CatalogFetcher(client=_client(lambda _request: httpx.Response(200, content=nested)))

    result = fetcher(CATALOG_URL)

    assert result.entries == ()
    assert isinstance(result.error, MalformedPayloadError)


@pytest.mark.parametrize(
    "payload",
    [
        {"path": "not", "name": "a", "version": "list"},
        [entry_payload(PHOENIX_ID, "1.0"), "not an object"],
        [entry_payload(PHOENIX_ID, "1.0", version=2024)],
        [entry_payload(PHOENIX_ID, "1.0", website=None)],
    ],
)
def test_fetch_entries_rejects_wrong_shape(payload: object) -> None:
    with pytest.raises(SchemaMismatchError):
        _client(lambda _request: _json_response(payload)).fetch_entries(CATALOG_URL)


def test_one_entry_missing_a_field_invalidates_whole_document() -> None:
    broken = entry_payload(PHOTON_ID, "2024.1.0")
    del broken["website"]
    payload = [entry_payload(PHOENIX_ID, "1.0"), broken, entry_payload(PHOENIX_ID, "2.0")]

    with pytest.raises(SchemaMismatchError):
        _client(lambda _request: _json_response(payload)).fetch_entries(CATALOG_URL)


def test_fetcher_absorbs_errors_into_empty_result(caplog: pytest.LogCaptureFixture) -> None:
    broken = entry_payload(PHOTON_ID, "2024.1.0")
    del broken["website"]
    fetcher = CatalogFetcher(client=_client(lambda _request: _json_response([broken])))

    with caplog.at_level("WARNING"):
        result = fetcher(CATALOG_URL)

    assert result.entries == ()
    assert isinstance(result.error, SchemaMismatchError)
    assert result.ok is False
    assert "SchemaMismatchError" in caplog.text


def test_fetcher_returns_entries_on_success() -> None:
    fetcher = CatalogFetcher(
        client=_client(lambda _request: _json_response([entry_payload(PHOENIX_ID, "1.0")]))
    )

    result = fetcher(CATALOG_URL)

    assert result.ok is True
    assert [entry.identity for entry in result.entries] == [PHOENIX_ID]
