from __future__ import annotations

from vendordeps.domain.errors import SchemaMismatchError
from vendordeps.domain.model import VersionAction
from vendordeps.domain.reconciliation import ReconciliationEngine
from tests.helpers.catalog import PHOENIX_ID, PHOTON_ID, make_entry, make_installed


def test_engine_produces_sorted_recommendations_and_deduplicated_catalog() -> None:
    installed = [make_installed(PHOENIX_ID, "1.0")]
    catalog = [
        make_entry(PHOENIX_ID, "1.0"),
        make_entry(PHOTON_ID, "2024.1.0"),
        make_entry(PHOENIX_ID, "0.5"),
        make_entry(PHOENIX_ID, "2.0"),
    ]

    result = ReconciliationEngine().run(installed, catalog)

    (recommendation,) = result.installed
    assert [(c.version, c.action) for c in recommendation.candidates] == [
        ("2.0", VersionAction.UPDATE),
        ("1.0", VersionAction.HOLD_AT_LATEST),
        ("0.5", VersionAction.DOWNGRADE),
    ]
    assert [(entry.identity, entry.version) for entry in result.available] == [
        (PHOENIX_ID, "2.0"),
        (PHOTON_ID, "2024.1.0"),
    ]
    assert result.catalog_available is True


def test_engine_with_empty_catalog_keeps_every_installed_component() -> None:
    installed = [make_installed(PHOENIX_ID, "1.0"), make_installed(PHOTON_ID, "2.0")]
    error = SchemaMismatchError("Incorrect catalog format")

    result = ReconciliationEngine().run(installed, [], catalog_error=error)

    assert [item.identity for item in result.installed] == [PHOENIX_ID, PHOTON_ID]
    assert all(item.candidates == () for item in result.installed)
    assert result.available == ()
    assert result.catalog_error is error
    assert result.catalog_available is False


def test_engine_runs_are_idempotent() -> None:
    installed = [make_installed(PHOENIX_ID, "1.0")]
    catalog = [make_entry(PHOENIX_ID, "2.0"), make_entry(PHOENIX_ID, "1.2")]

    engine = ReconciliationEngine()

    assert engine.run(installed, catalog) == engine.run(installed, catalog)


def test_engine_uses_injected_stages() -> None:
    calls: list[str] = []

    def fake_deduplicate(catalog):  # noqa: ANN001, ANN202
        calls.append("deduplicate")
        return tuple(catalog)[:1]

    engine = ReconciliationEngine(deduplicate=fake_deduplicate)
    result = engine.run([], [make_entry(PHOENIX_ID, "1.0"), make_entry(PHOENIX_ID, "2.0")])

    assert calls == ["deduplicate"]
    assert [entry.version for entry in result.available] == ["1.0"]
