"""Unit tests for the reference catalog."""

import pytest
from pydantic import ValidationError

from sculpture_radar.models import LocationSource
from sculpture_radar.services.catalog import CATALOG_ENTRIES, ReferenceCatalog
from tests.support import make_record


class TestDefaultCatalog:
    """Tests for the bundled catalog."""

    def setup_method(self) -> None:
        self.catalog = ReferenceCatalog.default()

    def test_loads_every_entry(self) -> None:
        assert len(self.catalog) == len(CATALOG_ENTRIES)
        assert len(self.catalog) == 60

    def test_spanish_entries_present(self) -> None:
        for record_id, name in [
            ("es-16", "Fundación Montenmedio"),
            ("es-32", "Museo de Escultura Leganés"),
            ("es-38", "Fundación Fran Daurel"),
        ]:
            record = self.catalog.get(record_id)
            assert record is not None
            assert record.name == name

    def test_ids_are_unique(self) -> None:
        ids = [r.id for r in self.catalog]
        assert len(ids) == len(set(ids))

    def test_all_records_are_catalog_sourced(self) -> None:
        assert all(r.source is LocationSource.CATALOG for r in self.catalog)

    def test_no_placeholder_websites(self) -> None:
        assert all(r.website is None or r.website.startswith("http") for r in self.catalog)

    def test_get(self) -> None:
        record = self.catalog.get("nl-01")
        assert record is not None
        assert record.name == "Kröller-Müller"
        assert record.region == "Netherlands"
        assert self.catalog.get("missing") is None

    def test_spotlight(self) -> None:
        spotlight = self.catalog.spotlight(8)
        assert len(spotlight) == 8
        assert spotlight[0].id == "nl-01"
        assert spotlight == list(self.catalog.records[:8])

    def test_spotlight_bounds(self) -> None:
        assert self.catalog.spotlight(0) == []
        assert self.catalog.spotlight(-3) == []
        assert len(self.catalog.spotlight(10_000)) == len(self.catalog)


class TestReferenceCatalog:
    """Tests for catalog construction."""

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate catalog id"):
            ReferenceCatalog([make_record("x", "A", 1, 1), make_record("x", "B", 2, 2)])

    def test_from_entries_maps_fields(self) -> None:
        catalog = ReferenceCatalog.from_entries([
            {"id": "t-1", "name": "Test Park", "place": "Town", "region": "Spain", "lat": 43.2, "lng": -1.9,
             "description": "Nice", "tags": ["land-art"], "website": "#"},
        ])
        record = catalog.get("t-1")
        assert record.place == "Town"
        assert record.tags == frozenset({"land-art"})
        assert record.website is None

    def test_invalid_entry_fails_fast(self) -> None:
        with pytest.raises(ValidationError):
            ReferenceCatalog.from_entries([{"id": "bad", "name": "Bad", "lat": 95.0, "lng": 0.0}])

    def test_records_are_immutable(self) -> None:
        catalog = ReferenceCatalog([make_record("x", "A", 1, 1)])
        with pytest.raises(ValidationError):
            catalog.records[0].name = "Changed"
        assert isinstance(catalog.records, tuple)
