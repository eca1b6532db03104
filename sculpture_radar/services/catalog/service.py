"""Reference catalog of pre-vetted sculpture parks.

The catalog is built once at startup and is read-only afterwards. Callers get
immutable ``LocationRecord`` objects; nothing in the discovery pipeline can add
to or change the catalog.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Optional

from sculpture_radar.models import Coordinates, LocationRecord, LocationSource

from .data import CATALOG_ENTRIES

logger = logging.getLogger(__name__)


class ReferenceCatalog:
    """Immutable in-memory list of curated locations."""

    def __init__(self, records: Iterable[LocationRecord]) -> None:
        self._records: tuple[LocationRecord, ...] = tuple(records)
        self._by_id: dict[str, LocationRecord] = {}
        for record in self._records:
            if record.id in self._by_id:
                raise ValueError(f"Duplicate catalog id: {record.id}")
            self._by_id[record.id] = record

    @classmethod
    def from_entries(cls, entries: Iterable[dict]) -> "ReferenceCatalog":
        """Build a catalog from plain dicts with flat ``lat``/``lng`` keys."""
        records = []
        for entry in entries:
            website = entry.get("website")
            records.append(LocationRecord(
                id=entry["id"],
                name=entry["name"],
                place=entry.get("place", ""),
                description=entry.get("description", ""),
                coordinates=Coordinates(lat=entry["lat"], lng=entry["lng"]),
                source=LocationSource.CATALOG,
                tags=frozenset(entry.get("tags", ())),
                website=website if website and website != "#" else None,
                region=entry.get("region"),
            ))
        return cls(records)

    @classmethod
    def default(cls) -> "ReferenceCatalog":
        catalog = cls.from_entries(CATALOG_ENTRIES)
        logger.info(f"[CATALOG] Loaded {len(catalog)} curated locations")
        return catalog

    @property
    def records(self) -> tuple[LocationRecord, ...]:
        return self._records

    def get(self, record_id: str) -> Optional[LocationRecord]:
        return self._by_id.get(record_id)

    def spotlight(self, count: int = 8) -> list[LocationRecord]:
        """Featured entries shown before the user has searched."""
        return list(self._records[:max(0, count)])

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[LocationRecord]:
        return iter(self._records)
