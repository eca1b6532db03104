"""Discovery orchestrator.

Turns one search query into the final ranked list of sculpture parks:

1. Resolve the query to an origin (GPS fixes skip the AI call)
2. Ask the AI gateway for candidates around the origin
3. Pool = catalog + AI candidates, catalog first
4. Distance from the origin for every candidate
5. Deduplicate the whole pool (near each other OR names contain one another)
6. Radius filter, applied to both sources
7. Stable sort by distance
8. Cap
9. Tag every survivor with the literal origin used in step 4

Steps 3-9 are pure and deterministic; ``reconcile`` exposes them on their own.
A failing discovery call degrades to catalog-only results. A failing
resolution aborts the search.
"""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Union

from sculpture_radar.config import DiscoverySettings
from sculpture_radar.models import (
    ConfigurationError,
    Coordinates,
    DegradedReason,
    DiscoveryResult,
    LocationRecord,
    NotFoundError,
    QuotaExceededError,
    RadarError,
    RankedLocation,
    SearchOutcome,
)
from sculpture_radar.services.ai_gateway import AIGateway
from sculpture_radar.services.catalog import ReferenceCatalog
from sculpture_radar.utils.geo import distance_km

if TYPE_CHECKING:
    from sculpture_radar.services.session import SessionState

logger = logging.getLogger(__name__)


class DiscoveryService:
    """Runs searches against the catalog and the AI gateway."""

    def __init__(
        self,
        gateway: AIGateway,
        catalog: ReferenceCatalog,
        settings: DiscoverySettings | None = None,
    ) -> None:
        self._gateway = gateway
        self._catalog = catalog
        self._settings = settings or DiscoverySettings()

    @property
    def settings(self) -> DiscoverySettings:
        return self._settings

    async def search(self, query: Union[str, Coordinates]) -> SearchOutcome:
        """Run the full search algorithm for one query.

        Raises:
            NotFoundError: the query could not be resolved to coordinates.
            ConfigurationError: the AI backend has no usable credentials.
        """
        label = query if isinstance(query, str) else f"{query.lat:.4f}, {query.lng:.4f}"

        try:
            resolved = await self._gateway.resolve_location(query)
        except (NotFoundError, ConfigurationError):
            raise
        except RadarError as e:
            raise NotFoundError(f"Could not resolve {label!r}: {e.message}") from e

        origin = resolved.coordinates
        degraded_reason = None
        try:
            discovered = await self._gateway.discover_locations(origin, resolved.display_name)
        except ConfigurationError:
            raise
        except QuotaExceededError as e:
            logger.warning(f"[DISCOVERY] Quota reached, catalog-only results: {e.message}")
            discovered = DiscoveryResult()
            degraded_reason = DegradedReason.QUOTA_EXCEEDED
        except RadarError as e:
            logger.warning(f"[DISCOVERY] Discovery unavailable, catalog-only results: {e.message}")
            discovered = DiscoveryResult()
            degraded_reason = DegradedReason.DISCOVERY_UNAVAILABLE

        locations = self.reconcile(origin, discovered.candidates)
        logger.info(
            f"[DISCOVERY] {resolved.display_name}: {len(locations)} locations "
            f"({len(discovered.candidates)} from AI, {discovered.dropped} dropped)"
        )
        return SearchOutcome(
            query=label,
            origin=origin,
            display_name=resolved.display_name,
            locations=locations,
            curator_intro=discovered.curator_intro,
            degraded=degraded_reason is not None,
            degraded_reason=degraded_reason,
        )

    async def search_into(self, session: "SessionState", query: Union[str, Coordinates]) -> bool:
        """Search on behalf of a session and commit through its generation token.

        Returns False when a newer search or a reset superseded this one; the
        result is then discarded.
        """
        label = query if isinstance(query, str) else "your current location"
        token = session.begin_search(label)
        try:
            outcome = await self.search(query)
        except RadarError as e:
            return session.fail(token, e.to_app_error())
        return session.commit(token, outcome)

    def reconcile(
        self,
        origin: Coordinates,
        discovered: Iterable[LocationRecord] = (),
    ) -> list[RankedLocation]:
        """Merge, dedupe, filter, sort and cap candidates around ``origin``.

        Duplicates are removed from the whole pool before the radius filter,
        so a smaller radius can only ever remove results.
        """
        pool = [
            RankedLocation(record=record, distance_km=distance_km(origin, record.coordinates), search_origin=origin)
            for record in [*self._catalog.records, *discovered]
        ]
        radius = self._settings.search_radius_km

        in_range = [loc for loc in self.dedupe(pool) if loc.distance_km <= radius]
        # sorted() is stable: equal distances keep catalog-first pool order
        ranked = sorted(in_range, key=lambda loc: loc.distance_km)
        return ranked[:max(0, self._settings.max_results)]

    def dedupe(self, ranked: Iterable[RankedLocation]) -> list[RankedLocation]:
        """Keep the first of every group of records that name the same place."""
        kept: list[RankedLocation] = []
        for candidate in ranked:
            if any(self.is_duplicate(existing.record, candidate.record) for existing in kept):
                logger.debug(f"[DISCOVERY] Duplicate dropped: {candidate.record.name}")
                continue
            kept.append(candidate)
        return kept

    def is_duplicate(self, a: LocationRecord, b: LocationRecord) -> bool:
        """Two records are one place if they are very close or their names overlap."""
        if distance_km(a.coordinates, b.coordinates) < self._settings.duplicate_threshold_km:
            return True
        name_a, name_b = a.name.casefold().strip(), b.name.casefold().strip()
        if not name_a or not name_b:
            return False
        return name_a in name_b or name_b in name_a
