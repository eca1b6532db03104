"""Per-user search session.

The session is the only mutable state in the service. Every search captures a
generation token when it starts; its result is committed only if no newer
search (or reset) has started since. Stale completions are dropped on arrival,
nothing is cancelled.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from sculpture_radar.models import (
    AppError,
    Coordinates,
    LocationRecord,
    RankedLocation,
    SearchOutcome,
)
from sculpture_radar.services.catalog import ReferenceCatalog

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """Derived state of one user's current search."""

    query: str = ""
    origin: Optional[Coordinates] = None
    display_name: Optional[str] = None
    locations: list[RankedLocation] = field(default_factory=list)
    curator_intro: Optional[str] = None
    loading: bool = False
    error: Optional[AppError] = None
    quota_reached: bool = False
    has_searched: bool = False
    generation: int = 0

    def begin_search(self, query: str) -> int:
        """Start a new search and return its token."""
        self.generation += 1
        self.query = query
        self.origin = None
        self.display_name = None
        self.locations = []
        self.curator_intro = None
        self.error = None
        self.quota_reached = False
        self.loading = True
        self.has_searched = True
        return self.generation

    def is_current(self, token: int) -> bool:
        return token == self.generation

    def commit(self, token: int, outcome: SearchOutcome) -> bool:
        if not self.is_current(token):
            logger.info(f"[SESSION] Discarding stale result for {outcome.query!r} (token {token} < {self.generation})")
            return False
        self.origin = outcome.origin
        self.display_name = outcome.display_name
        self.locations = list(outcome.locations)
        self.curator_intro = outcome.curator_intro
        self.quota_reached = outcome.quota_reached
        self.error = None
        self.loading = False
        return True

    def fail(self, token: int, error: AppError) -> bool:
        if not self.is_current(token):
            logger.info(f"[SESSION] Discarding stale {error.code.value} (token {token} < {self.generation})")
            return False
        self.locations = []
        self.curator_intro = None
        self.error = error
        self.loading = False
        return True

    def reset(self) -> None:
        """Clear everything derived from searches. In-flight searches become stale."""
        self.generation += 1
        self.query = ""
        self.origin = None
        self.display_name = None
        self.locations = []
        self.curator_intro = None
        self.loading = False
        self.error = None
        self.quota_reached = False
        self.has_searched = False

    def visible_locations(
        self,
        catalog: ReferenceCatalog,
        spotlight_count: int = 8,
    ) -> list[Union[LocationRecord, RankedLocation]]:
        """What the list view shows: catalog spotlight before any search, results after."""
        if not self.has_searched:
            return list(catalog.spotlight(spotlight_count))
        return list(self.locations)
