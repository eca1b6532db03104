"""Core data models for Sculpture Radar.

This module contains the Pydantic models used throughout the application for
representing coordinates, discoverable locations and the per-search views
derived from them.

A ``LocationRecord`` is the canonical entity; it never carries a distance.
Distances only exist on ``RankedLocation``, which is built for one search
origin and thrown away with the search.
"""

import math
from enum import Enum
from typing import Optional
from urllib.parse import quote_plus

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LocationSource(str, Enum):
    """Where a location record came from."""

    CATALOG = "catalog"
    AI_DISCOVERED = "ai_discovered"


class DegradedReason(str, Enum):
    """Why a search fell back to catalog-only results."""

    QUOTA_EXCEEDED = "quota_exceeded"
    DISCOVERY_UNAVAILABLE = "discovery_unavailable"


class Coordinates(BaseModel):
    """Geographic coordinates with validation.

    Latitude must be between -90 and 90 degrees.
    Longitude must be between -180 and 180 degrees.
    Instances are frozen: a coordinate never changes after creation.
    """

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    lng: float = Field(..., ge=-180, le=180, description="Longitude in degrees")

    @field_validator("lat", "lng")
    @classmethod
    def _must_be_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("coordinate must be a finite number")
        return value


class LocationRecord(BaseModel):
    """A discoverable sculpture park, garden or outdoor artwork.

    Catalog records use a fixed id. AI-discovered records get a fresh id per
    request, so their ids are not stable across searches.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique within a result set")
    name: str = Field(..., min_length=1, description="Display name")
    place: str = Field(default="", description="Human-readable area")
    description: str = Field(default="", description="One paragraph")
    coordinates: Coordinates
    source: LocationSource
    tags: frozenset[str] = Field(
        default_factory=frozenset, description="Advisory classification flags"
    )
    website: Optional[str] = Field(None, description="Official website, if known")
    region: Optional[str] = Field(None, description="Country or region label")


class RankedLocation(BaseModel):
    """A location as seen from one search origin."""

    model_config = ConfigDict(frozen=True)

    record: LocationRecord
    distance_km: float = Field(..., ge=0)
    search_origin: Coordinates

    @property
    def directions_url(self) -> str:
        """Google Maps directions from the search origin to this location."""
        origin = f"{self.search_origin.lat},{self.search_origin.lng}"
        dest = f"{self.record.coordinates.lat},{self.record.coordinates.lng}"
        return (
            "https://www.google.com/maps/dir/?api=1"
            f"&origin={origin}&destination={dest}"
            f"&destination_place_id={quote_plus(self.record.name)}"
        )


class ResolvedLocation(BaseModel):
    """A query resolved to a coordinate plus a best-effort display name."""

    coordinates: Coordinates
    display_name: str


class Citation(BaseModel):
    """A web source the AI grounded an answer on."""

    title: str
    uri: str


class ExpertAnswer(BaseModel):
    """Free-text answer from the AI curator, with its sources."""

    answer: str
    citations: list[Citation] = Field(default_factory=list)


class DiscoveryResult(BaseModel):
    """Validated output of one discovery call."""

    candidates: list[LocationRecord] = Field(default_factory=list)
    curator_intro: Optional[str] = None
    dropped: int = Field(default=0, ge=0, description="Records rejected by validation")


class SearchOutcome(BaseModel):
    """Final result of one search, ready to be committed to a session."""

    query: str
    origin: Coordinates
    display_name: str
    locations: list[RankedLocation] = Field(default_factory=list)
    curator_intro: Optional[str] = None
    degraded: bool = False
    degraded_reason: Optional[DegradedReason] = None

    @property
    def quota_reached(self) -> bool:
        return self.degraded_reason is DegradedReason.QUOTA_EXCEEDED
