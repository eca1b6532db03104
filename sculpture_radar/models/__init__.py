"""Sculpture Radar data models."""

from .core import (
    Citation,
    Coordinates,
    DegradedReason,
    DiscoveryResult,
    ExpertAnswer,
    LocationRecord,
    LocationSource,
    RankedLocation,
    ResolvedLocation,
    SearchOutcome,
)
from .errors import (
    AppError,
    ConfigurationError,
    ErrorCode,
    MalformedResponseError,
    NotFoundError,
    QuotaExceededError,
    RadarError,
    TransientError,
    UpstreamError,
)

__all__ = [
    # Core
    "Citation",
    "Coordinates",
    "DegradedReason",
    "DiscoveryResult",
    "ExpertAnswer",
    "LocationRecord",
    "LocationSource",
    "RankedLocation",
    "ResolvedLocation",
    "SearchOutcome",
    # Errors
    "AppError",
    "ConfigurationError",
    "ErrorCode",
    "MalformedResponseError",
    "NotFoundError",
    "QuotaExceededError",
    "RadarError",
    "TransientError",
    "UpstreamError",
]
