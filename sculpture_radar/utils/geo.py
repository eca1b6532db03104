"""Great-circle distance helpers.

Haversine on a spherical Earth with radius 6371.0 km. The slightly more
precise 6371.0088 km would move radius and duplicate boundaries by ~0.01%.
"""

import math
from typing import Optional

from sculpture_radar.models import Coordinates

EARTH_RADIUS_KM = 6371.0

# Returned instead of raising when a coordinate is unusable, so a bad record
# sorts last and never passes a radius check.
FAR_AWAY_KM = math.inf


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Distance in kilometers between two points given in decimal degrees."""
    if not all(math.isfinite(v) for v in (lat1, lng1, lat2, lng2)):
        return FAR_AWAY_KM

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding can push a slightly above 1 for antipodal points
    a = min(1.0, max(0.0, a))
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_km(a: Optional[Coordinates], b: Optional[Coordinates]) -> float:
    """Distance between two coordinates, or ``FAR_AWAY_KM`` if either is missing."""
    if a is None or b is None:
        return FAR_AWAY_KM
    try:
        return haversine_distance(float(a.lat), float(a.lng), float(b.lat), float(b.lng))
    except (TypeError, ValueError, AttributeError):
        return FAR_AWAY_KM
