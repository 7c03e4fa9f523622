"""Great-circle distance between track samples."""

import math

from ..models import Sample

EARTH_RADIUS_M = 6_371_000.0


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine surface distance in meters between two lat/lon pairs (degrees).

    Coordinates are not range checked; out-of-range values give a defined
    but physically meaningless result.
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    )
    # Rounding, or latitudes beyond +/-90, can push h outside [0, 1].
    h = min(max(h, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_M * c


def distance(a: Sample, b: Sample) -> float:
    """Distance in meters between two samples."""
    return haversine_m(a.latitude, a.longitude, b.latitude, b.longitude)
