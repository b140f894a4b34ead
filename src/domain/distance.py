"""
Great-circle distances on a spherical earth.

Two measures are provided:

* ``haversine_km`` -- surface distance in **km** (Haversine formula), used
  for the user-facing leg lengths.
* ``angular_separation`` -- arc length in **radians** (spherical law of
  cosines), used as the triangle sides by the angle computation.

Both clamp their intermediate values so that floating-point rounding on
identical or antipodal points can never produce ``NaN``.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math

from .entities import GeoPoint

EARTH_RADIUS_KM = 6_371.0


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def haversine_km(a: GeoPoint, b: GeoPoint) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(a.lat), math.radians(b.lat)
    dlat = math.radians(b.lat - a.lat)
    dlon = math.radians(b.lon - a.lon)

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlon / 2) ** 2
    )
    h = clamp(h, 0.0, 1.0)
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def angular_separation(a: GeoPoint, b: GeoPoint) -> float:
    """Return the central angle in **radians** between two points."""
    if a == b:
        # sin^2 + cos^2 may round to just under 1 and yield a tiny nonzero arc
        return 0.0
    lat1_r, lat2_r = math.radians(a.lat), math.radians(b.lat)
    dlon = math.radians(a.lon - b.lon)

    cos_d = (
        math.sin(lat1_r) * math.sin(lat2_r)
        + math.cos(lat1_r) * math.cos(lat2_r) * math.cos(dlon)
    )
    return math.acos(clamp(cos_d, -1.0, 1.0))
