"""
Movement Analyzer
=================

Classifies a plant -> warehouse -> city movement as *forward* or *backward*
from the interior angle of the spherical triangle at the warehouse vertex.

Angle at the warehouse (spherical law of cosines)
-------------------------------------------------
With the triangle sides measured as central angles

    a = d(plant, city)        -- opposite the warehouse
    b = d(plant, warehouse)
    c = d(warehouse, city)

the interior angle W satisfies

    cos(W) = (cos(a) - cos(b) cos(c)) / (sin(b) sin(c))

* If ``sin(b) sin(c) == 0`` (the warehouse coincides with the plant or the
  city) the angle is defined as 0 degrees and the movement as forward.
* The ratio is clamped to [-1, 1] before ``acos``.

Classification
--------------
An acute angle (< 90 degrees) means the path folds back on itself and is a
**backward** movement.  90 degrees and above is **forward**.

The analyzer is pure and never raises for coordinates inside the valid
latitude / longitude ranges.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math
from typing import Optional

from .distance import angular_separation, clamp, haversine_km
from .entities import GeoPoint, MovementAnalysis
from .enums import BACKWARD_ANGLE_THRESHOLD_DEG


def _interior_angle(
    plant: GeoPoint, warehouse: GeoPoint, city: GeoPoint
) -> Optional[float]:
    """Angle at *warehouse* in degrees, or ``None`` when a side has zero length."""
    a = angular_separation(plant, city)
    b = angular_separation(plant, warehouse)
    c = angular_separation(warehouse, city)

    denominator = math.sin(b) * math.sin(c)
    if denominator == 0:
        return None

    numerator = math.cos(a) - math.cos(b) * math.cos(c)
    return math.degrees(math.acos(clamp(numerator / denominator, -1.0, 1.0)))


def angle_at_warehouse(
    plant: GeoPoint, warehouse: GeoPoint, city: GeoPoint
) -> float:
    """Return the interior angle at *warehouse* in degrees, in [0, 180]."""
    angle = _interior_angle(plant, warehouse, city)
    return 0.0 if angle is None else angle


def is_backward(angle_degrees: float) -> bool:
    return angle_degrees < BACKWARD_ANGLE_THRESHOLD_DEG


def analyze_movement(
    plant: GeoPoint, warehouse: GeoPoint, city: GeoPoint
) -> MovementAnalysis:
    """Compute leg distances, the warehouse angle and the direction.

    A warehouse that coincides with the plant or the city reports an angle
    of 0 degrees and is classified as forward.
    """
    angle = _interior_angle(plant, warehouse, city)
    return MovementAnalysis(
        angle_degrees=0.0 if angle is None else angle,
        is_backward_movement=angle is not None and is_backward(angle),
        distance_plant_warehouse_km=haversine_km(plant, warehouse),
        distance_warehouse_city_km=haversine_km(warehouse, city),
        distance_plant_city_km=haversine_km(plant, city),
    )
