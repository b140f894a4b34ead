"""
Domain value objects.

``GeoPoint`` and ``MovementAnalysis`` are immutable: an analysis is a pure
function of its three input points and never changes after it is built.
Range validation of coordinates is the caller's job (request schemas and
the CSV importer); these types trust their inputs.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from .enums import MovementDirection


class MovementError(Exception):
    """Base class for errors raised by the movement domain."""


class CsvFormatError(MovementError):
    """Raised when an uploaded CSV cannot be read as a movement table."""


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lon: float


@dataclass(frozen=True)
class MovementAnalysis:
    angle_degrees: float
    is_backward_movement: bool
    distance_plant_warehouse_km: float
    distance_warehouse_city_km: float
    distance_plant_city_km: float

    @property
    def direction(self) -> MovementDirection:
        if self.is_backward_movement:
            return MovementDirection.BACKWARD
        return MovementDirection.FORWARD

    def as_dict(self) -> dict[str, float | bool]:
        return asdict(self)


@dataclass(frozen=True)
class MovementRow:
    """One accepted row of a batch import: its inputs and the analysis."""

    row_number: int
    plant: GeoPoint
    warehouse: GeoPoint
    city: GeoPoint
    analysis: MovementAnalysis
