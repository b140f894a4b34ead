"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from src.domain.entities import GeoPoint


# ── Requests ──────────────────────────────────────────────────────────


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lon: float = Field(..., ge=-180, le=180, allow_inf_nan=False)

    def to_domain(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lon=self.lon)


class CalculationRequest(BaseModel):
    user_id: int
    plant: GeoPointSchema
    warehouse: GeoPointSchema
    city: GeoPointSchema


# ── Responses ─────────────────────────────────────────────────────────


class MovementAnalysisResponse(BaseModel):
    angle_degrees: float
    is_backward_movement: bool
    distance_plant_warehouse_km: float
    distance_warehouse_city_km: float
    distance_plant_city_km: float

    model_config = {"from_attributes": True}


class CalculationResponse(MovementAnalysisResponse):
    id: int
    user_id: int
    plant: GeoPointSchema
    warehouse: GeoPointSchema
    city: GeoPointSchema
    calculated_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, calc) -> "CalculationResponse":
        return cls(
            id=calc.id,
            user_id=calc.user_id,
            plant=GeoPointSchema(lat=calc.plant_lat, lon=calc.plant_lon),
            warehouse=GeoPointSchema(lat=calc.warehouse_lat, lon=calc.warehouse_lon),
            city=GeoPointSchema(lat=calc.city_lat, lon=calc.city_lon),
            angle_degrees=calc.angle_degrees,
            is_backward_movement=calc.is_backward_movement,
            distance_plant_warehouse_km=calc.distance_plant_warehouse_km,
            distance_warehouse_city_km=calc.distance_warehouse_city_km,
            distance_plant_city_km=calc.distance_plant_city_km,
            calculated_at=calc.calculated_at,
        )


class UploadRowResponse(MovementAnalysisResponse):
    row: int
    plant: GeoPointSchema
    warehouse: GeoPointSchema
    city: GeoPointSchema


class UploadResponse(BaseModel):
    results: list[UploadRowResponse] = []
    errors: list[str] = []


class SummaryResponse(BaseModel):
    total_calculations: int
    backward_movements: int
    forward_movements: int
    percentage_backward: float
    percentage_forward: float
    average_backward_angle: float
    average_forward_angle: float

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
