"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

Each repository receives an ``AsyncSession`` (unit-of-work) and exposes
domain-relevant queries only.  ``model`` is a class attribute so the same
queries can run against substitute models (e.g. without PostGIS columns).
"""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import CalculationModel, UserModel
from src.domain.entities import GeoPoint, MovementAnalysis
from src.domain.summary import MovementSummary, build_summary


class CalculationRepository:
    model: Any = CalculationModel

    def __init__(self, session: AsyncSession):
        self.session = session

    def _point(self, point: GeoPoint) -> Any:
        """PostGIS geometry for *point* (x = longitude, y = latitude)."""
        from geoalchemy2.functions import ST_MakePoint, ST_SetSRID

        return ST_SetSRID(ST_MakePoint(point.lon, point.lat), 4326)

    async def create_calculation(
        self,
        *,
        user_id: int,
        plant: GeoPoint,
        warehouse: GeoPoint,
        city: GeoPoint,
        analysis: MovementAnalysis,
    ) -> Any:
        calculation = self.model(
            user_id=user_id,
            plant_point=self._point(plant),
            warehouse_point=self._point(warehouse),
            city_point=self._point(city),
            plant_lat=plant.lat,
            plant_lon=plant.lon,
            warehouse_lat=warehouse.lat,
            warehouse_lon=warehouse.lon,
            city_lat=city.lat,
            city_lon=city.lon,
            **analysis.as_dict(),
        )
        self.session.add(calculation)
        await self.session.flush()
        return calculation

    async def get_by_id(self, calculation_id: int) -> Optional[Any]:
        return await self.session.get(self.model, calculation_id)

    async def list_for_user(self, user_id: int) -> list[Any]:
        """All of a user's calculations, newest first."""
        result = await self.session.execute(
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.calculated_at.desc(), self.model.id.desc())
        )
        return list(result.scalars().all())

    async def summary_for_user(self, user_id: int) -> MovementSummary:
        """Counts and average angles per direction, in one grouped query."""
        result = await self.session.execute(
            select(
                self.model.is_backward_movement,
                func.count(),
                func.avg(self.model.angle_degrees),
            )
            .where(self.model.user_id == user_id)
            .group_by(self.model.is_backward_movement)
        )
        stats = {bool(backward): (count, avg) for backward, count, avg in result.all()}
        backward_count, backward_avg = stats.get(True, (0, None))
        forward_count, forward_avg = stats.get(False, (0, None))
        return build_summary(
            total=backward_count + forward_count,
            backward=backward_count,
            avg_backward_angle=backward_avg,
            avg_forward_angle=forward_avg,
        )


class UserRepository:
    model: Any = UserModel

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int) -> Optional[Any]:
        return await self.session.get(self.model, user_id)
