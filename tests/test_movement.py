"""Unit tests for the warehouse angle and movement classification."""

import math

import pytest

from src.domain.entities import GeoPoint, MovementAnalysis
from src.domain.enums import MovementDirection
from src.domain.movement import analyze_movement, angle_at_warehouse, is_backward

PLANT = GeoPoint(0, 0)
WAREHOUSE = GeoPoint(0, 10)


class TestAngleAtWarehouse:
    def test_collinear_forward_is_straight_angle(self):
        angle = angle_at_warehouse(PLANT, WAREHOUSE, GeoPoint(0, 20))
        assert angle == pytest.approx(180.0, abs=1e-4)

    def test_city_between_plant_and_warehouse_is_zero(self):
        angle = angle_at_warehouse(PLANT, WAREHOUSE, GeoPoint(0, 5))
        assert angle == pytest.approx(0.0, abs=1e-4)

    def test_right_angle(self):
        angle = angle_at_warehouse(PLANT, WAREHOUSE, GeoPoint(10, 10))
        assert angle == pytest.approx(90.0, abs=1e-6)

    def test_warehouse_at_plant_is_zero(self):
        p = GeoPoint(45.3, 12.7)
        assert angle_at_warehouse(p, p, GeoPoint(40.0, 20.0)) == 0.0

    def test_warehouse_at_city_is_zero(self):
        c = GeoPoint(-33.9, 18.4)
        assert angle_at_warehouse(GeoPoint(-26.2, 28.0), c, c) == 0.0

    @pytest.mark.parametrize(
        "plant, warehouse, city",
        [
            (GeoPoint(0, 0), GeoPoint(0, 180), GeoPoint(10, 20)),
            (GeoPoint(90, 0), GeoPoint(-90, 0), GeoPoint(0, 45)),
            (GeoPoint(0, 0), GeoPoint(0, 1e-9), GeoPoint(0, 2e-9)),
            (GeoPoint(0, 0), GeoPoint(0, 10), GeoPoint(0, -170)),
            (GeoPoint(12.0, 179.9999), GeoPoint(12.0, -179.9999), GeoPoint(12.5, 179.0)),
        ],
    )
    def test_degenerate_inputs_stay_in_range(self, plant, warehouse, city):
        angle = angle_at_warehouse(plant, warehouse, city)
        assert math.isfinite(angle)
        assert 0.0 <= angle <= 180.0


class TestClassification:
    def test_acute_is_backward(self):
        assert is_backward(45.0)

    def test_ninety_is_forward(self):
        assert not is_backward(90.0)

    def test_just_under_ninety_is_backward(self):
        assert is_backward(89.9999999995)

    def test_obtuse_is_forward(self):
        assert not is_backward(135.0)


class TestAnalyzeMovement:
    def test_collinear_forward(self):
        result = analyze_movement(PLANT, WAREHOUSE, GeoPoint(0, 20))
        assert result.angle_degrees == pytest.approx(180.0, abs=1e-4)
        assert result.is_backward_movement is False
        assert result.direction is MovementDirection.FORWARD
        assert result.distance_plant_warehouse_km == pytest.approx(1111.95, abs=0.01)
        assert result.distance_warehouse_city_km == pytest.approx(1111.95, abs=0.01)
        assert result.distance_plant_city_km == pytest.approx(2223.90, abs=0.01)

    def test_reversal_is_backward(self):
        result = analyze_movement(PLANT, WAREHOUSE, GeoPoint(0, 5))
        assert result.angle_degrees == pytest.approx(0.0, abs=1e-4)
        assert result.is_backward_movement is True
        assert result.direction is MovementDirection.BACKWARD

    def test_right_angle_is_forward(self):
        result = analyze_movement(PLANT, WAREHOUSE, GeoPoint(10, 10))
        assert result.angle_degrees == 90.0
        assert result.is_backward_movement is False

    def test_warehouse_at_plant_is_zero_and_forward(self):
        p = GeoPoint(45.3, 12.7)
        result = analyze_movement(p, p, GeoPoint(40.0, 20.0))
        assert result.angle_degrees == 0.0
        assert result.is_backward_movement is False
        assert result.distance_plant_warehouse_km == 0.0

    def test_triangle_inequality(self):
        result = analyze_movement(
            GeoPoint(18.5204, 73.8567),
            GeoPoint(21.1458, 79.0882),
            GeoPoint(28.6139, 77.2090),
        )
        pw = result.distance_plant_warehouse_km
        wc = result.distance_warehouse_city_km
        pc = result.distance_plant_city_km
        assert pc <= pw + wc + 1e-9
        assert pw <= pc + wc + 1e-9
        assert wc <= pw + pc + 1e-9

    def test_antipodal_does_not_raise(self):
        result = analyze_movement(GeoPoint(0, 0), GeoPoint(0, 180), GeoPoint(10, 20))
        assert 0.0 <= result.angle_degrees <= 180.0

    def test_same_inputs_same_outputs(self):
        args = (GeoPoint(13.08, 80.27), GeoPoint(17.38, 78.49), GeoPoint(28.61, 77.21))
        assert analyze_movement(*args) == analyze_movement(*args)

    def test_result_is_immutable(self):
        result = analyze_movement(PLANT, WAREHOUSE, GeoPoint(0, 20))
        with pytest.raises(AttributeError):
            result.angle_degrees = 0.0  # type: ignore[misc]

    def test_as_dict_keys(self):
        result = analyze_movement(PLANT, WAREHOUSE, GeoPoint(0, 20))
        assert set(result.as_dict()) == {
            "angle_degrees",
            "is_backward_movement",
            "distance_plant_warehouse_km",
            "distance_warehouse_city_km",
            "distance_plant_city_km",
        }
        assert isinstance(result, MovementAnalysis)
