"""Domain enumerations and classification constants."""

import enum


class MovementDirection(str, enum.Enum):
    FORWARD = "FORWARD"
    BACKWARD = "BACKWARD"


# Interior angle at the warehouse below which a movement folds back.
# Exactly 90 degrees counts as forward.
BACKWARD_ANGLE_THRESHOLD_DEG = 90.0

# Columns an uploaded movement CSV must carry.
CSV_COLUMNS: tuple[str, ...] = (
    "plant_lat",
    "plant_lon",
    "warehouse_lat",
    "warehouse_lon",
    "city_lat",
    "city_lon",
)
