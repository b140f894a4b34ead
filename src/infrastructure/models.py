"""
SQLAlchemy ORM models  (maps to PostgreSQL + PostGIS).

Tables
------
* ``users``         -- owners of calculations
* ``calculations``  -- one analyzed plant / warehouse / city movement

Each movement point is stored twice: as a PostGIS ``POINT`` (SRID 4326)
for spatial queries, and as plain floats for fast reads.

Indexes
-------
* **GIST** on the three point columns.
* **B-Tree** on ``(user_id, calculated_at)`` for history listing and on
  ``(user_id, is_backward_movement)`` for summary aggregates.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    func,
)
from geoalchemy2 import Geometry

from .database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(120), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class CalculationModel(Base):
    __tablename__ = "calculations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    plant_point = Column(Geometry("POINT", srid=4326), nullable=False)
    warehouse_point = Column(Geometry("POINT", srid=4326), nullable=False)
    city_point = Column(Geometry("POINT", srid=4326), nullable=False)

    plant_lat = Column(Float, nullable=False)
    plant_lon = Column(Float, nullable=False)
    warehouse_lat = Column(Float, nullable=False)
    warehouse_lon = Column(Float, nullable=False)
    city_lat = Column(Float, nullable=False)
    city_lon = Column(Float, nullable=False)

    angle_degrees = Column(Float, nullable=False)
    is_backward_movement = Column(Boolean, nullable=False)
    distance_plant_warehouse_km = Column(Float, nullable=False)
    distance_warehouse_city_km = Column(Float, nullable=False)
    distance_plant_city_km = Column(Float, nullable=False)

    calculated_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("idx_calculations_plant", "plant_point", postgresql_using="gist"),
        Index(
            "idx_calculations_warehouse", "warehouse_point", postgresql_using="gist"
        ),
        Index("idx_calculations_city", "city_point", postgresql_using="gist"),
        Index("idx_calculations_user_time", "user_id", "calculated_at"),
        Index("idx_calculations_user_direction", "user_id", "is_backward_movement"),
    )
