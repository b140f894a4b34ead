"""Initial schema with PostGIS extension, users and calculations.

Revision ID: 001
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa
from geoalchemy2 import Geometry


revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Enable PostGIS extension
    op.execute("CREATE EXTENSION IF NOT EXISTS postgis")

    # ── users ─────────────────────────────────────────────────────────
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("email", sa.String(255), unique=True, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )

    # ── calculations ──────────────────────────────────────────────────
    op.create_table(
        "calculations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False
        ),
        sa.Column("plant_point", Geometry("POINT", srid=4326), nullable=False),
        sa.Column(
            "warehouse_point", Geometry("POINT", srid=4326), nullable=False
        ),
        sa.Column("city_point", Geometry("POINT", srid=4326), nullable=False),
        sa.Column("plant_lat", sa.Float, nullable=False),
        sa.Column("plant_lon", sa.Float, nullable=False),
        sa.Column("warehouse_lat", sa.Float, nullable=False),
        sa.Column("warehouse_lon", sa.Float, nullable=False),
        sa.Column("city_lat", sa.Float, nullable=False),
        sa.Column("city_lon", sa.Float, nullable=False),
        sa.Column("angle_degrees", sa.Float, nullable=False),
        sa.Column("is_backward_movement", sa.Boolean, nullable=False),
        sa.Column("distance_plant_warehouse_km", sa.Float, nullable=False),
        sa.Column("distance_warehouse_city_km", sa.Float, nullable=False),
        sa.Column("distance_plant_city_km", sa.Float, nullable=False),
        sa.Column(
            "calculated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "idx_calculations_plant",
        "calculations",
        ["plant_point"],
        postgresql_using="gist",
    )
    op.create_index(
        "idx_calculations_warehouse",
        "calculations",
        ["warehouse_point"],
        postgresql_using="gist",
    )
    op.create_index(
        "idx_calculations_city",
        "calculations",
        ["city_point"],
        postgresql_using="gist",
    )
    op.create_index(
        "idx_calculations_user_time", "calculations", ["user_id", "calculated_at"]
    )
    op.create_index(
        "idx_calculations_user_direction",
        "calculations",
        ["user_id", "is_backward_movement"],
    )


def downgrade() -> None:
    op.drop_table("calculations")
    op.drop_table("users")
