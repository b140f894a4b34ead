"""
Shared test fixtures.

Uses a throwaway SQLite file (via aiosqlite) so tests run without
Docker / PostgreSQL.  ``NullPool`` opens a fresh connection per session,
so no connection outlives the event loop of the test that created it.
PostGIS-specific features (Geometry columns) are mocked by using plain
String columns in the test models, and the repositories are subclassed
to target those models.
"""

import os
import tempfile
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String, func
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from src.domain.entities import GeoPoint
from src.infrastructure.repositories import CalculationRepository, UserRepository


# ── Test DB (SQLite file) ─────────────────────────────────────────────

TEST_DB_PATH = os.path.join(tempfile.gettempdir(), f"movement_analyzer_{os.getpid()}.db")
TEST_DB_URL = f"sqlite+aiosqlite:///{TEST_DB_PATH}"

test_engine = create_async_engine(TEST_DB_URL, echo=False, poolclass=NullPool)
TestSessionFactory = async_sessionmaker(
    test_engine, class_=AsyncSession, expire_on_commit=False
)


class TestBase(DeclarativeBase):
    pass


# Mirror the production models but without PostGIS Geometry columns
# (SQLite doesn't support them).

class TestUserModel(TestBase):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(120), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())


class TestCalculationModel(TestBase):
    __tablename__ = "calculations"
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    plant_point = Column(String, nullable=True)  # stub for Geometry
    warehouse_point = Column(String, nullable=True)  # stub for Geometry
    city_point = Column(String, nullable=True)  # stub for Geometry
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
    calculated_at = Column(DateTime, server_default=func.now())


class TestCalculationRepository(CalculationRepository):
    """``CalculationRepository`` against SQLite-friendly test models."""

    model = TestCalculationModel

    def _point(self, point: GeoPoint) -> str:
        return f"POINT({point.lon} {point.lat})"


class TestUserRepository(UserRepository):
    model = TestUserModel


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture(scope="session", autouse=True)
def _remove_test_db_file():
    """Delete the SQLite file once the whole run is finished."""
    yield
    if os.path.exists(TEST_DB_PATH):
        os.remove(TEST_DB_PATH)


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, seed two users, yield a session, then drop everything."""
    async with test_engine.begin() as conn:
        await conn.run_sync(TestBase.metadata.drop_all)
        await conn.run_sync(TestBase.metadata.create_all)

    async with TestSessionFactory() as session:
        session.add(TestUserModel(name="Test User", email="test@example.com"))
        session.add(TestUserModel(name="Other User", email="other@example.com"))
        await session.commit()
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(TestBase.metadata.drop_all)
