"""
Seed script -- populates the database with sample data for reviewers.

Run after migrations:
    python seed.py

Creates:
  - 3 sample users
  - 8 sample calculations (forward and backward movements across India)
    analyzed with the same code path as the API
"""

import asyncio

from sqlalchemy import text

from src.domain.entities import GeoPoint
from src.domain.movement import analyze_movement
from src.infrastructure.database import async_session_factory, engine
from src.infrastructure.models import UserModel
from src.infrastructure.repositories import CalculationRepository


USERS = [
    {"name": "Aarav Sharma", "email": "aarav@example.com"},
    {"name": "Priya Patel", "email": "priya@example.com"},
    {"name": "Rohan Mehta", "email": "rohan@example.com"},
]

# Plants, warehouses and cities (lat, lon)
PUNE_PLANT = (18.5204, 73.8567)
CHENNAI_PLANT = (13.0827, 80.2707)
NAGPUR_WH = (21.1458, 79.0882)
HYDERABAD_WH = (17.3850, 78.4867)
MUMBAI_WH = (19.0760, 72.8777)
DELHI = (28.6139, 77.2090)
KOLKATA = (22.5726, 88.3639)
BENGALURU = (12.9716, 77.5946)
AHMEDABAD = (23.0225, 72.5714)

# (user index, plant, warehouse, city)
MOVEMENTS = [
    (0, PUNE_PLANT, NAGPUR_WH, DELHI),  # forward
    (0, PUNE_PLANT, NAGPUR_WH, KOLKATA),  # forward
    (0, PUNE_PLANT, HYDERABAD_WH, MUMBAI_WH),  # backward
    (1, CHENNAI_PLANT, HYDERABAD_WH, DELHI),  # forward
    (1, CHENNAI_PLANT, NAGPUR_WH, BENGALURU),  # backward
    (1, CHENNAI_PLANT, MUMBAI_WH, AHMEDABAD),  # forward
    (2, PUNE_PLANT, MUMBAI_WH, AHMEDABAD),  # forward
    (2, CHENNAI_PLANT, CHENNAI_PLANT, KOLKATA),  # warehouse at the plant
]


async def seed():
    async with async_session_factory() as session:
        # Check if already seeded
        result = await session.execute(text("SELECT count(*) FROM users"))
        if result.scalar() > 0:
            print("Database already seeded. Skipping.")
            return

        # ── Users ─────────────────────────────────────────────────────
        user_models = []
        for u in USERS:
            m = UserModel(name=u["name"], email=u["email"])
            session.add(m)
            user_models.append(m)
        await session.flush()
        print(f"  Created {len(user_models)} users")

        # ── Calculations ──────────────────────────────────────────────
        repo = CalculationRepository(session)
        backward = 0
        for user_idx, plant, warehouse, city in MOVEMENTS:
            p, w, c = GeoPoint(*plant), GeoPoint(*warehouse), GeoPoint(*city)
            analysis = analyze_movement(p, w, c)
            backward += analysis.is_backward_movement
            await repo.create_calculation(
                user_id=user_models[user_idx].id,
                plant=p,
                warehouse=w,
                city=c,
                analysis=analysis,
            )
        print(
            f"  Created {len(MOVEMENTS)} calculations "
            f"({backward} backward, {len(MOVEMENTS) - backward} forward)"
        )

        await session.commit()
        print("\nSeed complete!")


async def main():
    print("Seeding database...")
    await seed()
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
