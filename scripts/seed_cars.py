#!/usr/bin/env python3
"""
Seed the cars table with the sample inventory.

Features:
- Same twelve cars the in-memory catalog serves (ids 1..12)
- Idempotent: safe to run multiple times (clears before seeding)

Usage:
    DATABASE_URL=postgresql+psycopg2://... python scripts/seed_cars.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import delete, text

from carfinder.adapters.sample_cars import SAMPLE_CARS
from carfinder.domain.car import Car
from carfinder.infra.db.models.car import CarRow
from carfinder.infra.db.session import get_session


def to_row(car: Car) -> CarRow:
    return CarRow(
        id=car.id,
        brand=car.brand,
        model=car.model,
        year=car.year,
        price=car.price,
        fuel_type=car.fuel_type,
        transmission=car.transmission,
        seating_capacity=car.seating_capacity,
        mileage=car.mileage,
        body_type=car.body_type,
        description=car.description,
        image_url=car.image_url,
    )


def seed_cars() -> int:
    """
    Replace the contents of the cars table with SAMPLE_CARS.

    Returns:
        Number of cars inserted
    """
    print(f"🌱 Seeding database with {len(SAMPLE_CARS)} sample cars...")

    with get_session() as session:
        # Step 1: Clear existing data (idempotent)
        print("🗑️  Clearing existing cars...")
        deleted_count = session.execute(delete(CarRow)).rowcount
        print(f"   Deleted {deleted_count} existing cars")

        # Step 2: Insert the sample inventory
        rows = [to_row(car) for car in SAMPLE_CARS]
        session.add_all(rows)
        session.flush()

        # Explicit ids bypass the serial sequence; move it past them
        if session.get_bind().dialect.name == "postgresql":
            session.execute(
                text("SELECT setval(pg_get_serial_sequence('cars', 'id'), (SELECT MAX(id) FROM cars))")
            )

        print(f"✅ Successfully seeded {len(rows)} cars!")
        for row in rows[:5]:
            print(f"   {row.id}. {row.year} {row.brand} {row.model} - ${row.price:,.2f}")
        if len(rows) > 5:
            print(f"   ... and {len(rows) - 5} more")

    return len(rows)


if __name__ == "__main__":
    try:
        seed_cars()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
