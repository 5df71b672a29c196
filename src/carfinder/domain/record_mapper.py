"""Turns raw catalog records into application car records."""

from __future__ import annotations

import hashlib
import random
from decimal import Decimal

from carfinder.domain.car import FUEL_TYPES, TRANSMISSIONS, Car, CatalogRecord
from carfinder.domain.catalog_reference import BRAND_IMAGE_URLS, PLACEHOLDER_IMAGE_URL

BASE_PRICE = 10000
PRICE_PER_MODEL_YEAR = 1000
PRICE_JITTER = 5000
MAX_MILEAGE = 100000


def stable_car_id(brand: str, model: str, year: int, body_type: str | None = None) -> int:
    """
    Positive integer id derived from the logical identity of a car.

    The body type is part of the identity: the fallback catalog can serve the
    same (brand, model, year) as a Sedan in one search and as an SUV in
    another. Truncated to 48 bits so the value stays exact in JavaScript
    clients.
    """
    parts = (brand, model, str(year), body_type or "")
    key = "|".join(part.strip().lower() for part in parts).encode("utf-8")
    digest = hashlib.sha256(key).digest()
    return int.from_bytes(digest[:6], "big") or 1


def seating_capacity_for(body_type: str | None) -> int:
    kind = (body_type or "").lower()
    if "suv" in kind:
        return 7
    if "coupe" in kind or "convertible" in kind:
        return 2
    return 5


class RecordMapper:
    """
    Maps a CatalogRecord to a Car.

    Price, fuel type, transmission and mileage are not served by the upstream
    catalog and are synthesized. They are drawn from a random generator seeded
    with (brand, model, year), so mapping the same logical car twice yields the
    same record.
    """

    def map(self, record: CatalogRecord) -> Car:
        rng = random.Random(f"{record.make}|{record.model}|{record.year}")

        price = (
            BASE_PRICE
            + (record.year - 2000) * PRICE_PER_MODEL_YEAR
            + rng.randrange(PRICE_JITTER)
        )
        fuel_type = rng.choice(FUEL_TYPES)
        transmission = rng.choice(TRANSMISSIONS)
        mileage = rng.randrange(MAX_MILEAGE)

        description = record.description or (
            f"{record.year} {record.make} {record.model} - {record.type or 'Sedan'}. "
            f"Fuel type: {fuel_type}, Transmission: {transmission}."
        )

        return Car(
            id=self.id_for(record),
            brand=record.make,
            model=record.model,
            year=record.year,
            price=Decimal(price),
            fuel_type=fuel_type,
            transmission=transmission,
            seating_capacity=seating_capacity_for(record.type),
            mileage=mileage,
            body_type=record.type or None,
            description=description,
            image_url=BRAND_IMAGE_URLS.get(record.make, PLACEHOLDER_IMAGE_URL),
        )

    @staticmethod
    def id_for(record: CatalogRecord) -> int:
        """The upstream id when the record has one, else the stable hash id."""
        return record.id or stable_car_id(record.make, record.model, record.year, record.type)

    def map_all(self, records: list[CatalogRecord]) -> list[Car]:
        return [self.map(record) for record in records]
