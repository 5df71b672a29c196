from __future__ import annotations

from decimal import Decimal

import pytest

from carfinder.domain.car import Car
from carfinder.domain.user import User


@pytest.fixture()
def sample_car() -> Car:
    """Sample car entity for testing."""
    return Car(
        id=4,
        brand="Toyota",
        model="Corolla",
        year=2022,
        price=Decimal("21550"),
        fuel_type="Petrol",
        transmission="Automatic",
        seating_capacity=5,
        mileage=5000,
        body_type="Sedan",
        image_url="https://example.com/corolla.jpg",
    )


@pytest.fixture()
def sample_user() -> User:
    return User(id=1, username="jdoe", password_hash="stored-hash", first_name="Jane")
