"""Sample inventory served by the in-memory catalog and loaded by scripts/seed_cars.py."""

from __future__ import annotations

from decimal import Decimal

from carfinder.domain.car import Car

_UNSPLASH = "https://images.unsplash.com/photo-{}?ixlib=rb-1.2.1&auto=format&fit=crop&w=800&q=80"

SAMPLE_CARS: tuple[Car, ...] = (
    Car(
        id=1,
        brand="Ford",
        model="Mustang GT",
        year=2022,
        price=Decimal("45999"),
        fuel_type="Petrol",
        transmission="Automatic",
        seating_capacity=4,
        mileage=25000,
        body_type="Coupe",
        description="The Ford Mustang GT Premium comes with a powerful 5.0L V8 engine producing 460 horsepower.",
        image_url=_UNSPLASH.format("1549317661-bd32c8ce0db2"),
    ),
    Car(
        id=2,
        brand="Mercedes-Benz",
        model="E-Class",
        year=2023,
        price=Decimal("58200"),
        fuel_type="Diesel",
        transmission="Automatic",
        seating_capacity=5,
        mileage=12000,
        body_type="Sedan",
        description="Luxurious and powerful with premium comfort features.",
        image_url=_UNSPLASH.format("1595908129746-57ca1a63dd4d"),
    ),
    Car(
        id=3,
        brand="Tesla",
        model="Model 3",
        year=2023,
        price=Decimal("42990"),
        fuel_type="Electric",
        transmission="Automatic",
        seating_capacity=5,
        mileage=18000,
        body_type="Sedan",
        description="Revolutionary electric vehicle with autopilot features.",
        image_url=_UNSPLASH.format("1623080522068-3b6af3be9d52"),
    ),
    Car(
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
        description="Reliable and fuel-efficient compact sedan.",
        image_url=_UNSPLASH.format("1542230387-bfc77d70f34f"),
    ),
    Car(
        id=5,
        brand="BMW",
        model="X5",
        year=2023,
        price=Decimal("63900"),
        fuel_type="Petrol",
        transmission="Automatic",
        seating_capacity=7,
        mileage=30000,
        body_type="SUV",
        description="Luxury SUV with powerful performance and spacious interior.",
        image_url=_UNSPLASH.format("1580273916550-e323be2ae537"),
    ),
    Car(
        id=6,
        brand="Honda",
        model="Civic",
        year=2022,
        price=Decimal("22350"),
        fuel_type="Petrol",
        transmission="Manual",
        seating_capacity=5,
        mileage=8500,
        body_type="Hatchback",
        description="Sporty and efficient compact car with advanced tech features.",
        image_url=_UNSPLASH.format("1603584173870-7f23fdae1b7a"),
    ),
    Car(
        id=7,
        brand="Audi",
        model="Q7",
        year=2023,
        price=Decimal("57500"),
        fuel_type="Diesel",
        transmission="Automatic",
        seating_capacity=7,
        mileage=15000,
        body_type="SUV",
        description="Premium luxury SUV with quattro all-wheel drive.",
        image_url=_UNSPLASH.format("1614377282888-0d84e3c01a0f"),
    ),
    Car(
        id=8,
        brand="Chevrolet",
        model="Camaro",
        year=2022,
        price=Decimal("39000"),
        fuel_type="Petrol",
        transmission="Automatic",
        seating_capacity=4,
        mileage=20000,
        body_type="Coupe",
        description="Iconic American muscle car with aggressive styling.",
        image_url=_UNSPLASH.format("1585503418537-88331351ad99"),
    ),
    Car(
        id=9,
        brand="Toyota",
        model="RAV4",
        year=2023,
        price=Decimal("28500"),
        fuel_type="Hybrid",
        transmission="Automatic",
        seating_capacity=5,
        mileage=10000,
        body_type="SUV",
        description="Reliable compact SUV with excellent fuel economy.",
        image_url=_UNSPLASH.format("1581540222194-0def2dda95b8"),
    ),
    Car(
        id=10,
        brand="Porsche",
        model="911",
        year=2023,
        price=Decimal("115000"),
        fuel_type="Petrol",
        transmission="Automatic",
        seating_capacity=2,
        mileage=5000,
        body_type="Coupe",
        description="Legendary sports car with uncompromising performance.",
        image_url=_UNSPLASH.format("1611651338590-5a8e5d6ccf9a"),
    ),
    Car(
        id=11,
        brand="Volkswagen",
        model="Golf",
        year=2022,
        price=Decimal("24500"),
        fuel_type="Petrol",
        transmission="Manual",
        seating_capacity=5,
        mileage=12000,
        body_type="Hatchback",
        description="Versatile hatchback with German engineering.",
        image_url=_UNSPLASH.format("1471444928139-48c5bf5173f8"),
    ),
    Car(
        id=12,
        brand="Hyundai",
        model="Tucson",
        year=2023,
        price=Decimal("27000"),
        fuel_type="Petrol",
        transmission="Automatic",
        seating_capacity=5,
        mileage=8000,
        body_type="SUV",
        description="Modern compact SUV with bold styling and tech features.",
        image_url=_UNSPLASH.format("1605618313023-df957d610656"),
    ),
)
