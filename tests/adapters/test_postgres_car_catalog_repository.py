"""
Test suite for PostgresCarCatalogRepository.

Runs the real SQL against an in-memory SQLite database seeded with the
sample inventory:
- Text query, nickname pass and IN / range filters as WHERE clauses
- ORDER BY for every SortField, nulls last, ties by id
- OFFSET / LIMIT paging
- NUMERIC → Decimal conversion
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from sqlalchemy.orm import Session

from carfinder.adapters.postgres_car_catalog_repository import PostgresCarCatalogRepository
from carfinder.adapters.sample_cars import SAMPLE_CARS
from carfinder.domain.car import Car, Paging, SearchFilters, Sorting, SortField, SortOrder
from carfinder.infra.db.models.car import CarRow

ALL = Paging(offset=0, limit=100)


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


@pytest.fixture()
def repository(session: Session) -> PostgresCarCatalogRepository:
    session.add_all(to_row(car) for car in SAMPLE_CARS)
    session.flush()
    return PostgresCarCatalogRepository(session=session)


def ids(cars: list[Car]) -> list[int]:
    return [car.id for car in cars]


# ==============================================================================
# Search
# ==============================================================================


def test_search_without_filters_returns_all_by_price(repository: PostgresCarCatalogRepository) -> None:
    result = repository.search(SearchFilters(), Sorting(), ALL)

    assert len(result) == len(SAMPLE_CARS)
    assert [car.price for car in result] == sorted(car.price for car in SAMPLE_CARS)


def test_text_query_is_case_insensitive(repository: PostgresCarCatalogRepository) -> None:
    result = repository.search(SearchFilters(query="TOYOTA"), Sorting(), ALL)

    assert ids(result) == [4, 9]


def test_text_query_matches_brand_and_model_together(repository: PostgresCarCatalogRepository) -> None:
    result = repository.search(SearchFilters(query="honda civic"), Sorting(), ALL)

    assert ids(result) == [6]


def test_text_query_escapes_like_wildcards(repository: PostgresCarCatalogRepository) -> None:
    assert repository.search(SearchFilters(query="%"), Sorting(), ALL) == []


def test_nickname_pass_when_text_matches_nothing(
    repository: PostgresCarCatalogRepository, session: Session
) -> None:
    session.add(
        CarRow(
            brand="Nissan",
            model="GTR",
            year=2021,
            price=Decimal("115000"),
            fuel_type="Petrol",
            transmission="Automatic",
            seating_capacity=4,
            image_url="https://example.com/gtr.jpg",
        )
    )
    session.flush()

    result = repository.search(SearchFilters(query="skyline"), Sorting(), ALL)

    assert [(car.brand, car.model) for car in result] == [("Nissan", "GTR")]


def test_filters_are_combined(repository: PostgresCarCatalogRepository) -> None:
    filters = SearchFilters(
        brands=("Toyota", "Hyundai", "BMW"),
        min_price=Decimal("27000"),
        max_price=Decimal("60000"),
        fuel_types=("Petrol", "Hybrid"),
        seating_capacity=5,
        body_types=("SUV",),
        year=2023,
    )

    result = repository.search(filters, Sorting(), ALL)

    assert ids(result) == [12, 9]
    assert all(Decimal("27000") <= car.price <= Decimal("60000") for car in result)


@pytest.mark.parametrize(
    ("sorting", "expected_first"),
    [
        (Sorting(field=SortField.PRICE, order=SortOrder.DESC), 10),
        (Sorting(field=SortField.MILEAGE), 4),
        (Sorting(field=SortField.BRAND), 7),
        (Sorting(field=SortField.SEATING_CAPACITY), 10),
        (Sorting(field=SortField.YEAR), 1),
    ],
)
def test_sorting(
    repository: PostgresCarCatalogRepository, sorting: Sorting, expected_first: int
) -> None:
    result = repository.search(SearchFilters(), sorting, ALL)

    assert result[0].id == expected_first


def test_paging_applies_offset_and_limit(repository: PostgresCarCatalogRepository) -> None:
    everything = repository.search(SearchFilters(), Sorting(), ALL)

    page = repository.search(SearchFilters(), Sorting(), Paging(offset=4, limit=3))

    assert page == everything[4:7]


# ==============================================================================
# Lookups
# ==============================================================================


def test_get_by_id_returns_domain_car(repository: PostgresCarCatalogRepository) -> None:
    car = repository.get_by_id(10)

    assert car is not None
    assert (car.brand, car.model) == ("Porsche", "911")
    assert isinstance(car.price, Decimal)
    assert car.price == Decimal("115000")


def test_get_by_id_missing_returns_none(repository: PostgresCarCatalogRepository) -> None:
    assert repository.get_by_id(999) is None


def test_distinct_lists(repository: PostgresCarCatalogRepository) -> None:
    assert repository.list_brands()[:3] == ["Audi", "BMW", "Chevrolet"]
    assert repository.list_types() == ["Coupe", "Hatchback", "SUV", "Sedan"]
    assert repository.list_models("toyota") == ["Corolla", "RAV4"]
