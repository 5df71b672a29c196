"""
In-memory filter/search pipeline over car records.

Stages run in a fixed order: text query, brand, price, fuel type, seating,
body type, year, sort, paginate. Repositories that hold their cars in memory
(seed data, upstream results, fallback catalog) all search through here.
"""

from __future__ import annotations

from typing import Iterable

from carfinder.domain.car import Car, Paging, SearchFilters, Sorting, SortOrder
from carfinder.domain.catalog_reference import SPECIFIC_MODEL_ALIASES


def matches_text(car: Car, term: str) -> bool:
    brand = car.brand.lower()
    model = car.model.lower()
    return (
        term in brand
        or term in model
        or term in (car.body_type or "").lower()
        or term in car.fuel_type.lower()
        or term in str(car.year)
        or term in f"{brand} {model}"
    )


def apply_text_query(cars: list[Car], query: str | None) -> list[Car]:
    """
    Substring match on brand, model, body type, fuel type and year.

    When nothing matches and the query is a known model nickname, retry with
    an exact brand match plus a substring model match.
    """
    if not query:
        return cars

    term = query.strip().lower()
    if not term:
        return cars

    matches = [car for car in cars if matches_text(car, term)]
    if matches or term not in SPECIFIC_MODEL_ALIASES:
        return matches

    alias_brand, alias_model = SPECIFIC_MODEL_ALIASES[term]
    return [
        car
        for car in cars
        if car.brand.lower() == alias_brand.lower()
        and alias_model.lower() in car.model.lower()
    ]


def apply_filters(cars: Iterable[Car], filters: SearchFilters) -> list[Car]:
    """Apply every non-text filter with AND semantics."""
    result = list(cars)

    if filters.brands:
        result = [car for car in result if car.brand in filters.brands]
    if filters.min_price is not None:
        result = [car for car in result if car.price >= filters.min_price]
    if filters.max_price is not None:
        result = [car for car in result if car.price <= filters.max_price]
    if filters.fuel_types:
        result = [car for car in result if car.fuel_type in filters.fuel_types]
    if filters.seating_capacity is not None:
        result = [car for car in result if car.seating_capacity == filters.seating_capacity]
    if filters.body_types:
        result = [
            car for car in result if car.body_type and car.body_type in filters.body_types
        ]
    if filters.year is not None:
        result = [car for car in result if car.year == filters.year]

    return result


def sort_cars(cars: Iterable[Car], sorting: Sorting) -> list[Car]:
    """
    Sort by the requested field, ties broken by id.

    Cars without a value for the field (e.g. unknown mileage) always go last.
    """
    present: list[Car] = []
    missing: list[Car] = []
    for car in cars:
        (missing if sorting.field.value_of(car) is None else present).append(car)

    descending = sorting.order is SortOrder.DESC
    present.sort(key=lambda car: car.id)
    present.sort(key=sorting.field.value_of, reverse=descending)
    missing.sort(key=lambda car: car.id)
    return present + missing


def paginate(cars: list[Car], paging: Paging) -> list[Car]:
    return cars[paging.offset : paging.offset + paging.limit]


def search_cars(
    cars: list[Car],
    filters: SearchFilters,
    sorting: Sorting,
    paging: Paging,
) -> list[Car]:
    """Run the full pipeline and return one page of results."""
    matched = apply_text_query(cars, filters.query)
    filtered = apply_filters(matched, filters)
    return paginate(sort_cars(filtered, sorting), paging)
