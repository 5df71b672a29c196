from __future__ import annotations

from typing import Iterable

from carfinder.adapters.sample_cars import SAMPLE_CARS
from carfinder.domain.car import Car, Paging, SearchFilters, Sorting
from carfinder.domain.car_search import search_cars
from carfinder.ports.car_catalog_repository import CarCatalogRepository


class InMemoryCarCatalogRepository(CarCatalogRepository):
    """
    Catalog held in a Python list.

    - Defaults to the sample inventory
    - Runs the shared text/filter/sort/paginate pipeline
    - Brand, type and model lists are derived from the stored cars
    """

    def __init__(self, cars: Iterable[Car] = SAMPLE_CARS) -> None:
        self._cars = list(cars)

    def search(self, filters: SearchFilters, sorting: Sorting, paging: Paging) -> list[Car]:
        # Trust that UseCase has validated inputs (contract programming)
        return search_cars(self._cars, filters, sorting, paging)

    def get_by_id(self, car_id: int) -> Car | None:
        return next((car for car in self._cars if car.id == car_id), None)

    def list_brands(self) -> list[str]:
        return sorted({car.brand for car in self._cars})

    def list_types(self) -> list[str]:
        return sorted({car.body_type for car in self._cars if car.body_type})

    def list_models(self, brand: str) -> list[str]:
        wanted = brand.lower()
        return sorted({car.model for car in self._cars if car.brand.lower() == wanted})
