from __future__ import annotations

from dataclasses import dataclass

from carfinder.ports.car_catalog_repository import CarCatalogRepository


@dataclass(frozen=True, slots=True)
class ListCarTypesResponse:
    types: list[str]


class ListCarTypes:
    """Known body types (Sedan, SUV, ...)."""

    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        self._repository = car_catalog_repository

    def execute(self) -> ListCarTypesResponse:
        return ListCarTypesResponse(types=self._repository.list_types())
