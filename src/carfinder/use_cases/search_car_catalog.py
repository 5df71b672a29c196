from __future__ import annotations

from dataclasses import dataclass, field

from carfinder.domain.car import (
    Car,
    Paging,
    SearchFilters,
    Sorting,
)
from carfinder.ports.car_catalog_repository import CarCatalogRepository


@dataclass(frozen=True, slots=True)
class SearchCarCatalogRequest:
    filters: SearchFilters = field(default_factory=SearchFilters)
    sorting: Sorting = field(default_factory=Sorting)
    paging: Paging = field(default_factory=Paging)


@dataclass(frozen=True, slots=True)
class SearchCarCatalogResponse:
    cars: list[Car]


class SearchCarCatalog:
    """
    Car catalog search with filters, sorting and pagination.

    This use case validates the request and delegates filtering, sorting and
    paging to the repository adapter. No filtering logic lives here.
    """

    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        self._repository = car_catalog_repository

    def execute(self, request: SearchCarCatalogRequest) -> SearchCarCatalogResponse:
        """
        Execute catalog search.

        Validates request parameters before delegating to repository.
        This is the single source of validation (contract programming).

        Args:
            request: Search parameters (filters, sorting and paging)

        Returns:
            Response containing the requested page of matching cars

        Raises:
            PagingValidationError: If paging parameters are invalid
            FilterValidationError: If filter parameters are invalid
        """
        request.filters.validate()
        request.paging.validate()

        cars = self._repository.search(
            filters=request.filters,
            sorting=request.sorting,
            paging=request.paging,
        )

        return SearchCarCatalogResponse(cars=cars)
