from __future__ import annotations

from dataclasses import dataclass

from carfinder.ports.car_catalog_repository import CarCatalogRepository


@dataclass(frozen=True, slots=True)
class ListCarBrandsResponse:
    brands: list[str]


class ListCarBrands:
    """Known car brands, from the upstream catalog or the configured store."""

    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        self._repository = car_catalog_repository

    def execute(self) -> ListCarBrandsResponse:
        return ListCarBrandsResponse(brands=self._repository.list_brands())
