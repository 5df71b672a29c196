from __future__ import annotations

from dataclasses import dataclass

from carfinder.domain.errors import ValidationError
from carfinder.ports.car_catalog_repository import CarCatalogRepository


@dataclass(frozen=True, slots=True)
class ListCarModelsRequest:
    brand: str


@dataclass(frozen=True, slots=True)
class ListCarModelsResponse:
    models: list[str]


class ListCarModels:
    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        self._repository = car_catalog_repository

    def execute(self, request: ListCarModelsRequest) -> ListCarModelsResponse:
        """
        List the models of one brand.

        Raises:
            ValidationError: If brand is blank
        """
        brand = request.brand.strip()
        if not brand:
            raise ValidationError(
                errors=[{"field": "make", "message": "Must not be blank", "code": "REQUIRED"}]
            )
        return ListCarModelsResponse(models=self._repository.list_models(brand))
