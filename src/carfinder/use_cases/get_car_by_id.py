"""Get car by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from carfinder.domain.car import Car
from carfinder.domain.errors import NotFoundError, ValidationError
from carfinder.ports.car_catalog_repository import CarCatalogRepository


@dataclass(frozen=True, slots=True)
class GetCarByIdRequest:
    """Request to get a car by ID."""

    car_id: int


@dataclass(frozen=True, slots=True)
class GetCarByIdResponse:
    """Response containing the requested car."""

    car: Car


class GetCarById:
    """
    Use case for retrieving a single car by ID.

    Responsibilities:
    - Reject non-positive ids
    - Delegate to repository for data access
    - Raise NotFoundError if car doesn't exist
    """

    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        """
        Initialize use case with dependencies.

        Args:
            car_catalog_repository: Repository for car data access
        """
        self._repository = car_catalog_repository

    def execute(self, request: GetCarByIdRequest) -> GetCarByIdResponse:
        """
        Execute the get car by ID use case.

        Args:
            request: Request containing car_id

        Returns:
            GetCarByIdResponse with the car

        Raises:
            ValidationError: If car_id is not a positive integer
            NotFoundError: If car with given ID doesn't exist
        """
        if request.car_id <= 0:
            raise ValidationError(
                errors=[
                    {
                        "field": "car_id",
                        "message": "Must be a positive integer",
                        "code": "INVALID_ID",
                    }
                ]
            )

        car = self._repository.get_by_id(request.car_id)

        if car is None:
            raise NotFoundError(resource="Car", identifier=str(request.car_id))

        return GetCarByIdResponse(car=car)
