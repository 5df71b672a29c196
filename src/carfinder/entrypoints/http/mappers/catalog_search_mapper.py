from __future__ import annotations

from carfinder.domain.car import Car, Paging, SearchFilters, Sorting, SortField, SortOrder
from carfinder.entrypoints.http.dtos.cars import CarResponseDTO, CarSearchQueryDTO
from carfinder.use_cases.search_car_catalog import (
    SearchCarCatalogRequest,
    SearchCarCatalogResponse,
)


def split_csv(value: str | None) -> tuple[str, ...]:
    """'Toyota, Honda,Toyota' -> ('Toyota', 'Honda'). First occurrence wins."""
    if not value:
        return ()
    parts = (part.strip() for part in value.split(","))
    return tuple(dict.fromkeys(part for part in parts if part))


class CatalogSearchMapper:
    """Maps between REST DTOs and domain models for catalog search."""

    @staticmethod
    def to_domain_filters(dto: CarSearchQueryDTO) -> SearchFilters:
        """
        Converts query params to domain filters, splitting comma-joined lists.

        Args:
            dto: The data transfer object containing search query parameters

        Returns:
            SearchFilters: Domain filters with Decimal prices
        """
        return SearchFilters(
            query=dto.query,
            brands=split_csv(dto.brands),
            min_price=dto.min_price,
            max_price=dto.max_price,
            fuel_types=split_csv(dto.fuel_types),
            seating_capacity=dto.seating_capacity,
            body_types=split_csv(dto.body_types),
            year=dto.year,
        )

    @staticmethod
    def to_domain_sorting(dto: CarSearchQueryDTO) -> Sorting:
        """
        Raises:
            SortValidationError: If sort_by names an unknown field
        """
        return Sorting(field=SortField.parse(dto.sort_by), order=SortOrder(dto.sort_order))

    @staticmethod
    def to_domain_paging(dto: CarSearchQueryDTO) -> Paging:
        return Paging(offset=dto.offset, limit=dto.limit)

    @staticmethod
    def to_domain_request(dto: CarSearchQueryDTO) -> SearchCarCatalogRequest:
        """
        Convenience method: builds complete domain request from DTO.

        Args:
            dto: The data transfer object containing search query parameters

        Returns:
            SearchCarCatalogRequest: Complete domain request with filters, sorting and paging
        """
        return SearchCarCatalogRequest(
            filters=CatalogSearchMapper.to_domain_filters(dto),
            sorting=CatalogSearchMapper.to_domain_sorting(dto),
            paging=CatalogSearchMapper.to_domain_paging(dto),
        )

    @staticmethod
    def to_car_response(car: Car) -> CarResponseDTO:
        """
        Converts domain Car entity to REST response DTO.

        Handles Decimal → float conversion at the boundary.
        """
        return CarResponseDTO(
            id=car.id,
            brand=car.brand,
            model=car.model,
            year=car.year,
            price=float(car.price),  # Decimal → JSON number at boundary
            fuel_type=car.fuel_type,
            transmission=car.transmission,
            seating_capacity=car.seating_capacity,
            mileage=car.mileage,
            body_type=car.body_type,
            description=car.description,
            image_url=car.image_url,
        )

    @staticmethod
    def to_response(result: SearchCarCatalogResponse) -> list[CarResponseDTO]:
        return [CatalogSearchMapper.to_car_response(car) for car in result.cars]
