from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from carfinder.domain.errors import ValidationError

FUEL_TYPES = ("Petrol", "Diesel", "Electric", "Hybrid")
TRANSMISSIONS = ("Automatic", "Manual")


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


class SortValidationError(ValidationError):
    """Raised when a sort field or order is not recognised."""

    pass


@dataclass(frozen=True, slots=True)
class Car:
    id: int
    brand: str
    model: str
    year: int
    price: Decimal
    fuel_type: str
    transmission: str
    seating_capacity: int
    image_url: str
    mileage: int | None = None
    body_type: str | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class CatalogRecord:
    """Raw make/model/year/type record as served by the upstream catalog."""

    make: str
    model: str
    year: int
    type: str | None = None
    id: int | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class SearchFilters:
    query: str | None = None
    brands: tuple[str, ...] = ()
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    fuel_types: tuple[str, ...] = ()
    seating_capacity: int | None = None
    body_types: tuple[str, ...] = ()
    year: int | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        # Guardrails: prevent float leakage past boundary
        if self.min_price is not None and not isinstance(self.min_price, Decimal):
            raise FilterValidationError(
                "min_price must be Decimal or None (no floats past the boundary)"
            )
        if self.max_price is not None and not isinstance(self.max_price, Decimal):
            raise FilterValidationError(
                "max_price must be Decimal or None (no floats past the boundary)"
            )

        if self.min_price is not None and self.min_price < 0:
            raise FilterValidationError("min_price must be >= 0")
        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            raise FilterValidationError(
                errors=[
                    {
                        "field": "minPrice",
                        "message": "Must be less than or equal to maxPrice",
                        "code": "INVALID_RANGE",
                    }
                ]
            )
        if self.seating_capacity is not None and self.seating_capacity <= 0:
            raise FilterValidationError("seating_capacity must be > 0")


class SortField(str, Enum):
    """Sortable car attributes, named as the API exposes them."""

    PRICE = "price"
    YEAR = "year"
    MILEAGE = "mileage"
    BRAND = "brand"
    MODEL = "model"
    SEATING_CAPACITY = "seatingCapacity"

    @classmethod
    def parse(cls, name: str) -> SortField:
        try:
            return cls(name)
        except ValueError:
            allowed = ", ".join(field.value for field in cls)
            raise SortValidationError(
                errors=[
                    {
                        "field": "sortBy",
                        "message": f"Must be one of: {allowed}",
                        "code": "INVALID_SORT_FIELD",
                    }
                ]
            )

    def value_of(self, car: Car) -> Any:
        """Comparable sort value for a car; None means the car sorts last."""
        if self is SortField.PRICE:
            return car.price
        if self is SortField.YEAR:
            return car.year
        if self is SortField.MILEAGE:
            return car.mileage
        if self is SortField.BRAND:
            return car.brand.lower()
        if self is SortField.MODEL:
            return car.model.lower()
        return car.seating_capacity


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class Sorting:
    field: SortField = SortField.PRICE
    order: SortOrder = SortOrder.ASC


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = 10

    MAX_LIMIT = 100

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.offset < 0:
            raise PagingValidationError("offset must be >= 0")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > self.MAX_LIMIT:
            raise PagingValidationError(f"limit must be <= {self.MAX_LIMIT}")
