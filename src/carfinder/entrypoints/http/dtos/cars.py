from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CarResponseDTO(BaseModel):
    """A car as the API returns it. Keys are camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 4,
                "brand": "Toyota",
                "model": "Corolla",
                "year": 2022,
                "price": 21550,
                "fuelType": "Petrol",
                "transmission": "Automatic",
                "seatingCapacity": 5,
                "mileage": 5000,
                "bodyType": "Sedan",
                "description": "Reliable and fuel-efficient compact sedan.",
                "imageUrl": "https://images.unsplash.com/photo-1542230387-bfc77d70f34f",
            }
        },
    )

    id: int
    brand: str
    model: str
    year: int
    price: float
    fuel_type: str
    transmission: str
    seating_capacity: int
    mileage: int | None = None
    body_type: str | None = None
    description: str | None = None
    image_url: str


class CarSearchQueryDTO(BaseModel):
    """
    Query parameters for searching cars in the catalog.

    List filters (brands, fuel types, body types) arrive as comma-joined
    strings and are split by the mapper.
    """

    query: str | None = Field(
        default=None,
        description="Free text matched against brand, model, body type, fuel type and year",
        examples=["mustang"],
    )
    brands: str | None = Field(
        default=None,
        description="Comma-separated brands (exact match)",
        examples=["Toyota,Honda"],
    )
    min_price: Decimal | None = Field(
        default=None,
        description="Minimum price (inclusive)",
        examples=["20000"],
        ge=0,
    )
    max_price: Decimal | None = Field(
        default=None,
        description="Maximum price (inclusive)",
        examples=["35000"],
        ge=0,
    )
    fuel_types: str | None = Field(
        default=None,
        description="Comma-separated fuel types",
        examples=["Petrol,Hybrid"],
    )
    seating_capacity: int | None = Field(
        default=None,
        description="Exact number of seats",
        examples=[5],
        ge=1,
    )
    body_types: str | None = Field(
        default=None,
        description="Comma-separated body types",
        examples=["SUV"],
    )
    year: int | None = Field(
        default=None,
        description="Model year (exact match)",
        examples=[2023],
    )
    sort_by: str = Field(
        default="price",
        description="One of price, year, mileage, brand, model, seatingCapacity",
        examples=["price"],
    )
    sort_order: Literal["asc", "desc"] = Field(
        default="asc",
        description="Sort direction",
        examples=["asc"],
    )
    limit: int = Field(
        default=10,
        description="Maximum number of results to return",
        examples=[10],
        ge=1,
        le=50,
    )
    offset: int = Field(
        default=0,
        description="Number of results to skip",
        examples=[0],
        ge=0,
    )
