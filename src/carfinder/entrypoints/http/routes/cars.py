from __future__ import annotations

from decimal import Decimal
from typing import Literal

from fastapi import APIRouter, Depends, Query

from carfinder.domain.car import Paging
from carfinder.entrypoints.http.dependencies import (
    get_car_by_id_use_case,
    get_list_brands_use_case,
    get_list_models_use_case,
    get_list_types_use_case,
    get_search_catalog_use_case,
)
from carfinder.entrypoints.http.dtos.cars import CarResponseDTO, CarSearchQueryDTO
from carfinder.entrypoints.http.error_responses import ErrorResponse
from carfinder.entrypoints.http.mappers.catalog_search_mapper import CatalogSearchMapper
from carfinder.use_cases.get_car_by_id import GetCarById, GetCarByIdRequest
from carfinder.use_cases.list_car_brands import ListCarBrands
from carfinder.use_cases.list_car_models import ListCarModels, ListCarModelsRequest
from carfinder.use_cases.list_car_types import ListCarTypes
from carfinder.use_cases.search_car_catalog import SearchCarCatalog, SearchCarCatalogRequest

router = APIRouter(tags=["Cars"])


def car_search_query(
    query: str | None = Query(default=None),
    brands: str | None = Query(default=None),
    min_price: Decimal | None = Query(default=None, alias="minPrice", ge=0),
    max_price: Decimal | None = Query(default=None, alias="maxPrice", ge=0),
    fuel_types: str | None = Query(default=None, alias="fuelTypes"),
    seating_capacity: int | None = Query(default=None, alias="seatingCapacity", ge=1),
    body_types: str | None = Query(default=None, alias="bodyTypes"),
    year: int | None = Query(default=None),
    sort_by: str = Query(default="price", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query(default="asc", alias="sortOrder"),
    limit: int = Query(default=10, ge=1, le=50),
    offset: int = Query(default=0, ge=0),
) -> CarSearchQueryDTO:
    """Collects the camelCase query string into a CarSearchQueryDTO."""
    return CarSearchQueryDTO(
        query=query,
        brands=brands,
        min_price=min_price,
        max_price=max_price,
        fuel_types=fuel_types,
        seating_capacity=seating_capacity,
        body_types=body_types,
        year=year,
        sort_by=sort_by,
        sort_order=sort_order,
        limit=limit,
        offset=offset,
    )


# Declared before /cars/{car_id} so "search" is not parsed as an id
@router.get(
    "/cars/search",
    response_model=list[CarResponseDTO],
    summary="Search car catalog",
    description="""
    Search for cars with free text, filters, sorting and pagination.

    ## Filters
    - All filters use AND semantics
    - `brands`, `fuelTypes`, `bodyTypes`: comma-separated, exact match
    - `minPrice` / `maxPrice`: inclusive
    - `query`: case-insensitive substring over brand, model, body type,
      fuel type and year; well-known model nicknames (e.g. "mustang") are
      resolved when nothing else matches

    ## Sorting
    - `sortBy`: price (default), year, mileage, brand, model, seatingCapacity
    - `sortOrder`: asc (default) or desc

    ## Pagination
    - Default limit: 10
    - Max limit: 50

    ## Example
    ```
    GET /api/cars/search?brands=Toyota&bodyTypes=SUV&maxPrice=40000&limit=10
    ```
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def search_cars(
    query: CarSearchQueryDTO = Depends(car_search_query),
    use_case: SearchCarCatalog = Depends(get_search_catalog_use_case),
) -> list[CarResponseDTO]:
    """Search cars endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = CatalogSearchMapper.to_domain_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return CatalogSearchMapper.to_response(result)


@router.get(
    "/cars",
    response_model=list[CarResponseDTO],
    summary="List cars",
    description="Unfiltered page of the catalog in the default order (price ascending).",
)
def list_cars(
    limit: int = Query(default=10, ge=1, le=50),
    offset: int = Query(default=0, ge=0),
    use_case: SearchCarCatalog = Depends(get_search_catalog_use_case),
) -> list[CarResponseDTO]:
    result = use_case.execute(SearchCarCatalogRequest(paging=Paging(offset=offset, limit=limit)))
    return CatalogSearchMapper.to_response(result)


@router.get(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Get car by id",
    responses={
        404: {"model": ErrorResponse, "description": "Car not found"},
        422: {"model": ErrorResponse, "description": "Invalid id"},
    },
)
def get_car(
    car_id: int,
    use_case: GetCarById = Depends(get_car_by_id_use_case),
) -> CarResponseDTO:
    result = use_case.execute(GetCarByIdRequest(car_id=car_id))
    return CatalogSearchMapper.to_car_response(result.car)


@router.get("/car-brands", response_model=list[str], summary="List car brands")
def list_car_brands(use_case: ListCarBrands = Depends(get_list_brands_use_case)) -> list[str]:
    return use_case.execute().brands


@router.get("/car-types", response_model=list[str], summary="List body types")
def list_car_types(use_case: ListCarTypes = Depends(get_list_types_use_case)) -> list[str]:
    return use_case.execute().types


@router.get("/car-models", response_model=list[str], summary="List models of a brand")
def list_car_models(
    make: str = Query(..., min_length=1, description="Brand whose models to list"),
    use_case: ListCarModels = Depends(get_list_models_use_case),
) -> list[str]:
    return use_case.execute(ListCarModelsRequest(brand=make)).models
