"""Catalog repository backed by the upstream car API, with a synthetic fallback."""

from __future__ import annotations

import dataclasses
import logging

from pydantic import ValidationError as PayloadValidationError

from carfinder.domain.car import Car, CatalogRecord, Paging, SearchFilters, Sorting
from carfinder.domain.car_search import search_cars
from carfinder.domain.catalog_reference import (
    FALLBACK_BODY_TYPES,
    FALLBACK_BRANDS,
    FALLBACK_MODELS,
)
from carfinder.domain.fallback_catalog import FallbackCatalogGenerator
from carfinder.domain.record_mapper import RecordMapper
from carfinder.infra.car_api.client import CarApiClient, CarApiError
from carfinder.infra.car_api.payloads import (
    parse_catalog_record,
    parse_catalog_records,
    parse_names,
)
from carfinder.ports.car_catalog_repository import CarCatalogRepository

logger = logging.getLogger(__name__)

BROAD_SEARCH_LIMIT = 100


class CarApiCatalogRepository(CarCatalogRepository):
    """
    Serves the catalog from the upstream car API.

    - Upstream failures of any kind switch to the fallback generator; callers
      never see them
    - Raw records go through the RecordMapper, then the shared search pipeline
    - Pagination happens locally, after filtering and sorting
    """

    def __init__(
        self,
        client: CarApiClient,
        fallback: FallbackCatalogGenerator | None = None,
        mapper: RecordMapper | None = None,
    ) -> None:
        self._client = client
        self._fallback = fallback or FallbackCatalogGenerator()
        self._mapper = mapper or RecordMapper()

    def search(self, filters: SearchFilters, sorting: Sorting, paging: Paging) -> list[Car]:
        cars = self._mapper.map_all(self._load_records(filters))
        return search_cars(cars, filters, sorting, paging)

    def get_by_id(self, car_id: int) -> Car | None:
        """
        Look a car up by id.

        Tries, in order: a direct upstream fetch, every cached list payload,
        the first BROAD_SEARCH_LIMIT cars of an unfiltered upstream search,
        and finally the whole fallback table. Fallback ids hash the body type,
        so the car found is the one the search returned.
        """
        try:
            record = parse_catalog_record(self._client.fetch(f"/car/{car_id}"))
            if record.id is None:
                record = dataclasses.replace(record, id=car_id)
            return self._mapper.map(record)
        except (CarApiError, PayloadValidationError) as exc:
            logger.info(
                "Direct car fetch failed, searching cached results",
                extra={"car_id": car_id, "error": str(exc)},
            )

        for payload in self._client.cache.payloads():
            if not isinstance(payload, list):
                continue
            try:
                records = parse_catalog_records(payload)
            except PayloadValidationError:
                continue
            for car in self._mapper.map_all(records):
                if car.id == car_id:
                    return car

        try:
            records = parse_catalog_records(self._client.fetch("/car/search", {}))
        except (CarApiError, PayloadValidationError) as exc:
            logger.info(
                "Car API unavailable, resolving id against fallback catalog",
                extra={"car_id": car_id, "error": str(exc)},
            )
        else:
            broad = search_cars(
                self._mapper.map_all(records),
                SearchFilters(),
                Sorting(),
                Paging(offset=0, limit=BROAD_SEARCH_LIMIT),
            )
            car = next((car for car in broad if car.id == car_id), None)
            if car is not None:
                return car

        return self._find_fallback_car(car_id)

    def list_brands(self) -> list[str]:
        try:
            return parse_names(self._client.fetch("/car/brands"))
        except (CarApiError, PayloadValidationError) as exc:
            logger.info("Failed to fetch car brands, using fallback", extra={"error": str(exc)})
            return list(FALLBACK_BRANDS)

    def list_types(self) -> list[str]:
        try:
            return parse_names(self._client.fetch("/car/types"))
        except (CarApiError, PayloadValidationError) as exc:
            logger.info("Failed to fetch car types, using fallback", extra={"error": str(exc)})
            return list(FALLBACK_BODY_TYPES)

    def list_models(self, brand: str) -> list[str]:
        try:
            return parse_names(self._client.fetch("/car/models", {"make": brand}))
        except (CarApiError, PayloadValidationError) as exc:
            logger.info(
                "Failed to fetch car models, using fallback",
                extra={"brand": brand, "error": str(exc)},
            )
            return list(FALLBACK_MODELS.get(brand, ()))

    def _load_records(self, filters: SearchFilters) -> list[CatalogRecord]:
        try:
            payload = self._client.fetch("/car/search", self._search_params(filters))
            return parse_catalog_records(payload)
        except (CarApiError, PayloadValidationError) as exc:
            logger.info(
                "Car API unavailable, using fallback catalog",
                extra={"error": str(exc), "brands": list(filters.brands)},
            )
            return self._fallback.generate(filters.brands, filters.body_types)

    def _find_fallback_car(self, car_id: int) -> Car | None:
        for record in self._fallback.every_record():
            if self._mapper.id_for(record) == car_id:
                return self._mapper.map(record)
        return None

    @staticmethod
    def _search_params(filters: SearchFilters) -> dict[str, str]:
        params: dict[str, str] = {}
        if filters.query:
            params["query"] = filters.query
        if filters.brands:
            params["brand"] = ",".join(filters.brands)
        if filters.min_price is not None:
            params["minPrice"] = str(filters.min_price)
        if filters.max_price is not None:
            params["maxPrice"] = str(filters.max_price)
        if filters.body_types:
            params["bodyType"] = ",".join(filters.body_types)
        if filters.year is not None:
            params["year"] = str(filters.year)
        return params
