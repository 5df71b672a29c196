"""SQL implementation of CarCatalogRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String, and_, cast, func, or_, select
from sqlalchemy.orm import Session

from carfinder.domain.car import Car, Paging, SearchFilters, Sorting, SortField, SortOrder
from carfinder.domain.catalog_reference import SPECIFIC_MODEL_ALIASES
from carfinder.infra.db.models.car import CarRow
from carfinder.ports.car_catalog_repository import CarCatalogRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement, Select

_SORT_COLUMNS = {
    SortField.PRICE: CarRow.price,
    SortField.YEAR: CarRow.year,
    SortField.MILEAGE: CarRow.mileage,
    SortField.BRAND: func.lower(CarRow.brand),
    SortField.MODEL: func.lower(CarRow.model),
    SortField.SEATING_CAPACITY: CarRow.seating_capacity,
}


def _contains(column: ColumnElement[str], term: str) -> ColumnElement[bool]:
    """Case-insensitive substring match with LIKE wildcards escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return column.ilike(f"%{escaped}%", escape="\\")


class PostgresCarCatalogRepository(CarCatalogRepository):
    """
    SQLAlchemy implementation of CarCatalogRepository.

    - Expresses the search pipeline as WHERE / ORDER BY / OFFSET / LIMIT
    - Runs a COUNT of the text match first so the model-nickname fallback
      kicks in exactly when the plain text match finds nothing
    - Converts CarRow (infrastructure) to Car (domain)
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def search(self, filters: SearchFilters, sorting: Sorting, paging: Paging) -> list[Car]:
        # Trust that UseCase has validated inputs (contract programming)
        query = self._build_query(filters)
        query = self._apply_sorting(query, sorting)
        query = query.offset(paging.offset).limit(paging.limit)

        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, car_id: int) -> Car | None:
        row = self._session.get(CarRow, car_id)
        return self._to_domain(row) if row else None

    def list_brands(self) -> list[str]:
        query = select(CarRow.brand).distinct().order_by(CarRow.brand)
        return list(self._session.execute(query).scalars().all())

    def list_types(self) -> list[str]:
        query = (
            select(CarRow.body_type)
            .where(CarRow.body_type.is_not(None))
            .distinct()
            .order_by(CarRow.body_type)
        )
        return list(self._session.execute(query).scalars().all())

    def list_models(self, brand: str) -> list[str]:
        query = (
            select(CarRow.model)
            .where(func.lower(CarRow.brand) == brand.lower())
            .distinct()
            .order_by(CarRow.model)
        )
        return list(self._session.execute(query).scalars().all())

    def _build_query(self, filters: SearchFilters) -> Select[tuple[CarRow]]:
        query = select(CarRow)

        term = (filters.query or "").strip().lower()
        if term:
            query = query.where(self._text_condition(term))

        if filters.brands:
            query = query.where(CarRow.brand.in_(filters.brands))

        # Price range filters (inclusive)
        if filters.min_price is not None:
            query = query.where(CarRow.price >= filters.min_price)
        if filters.max_price is not None:
            query = query.where(CarRow.price <= filters.max_price)

        if filters.fuel_types:
            query = query.where(CarRow.fuel_type.in_(filters.fuel_types))
        if filters.seating_capacity is not None:
            query = query.where(CarRow.seating_capacity == filters.seating_capacity)
        if filters.body_types:
            query = query.where(CarRow.body_type.in_(filters.body_types))
        if filters.year is not None:
            query = query.where(CarRow.year == filters.year)

        return query

    def _text_condition(self, term: str) -> ColumnElement[bool]:
        condition = or_(
            _contains(CarRow.brand, term),
            _contains(CarRow.model, term),
            _contains(CarRow.body_type, term),
            _contains(CarRow.fuel_type, term),
            _contains(cast(CarRow.year, String), term),
            _contains(CarRow.brand + " " + CarRow.model, term),
        )
        if term not in SPECIFIC_MODEL_ALIASES:
            return condition

        count_query = select(func.count()).select_from(CarRow).where(condition)
        if self._session.execute(count_query).scalar():
            return condition

        alias_brand, alias_model = SPECIFIC_MODEL_ALIASES[term]
        return and_(
            func.lower(CarRow.brand) == alias_brand.lower(),
            _contains(CarRow.model, alias_model.lower()),
        )

    @staticmethod
    def _apply_sorting(query: Select[tuple[CarRow]], sorting: Sorting) -> Select[tuple[CarRow]]:
        column = _SORT_COLUMNS[sorting.field]
        ordered = column.desc() if sorting.order is SortOrder.DESC else column.asc()
        return query.order_by(ordered.nulls_last(), CarRow.id.asc())

    @staticmethod
    def _to_domain(row: CarRow) -> Car:
        return Car(
            id=row.id,
            brand=row.brand,
            model=row.model,
            year=row.year,
            price=row.price,  # Already Decimal from NUMERIC column
            fuel_type=row.fuel_type,
            transmission=row.transmission,
            seating_capacity=row.seating_capacity,
            mileage=row.mileage,
            body_type=row.body_type,
            description=row.description,
            image_url=row.image_url,
        )
