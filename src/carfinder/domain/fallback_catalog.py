from __future__ import annotations

from datetime import date
from typing import Callable, Iterator, Sequence

from carfinder.domain.car import CatalogRecord
from carfinder.domain.catalog_reference import (
    FALLBACK_BODY_TYPES,
    FALLBACK_MODELS,
    POPULAR_BRANDS,
)

YEARS_PER_MODEL = 3


class FallbackCatalogGenerator:
    """
    Synthesizes a bounded catalog from the static brand -> models table.

    Used whenever the upstream catalog call fails. Output depends only on the
    requested brands, the requested body types and the current year.
    """

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self._today = today

    def generate(
        self,
        brands: Sequence[str] = (),
        body_types: Sequence[str] = (),
    ) -> list[CatalogRecord]:
        years = self._years()
        # Repeated brands would repeat every car under the same id
        brands_to_generate = list(dict.fromkeys(brands)) if brands else list(POPULAR_BRANDS)

        records: list[CatalogRecord] = []
        for brand in brands_to_generate:
            for model in FALLBACK_MODELS.get(brand, ()):
                for index, year in enumerate(years):
                    records.append(
                        CatalogRecord(
                            make=brand,
                            model=model,
                            year=year,
                            type=self._body_type(body_types, index),
                        )
                    )
        return records

    def every_record(self) -> Iterator[CatalogRecord]:
        """
        Every record any request can produce from the static tables.

        Covers all brands of FALLBACK_MODELS, not just the popular ones, in
        each of the FALLBACK_BODY_TYPES. A body type requested outside that
        list is not covered.
        """
        years = self._years()
        for brand, models in FALLBACK_MODELS.items():
            for model in models:
                for year in years:
                    for body_type in FALLBACK_BODY_TYPES:
                        yield CatalogRecord(make=brand, model=model, year=year, type=body_type)

    def _years(self) -> list[int]:
        current_year = self._today().year
        return [current_year - offset for offset in range(YEARS_PER_MODEL)]

    @staticmethod
    def _body_type(body_types: Sequence[str], year_index: int) -> str:
        if body_types:
            return body_types[0]
        return "Sedan" if year_index % 2 == 0 else "SUV"
