"""Pydantic models for the upstream catalog's JSON payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from carfinder.domain.car import CatalogRecord


class CatalogRecordPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", protected_namespaces=())

    make: str = Field(min_length=1)
    model: str = Field(min_length=1)
    year: int
    type: str | None = None
    id: int | None = Field(default=None, gt=0)
    description: str | None = None

    def to_domain(self) -> CatalogRecord:
        return CatalogRecord(
            make=self.make,
            model=self.model,
            year=self.year,
            type=self.type,
            id=self.id,
            description=self.description,
        )


_records_adapter = TypeAdapter(list[CatalogRecordPayload])
_names_adapter = TypeAdapter(list[str])


def parse_catalog_record(payload: Any) -> CatalogRecord:
    """Raises pydantic.ValidationError if the payload is not a catalog record."""
    return CatalogRecordPayload.model_validate(payload).to_domain()


def parse_catalog_records(payload: Any) -> list[CatalogRecord]:
    """Raises pydantic.ValidationError if the payload is not a list of catalog records."""
    return [item.to_domain() for item in _records_adapter.validate_python(payload)]


def parse_names(payload: Any) -> list[str]:
    """Raises pydantic.ValidationError if the payload is not a list of strings."""
    return _names_adapter.validate_python(payload)
