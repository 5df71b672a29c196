from __future__ import annotations

from abc import ABC, abstractmethod

from carfinder.domain.car import Car, Paging, SearchFilters, Sorting


class CarCatalogRepository(ABC):
    """
    Port for catalog data access.

    Implementations serve cars from persistence, from the in-memory seed set
    or from the upstream catalog (with its fallback).

    Contract (Preconditions):
        - filters, sorting and paging must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def search(self, filters: SearchFilters, sorting: Sorting, paging: Paging) -> list[Car]:
        """
        Search catalog with filters, sorting and paging.

        Args:
            filters: Filter criteria (AND semantics) - pre-validated
            sorting: Sort field and direction
            paging: Pagination parameters - pre-validated

        Returns:
            One page of matching cars. No total count is computed.
        """
        ...

    @abstractmethod
    def get_by_id(self, car_id: int) -> Car | None: ...

    @abstractmethod
    def list_brands(self) -> list[str]: ...

    @abstractmethod
    def list_types(self) -> list[str]: ...

    @abstractmethod
    def list_models(self, brand: str) -> list[str]: ...
