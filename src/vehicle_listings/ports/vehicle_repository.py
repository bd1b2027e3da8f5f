from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from vehicle_listings.domain.vehicle import Paging, Vehicle, VehicleFilters


@dataclass(frozen=True)
class SearchResult:
    """Result from a vehicle search including the filtered total."""

    vehicles: list[Vehicle]
    total_count: int  # Total matching vehicles before paging


@dataclass(frozen=True)
class CatalogStats:
    """Store-wide counts, independent of any filter."""

    all_total: int
    total_new: int
    total_used: int


class VehicleRepository(ABC):
    """
    Port for vehicle listing data access.

    Contract (Preconditions):
        - filters and paging parameters must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate

    Contract (Failures):
        - A lookup with zero matches returns None, never raises
        - Any store failure is raised as StoreError with a generic message
    """

    @abstractmethod
    def search(self, filters: VehicleFilters, paging: Paging) -> SearchResult:
        """
        Search listings with filters and paging.

        Results are ordered by vehicle_id ascending.

        Args:
            filters: Filter criteria (AND semantics) - pre-validated
            paging: Pagination parameters - pre-validated

        Returns:
            SearchResult containing the page and the filtered total
        """
        ...

    @abstractmethod
    def catalog_stats(self) -> CatalogStats:
        """Count all listings and the New/Used subtotals (case-insensitive)."""
        ...

    @abstractmethod
    def get_by_id(self, vehicle_id: int) -> Vehicle | None:
        """Get a listing by its internal id."""
        ...

    @abstractmethod
    def get_by_vrm(self, vrm: str) -> Vehicle | None:
        """Get a listing by registration mark (case-insensitive exact match)."""
        ...

    @abstractmethod
    def list_makes(self) -> list[str]:
        """Distinct makes, ascending."""
        ...

    @abstractmethod
    def list_models(self, make: str | None = None) -> list[str]:
        """Distinct models, ascending, optionally restricted to one make."""
        ...
