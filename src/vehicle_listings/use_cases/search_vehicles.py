from __future__ import annotations

from dataclasses import dataclass

from vehicle_listings.domain.vehicle import (
    Paging,
    ResponseMetadata,
    Vehicle,
    VehicleFilters,
)
from vehicle_listings.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class SearchVehiclesRequest:
    filters: VehicleFilters
    paging: Paging


@dataclass(frozen=True, slots=True)
class SearchVehiclesResponse:
    vehicles: list[Vehicle]
    meta: ResponseMetadata


class SearchVehicles:
    """
    Paginated, filtered vehicle list with response metadata.

    Filtering and paging happen in the repository. This use case validates
    paging and assembles ResponseMetadata from the filtered total and
    the store-wide counts.
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: SearchVehiclesRequest) -> SearchVehiclesResponse:
        """
        Execute the vehicle search.

        Args:
            request: Search parameters (filters and paging)

        Returns:
            Response containing the page of vehicles and its metadata

        Raises:
            PagingValidationError: If paging parameters are invalid
            StoreError: If any store query fails (no partial metadata)
        """
        request.paging.validate()

        result = self._repository.search(
            filters=request.filters,
            paging=request.paging,
        )
        stats = self._repository.catalog_stats()

        per_page = request.paging.results_per_page
        meta = ResponseMetadata(
            current_page=request.paging.page,
            last_page=ResponseMetadata.compute_last_page(result.total_count, per_page),
            per_page=per_page,
            total=result.total_count,
            all_total=stats.all_total,
            total_new_vehicles=stats.total_new,
            total_used_vehicles=stats.total_used,
        )

        return SearchVehiclesResponse(vehicles=result.vehicles, meta=meta)
