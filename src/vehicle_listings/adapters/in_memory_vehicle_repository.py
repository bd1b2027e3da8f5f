from __future__ import annotations

import re
from decimal import Decimal

from vehicle_listings.domain.vehicle import Paging, Vehicle, VehicleFilters
from vehicle_listings.ports.vehicle_repository import CatalogStats, SearchResult, VehicleRepository

_NUMERIC_TEXT = re.compile(r"^[0-9]+(\.[0-9]+)?$")


def _as_number(value: str) -> Decimal | None:
    """Same guard as the SQL cast: non-numeric text yields None."""
    value = value.strip()
    if not _NUMERIC_TEXT.match(value):
        return None
    return Decimal(value)


class InMemoryVehicleRepository(VehicleRepository):
    """
    Canonical contract implementation for tests.

    - Stores vehicles in insertion order, returns them by vehicle_id
    - Applies AND-semantics filtering
    - Applies paging AFTER filtering
    - Returns total_count of matching vehicles before paging
    """

    def __init__(self, vehicles: list[Vehicle]) -> None:
        self._vehicles = vehicles

    def search(self, filters: VehicleFilters, paging: Paging) -> SearchResult:
        # Trust that UseCase has validated inputs (contract programming)
        matches = [v for v in self._vehicles if self._matches(v, filters)]
        matches.sort(key=lambda v: (v.vehicle_id, v.id))
        total_count = len(matches)  # Count BEFORE paging

        start = paging.offset
        end = paging.offset + paging.limit

        return SearchResult(vehicles=matches[start:end], total_count=total_count)

    def catalog_stats(self) -> CatalogStats:
        classifications = [v.advert_classification.lower() for v in self._vehicles]
        return CatalogStats(
            all_total=len(classifications),
            total_new=classifications.count("new"),
            total_used=classifications.count("used"),
        )

    def get_by_id(self, vehicle_id: int) -> Vehicle | None:
        for vehicle in self._vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None

    def get_by_vrm(self, vrm: str) -> Vehicle | None:
        matches = [v for v in self._vehicles if v.vrm.lower() == vrm.lower()]
        return min(matches, key=lambda v: v.id) if matches else None

    def list_makes(self) -> list[str]:
        return sorted({v.make for v in self._vehicles})

    def list_models(self, make: str | None = None) -> list[str]:
        return sorted(
            {v.model for v in self._vehicles if not make or v.make.lower() == make.lower()}
        )

    def _matches(self, vehicle: Vehicle, filters: VehicleFilters) -> bool:
        if filters.matches_nothing:
            return False
        classification = filters.classification
        if classification and vehicle.advert_classification.lower() != classification.lower():
            return False
        if filters.make and vehicle.make.lower() != filters.make.lower():
            return False
        if filters.model and filters.model.lower() not in vehicle.model.lower():
            return False
        if filters.fuel_type and vehicle.fuel_type.lower() != filters.fuel_type.lower():
            return False
        if filters.transmission and vehicle.transmission.lower() != filters.transmission.lower():
            return False
        if filters.body_type and vehicle.body_type.lower() != filters.body_type.lower():
            return False

        bounds = (
            (vehicle.price, filters.min_price_value, filters.max_price_value),
            (vehicle.year, filters.min_year_value, filters.max_year_value),
        )
        for stored, low, high in bounds:
            if low is None and high is None:
                continue
            number = _as_number(stored)
            if number is None:
                return False
            if low is not None and number < low:
                return False
            if high is not None and number > high:
                return False
        return True
