from __future__ import annotations

from vehicle_listings.ports.vehicle_repository import VehicleRepository


class ListMakes:
    """Distinct makes across the whole store, alphabetically."""

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self) -> list[str]:
        return self._repository.list_makes()
