from __future__ import annotations

from dataclasses import dataclass

from vehicle_listings.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class ListModelsRequest:
    make: str | None = None  # Empty or None lists models of every make


class ListModels:
    """Distinct models, alphabetically, optionally for one make."""

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: ListModelsRequest) -> list[str]:
        return self._repository.list_models(make=request.make or None)
