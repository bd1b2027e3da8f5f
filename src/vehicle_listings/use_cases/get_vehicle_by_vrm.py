"""Get vehicle by registration mark use case."""

from __future__ import annotations

from dataclasses import dataclass

from vehicle_listings.domain.errors import NotFoundError
from vehicle_listings.domain.vehicle import Vehicle
from vehicle_listings.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class GetVehicleByVrmRequest:
    vrm: str


@dataclass(frozen=True, slots=True)
class GetVehicleByVrmResponse:
    vehicle: Vehicle


class GetVehicleByVrm:
    """Look up one vehicle by VRM, case-insensitively."""

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: GetVehicleByVrmRequest) -> GetVehicleByVrmResponse:
        vehicle = self._repository.get_by_vrm(request.vrm)

        if vehicle is None:
            raise NotFoundError(resource="vehicle", identifier=request.vrm)

        return GetVehicleByVrmResponse(vehicle=vehicle)
