"""Get vehicle by internal id use case."""

from __future__ import annotations

from dataclasses import dataclass

from vehicle_listings.domain.errors import NotFoundError, ValidationError
from vehicle_listings.domain.vehicle import Vehicle
from vehicle_listings.ports.vehicle_repository import VehicleRepository

# Upper bound of the INTEGER primary key column
MAX_VEHICLE_ID = 2**31 - 1


@dataclass(frozen=True, slots=True)
class GetVehicleByIdRequest:
    """Request to get a vehicle by internal id, as received on the path."""

    vehicle_id: str


@dataclass(frozen=True, slots=True)
class GetVehicleByIdResponse:
    vehicle: Vehicle


class GetVehicleById:
    """
    Use case for retrieving a single vehicle by internal id.

    Responsibilities:
    - Validate vehicle_id format (digits only)
    - Delegate to repository for data access
    - Raise NotFoundError if the vehicle doesn't exist
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: GetVehicleByIdRequest) -> GetVehicleByIdResponse:
        """
        Execute the lookup.

        Raises:
            ValidationError: If vehicle_id is not made of digits
            NotFoundError: If no vehicle has this id
            StoreError: If the store lookup fails
        """
        raw = request.vehicle_id
        if not (raw.isascii() and raw.isdigit()):
            raise ValidationError("invalid vehicle ID", field="id")

        # Well-formed ids outside the key range cannot match a row
        digits = raw.lstrip("0")
        if not digits or len(digits) > len(str(MAX_VEHICLE_ID)) or int(digits) > MAX_VEHICLE_ID:
            raise NotFoundError(resource="vehicle", identifier=raw)

        vehicle = self._repository.get_by_id(int(digits))

        if vehicle is None:
            raise NotFoundError(resource="vehicle", identifier=raw)

        return GetVehicleByIdResponse(vehicle=vehicle)
