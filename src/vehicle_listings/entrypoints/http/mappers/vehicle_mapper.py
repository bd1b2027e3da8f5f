from __future__ import annotations

import re
from dataclasses import asdict

from vehicle_listings.domain.errors import ValidationError
from vehicle_listings.domain.vehicle import Paging, Vehicle, VehicleFilters
from vehicle_listings.entrypoints.http.dtos.vehicles import (
    ResponseMetaDTO,
    VehicleListResponseDTO,
    VehicleResponseDTO,
    VehiclesQueryDTO,
)
from vehicle_listings.use_cases.search_vehicles import (
    SearchVehiclesRequest,
    SearchVehiclesResponse,
)

DEFAULT_PAGE = 1
DEFAULT_RESULTS_PER_PAGE = 10
MAX_RESULTS_PER_PAGE = 100

# Optional minus sign then ASCII digits; no whitespace, plus sign or underscores
_INTEGER_PATTERN = re.compile(r"-?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_int(value: str | None, default: int) -> int:
    """
    Parse an integer query value.

    Missing, malformed or out-of-range (signed 64-bit) input yields ``default``.
    """
    if value is None or not _INTEGER_PATTERN.fullmatch(value):
        return default
    if len(value.lstrip("-").lstrip("0")) > 19:
        return default
    number = int(value)
    if not _INT64_MIN <= number <= _INT64_MAX:
        return default
    return number


class VehicleMapper:
    """Maps between REST DTOs and domain models for vehicle endpoints."""

    @staticmethod
    def to_domain_filters(dto: VehiclesQueryDTO) -> VehicleFilters:
        return VehicleFilters(
            advert_classification=dto.advert_classification,
            make=dto.make,
            model=dto.model,
            fuel_type=dto.fuel_type,
            transmission=dto.transmission,
            body_type=dto.body_type,
            min_price=dto.min_price,
            max_price=dto.max_price,
            min_year=dto.min_year,
            max_year=dto.max_year,
        )

    @staticmethod
    def to_domain_paging(dto: VehiclesQueryDTO) -> Paging:
        """
        Converts pagination params to domain paging object.

        Enforces the HTTP-level bounds: page >= 1 and
        1 <= results_per_page <= 100.

        Raises:
            ValidationError: If either value is out of range
        """
        page = parse_int(dto.page, DEFAULT_PAGE)
        results_per_page = parse_int(dto.results_per_page, DEFAULT_RESULTS_PER_PAGE)

        if page < 1:
            raise ValidationError("page must be greater than 0", field="page")
        if not 1 <= results_per_page <= MAX_RESULTS_PER_PAGE:
            raise ValidationError(
                f"results_per_page must be between 1 and {MAX_RESULTS_PER_PAGE}",
                field="results_per_page",
            )

        return Paging(page=page, results_per_page=results_per_page)

    @staticmethod
    def to_domain_request(dto: VehiclesQueryDTO) -> SearchVehiclesRequest:
        return SearchVehiclesRequest(
            filters=VehicleMapper.to_domain_filters(dto),
            paging=VehicleMapper.to_domain_paging(dto),
        )

    @staticmethod
    def to_vehicle_response(vehicle: Vehicle) -> VehicleResponseDTO:
        return VehicleResponseDTO.model_validate(asdict(vehicle))

    @staticmethod
    def to_response(result: SearchVehiclesResponse) -> VehicleListResponseDTO:
        return VehicleListResponseDTO(
            data=[VehicleMapper.to_vehicle_response(v) for v in result.vehicles],
            meta=ResponseMetaDTO.model_validate(asdict(result.meta)),
        )
