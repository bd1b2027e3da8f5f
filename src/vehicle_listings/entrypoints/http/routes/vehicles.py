from fastapi import APIRouter, Depends, Query

from vehicle_listings.entrypoints.http.dependencies import (
    get_list_makes_use_case,
    get_list_models_use_case,
    get_search_vehicles_use_case,
    get_vehicle_by_id_use_case,
    get_vehicle_by_vrm_use_case,
)
from vehicle_listings.entrypoints.http.dtos.vehicles import (
    MakesResponseDTO,
    ModelsResponseDTO,
    VehicleListResponseDTO,
    VehicleResponseDTO,
    VehiclesQueryDTO,
)
from vehicle_listings.entrypoints.http.error_responses import ErrorResponse
from vehicle_listings.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from vehicle_listings.use_cases.get_vehicle_by_id import GetVehicleById, GetVehicleByIdRequest
from vehicle_listings.use_cases.get_vehicle_by_vrm import GetVehicleByVrm, GetVehicleByVrmRequest
from vehicle_listings.use_cases.list_makes import ListMakes
from vehicle_listings.use_cases.list_models import ListModels, ListModelsRequest
from vehicle_listings.use_cases.search_vehicles import SearchVehicles


router = APIRouter(tags=["Vehicles"])

# Literal sub-paths are registered before /vehicles/{vehicle_id} so they win.


@router.get(
    "/vehicles",
    response_model=VehicleListResponseDTO,
    summary="List vehicles",
    description="""
    Paginated list of vehicle listings with optional filters.

    ## Filters
    - All filters use AND semantics
    - advert_classification: case-insensitive; "All" disables it
    - make, fuel_type, transmission, body_type: case-insensitive exact match
    - model: case-insensitive substring match
    - min/max price and year: inclusive; "0" or empty means unset;
      a non-numeric bound matches nothing

    ## Pagination
    - page defaults to 1, results_per_page to 10 (max 100)
    - Results are ordered by vehicle_id

    ## Example
    ```
    GET /vehicles?make=skoda&min_price=5000&max_price=10000&results_per_page=20
    ```
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid paging value"},
        500: {"model": ErrorResponse, "description": "Store failure"},
    },
)
def list_vehicles(
    query: VehiclesQueryDTO = Depends(),
    use_case: SearchVehicles = Depends(get_search_vehicles_use_case),
) -> VehicleListResponseDTO:
    """Parse → execute → map → return."""
    request = VehicleMapper.to_domain_request(query)

    result = use_case.execute(request)

    return VehicleMapper.to_response(result)


@router.get(
    "/vehicles/makes",
    response_model=MakesResponseDTO,
    summary="List distinct makes",
    responses={500: {"model": ErrorResponse, "description": "Store failure"}},
)
def list_makes(use_case: ListMakes = Depends(get_list_makes_use_case)) -> MakesResponseDTO:
    return MakesResponseDTO(makes=use_case.execute())


@router.get(
    "/vehicles/models",
    response_model=ModelsResponseDTO,
    summary="List distinct models",
    description="Distinct models in alphabetical order, optionally for one make.",
    responses={500: {"model": ErrorResponse, "description": "Store failure"}},
)
def list_models(
    make: str | None = Query(default=None, description="Case-insensitive make"),
    use_case: ListModels = Depends(get_list_models_use_case),
) -> ModelsResponseDTO:
    return ModelsResponseDTO(models=use_case.execute(ListModelsRequest(make=make)))


@router.get(
    "/vehicles/vrm/{vrm}",
    response_model=VehicleResponseDTO,
    summary="Get vehicle by registration mark",
    responses={
        404: {"model": ErrorResponse, "description": "Vehicle not found"},
        500: {"model": ErrorResponse, "description": "Store failure"},
    },
)
def get_vehicle_by_vrm(
    vrm: str,
    use_case: GetVehicleByVrm = Depends(get_vehicle_by_vrm_use_case),
) -> VehicleResponseDTO:
    result = use_case.execute(GetVehicleByVrmRequest(vrm=vrm))
    return VehicleMapper.to_vehicle_response(result.vehicle)


@router.get(
    "/vehicles/{vehicle_id}",
    response_model=VehicleResponseDTO,
    summary="Get vehicle by id",
    responses={
        400: {"model": ErrorResponse, "description": "Malformed id"},
        404: {"model": ErrorResponse, "description": "Vehicle not found"},
        500: {"model": ErrorResponse, "description": "Store failure"},
    },
)
def get_vehicle_by_id(
    vehicle_id: str,
    use_case: GetVehicleById = Depends(get_vehicle_by_id_use_case),
) -> VehicleResponseDTO:
    result = use_case.execute(GetVehicleByIdRequest(vehicle_id=vehicle_id))
    return VehicleMapper.to_vehicle_response(result.vehicle)
