"""
Dependency injection for FastAPI routes.

The session factory is built once by build_app() and kept on app.state;
each request gets its own session from it. Nothing here is cached at
module level.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from vehicle_listings.adapters.sqlalchemy_vehicle_repository import SqlAlchemyVehicleRepository
from vehicle_listings.infra.db.session import session_scope
from vehicle_listings.ports.vehicle_repository import VehicleRepository
from vehicle_listings.use_cases.get_vehicle_by_id import GetVehicleById
from vehicle_listings.use_cases.get_vehicle_by_vrm import GetVehicleByVrm
from vehicle_listings.use_cases.list_makes import ListMakes
from vehicle_listings.use_cases.list_models import ListModels
from vehicle_listings.use_cases.search_vehicles import SearchVehicles


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The session comes from the factory stored on ``app.state`` and is
    committed/rolled back and closed when the request ends.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with session_scope(request.app.state.session_factory) as session:
        yield session


def get_vehicle_repository(db: Session = Depends(get_db)) -> VehicleRepository:
    return SqlAlchemyVehicleRepository(session=db)


def get_search_vehicles_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> SearchVehicles:
    return SearchVehicles(vehicle_repository=repository)


def get_vehicle_by_id_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> GetVehicleById:
    return GetVehicleById(vehicle_repository=repository)


def get_vehicle_by_vrm_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> GetVehicleByVrm:
    return GetVehicleByVrm(vehicle_repository=repository)


def get_list_makes_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> ListMakes:
    return ListMakes(vehicle_repository=repository)


def get_list_models_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> ListModels:
    return ListModels(vehicle_repository=repository)
