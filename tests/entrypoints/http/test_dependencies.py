"""
Unit tests for FastAPI dependency injection functions.

- get_db() yields a fresh session per request from app.state.session_factory
- the session is committed on success and rolled back on error
- use-case factories wire Session → Repository → UseCase with no caching
"""

from __future__ import annotations

from types import GeneratorType
from unittest.mock import Mock

import pytest

from vehicle_listings.adapters.sqlalchemy_vehicle_repository import SqlAlchemyVehicleRepository
from vehicle_listings.entrypoints.http.dependencies import (
    get_db,
    get_list_makes_use_case,
    get_list_models_use_case,
    get_search_vehicles_use_case,
    get_vehicle_by_id_use_case,
    get_vehicle_by_vrm_use_case,
    get_vehicle_repository,
)
from vehicle_listings.use_cases.get_vehicle_by_id import GetVehicleById
from vehicle_listings.use_cases.get_vehicle_by_vrm import GetVehicleByVrm
from vehicle_listings.use_cases.list_makes import ListMakes
from vehicle_listings.use_cases.list_models import ListModels
from vehicle_listings.use_cases.search_vehicles import SearchVehicles


def _request_with_factory(factory: Mock) -> Mock:
    request = Mock()
    request.app.state.session_factory = factory
    return request


# ==============================================================================
# get_db() - Database Session Provider
# ==============================================================================


def test_get_db_is_generator() -> None:
    """get_db() is a generator function (required for FastAPI dependency)."""
    assert isinstance(get_db(_request_with_factory(Mock())), GeneratorType)


def test_get_db_yields_session_and_commits() -> None:
    session = Mock()
    factory = Mock(return_value=session)

    generator = get_db(_request_with_factory(factory))
    assert next(generator) is session

    with pytest.raises(StopIteration):
        next(generator)

    session.commit.assert_called_once()
    session.rollback.assert_not_called()
    session.close.assert_called_once()


def test_get_db_rolls_back_on_exception() -> None:
    session = Mock()
    generator = get_db(_request_with_factory(Mock(return_value=session)))
    next(generator)

    with pytest.raises(RuntimeError):
        generator.throw(RuntimeError("Simulated error during request"))

    session.commit.assert_not_called()
    session.rollback.assert_called_once()
    session.close.assert_called_once()


def test_get_db_creates_new_session_each_call() -> None:
    factory = Mock(side_effect=[Mock(), Mock()])
    request = _request_with_factory(factory)

    session1 = next(get_db(request))
    session2 = next(get_db(request))

    assert factory.call_count == 2
    assert session1 is not session2


# ==============================================================================
# Repository and use-case factories
# ==============================================================================


def test_get_vehicle_repository_wraps_session() -> None:
    session = Mock()

    repository = get_vehicle_repository(db=session)

    assert isinstance(repository, SqlAlchemyVehicleRepository)
    assert repository._session is session


@pytest.mark.parametrize(
    ("factory", "use_case_type"),
    [
        (get_search_vehicles_use_case, SearchVehicles),
        (get_vehicle_by_id_use_case, GetVehicleById),
        (get_vehicle_by_vrm_use_case, GetVehicleByVrm),
        (get_list_makes_use_case, ListMakes),
        (get_list_models_use_case, ListModels),
    ],
)
def test_use_case_factories_wire_repository(factory, use_case_type) -> None:
    repository = Mock()

    use_case = factory(repository=repository)

    assert isinstance(use_case, use_case_type)
    assert use_case._repository is repository
    assert factory(repository=repository) is not use_case
