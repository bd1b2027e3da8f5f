"""
Contract tests for InMemoryVehicleRepository.

The in-memory adapter must behave like the SQL adapter so that use-case
and route tests built on it stay meaningful.
"""

from __future__ import annotations

from typing import Callable

import pytest

from vehicle_listings.adapters.in_memory_vehicle_repository import InMemoryVehicleRepository
from vehicle_listings.domain.vehicle import Paging, Vehicle, VehicleFilters
from vehicle_listings.ports.vehicle_repository import CatalogStats

MakeVehicle = Callable[..., Vehicle]


@pytest.fixture()
def vehicles(make_vehicle: MakeVehicle) -> list[Vehicle]:
    return [
        make_vehicle(id=1, vehicle_id=300, make="Skoda", model="Fabia", price="7500.00"),
        make_vehicle(id=2, vehicle_id=100, make="SKODA", model="Octavia", price="4799.00"),
        make_vehicle(
            id=3,
            vehicle_id=200,
            advert_classification="New",
            make="Ford",
            model="Focus",
            price="POA",
            year="2024",
            vrm="FO24CUS",
        ),
    ]


@pytest.fixture()
def repo(vehicles: list[Vehicle]) -> InMemoryVehicleRepository:
    return InMemoryVehicleRepository(vehicles)


def test_search_orders_by_vehicle_id(repo: InMemoryVehicleRepository) -> None:
    result = repo.search(VehicleFilters(), Paging())

    assert [v.vehicle_id for v in result.vehicles] == [100, 200, 300]
    assert result.total_count == 3


def test_make_is_case_insensitive(repo: InMemoryVehicleRepository) -> None:
    lower = repo.search(VehicleFilters(make="skoda"), Paging())
    upper = repo.search(VehicleFilters(make="SKODA"), Paging())

    assert [v.id for v in lower.vehicles] == [2, 1]
    assert lower.vehicles == upper.vehicles


def test_model_is_substring(repo: InMemoryVehicleRepository) -> None:
    result = repo.search(VehicleFilters(model="Fab"), Paging())

    assert [v.model for v in result.vehicles] == ["Fabia"]


def test_price_bounds_skip_uncastable(repo: InMemoryVehicleRepository) -> None:
    result = repo.search(VehicleFilters(min_price="5000", max_price="10000"), Paging())

    assert [v.id for v in result.vehicles] == [1]


def test_non_numeric_bound_matches_nothing(repo: InMemoryVehicleRepository) -> None:
    result = repo.search(VehicleFilters(min_price="cheap"), Paging())

    assert result.vehicles == []
    assert result.total_count == 0


def test_paging_after_filtering(repo: InMemoryVehicleRepository) -> None:
    result = repo.search(VehicleFilters(make="skoda"), Paging(page=2, results_per_page=1))

    assert [v.id for v in result.vehicles] == [1]
    assert result.total_count == 2


def test_catalog_stats(repo: InMemoryVehicleRepository) -> None:
    assert repo.catalog_stats() == CatalogStats(all_total=3, total_new=1, total_used=2)


def test_lookups(repo: InMemoryVehicleRepository) -> None:
    assert repo.get_by_id(3) is not None
    assert repo.get_by_id(42) is None
    assert repo.get_by_vrm("fo24cus").id == 3  # type: ignore[union-attr]
    assert repo.get_by_vrm("missing") is None


def test_distinct_values(repo: InMemoryVehicleRepository) -> None:
    assert repo.list_makes() == ["Ford", "SKODA", "Skoda"]
    assert repo.list_models("skoda") == ["Fabia", "Octavia"]
    assert repo.list_models() == ["Fabia", "Focus", "Octavia"]
