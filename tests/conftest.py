from __future__ import annotations

from typing import Any, Callable, Iterator

import pytest
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from vehicle_listings.domain.vehicle import Vehicle
from vehicle_listings.infra.db.models import Base, VehicleRow
from vehicle_listings.infra.db.session import build_session_factory


@pytest.fixture()
def engine() -> Iterator[Engine]:
    """In-memory SQLite engine shared across threads (TestClient runs in one)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return build_session_factory(engine)


@pytest.fixture()
def session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def make_vehicle() -> Callable[..., Vehicle]:
    """Factory for domain Vehicle entities with sensible defaults."""

    def _make(**overrides: Any) -> Vehicle:
        values: dict[str, Any] = {
            "id": 1,
            "vehicle_id": 1000,
            "advert_classification": "Used",
            "make": "Skoda",
            "model": "Fabia",
            "body_type": "Hatchback",
            "fuel_type": "Petrol",
            "transmission": "Manual",
            "price": "7500.00",
            "year": "2019",
            "vrm": "AB19CDE",
        }
        values.update(overrides)
        return Vehicle(**values)

    return _make


@pytest.fixture()
def add_rows(session: Session) -> Callable[..., list[VehicleRow]]:
    """Insert VehicleRow records built from keyword dicts and commit."""

    def _add(*rows: dict[str, Any]) -> list[VehicleRow]:
        defaults: dict[str, Any] = {
            "advert_classification": "Used",
            "make": "Skoda",
            "model": "Fabia",
            "body_type": "Hatchback",
            "fuel_type": "Petrol",
            "transmission": "Manual",
            "price": "7500.00",
            "year": "2019",
        }
        created = [VehicleRow(**{**defaults, **row}) for row in rows]
        session.add_all(created)
        session.commit()
        return created

    return _add
