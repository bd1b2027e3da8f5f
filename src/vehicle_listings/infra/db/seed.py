"""
Cold-start seeding of the vehicles table from the bundled JSON fixture.

Seeding only ever runs against an empty table: if any row exists the seed
is skipped entirely. It never merges or upserts.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from vehicle_listings.domain.errors import SeedError
from vehicle_listings.infra.db.models.vehicle import VehicleRow
from vehicle_listings.infra.db.session import session_scope

logger = logging.getLogger(__name__)

DEFAULT_FIXTURE_PATH = Path(__file__).parent / "fixtures" / "vehicles.json"
BATCH_SIZE = 100

# Fields that stay None when the feed sends null
NULLABLE_FIELDS = frozenset({"attention_grabber", "date_first_registered", "model_year"})


class MediaURLSeedDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    large: str = ""
    medium: str = ""
    thumb: str = ""


class VehicleListingSeedDTO(BaseModel):
    """
    One listing as it appears in the fixture.

    Unknown keys (including any "id") are ignored; numbers sent for text
    fields are kept as text; null text becomes "".
    """

    model_config = ConfigDict(
        extra="ignore",
        coerce_numbers_to_str=True,
        protected_namespaces=(),
    )

    vehicle_id: int
    advert_classification: str = ""
    attention_grabber: str | None = None
    body_type: str = ""
    body_type_slug: str = ""
    colour: str = ""
    company: str = ""
    date_first_registered: str | None = None
    derivative: str = ""
    description: str = ""
    doors: str = ""
    drivetrain: str = ""
    extra_description: str = ""
    fuel_type: str = ""
    fuel_type_slug: str = ""
    insurance_group: str = ""
    location: str = ""
    location_slug: str = ""
    make: str = ""
    make_slug: str = ""
    model: str = ""
    model_year: str | None = None
    name: str = ""
    odometer_units: str = ""
    odometer_value: int = 0
    original_price: str = ""
    plate: str = ""
    previous_keepers: int = 0
    price: str = ""
    price_ex_vat: str = ""
    price_when_new: str = ""
    range: str = ""
    range_slug: str = ""
    reserved: str = ""
    seats: str = ""
    site: str = ""
    site_slug: str = ""
    slug: str = ""
    status: str = ""
    stock_id: str = ""
    tax_rate_value: str = ""
    transmission: str = ""
    vat: str = ""
    vat_scheme: str = ""
    vat_when_new: str = ""
    vin: str = ""
    vrm: str = ""
    year: str = ""
    media_urls: list[MediaURLSeedDTO] = []
    original_media_urls: list[str] = []
    key_features: list[str] = []
    monthly_payment: str = ""
    monthly_finance_type: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is not None or info.field_name in NULLABLE_FIELDS:
            return value
        field = cls.model_fields[info.field_name]
        if field.is_required():
            return value
        return field.get_default(call_default_factory=True)


_fixture_adapter = TypeAdapter(list[VehicleListingSeedDTO])


def load_fixture(path: Path) -> list[VehicleListingSeedDTO]:
    """
    Read and validate the fixture file.

    Raises:
        SeedError: If the file is missing, unreadable or malformed
    """
    logger.info("Loading vehicle data", extra={"path": str(path)})
    try:
        return _fixture_adapter.validate_json(path.read_bytes())
    except OSError as exc:
        raise SeedError(f"could not read vehicle fixture: {path}") from exc
    except PydanticValidationError as exc:
        raise SeedError(f"invalid vehicle fixture: {path}") from exc


def _count_vehicles(session: Session) -> int:
    return session.execute(select(func.count()).select_from(VehicleRow)).scalar_one()


def _insert_listings(
    session: Session, listings: list[VehicleListingSeedDTO], batch_size: int
) -> int:
    total = len(listings)
    for start in range(0, total, batch_size):
        batch = listings[start : start + batch_size]
        session.add_all([VehicleRow(**listing.model_dump()) for listing in batch])
        session.flush()
        logger.info("Inserted batch %d-%d of %d vehicles", start + 1, start + len(batch), total)
    return total


def seed_vehicles(
    session_factory: sessionmaker[Session],
    fixture_path: Path | None = None,
    batch_size: int = BATCH_SIZE,
) -> int:
    """
    Seed the vehicles table if, and only if, it is empty.

    The whole seed runs in one transaction; a failing batch rolls back
    everything inserted so far.

    Args:
        session_factory: Factory for the session used for the seed
        fixture_path: JSON fixture to load (defaults to the bundled one)
        batch_size: Listings per INSERT flush

    Returns:
        Number of listings inserted (0 when the table already had data)

    Raises:
        SeedError: If the fixture cannot be loaded or an insert fails
    """
    path = fixture_path or DEFAULT_FIXTURE_PATH

    try:
        with session_scope(session_factory) as session:
            existing = _count_vehicles(session)
            if existing > 0:
                logger.info("Database already contains %d vehicles, skipping seed", existing)
                return 0

            logger.info("Seeding database with vehicle data")
            inserted = _insert_listings(session, load_fixture(path), batch_size)
    except SQLAlchemyError as exc:
        raise SeedError("failed to seed vehicles") from exc

    logger.info("Successfully seeded database with %d vehicles", inserted)
    return inserted
