"""SQLAlchemy implementation of VehicleRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import case, false, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vehicle_listings.domain.errors import StoreError
from vehicle_listings.domain.vehicle import MediaURL, Paging, Vehicle, VehicleFilters
from vehicle_listings.infra.db.models.vehicle import VehicleRow
from vehicle_listings.infra.db.types import safe_numeric
from vehicle_listings.ports.vehicle_repository import CatalogStats, SearchResult, VehicleRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import Select

logger = logging.getLogger(__name__)

# Largest OFFSET the store accepts (signed 64-bit)
MAX_OFFSET = 2**63 - 1


class SqlAlchemyVehicleRepository(VehicleRepository):
    """
    SQLAlchemy implementation of VehicleRepository (PostgreSQL in production).

    - Applies filters using SQL WHERE clauses
    - Case-insensitive matching via LOWER() on both sides
    - Price/year bounds compare a guarded numeric cast of the text columns
    - Returns total_count via COUNT(*) query
    - Converts VehicleRow (infrastructure) to Vehicle (domain)
    - Wraps SQLAlchemyError in StoreError with a generic message
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def search(self, filters: VehicleFilters, paging: Paging) -> SearchResult:
        """
        Search listings with filters and paging.

        Executes two queries:
        1. COUNT(*) to get total matching listings (before paging)
        2. SELECT ordered by vehicle_id with OFFSET/LIMIT

        Args:
            filters: Filter criteria (AND semantics) - must be pre-validated
            paging: Pagination parameters - must be pre-validated

        Returns:
            SearchResult with vehicles and total_count

        Raises:
            StoreError: If either query fails
        """
        query = self._build_query(filters)

        count_query = select(func.count()).select_from(query.subquery())
        try:
            total_count = self._session.execute(count_query).scalar() or 0
        except SQLAlchemyError as exc:
            logger.exception("Vehicle count query failed")
            raise StoreError("failed to fetch vehicles") from exc

        if paging.offset > MAX_OFFSET:
            return SearchResult(vehicles=[], total_count=total_count)

        # Secondary key keeps pages stable when vehicle_id repeats
        query = (
            query.order_by(VehicleRow.vehicle_id.asc(), VehicleRow.id.asc())
            .offset(paging.offset)
            .limit(paging.limit)
        )
        try:
            rows = self._session.execute(query).scalars().all()
        except SQLAlchemyError as exc:
            logger.exception("Vehicle fetch query failed")
            raise StoreError("failed to fetch vehicles") from exc

        return SearchResult(
            vehicles=[self._to_domain(row) for row in rows],
            total_count=total_count,
        )

    def catalog_stats(self) -> CatalogStats:
        """
        Count every listing plus the New and Used subtotals in one query.

        Ignores any request filter by construction.
        """
        classification = func.lower(VehicleRow.advert_classification)
        query = select(
            func.count(VehicleRow.id),
            func.count(case((classification == "new", 1))),
            func.count(case((classification == "used", 1))),
        )
        try:
            all_total, total_new, total_used = self._session.execute(query).one()
        except SQLAlchemyError as exc:
            logger.exception("Vehicle statistics query failed")
            raise StoreError("failed to fetch vehicles") from exc

        return CatalogStats(
            all_total=all_total or 0,
            total_new=total_new or 0,
            total_used=total_used or 0,
        )

    def get_by_id(self, vehicle_id: int) -> Vehicle | None:
        """
        Get a listing by internal id.

        Returns:
            Vehicle if found, None otherwise
        """
        try:
            row = self._session.get(VehicleRow, vehicle_id)
        except SQLAlchemyError as exc:
            logger.exception("Vehicle lookup by id failed", extra={"vehicle_id": vehicle_id})
            raise StoreError("failed to fetch vehicle") from exc
        return self._to_domain(row) if row else None

    def get_by_vrm(self, vrm: str) -> Vehicle | None:
        """
        Get a listing by registration mark, ignoring case.

        VRMs are expected to be unique but no constraint enforces it; the
        lowest internal id wins if several rows share one.
        """
        query = (
            select(VehicleRow)
            .where(func.lower(VehicleRow.vrm) == vrm.lower())
            .order_by(VehicleRow.id.asc())
            .limit(1)
        )
        try:
            row = self._session.execute(query).scalars().first()
        except SQLAlchemyError as exc:
            logger.exception("Vehicle lookup by VRM failed", extra={"vrm": vrm})
            raise StoreError("failed to fetch vehicle") from exc
        return self._to_domain(row) if row else None

    def list_makes(self) -> list[str]:
        query = select(VehicleRow.make).distinct().order_by(VehicleRow.make.asc())
        try:
            return list(self._session.execute(query).scalars().all())
        except SQLAlchemyError as exc:
            logger.exception("Make listing query failed")
            raise StoreError("failed to fetch makes") from exc

    def list_models(self, make: str | None = None) -> list[str]:
        query = select(VehicleRow.model).distinct().order_by(VehicleRow.model.asc())
        if make:
            query = query.where(func.lower(VehicleRow.make) == make.lower())
        try:
            return list(self._session.execute(query).scalars().all())
        except SQLAlchemyError as exc:
            logger.exception("Model listing query failed", extra={"make": make})
            raise StoreError("failed to fetch models") from exc

    def _build_query(self, filters: VehicleFilters) -> Select[tuple[VehicleRow]]:
        """
        Build SQLAlchemy query with filters applied.

        Args:
            filters: Filter criteria to apply

        Returns:
            SQLAlchemy select statement with WHERE clauses
        """
        query = select(VehicleRow)

        # A non-numeric price or year bound can never be satisfied
        if filters.matches_nothing:
            return query.where(false())

        # "all" (any case) disables the classification filter
        if filters.classification:
            query = query.where(
                func.lower(VehicleRow.advert_classification) == filters.classification.lower()
            )

        # Case-insensitive exact matches
        if filters.make:
            query = query.where(func.lower(VehicleRow.make) == filters.make.lower())
        if filters.fuel_type:
            query = query.where(func.lower(VehicleRow.fuel_type) == filters.fuel_type.lower())
        if filters.transmission:
            query = query.where(
                func.lower(VehicleRow.transmission) == filters.transmission.lower()
            )
        if filters.body_type:
            query = query.where(func.lower(VehicleRow.body_type) == filters.body_type.lower())

        # Case-insensitive substring match for model
        if filters.model:
            query = query.where(
                func.lower(VehicleRow.model).contains(filters.model.lower(), autoescape=True)
            )

        # Price range filters (inclusive)
        min_price = filters.min_price_value
        if min_price is not None:
            query = query.where(safe_numeric(VehicleRow.price) >= min_price)
        max_price = filters.max_price_value
        if max_price is not None:
            query = query.where(safe_numeric(VehicleRow.price) <= max_price)

        # Year range filters (inclusive)
        min_year = filters.min_year_value
        if min_year is not None:
            query = query.where(safe_numeric(VehicleRow.year) >= min_year)
        max_year = filters.max_year_value
        if max_year is not None:
            query = query.where(safe_numeric(VehicleRow.year) <= max_year)

        return query

    def _to_domain(self, row: VehicleRow) -> Vehicle:
        """
        Convert database model (VehicleRow) to domain entity (Vehicle).

        Media triples come back from the JSON column as dicts and are
        rehydrated into MediaURL values here.
        """
        return Vehicle(
            id=row.id,
            vehicle_id=row.vehicle_id,
            advert_classification=row.advert_classification,
            make=row.make,
            model=row.model,
            attention_grabber=row.attention_grabber,
            body_type=row.body_type,
            body_type_slug=row.body_type_slug,
            colour=row.colour,
            company=row.company,
            date_first_registered=row.date_first_registered,
            derivative=row.derivative,
            description=row.description,
            doors=row.doors,
            drivetrain=row.drivetrain,
            extra_description=row.extra_description,
            fuel_type=row.fuel_type,
            fuel_type_slug=row.fuel_type_slug,
            insurance_group=row.insurance_group,
            location=row.location,
            location_slug=row.location_slug,
            make_slug=row.make_slug,
            model_year=row.model_year,
            name=row.name,
            odometer_units=row.odometer_units,
            odometer_value=row.odometer_value,
            original_price=row.original_price,
            plate=row.plate,
            previous_keepers=row.previous_keepers,
            price=row.price,
            price_ex_vat=row.price_ex_vat,
            price_when_new=row.price_when_new,
            range=row.range,
            range_slug=row.range_slug,
            reserved=row.reserved,
            seats=row.seats,
            site=row.site,
            site_slug=row.site_slug,
            slug=row.slug,
            status=row.status,
            stock_id=row.stock_id,
            tax_rate_value=row.tax_rate_value,
            transmission=row.transmission,
            vat=row.vat,
            vat_scheme=row.vat_scheme,
            vat_when_new=row.vat_when_new,
            vin=row.vin,
            vrm=row.vrm,
            year=row.year,
            media_urls=[
                MediaURL(
                    large=media.get("large", ""),
                    medium=media.get("medium", ""),
                    thumb=media.get("thumb", ""),
                )
                for media in row.media_urls or []
            ],
            original_media_urls=list(row.original_media_urls or []),
            key_features=list(row.key_features or []),
            monthly_payment=row.monthly_payment,
            monthly_finance_type=row.monthly_finance_type,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
