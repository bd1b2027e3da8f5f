from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation

from vehicle_listings.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


# Classification value that disables the classification filter
ALL_CLASSIFICATIONS = "all"

# Bound values that mean "no constraint" in addition to the empty string
UNSET_BOUND = "0"


@dataclass(frozen=True, slots=True)
class MediaURL:
    """One image in three sizes."""

    large: str = ""
    medium: str = ""
    thumb: str = ""


@dataclass(frozen=True)
class Vehicle:
    id: int
    vehicle_id: int
    advert_classification: str
    make: str
    model: str

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
    make_slug: str = ""
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

    media_urls: list[MediaURL] = field(default_factory=list)
    original_media_urls: list[str] = field(default_factory=list)
    key_features: list[str] = field(default_factory=list)

    monthly_payment: str = ""
    monthly_finance_type: str = ""

    created_at: datetime | None = None
    updated_at: datetime | None = None


def _bound_text(value: str | None) -> str | None:
    """Stripped bound text, or None when the bound is unset."""
    if value is None:
        return None
    value = value.strip()
    if value == "" or value == UNSET_BOUND:
        return None
    return value


def _parse_bound(value: str | None) -> Decimal | None:
    """Numeric value of a price/year bound; None when unset or not a number."""
    text = _bound_text(value)
    if text is None:
        return None
    try:
        bound = Decimal(text)
    except InvalidOperation:
        return None
    return bound if bound.is_finite() else None


@dataclass(frozen=True, slots=True)
class VehicleFilters:
    """
    Optional filter fields for the vehicle list.

    Values are kept exactly as received. Empty strings mean "no constraint";
    for price and year bounds the literal "0" also means "no constraint".
    """

    advert_classification: str | None = None
    make: str | None = None
    model: str | None = None
    fuel_type: str | None = None
    transmission: str | None = None
    body_type: str | None = None
    min_price: str | None = None
    max_price: str | None = None
    min_year: str | None = None
    max_year: str | None = None

    @property
    def classification(self) -> str | None:
        """Classification to match, or None when absent or "all"."""
        if not self.advert_classification:
            return None
        if self.advert_classification.lower() == ALL_CLASSIFICATIONS:
            return None
        return self.advert_classification

    @property
    def min_price_value(self) -> Decimal | None:
        return _parse_bound(self.min_price)

    @property
    def max_price_value(self) -> Decimal | None:
        return _parse_bound(self.max_price)

    @property
    def min_year_value(self) -> Decimal | None:
        return _parse_bound(self.min_year)

    @property
    def max_year_value(self) -> Decimal | None:
        return _parse_bound(self.max_year)

    @property
    def matches_nothing(self) -> bool:
        """
        True when a price or year bound is set but is not a number.

        Filters accept any string; a bound no stored number can be compared
        against simply leaves the result empty.
        """
        bounds = (self.min_price, self.max_price, self.min_year, self.max_year)
        return any(
            _bound_text(bound) is not None and _parse_bound(bound) is None for bound in bounds
        )


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 1
    results_per_page: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.results_per_page

    @property
    def limit(self) -> int:
        return self.results_per_page

    def validate(self) -> None:
        """
        Validate paging parameters.

        The upper bound on results_per_page belongs to the HTTP boundary,
        not to the query itself.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 1:
            raise PagingValidationError("page must be greater than 0", field="page")
        if self.results_per_page < 1:
            raise PagingValidationError(
                "results_per_page must be greater than 0", field="results_per_page"
            )


@dataclass(frozen=True, slots=True)
class ResponseMetadata:
    current_page: int
    last_page: int
    per_page: int
    total: int
    all_total: int
    total_new_vehicles: int
    total_used_vehicles: int
    # No "has offer" attribute exists on listings yet, so this stays 0
    offer_vehicles: int = 0

    @staticmethod
    def compute_last_page(total: int, per_page: int) -> int:
        """Ceiling of total / per_page; 0 when there is nothing to page."""
        last_page = total // per_page
        if total % per_page > 0:
            last_page += 1
        return last_page
