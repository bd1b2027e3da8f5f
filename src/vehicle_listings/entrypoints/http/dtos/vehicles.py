from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MediaURLDTO(BaseModel):
    large: str
    medium: str
    thumb: str


class VehicleResponseDTO(BaseModel):
    """A single listing as returned by every vehicle endpoint."""

    model_config = ConfigDict(protected_namespaces=())

    id: int
    advert_classification: str
    vehicle_id: int
    attention_grabber: str | None
    body_type: str
    body_type_slug: str
    colour: str
    company: str
    date_first_registered: str | None
    derivative: str
    description: str
    doors: str
    drivetrain: str
    extra_description: str
    fuel_type: str
    fuel_type_slug: str
    insurance_group: str
    location: str
    location_slug: str
    make: str
    make_slug: str
    model: str
    model_year: str | None
    name: str
    odometer_units: str
    odometer_value: int
    original_price: str
    plate: str
    previous_keepers: int
    price: str
    price_ex_vat: str
    price_when_new: str
    range: str
    range_slug: str
    reserved: str
    seats: str
    site: str
    site_slug: str
    slug: str
    status: str
    stock_id: str
    tax_rate_value: str
    transmission: str
    vat: str
    vat_scheme: str
    vat_when_new: str
    vin: str
    vrm: str
    year: str
    media_urls: list[MediaURLDTO]
    original_media_urls: list[str]
    key_features: list[str]
    monthly_payment: str
    monthly_finance_type: str
    created_at: datetime | None
    updated_at: datetime | None


class VehiclesQueryDTO(BaseModel):
    """
    Query parameters for the vehicle list.

    page and results_per_page arrive as raw strings: anything that is not an
    integer falls back to the default instead of failing the request.
    """

    page: str | None = Field(
        default=None,
        description="Page number, starting at 1 (default 1)",
        examples=["1"],
    )
    results_per_page: str | None = Field(
        default=None,
        description="Results per page, 1-100 (default 10)",
        examples=["10"],
    )
    advert_classification: str | None = Field(
        default=None,
        description="New, Used or All (case-insensitive)",
        examples=["Used"],
    )
    make: str | None = Field(
        default=None,
        description="Filter by make (case-insensitive exact match)",
        examples=["Skoda"],
    )
    model: str | None = Field(
        default=None,
        description="Filter by model (case-insensitive substring match)",
        examples=["Fab"],
    )
    fuel_type: str | None = Field(
        default=None,
        description="Filter by fuel type (case-insensitive exact match)",
        examples=["Petrol"],
    )
    transmission: str | None = Field(
        default=None,
        description="Filter by transmission (case-insensitive exact match)",
        examples=["Manual"],
    )
    body_type: str | None = Field(
        default=None,
        description="Filter by body type (case-insensitive exact match)",
        examples=["Hatchback"],
    )
    min_price: str | None = Field(
        default=None,
        description="Minimum price (inclusive); 0 or empty means unset",
        examples=["5000"],
    )
    max_price: str | None = Field(
        default=None,
        description="Maximum price (inclusive); 0 or empty means unset",
        examples=["10000"],
    )
    min_year: str | None = Field(
        default=None,
        description="Minimum year (inclusive); 0 or empty means unset",
        examples=["2018"],
    )
    max_year: str | None = Field(
        default=None,
        description="Maximum year (inclusive); 0 or empty means unset",
        examples=["2024"],
    )


class ResponseMetaDTO(BaseModel):
    current_page: int
    last_page: int
    per_page: int
    total: int
    all_total: int
    total_new_vehicles: int
    total_used_vehicles: int
    offer_vehicles: int


class VehicleListResponseDTO(BaseModel):
    data: list[VehicleResponseDTO]
    meta: ResponseMetaDTO


class MakesResponseDTO(BaseModel):
    makes: list[str]


class ModelsResponseDTO(BaseModel):
    models: list[str]
