from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from vehicle_listings.infra.db.models.base import Base
from vehicle_listings.infra.db.types import JSONEncodedList


class VehicleRow(Base):
    __tablename__ = "vehicles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    vehicle_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    advert_classification: Mapped[str] = mapped_column(String(20), default="", index=True)
    attention_grabber: Mapped[str | None] = mapped_column(Text, nullable=True)
    body_type: Mapped[str] = mapped_column(String(50), default="", index=True)
    body_type_slug: Mapped[str] = mapped_column(String(50), default="")
    colour: Mapped[str] = mapped_column(String(50), default="")
    company: Mapped[str] = mapped_column(String(255), default="")
    # Kept as text (YYYY-MM-DD) exactly as the feed supplies it
    date_first_registered: Mapped[str | None] = mapped_column(String(10), nullable=True)
    derivative: Mapped[str] = mapped_column(String(255), default="")
    description: Mapped[str] = mapped_column(Text, default="")
    doors: Mapped[str] = mapped_column(String(2), default="")
    drivetrain: Mapped[str] = mapped_column(String(50), default="")
    extra_description: Mapped[str] = mapped_column(Text, default="")
    fuel_type: Mapped[str] = mapped_column(String(50), default="", index=True)
    fuel_type_slug: Mapped[str] = mapped_column(String(50), default="")
    insurance_group: Mapped[str] = mapped_column(String(10), default="")
    location: Mapped[str] = mapped_column(String(100), default="")
    location_slug: Mapped[str] = mapped_column(String(100), default="")
    make: Mapped[str] = mapped_column(String(100), default="", index=True)
    make_slug: Mapped[str] = mapped_column(String(100), default="")
    model: Mapped[str] = mapped_column(String(100), default="", index=True)
    model_year: Mapped[str | None] = mapped_column(String(4), nullable=True)
    name: Mapped[str] = mapped_column(String(255), default="")
    odometer_units: Mapped[str] = mapped_column(String(20), default="")
    odometer_value: Mapped[int] = mapped_column(Integer, default=0)
    previous_keepers: Mapped[int] = mapped_column(Integer, default=0)
    plate: Mapped[str] = mapped_column(String(50), default="")
    range: Mapped[str] = mapped_column(String(100), default="")
    range_slug: Mapped[str] = mapped_column(String(100), default="")
    reserved: Mapped[str] = mapped_column(String(50), default="")
    seats: Mapped[str] = mapped_column(String(2), default="")
    site: Mapped[str] = mapped_column(String(100), default="")
    site_slug: Mapped[str] = mapped_column(String(100), default="")
    slug: Mapped[str] = mapped_column(String(255), default="", index=True)
    status: Mapped[str] = mapped_column(String(50), default="")
    stock_id: Mapped[str] = mapped_column(String(50), default="", index=True)
    transmission: Mapped[str] = mapped_column(String(50), default="", index=True)
    vin: Mapped[str] = mapped_column(String(50), default="")
    vrm: Mapped[str] = mapped_column(String(20), default="", index=True)
    year: Mapped[str] = mapped_column(String(4), default="", index=True)

    # Money is text to keep the feed's formatting ("7495.00")
    price: Mapped[str] = mapped_column(String(20), default="", index=True)
    price_ex_vat: Mapped[str] = mapped_column(String(20), default="")
    price_when_new: Mapped[str] = mapped_column(String(20), default="")
    original_price: Mapped[str] = mapped_column(String(20), default="")
    tax_rate_value: Mapped[str] = mapped_column(String(20), default="")
    vat: Mapped[str] = mapped_column(String(20), default="")
    vat_scheme: Mapped[str] = mapped_column(String(50), default="")
    vat_when_new: Mapped[str] = mapped_column(String(20), default="")
    monthly_payment: Mapped[str] = mapped_column(String(20), default="")
    monthly_finance_type: Mapped[str] = mapped_column(String(20), default="")

    media_urls: Mapped[list[dict[str, Any]]] = mapped_column(JSONEncodedList, default=list)
    original_media_urls: Mapped[list[str]] = mapped_column(JSONEncodedList, default=list)
    key_features: Mapped[list[str]] = mapped_column(JSONEncodedList, default=list)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
