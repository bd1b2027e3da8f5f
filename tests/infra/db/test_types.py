from __future__ import annotations

import pytest
from sqlalchemy import Engine, literal, select
from sqlalchemy.dialects import postgresql, sqlite

from vehicle_listings.infra.db.models import VehicleRow
from vehicle_listings.infra.db.types import JSONEncodedList, safe_numeric


# ==============================================================================
# JSONEncodedList
# ==============================================================================


@pytest.mark.parametrize("value", [None, []])
def test_empty_lists_are_written_as_empty_json(value: list[str] | None) -> None:
    assert JSONEncodedList().process_bind_param(value, sqlite.dialect()) == "[]"


def test_lists_are_written_as_json() -> None:
    encoded = JSONEncodedList().process_bind_param(["Bluetooth", "Sat Nav"], sqlite.dialect())

    assert encoded == '["Bluetooth", "Sat Nav"]'


@pytest.mark.parametrize("value", [None, ""])
def test_missing_text_reads_as_empty_list(value: str | None) -> None:
    assert JSONEncodedList().process_result_value(value, sqlite.dialect()) == []


def test_json_text_reads_as_list() -> None:
    decoded = JSONEncodedList().process_result_value('[{"thumb": "t.jpg"}]', sqlite.dialect())

    assert decoded == [{"thumb": "t.jpg"}]


# ==============================================================================
# safe_numeric
# ==============================================================================


def test_safe_numeric_on_postgresql_guards_with_regex() -> None:
    compiled = str(select(safe_numeric(VehicleRow.price)).compile(dialect=postgresql.dialect()))

    assert "btrim(vehicles.price) ~ '^[0-9]+([.][0-9]+)?$'" in compiled
    assert "CAST(btrim(vehicles.price) AS NUMERIC)" in compiled


def test_safe_numeric_on_sqlite_guards_with_glob() -> None:
    compiled = str(select(safe_numeric(VehicleRow.year)).compile(dialect=sqlite.dialect()))

    assert "trim(vehicles.year) NOT GLOB '*[^0-9.]*'" in compiled
    assert "trim(vehicles.year) NOT GLOB '.*'" in compiled
    assert "trim(vehicles.year) NOT GLOB '*.'" in compiled
    assert "CAST(trim(vehicles.year) AS NUMERIC)" in compiled


@pytest.mark.parametrize(
    ("text", "is_null"),
    [
        ("7495.00", False),
        ("2019", False),
        (" 2021 ", False),
        ("POA", True),
        ("", True),
        ("-5", True),
        ("1.2.3", True),
        ("12k", True),
        ("0.5", False),
        ("1.", True),
        (".5", True),
        (".", True),
    ],
)
def test_safe_numeric_on_sqlite_nulls_uncastable_text(
    engine: Engine, text: str, is_null: bool
) -> None:
    with engine.connect() as conn:
        result = conn.execute(select(safe_numeric(literal(text)).is_(None))).scalar_one()

    assert bool(result) is is_null
