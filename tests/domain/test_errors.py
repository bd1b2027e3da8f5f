"""Tests for the domain error hierarchy."""

from __future__ import annotations

from vehicle_listings.domain.errors import (
    DomainError,
    InternalError,
    NotFoundError,
    SeedError,
    StoreError,
    ValidationError,
)


def test_domain_error_keeps_message_and_context() -> None:
    error = DomainError("something broke", field="make")

    assert error.message == "something broke"
    assert error.context == {"field": "make"}
    assert str(error) == "something broke"


def test_domain_error_to_dict() -> None:
    error = DomainError("something broke", field="make")

    assert error.to_dict() == {
        "message": "something broke",
        "code": "DOMAIN_ERROR",
        "field": "make",
    }


def test_validation_error_records_field() -> None:
    error = ValidationError("page must be greater than 0", field="page")

    assert error.error_code == "VALIDATION_ERROR"
    assert error.field == "page"
    assert error.to_dict()["field"] == "page"


def test_validation_error_default_message() -> None:
    assert ValidationError().message == "Validation error"


def test_not_found_message_hides_identifier() -> None:
    error = NotFoundError(resource="vehicle", identifier="42")

    assert error.message == "vehicle not found"
    assert error.error_code == "NOT_FOUND"
    assert error.context["identifier"] == "42"


def test_store_error_is_internal() -> None:
    error = StoreError("failed to fetch vehicles")

    assert isinstance(error, InternalError)
    assert error.error_code == "INTERNAL_ERROR"


def test_seed_error_is_internal_with_own_code() -> None:
    error = SeedError("failed to seed vehicles")

    assert isinstance(error, InternalError)
    assert error.error_code == "SEED_ERROR"
