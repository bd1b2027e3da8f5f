"""Tests for REST error response models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from vehicle_listings.entrypoints.http.error_responses import ErrorResponse


class TestErrorResponse:
    """Tests for ErrorResponse model."""

    def test_serializes_to_single_key(self) -> None:
        """ErrorResponse has exactly one key, "error"."""
        response = ErrorResponse(error="vehicle not found")

        assert response.model_dump() == {"error": "vehicle not found"}

    def test_requires_error(self) -> None:
        with pytest.raises(PydanticValidationError):
            ErrorResponse()  # type: ignore[call-arg]

    def test_json_schema_has_examples(self) -> None:
        schema = ErrorResponse.model_json_schema()

        assert schema["required"] == ["error"]
        assert {"error": "vehicle not found"} in schema["examples"]
