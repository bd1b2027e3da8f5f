"""REST API error response models.

Every error, whatever its status code, is returned as a single
``{"error": "<message>"}`` object.
"""

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Error response format.

    Examples:
        Bad input (400):
            {"error": "results_per_page must be between 1 and 100"}

        Not found (404):
            {"error": "vehicle not found"}

        Store failure (500):
            {"error": "failed to fetch vehicles"}
    """

    error: str

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"error": "page must be greater than 0"},
                {"error": "vehicle not found"},
                {"error": "failed to fetch vehicles"},
            ]
        }
    )
