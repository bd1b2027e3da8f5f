"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to HTTP responses by the exception handlers
in the HTTP entrypoint.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to an HTTP status and JSON body.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message, safe to show to clients
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Request parameter or business rule validation error.

    Examples:
        - page < 1
        - results_per_page outside [1, 100]
        - path id that is not made of digits

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(self, message: str | None = None, field: str | None = None, **context: Any) -> None:
        """Create a validation error.

        Args:
            message: Validation error message
            field: Name of the offending request parameter, if any
            **context: Additional context
        """
        self.field = field
        if field is not None:
            context["field"] = field
        super().__init__(message or "Validation error", **context)


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Vehicle with internal id not found
        - Vehicle with registration mark not found

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        The client-facing message is always "<resource> not found"; the
        identifier is kept as context for logging.

        Args:
            resource: Type of resource (e.g., "vehicle")
            identifier: Identifier that was looked up
            **context: Additional context
        """
        super().__init__(f"{resource} not found", resource=resource, identifier=identifier, **context)


class InternalError(DomainError):
    """Internal error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"


class StoreError(InternalError):
    """The persistence layer failed while counting or fetching.

    The message is generic ("failed to fetch vehicles"); the underlying
    driver exception is chained as ``__cause__`` and logged server side.
    """

    error_code: str = "INTERNAL_ERROR"


class SeedError(InternalError):
    """Loading or inserting the seed fixture failed."""

    error_code: str = "SEED_ERROR"
