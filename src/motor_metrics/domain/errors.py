"""Domain error classes.

Protocol-agnostic errors that represent search failures.
These errors are translated to HTTP responses by the entrypoint adapters.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Contains error information that can be translated to any
    presentation format.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
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
    """Input validation error.

    Examples:
        - empty zip code
        - year_min > year_max
        - unknown sort key

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "zip", "message": "Must not be empty"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Search session with ID not found
        - Listing key not among the current results

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Listing", "SearchSession")
            identifier: Resource identifier (e.g., listing id or VIN)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class UpstreamError(DomainError):
    """A remote collaborator (search or lookup service) failed.

    Examples:
        - Search service answered with a non-2xx status
        - Connection refused or timed out
        - Response body was not the expected JSON

    Protocol mappings:
        - REST: 502 Bad Gateway
    """

    error_code: str = "UPSTREAM_ERROR"

