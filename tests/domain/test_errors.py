"""Tests for domain error classes."""

from motor_metrics.domain.errors import (
    DomainError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from motor_metrics.ports.listing_search_gateway import ListingSearchError
from motor_metrics.ports.model_lookup_gateway import ModelLookupError
from motor_metrics.use_cases.search_controller import ListingNotFoundError


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
        """DomainError stores message and has correct error code."""
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}

    def test_creates_error_with_context(self) -> None:
        """DomainError stores additional context."""
        error = DomainError("Error occurred", resource="Listing", action="select")

        assert error.context == {"resource": "Listing", "action": "select"}

    def test_to_dict_returns_structured_format(self) -> None:
        """DomainError.to_dict() returns structured error format."""
        error = DomainError("Test error", field="zip", value="")

        assert error.to_dict() == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "field": "zip",
            "value": "",
        }

    def test_str_representation(self) -> None:
        """DomainError string representation is the message."""
        assert str(DomainError("Test message")) == "Test message"


class TestValidationError:
    """Tests for ValidationError class."""

    def test_creates_simple_validation_error(self) -> None:
        error = ValidationError("Invalid input")

        assert error.message == "Invalid input"
        assert error.error_code == "VALIDATION_ERROR"
        assert error.errors is None

    def test_creates_validation_error_with_default_message(self) -> None:
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.errors is None

    def test_creates_validation_error_with_field_errors(self) -> None:
        errors = [
            {"field": "zip", "message": "Must not be empty", "code": "REQUIRED"},
            {"field": "year_min", "message": "Must be <= year_max", "code": "INVALID_RANGE"},
        ]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.errors == errors

    def test_to_dict_includes_field_errors(self) -> None:
        errors = [{"field": "radius", "message": "Must be between 1 and 500"}]

        assert ValidationError(errors=errors).to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }

    def test_to_dict_without_field_errors(self) -> None:
        assert ValidationError("Simple error").to_dict() == {
            "message": "Simple error",
            "code": "VALIDATION_ERROR",
        }


class TestNotFoundError:
    """Tests for NotFoundError class."""

    def test_creates_not_found_error_with_identifier(self) -> None:
        error = NotFoundError("SearchSession", "abc123")

        assert error.message == "SearchSession with identifier 'abc123' not found"
        assert error.error_code == "NOT_FOUND"
        assert error.context == {"resource": "SearchSession", "identifier": "abc123"}

    def test_creates_not_found_error_without_identifier(self) -> None:
        error = NotFoundError("Listing")

        assert error.message == "Listing not found"
        assert error.context["identifier"] is None

    def test_listing_not_found_error(self) -> None:
        error = ListingNotFoundError("vin-1")

        assert isinstance(error, NotFoundError)
        assert error.message == "Listing with identifier 'vin-1' not found"


class TestUpstreamError:
    """Tests for UpstreamError and the gateway errors built on it."""

    def test_creates_upstream_error(self) -> None:
        error = UpstreamError("Search service unavailable", status_code=503)

        assert error.error_code == "UPSTREAM_ERROR"
        assert error.context == {"status_code": 503}

    def test_gateway_errors_are_upstream_errors(self) -> None:
        assert ListingSearchError("boom").error_code == "UPSTREAM_ERROR"
        assert ModelLookupError("boom").error_code == "UPSTREAM_ERROR"

