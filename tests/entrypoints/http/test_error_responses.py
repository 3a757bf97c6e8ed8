"""Tests for REST error response models."""

from motor_metrics.entrypoints.http.app import build_app
from motor_metrics.entrypoints.http.error_responses import ErrorDetail, ErrorResponse, documented_errors


def test_error_detail_requires_field_and_message() -> None:
    detail = ErrorDetail(field="zip", message="Must not be empty")

    assert detail.field == "zip"
    assert detail.code is None


def test_error_response_simple() -> None:
    response = ErrorResponse(detail="Listing not found", code="NOT_FOUND")

    assert response.model_dump(exclude_none=True) == {
        "detail": "Listing not found",
        "code": "NOT_FOUND",
    }


def test_error_response_with_field_errors() -> None:
    response = ErrorResponse(
        detail="Validation failed",
        code="VALIDATION_ERROR",
        errors=[ErrorDetail(field="zip", message="Must not be empty", code="REQUIRED")],
    )

    assert response.errors is not None
    assert response.errors[0].code == "REQUIRED"


def test_error_response_schema_has_examples() -> None:
    schema = ErrorResponse.model_json_schema()

    assert "examples" in schema


def test_documented_errors_builds_route_responses() -> None:
    responses = documented_errors(404, 502)

    assert set(responses) == {404, 502}
    assert responses[404]["model"] is ErrorResponse
    assert responses[502]["description"] == "Search or model lookup service failed"


def test_documented_errors_reach_openapi_schema() -> None:
    schema = build_app().openapi()

    search = schema["paths"]["/v1/sessions/{session_id}/search"]["post"]["responses"]
    models = schema["paths"]["/v1/models"]["get"]["responses"]

    assert search["404"]["description"] == "Unknown session or listing"
    assert search["422"]["description"] == "Search form or request body rejected"
    assert models["502"]["description"] == "Search or model lookup service failed"
