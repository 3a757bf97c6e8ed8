"""Error payload schemas and the per-route OpenAPI error documentation built from them."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """One rejected field of a search form or request body."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "year_min",
                "message": "Must be less than or equal to year_max",
                "code": "INVALID_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Body of every non-2xx response; ``errors`` is only set for 422."""

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "SearchSession with identifier 'abc' not found", "code": "NOT_FOUND"},
                {"detail": "Failed to fetch models for Ford: 503", "code": "UPSTREAM_ERROR"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {"field": "zip", "message": "Must not be empty", "code": "REQUIRED"},
                    ],
                },
            ]
        }
    )


ERROR_DESCRIPTIONS: dict[int, str] = {
    404: "Unknown session or listing",
    422: "Search form or request body rejected",
    502: "Search or model lookup service failed",
}


def documented_errors(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    """``responses=`` mapping for a route that can fail with the given statuses."""
    return {
        code: {"model": ErrorResponse, "description": ERROR_DESCRIPTIONS[code]}
        for code in status_codes
    }
