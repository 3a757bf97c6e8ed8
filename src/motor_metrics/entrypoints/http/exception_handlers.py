"""FastAPI exception handlers.

Every error leaves the API as ``{"detail", "code", "errors"?}``. Domain errors
carry their own code; failures of the search or model lookup services are
reported as 502 since the request itself was fine.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from motor_metrics.domain.errors import DomainError, NotFoundError, UpstreamError, ValidationError

logger = logging.getLogger(__name__)

STATUS_CODE_MAP: dict[str, int] = {
    "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "UPSTREAM_ERROR": status.HTTP_502_BAD_GATEWAY,
}


def _request_fields(request: Request) -> dict[str, Any]:
    return {"path": request.url.path, "method": request.method}


def _error_body(code: str, detail: str, errors: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"detail": detail, "code": code}
    if errors is not None:
        body["errors"] = errors
    return body


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a DomainError to its HTTP status.

    - VALIDATION_ERROR → 422 (field errors included)
    - NOT_FOUND → 404 (unknown session or listing)
    - UPSTREAM_ERROR → 502 (search or model lookup service failed)
    - anything else → 400
    """
    status_code = STATUS_CODE_MAP.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, UpstreamError):
        # Service context (make, status_code, endpoint) tells which dependency broke
        logger.warning(
            "Upstream service failed",
            extra={
                **_request_fields(request),
                "error_type": type(exc).__name__,
                "detail": exc.message,
                "upstream": exc.context,
            },
        )
    elif isinstance(exc, NotFoundError):
        logger.info(
            "Resource not found",
            extra={
                **_request_fields(request),
                "resource": exc.context.get("resource"),
                "identifier": exc.context.get("identifier"),
            },
        )
    elif isinstance(exc, ValidationError):
        logger.info(
            "Rejected invalid input",
            extra={
                **_request_fields(request),
                "fields": [error.get("field") for error in exc.errors or []],
            },
        )
    else:
        logger.info(
            "Client error",
            extra={**_request_fields(request), "error_code": exc.error_code, "detail": exc.message},
        )

    error_dict = exc.to_dict()
    return JSONResponse(
        status_code=status_code,
        content=_error_body(exc.error_code, exc.message, error_dict.get("errors")),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Flatten pydantic errors (bad radius, year out of bounds, missing zip) to field errors.

    The ``body``/``query`` prefix is dropped from each location, so a nested
    error reads ``field.subfield``.
    """
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"] if loc not in ("body", "query")),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]

    logger.info(
        "Request validation error",
        extra={**_request_fields(request), "fields": [error["field"] for error in errors]},
    )

    return JSONResponse(
        status_code=422,  # HTTP_422_UNPROCESSABLE_CONTENT
        content=_error_body("VALIDATION_ERROR", "Invalid request parameters", errors),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log with traceback, answer with a generic 500."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={**_request_fields(request), "error_type": type(exc).__name__},
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("INTERNAL_ERROR", "An unexpected error occurred"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register the handlers above; call once while building the app."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered")
