import logging

from fastapi import FastAPI

from motor_metrics.entrypoints.http.dependencies import build_search_controller
from motor_metrics.entrypoints.http.exception_handlers import register_exception_handlers
from motor_metrics.entrypoints.http.routes.health import router as health_router
from motor_metrics.entrypoints.http.routes.reference import router as reference_router
from motor_metrics.entrypoints.http.routes.sessions import router as sessions_router
from motor_metrics.entrypoints.http.session_registry import SessionRegistry

logger = logging.getLogger(__name__)


def build_app(registry: SessionRegistry | None = None) -> FastAPI:
    app = FastAPI(
        title="Motor Metrics API",
        description="""
        Vehicle listing search sessions for the Motor Metrics front end.

        ## Features
        - Search listings by make, model, ZIP code and radius
        - Narrow results to a model-year range
        - Sort results by price, mileage or year
        - Open a single listing in full detail

        ## Sessions
        Each search session owns its own search state. Create one with
        `POST /v1/sessions`, then drive it with the session endpoints.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    if registry is None:
        registry = SessionRegistry(controller_factory=build_search_controller)
    app.state.session_registry = registry

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(reference_router, prefix="/v1")
    app.include_router(sessions_router, prefix="/v1")

    logger.info("Application built")
    return app


app = build_app()
