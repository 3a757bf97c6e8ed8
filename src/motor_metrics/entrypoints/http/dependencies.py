"""
Dependency injection for FastAPI routes.

Key principle: gateways are stateless and may be cached process-wide.
Search sessions are stateful and live on the application (app.state), one
controller per session. Anything touching a session is async so it runs on
the event loop that owns the controller tasks, never on a worker thread.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, Request

from motor_metrics.adapters.http_listing_search_gateway import HttpListingSearchGateway
from motor_metrics.adapters.http_model_lookup_gateway import HttpModelLookupGateway
from motor_metrics.entrypoints.http.session_registry import SessionRegistry
from motor_metrics.infra.config import api_url, page_size, search_timeout_seconds
from motor_metrics.ports.listing_search_gateway import ListingSearchGateway
from motor_metrics.ports.model_lookup_gateway import ModelLookupGateway
from motor_metrics.use_cases.search_controller import SearchController


@lru_cache(maxsize=1)
def get_listing_search_gateway() -> ListingSearchGateway:
    """Process-wide search service client (stateless, safe to share)."""
    return HttpListingSearchGateway(base_url=api_url(), timeout=search_timeout_seconds())


@lru_cache(maxsize=1)
def get_model_lookup_gateway() -> ModelLookupGateway:
    """Process-wide model lookup client (stateless, safe to share)."""
    return HttpModelLookupGateway(base_url=api_url(), timeout=search_timeout_seconds())


def build_search_controller() -> SearchController:
    """
    Factory for a fresh SearchController wired to the configured search service.

    Called once per session, never per request.
    """
    return SearchController(
        gateway=get_listing_search_gateway(),
        timeout=search_timeout_seconds(),
        page_size=page_size(),
    )


async def get_session_registry(request: Request) -> SessionRegistry:
    """
    Returns the session registry attached to the running application.

    Args:
        request: Current request (used to reach app.state)

    Returns:
        SessionRegistry: Registry created by build_app()
    """
    return request.app.state.session_registry


async def get_search_controller(
    session_id: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> SearchController:
    """
    Resolves the controller owned by the session in the request path.

    Raises:
        NotFoundError: If the session does not exist
    """
    return registry.get(session_id)
