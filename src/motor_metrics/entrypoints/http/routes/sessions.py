from fastapi import APIRouter, Depends, Response, status

from motor_metrics.entrypoints.http.dependencies import (
    get_search_controller,
    get_session_registry,
)
from motor_metrics.entrypoints.http.dtos.search_session import (
    SearchRequestDTO,
    SearchViewDTO,
    SelectionRequestDTO,
    SessionCreatedDTO,
    SortRequestDTO,
)
from motor_metrics.entrypoints.http.error_responses import documented_errors
from motor_metrics.entrypoints.http.mappers.search_session_mapper import SearchSessionMapper
from motor_metrics.entrypoints.http.session_registry import SessionRegistry
from motor_metrics.use_cases.search_controller import SearchController


router = APIRouter(tags=["Search sessions"])


@router.post(
    "/sessions",
    response_model=SessionCreatedDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Start a search session",
)
async def create_session(
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionCreatedDTO:
    session_id, controller = registry.create()
    return SessionCreatedDTO(
        session_id=session_id,
        view=SearchSessionMapper.to_view_response(controller.view),
    )


@router.get(
    "/sessions/{session_id}",
    response_model=SearchViewDTO,
    summary="Read a search session",
    description="""
    Current phase, the year-filtered results in the selected sort order,
    the selected listing (full detail) and the error message, if any.

    An empty `listings` array in the `success` phase means no vehicles were
    found; failures are reported with phase `error`.
    """,
    responses=documented_errors(404),
)
async def get_session(
    controller: SearchController = Depends(get_search_controller),
) -> SearchViewDTO:
    return SearchSessionMapper.to_view_response(controller.view)


@router.delete(
    "/sessions/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="End a search session",
    responses=documented_errors(404),
)
async def delete_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> Response:
    registry.remove(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/sessions/{session_id}/search",
    response_model=SearchViewDTO,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Submit a search",
    description="""
    Start a search for the session and return immediately in the
    `searching` phase. Any previous results and selection are cleared and
    a search still in flight is superseded.

    Make, model, zip and radius are sent to the search service; the year
    range is applied to the returned listings. Poll
    `GET /v1/sessions/{session_id}` for the outcome.

    ## Example
    ```
    POST /v1/sessions/{session_id}/search
    {"make": "Ford", "model": "F-150", "zip": "92617", "radius": 50,
     "year_min": 2018, "year_max": 2022}
    ```
    """,
    responses=documented_errors(404, 422),
)
async def submit_search(
    payload: SearchRequestDTO,
    controller: SearchController = Depends(get_search_controller),
) -> SearchViewDTO:
    """Submit endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain filters
    filters = SearchSessionMapper.to_filter_set(payload)

    # 2. Start the search (validates, moves to searching)
    controller.submit_search(filters)

    # 3. Map to response
    return SearchSessionMapper.to_view_response(controller.view)


@router.put(
    "/sessions/{session_id}/sort",
    response_model=SearchViewDTO,
    summary="Change the sort order",
    responses=documented_errors(404, 422),
)
async def set_sort(
    payload: SortRequestDTO,
    controller: SearchController = Depends(get_search_controller),
) -> SearchViewDTO:
    controller.set_sort_key(payload.sort_key)
    return SearchSessionMapper.to_view_response(controller.view)


@router.put(
    "/sessions/{session_id}/selection",
    response_model=SearchViewDTO,
    summary="Open a listing in the detail view",
    responses=documented_errors(404),
)
async def select_listing(
    payload: SelectionRequestDTO,
    controller: SearchController = Depends(get_search_controller),
) -> SearchViewDTO:
    controller.select_listing_by_key(payload.listing_key)
    return SearchSessionMapper.to_view_response(controller.view)


@router.delete(
    "/sessions/{session_id}/selection",
    response_model=SearchViewDTO,
    summary="Close the detail view",
    responses=documented_errors(404),
)
async def clear_selection(
    controller: SearchController = Depends(get_search_controller),
) -> SearchViewDTO:
    controller.clear_selection()
    return SearchSessionMapper.to_view_response(controller.view)
