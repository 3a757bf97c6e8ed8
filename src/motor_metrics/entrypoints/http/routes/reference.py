from fastapi import APIRouter, Depends, Query

from motor_metrics.adapters.make_catalog import load_makes
from motor_metrics.entrypoints.http.dependencies import get_model_lookup_gateway
from motor_metrics.entrypoints.http.dtos.reference import MakesResponseDTO, ModelsResponseDTO
from motor_metrics.entrypoints.http.error_responses import documented_errors
from motor_metrics.ports.model_lookup_gateway import ModelLookupGateway


router = APIRouter(tags=["Reference data"])


@router.get(
    "/makes",
    response_model=MakesResponseDTO,
    summary="List vehicle makes",
    description="Static make list offered by the search form, sorted alphabetically.",
)
def get_makes() -> MakesResponseDTO:
    return MakesResponseDTO(makes=list(load_makes()))


@router.get(
    "/models",
    response_model=ModelsResponseDTO,
    summary="List models for a make",
    description="""
    Resolve the models available for a make through the model lookup service.

    ## Example
    ```
    GET /v1/models?make=Ford
    ```
    """,
    responses=documented_errors(422, 502),
)
async def get_models(
    make: str = Query(min_length=1, description="Vehicle make", examples=["Ford"]),
    gateway: ModelLookupGateway = Depends(get_model_lookup_gateway),
) -> ModelsResponseDTO:
    models = await gateway.models_for_make(make)
    return ModelsResponseDTO(make=make, models=models)
