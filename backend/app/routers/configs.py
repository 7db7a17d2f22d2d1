"""
Configs router for algorithm configuration management.
"""
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from app.core.exceptions import ConfigValidationError
from app.dependencies.store import get_config_service
from app.schemas.algo_config import (
    AlgoConfigList,
    AlgoConfigResponse,
    AlgoConfigStatsResponse,
    ErrorResponse,
    FieldErrorsResponse,
)
from app.services.config_service import AlgoConfigService

router = APIRouter(prefix="/configs", tags=["Configs"])

NOT_FOUND_DETAIL = "Config not found."


def _field_errors(exc: ConfigValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"errors": exc.errors},
    )


@router.get(
    "",
    response_model=AlgoConfigList,
    summary="List configurations",
)
def list_configs(
    config_service: AlgoConfigService = Depends(get_config_service),
):
    """List all configurations in creation order, with their count."""
    configs = config_service.list_configs()
    return {"data": configs, "count": len(configs)}


@router.get(
    "/stats",
    response_model=AlgoConfigStatsResponse,
    summary="Configuration statistics",
)
def get_stats(
    config_service: AlgoConfigService = Depends(get_config_service),
):
    """Counts of enabled, disabled and stop-loss configurations, per-instrument totals and mean max loss."""
    return {"data": config_service.summarize()}


@router.get(
    "/{config_id}",
    response_model=AlgoConfigResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get configuration",
)
def get_config(
    config_id: str,
    config_service: AlgoConfigService = Depends(get_config_service),
):
    """Get a single configuration by id."""
    config = config_service.get_config(config_id)
    if not config:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NOT_FOUND_DETAIL,
        )
    return {"data": config}


@router.post(
    "",
    response_model=AlgoConfigResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": FieldErrorsResponse}},
    summary="Create configuration",
)
def create_config(
    body: dict[str, Any] = Body(...),
    config_service: AlgoConfigService = Depends(get_config_service),
):
    """
    Create a new algorithm configuration.

    - **name**: 3 to 60 characters (trimmed)
    - **instrument**: NIFTY, BANKNIFTY, SP500, NASDAQ, EURUSD or CRUDE
    - **timeframe**: 1m, 5m, 15m or 1h
    - **entryThreshold** / **exitThreshold**: any finite number
    - **maxLossPercent**: greater than 0, at most 100
    - **maxTradesPerDay**: whole number, at least 1
    - **enabled**: defaults to true
    - **stopLossEnabled**: defaults to false
    - **notes**: optional, up to 500 characters
    """
    try:
        config = config_service.create_config(body)
    except ConfigValidationError as e:
        return _field_errors(e)
    return {"data": config}


@router.put(
    "/{config_id}",
    response_model=AlgoConfigResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": FieldErrorsResponse}},
    summary="Update configuration",
)
def update_config(
    config_id: str,
    body: dict[str, Any] = Body(...),
    config_service: AlgoConfigService = Depends(get_config_service),
):
    """
    Replace the mutable fields of a configuration.

    Same rules as creation. `id` and `createdAt` are kept, `updatedAt` is
    refreshed. Omitted `enabled`, `stopLossEnabled` and `notes` keep their
    current values.
    """
    try:
        config = config_service.update_config(config_id, body)
    except ConfigValidationError as e:
        return _field_errors(e)

    if not config:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NOT_FOUND_DETAIL,
        )
    return {"data": config}


@router.delete(
    "/{config_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Delete configuration",
)
def delete_config(
    config_id: str,
    config_service: AlgoConfigService = Depends(get_config_service),
):
    """
    Delete a configuration.

    **Warning**: This action cannot be undone.
    """
    deleted = config_service.delete_config(config_id)

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NOT_FOUND_DETAIL,
        )
