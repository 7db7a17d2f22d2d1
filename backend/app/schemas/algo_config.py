"""
Algorithm configuration response envelopes.

Request bodies are taken as raw JSON objects so that field errors can be
reported in the ``{"errors": {field: message}}`` shape.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.algo_config import AlgoConfig


class AlgoConfigResponse(BaseModel):
    """Single configuration response."""
    data: AlgoConfig


class AlgoConfigList(BaseModel):
    """All configurations with their count."""
    data: list[AlgoConfig] = Field(..., description="Configurations in insertion order")
    count: int = Field(..., description="Number of configurations")


class AlgoConfigStats(BaseModel):
    """Aggregates shown in the dashboard stats bar."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total: int = Field(..., description="Number of configurations")
    enabled: int = Field(..., description="Configurations allowed to trade")
    disabled: int = Field(..., description="Configurations switched off")
    stop_loss_enabled: int = Field(..., description="Configurations with a hard stop-loss")
    instruments: dict[str, int] = Field(default={}, description="Configurations per instrument")
    avg_max_loss_percent: Optional[float] = Field(None, description="Mean max loss %, None when empty")


class AlgoConfigStatsResponse(BaseModel):
    """Stats envelope."""
    data: AlgoConfigStats


class ErrorResponse(BaseModel):
    """Single error message."""
    error: str


class FieldErrorsResponse(BaseModel):
    """Field-level validation errors."""
    errors: dict[str, str]
