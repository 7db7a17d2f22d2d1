"""
Request and response schemas for API endpoints.
"""
from app.schemas.algo_config import (
    AlgoConfigList,
    AlgoConfigResponse,
    AlgoConfigStats,
    AlgoConfigStatsResponse,
    ErrorResponse,
    FieldErrorsResponse,
)

__all__ = [
    "AlgoConfigList",
    "AlgoConfigResponse",
    "AlgoConfigStats",
    "AlgoConfigStatsResponse",
    "ErrorResponse",
    "FieldErrorsResponse",
]
