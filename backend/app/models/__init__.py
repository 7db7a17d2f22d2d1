"""
Pydantic models for stored records.
"""
from app.models.algo_config import AlgoConfig, Instrument, Timeframe

__all__ = [
    "AlgoConfig",
    "Instrument",
    "Timeframe",
]
