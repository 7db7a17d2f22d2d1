"""
Algorithm configuration model for the JSON-file backed store.
"""
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Instrument(str, Enum):
    """Tradable instruments a configuration can target."""
    NIFTY = "NIFTY"
    BANKNIFTY = "BANKNIFTY"
    SP500 = "SP500"
    NASDAQ = "NASDAQ"
    EURUSD = "EURUSD"
    CRUDE = "CRUDE"


class Timeframe(str, Enum):
    """Bar timeframes supported by the execution engine."""
    ONE_MINUTE = "1m"
    FIVE_MINUTES = "5m"
    FIFTEEN_MINUTES = "15m"
    ONE_HOUR = "1h"


# Fields a client may change; everything else is owned by the server.
MUTABLE_FIELDS = (
    "name",
    "instrument",
    "timeframe",
    "entry_threshold",
    "exit_threshold",
    "max_loss_percent",
    "max_trades_per_day",
    "enabled",
    "stop_loss_enabled",
    "notes",
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AlgoConfig(BaseModel):
    """
    Algorithm configuration record.

    Stored and served with camelCase keys (``entryThreshold``,
    ``maxLossPercent``...). Attribute access uses snake_case.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    id: str = Field(..., description="Server-assigned UUID")
    name: str = Field(..., min_length=3, max_length=60, description="Display name")
    instrument: Instrument = Field(..., description="Target instrument")
    timeframe: Timeframe = Field(..., description="Bar timeframe")
    entry_threshold: float = Field(..., description="Signal level to open a position")
    exit_threshold: float = Field(..., description="Signal level to close a position")
    max_loss_percent: float = Field(..., gt=0, le=100, description="Max loss per day, in percent")
    max_trades_per_day: int = Field(..., ge=1, description="Max number of trades per day")
    enabled: bool = Field(default=True, description="Whether the algorithm may trade")
    stop_loss_enabled: bool = Field(default=False, description="Whether a hard stop-loss is attached")
    notes: str = Field(default="", max_length=500, description="Free-form notes")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @model_validator(mode="before")
    @classmethod
    def _accept_legacy_max_loss_key(cls, data):
        # Files written by the first release used ``maxLossPct``
        if isinstance(data, dict) and "maxLossPct" in data:
            if "maxLossPercent" not in data and "max_loss_percent" not in data:
                data = {**data, "maxLossPercent": data["maxLossPct"]}
        return data

    @model_validator(mode="after")
    def _check_timestamps(self):
        if self.created_at > self.updated_at:
            raise ValueError("createdAt must not be later than updatedAt")
        return self

    def to_document(self) -> dict:
        """Serialize to the camelCase JSON document stored on disk and served."""
        return self.model_dump(mode="json", by_alias=True)
