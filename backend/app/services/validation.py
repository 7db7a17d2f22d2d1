"""
Field validation for algorithm configuration payloads.

``validate_config`` works on raw request values (before any coercion) and
returns a mapping of field name to message. An empty mapping means the
payload is valid. Errors are returned, never raised.
"""
import math
from typing import Any, Optional

from app.models.algo_config import Instrument, Timeframe

INSTRUMENTS = tuple(i.value for i in Instrument)
TIMEFRAMES = tuple(t.value for t in Timeframe)

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 60
NOTES_MAX_LENGTH = 500
MAX_LOSS_PERCENT_LIMIT = 100

LEGACY_KEYS = {"maxLossPct": "maxLossPercent"}


def _with_canonical_keys(payload: dict[str, Any]) -> dict[str, Any]:
    """Map legacy keys onto their canonical names when the latter are absent."""
    data = dict(payload)
    for legacy, canonical in LEGACY_KEYS.items():
        if legacy in data and canonical not in data:
            data[canonical] = data[legacy]
    return data


def parse_number(value: Any) -> Optional[float]:
    """Parse a JSON number or numeric string into a finite float."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str) and value.strip():
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def parse_integer(value: Any) -> Optional[int]:
    """Parse a whole number; fractional values are rejected."""
    number = parse_number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def validate_config(payload: dict[str, Any]) -> dict[str, str]:
    """Return field errors for a candidate configuration payload."""
    data = _with_canonical_keys(payload)
    errors: dict[str, str] = {}

    name = data.get("name")
    if not isinstance(name, str) or len(name.strip()) < NAME_MIN_LENGTH:
        errors["name"] = f"Name must be at least {NAME_MIN_LENGTH} characters."
    elif len(name.strip()) > NAME_MAX_LENGTH:
        errors["name"] = f"Name must not exceed {NAME_MAX_LENGTH} characters."

    if data.get("instrument") not in INSTRUMENTS:
        errors["instrument"] = f"Instrument must be one of: {', '.join(INSTRUMENTS)}."

    if data.get("timeframe") not in TIMEFRAMES:
        errors["timeframe"] = f"Timeframe must be one of: {', '.join(TIMEFRAMES)}."

    if parse_number(data.get("entryThreshold")) is None:
        errors["entryThreshold"] = "Entry threshold must be a valid number."

    if parse_number(data.get("exitThreshold")) is None:
        errors["exitThreshold"] = "Exit threshold must be a valid number."

    max_loss = parse_number(data.get("maxLossPercent"))
    if max_loss is None or max_loss <= 0 or max_loss > MAX_LOSS_PERCENT_LIMIT:
        errors["maxLossPercent"] = "Max loss % must be greater than 0 and at most 100."

    max_trades = parse_integer(data.get("maxTradesPerDay"))
    if max_trades is None or max_trades < 1:
        errors["maxTradesPerDay"] = "Max trades per day must be a positive whole number."

    for flag in ("enabled", "stopLossEnabled"):
        if data.get(flag) is not None and not isinstance(data[flag], bool):
            errors[flag] = f"{flag} must be true or false."

    notes = data.get("notes")
    if notes is not None:
        if not isinstance(notes, str):
            errors["notes"] = "Notes must be text."
        elif len(notes) > NOTES_MAX_LENGTH:
            errors["notes"] = f"Notes must not exceed {NOTES_MAX_LENGTH} characters."

    return errors


def normalize_config(payload: dict[str, Any]) -> dict[str, Any]:
    """
    Coerce a payload that already passed ``validate_config`` into
    snake_case model fields.

    Optional fields that are absent from the payload are left out so the
    caller can decide between defaults (create) and current values (update).
    """
    data = _with_canonical_keys(payload)
    fields = {
        "name": data["name"].strip(),
        "instrument": data["instrument"],
        "timeframe": data["timeframe"],
        "entry_threshold": parse_number(data["entryThreshold"]),
        "exit_threshold": parse_number(data["exitThreshold"]),
        "max_loss_percent": parse_number(data["maxLossPercent"]),
        "max_trades_per_day": parse_integer(data["maxTradesPerDay"]),
    }
    if data.get("enabled") is not None:
        fields["enabled"] = data["enabled"]
    if data.get("stopLossEnabled") is not None:
        fields["stop_loss_enabled"] = data["stopLossEnabled"]
    if data.get("notes") is not None:
        fields["notes"] = data["notes"]
    return fields
