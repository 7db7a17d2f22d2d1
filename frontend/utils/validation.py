"""
Client-side validation for the configuration form.

Rules and messages match the backend so a form that passes here is
accepted by the API. Form values are the raw widget values (mostly strings).
"""
import math
from typing import Any, Optional, Tuple

INSTRUMENTS = ["NIFTY", "BANKNIFTY", "SP500", "NASDAQ", "EURUSD", "CRUDE"]
TIMEFRAMES = ["1m", "5m", "15m", "1h"]

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 60
NOTES_MAX_LENGTH = 500


def _to_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def validate_config_form(values: dict) -> Tuple[dict, bool]:
    """Validate form values. Returns ``(errors, is_valid)``."""
    errors = {}

    name = (values.get("name") or "").strip()
    if len(name) < NAME_MIN_LENGTH:
        errors["name"] = f"Name must be at least {NAME_MIN_LENGTH} characters."
    elif len(name) > NAME_MAX_LENGTH:
        errors["name"] = f"Name must not exceed {NAME_MAX_LENGTH} characters."

    if values.get("instrument") not in INSTRUMENTS:
        errors["instrument"] = "Please select a valid instrument."

    if values.get("timeframe") not in TIMEFRAMES:
        errors["timeframe"] = "Please select a valid timeframe."

    if _to_number(values.get("entryThreshold")) is None:
        errors["entryThreshold"] = "Entry threshold must be a valid number."

    if _to_number(values.get("exitThreshold")) is None:
        errors["exitThreshold"] = "Exit threshold must be a valid number."

    max_loss = _to_number(values.get("maxLossPercent"))
    if max_loss is None or max_loss <= 0 or max_loss > 100:
        errors["maxLossPercent"] = "Max loss % must be greater than 0 and at most 100."

    max_trades = _to_number(values.get("maxTradesPerDay"))
    if max_trades is None or max_trades < 1 or not max_trades.is_integer():
        errors["maxTradesPerDay"] = "Max trades per day must be a positive whole number."

    if len(values.get("notes") or "") > NOTES_MAX_LENGTH:
        errors["notes"] = f"Notes must not exceed {NOTES_MAX_LENGTH} characters."

    return errors, not errors


def get_initial_form_values() -> dict:
    """Blank form state for create mode."""
    return {
        "name": "",
        "instrument": "",
        "timeframe": "",
        "entryThreshold": "",
        "exitThreshold": "",
        "maxLossPercent": "",
        "maxTradesPerDay": "",
        "enabled": True,
        "stopLossEnabled": False,
        "notes": "",
    }


def config_to_form_values(config: dict) -> dict:
    """Map a saved config to form values for editing."""
    return {
        "name": config.get("name", ""),
        "instrument": config.get("instrument", ""),
        "timeframe": config.get("timeframe", ""),
        "entryThreshold": str(config.get("entryThreshold", "")),
        "exitThreshold": str(config.get("exitThreshold", "")),
        "maxLossPercent": str(config.get("maxLossPercent", "")),
        "maxTradesPerDay": str(config.get("maxTradesPerDay", "")),
        "enabled": bool(config.get("enabled", True)),
        "stopLossEnabled": bool(config.get("stopLossEnabled", False)),
        "notes": config.get("notes") or "",
    }


def form_values_to_payload(values: dict) -> dict:
    """Convert validated form values into the JSON payload sent to the API."""
    return {
        "name": values["name"].strip(),
        "instrument": values["instrument"],
        "timeframe": values["timeframe"],
        "entryThreshold": float(values["entryThreshold"]),
        "exitThreshold": float(values["exitThreshold"]),
        "maxLossPercent": float(values["maxLossPercent"]),
        "maxTradesPerDay": int(float(values["maxTradesPerDay"])),
        "enabled": bool(values.get("enabled", True)),
        "stopLossEnabled": bool(values.get("stopLossEnabled", False)),
        "notes": values.get("notes") or "",
    }
