"""
Centralized formatting utilities for the configuration UI.
"""
from datetime import datetime, timezone
from typing import Optional, Tuple


def format_number(value: float, decimals: int = 2) -> str:
    """Format numbers with a fixed number of decimals."""
    try:
        if value is None:
            return "-"
        return f"{value:.{decimals}f}"
    except (TypeError, ValueError):
        return "-"


def format_percent(value: float, decimals: int = 1) -> str:
    """Format a value that is already expressed in percent (2.5 -> '2.5%')."""
    try:
        if value is None:
            return "-"
        return f"{value:.{decimals}f}%"
    except (TypeError, ValueError):
        return "-"


def _parse_iso(date_str: str) -> Optional[datetime]:
    if not date_str:
        return None
    try:
        return datetime.fromisoformat(date_str.replace('Z', '+00:00'))
    except ValueError:
        return None


def format_date(date_str: str, fmt: str = "%d/%m/%Y") -> str:
    """Format ISO date string for display."""
    dt = _parse_iso(date_str)
    return dt.strftime(fmt) if dt else "-"


def format_datetime_parts(date_str: str) -> Tuple[str, str]:
    """Return (date_str, time_str) tuple."""
    dt = _parse_iso(date_str)
    if not dt:
        return "", ""
    return dt.strftime("%Y-%m-%d"), dt.strftime("%H:%M:%S")


def time_since(date_str: str, now: Optional[datetime] = None) -> str:
    """Compact age of a timestamp ('3d', '5h', '12m', 'now')."""
    then = _parse_iso(date_str)
    if not then:
        return ""
    if then.tzinfo is None:
        then = then.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)

    delta = now - then
    if delta.total_seconds() < 60:
        return "now"
    if delta.days > 0:
        return f"{delta.days}d"
    hours = delta.seconds // 3600
    if hours > 0:
        return f"{hours}h"
    return f"{delta.seconds // 60}m"


def format_age(date_str: str, now: Optional[datetime] = None) -> str:
    """Age phrase for captions ('just now', '3h ago'); blank if unparseable."""
    age = time_since(date_str, now=now)
    if not age:
        return ""
    return "just now" if age == "now" else f"{age} ago"
