"""
Value coercion helpers for turning stored rows into response fields.

Stored insights may come from a model reply or a fallback record, so
numbers can arrive as strings ("12.5%"), booleans or None.
"""

import math
from typing import Optional, Any
from datetime import datetime, timezone


def safe_float(value: Optional[Any], default: Optional[float] = 0.0) -> Optional[float]:
    """
    Convert value to float, or return default.

    None, booleans, NaN, infinities and anything float() rejects give
    default.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (ValueError, TypeError, OverflowError):
        return default
    return number if math.isfinite(number) else default


def safe_str(value: Optional[Any], default: str = "") -> str:
    return default if value is None else str(value)


def _as_utc(moment: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored as UTC
    return moment.replace(tzinfo=timezone.utc) if moment.tzinfo is None else moment


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """ISO 8601 string with UTC offset, or None."""
    if dt is None:
        return None
    return _as_utc(dt).isoformat()


def parse_percentage(value: Any, default: float) -> float:
    """
    Read a growth figure that may be a number or a string like "12.5%".

    Unparseable strings give 0.0; any other type gives default.
    """
    if isinstance(value, str):
        return safe_float(value.replace("%", "").strip(), 0.0)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return safe_float(value, default)
    return default


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def days_until(moment: Optional[datetime], now: Optional[datetime] = None) -> Optional[int]:
    """Whole days from now until moment, rounded up and never negative."""
    if moment is None:
        return None
    now = _as_utc(now or datetime.now(timezone.utc))
    seconds = (_as_utc(moment) - now).total_seconds()
    return max(0, math.ceil(seconds / 86400))
