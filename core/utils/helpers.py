"""
ElaineDiet utility functions: date normalization and integer coercion.
"""

from __future__ import annotations
import math
import re
from datetime import date, datetime, timezone
from typing import Any

from app.exceptions import InvalidDate


# Date utilities

DATE_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$", re.ASCII)


def to_iso_date(value: Any) -> str:
    """Normalize a date-like input to a canonical 'YYYY-MM-DD' string.

    Accepts ``date``/``datetime`` objects and strings shaped ``YYYY/MM/DD`` or
    ``YYYY-MM-DD``. Dates are treated as UTC calendar dates: strings are read
    as pure calendar dates, aware datetimes are converted to UTC first.

    Raises:
        InvalidDate: if the input is not a valid calendar date
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if not isinstance(value, str):
        raise InvalidDate(value)

    normalized = value.strip().replace("/", "-")
    m = DATE_PATTERN.match(normalized)
    if not m:
        raise InvalidDate(value)
    year, month, day = (int(g) for g in m.groups())
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        raise InvalidDate(value) from None


def to_date(value: Any) -> date:
    """Same as to_iso_date() but returns a ``date`` for query parameters."""
    return date.fromisoformat(to_iso_date(value))


# Number utilities

LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def to_int(value: Any) -> int:
    """Coerce anything to an int, defaulting to 0.

    Strings contribute their leading base-10 integer ("3.7" -> 3, "12abc" -> 12),
    finite floats truncate toward zero, and everything else yields 0.
    Never raises.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        m = LEADING_INT.match(value)
        return int(m.group(1)) if m else 0
    return 0


def clamp(value: int, low: int, high: int = None) -> int:
    """Clamp value into [low, high]; no upper bound when high is None."""
    if high is not None:
        value = min(value, high)
    return max(low, value)
