"""Loose value coercion for form and sheet data."""

from __future__ import annotations

import math
import re
from datetime import date, datetime

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_ISO_DATETIME = re.compile(r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})")
_DMY_DATE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")


def to_number(value) -> float:
    """Parse a numeric field; missing or unparseable values become 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else 0.0
    text = str(value).strip()
    if not text:
        return 0.0
    try:
        number = float(text)
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def parse_date(value) -> datetime | None:
    """Parse YYYY-MM-DD, ISO datetime or DD/MM/YYYY into a naive datetime.

    Returns None for empty or unrecognised input.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    text = str(value).strip()
    if not text:
        return None
    try:
        m = _ISO_DATE.match(text)
        if m:
            y, mo, d = (int(g) for g in m.groups())
            return datetime(y, mo, d)
        m = _ISO_DATETIME.match(text)
        if m:
            return datetime(*(int(g) for g in m.groups()))
        m = _DMY_DATE.match(text)
        if m:
            d, mo, y = (int(g) for g in m.groups())
            return datetime(y, mo, d)
    except ValueError:
        return None
    return None


def round_half_up(value: float) -> int:
    """Round like the browser's Math.round (halves go up)."""
    return math.floor(value + 0.5)


def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
