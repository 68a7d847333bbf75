"""DutyDaysPolicy — half-day granular duty length of a vessel posting."""

from __future__ import annotations

import math
from datetime import datetime

from backoffice.domain.value_objects.coercion import parse_date
from backoffice.domain.value_objects.enums import Shift

MIN_DUTY_DAYS = 0.5
_SECONDS_PER_DAY = 24 * 60 * 60


def calculate_duty_days(
    start_date,
    start_shift: str | None = Shift.DAY.value,
    end_date=None,
    end_shift: str | None = None,
    *,
    now: datetime | None = None,
) -> float:
    """Convert a duty window into a count of duty days.

    1. Without an end date the posting is ongoing and runs until *now*.
    2. Whole days between start and end, rounded up.
    3. A night start loses half a day.
    4. With an end date, a day end loses half a day and a night end
       gains half a day.
    5. Never less than half a day.

    Args:
        start_date: date, datetime or date string; missing means 0 days.
        start_shift: "day" or "night".
        end_date: optional end; absent means the posting is still ongoing.
        end_shift: "day" or "night", only read when end_date is set.
        now: clock override for ongoing postings.

    Returns:
        Duty days at 0.5 granularity.
    """
    start = parse_date(start_date)
    if start is None:
        return 0.0

    end = parse_date(end_date)
    has_end = end is not None
    if not has_end:
        end = now or datetime.now()

    days = float(math.ceil((end - start).total_seconds() / _SECONDS_PER_DAY))

    if _shift(start_shift) == Shift.NIGHT.value:
        days -= 0.5

    if has_end:
        shift = _shift(end_shift)
        if shift == Shift.DAY.value:
            days -= 0.5
        elif shift == Shift.NIGHT.value:
            days += 0.5

    return max(MIN_DUTY_DAYS, days)


def _shift(value) -> str:
    if isinstance(value, Shift):
        return value.value
    return str(value or "").strip().lower()
