"""Range validation for time values. Construction never validates."""

from __future__ import annotations

from mysql_calendar.arithmetic import calc_days_in_year
from mysql_calendar.types import TimeInternal

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_RANGES = (
    ("year", 0, 9999),
    ("month", 0, 12),
    ("day", 0, 31),
    ("minute", 0, 59),
    ("second", 0, 59),
    ("microsecond", 0, 999999),
)


def days_in_month(year: int, month: int) -> int:
    """Length of a month (1-12), leap-aware.

    Raises ValueError for months outside 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month} (must be 1-12)")
    if month == 2 and calc_days_in_year(year) == 366:
        return 29
    return _DAYS_IN_MONTH[month - 1]


def validate_time_fields(
    t: TimeInternal,
    allow_zero_date: bool = True,
    max_hour: int = 23,
) -> list[str]:
    """Validate field ranges. Returns list of error messages (empty = valid).

    Checks:
    - Each field is within its MySQL range (hour up to max_hour)
    - Zero month/day only when allow_zero_date
    - Day does not exceed the month's length for non-zero dates
    """
    errors: list[str] = []

    for name, low, high in _RANGES:
        value = getattr(t, name)
        if not low <= value <= high:
            errors.append(f"Invalid {name}: {value} (must be {low}-{high})")

    if not 0 <= t.hour <= max_hour:
        errors.append(f"Invalid hour: {t.hour} (must be 0-{max_hour})")

    if t.month == 0 or t.day == 0:
        if not allow_zero_date:
            errors.append(
                f"Zero date not allowed: month={t.month}, day={t.day}"
            )
    elif 1 <= t.month <= 12 and t.day <= 31:
        limit = days_in_month(t.year, t.month)
        if t.day > limit:
            errors.append(
                f"Invalid day: {t.year:04d}-{t.month:02d} has {limit} days, "
                f"got {t.day}"
            )

    return errors
