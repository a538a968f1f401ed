"""Calendar arithmetic: day numbers, week numbers, time differences.

Everything here is a pure function over integers or over any TimeInternal.
Results follow MySQL's own calendar routines, which count days in the
proleptic Gregorian calendar from year 0 and allow zero dates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mysql_calendar.types import TimeInternal, WeekBehaviour

if TYPE_CHECKING:
    from mysql_calendar.value import MysqlTime


SECONDS_IN_24H = 86400
WEEK_MODE_DEFAULT = 0

_MAX_HOUR = 0xFF


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


# ---------------------------------------------------------------------------
# Day numbers
# ---------------------------------------------------------------------------

def calc_daynr(year: int, month: int, day: int) -> int:
    """Days since 0000-00-00. The zero date 0000-00-xx maps to 0."""
    if year == 0 and month == 0:
        return 0

    y = year
    delsum = 365 * y + 31 * (month - 1) + day
    if month <= 2:
        y -= 1
    else:
        delsum -= _tdiv(month * 4 + 23, 10)
    temp = _tdiv((_tdiv(y, 100) + 1) * 3, 4)
    return delsum + _tdiv(y, 4) - temp


def calc_days_in_year(year: int) -> int:
    """365 or 366. Year 0 is not a leap year."""
    if (year & 3) == 0 and (year % 100 != 0 or (year % 400 == 0 and year != 0)):
        return 366
    return 365


def calc_weekday(daynr: int, sunday_first: bool) -> int:
    """Weekday index 0-6 of a day number.

    Monday is 0 unless sunday_first, in which case Sunday is 0.
    """
    return (daynr + 5 + (1 if sunday_first else 0)) % 7


# ---------------------------------------------------------------------------
# Week numbers
# ---------------------------------------------------------------------------

def calc_week(t: TimeInternal, behaviour: WeekBehaviour) -> tuple[int, int]:
    """Return (year, week) for t under the given week behaviour.

    Zero dates give (0, 0). Without YEAR, days before the first counted
    week of January are week 0 of the current year; with it they belong
    to the last week of the previous year, and days after the last full
    week of December may move to week 1 of the next year.
    """
    if t.month == 0 or t.day == 0:
        return (0, 0)

    year = t.year
    daynr = calc_daynr(year, t.month, t.day)
    first_daynr = calc_daynr(year, 1, 1)
    monday_first = behaviour.uses_monday_first
    week_year = behaviour.uses_year_relative_numbering
    first_weekday = behaviour.uses_first_weekday_rule

    weekday = calc_weekday(first_daynr, not monday_first)

    # First partial week of January
    if t.month == 1 and t.day <= 7 - weekday:
        if not week_year and (
            (first_weekday and weekday != 0) or (not first_weekday and weekday >= 4)
        ):
            return (year, 0)
        week_year = True
        year -= 1
        days = calc_days_in_year(year)
        first_daynr -= days
        weekday = (weekday + 53 * 7 - days) % 7

    if (first_weekday and weekday != 0) or (not first_weekday and weekday >= 4):
        days = daynr - (first_daynr + 7 - weekday)
    else:
        days = daynr - (first_daynr - weekday)

    # Last partial week of December
    if week_year and days >= 52 * 7:
        weekday = (weekday + calc_days_in_year(year)) % 7
        if (not first_weekday and weekday < 4) or (first_weekday and weekday == 0):
            return (year + 1, 1)

    return (year, days // 7 + 1)


def week_number(t: TimeInternal, mode: int = WEEK_MODE_DEFAULT) -> tuple[int, int]:
    """calc_week with the behaviour decoded from a MySQL week mode."""
    return calc_week(t, WeekBehaviour.from_mode(mode))


# ---------------------------------------------------------------------------
# Durations
# ---------------------------------------------------------------------------

def calc_time_diff(
    t1: TimeInternal, t2: TimeInternal, sign: int = 1
) -> tuple[int, int, bool]:
    """Signed difference t1 - sign * t2 as (seconds, microseconds, neg).

    t1 and t2 may be TIME, DATE or DATETIME values. seconds and
    microseconds are magnitudes; neg tells the sign.
    """
    days = calc_daynr(t1.year, t1.month, t1.day)
    days -= sign * calc_daynr(t2.year, t2.month, t2.day)

    tmp = (
        days * SECONDS_IN_24H
        + t1.hour * 3600 + t1.minute * 60 + t1.second
        - sign * (t2.hour * 3600 + t2.minute * 60 + t2.second)
    ) * 1000000 + t1.microsecond - sign * t2.microsecond

    neg = tmp < 0
    if neg:
        tmp = -tmp
    return tmp // 1000000, tmp % 1000000, neg


def time_from_seconds(seconds: int, microseconds: int = 0) -> MysqlTime:
    """Build a time-only value (zero date) from a non-negative second count.

    Raises ValueError if the hour does not fit the 8-bit hour field.
    """
    from mysql_calendar.value import MysqlTime

    if seconds < 0 or microseconds < 0:
        raise ValueError(
            f"seconds and microseconds must be non-negative, "
            f"got {seconds}s {microseconds}us"
        )
    hour, rest = divmod(seconds, 3600)
    if hour > _MAX_HOUR:
        raise ValueError(
            f"{seconds}s is {hour} hours, which does not fit the hour field "
            f"(max {_MAX_HOUR})"
        )
    minute, second = divmod(rest, 60)
    return MysqlTime(0, 0, 0, hour, minute, second, microseconds)


# ---------------------------------------------------------------------------
# Integer encodings
# ---------------------------------------------------------------------------

def datetime_to_uint64(t: TimeInternal) -> int:
    """Encode as YYYYMMDDHHMMSS."""
    return date_to_uint64(t) * 1000000 + time_to_uint64(t)


def date_to_uint64(t: TimeInternal) -> int:
    """Encode as YYYYMMDD."""
    return t.year * 10000 + t.month * 100 + t.day


def time_to_uint64(t: TimeInternal) -> int:
    """Encode as HHMMSS."""
    return t.hour * 10000 + t.minute * 100 + t.second
