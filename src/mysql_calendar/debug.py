"""ASCII views of week numbering for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from mysql_calendar.arithmetic import calc_daynr, calc_weekday, week_number
from mysql_calendar.schema import days_in_month
from mysql_calendar.value import MysqlTime


def show_weeks(year: int, month: int, mode: int = 0) -> str:
    """Print an ASCII month view with MySQL week numbers.

    Each row is one calendar week, starting on Sunday for modes whose
    week starts on Sunday and on Monday otherwise. The first column is
    the (year, week) pair of the row's first day in the month.
    Returns the string and also prints to stdout.

    Args:
        year: Year of the month to show
        month: Month to show (1-12)
        mode: MySQL week mode (0-7)
    """
    sunday_first = not (mode & 1)
    day_names = ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]
    if sunday_first:
        day_names = day_names[-1:] + day_names[:-1]

    lines: list[str] = []
    lines.append(f"{year:04d}-{month:02d}  mode {mode}")
    lines.append(f"{'week':>7s}  {' '.join(day_names)}")

    first_col = calc_weekday(calc_daynr(year, month, 1), sunday_first)
    row = ["  "] * first_col
    row_start = 1

    for day in range(1, days_in_month(year, month) + 1):
        row.append(f"{day:2d}")
        if len(row) == 7 or day == days_in_month(year, month):
            wy, wk = week_number(MysqlTime(year, month, row_start, 0, 0, 0, 0), mode)
            lines.append(f"{wy:04d}/{wk:02d}  {' '.join(row)}")
            row = []
            row_start = day + 1

    result = "\n".join(lines)
    print(result)
    return result
