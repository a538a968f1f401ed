"""mysql-calendar: MySQL-compatible calendar values and arithmetic."""

from mysql_calendar.arithmetic import (
    SECONDS_IN_24H,
    WEEK_MODE_DEFAULT,
    calc_daynr,
    calc_days_in_year,
    calc_time_diff,
    calc_week,
    calc_weekday,
    date_to_uint64,
    datetime_to_uint64,
    time_from_seconds,
    time_to_uint64,
    week_number,
)
from mysql_calendar.config import (
    CalendarConfig,
    configure_calendar,
    get_calendar_config,
    reset_calendar_config,
)
from mysql_calendar.logging import configure_logging, get_logger
from mysql_calendar.schema import days_in_month, validate_time_fields
from mysql_calendar.types import InvalidTimeFormat, TimeInternal, WeekBehaviour
from mysql_calendar.value import MysqlTime, new_mysql_time

__all__ = [
    "CalendarConfig",
    "InvalidTimeFormat",
    "MysqlTime",
    "SECONDS_IN_24H",
    "TimeInternal",
    "WEEK_MODE_DEFAULT",
    "WeekBehaviour",
    "calc_daynr",
    "calc_days_in_year",
    "calc_time_diff",
    "calc_week",
    "calc_weekday",
    "configure_calendar",
    "configure_logging",
    "date_to_uint64",
    "datetime_to_uint64",
    "days_in_month",
    "get_calendar_config",
    "get_logger",
    "new_mysql_time",
    "reset_calendar_config",
    "time_from_seconds",
    "time_to_uint64",
    "validate_time_fields",
    "week_number",
]
