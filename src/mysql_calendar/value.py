"""MysqlTime: permissive MySQL date/time value and its datetime bridge."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo

from mysql_calendar.arithmetic import calc_week
from mysql_calendar.config import get_calendar_config
from mysql_calendar.logging import get_logger
from mysql_calendar.types import InvalidTimeFormat, WeekBehaviour

_log = get_logger(__name__)

# Storage width of each field, in bits
_FIELD_BITS = (
    ("year", 16),
    ("month", 8),
    ("day", 8),
    ("hour", 8),
    ("minute", 8),
    ("second", 8),
    ("microsecond", 32),
)


@dataclass(frozen=True)
class MysqlTime:
    """Immutable MySQL date/time value. Implements TimeInternal.

    Fields are narrowed to their storage width on construction (year 16
    bits, microsecond 32 bits, the rest 8 bits), so out-of-range input is
    truncated rather than rejected. Zero month or day marks a value with
    no date part. Use schema.validate_time_fields for range checks.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    microsecond: int

    def __post_init__(self) -> None:
        for name, bits in _FIELD_BITS:
            object.__setattr__(self, name, int(getattr(self, name)) & ((1 << bits) - 1))

    @classmethod
    def from_datetime(cls, dt: datetime) -> MysqlTime:
        """Take the wall-clock fields of a datetime. tzinfo is ignored."""
        return cls(
            dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second, dt.microsecond
        )

    def is_zero_date(self) -> bool:
        """True if month or day is zero."""
        return self.month == 0 or self.day == 0

    # ------------------------------------------------------------------
    # datetime bridge
    # ------------------------------------------------------------------

    def to_datetime(self, tz: tzinfo | None = None) -> datetime:
        """Convert to an aware datetime, validating by round-trip.

        datetime cannot hold month 0 or day 0, so the value is first
        normalized the way a lenient calendar would: 2016-12-00 becomes
        2016-11-30, month 0 becomes December of the previous year, and
        time fields carry into the date. The result is then split back
        into fields and compared with this value.

        Uses tz, else the configured zone, else host local time.

        Raises InvalidTimeFormat if any field changed, with the
        normalized datetime attached, or if the value cannot be
        normalized at all.
        """
        if tz is None:
            tz = get_calendar_config().tz

        try:
            normalized = self._normalize(tz)
        except (OverflowError, ValueError, OSError) as exc:
            raise InvalidTimeFormat(
                self, None, reason=f"out of datetime range: {exc}"
            ) from exc

        fields = (
            normalized.year, normalized.month, normalized.day,
            normalized.hour, normalized.minute, normalized.second,
            normalized.microsecond,
        )
        if fields != self._fields():
            raise InvalidTimeFormat(self, normalized)
        return normalized

    def _fields(self) -> tuple[int, ...]:
        return tuple(getattr(self, name) for name, _ in _FIELD_BITS)

    def _normalize(self, tz: tzinfo | None) -> datetime:
        """Nearest real datetime, letting out-of-range fields overflow."""
        year_carry, month_index = divmod(self.month - 1, 12)
        naive = datetime(self.year + year_carry, month_index + 1, 1) + timedelta(
            days=self.day - 1,
            hours=self.hour,
            minutes=self.minute,
            seconds=self.second,
            microseconds=self.microsecond,
        )
        return _localize(naive, tz)

    # ------------------------------------------------------------------
    # Derived queries
    # ------------------------------------------------------------------

    def _lenient(self, query: str) -> datetime | None:
        try:
            return self.to_datetime()
        except InvalidTimeFormat as exc:
            _log.debug(
                "invalid_time_fallback",
                query=query,
                value=self._fields(),
                reason=exc.reason,
            )
            return None

    def weekday(self) -> int:
        """Monday is 0 and Sunday is 6. Returns 0 for invalid dates."""
        dt = self._lenient("weekday")
        if dt is None:
            return 0
        return dt.weekday()

    def year_day(self) -> int:
        """Day of the year, 1-366. Returns 0 for invalid dates."""
        dt = self._lenient("year_day")
        if dt is None:
            return 0
        return dt.timetuple().tm_yday

    def iso_week(self) -> tuple[int, int]:
        """ISO 8601 (year, week). Returns (0, 0) for invalid dates."""
        dt = self._lenient("iso_week")
        if dt is None:
            return (0, 0)
        iso = dt.isocalendar()
        return (iso[0], iso[1])

    def week(self, mode: int | None = None) -> int:
        """MySQL WEEK(date, mode). Zero dates give 0.

        mode defaults to the configured default_week_format.
        """
        if mode is None:
            mode = get_calendar_config().default_week_format
        _, week = calc_week(self, WeekBehaviour.from_mode(mode))
        return week

    def year_week(self, mode: int | None = None) -> tuple[int, int]:
        """MySQL YEARWEEK(date, mode) as (year, week). Zero dates give (0, 0)."""
        if mode is None:
            mode = get_calendar_config().default_week_format
        behaviour = WeekBehaviour.from_mode(mode) | WeekBehaviour.YEAR
        return calc_week(self, behaviour)


def _localize(naive: datetime, tz: tzinfo | None) -> datetime:
    """Attach tz (host local time when None) to a naive wall time.

    Wall times in a DST gap are shifted by passing through UTC. At the
    ends of datetime's range that pass can overflow; no zone has a gap
    there, so the wall time is kept as is.
    """
    if tz is None:
        try:
            return naive.astimezone()
        except (OverflowError, OSError):
            return naive.replace(tzinfo=datetime.now().astimezone().tzinfo)

    aware = naive.replace(tzinfo=tz)
    try:
        return aware.astimezone(timezone.utc).astimezone(tz)
    except OverflowError:
        return aware


def new_mysql_time(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int = 0,
    microsecond: int = 0,
) -> MysqlTime:
    """Build a MysqlTime from five to seven components. No validation."""
    return MysqlTime(year, month, day, hour, minute, second, microsecond)
