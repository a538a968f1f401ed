"""Shared types: TimeInternal, WeekBehaviour and InvalidTimeFormat."""

from __future__ import annotations

from datetime import datetime
from enum import IntFlag
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TimeInternal(Protocol):
    """Read-only field access needed by the calendar arithmetic.

    MysqlTime implements it, and so does datetime.datetime.
    """

    @property
    def year(self) -> int: ...

    @property
    def month(self) -> int: ...

    @property
    def day(self) -> int: ...

    @property
    def hour(self) -> int: ...

    @property
    def minute(self) -> int: ...

    @property
    def second(self) -> int: ...

    @property
    def microsecond(self) -> int: ...


class WeekBehaviour(IntFlag):
    """Week numbering policy decoded from a MySQL week mode.

    MONDAY_FIRST: weeks start on Monday (otherwise Sunday).
    YEAR: week numbers are 1-53 relative to the week's own year
        (otherwise 0-53 relative to the date's year).
    FIRST_WEEKDAY: week 1 is the first week containing the first day of
        the week (otherwise the first week with 4 or more days this year).
    """

    MONDAY_FIRST = 1
    YEAR = 2
    FIRST_WEEKDAY = 4

    @classmethod
    def from_mode(cls, mode: int) -> WeekBehaviour:
        """Decode a week mode 0-7 as MySQL's WEEK() does."""
        behaviour = cls(mode & 7)
        if not behaviour & cls.MONDAY_FIRST:
            behaviour ^= cls.FIRST_WEEKDAY
        return behaviour

    @property
    def uses_monday_first(self) -> bool:
        return bool(self & WeekBehaviour.MONDAY_FIRST)

    @property
    def uses_year_relative_numbering(self) -> bool:
        return bool(self & WeekBehaviour.YEAR)

    @property
    def uses_first_weekday_rule(self) -> bool:
        return bool(self & WeekBehaviour.FIRST_WEEKDAY)


class InvalidTimeFormat(ValueError):
    """Raised when a time value has no faithful calendar representation.

    ``normalized`` holds the datetime the host calendar produced for the
    value, or None when even a normalized form is out of range.
    """

    def __init__(
        self,
        value: Any,
        normalized: datetime | None = None,
        reason: str = "fields changed on normalization",
    ) -> None:
        self.value = value
        self.normalized = normalized
        self.reason = reason
        super().__init__(f"Invalid time format: {value!r} ({reason})")
