"""Tests for day numbers, weekdays, time differences and integer encodings.

Test data loaded from: data/fixtures/scenarios/day_numbers.json,
data/fixtures/scenarios/time_diff.json
"""

from __future__ import annotations

from datetime import datetime

import pytest

from conftest import load_scenarios, make_time

_days = load_scenarios("day_numbers")
DAYNR = _days["daynr"]
DAYS_IN_YEAR = _days["days_in_year"]
WEEKDAY = _days["weekday"]
TIME_DIFF = load_scenarios("time_diff")


# ---------------------------------------------------------------------------
# Day numbers
# ---------------------------------------------------------------------------
class TestCalcDaynr:
    """calc_daynr against known TO_DAYS() results."""

    @pytest.mark.parametrize("spec", DAYNR, ids=lambda s: s["id"])
    def test_daynr(self, spec):
        from mysql_calendar.arithmetic import calc_daynr

        assert calc_daynr(*spec["date"]) == spec["expected"], spec["notes"]

    def test_month_lengths(self):
        """Consecutive first-of-month day numbers differ by the month length."""
        from mysql_calendar.arithmetic import calc_daynr

        lengths = [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
        for month, length in enumerate(lengths, start=1):
            start = calc_daynr(2024, month, 1)
            end = calc_daynr(2025, 1, 1) if month == 12 else calc_daynr(2024, month + 1, 1)
            assert end - start == length, f"month {month}"


class TestCalcDaysInYear:

    @pytest.mark.parametrize("spec", DAYS_IN_YEAR, ids=lambda s: s["id"])
    def test_days_in_year(self, spec):
        from mysql_calendar.arithmetic import calc_days_in_year

        assert calc_days_in_year(spec["year"]) == spec["expected"]


class TestCalcWeekday:

    @pytest.mark.parametrize("spec", WEEKDAY, ids=lambda s: s["id"])
    def test_weekday(self, spec):
        from mysql_calendar.arithmetic import calc_weekday

        result = calc_weekday(spec["daynr"], spec["sunday_first"])
        assert result == spec["expected"], spec["notes"]

    def test_range(self):
        from mysql_calendar.arithmetic import calc_weekday

        for daynr in range(0, 50):
            assert 0 <= calc_weekday(daynr, False) <= 6
            assert 0 <= calc_weekday(daynr, True) <= 6


# ---------------------------------------------------------------------------
# Time differences
# ---------------------------------------------------------------------------
class TestCalcTimeDiff:

    @pytest.mark.parametrize("spec", TIME_DIFF, ids=lambda s: s["id"])
    def test_time_diff(self, spec):
        from mysql_calendar.arithmetic import calc_time_diff

        result = calc_time_diff(make_time(spec["t1"]), make_time(spec["t2"]), spec["sign"])
        assert result == tuple(spec["expected"]), spec["notes"]

    def test_neg_is_bool(self):
        from mysql_calendar.arithmetic import calc_time_diff

        _, _, neg = calc_time_diff(make_time([2000, 1, 1]), make_time([2000, 1, 2]))
        assert neg is True

    def test_accepts_datetime(self):
        """Any TimeInternal works, including datetime.datetime."""
        from mysql_calendar.arithmetic import calc_time_diff

        t1 = datetime(2020, 1, 1, 0, 0, 1)
        t2 = make_time([2019, 12, 31, 23, 59, 59, 0])
        assert calc_time_diff(t1, t2) == (2, 0, False)


class TestTimeFromSeconds:

    def test_split(self):
        from mysql_calendar.arithmetic import time_from_seconds

        t = time_from_seconds(3725, 5)
        assert (t.hour, t.minute, t.second, t.microsecond) == (1, 2, 5, 5)
        assert t.is_zero_date()

    def test_largest_hour(self):
        from mysql_calendar.arithmetic import time_from_seconds

        t = time_from_seconds(255 * 3600 + 59 * 60 + 59)
        assert (t.hour, t.minute, t.second) == (255, 59, 59)

    def test_hour_overflow_rejected(self):
        """Hours past the 8-bit field raise instead of wrapping."""
        from mysql_calendar.arithmetic import time_from_seconds

        with pytest.raises(ValueError, match="hour field"):
            time_from_seconds(256 * 3600)

    def test_negative_rejected(self):
        from mysql_calendar.arithmetic import time_from_seconds

        with pytest.raises(ValueError):
            time_from_seconds(-1)

    def test_inverse_of_time_diff(self):
        from mysql_calendar.arithmetic import calc_time_diff, time_from_seconds

        seconds, micros, neg = calc_time_diff(
            make_time([0, 0, 0, 10, 15, 30, 250]),
            make_time([0, 0, 0, 2, 5, 10, 0]),
        )
        t = time_from_seconds(seconds, micros)
        assert not neg
        assert (t.hour, t.minute, t.second, t.microsecond) == (8, 10, 20, 250)


# ---------------------------------------------------------------------------
# Integer encodings
# ---------------------------------------------------------------------------
class TestIntegerEncodings:

    def test_datetime_to_uint64(self):
        from mysql_calendar.arithmetic import datetime_to_uint64

        t = make_time([2016, 2, 30, 13, 45, 9, 123])
        assert datetime_to_uint64(t) == 20160230134509

    def test_date_to_uint64_does_not_validate(self, feb_30):
        from mysql_calendar.arithmetic import date_to_uint64

        assert date_to_uint64(feb_30) == 20160230

    def test_time_to_uint64(self):
        from mysql_calendar.arithmetic import time_to_uint64

        assert time_to_uint64(make_time([0, 0, 0, 100, 5, 9, 0])) == 1000509

    def test_max_datetime_fits_uint64(self):
        from mysql_calendar.arithmetic import datetime_to_uint64

        value = datetime_to_uint64(make_time([9999, 12, 31, 23, 59, 59, 0]))
        assert value == 99991231235959
        assert value < 2**64

    def test_zero_date(self):
        from mysql_calendar.arithmetic import date_to_uint64, datetime_to_uint64

        zero = make_time([0, 0, 0])
        assert date_to_uint64(zero) == 0
        assert datetime_to_uint64(zero) == 0
