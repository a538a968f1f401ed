"""Shared test fixtures and data loading for mysql-calendar.

All table-driven test data lives in data/fixtures/scenarios/ as JSON files.
Dates are stored as [year, month, day] and time values as
[year, month, day, hour, minute, second, microsecond].

Every test runs with the datetime bridge pinned to UTC so results do not
depend on the host's DST rules.
"""

from __future__ import annotations

import json
from datetime import timezone
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def make_time(fields: list[int]):
    """MysqlTime from a 3-field date or a 7-field time value.

    >>> make_time([2000, 1, 1])
    MysqlTime(year=2000, month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    """
    from mysql_calendar.value import MysqlTime

    padded = list(fields) + [0] * (7 - len(fields))
    return MysqlTime(*padded)


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def utc_calendar():
    """Pin the datetime bridge to UTC and restore defaults afterwards."""
    from mysql_calendar.config import configure_calendar, reset_calendar_config

    reset_calendar_config()
    configure_calendar(tz=timezone.utc)
    yield
    reset_calendar_config()


@pytest.fixture
def y2k():
    """Saturday 2000-01-01 00:00:00."""
    return make_time([2000, 1, 1])


@pytest.fixture
def feb_30():
    """2016-02-30: a date MySQL stores but the calendar does not have."""
    return make_time([2016, 2, 30, 0, 0, 0, 0])
