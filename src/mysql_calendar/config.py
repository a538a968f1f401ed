"""Module-level configuration for mysql_calendar defaults."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import tzinfo
from typing import Any


@dataclass
class CalendarConfig:
    """Configuration for calendar defaults."""

    default_week_format: int = 0  # MySQL default_week_format
    tz: tzinfo | None = None  # None = host local time


# Module-level singleton
_calendar_config: CalendarConfig | None = None
_config_lock = threading.Lock()

# Marks an argument of configure_calendar as not passed
_UNSET: Any = object()


def get_calendar_config() -> CalendarConfig:
    """Get the global calendar configuration singleton."""
    global _calendar_config
    if _calendar_config is None:
        with _config_lock:
            if _calendar_config is None:
                _calendar_config = CalendarConfig()
    return _calendar_config


def configure_calendar(
    default_week_format: int | None = None,
    tz: tzinfo | None = _UNSET,
) -> None:
    """Configure calendar defaults.

    Args:
        default_week_format: Week mode (0-7) used by MysqlTime.week() and
            MysqlTime.year_week() when no mode is passed.
        tz: Zone used when bridging to datetime. Pass None to go back to
            the host's local time; leave unset to keep the current zone.

    Raises ValueError if default_week_format is outside 0-7.

    Example:
        from datetime import timezone
        from mysql_calendar import configure_calendar

        configure_calendar(default_week_format=3, tz=timezone.utc)
    """
    if default_week_format is not None and not 0 <= default_week_format <= 7:
        raise ValueError(
            f"default_week_format must be a week mode between 0 and 7, "
            f"got {default_week_format!r}"
        )
    config = get_calendar_config()
    with _config_lock:
        if default_week_format is not None:
            config.default_week_format = default_week_format
        if tz is not _UNSET:
            config.tz = tz


def reset_calendar_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _calendar_config
    with _config_lock:
        _calendar_config = CalendarConfig()
