"""Date helpers shared across calculations and dashboard layers."""

from __future__ import annotations

from datetime import date, datetime

import pandas as pd

DEFAULT_TIMEZONE = 'UTC'
ONE_YEAR_MS = 365 * 24 * 60 * 60 * 1000
DEFAULT_RANGE_START_MS = int(pd.Timestamp('2025-01-01', tz='UTC').value // 1_000_000)
MIN_EPOCH_MS = (pd.Timestamp.min + pd.Timedelta(days=1)).value // 1_000_000
MAX_EPOCH_MS = (pd.Timestamp.max - pd.Timedelta(days=1)).value // 1_000_000


def is_representable_ms(value_ms: int | None) -> bool:
    """True when ``value_ms`` converts to a Timestamp in any timezone."""
    return value_ms is not None and MIN_EPOCH_MS <= value_ms <= MAX_EPOCH_MS


def epoch_ms_to_timestamp(value_ms: int, tz: str = DEFAULT_TIMEZONE) -> pd.Timestamp:
    """Convert epoch milliseconds to a timezone-naive local Timestamp in ``tz``."""
    return pd.Timestamp(int(value_ms), unit='ms', tz='UTC').tz_convert(tz).tz_localize(None)


def timestamp_to_epoch_ms(value: pd.Timestamp | datetime | date | str, tz: str = DEFAULT_TIMEZONE) -> int:
    """Convert a wall-clock date/time in ``tz`` to epoch milliseconds."""
    ts = pd.Timestamp(value)
    if ts.tz is None:
        ts = ts.tz_localize(tz)
    return int(ts.value // 1_000_000)


def end_of_day_ms(value: date, tz: str = DEFAULT_TIMEZONE) -> int:
    """Last millisecond of the calendar day ``value`` in ``tz``."""
    next_day = pd.Timestamp(value).normalize() + pd.Timedelta(days=1)
    return timestamp_to_epoch_ms(next_day, tz) - 1


def month_start(value_ms: int, tz: str = DEFAULT_TIMEZONE) -> pd.Timestamp:
    """First day of the calendar month containing ``value_ms``."""
    return epoch_ms_to_timestamp(value_ms, tz).normalize().replace(day=1)
