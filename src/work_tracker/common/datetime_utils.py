from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta
from numbers import Real

from ..core.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR
from ..core.exceptions import InvalidTimeFormat
from .validators import require_clock_minutes


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def minutes_to_clock(minutes: int) -> str:
    """Format minutes since midnight as ``HH:MM`` (wraps past midnight)."""
    minutes = int(minutes) % MINUTES_PER_DAY
    return f"{minutes // MINUTES_PER_HOUR:02d}:{minutes % MINUTES_PER_HOUR:02d}"


def span_minutes(start_minutes: int, end_minutes: int) -> int:
    """Minutes from start to end; an earlier end is taken as the next day."""
    raw = end_minutes - start_minutes
    if raw < 0:
        raw += MINUTES_PER_DAY
    return raw


def to_clock_string(value, field_name: str = "time") -> str:
    """Normalize a spreadsheet time cell to ``HH:MM``.

    Accepts ``HH:MM``/``HH:MM:SS`` strings, ``time``/``datetime`` values,
    ``timedelta`` durations and fractional-day numbers (``0.375`` is 09:00).
    """
    if isinstance(value, datetime):
        return value.strftime("%H:%M")
    if isinstance(value, time):
        return value.strftime("%H:%M")
    if isinstance(value, timedelta):
        return minutes_to_clock(round(value.total_seconds() / 60))
    if isinstance(value, bool):
        raise InvalidTimeFormat(f"{field_name}: unsupported time value {value!r}")
    if isinstance(value, Real):
        if not math.isfinite(value) or value < 0:
            raise InvalidTimeFormat(f"{field_name}: unsupported time value {value!r}")
        if value >= 1 and value == math.floor(value):
            # A bare day count carries no time of day
            raise InvalidTimeFormat(f"{field_name}: {value!r} is a whole number of days, not a time")
        fraction = value - math.floor(value)
        return minutes_to_clock(round(fraction * MINUTES_PER_DAY))
    if isinstance(value, str):
        text = value.strip()
        if text.count(":") == 2:
            text = text.rsplit(":", 1)[0]
        minutes = require_clock_minutes(text, field_name)
        return minutes_to_clock(minutes)
    raise InvalidTimeFormat(f"{field_name}: unsupported time value {value!r}")
