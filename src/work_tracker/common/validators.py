from __future__ import annotations

import math
import re
from numbers import Real

from ..core.constants import (
    MAX_BREAK_MINUTES,
    MAX_OVERTIME_MULTIPLIER,
    MIN_BREAK_MINUTES,
    MIN_OVERTIME_MULTIPLIER,
    MINUTES_PER_HOUR,
)
from ..core.exceptions import (
    InvalidBreakTime,
    InvalidMultiplier,
    InvalidRate,
    InvalidTimeFormat,
    MissingFieldError,
    ValidationError,
)

_CLOCK_RE = re.compile(r"([01]?[0-9]|2[0-3]):([0-5][0-9])")


def require_non_empty(value: str | None, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise MissingFieldError(f"{field_name} is required")
    return str(value).strip()


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def require_clock_minutes(value: str, field_name: str = "time") -> int:
    """Parse a 24-hour ``H:MM``/``HH:MM`` string into minutes since midnight."""
    if not isinstance(value, str):
        raise InvalidTimeFormat(f"{field_name} must be an HH:MM string, got {value!r}")
    match = _CLOCK_RE.fullmatch(value.strip())
    if not match:
        raise InvalidTimeFormat(f"{field_name} must be HH:MM (24-hour), got {value!r}")
    hours, minutes = int(match.group(1)), int(match.group(2))
    return hours * MINUTES_PER_HOUR + minutes


def require_break_minutes(value) -> int:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidBreakTime(f"break time must be a whole number of minutes, got {value!r}")
    if not math.isfinite(value) or value != int(value):
        raise InvalidBreakTime(f"break time must be a whole number of minutes, got {value!r}")
    minutes = int(value)
    if not MIN_BREAK_MINUTES <= minutes <= MAX_BREAK_MINUTES:
        raise InvalidBreakTime(
            f"break time must be between {MIN_BREAK_MINUTES} and {MAX_BREAK_MINUTES} minutes, got {minutes}"
        )
    return minutes


def require_multiplier(value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidMultiplier(f"overtime multiplier must be a number, got {value!r}")
    multiplier = float(value)
    if not MIN_OVERTIME_MULTIPLIER <= multiplier <= MAX_OVERTIME_MULTIPLIER:
        raise InvalidMultiplier(
            f"overtime multiplier must be between {MIN_OVERTIME_MULTIPLIER} and {MAX_OVERTIME_MULTIPLIER}, got {value}"
        )
    return multiplier


def require_rate(value, field_name: str = "hourly rate", *, positive: bool = False) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidRate(f"{field_name} must be a number, got {value!r}")
    rate = float(value)
    if not math.isfinite(rate) or rate < 0:
        raise InvalidRate(f"{field_name} must not be negative, got {value}")
    if positive and rate == 0:
        raise InvalidRate(f"{field_name} must be greater than 0")
    return rate


def require_amount(value, field_name: str = "amount") -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{field_name} must be a number, got {value!r}")
    amount = float(value)
    if not math.isfinite(amount) or amount < 0:
        raise ValidationError(f"{field_name} must not be negative, got {value}")
    return amount
