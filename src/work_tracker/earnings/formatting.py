"""Display helpers for computed earnings.

The calculator never rounds; rounding happens only here, at the edge.
"""

from __future__ import annotations

from ..core.constants import MINUTES_PER_HOUR

_OVERTIME_LABELS = {
    1.5: "Time & Half",
    2.0: "Double Time",
    3.0: "Triple Time",
}


def format_currency(amount: float) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_break_time(minutes: int) -> str:
    hours, rest = divmod(int(minutes), MINUTES_PER_HOUR)
    if hours > 0:
        return f"{hours}h {rest}m"
    return f"{rest}m"


def format_hours(minutes: int) -> str:
    """Worked minutes as ``HH:MM`` (hours may exceed 24 in totals)."""
    minutes = int(minutes)
    return f"{minutes // MINUTES_PER_HOUR:02d}:{minutes % MINUTES_PER_HOUR:02d}"


def overtime_label(is_overtime: bool, multiplier: float) -> str:
    if not is_overtime:
        return "Regular"
    return _OVERTIME_LABELS.get(float(multiplier), f"{multiplier:g}x Rate")
