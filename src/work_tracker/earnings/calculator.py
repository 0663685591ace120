"""Earnings calculator.

Pure functions only: no I/O, no clock, no shared state. Every validation
error is raised before any arithmetic, so a caller never sees a partial
breakdown.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.datetime_utils import span_minutes
from ..common.validators import require_break_minutes, require_clock_minutes, require_multiplier, require_rate
from ..core.constants import MINUTES_PER_HOUR
from .deductions.base import DeductionModel
from .deductions.flat_rate import FlatRateDeductionModel
from .model import Deductions, EarningsBreakdown, WorkSession

_DEFAULT_MODEL = FlatRateDeductionModel()


def compute_hours(start_time: str, end_time: str, break_minutes: int = 0) -> float:
    """Hours worked between two clock times, minus break, never negative.

    An end time earlier than the start time is read as the next day.
    """
    start = require_clock_minutes(start_time, "start time")
    end = require_clock_minutes(end_time, "end time")
    break_minutes = require_break_minutes(break_minutes)

    worked = span_minutes(start, end) - break_minutes
    return max(0, worked) / MINUTES_PER_HOUR


def compute_effective_rate(base_rate: float, is_overtime: bool = False, multiplier: float = 1.0) -> float:
    base_rate = require_rate(base_rate)
    multiplier = require_multiplier(multiplier)
    if is_overtime and multiplier > 1.0:
        return base_rate * multiplier
    return base_rate


def compute_gross(hours: float, effective_rate: float) -> float:
    return hours * effective_rate


def compute_deductions(gross_earnings: float) -> Deductions:
    """Itemized deductions under the flat composite rate."""
    return _DEFAULT_MODEL.deductions(gross_earnings)


def compute_net(gross_earnings: float, total_deductions: float) -> float:
    return gross_earnings - total_deductions


def calculate(session: WorkSession, deduction_model: Optional[DeductionModel] = None) -> EarningsBreakdown:
    """Run a session through hours, rate, gross, deductions and net."""
    model = deduction_model or _DEFAULT_MODEL

    total_hours = compute_hours(session.start_time, session.end_time, session.break_minutes)
    rate = compute_effective_rate(session.base_hourly_rate, session.is_overtime, session.overtime_multiplier)
    gross = compute_gross(total_hours, rate)
    deductions = model.deductions(gross, base_hourly_rate=session.base_hourly_rate)
    net = compute_net(gross, deductions.total_deductions)

    return EarningsBreakdown(
        total_hours=total_hours,
        effective_hourly_rate=rate,
        gross_earnings=gross,
        federal_tax=deductions.federal_tax,
        provincial_tax=deductions.provincial_tax,
        cpp_contribution=deductions.cpp_contribution,
        ei_contribution=deductions.ei_contribution,
        total_deductions=deductions.total_deductions,
        net_earnings=net,
    )


@dataclass(frozen=True)
class EarningsCalculator:
    """Binds a deduction model so services can share one configured calculator."""

    deduction_model: DeductionModel = field(default_factory=FlatRateDeductionModel)

    def calculate(self, session: WorkSession) -> EarningsBreakdown:
        return calculate(session, self.deduction_model)
