from __future__ import annotations

from dataclasses import asdict, dataclass

from ..common.datetime_utils import minutes_to_clock
from ..common.validators import require_break_minutes, require_clock_minutes, require_multiplier, require_rate
from ..core.enums import PayType


@dataclass(frozen=True)
class WorkSession:
    """Raw inputs of one work session; validated on construction."""

    start_time: str
    end_time: str
    base_hourly_rate: float
    break_minutes: int = 0
    is_overtime: bool = False
    overtime_multiplier: float = 1.0

    def __post_init__(self):
        # Zero-padded HH:MM; entries are sorted on this string
        object.__setattr__(self, "start_time", minutes_to_clock(require_clock_minutes(self.start_time, "start time")))
        object.__setattr__(self, "end_time", minutes_to_clock(require_clock_minutes(self.end_time, "end time")))
        require_break_minutes(self.break_minutes)
        require_rate(self.base_hourly_rate)
        require_multiplier(self.overtime_multiplier)

    @classmethod
    def for_pay_type(
        cls,
        *,
        start_time: str,
        end_time: str,
        base_hourly_rate: float,
        break_minutes: int = 0,
        pay_type: PayType = PayType.REGULAR,
    ) -> "WorkSession":
        return cls(
            start_time=start_time,
            end_time=end_time,
            base_hourly_rate=base_hourly_rate,
            break_minutes=break_minutes,
            is_overtime=pay_type.is_overtime,
            overtime_multiplier=pay_type.multiplier,
        )


@dataclass(frozen=True)
class Deductions:
    federal_tax: float
    provincial_tax: float
    cpp_contribution: float
    ei_contribution: float
    total_deductions: float


@dataclass(frozen=True)
class EarningsBreakdown:
    """Fully computed earnings for one session. Never mutated; recompute instead."""

    total_hours: float
    effective_hourly_rate: float
    gross_earnings: float
    federal_tax: float
    provincial_tax: float
    cpp_contribution: float
    ei_contribution: float
    total_deductions: float
    net_earnings: float

    @property
    def deductions(self) -> Deductions:
        return Deductions(
            federal_tax=self.federal_tax,
            provincial_tax=self.provincial_tax,
            cpp_contribution=self.cpp_contribution,
            ei_contribution=self.ei_contribution,
            total_deductions=self.total_deductions,
        )

    def as_dict(self) -> dict:
        """Plain fields for the caller to persist alongside the session."""
        return asdict(self)
