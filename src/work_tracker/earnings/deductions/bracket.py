from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...common.validators import require_amount, require_rate
from ...core.constants import (
    CPP_RATE,
    EI_RATE,
    EMPLOYEE_CONTRIBUTION_SHARE,
    FEDERAL_FIRST_BRACKET_LIMIT,
    FEDERAL_FIRST_BRACKET_RATE,
    FEDERAL_SECOND_BRACKET_RATE,
    HOURS_PER_WEEK,
    PROVINCIAL_BASE_RATE,
    WEEKS_PER_YEAR,
)
from ...core.exceptions import InvalidRate
from ..model import Deductions
from .base import DeductionModel


@dataclass(frozen=True)
class BracketDeductionModel(DeductionModel):
    """Legacy model: federal bracket picked from an annualized full-time income.

    The base hourly rate (not the overtime rate) is annualized over a
    40-hour week and 52 weeks; the resulting bracket's federal rate, the
    Ontario base rate and the employee halves of CPP and EI are each applied
    to gross earnings.
    """

    hours_per_week: int = HOURS_PER_WEEK
    weeks_per_year: int = WEEKS_PER_YEAR

    def annualized_income(self, base_hourly_rate: float) -> float:
        return base_hourly_rate * self.hours_per_week * self.weeks_per_year

    def federal_rate(self, base_hourly_rate: float) -> float:
        if self.annualized_income(base_hourly_rate) <= FEDERAL_FIRST_BRACKET_LIMIT:
            return FEDERAL_FIRST_BRACKET_RATE
        return FEDERAL_SECOND_BRACKET_RATE

    def deductions(self, gross_earnings: float, *, base_hourly_rate: Optional[float] = None) -> Deductions:
        if base_hourly_rate is None:
            raise InvalidRate("bracket deductions need the base hourly rate")
        base_hourly_rate = require_rate(base_hourly_rate, "base hourly rate")
        gross_earnings = require_amount(gross_earnings, "gross earnings")

        federal = gross_earnings * self.federal_rate(base_hourly_rate)
        provincial = gross_earnings * PROVINCIAL_BASE_RATE
        cpp = gross_earnings * CPP_RATE * EMPLOYEE_CONTRIBUTION_SHARE
        ei = gross_earnings * EI_RATE * EMPLOYEE_CONTRIBUTION_SHARE
        return Deductions(
            federal_tax=federal,
            provincial_tax=provincial,
            cpp_contribution=cpp,
            ei_contribution=ei,
            total_deductions=federal + provincial + cpp + ei,
        )
