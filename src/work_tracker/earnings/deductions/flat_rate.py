from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from ...common.validators import require_amount
from ...core.constants import (
    CPP_SHARE,
    EI_SHARE,
    FEDERAL_TAX_SHARE,
    PROVINCIAL_TAX_SHARE,
    TOTAL_DEDUCTION_RATE,
)
from ...core.exceptions import ValidationError
from ..model import Deductions
from .base import DeductionModel


@dataclass(frozen=True)
class FlatRateDeductionModel(DeductionModel):
    """Fixed composite rate of gross, split by fixed shares (the default model)."""

    total_rate: float = TOTAL_DEDUCTION_RATE
    federal_share: float = FEDERAL_TAX_SHARE
    provincial_share: float = PROVINCIAL_TAX_SHARE
    cpp_share: float = CPP_SHARE
    ei_share: float = EI_SHARE

    def __post_init__(self):
        if not 0 <= self.total_rate < 1:
            raise ValidationError(f"total deduction rate must be in [0, 1), got {self.total_rate}")
        shares = (self.federal_share, self.provincial_share, self.cpp_share, self.ei_share)
        if any(s < 0 for s in shares) or not math.isclose(sum(shares), 1.0, rel_tol=1e-12):
            raise ValidationError("deduction shares must be non-negative and sum to 1")

    def deductions(self, gross_earnings: float, *, base_hourly_rate: Optional[float] = None) -> Deductions:
        gross_earnings = require_amount(gross_earnings, "gross earnings")
        total = gross_earnings * self.total_rate
        return Deductions(
            federal_tax=total * self.federal_share,
            provincial_tax=total * self.provincial_share,
            cpp_contribution=total * self.cpp_share,
            ei_contribution=total * self.ei_share,
            total_deductions=total,
        )
