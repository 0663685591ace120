from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DeductionMode
from ..core.exceptions import ValidationError
from .deductions.base import DeductionModel
from .deductions.bracket import BracketDeductionModel
from .deductions.flat_rate import FlatRateDeductionModel


@dataclass
class DeductionModelFactory:
    """Factory Pattern: choose the deduction model configured for the product."""

    def for_mode(self, mode: DeductionMode | str) -> DeductionModel:
        try:
            mode = DeductionMode(str(mode).strip().lower()) if not isinstance(mode, DeductionMode) else mode
        except ValueError:
            raise ValidationError(f"unknown deduction mode {mode!r}") from None

        if mode is DeductionMode.BRACKET:
            return BracketDeductionModel()
        return FlatRateDeductionModel()
