from __future__ import annotations

from enum import Enum


class PayType(str, Enum):
    """Pay type chosen on the work entry form."""

    REGULAR = "regular"
    OVERTIME = "overtime"
    DOUBLE = "double"
    TRIPLE = "triple"

    @property
    def multiplier(self) -> float:
        return {
            PayType.REGULAR: 1.0,
            PayType.OVERTIME: 1.5,
            PayType.DOUBLE: 2.0,
            PayType.TRIPLE: 3.0,
        }[self]

    @property
    def is_overtime(self) -> bool:
        return self is not PayType.REGULAR

    @classmethod
    def from_value(cls, value: str | None) -> "PayType":
        """Map a form value to a pay type; unknown values are regular pay."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.REGULAR


class DeductionMode(str, Enum):
    """Which deduction model turns gross earnings into deductions."""

    FLAT = "flat"
    BRACKET = "bracket"


class ProjectStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"
    CANCELLED = "cancelled"
