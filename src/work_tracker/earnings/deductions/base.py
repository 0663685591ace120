from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..model import Deductions


class DeductionModel(ABC):
    """Strategy Pattern: how gross earnings turn into itemized deductions."""

    @abstractmethod
    def deductions(self, gross_earnings: float, *, base_hourly_rate: Optional[float] = None) -> Deductions:
        raise NotImplementedError
