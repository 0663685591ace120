from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..earnings.model import EarningsBreakdown, WorkSession


@dataclass(frozen=True)
class WorkEntry:
    """Persisted record: a work session plus the breakdown computed for it."""

    owner_id: int
    project_id: int
    project_name: str
    work_date: date
    description: str
    session: WorkSession
    earnings: EarningsBreakdown
    entry_id: Optional[int] = None

    @property
    def total_hours(self) -> float:
        return self.earnings.total_hours

    @property
    def gross_earnings(self) -> float:
        return self.earnings.gross_earnings

    @property
    def net_earnings(self) -> float:
        return self.earnings.net_earnings


@dataclass(frozen=True)
class WorkEntryForm:
    """Raw form fields as submitted by the web layer."""

    project_id: Optional[int]
    date: Optional[str]
    start_time: Optional[str]
    end_time: Optional[str]
    description: Optional[str]
    break_time: int = 0
    pay_type: Optional[str] = None


@dataclass(frozen=True)
class Dashboard:
    entries: list[WorkEntry]
    total_hours: float
    total_gross: float
    total_net: float
