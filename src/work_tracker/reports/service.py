from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import today_local
from ..core.constants import DEFAULT_REPORT_DAYS, MINUTES_PER_HOUR
from ..core.exceptions import ValidationError
from ..earnings.formatting import format_break_time, format_currency, format_hours, overtime_label
from ..entries.repository import WorkEntryRepository


@dataclass(frozen=True)
class EarningsReport:
    start: date
    end: date
    rows: list[dict]
    summary: dict
    project_stats: dict[str, dict]
    daily_stats: dict[str, dict]


class EarningsReportService:
    def __init__(
        self,
        entries: WorkEntryRepository,
        *,
        report_days: int = DEFAULT_REPORT_DAYS,
        today: Callable[[], date] = today_local,
    ):
        self._entries = entries
        self._report_days = int(report_days)
        self._today = today

    def build_report(
        self,
        owner_id: int,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        project_id: Optional[int] = None,
    ) -> EarningsReport:
        end = end or self._today()
        start = start or end - timedelta(days=self._report_days)
        if start > end:
            raise ValidationError("Report start date must not be after end date")

        entries = self._entries.list_for_owner(owner_id, start_date=start, end_date=end, project_id=project_id)

        rows: list[dict] = []
        project_stats: dict[str, dict] = {}
        daily_stats: dict[str, dict] = {}
        total_hours = total_gross = total_net = 0.0

        for e in sorted(entries, key=lambda x: (x.work_date, x.session.start_time)):
            s, b = e.session, e.earnings
            rows.append(
                {
                    "date": e.work_date.strftime("%Y-%m-%d"),
                    "project": e.project_name,
                    "description": e.description,
                    "start": s.start_time,
                    "end": s.end_time,
                    "break": format_break_time(s.break_minutes),
                    "worked_hours": format_hours(round(b.total_hours * MINUTES_PER_HOUR)),
                    "pay_type": overtime_label(s.is_overtime, s.overtime_multiplier),
                    "gross": format_currency(b.gross_earnings),
                    "net": format_currency(b.net_earnings),
                }
            )

            p = project_stats.setdefault(e.project_name or "Unknown", {"hours": 0.0, "earnings": 0.0, "net": 0.0, "entries": 0})
            p["hours"] += b.total_hours
            p["earnings"] += b.gross_earnings
            p["net"] += b.net_earnings
            p["entries"] += 1

            d = daily_stats.setdefault(e.work_date.isoformat(), {"hours": 0.0, "earnings": 0.0})
            d["hours"] += b.total_hours
            d["earnings"] += b.gross_earnings

            total_hours += b.total_hours
            total_gross += b.gross_earnings
            total_net += b.net_earnings

        summary = {
            "total_hours": total_hours,
            "total_earnings": total_gross,
            "total_net": total_net,
            "entries_count": len(rows),
        }
        return EarningsReport(
            start=start,
            end=end,
            rows=rows,
            summary=summary,
            project_stats=project_stats,
            daily_stats=daily_stats,
        )
