from __future__ import annotations

from datetime import date

import pytest

from work_tracker.core.exceptions import ValidationError
from work_tracker.entries.model import WorkEntry
from work_tracker.earnings.calculator import calculate
from work_tracker.earnings.model import WorkSession
from work_tracker.reports.service import EarningsReportService


def make_entry(work_date, start, end, *, project_id=1, project_name="Website", rate=25.0, break_minutes=0, multiplier=1.0):
    session = WorkSession(
        start_time=start,
        end_time=end,
        base_hourly_rate=rate,
        break_minutes=break_minutes,
        is_overtime=multiplier > 1.0,
        overtime_multiplier=multiplier,
    )
    return WorkEntry(
        owner_id=7,
        project_id=project_id,
        project_name=project_name,
        work_date=work_date,
        description="work",
        session=session,
        earnings=calculate(session),
    )


class FakeEntriesRepo:
    def __init__(self, entries):
        self._entries = entries
        self.last_args = None

    def list_for_owner(self, owner_id, *, start_date=None, end_date=None, project_id=None):
        self.last_args = {
            "owner_id": owner_id,
            "start_date": start_date,
            "end_date": end_date,
            "project_id": project_id,
        }
        return self._entries


def test_report_groups_by_project_and_day():
    entries = [
        make_entry(date(2025, 1, 6), "09:00", "17:00", break_minutes=60),
        make_entry(date(2025, 1, 6), "18:00", "20:00", project_id=2, project_name="Support", rate=40.0, multiplier=1.5),
        make_entry(date(2025, 1, 7), "22:00", "06:00"),
    ]
    svc = EarningsReportService(FakeEntriesRepo(entries), today=lambda: date(2025, 1, 31))

    report = svc.build_report(7)

    assert report.summary["entries_count"] == 3
    assert report.summary["total_hours"] == pytest.approx(17.0)
    assert report.summary["total_earnings"] == pytest.approx(175 + 120 + 200)
    assert report.summary["total_net"] == pytest.approx((175 + 120 + 200) * 0.854)

    assert report.project_stats["Website"]["hours"] == pytest.approx(15.0)
    assert report.project_stats["Website"]["entries"] == 2
    assert report.project_stats["Support"]["earnings"] == pytest.approx(120.0)

    assert report.daily_stats["2025-01-06"]["hours"] == pytest.approx(9.0)
    assert report.daily_stats["2025-01-07"]["earnings"] == pytest.approx(200.0)

    first = report.rows[0]
    assert first["worked_hours"] == "07:00"
    assert first["break"] == "1h 0m"
    assert first["gross"] == "$175.00"
    assert first["net"] == "$149.45"
    assert report.rows[1]["pay_type"] == "Time & Half"


def test_report_defaults_to_last_thirty_days():
    repo = FakeEntriesRepo([])
    svc = EarningsReportService(repo, today=lambda: date(2025, 1, 31))

    report = svc.build_report(7)

    assert (report.start, report.end) == (date(2025, 1, 1), date(2025, 1, 31))
    assert repo.last_args["start_date"] == date(2025, 1, 1)
    assert report.summary == {"total_hours": 0.0, "total_earnings": 0.0, "total_net": 0.0, "entries_count": 0}


def test_report_forwards_project_filter():
    repo = FakeEntriesRepo([])
    svc = EarningsReportService(repo, report_days=7, today=lambda: date(2025, 1, 31))

    svc.build_report(7, end=date(2025, 1, 10), project_id=123)

    assert repo.last_args["project_id"] == 123
    assert repo.last_args["start_date"] == date(2025, 1, 3)


def test_report_rejects_inverted_range():
    svc = EarningsReportService(FakeEntriesRepo([]))
    with pytest.raises(ValidationError):
        svc.build_report(7, start=date(2025, 2, 1), end=date(2025, 1, 1))


def test_rows_order_by_clock_time_not_text():
    entries = [
        make_entry(date(2025, 1, 6), "17:00", "19:00"),
        make_entry(date(2025, 1, 6), "9:00", "12:00"),
    ]
    svc = EarningsReportService(FakeEntriesRepo(entries), today=lambda: date(2025, 1, 31))

    report = svc.build_report(7)

    assert [r["start"] for r in report.rows] == ["09:00", "17:00"]
