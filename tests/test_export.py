from datetime import date

import pandas as pd
import pytest

from work_tracker.core.exceptions import SpreadsheetFormatError
from work_tracker.earnings.calculator import calculate
from work_tracker.earnings.model import WorkSession
from work_tracker.entries.model import WorkEntry
from work_tracker.reports.export import SHEET_NAME, entries_to_dataframe, export_entries


def _entry(day):
    session = WorkSession(start_time="09:00", end_time="17:00", break_minutes=60, base_hourly_rate=25)
    return WorkEntry(
        owner_id=7,
        project_id=1,
        project_name="Website",
        work_date=date(2025, 1, day),
        description="work",
        session=session,
        earnings=calculate(session),
        entry_id=day,
    )


def test_dataframe_newest_first_and_rounded():
    df = entries_to_dataframe([_entry(6), _entry(8)])

    assert list(df["Date"]) == ["2025-01-08", "2025-01-06"]
    assert df.loc[0, "Hours"] == 7.0
    assert df.loc[0, "Total Deductions"] == 25.55
    assert df.loc[0, "Net"] == 149.45


def test_empty_dataframe():
    assert entries_to_dataframe([]).empty


def test_export_xlsx(tmp_path):
    path = export_entries([_entry(6)], tmp_path / "entries.xlsx")

    df = pd.read_excel(path, sheet_name=SHEET_NAME)
    assert df.loc[0, "Project"] == "Website"
    assert df.loc[0, "Gross"] == 175.0


def test_export_csv(tmp_path):
    path = export_entries([_entry(6)], tmp_path / "entries.csv")
    assert pd.read_csv(path).loc[0, "Net"] == 149.45


def test_export_rejects_unknown_suffix(tmp_path):
    with pytest.raises(SpreadsheetFormatError):
        export_entries([_entry(6)], tmp_path / "entries.json")
