from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

import pandas as pd

from ..core.exceptions import SpreadsheetFormatError
from ..entries.model import WorkEntry

SHEET_NAME = "WorkEntries"


def entries_to_dataframe(entries: Iterable[WorkEntry]) -> pd.DataFrame:
    rows = []
    for e in entries:
        s, b = e.session, e.earnings
        rows.append({
            "Date": e.work_date.isoformat(),
            "Project": e.project_name,
            "Description": e.description,
            "Start": s.start_time,
            "End": s.end_time,
            "Break (min)": s.break_minutes,
            "Hours": round(b.total_hours, 2),
            "Rate": round(b.effective_hourly_rate, 2),
            "Gross": round(b.gross_earnings, 2),
            "Federal Tax": round(b.federal_tax, 2),
            "Provincial Tax": round(b.provincial_tax, 2),
            "CPP": round(b.cpp_contribution, 2),
            "EI": round(b.ei_contribution, 2),
            "Total Deductions": round(b.total_deductions, 2),
            "Net": round(b.net_earnings, 2),
        })
    df = pd.DataFrame(rows)
    if not df.empty:
        df = df.sort_values(["Date", "Start"], ascending=False).reset_index(drop=True)
    return df


def export_entries(entries: Iterable[WorkEntry], path: Union[str, Path]) -> Path:
    """Write entries to ``.xlsx`` or ``.csv`` depending on the suffix."""
    path = Path(path)
    df = entries_to_dataframe(entries)
    suffix = path.suffix.lower()
    if suffix == ".xlsx":
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=SHEET_NAME)
    elif suffix == ".csv":
        df.to_csv(path, index=False)
    else:
        raise SpreadsheetFormatError(f"Unsupported export type {suffix or '(none)'}; use .xlsx or .csv")
    return path
