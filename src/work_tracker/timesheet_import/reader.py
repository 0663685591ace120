from __future__ import annotations

from pathlib import Path
from typing import Union

import pandas as pd
import xlrd

from ..core.exceptions import SpreadsheetFormatError

REQUIRED_COLUMNS = ("date", "start time", "end time")
OPTIONAL_COLUMNS = ("description",)
SUPPORTED_SUFFIXES = (".csv", ".xlsx", ".xls")
EXCEL_ENGINES = {".xlsx": "openpyxl", ".xls": "xlrd"}


def normalize_column(name) -> str:
    """``Start_Time `` / ``start time`` / ``START TIME`` all become ``start time``."""
    return " ".join(str(name).replace("_", " ").split()).lower()


def read_timesheet(path: Union[str, Path]) -> pd.DataFrame:
    """Load a CSV or Excel timesheet with canonical lower-case column names."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise SpreadsheetFormatError(
            f"Unsupported file type {suffix or '(none)'}; expected one of {', '.join(SUPPORTED_SUFFIXES)}"
        )

    try:
        if suffix == ".csv":
            frame = pd.read_csv(path)
        else:
            frame = pd.read_excel(path, engine=EXCEL_ENGINES[suffix])
    except (OSError, ValueError, xlrd.XLRDError) as exc:
        raise SpreadsheetFormatError(f"Could not read {path.name}: {exc}") from exc

    return normalize_frame(frame)


def normalize_frame(frame: pd.DataFrame) -> pd.DataFrame:
    frame = frame.rename(columns=normalize_column)
    missing = [c for c in REQUIRED_COLUMNS if c not in frame.columns]
    if missing:
        raise SpreadsheetFormatError(f"Missing required column(s): {', '.join(missing)}")
    keep = [c for c in (*REQUIRED_COLUMNS, *OPTIONAL_COLUMNS) if c in frame.columns]
    return frame[keep]
