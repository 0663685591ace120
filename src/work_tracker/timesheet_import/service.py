from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from pathlib import Path
from typing import Optional, Union

import pandas as pd
import structlog

from ..common.datetime_utils import parse_iso_date, span_minutes, to_clock_string
from ..common.validators import require_clock_minutes, require_max_length, require_rate
from ..core.constants import DEFAULT_BREAK_MINUTES, LONG_SHIFT_BREAK_MINUTES, LONG_SHIFT_MINUTES, MAX_DESCRIPTION_LENGTH
from ..core.exceptions import DomainError, MissingFieldError, NotFoundError, ValidationError
from ..earnings.calculator import EarningsCalculator
from ..earnings.model import WorkSession
from ..entries.model import WorkEntry
from ..entries.repository import WorkEntryRepository
from ..projects.model import Project
from ..projects.repository import ProjectRepository
from .reader import normalize_frame, read_timesheet

log = structlog.get_logger(__name__)

# Spreadsheet row 1 is the header.
FIRST_DATA_ROW = 2
DEFAULT_DESCRIPTION = "Imported from timesheet"


@dataclass(frozen=True)
class RowError:
    row_number: int
    message: str


@dataclass(frozen=True)
class ImportResult:
    imported: int
    failed: int
    errors: list[RowError] = field(default_factory=list)
    entries: list[WorkEntry] = field(default_factory=list)


def infer_break_minutes(start_time: str, end_time: str) -> int:
    """Fixed policy: 60 minutes for shifts longer than 10 hours, else 30."""
    raw = span_minutes(require_clock_minutes(start_time, "start time"), require_clock_minutes(end_time, "end time"))
    if raw > LONG_SHIFT_MINUTES:
        return LONG_SHIFT_BREAK_MINUTES
    return DEFAULT_BREAK_MINUTES


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _to_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return parse_iso_date(text[:10])
    except ValueError:
        raise ValidationError(f"date must be YYYY-MM-DD, got {text!r}") from None


class TimesheetImportService:
    """Turns spreadsheet rows into calculated work entries for one project."""

    def __init__(
        self,
        projects: ProjectRepository,
        entries: WorkEntryRepository,
        *,
        calculator: Optional[EarningsCalculator] = None,
    ):
        self._projects = projects
        self._entries = entries
        self._calculator = calculator or EarningsCalculator()

    def import_file(self, owner_id: int, project_id: int, path: Union[str, Path]) -> ImportResult:
        frame = read_timesheet(path)
        log.info("timesheet.read", path=str(path), rows=len(frame))
        return self.import_rows(owner_id, project_id, frame)

    def import_rows(self, owner_id: int, project_id: int, frame: pd.DataFrame) -> ImportResult:
        project = self._projects.get_for_owner(owner_id, project_id)
        if not project:
            raise NotFoundError("Project not found")
        require_rate(project.hourly_rate, "hourly rate", positive=True)

        frame = normalize_frame(frame)
        imported: list[WorkEntry] = []
        errors: list[RowError] = []

        for row_number, row in enumerate(frame.to_dict("records"), start=FIRST_DATA_ROW):
            if all(_is_blank(v) for v in row.values()):
                continue
            try:
                entry = self._build_entry(owner_id, project, row)
                entry_id = self._entries.add(entry)
            except DomainError as exc:
                errors.append(RowError(row_number=row_number, message=str(exc)))
                log.warning("timesheet.row_failed", row=row_number, error=str(exc))
                continue
            imported.append(replace(entry, entry_id=entry_id))

        log.info(
            "timesheet.imported",
            owner_id=owner_id,
            project_id=project.project_id,
            imported=len(imported),
            failed=len(errors),
        )
        return ImportResult(imported=len(imported), failed=len(errors), errors=errors, entries=imported)

    def _build_entry(self, owner_id: int, project: Project, row: dict) -> WorkEntry:
        for column in ("date", "start time", "end time"):
            if _is_blank(row.get(column)):
                raise MissingFieldError(f"{column} is required")

        start_time = to_clock_string(row["start time"], "start time")
        end_time = to_clock_string(row["end time"], "end time")

        description = row.get("description")
        description = DEFAULT_DESCRIPTION if _is_blank(description) else str(description).strip()
        require_max_length(description, "description", MAX_DESCRIPTION_LENGTH)

        session = WorkSession(
            start_time=start_time,
            end_time=end_time,
            base_hourly_rate=project.hourly_rate,
            break_minutes=infer_break_minutes(start_time, end_time),
        )
        return WorkEntry(
            owner_id=owner_id,
            project_id=project.project_id,
            project_name=project.name,
            work_date=_to_date(row["date"]),
            description=description,
            session=session,
            earnings=self._calculator.calculate(session),
        )
