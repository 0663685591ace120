from __future__ import annotations

from dataclasses import replace
from typing import Optional

import structlog

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_max_length, require_non_empty, require_rate
from ..core.constants import MAX_DESCRIPTION_LENGTH
from ..core.enums import PayType
from ..core.exceptions import MissingFieldError, NotFoundError, ValidationError
from ..earnings.calculator import EarningsCalculator
from ..earnings.model import WorkSession
from ..projects.repository import ProjectRepository
from .model import Dashboard, WorkEntry, WorkEntryForm
from .repository import WorkEntryRepository

log = structlog.get_logger(__name__)


class WorkEntryService:
    """Builds work entries from form input; earnings are computed before storage."""

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

    def add_entry(self, owner_id: int, form: WorkEntryForm) -> WorkEntry:
        entry = self._build_entry(owner_id, form)
        entry_id = self._entries.add(entry)
        log.info("work_entry.added", owner_id=owner_id, entry_id=entry_id, hours=entry.total_hours)
        return replace(entry, entry_id=entry_id)

    def update_entry(self, owner_id: int, entry_id: int, form: WorkEntryForm) -> WorkEntry:
        if not self._entries.get_for_owner(owner_id, entry_id):
            raise NotFoundError("Work entry not found")

        entry = self._build_entry(owner_id, form, entry_id=entry_id)
        if not self._entries.replace(entry):
            raise NotFoundError("Work entry not found")
        log.info("work_entry.updated", owner_id=owner_id, entry_id=entry_id, hours=entry.total_hours)
        return entry

    def delete_entry(self, owner_id: int, entry_id: int) -> None:
        if not self._entries.delete(owner_id, entry_id):
            raise NotFoundError("Work entry not found")
        log.info("work_entry.deleted", owner_id=owner_id, entry_id=entry_id)

    def dashboard(self, owner_id: int) -> Dashboard:
        entries = sorted(
            self._entries.list_for_owner(owner_id),
            key=lambda e: (e.work_date, e.session.start_time),
            reverse=True,
        )
        return Dashboard(
            entries=entries,
            total_hours=sum(e.total_hours for e in entries),
            total_gross=sum(e.gross_earnings for e in entries),
            total_net=sum(e.net_earnings for e in entries),
        )

    def _build_entry(self, owner_id: int, form: WorkEntryForm, *, entry_id: Optional[int] = None) -> WorkEntry:
        if form.project_id is None:
            raise MissingFieldError("project is required")
        date_text = require_non_empty(form.date, "date")
        start_time = require_non_empty(form.start_time, "start time")
        end_time = require_non_empty(form.end_time, "end time")
        description = require_non_empty(form.description, "description")
        require_max_length(description, "description", MAX_DESCRIPTION_LENGTH)

        try:
            work_date = parse_iso_date(date_text)
        except ValueError:
            raise ValidationError(f"date must be YYYY-MM-DD, got {date_text!r}") from None

        project = self._projects.get_for_owner(owner_id, form.project_id)
        if not project:
            raise NotFoundError("Project not found")
        hourly_rate = require_rate(project.hourly_rate, "hourly rate", positive=True)

        session = WorkSession.for_pay_type(
            start_time=start_time,
            end_time=end_time,
            base_hourly_rate=hourly_rate,
            break_minutes=form.break_time if form.break_time is not None else 0,
            pay_type=PayType.from_value(form.pay_type),
        )
        return WorkEntry(
            owner_id=owner_id,
            project_id=project.project_id,
            project_name=project.name,
            work_date=work_date,
            description=description,
            session=session,
            earnings=self._calculator.calculate(session),
            entry_id=entry_id,
        )
