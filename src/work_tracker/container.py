from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config.settings import Settings, load_settings
from .earnings.calculator import EarningsCalculator
from .earnings.factory import DeductionModelFactory
from .entries.repository import WorkEntryRepository
from .entries.service import WorkEntryService
from .projects.repository import ProjectRepository
from .projects.service import ProjectService
from .reports.service import EarningsReportService
from .timesheet_import.service import TimesheetImportService


@dataclass(frozen=True)
class Container:
    settings: Settings

    projects_repo: ProjectRepository
    entries_repo: WorkEntryRepository

    calculator: EarningsCalculator
    project_service: ProjectService
    work_entry_service: WorkEntryService
    import_service: TimesheetImportService
    report_service: EarningsReportService


def build_container(
    *,
    projects: ProjectRepository,
    entries: WorkEntryRepository,
    settings: Optional[Settings] = None,
) -> Container:
    """Wire services around repositories supplied by the storage layer."""
    settings = settings or load_settings()

    calculator = EarningsCalculator(DeductionModelFactory().for_mode(settings.deduction_mode))
    project_service = ProjectService(projects, entries)
    work_entry_service = WorkEntryService(projects, entries, calculator=calculator)
    import_service = TimesheetImportService(projects, entries, calculator=calculator)
    report_service = EarningsReportService(entries, report_days=settings.report_days)

    return Container(
        settings=settings,
        projects_repo=projects,
        entries_repo=entries,
        calculator=calculator,
        project_service=project_service,
        work_entry_service=work_entry_service,
        import_service=import_service,
        report_service=report_service,
    )
