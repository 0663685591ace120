from __future__ import annotations

import re
from dataclasses import replace
from typing import Callable, Optional

import structlog

from ..common.datetime_utils import today_local
from ..common.validators import require_max_length, require_non_empty, require_rate
from ..core.constants import (
    DEFAULT_PROJECT_COLOR,
    MAX_CLIENT_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    MAX_PROJECT_NAME_LENGTH,
)
from ..core.enums import ProjectStatus
from ..core.exceptions import (
    InvalidRate,
    MissingFieldError,
    NotFoundError,
    ProjectInUseError,
    ValidationError,
)
from ..entries.repository import WorkEntryRepository
from .model import Project, ProjectForm, ProjectView
from .repository import ProjectRepository

log = structlog.get_logger(__name__)

_COLOR_RE = re.compile(r"#[0-9A-Fa-f]{6}")


def _parse_rate(value) -> float:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingFieldError("hourly rate is required")
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise InvalidRate(f"hourly rate must be a number, got {value!r}") from None
    return require_rate(value, "hourly rate", positive=True)


def _optional_text(value: Optional[str], field_name: str, max_len: int) -> Optional[str]:
    if value is None or not str(value).strip():
        return None
    return require_max_length(str(value).strip(), field_name, max_len)


class ProjectService:
    """Project CRUD for one owner; a project with work entries cannot be deleted."""

    def __init__(
        self,
        projects: ProjectRepository,
        entries: WorkEntryRepository,
        *,
        today: Callable = today_local,
    ):
        self._projects = projects
        self._entries = entries
        self._today = today

    def list_projects(self, owner_id: int) -> list[Project]:
        return list(self._projects.list_for_owner(owner_id))

    def create_project(self, owner_id: int, form: ProjectForm) -> Project:
        fields = self._clean(form)
        project = Project(
            project_id=None,
            owner_id=owner_id,
            start_date=self._today(),
            **fields,
        )
        project_id = self._projects.add(project)
        log.info("project.created", owner_id=owner_id, project_id=project_id, hourly_rate=project.hourly_rate)
        return replace(project, project_id=project_id)

    def update_project(self, owner_id: int, project_id: int, form: ProjectForm) -> Project:
        current = self._get(owner_id, project_id)
        fields = self._clean(form)
        status = self._status(form.status, default=current.status)

        end_date = current.end_date
        if status is ProjectStatus.COMPLETED and end_date is None:
            end_date = self._today()

        project = replace(current, status=status, end_date=end_date, **fields)
        if not self._projects.replace(project):
            raise NotFoundError("Project not found")
        log.info("project.updated", owner_id=owner_id, project_id=project_id, status=status.value)
        return project

    def delete_project(self, owner_id: int, project_id: int) -> None:
        if self._entries.count_for_project(owner_id, project_id) > 0:
            raise ProjectInUseError(
                "Cannot delete project with existing work entries. Please delete all work entries first."
            )
        if not self._projects.delete(owner_id, project_id):
            raise NotFoundError("Project not found")
        log.info("project.deleted", owner_id=owner_id, project_id=project_id)

    def view_project(self, owner_id: int, project_id: int) -> ProjectView:
        project = self._get(owner_id, project_id)
        entries = sorted(
            self._entries.list_for_owner(owner_id, project_id=project_id),
            key=lambda e: (e.work_date, e.session.start_time),
            reverse=True,
        )
        return ProjectView(
            project=project,
            entries=entries,
            total_hours=sum(e.total_hours for e in entries),
            total_gross=sum(e.gross_earnings for e in entries),
            total_net=sum(e.net_earnings for e in entries),
        )

    def _get(self, owner_id: int, project_id: int) -> Project:
        project = self._projects.get_for_owner(owner_id, project_id)
        if not project:
            raise NotFoundError("Project not found")
        return project

    @staticmethod
    def _status(value: Optional[str], *, default: ProjectStatus) -> ProjectStatus:
        if value is None or not str(value).strip():
            return default
        try:
            return ProjectStatus(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"unknown project status {value!r}") from None

    @staticmethod
    def _clean(form: ProjectForm) -> dict:
        name = require_max_length(require_non_empty(form.name, "project name"), "project name", MAX_PROJECT_NAME_LENGTH)
        color = (form.color or "").strip() or DEFAULT_PROJECT_COLOR
        if not _COLOR_RE.fullmatch(color):
            raise ValidationError(f"color must be a #RRGGBB hex value, got {form.color!r}")
        return {
            "name": name,
            "hourly_rate": _parse_rate(form.hourly_rate),
            "description": _optional_text(form.description, "description", MAX_DESCRIPTION_LENGTH),
            "client": _optional_text(form.client, "client", MAX_CLIENT_LENGTH),
            "color": color,
        }
