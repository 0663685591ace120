from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Optional

from ..core.constants import DEFAULT_PROJECT_COLOR
from ..core.enums import ProjectStatus

if TYPE_CHECKING:
    from ..entries.model import WorkEntry


@dataclass(frozen=True)
class Project:
    """Domain entity: a billable project whose rate seeds each work session."""

    project_id: Optional[int]
    owner_id: int
    name: str
    hourly_rate: float
    client: Optional[str] = None
    status: ProjectStatus = ProjectStatus.ACTIVE
    description: Optional[str] = None
    color: str = DEFAULT_PROJECT_COLOR
    start_date: Optional[date] = None
    end_date: Optional[date] = None


@dataclass(frozen=True)
class ProjectForm:
    """Raw project fields as submitted by the web layer."""

    name: Optional[str]
    hourly_rate: object
    description: Optional[str] = None
    client: Optional[str] = None
    color: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class ProjectView:
    project: Project
    entries: list["WorkEntry"] = field(default_factory=list)
    total_hours: float = 0.0
    total_gross: float = 0.0
    total_net: float = 0.0
