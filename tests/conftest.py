from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest

from work_tracker.entries.model import WorkEntry
from work_tracker.projects.model import Project


class InMemoryProjects:
    def __init__(self, projects=()):
        self._by_id: dict[int, Project] = {p.project_id: p for p in projects}
        self._id = max(self._by_id, default=0)

    def add(self, project: Project) -> int:
        self._id += 1
        self._by_id[self._id] = replace(project, project_id=self._id)
        return self._id

    def get_for_owner(self, owner_id: int, project_id: int) -> Optional[Project]:
        p = self._by_id.get(project_id)
        if p and p.owner_id == owner_id:
            return p
        return None

    def list_for_owner(self, owner_id: int):
        return [p for p in self._by_id.values() if p.owner_id == owner_id]

    def replace(self, project: Project) -> bool:
        if not self.get_for_owner(project.owner_id, project.project_id):
            return False
        self._by_id[project.project_id] = project
        return True

    def delete(self, owner_id: int, project_id: int) -> bool:
        if not self.get_for_owner(owner_id, project_id):
            return False
        del self._by_id[project_id]
        return True


class InMemoryEntries:
    def __init__(self):
        self._by_id: dict[int, WorkEntry] = {}
        self._id = 0

    def add(self, entry: WorkEntry) -> int:
        self._id += 1
        self._by_id[self._id] = replace(entry, entry_id=self._id)
        return self._id

    def get_for_owner(self, owner_id: int, entry_id: int) -> Optional[WorkEntry]:
        e = self._by_id.get(entry_id)
        if e and e.owner_id == owner_id:
            return e
        return None

    def replace(self, entry: WorkEntry) -> bool:
        if not self.get_for_owner(entry.owner_id, entry.entry_id):
            return False
        self._by_id[entry.entry_id] = entry
        return True

    def delete(self, owner_id: int, entry_id: int) -> bool:
        if not self.get_for_owner(owner_id, entry_id):
            return False
        del self._by_id[entry_id]
        return True

    def list_for_owner(
        self,
        owner_id: int,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        project_id: Optional[int] = None,
    ):
        items = [e for e in self._by_id.values() if e.owner_id == owner_id]
        if start_date:
            items = [e for e in items if e.work_date >= start_date]
        if end_date:
            items = [e for e in items if e.work_date <= end_date]
        if project_id is not None:
            items = [e for e in items if e.project_id == project_id]
        return items

    def count_for_project(self, owner_id: int, project_id: int) -> int:
        return len(self.list_for_owner(owner_id, project_id=project_id))


OWNER_ID = 7


@pytest.fixture
def project():
    return Project(project_id=1, owner_id=OWNER_ID, name="Website", hourly_rate=25.0, client="Acme")


@pytest.fixture
def projects_repo(project):
    other = Project(project_id=2, owner_id=99, name="Someone else's", hourly_rate=40.0)
    unpaid = Project(project_id=3, owner_id=OWNER_ID, name="Volunteer", hourly_rate=0.0)
    return InMemoryProjects([project, other, unpaid])


@pytest.fixture
def entries_repo():
    return InMemoryEntries()


@pytest.fixture
def owner_id():
    return OWNER_ID
