from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Project


class ProjectRepository(Protocol):
    def add(self, project: Project) -> int:
        raise NotImplementedError

    def get_for_owner(self, owner_id: int, project_id: int) -> Optional[Project]:
        raise NotImplementedError

    def list_for_owner(self, owner_id: int) -> Sequence[Project]:
        raise NotImplementedError

    def replace(self, project: Project) -> bool:
        raise NotImplementedError

    def delete(self, owner_id: int, project_id: int) -> bool:
        raise NotImplementedError
