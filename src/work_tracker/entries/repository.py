from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import WorkEntry


class WorkEntryRepository(Protocol):
    def add(self, entry: WorkEntry) -> int:
        raise NotImplementedError

    def get_for_owner(self, owner_id: int, entry_id: int) -> Optional[WorkEntry]:
        raise NotImplementedError

    def replace(self, entry: WorkEntry) -> bool:
        raise NotImplementedError

    def delete(self, owner_id: int, entry_id: int) -> bool:
        raise NotImplementedError

    def list_for_owner(
        self,
        owner_id: int,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        project_id: Optional[int] = None,
    ) -> Sequence[WorkEntry]:
        raise NotImplementedError

    def count_for_project(self, owner_id: int, project_id: int) -> int:
        raise NotImplementedError
