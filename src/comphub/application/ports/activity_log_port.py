"""ActivityLogPort - append-only per-task activity interface."""

from __future__ import annotations

from typing import List, Protocol, Sequence, runtime_checkable

from comphub.domain.activity import ActivityEntry


@runtime_checkable
class ActivityLogPort(Protocol):
    """Abstract interface for the activity log."""

    def append(self, task_id: int, entry: ActivityEntry) -> List[ActivityEntry]: ...

    def append_many(self, task_id: int, entries: Sequence[ActivityEntry]) -> List[ActivityEntry]: ...

    def list_for_task(self, task_id: int) -> List[ActivityEntry]: ...

    def clear(self) -> None: ...
