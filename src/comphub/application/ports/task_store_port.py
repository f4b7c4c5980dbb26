"""TaskStorePort - task collection read/write interface."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Protocol, Sequence, Tuple, runtime_checkable

from comphub.domain.task import Task


@runtime_checkable
class TaskStorePort(Protocol):
    """Abstract interface for the task collection."""

    def load(self) -> Optional[List[Task]]: ...

    def get(self, task_id: int) -> Optional[Task]: ...

    def create(self, fields: Mapping[str, Any]) -> Task: ...

    def update(self, task_id: int, changes: Mapping[str, Any]) -> Tuple[Task, Task]: ...

    def delete(self, task_id: int) -> None: ...

    def replace_all(self, tasks: Sequence[Task]) -> List[Task]: ...
