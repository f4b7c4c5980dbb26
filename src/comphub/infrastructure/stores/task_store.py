from __future__ import annotations

import threading
from dataclasses import replace
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from loguru import logger

from comphub.domain.errors import MalformedStoreError, TaskNotFoundError
from comphub.domain.task import Task, build_task, next_task_id, normalize_changes
from comphub.infrastructure.stores.json_document import JsonDocument
from comphub.settings import get_settings
from comphub.utils.clock import isoformat_utc, next_after, today_utc, utc_now
from comphub.utils.logging_config import LogFiles, Logger

TASKS_FILE = "tasks.json"


class TaskStore:
    """Task collection persisted as one JSON array.

    The collection is read lazily on first access and cached for the life of
    the process. Every mutation rewrites the whole document; the cache is
    swapped only after the write succeeds.
    """

    def __init__(self, data_dir: Optional[Union[Path, str]] = None, *, filename: str = TASKS_FILE):
        self.data_dir = Path(data_dir) if data_dir is not None else get_settings().data_dir
        self._document = JsonDocument(self.data_dir / filename)
        self._lock = threading.RLock()
        self._tasks: Optional[List[Task]] = None
        self._loaded = False

    @property
    def path(self) -> Path:
        return self._document.path

    # ---- reads ----

    def load(self) -> Optional[List[Task]]:
        """Return all tasks, or None if no collection has ever been persisted."""
        with self._lock:
            if not self._loaded:
                self._tasks = self._read()
                self._loaded = True
            return list(self._tasks) if self._tasks is not None else None

    def get(self, task_id: int) -> Optional[Task]:
        for task in self.load() or []:
            if task.id == int(task_id):
                return task
        return None

    def count(self) -> int:
        return len(self.load() or [])

    # ---- writes ----

    def create(self, fields: Mapping[str, Any]) -> Task:
        with self._lock:
            tasks = self.load() or []
            now = utc_now()
            task = build_task(
                next_task_id(tasks),
                fields,
                timestamp=isoformat_utc(now),
                default_month=now.month,
                default_due_date=today_utc(),
            )
            self._commit(tasks + [task])
            Logger.info(f"Created task id={task.id} title={task.title!r}", file=LogFiles.STORE)
            return task

    def update(self, task_id: int, changes: Mapping[str, Any]) -> Tuple[Task, Task]:
        """Merge ``changes`` over an existing task; return ``(before, after)``.

        ``id`` and ``createdAt`` are never taken from ``changes``; ``updatedAt``
        always moves forward.
        """
        with self._lock:
            tasks = self.load() or []
            idx = self._index_of(tasks, task_id)
            before = tasks[idx]
            after = replace(
                before,
                **normalize_changes(changes),
                updated_at=isoformat_utc(next_after(before.updated_at)),
            )
            updated = list(tasks)
            updated[idx] = after
            self._commit(updated)
            Logger.info(f"Updated task id={after.id}", file=LogFiles.STORE)
            return before, after

    def delete(self, task_id: int) -> None:
        with self._lock:
            tasks = self.load() or []
            idx = self._index_of(tasks, task_id)
            self._commit(tasks[:idx] + tasks[idx + 1:])
            Logger.info(f"Deleted task id={task_id}", file=LogFiles.STORE)

    def replace_all(self, tasks: Sequence[Task]) -> List[Task]:
        with self._lock:
            self._commit(list(tasks))
            Logger.info(f"Replaced collection with {len(tasks)} tasks", file=LogFiles.STORE)
            return list(tasks)

    # ---- helpers ----

    @staticmethod
    def _index_of(tasks: Sequence[Task], task_id: int) -> int:
        for idx, task in enumerate(tasks):
            if task.id == int(task_id):
                return idx
        raise TaskNotFoundError(int(task_id))

    def _commit(self, tasks: List[Task]) -> None:
        self._document.write([t.to_dict() for t in tasks])
        self._tasks = tasks
        self._loaded = True

    def _read(self) -> Optional[List[Task]]:
        try:
            raw = self._document.read()
            if raw is None:
                return None
            if not isinstance(raw, list):
                raise MalformedStoreError(f"{self.path.name} is not a JSON array", path=str(self.path))
            try:
                return [Task.from_dict(item) for item in raw]
            except (TypeError, ValueError, AttributeError) as exc:
                raise MalformedStoreError(
                    f"{self.path.name} holds an invalid task record: {exc}", path=str(self.path)
                ) from exc
        except MalformedStoreError as exc:
            logger.warning(f"Ignoring unreadable task store, treating as absent: {exc}")
            Logger.warning(f"Malformed task store: {exc}", file=LogFiles.ERROR)
            return None
