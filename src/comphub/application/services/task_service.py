"""Task operations exposed to the API and CLI.

Composes the task store, the activity log, change detection and seeding.
Compound read-modify-write sequences run under one lock so two requests in
the same process cannot interleave and lose an update.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Mapping, Optional, Tuple

from comphub.application.ports import ActivityLogPort, TaskStorePort
from comphub.application.services.catalog_service import CatalogService
from comphub.application.services.change_detector import detect_changes
from comphub.application.services.seeding import seed_tasks
from comphub.domain.activity import ActivityEntry
from comphub.domain.catalog import TemplateCatalog
from comphub.domain.errors import PersistenceError, TaskNotFoundError
from comphub.domain.task import Task, normalize_changes
from comphub.infrastructure.stores.activity_store import ActivityStore
from comphub.infrastructure.stores.task_store import TaskStore
from comphub.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(
        self,
        task_store: TaskStorePort,
        activity_log: ActivityLogPort,
        catalog: TemplateCatalog,
    ):
        self._tasks = task_store
        self._activity = activity_log
        self._catalog = catalog
        self._lock = threading.RLock()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "TaskService":
        settings = settings or get_settings()
        return cls(
            TaskStore(settings.data_dir),
            ActivityStore(settings.data_dir),
            CatalogService(settings.catalog_path).load_catalog(),
        )

    @property
    def catalog(self) -> TemplateCatalog:
        return self._catalog

    # ---- tasks ----

    def ensure_seeded(self) -> Tuple[List[Task], bool]:
        """Return the collection, seeding it first if it was never persisted."""
        with self._lock:
            tasks = self._tasks.load()
            if tasks is not None:
                return tasks, False
            logger.info("No task data found. Seeding with templates...")
            tasks = self._seed()
            return tasks, True

    def list_tasks(self) -> List[Task]:
        tasks, _ = self.ensure_seeded()
        return tasks

    def create_task(self, fields: Mapping[str, Any]) -> Task:
        with self._lock:
            return self._tasks.create(fields)

    def update_task(
        self, task_id: int, changes: Mapping[str, Any], *, actor: Optional[str] = None
    ) -> Task:
        """Merge ``changes`` and record tracked-field changes.

        If the activity write fails the task collection is restored, so a
        change is never persisted without its activity entries.
        """
        requested = normalize_changes(changes)
        with self._lock:
            previous = self._tasks.load()
            before, after = self._tasks.update(task_id, requested)
            entries = detect_changes(before, requested, actor=actor)
            if entries:
                try:
                    self._activity.append_many(task_id, entries)
                except PersistenceError:
                    logger.error(f"Activity write failed; rolling back update of task {task_id}")
                    self._tasks.replace_all(previous or [])
                    raise
            return after

    def delete_task(self, task_id: int) -> None:
        with self._lock:
            self._tasks.delete(task_id)

    def reset(self) -> Dict[str, Any]:
        with self._lock:
            tasks = self._seed()
        boards = len(self._catalog.boards)
        return {
            "message": f"Database reset. Seeded {len(tasks)} tasks across {boards} boards.",
            "count": len(tasks),
            "boards": boards,
        }

    def get_config(self) -> Dict[str, Any]:
        return self._catalog.summary()

    # ---- activity ----

    def list_activity(self, task_id: int) -> List[ActivityEntry]:
        return self._activity.list_for_task(task_id)

    def add_comment(self, task_id: int, author: str, text: str) -> ActivityEntry:
        with self._lock:
            if self._tasks.get(task_id) is None:
                raise TaskNotFoundError(int(task_id))
            entries = self._activity.append(task_id, ActivityEntry.comment(author, text))
            return entries[-1]

    def _seed(self) -> List[Task]:
        # Seeded ids restart at 1; old activity is gone before they exist.
        self._activity.clear()
        tasks = self._tasks.replace_all(seed_tasks(self._catalog))
        logger.info(f"Seeded {len(tasks)} tasks across {len(self._catalog.boards)} boards.")
        return tasks
