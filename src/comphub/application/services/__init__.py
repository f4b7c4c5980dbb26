"""Application services."""

from .catalog_service import CatalogService
from .change_detector import TRACKED_FIELDS, detect_changes
from .seeding import seed_tasks
from .task_service import TaskService

__all__ = [
    "CatalogService",
    "TRACKED_FIELDS",
    "detect_changes",
    "seed_tasks",
    "TaskService",
]
