"""Application ports (interfaces) used by the application layer."""

from .activity_log_port import ActivityLogPort
from .task_store_port import TaskStorePort

__all__ = ["ActivityLogPort", "TaskStorePort"]
