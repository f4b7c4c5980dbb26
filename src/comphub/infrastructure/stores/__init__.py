"""JSON-file backed stores."""

from .activity_store import ActivityStore
from .json_document import JsonDocument
from .task_store import TaskStore

__all__ = ["ActivityStore", "JsonDocument", "TaskStore"]
