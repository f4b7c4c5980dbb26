"""Domain records for the task hub."""

from .activity import ActivityEntry, ActivityType
from .catalog import Board, DomainMeta, TaskTemplate, TemplateCatalog
from .errors import CompHubError, MalformedStoreError, PersistenceError, TaskNotFoundError
from .task import Task

__all__ = [
    "ActivityEntry",
    "ActivityType",
    "Board",
    "DomainMeta",
    "TaskTemplate",
    "TemplateCatalog",
    "CompHubError",
    "MalformedStoreError",
    "PersistenceError",
    "TaskNotFoundError",
    "Task",
]
