"""Error taxonomy shared by stores, services and routes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class CompHubError(Exception):
    """Base error carrying a stable code for API responses."""

    message: str
    code: str = "comphub_error"
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class TaskNotFoundError(CompHubError):
    def __init__(self, task_id: int):
        super().__init__(
            message="Task not found",
            code="task_not_found",
            details={"task_id": task_id},
        )
        self.task_id = task_id


class PersistenceError(CompHubError):
    """A durable read or write of a store document failed."""

    def __init__(self, message: str, *, path: str = ""):
        super().__init__(message=message, code="persistence_failure", details={"path": path})
        self.path = path


class MalformedStoreError(CompHubError):
    """A store document exists but cannot be parsed."""

    def __init__(self, message: str, *, path: str = ""):
        super().__init__(message=message, code="malformed_store", details={"path": path})
        self.path = path
