"""Task record and the field-defaulting rules applied on create."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional, Sequence

DEFAULT_TITLE = "New Task"
DEFAULT_DURATION = "1 week"
DEFAULT_OWNER = "Analyst"
DEFAULT_PRIORITY = "medium"
DEFAULT_STATUS = "not_started"

# attribute name -> JSON (camelCase) name
_WIRE_NAMES: Dict[str, str] = {
    "due_date": "dueDate",
    "board_id": "boardId",
    "board_name": "boardName",
    "domain_id": "domainId",
    "domain_name": "domainName",
    "created_at": "createdAt",
    "updated_at": "updatedAt",
}
_ATTR_NAMES: Dict[str, str] = {v: k for k, v in _WIRE_NAMES.items()}

# Fields a caller may never set through an update.
IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at"})


def wire_name(attr: str) -> str:
    return _WIRE_NAMES.get(attr, attr)


def attr_name(name: str) -> str:
    return _ATTR_NAMES.get(name, name)


@dataclass(frozen=True)
class Task:
    """A single work item on a board."""

    id: int
    title: str = DEFAULT_TITLE
    month: int = 1
    duration: str = DEFAULT_DURATION
    owner: str = DEFAULT_OWNER
    priority: str = DEFAULT_PRIORITY
    status: str = DEFAULT_STATUS
    due_date: str = ""
    board_id: str = ""
    board_name: str = ""
    domain_id: str = ""
    domain_name: str = ""
    notes: str = ""
    created_at: str = ""
    updated_at: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {wire_name(k): v for k, v in asdict(self).items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Task":
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            name = attr_name(key)
            if name in known:
                values[name] = value
        if "id" not in values:
            raise ValueError("task record has no id")
        values["id"] = int(values["id"])
        if "month" in values:
            values["month"] = int(values["month"])
        return cls(**values)


MUTABLE_FIELDS = frozenset(f.name for f in fields(Task)) - IMMUTABLE_FIELDS


def normalize_changes(changes: Mapping[str, Any]) -> Dict[str, Any]:
    """Keep only settable task fields from a partial update.

    Keys may be attribute names (``due_date``) or JSON names (``dueDate``).
    ``None`` values are dropped, so a field cannot be cleared to null.
    """
    out: Dict[str, Any] = {}
    for key, value in changes.items():
        name = attr_name(key)
        if name in MUTABLE_FIELDS and value is not None:
            out[name] = value
    return out


def build_task(
    task_id: int,
    supplied: Mapping[str, Any],
    *,
    timestamp: str,
    default_month: int,
    default_due_date: str,
) -> Task:
    """Create a new record, filling any omitted or empty field with its default."""
    values = normalize_changes(supplied)

    def pick(name: str, default: Any) -> Any:
        value = values.get(name)
        return value if value else default

    return Task(
        id=task_id,
        title=pick("title", DEFAULT_TITLE),
        month=int(pick("month", default_month)),
        duration=pick("duration", DEFAULT_DURATION),
        owner=pick("owner", DEFAULT_OWNER),
        priority=pick("priority", DEFAULT_PRIORITY),
        status=pick("status", DEFAULT_STATUS),
        due_date=pick("due_date", default_due_date),
        board_id=pick("board_id", ""),
        board_name=pick("board_name", ""),
        domain_id=pick("domain_id", ""),
        domain_name=pick("domain_name", ""),
        notes=pick("notes", ""),
        created_at=timestamp,
        updated_at=timestamp,
    )


def next_task_id(existing: Optional[Sequence[Task]]) -> int:
    if not existing:
        return 1
    return max(t.id for t in existing) + 1
