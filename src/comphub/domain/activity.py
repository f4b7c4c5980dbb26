"""Activity entries: field changes and comments attached to a task."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

DEFAULT_ACTOR = "User"


class ActivityType(str, Enum):
    FIELD_CHANGE = "field_change"
    COMMENT = "comment"


@dataclass(frozen=True)
class ActivityEntry:
    """Immutable audit event.

    ``id`` and ``timestamp`` are empty until the entry is appended to the log.
    """

    type: ActivityType
    actor: str = DEFAULT_ACTOR
    field_name: Optional[str] = None
    old_value: Any = None
    new_value: Any = None
    author: Optional[str] = None
    text: Optional[str] = None
    id: str = ""
    timestamp: str = ""

    @classmethod
    def field_change(
        cls, field_name: str, old_value: Any, new_value: Any, actor: Optional[str] = None
    ) -> "ActivityEntry":
        return cls(
            type=ActivityType.FIELD_CHANGE,
            actor=actor or DEFAULT_ACTOR,
            field_name=field_name,
            old_value=old_value,
            new_value=new_value,
        )

    @classmethod
    def comment(cls, author: str, text: str) -> "ActivityEntry":
        return cls(type=ActivityType.COMMENT, actor=author, author=author, text=text)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id, "type": self.type.value}
        if self.type is ActivityType.FIELD_CHANGE:
            data.update(
                field=self.field_name,
                oldValue=self.old_value,
                newValue=self.new_value,
            )
        else:
            data.update(author=self.author, text=self.text)
        data["actor"] = self.actor
        data["timestamp"] = self.timestamp
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ActivityEntry":
        kind = ActivityType(data.get("type") or ActivityType.FIELD_CHANGE.value)
        return cls(
            type=kind,
            actor=str(data.get("actor") or DEFAULT_ACTOR),
            field_name=data.get("field"),
            old_value=data.get("oldValue"),
            new_value=data.get("newValue"),
            author=data.get("author"),
            text=data.get("text"),
            id=str(data.get("id") or ""),
            timestamp=str(data.get("timestamp") or ""),
        )
