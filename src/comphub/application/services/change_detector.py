"""Derive field_change activity entries from a partial update."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple

from comphub.domain.activity import ActivityEntry
from comphub.domain.task import Task, normalize_changes, wire_name

# Order here is the order entries are emitted in.
TRACKED_FIELDS: Tuple[str, ...] = ("status", "owner", "priority", "due_date", "title")


def detect_changes(
    before: Task, changes: Mapping[str, Any], actor: Optional[str] = None
) -> List[ActivityEntry]:
    requested = normalize_changes(changes)
    entries: List[ActivityEntry] = []
    for name in TRACKED_FIELDS:
        if name not in requested:
            continue
        old_value = getattr(before, name)
        new_value = requested[name]
        if old_value != new_value:
            entries.append(
                ActivityEntry.field_change(wire_name(name), old_value, new_value, actor=actor)
            )
    return entries
