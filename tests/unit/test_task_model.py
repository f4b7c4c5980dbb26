from __future__ import annotations

import pytest

from comphub.domain.task import Task, build_task, next_task_id, normalize_changes


def test_normalize_accepts_both_key_styles():
    out = normalize_changes({"dueDate": "2026-01-01", "board_id": "merit", "status": "done"})
    assert out == {"due_date": "2026-01-01", "board_id": "merit", "status": "done"}


def test_normalize_drops_identity_unknown_and_none():
    out = normalize_changes(
        {"id": 3, "createdAt": "x", "updated_at": "y", "color": "red", "title": None, "notes": ""}
    )
    assert out == {"notes": ""}


def test_build_task_fills_empty_values_with_defaults():
    task = build_task(
        7,
        {"title": "", "owner": None, "month": 0, "priority": "low"},
        timestamp="2026-05-01T00:00:00.000Z",
        default_month=5,
        default_due_date="2026-05-01",
    )

    assert task.id == 7
    assert task.title == "New Task"
    assert task.owner == "Analyst"
    assert task.month == 5
    assert task.priority == "low"
    assert task.due_date == "2026-05-01"
    assert task.created_at == task.updated_at == "2026-05-01T00:00:00.000Z"


def test_round_trip_uses_camel_case_keys():
    task = Task(id=2, title="t", due_date="2026-02-02", board_name="Merit Cycle")

    data = task.to_dict()

    assert data["dueDate"] == "2026-02-02"
    assert data["boardName"] == "Merit Cycle"
    assert "due_date" not in data
    assert Task.from_dict(data) == task


def test_from_dict_ignores_unknown_keys_and_requires_id():
    assert Task.from_dict({"id": "4", "month": "3", "extra": 1}).id == 4
    with pytest.raises(ValueError):
        Task.from_dict({"title": "no id"})


def test_next_task_id():
    assert next_task_id(None) == 1
    assert next_task_id([]) == 1
    assert next_task_id([Task(id=3), Task(id=8), Task(id=5)]) == 9
