from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from comphub.application.services.task_service import TaskService
from comphub.domain.activity import DEFAULT_ACTOR
from comphub.domain.errors import PersistenceError, TaskNotFoundError

from . import tasks as tasks_route

router = APIRouter()


class CommentRequest(BaseModel):
    author: str = Field(default=DEFAULT_ACTOR, min_length=1, max_length=128)
    text: str = Field(..., min_length=1)


def _service() -> TaskService:
    # Shared with the task routes so both see the same stores.
    return tasks_route._task_service


@router.get("/tasks/{task_id}/activity")
def list_activity(task_id: int):
    try:
        entries = _service().list_activity(task_id)
    except PersistenceError as exc:
        raise HTTPException(status_code=500, detail=f"storage error: {exc}") from exc
    return [e.to_dict() for e in entries]


@router.post("/tasks/{task_id}/comments", status_code=201)
def add_comment(task_id: int, req: CommentRequest):
    try:
        entry = _service().add_comment(task_id, req.author, req.text)
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Task not found") from exc
    except PersistenceError as exc:
        raise HTTPException(status_code=500, detail=f"storage error: {exc}") from exc
    return entry.to_dict()
