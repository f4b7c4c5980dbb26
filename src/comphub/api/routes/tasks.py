from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Header, HTTPException, Query, Response
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from comphub.application.services.task_service import TaskService
from comphub.domain.errors import PersistenceError, TaskNotFoundError

router = APIRouter()

_task_service = TaskService.from_settings()


class TaskFieldsRequest(BaseModel):
    """Task fields accepted on create and update; keys are camelCase on the wire.

    Unknown keys, including ``id`` and ``createdAt``, are ignored.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    title: Optional[str] = None
    month: Optional[int] = Field(default=None, ge=1, le=12)
    duration: Optional[str] = None
    owner: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None
    due_date: Optional[str] = None
    board_id: Optional[str] = None
    board_name: Optional[str] = None
    domain_id: Optional[str] = None
    domain_name: Optional[str] = None
    notes: Optional[str] = None


class SeedResponse(BaseModel):
    message: str
    count: int
    boards: int


class BoardSummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    domain: str
    cadence: str = ""
    desc: str = ""
    task_count: int = 0


class ConfigResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    domains: Dict[str, Dict[str, Any]]
    boards: List[BoardSummary]
    total_templates: int


def _persistence_failed(exc: PersistenceError) -> HTTPException:
    return HTTPException(status_code=500, detail=f"storage error: {exc}")


@router.get("/tasks")
def list_tasks():
    try:
        tasks = _task_service.list_tasks()
    except PersistenceError as exc:
        raise _persistence_failed(exc) from exc
    return [t.to_dict() for t in tasks]


@router.post("/tasks", status_code=201)
def create_task(req: TaskFieldsRequest):
    try:
        task = _task_service.create_task(req.model_dump(exclude_none=True))
    except PersistenceError as exc:
        raise _persistence_failed(exc) from exc
    return task.to_dict()


@router.put("/tasks/{task_id}")
def update_task(
    task_id: int,
    req: TaskFieldsRequest,
    actor: Optional[str] = Query(default=None),
    x_actor: Optional[str] = Header(default=None),
):
    try:
        task = _task_service.update_task(
            task_id, req.model_dump(exclude_unset=True), actor=actor or x_actor
        )
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Task not found") from exc
    except PersistenceError as exc:
        raise _persistence_failed(exc) from exc
    return task.to_dict()


@router.delete("/tasks/{task_id}", status_code=204)
def delete_task(task_id: int):
    try:
        _task_service.delete_task(task_id)
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Task not found") from exc
    except PersistenceError as exc:
        raise _persistence_failed(exc) from exc
    return Response(status_code=204)


@router.post("/seed", response_model=SeedResponse)
def reset_tasks():
    try:
        result = _task_service.reset()
    except PersistenceError as exc:
        raise _persistence_failed(exc) from exc
    return SeedResponse(**result)


@router.get("/config", response_model=ConfigResponse, response_model_by_alias=True)
def get_config():
    return ConfigResponse.model_validate(_task_service.get_config())
