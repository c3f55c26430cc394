"""Task list, create, and partial-update endpoints."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Path, Query, status

from tasks_api.api.deps import JSON_BODY_DEP, STORE_DEP
from tasks_api.core.enums import convert_priority, convert_status
from tasks_api.core.errors import NoFieldsProvided, TaskNotFound
from tasks_api.schemas.errors import ErrorResponse
from tasks_api.schemas.tasks import UPDATABLE_FIELDS, TaskCreate, TaskRead, TaskUpdate
from tasks_api.services.tasks import NewTask, TaskPatch, TaskStore

router = APIRouter(prefix="/tasks", tags=["tasks"])

# Upper bound of the INTEGER primary key.
MAX_TASK_ID = 2**31 - 1

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}
_WRITE_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    **_ERROR_RESPONSES,
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: {"model": ErrorResponse},
}


def build_new_task(payload: TaskCreate) -> NewTask:
    """Convert a create payload's numeric codes into canonical enums."""
    return NewTask(
        name=payload.name,
        note=payload.note,
        priority=convert_priority(payload.priority),
        status=convert_status(payload.status),
    )


def build_task_patch(payload: TaskUpdate) -> TaskPatch:
    """Build a patch from only the fields the client sent."""
    provided = payload.model_fields_set.intersection(UPDATABLE_FIELDS)
    if not provided:
        raise NoFieldsProvided
    changes: dict[str, Any] = {}
    if "name" in provided:
        changes["name"] = payload.name
    if "note" in provided:
        changes["note"] = payload.note
    if "priority" in provided:
        changes["priority"] = convert_priority(payload.priority)
    if "status" in provided:
        changes["status"] = convert_status(payload.status)
    return TaskPatch(**changes)


@router.get("", response_model=list[TaskRead], responses=_ERROR_RESPONSES)
async def list_tasks(
    store: TaskStore = STORE_DEP,
    limit: int | None = Query(
        default=None,
        ge=1,
        description="Maximum number of tasks to return, newest first.",
    ),
) -> list[TaskRead]:
    """List tasks, most recently created first."""
    tasks = await store.list_tasks(limit=limit)
    return [TaskRead.model_validate(task, from_attributes=True) for task in tasks]


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[JSON_BODY_DEP],
    responses=_WRITE_ERROR_RESPONSES,
)
async def create_task(payload: TaskCreate, store: TaskStore = STORE_DEP) -> TaskRead:
    """Create a task from numeric priority/status codes."""
    task = await store.create_task(build_new_task(payload))
    return TaskRead.model_validate(task, from_attributes=True)


@router.put(
    "/{task_id}",
    response_model=TaskRead,
    dependencies=[JSON_BODY_DEP],
    responses={
        **_WRITE_ERROR_RESPONSES,
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)
async def update_task(
    task_id: Annotated[int, Path(ge=1, le=MAX_TASK_ID)],
    payload: TaskUpdate,
    store: TaskStore = STORE_DEP,
) -> TaskRead:
    """Update any subset of name, note, priority, and status."""
    task = await store.update_task(task_id, build_task_patch(payload))
    if task is None:
        raise TaskNotFound(task_id)
    return TaskRead.model_validate(task, from_attributes=True)
