"""Reusable FastAPI dependencies for store access and request shape checks."""

from __future__ import annotations

from fastapi import Depends, Request

from tasks_api.core.errors import UnsupportedMediaType
from tasks_api.services.tasks import TaskStore

JSON_MEDIA_TYPE = "application/json"


def get_task_store(request: Request) -> TaskStore:
    """Return the store created by the application lifespan."""
    store = getattr(request.app.state, "task_store", None)
    if not isinstance(store, TaskStore):
        msg = "Task store is not initialized; the application lifespan did not run."
        raise RuntimeError(msg)
    return store


def is_json_content_type(content_type: str | None) -> bool:
    """Match `application/json` and `+json` media types, ignoring parameters."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_MEDIA_TYPE or (
        media_type.startswith("application/") and media_type.endswith("+json")
    )


def require_json_body(request: Request) -> None:
    """Reject write requests whose body is not declared as JSON."""
    if not is_json_content_type(request.headers.get("content-type")):
        raise UnsupportedMediaType


STORE_DEP = Depends(get_task_store)
JSON_BODY_DEP = Depends(require_json_body)
