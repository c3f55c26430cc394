"""Public schema exports shared across API route modules."""

from tasks_api.schemas.errors import ErrorResponse
from tasks_api.schemas.health import (
    DatabaseHealthResponse,
    HealthStatusResponse,
    HelloResponse,
)
from tasks_api.schemas.tasks import TaskCreate, TaskRead, TaskUpdate

__all__ = [
    "DatabaseHealthResponse",
    "ErrorResponse",
    "HealthStatusResponse",
    "HelloResponse",
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
]
