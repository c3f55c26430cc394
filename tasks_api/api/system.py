"""Greeting and database probe endpoints under the versioned API prefix."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from tasks_api.api.deps import STORE_DEP
from tasks_api.core.errors import StoreError
from tasks_api.core.logging import get_logger
from tasks_api.schemas.health import DatabaseHealthResponse, HelloResponse
from tasks_api.services.tasks import TaskStore

router = APIRouter(tags=["health"])
logger = get_logger(__name__)

DATABASE_UNREACHABLE_MESSAGE = "Unable to reach database"


@router.get(
    "/hello",
    response_model=HelloResponse,
    summary="Hello World",
    description="Static greeting used as a first smoke test of the API.",
)
def hello() -> HelloResponse:
    return HelloResponse(message="Hello, World!")


@router.get(
    "/db-health",
    response_model=DatabaseHealthResponse,
    response_model_exclude_none=True,
    summary="Database Health Check",
    description="Round-trip a trivial query against the task database.",
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "model": DatabaseHealthResponse,
            "description": "Database could not be reached.",
            "content": {
                "application/json": {
                    "example": {"database": "down", "error": DATABASE_UNREACHABLE_MESSAGE},
                },
            },
        },
    },
)
async def db_health(response: Response, store: TaskStore = STORE_DEP) -> DatabaseHealthResponse:
    """Report `up` when the store answers; never raises past this handler."""
    try:
        await store.ping()
    except StoreError:
        logger.exception("db.health.down")
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return DatabaseHealthResponse(database="down", error=DATABASE_UNREACHABLE_MESSAGE)
    return DatabaseHealthResponse(database="up")
