"""FastAPI application entrypoint and router wiring for the tasks API."""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import APIRouter, FastAPI, status

from tasks_api.api.system import router as system_router
from tasks_api.api.tasks import router as tasks_router
from tasks_api.core.config import settings
from tasks_api.core.cors import install_cors, parse_cors_origins
from tasks_api.core.error_handling import install_error_handling
from tasks_api.core.logging import configure_logging, get_logger
from tasks_api.db.session import create_engine_from_settings
from tasks_api.schemas.health import HealthStatusResponse
from tasks_api.services.tasks import TaskStore

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

configure_logging()
logger = get_logger(__name__)

PROCESS_STARTED_AT = time.monotonic()
OPENAPI_TAGS = [
    {
        "name": "health",
        "description": "Process liveness and database connectivity probes.",
    },
    {
        "name": "tasks",
        "description": "Task listing, creation, and partial updates.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the task store, ensure its schema, and dispose it on shutdown."""
    logger.info(
        "app.lifecycle.starting",
        extra={"environment": settings.environment},
    )
    store = TaskStore(
        create_engine_from_settings(settings),
        query_timeout=settings.db_query_timeout_seconds,
    )
    try:
        # Schema failures are fatal: the exception aborts startup.
        await store.ensure_schema()
    except Exception:
        logger.critical("app.lifecycle.schema_failed", exc_info=True)
        await store.close()
        raise
    app.state.task_store = store
    logger.info("app.lifecycle.started")
    try:
        yield
    finally:
        del app.state.task_store
        await store.close()
        logger.info("app.lifecycle.stopped")


app = FastAPI(
    title="Tasks API",
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=OPENAPI_TAGS,
)

install_cors(app, parse_cors_origins(settings.cors_origins))
install_error_handling(app)


@app.get(
    "/health",
    tags=["health"],
    response_model=HealthStatusResponse,
    summary="Health Check",
    description="Lightweight liveness probe endpoint; never touches the database.",
    responses={
        status.HTTP_200_OK: {
            "description": "Service is alive.",
            "content": {"application/json": {"example": {"status": "ok", "uptime": 42.5}}},
        }
    },
)
def health() -> HealthStatusResponse:
    """Lightweight liveness probe endpoint."""
    return HealthStatusResponse(uptime=time.monotonic() - PROCESS_STARTED_AT)


api_v1 = APIRouter(prefix="/api/v1")
api_v1.include_router(system_router)
api_v1.include_router(tasks_router)
app.include_router(api_v1)

logger.debug("app.routes.registered", extra={"count": len(app.routes)})


def run() -> None:
    """Serve the application with uvicorn using configured host/port."""
    import uvicorn

    uvicorn.run(
        "tasks_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
