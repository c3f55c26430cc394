"""Async engine construction for the task database."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from tasks_api.core.logging import get_logger

if TYPE_CHECKING:
    from tasks_api.core.config import Settings

logger = get_logger(__name__)


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Build the bounded connection pool described by `settings`."""
    url = make_url(settings.sqlalchemy_url)
    engine_kwargs: dict[str, Any] = {"pool_pre_ping": True}
    # SQLite (tests, local runs) uses a static/null pool without sizing knobs.
    if url.get_backend_name() != "sqlite":
        engine_kwargs["pool_size"] = settings.db_pool_size
        engine_kwargs["pool_timeout"] = settings.db_pool_timeout_seconds
    logger.info(
        "db.engine.created",
        extra={
            "backend": url.get_backend_name(),
            "host": url.host,
            "database": url.database,
            "pool_size": engine_kwargs.get("pool_size"),
        },
    )
    return create_async_engine(url, **engine_kwargs)
