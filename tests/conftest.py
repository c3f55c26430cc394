# ruff: noqa: INP001
"""Pytest configuration shared across tests."""

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path

import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Import-time settings must not depend on the developer's shell or a local .env.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["CORS_ORIGINS"] = "*"
os.environ["LOG_FORMAT"] = "text"
os.environ["LOG_LEVEL"] = "INFO"

from tasks_api.services.tasks import TaskStore  # noqa: E402

MEMORY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def store() -> AsyncIterator[TaskStore]:
    """A task store on a fresh in-memory SQLite database with the schema applied."""
    task_store = TaskStore(create_async_engine(MEMORY_DATABASE_URL), query_timeout=5.0)
    await task_store.ensure_schema()
    try:
        yield task_store
    finally:
        await task_store.close()
