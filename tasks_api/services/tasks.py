"""Task persistence: one parameterized statement per operation.

`TaskStore` owns the async engine handed to it at startup. Every public
method opens a pooled session, runs a single statement under an explicit
timeout, and returns the connection to the pool whether or not the
statement succeeded. Driver errors are translated into the store error
taxonomy so callers never see SQLAlchemy exceptions.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Final

from sqlalchemy import insert, text, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import SQLModel, col, select

from tasks_api.core.errors import (
    InvalidRequest,
    NoFieldsProvided,
    StoreConstraintViolation,
    StoreUnavailable,
)
from tasks_api.core.logging import get_logger
from tasks_api.core.time import utcnow
from tasks_api.models.tasks import Task

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from sqlalchemy.ext.asyncio import AsyncEngine

    from tasks_api.core.enums import TaskPriority, TaskStatus

logger = get_logger(__name__)


class _UnsetType:
    """Marker for a partial-update field the client did not send."""

    _instance: _UnsetType | None = None

    def __new__(cls) -> _UnsetType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _UnsetType()


@dataclass(frozen=True, slots=True)
class NewTask:
    """Validated fields for a task insert."""

    name: str
    note: str
    priority: TaskPriority
    status: TaskStatus


@dataclass(frozen=True, slots=True)
class TaskPatch:
    """Partial task update; fields left as `UNSET` are not touched."""

    name: str | _UnsetType = UNSET
    note: str | _UnsetType = UNSET
    priority: TaskPriority | _UnsetType = UNSET
    status: TaskStatus | _UnsetType = UNSET

    def changes(self) -> dict[str, str]:
        """Column values for the fields that are present."""
        values: dict[str, str] = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if value is UNSET:
                continue
            values[field.name] = getattr(value, "value", value)
        return values


class TaskStore:
    """CRUD access to the `tasks` table through an injected engine."""

    def __init__(self, engine: AsyncEngine, *, query_timeout: float | None = None) -> None:
        self.engine = engine
        self.query_timeout = query_timeout
        self._session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        try:
            async with asyncio.timeout(self.query_timeout), self._session_maker() as session:
                yield session
                await session.commit()
        except IntegrityError as exc:
            logger.warning(
                "task.store.constraint_violation",
                extra={"operation": operation, "error": str(exc.orig)},
            )
            raise StoreConstraintViolation(operation) from exc
        except TimeoutError as exc:
            logger.warning(
                "task.store.timeout",
                extra={"operation": operation, "timeout_seconds": self.query_timeout},
            )
            raise StoreUnavailable(operation) from exc
        except (SQLAlchemyError, OSError) as exc:
            logger.warning(
                "task.store.unavailable",
                extra={"operation": operation, "error_type": type(exc).__name__},
            )
            raise StoreUnavailable(operation) from exc

    async def ensure_schema(self) -> None:
        """Create the tasks table when it does not exist yet."""
        try:
            async with asyncio.timeout(self.query_timeout), self.engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all, tables=[Task.__table__])
        except (SQLAlchemyError, OSError, TimeoutError) as exc:
            raise StoreUnavailable("prepare task schema") from exc
        logger.info("task.store.schema_ready")

    async def ping(self) -> None:
        """Round-trip a trivial query; raises `StoreUnavailable` on failure."""
        async with self._session("reach database") as session:
            await session.execute(text("SELECT 1"))

    async def list_tasks(self, *, limit: int | None = None) -> list[Task]:
        """Return tasks newest first, capped at `limit` rows when given."""
        if limit is not None and limit < 1:
            raise InvalidRequest("limit must be a positive integer")
        statement = select(Task).order_by(col(Task.created_at).desc(), col(Task.id).desc())
        if limit is not None:
            statement = statement.limit(limit)
        async with self._session("fetch tasks") as session:
            return list((await session.scalars(statement)).all())

    async def create_task(self, new_task: NewTask) -> Task:
        """Insert one task and return it with its generated id and timestamp."""
        statement = (
            insert(Task)
            .values(
                name=new_task.name,
                note=new_task.note,
                priority=new_task.priority.value,
                status=new_task.status.value,
                created_at=utcnow(),
            )
            .returning(Task)
        )
        async with self._session("create task") as session:
            task = (await session.scalars(statement)).one()
        logger.info("task.store.created", extra={"task_id": task.id})
        return task

    async def update_task(self, task_id: int, patch: TaskPatch) -> Task | None:
        """Apply `patch` to one row; returns `None` when `task_id` does not exist."""
        changes = patch.changes()
        if not changes:
            raise NoFieldsProvided
        statement = (
            update(Task)
            .where(col(Task.id) == task_id)
            .values(**changes)
            .returning(Task)
        )
        async with self._session("update task") as session:
            task = (await session.scalars(statement)).one_or_none()
        if task is not None:
            logger.info(
                "task.store.updated",
                extra={"task_id": task_id, "fields": sorted(changes)},
            )
        return task

    async def close(self) -> None:
        await self.engine.dispose()
