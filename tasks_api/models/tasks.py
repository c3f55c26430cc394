"""Task table model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, func
from sqlmodel import Field, SQLModel

from tasks_api.core.time import utcnow

RUNTIME_ANNOTATION_TYPES = (datetime,)


class Task(SQLModel, table=True):
    """A single task row; priority/status hold canonical enum strings."""

    __tablename__ = "tasks"  # pyright: ignore[reportAssignmentType]

    id: int | None = Field(default=None, primary_key=True)
    name: str
    note: str
    priority: str
    status: str
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=False),
        index=True,
        sa_column_kwargs={"server_default": func.now()},
    )
