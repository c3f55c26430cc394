"""Schemas for task create/update payloads and task responses."""

from __future__ import annotations

from datetime import datetime
from typing import Self

from pydantic import Field, field_validator, model_validator
from sqlmodel import SQLModel

from tasks_api.core.enums import TaskPriority, TaskStatus

RUNTIME_ANNOTATION_TYPES = (datetime,)
UPDATABLE_FIELDS = ("name", "note", "priority", "status")


def _reject_boolean_code(value: object) -> object:
    # JSON true/false would otherwise coerce to 1/0.
    if isinstance(value, bool):
        raise ValueError("must be an integer code, not a boolean")
    return value


class TaskCreate(SQLModel):
    """Payload for creating a task; priority/status are numeric codes (1-3)."""

    name: str = Field(min_length=1, examples=["Write release notes"])
    note: str = Field(min_length=1, examples=["Cover the API changes"])
    priority: int = Field(description="1 = LOW, 2 = MEDIUM, 3 = HIGH.", examples=[3])
    status: int = Field(description="1 = TODO, 2 = IN_PROGRESS, 3 = DONE.", examples=[1])

    @field_validator("priority", "status", mode="before")
    @classmethod
    def _codes_are_not_booleans(cls, value: object) -> object:
        return _reject_boolean_code(value)


class TaskUpdate(SQLModel):
    """Partial update payload.

    Only fields the client actually sent count as updates; presence is read
    from ``model_fields_set`` rather than from ``None`` checks. Sending an
    explicit ``null`` is rejected.
    """

    name: str | None = Field(default=None, min_length=1)
    note: str | None = Field(default=None, min_length=1)
    priority: int | None = Field(default=None, description="1 = LOW, 2 = MEDIUM, 3 = HIGH.")
    status: int | None = Field(default=None, description="1 = TODO, 2 = IN_PROGRESS, 3 = DONE.")

    @field_validator("priority", "status", mode="before")
    @classmethod
    def _codes_are_not_booleans(cls, value: object) -> object:
        return _reject_boolean_code(value)

    @model_validator(mode="after")
    def _reject_explicit_nulls(self) -> Self:
        nulls = sorted(
            field for field in self.model_fields_set if getattr(self, field) is None
        )
        if nulls:
            raise ValueError(f"{', '.join(nulls)} cannot be null")
        return self


class TaskRead(SQLModel):
    """Task payload returned by read/write endpoints."""

    id: int
    name: str
    note: str
    priority: TaskPriority
    status: TaskStatus
    created_at: datetime
