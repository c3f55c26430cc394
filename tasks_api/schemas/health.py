"""Health, hello, and database probe response schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from sqlmodel import SQLModel


class HealthStatusResponse(SQLModel):
    """Process liveness payload."""

    status: Literal["ok"] = Field(
        default="ok",
        description="Always `ok` while the process is serving requests.",
        examples=["ok"],
    )
    uptime: float = Field(
        description="Seconds since the process started.",
        examples=[42.5],
    )


class HelloResponse(SQLModel):
    message: str = Field(examples=["Hello, World!"])


class DatabaseHealthResponse(SQLModel):
    """Database round-trip probe payload."""

    database: Literal["up", "down"] = Field(
        description="`up` when a trivial query succeeded, `down` otherwise.",
        examples=["up"],
    )
    error: str | None = Field(
        default=None,
        description="Short failure reason, present only when the database is down.",
        examples=["Unable to reach database"],
    )
