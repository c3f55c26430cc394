"""Error payload schema shared by all API error responses."""

from __future__ import annotations

from pydantic import Field
from sqlmodel import SQLModel


class ErrorResponse(SQLModel):
    """JSON body returned for every non-2xx response."""

    detail: str | list[object] = Field(
        description=(
            "Short human-readable message, or the list of field errors for "
            "malformed request input."
        ),
        examples=["Task not found"],
    )
    request_id: str | None = Field(
        default=None,
        description="Request correlation identifier injected by middleware.",
    )
