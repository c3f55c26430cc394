"""Domain error taxonomy translated to HTTP responses by the error handlers."""

from __future__ import annotations

from fastapi import status


class TaskApiError(Exception):
    """Base error carrying an HTTP status and a client-safe message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequest(TaskApiError):
    """Malformed or missing client input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class NoFieldsProvided(InvalidRequest):
    """A partial update named none of the updatable fields."""

    default_message = "Provide at least one field to update"


class InvalidEnumCode(InvalidRequest):
    """A numeric priority/status code outside the accepted range."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} code: {value!r}")


class UnsupportedMediaType(TaskApiError):
    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    default_message = "Content-Type must be application/json"


class TaskNotFound(TaskApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Task not found"

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__()


class StoreError(TaskApiError):
    """Infrastructure failure raised by the task store.

    ``operation`` names what was attempted ("create task") and is the only
    part that reaches clients; the underlying driver error stays chained as
    ``__cause__`` for server-side logs.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Failed to {operation}")


class StoreUnavailable(StoreError):
    """The database could not be reached or did not answer in time."""


class StoreConstraintViolation(StoreError):
    """A statement was rejected by a table constraint."""
