"""Model exports for SQLAlchemy/SQLModel metadata discovery."""

from tasks_api.models.tasks import Task

__all__ = ["Task"]
