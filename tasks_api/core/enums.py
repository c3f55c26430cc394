"""Task priority/status enums and their numeric client codes."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from tasks_api.core.errors import InvalidEnumCode

_E = TypeVar("_E", bound=Enum)


class TaskPriority(str, Enum):
    """Canonical task priority values stored in the database."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class TaskStatus(str, Enum):
    """Canonical task status values stored in the database."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


PRIORITY_CODES: dict[int, TaskPriority] = {
    1: TaskPriority.LOW,
    2: TaskPriority.MEDIUM,
    3: TaskPriority.HIGH,
}
STATUS_CODES: dict[int, TaskStatus] = {
    1: TaskStatus.TODO,
    2: TaskStatus.IN_PROGRESS,
    3: TaskStatus.DONE,
}


def _convert(code: object, *, codes: dict[int, _E], field: str) -> _E:
    # bool is an int subclass; True must not read as code 1.
    if isinstance(code, bool) or not isinstance(code, int):
        raise InvalidEnumCode(field, code)
    try:
        return codes[code]
    except KeyError:
        raise InvalidEnumCode(field, code) from None


def convert_priority(code: object) -> TaskPriority:
    """Map 1/2/3 to LOW/MEDIUM/HIGH."""
    return _convert(code, codes=PRIORITY_CODES, field="priority")


def convert_status(code: object) -> TaskStatus:
    """Map 1/2/3 to TODO/IN_PROGRESS/DONE."""
    return _convert(code, codes=STATUS_CODES, field="status")
