# ruff: noqa: INP001
"""Numeric priority/status code conversion."""

from __future__ import annotations

import pytest

from tasks_api.core.enums import TaskPriority, TaskStatus, convert_priority, convert_status
from tasks_api.core.errors import InvalidEnumCode, InvalidRequest


@pytest.mark.parametrize(
    ("code", "expected"),
    [(1, TaskPriority.LOW), (2, TaskPriority.MEDIUM), (3, TaskPriority.HIGH)],
)
def test_convert_priority_maps_known_codes(code: int, expected: TaskPriority) -> None:
    assert convert_priority(code) is expected


@pytest.mark.parametrize(
    ("code", "expected"),
    [(1, TaskStatus.TODO), (2, TaskStatus.IN_PROGRESS), (3, TaskStatus.DONE)],
)
def test_convert_status_maps_known_codes(code: int, expected: TaskStatus) -> None:
    assert convert_status(code) is expected


@pytest.mark.parametrize("code", [0, -1, 4, 99, None, "3", "HIGH", 2.0, True])
def test_convert_priority_rejects_unknown_codes(code: object) -> None:
    with pytest.raises(InvalidEnumCode) as exc:
        convert_priority(code)
    assert exc.value.field == "priority"
    assert exc.value.value == code
    assert repr(code) in exc.value.message


def test_convert_status_rejects_unknown_code_with_field_name() -> None:
    with pytest.raises(InvalidEnumCode, match="Invalid status code: 7"):
        convert_status(7)


def test_invalid_enum_code_is_a_client_error() -> None:
    error = InvalidEnumCode("priority", 9)
    assert isinstance(error, InvalidRequest)
    assert error.status_code == 400


def test_canonical_values_are_plain_strings() -> None:
    assert TaskPriority.HIGH.value == "HIGH"
    assert TaskStatus.IN_PROGRESS.value == "IN_PROGRESS"
    assert TaskStatus("DONE") is TaskStatus.DONE
