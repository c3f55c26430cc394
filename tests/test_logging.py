# ruff: noqa: INP001
"""Log formatters render structured `extra` fields."""

from __future__ import annotations

import json
import logging

from tasks_api.core.logging import JsonFormatter, TextFormatter, build_formatter


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="tasks_api.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="task.store.created",
        args=None,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record(task_id=7, operation="create task")))

    assert payload["message"] == "task.store.created"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "tasks_api.test"
    assert payload["task_id"] == 7
    assert payload["operation"] == "create task"


def test_text_formatter_appends_sorted_extras() -> None:
    line = TextFormatter("%(levelname)s %(message)s").format(_record(b=2, a=1))

    assert line == "INFO task.store.created a=1 b=2"


def test_text_formatter_without_extras_is_unchanged() -> None:
    assert TextFormatter("%(message)s").format(_record()) == "task.store.created"


def test_build_formatter_selects_format() -> None:
    assert isinstance(build_formatter(log_format="json", use_utc=True), JsonFormatter)
    assert isinstance(build_formatter(log_format="text", use_utc=False), TextFormatter)
