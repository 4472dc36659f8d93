# tests/test_task_codec.py

from __future__ import annotations

import json
from datetime import UTC, datetime

import pytest

from task_demo.tasks.task_codec import (
    TaskDecodeError,
    dumps_task,
    dumps_tasks,
    loads_task,
    loads_tasks,
    task_from_dict,
    task_to_dict,
)
from task_demo.tasks.task_models import Priority, Task


def test_round_trip_with_due_date() -> None:
    task = Task(
        title="Codable Test",
        is_completed=True,
        priority=Priority.HIGH,
        due_date=datetime(2031, 5, 6, 7, 8, 9, 123456, tzinfo=UTC),
    )
    assert loads_task(dumps_task(task)) == task


def test_round_trip_without_due_date_omits_key() -> None:
    task = Task(title="No deadline")
    raw = task_to_dict(task)
    assert "dueDate" not in raw
    assert loads_task(dumps_task(task)) == task


def test_wire_shape() -> None:
    task = Task(title="Wire", priority=Priority.LOW, created_at=datetime(2030, 1, 1, tzinfo=UTC))
    raw = json.loads(dumps_task(task))
    assert raw == {
        "id": str(task.id),
        "title": "Wire",
        "isCompleted": False,
        "priority": "Low",
        "createdAt": "2030-01-01T00:00:00+00:00",
    }


def test_null_due_date_is_accepted() -> None:
    raw = task_to_dict(Task(title="x"))
    raw["dueDate"] = None
    assert task_from_dict(raw).due_date is None


def test_list_round_trip() -> None:
    tasks = Task.sample_tasks()
    assert loads_tasks(dumps_tasks(tasks, indent=2)) == tasks


@pytest.mark.parametrize("missing", ["id", "title", "isCompleted", "priority", "createdAt"])
def test_missing_required_field(missing: str) -> None:
    raw = task_to_dict(Task(title="x"))
    del raw[missing]
    with pytest.raises(TaskDecodeError, match=missing):
        task_from_dict(raw)


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("id", "not-a-uuid"),
        ("id", 42),
        ("title", None),
        ("isCompleted", "true"),
        ("isCompleted", 1),
        ("priority", "medium"),
        ("priority", "Urgent"),
        ("dueDate", 1700000000),
        ("dueDate", "tomorrow"),
        ("createdAt", "yesterday"),
    ],
)
def test_invalid_values_are_rejected(key: str, value) -> None:
    raw = task_to_dict(Task(title="x"))
    raw[key] = value
    with pytest.raises(TaskDecodeError):
        task_from_dict(raw)


def test_malformed_json_and_wrong_containers() -> None:
    with pytest.raises(TaskDecodeError):
        loads_task("{not json")
    with pytest.raises(TaskDecodeError):
        loads_task("[]")
    with pytest.raises(TaskDecodeError):
        loads_tasks("{}")


def test_decode_error_is_a_value_error() -> None:
    assert issubclass(TaskDecodeError, ValueError)
