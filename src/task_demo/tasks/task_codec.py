# src/task_demo/tasks/task_codec.py

"""
JSON form of Task records.

Wire shape (camelCase keys):
    {"id": "<uuid>", "title": "...", "isCompleted": false, "priority": "Medium",
     "dueDate": "<iso-8601>" (omitted when unset), "createdAt": "<iso-8601>"}

Decoding is strict: anything malformed raises TaskDecodeError. A default Task is
never substituted for bad input.
"""

from __future__ import annotations

import json
import uuid
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from .task_models import Priority, Task


class TaskDecodeError(ValueError):
    """Serialized task is malformed (missing field, wrong type, bad value)."""


def task_to_dict(task: Task) -> dict[str, Any]:
    out: dict[str, Any] = {
        "id": str(task.id),
        "title": task.title,
        "isCompleted": task.is_completed,
        "priority": task.priority.value,
        "createdAt": task.created_at.isoformat(),
    }
    if task.due_date is not None:
        out["dueDate"] = task.due_date.isoformat()
    return out


def _require(raw: dict[str, Any], key: str, kind: type) -> Any:
    if key not in raw:
        raise TaskDecodeError(f"missing required field: {key}")
    val = raw[key]
    # bool is an int subclass; keep the check exact for the boolean field.
    if kind is bool:
        ok = type(val) is bool
    else:
        ok = isinstance(val, kind)
    if not ok:
        raise TaskDecodeError(f"field {key} must be {kind.__name__}, got {type(val).__name__}")
    return val


def _parse_ts(key: str, raw: str) -> datetime:
    try:
        return datetime.fromisoformat(raw)
    except ValueError as e:
        raise TaskDecodeError(f"field {key} is not an ISO-8601 timestamp: {raw!r}") from e


def task_from_dict(raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise TaskDecodeError(f"task must be a JSON object, got {type(raw).__name__}")

    id_s = _require(raw, "id", str)
    try:
        task_id = uuid.UUID(id_s)
    except ValueError as e:
        raise TaskDecodeError(f"field id is not a UUID: {id_s!r}") from e

    title = _require(raw, "title", str)
    is_completed = _require(raw, "isCompleted", bool)

    label = _require(raw, "priority", str)
    try:
        priority = Priority(label)
    except ValueError as e:
        raise TaskDecodeError(f"field priority has unknown value: {label!r}") from e

    due_raw = raw.get("dueDate")
    if due_raw is None:
        due_date = None
    elif isinstance(due_raw, str):
        due_date = _parse_ts("dueDate", due_raw)
    else:
        raise TaskDecodeError(f"field dueDate must be str, got {type(due_raw).__name__}")

    created_at = _parse_ts("createdAt", _require(raw, "createdAt", str))

    return Task(
        id=task_id,
        title=title,
        is_completed=is_completed,
        priority=priority,
        due_date=due_date,
        created_at=created_at,
    )


def _loads(data: str | bytes) -> Any:
    try:
        return json.loads(data)
    except json.JSONDecodeError as e:
        raise TaskDecodeError(f"invalid JSON: {e}") from e


def dumps_task(task: Task) -> str:
    return json.dumps(task_to_dict(task), ensure_ascii=False)


def loads_task(data: str | bytes) -> Task:
    return task_from_dict(_loads(data))


def dumps_tasks(tasks: Iterable[Task], *, indent: int | None = None) -> str:
    return json.dumps([task_to_dict(t) for t in tasks], ensure_ascii=False, indent=indent)


def loads_tasks(data: str | bytes) -> list[Task]:
    raw = _loads(data)
    if not isinstance(raw, list):
        raise TaskDecodeError(f"task list must be a JSON array, got {type(raw).__name__}")
    return [task_from_dict(item) for item in raw]
