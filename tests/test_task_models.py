# tests/test_task_models.py

from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import UTC, datetime, timedelta

import pytest

from task_demo.tasks.task_models import Priority, Task


def test_task_defaults() -> None:
    before = datetime.now(UTC)
    task = Task(title="Test Task")

    assert task.title == "Test Task"
    assert task.is_completed is False
    assert task.priority is Priority.MEDIUM
    assert task.due_date is None
    assert isinstance(task.id, uuid.UUID)
    assert before <= task.created_at <= datetime.now(UTC)


def test_task_with_all_fields() -> None:
    task_id = uuid.uuid4()
    due = datetime(2030, 1, 2, tzinfo=UTC)
    created = datetime(2029, 12, 31, 8, 30, tzinfo=UTC)

    task = Task(
        id=task_id,
        title="Complete Task",
        is_completed=True,
        priority=Priority.HIGH,
        due_date=due,
        created_at=created,
    )

    assert task.id == task_id
    assert task.is_completed is True
    assert task.priority is Priority.HIGH
    assert task.due_date == due
    assert task.created_at == created


def test_ids_are_unique() -> None:
    assert len({Task(title="x").id for _ in range(50)}) == 50


def test_empty_title_is_allowed_by_the_model() -> None:
    assert Task(title="").title == ""


def test_id_and_created_at_are_immutable() -> None:
    task = Task(title="fixed")
    with pytest.raises(AttributeError):
        task.id = uuid.uuid4()
    with pytest.raises(AttributeError):
        task.created_at = datetime.now(UTC) + timedelta(days=1)

    task.title = "renamed"
    task.is_completed = True
    assert task.title == "renamed"
    assert task.is_completed


def test_toggle_twice_restores_state() -> None:
    task = Task(title="flip")
    task.toggle()
    assert task.is_completed
    task.toggle()
    assert not task.is_completed


def test_priority_labels_and_colors() -> None:
    assert [p.value for p in Priority] == ["Low", "Medium", "High"]
    assert Priority.LOW.color == "green"
    assert Priority.MEDIUM.color == "orange"
    assert Priority.HIGH.color == "red"


def test_priority_parse_is_case_insensitive() -> None:
    assert Priority.parse("high") is Priority.HIGH
    assert Priority.parse(" LOW ") is Priority.LOW
    with pytest.raises(ValueError):
        Priority.parse("urgent")


def test_priority_label_is_coerced_and_unknown_rejected() -> None:
    assert Task(title="x", priority="High").priority is Priority.HIGH  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        Task(title="x", priority="Urgent")  # type: ignore[arg-type]


def test_structural_equality() -> None:
    task_id = uuid.uuid4()
    created = datetime.now(UTC)
    a = Task(id=task_id, title="Same Task", created_at=created)
    b = Task(id=task_id, title="Same Task", created_at=created)

    assert a == b
    assert replace(b, title="Other") != a
    assert replace(b, is_completed=True) != a
    assert replace(b, id=uuid.uuid4()) != a
    assert Task(title="Task 1") != Task(title="Task 1")  # fresh ids differ


def test_sample_tasks() -> None:
    samples = Task.sample_tasks()
    assert len(samples) == 6
    assert samples[0].title == "Set up CircleCI pipeline"
    assert [t.is_completed for t in samples].count(True) == 1
    assert len({t.id for t in samples}) == len(samples)
