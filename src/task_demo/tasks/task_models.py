# src/task_demo/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

_IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


class Priority(StrEnum):
    """
    Task priority.

    Values are the display labels ("Low", "Medium", "High"); they are also what
    the JSON form carries.
    """

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def color(self) -> str:
        # presentation only
        return _PRIORITY_COLORS[self]

    @classmethod
    def parse(cls, raw: str) -> Priority:
        """Case-insensitive lookup by label or member name ("high", "HIGH", "High")."""
        key = raw.strip().lower()
        for p in cls:
            if p.value.lower() == key:
                return p
        raise ValueError(f"Unknown priority: {raw!r} (expected one of: low, medium, high)")


_PRIORITY_COLORS: dict[Priority, str] = {
    Priority.LOW: "green",
    Priority.MEDIUM: "orange",
    Priority.HIGH: "red",
}


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class Task:
    """
    One to-do item.

    Identity (`id`) and `created_at` are fixed once the object exists; reassigning
    them raises AttributeError. Everything else is plain mutable state.
    Equality is structural over all fields.
    """

    title: str
    is_completed: bool = False
    priority: Priority = Priority.MEDIUM
    due_date: datetime | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if not isinstance(self.priority, Priority):
            self.priority = Priority(self.priority)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _IMMUTABLE_FIELDS and hasattr(self, name):
            raise AttributeError(f"Task.{name} cannot be changed after creation")
        object.__setattr__(self, name, value)

    def toggle(self) -> None:
        self.is_completed = not self.is_completed

    @staticmethod
    def sample_tasks() -> list[Task]:
        """Seed data for the console and for tests."""
        return [
            Task(title="Set up CircleCI pipeline", priority=Priority.HIGH),
            Task(title="Configure M4 resource class", priority=Priority.HIGH),
            Task(title="Write unit tests", priority=Priority.MEDIUM),
            Task(title="Add UI tests", priority=Priority.MEDIUM),
            Task(title="Configure code signing", priority=Priority.LOW),
            Task(title="Deploy to TestFlight", is_completed=True, priority=Priority.LOW),
        ]
