# src/task_demo/tasks/task_stats.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .task_models import Task


def completed_count(tasks: Sequence[Task]) -> int:
    return sum(1 for t in tasks if t.is_completed)


def pending_count(tasks: Sequence[Task]) -> int:
    return sum(1 for t in tasks if not t.is_completed)


def completion_percentage(tasks: Sequence[Task]) -> float:
    """Share of completed tasks in 0..100. Empty input gives 0.0."""
    if not tasks:
        return 0.0
    return completed_count(tasks) / len(tasks) * 100


@dataclass(frozen=True, slots=True)
class TaskStats:
    completed: int
    pending: int
    total: int
    percentage: float

    def summary(self) -> str:
        return (
            f"{int(self.percentage)}% done "
            f"(completed {self.completed}, pending {self.pending}, total {self.total})"
        )


def compute_stats(tasks: Sequence[Task]) -> TaskStats:
    done = completed_count(tasks)
    total = len(tasks)
    return TaskStats(
        completed=done,
        pending=total - done,
        total=total,
        percentage=completion_percentage(tasks),
    )
