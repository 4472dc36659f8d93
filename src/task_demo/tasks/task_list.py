# src/task_demo/tasks/task_list.py

"""
Queries and mutations over an ordered list of tasks.

The module-level functions work on a plain `list[Task]` (the canonical
sequence). `TaskList` owns such a list, applies the same operations and
notifies subscribers after every mutation that actually changed something.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable, Iterator, Sequence

from .task_models import Task
from .task_stats import TaskStats, compute_stats

logger = logging.getLogger(__name__)

ChangeListener = Callable[["TaskList"], None]


# ---- pure helpers ----


def filter_tasks(tasks: Sequence[Task], query: str) -> list[Task]:
    """Case-insensitive title search. An empty query returns every task, in order."""
    if not query:
        return list(tasks)
    needle = query.casefold()
    return [t for t in tasks if needle in t.title.casefold()]


def find_index(tasks: Sequence[Task], task_id: uuid.UUID) -> int | None:
    for i, t in enumerate(tasks):
        if t.id == task_id:
            return i
    return None


def ids_at_offsets(view: Sequence[Task], offsets: Iterable[int]) -> set[uuid.UUID]:
    """
    Map positions in a (possibly filtered) view to task identities.

    Offsets must lie in 0..len(view)-1; negative offsets are not counted from the end.
    """
    n = len(view)
    out: set[uuid.UUID] = set()
    for i in offsets:
        if not 0 <= i < n:
            raise IndexError(f"offset {i} out of range for a view of {n} tasks")
        out.add(view[i].id)
    return out


# ---- mutations on the canonical list ----


def toggle_task(tasks: list[Task], task_id: uuid.UUID) -> bool:
    """Flip completion of the task with `task_id`. Returns False when no task matches."""
    idx = find_index(tasks, task_id)
    if idx is None:
        return False
    tasks[idx].toggle()
    return True


def delete_tasks(tasks: list[Task], ids: Iterable[uuid.UUID]) -> int:
    """Remove every task whose id is in `ids`. Returns how many were removed."""
    targets = set(ids)
    if not targets:
        return 0
    before = len(tasks)
    tasks[:] = [t for t in tasks if t.id not in targets]
    return before - len(tasks)


def move_tasks(tasks: list[Task], offsets: Iterable[int], destination: int) -> None:
    """
    Move the tasks at `offsets` so they form one block starting at `destination`.

    `destination` refers to positions before the move: the block lands in front
    of the task currently at `destination` (len(tasks) appends). The moved tasks
    keep their relative order.
    """
    n = len(tasks)
    selected = sorted(set(offsets))
    for i in selected:
        if not 0 <= i < n:
            raise IndexError(f"move offset {i} out of range for {n} tasks")
    if not 0 <= destination <= n:
        raise IndexError(f"move destination {destination} out of range for {n} tasks")
    if not selected:
        return

    chosen = set(selected)
    moved = [tasks[i] for i in selected]
    rest = [t for i, t in enumerate(tasks) if i not in chosen]
    insert_at = destination - sum(1 for i in selected if i < destination)
    tasks[:] = rest[:insert_at] + moved + rest[insert_at:]


def replace_task(tasks: list[Task], task: Task) -> bool:
    """Swap in an edited record with the same id, keeping its position."""
    idx = find_index(tasks, task.id)
    if idx is None:
        return False
    tasks[idx] = task
    return True


class TaskList:
    """
    Owner of the canonical task sequence.

    Not thread-safe; callers are expected to serialize mutations (the console
    loop does so naturally).
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = []
        self._listeners: list[ChangeListener] = []
        for t in tasks or ():
            self._append(t)
        logger.debug("TaskList ready total=%d", len(self._tasks))

    # ---- read side ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]

    @property
    def tasks(self) -> list[Task]:
        """Snapshot copy of the canonical order."""
        return list(self._tasks)

    def get(self, task_id: uuid.UUID) -> Task | None:
        idx = find_index(self._tasks, task_id)
        return None if idx is None else self._tasks[idx]

    def filtered(self, query: str = "") -> list[Task]:
        return filter_tasks(self._tasks, query)

    def stats(self) -> TaskStats:
        return compute_stats(self._tasks)

    # ---- subscriptions ----

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change callback. Returns a function that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, action: str) -> None:
        logger.debug("TaskList changed action=%s total=%d", action, len(self._tasks))
        for listener in list(self._listeners):
            listener(self)

    # ---- mutations ----

    def _append(self, task: Task) -> None:
        if find_index(self._tasks, task.id) is not None:
            raise ValueError(f"duplicate task id: {task.id}")
        self._tasks.append(task)

    def add(self, task: Task) -> Task:
        self._append(task)
        self._notify("add")
        return task

    def toggle(self, task_id: uuid.UUID) -> bool:
        changed = toggle_task(self._tasks, task_id)
        if changed:
            self._notify("toggle")
        else:
            logger.debug("toggle ignored: no task id=%s", task_id)
        return changed

    def delete_ids(self, ids: Iterable[uuid.UUID]) -> int:
        removed = delete_tasks(self._tasks, ids)
        if removed:
            self._notify("delete")
        return removed

    def delete_at(self, offsets: Iterable[int], query: str = "") -> int:
        """
        Delete by positions in the view produced by `filtered(query)`.

        Positions are resolved to ids first, so removal hits the right tasks in
        the canonical list even while a search is active.
        """
        view = self.filtered(query)
        return self.delete_ids(ids_at_offsets(view, offsets))

    def move(self, offsets: Iterable[int], destination: int) -> None:
        before = [t.id for t in self._tasks]
        move_tasks(self._tasks, offsets, destination)
        if [t.id for t in self._tasks] != before:
            self._notify("move")

    def replace(self, task: Task) -> bool:
        changed = replace_task(self._tasks, task)
        if changed:
            self._notify("replace")
        return changed
