# src/task_demo/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .ports import SecretStore


@dataclass
class AppState:
    # Settings live on the state so command handlers can read them.
    settings: object

    task_list: TaskList
    secret_store: SecretStore

    # Current search text of the console view ("" = unfiltered).
    search_text: str = ""

    def visible_tasks(self):
        """The view the user currently sees (canonical list filtered by search_text)."""
        return self.task_list.filtered(self.search_text)
