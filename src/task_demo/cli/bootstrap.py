# src/task_demo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the task list and the secret store into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import SecretStore
from ..core.state import AppState
from ..credentials.store import InMemorySecretStore, JsonFileSecretStore
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


def build_secret_store(settings) -> SecretStore:
    service = getattr(settings, "secret_service", None) or "com.example.task_demo"
    path = getattr(settings, "secrets_path", None)
    if path:
        return JsonFileSecretStore(path, service=service)
    return InMemorySecretStore(service=service)


def create_initial_state(*, settings=None, secret_store: SecretStore | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    data_dir = getattr(settings, "data_dir", None)
    if data_dir is not None:
        data_dir.mkdir(parents=True, exist_ok=True)

    seed = Task.sample_tasks() if getattr(settings, "seed_sample_tasks", False) else []
    task_list = TaskList(seed)

    if secret_store is None:
        secret_store = build_secret_store(settings)

    logger.info("State ready tasks=%d secret_store=%s", len(task_list), type(secret_store).__name__)
    return AppState(settings=settings, task_list=task_list, secret_store=secret_store)
