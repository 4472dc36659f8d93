# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_demo.cli.bootstrap import create_initial_state
from task_demo.core.state import AppState
from task_demo.credentials.store import InMemorySecretStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the command handlers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="task_demo-test",
        log_level="DEBUG",
        log_file_level="DEBUG",
        data_dir=tmp_path / "data",
        console_enabled=False,
        seed_sample_tasks=True,
        secret_service="test.service",
        secrets_path=None,
        api_base_url="https://api.example.com",
        api_key=None,
        is_ci=False,
        build_configuration="debug",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState seeded with the sample tasks and an in-memory secret store."""
    return create_initial_state(
        settings=settings,
        secret_store=InMemorySecretStore(service=settings.secret_service),
    )
