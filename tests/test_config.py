# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_demo.cli.bootstrap import build_secret_store, create_initial_state
from task_demo.config import BuildConfiguration, Settings
from task_demo.credentials.store import InMemorySecretStore, JsonFileSecretStore

_VARS = [
    "CI",
    "CIRCLECI",
    "API_BASE_URL",
    "API_KEY",
    "ANALYTICS_KEY",
    "CRASH_REPORTING_KEY",
    "TASKDEMO_API_BASE_URL",
    "TASKDEMO_API_KEY",
    "TASKDEMO_BUILD",
    "TASKDEMO_SECRETS_PATH",
    "TASKDEMO_SEED_SAMPLE_TASKS",
]


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env()
    assert s.api_base_url == "https://api.example.com"
    assert s.api_key is None
    assert s.analytics_key == "dev-analytics-key"
    assert s.crash_reporting_key == "dev-crash-key"
    assert s.is_ci is False
    assert s.build_configuration is BuildConfiguration.DEBUG
    assert s.secrets_path is None
    assert s.seed_sample_tasks is True


def test_plain_ci_names_are_fallbacks(clean_env) -> None:
    clean_env.setenv("API_BASE_URL", "https://ci.example.com")
    clean_env.setenv("API_KEY", "ci-key")
    clean_env.setenv("CIRCLECI", "true")

    s = Settings.from_env()
    assert s.api_base_url == "https://ci.example.com"
    assert s.api_key == "ci-key"
    assert s.is_ci is True
    assert s.build_configuration is BuildConfiguration.CI


def test_prefixed_names_win(clean_env) -> None:
    clean_env.setenv("API_KEY", "plain")
    clean_env.setenv("TASKDEMO_API_KEY", "prefixed")
    clean_env.setenv("TASKDEMO_BUILD", "release")
    clean_env.setenv("CI", "true")

    s = Settings.from_env()
    assert s.api_key == "prefixed"
    assert s.build_configuration is BuildConfiguration.RELEASE


def test_secret_store_selection(clean_env, tmp_path: Path) -> None:
    assert isinstance(build_secret_store(Settings.from_env()), InMemorySecretStore)

    clean_env.setenv("TASKDEMO_SECRETS_PATH", str(tmp_path / "s.json"))
    store = build_secret_store(Settings.from_env())
    assert isinstance(store, JsonFileSecretStore)


def test_bootstrap_without_seed(settings) -> None:
    settings.seed_sample_tasks = False
    state = create_initial_state(settings=settings)
    assert len(state.task_list) == 0
    assert state.search_text == ""
    assert settings.data_dir.is_dir()
