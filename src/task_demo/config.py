# src/task_demo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No secrets required at import time; Settings is built on first get_settings().
- CI-provided plain names (API_BASE_URL, API_KEY, CI, CIRCLECI) are honoured as
  fallbacks for the prefixed ones.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "TASKDEMO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


class BuildConfiguration(StrEnum):
    DEBUG = "debug"
    CI = "ci"
    RELEASE = "release"


def _detect_ci() -> bool:
    return os.getenv("CI") == "true" or os.getenv("CIRCLECI") == "true"


def _build_configuration(is_ci: bool) -> BuildConfiguration:
    raw = (_env(_k("BUILD"), "") or "").strip().lower()
    if raw:
        try:
            return BuildConfiguration(raw)
        except ValueError:
            pass
    if is_ci:
        return BuildConfiguration.CI
    return BuildConfiguration.DEBUG


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file_level: str
    data_dir: Path

    # ---- Console ----
    console_enabled: bool
    seed_sample_tasks: bool

    # ---- Secret store ----
    secret_service: str
    secrets_path: Optional[Path]  # None -> in-memory store

    # ---- Backend / third-party keys ----
    api_base_url: str
    api_key: Optional[str]
    analytics_key: str
    crash_reporting_key: str

    # ---- Build ----
    is_ci: bool
    build_configuration: BuildConfiguration

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task_demo")
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        log_file_level = _env(_k("LOG_FILE_LEVEL"), "DEBUG")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task_demo")) or Path(".local/task_demo")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)
        seed_sample_tasks = _env_bool(_k("SEED_SAMPLE_TASKS"), True)

        secret_service = _env(_k("SECRET_SERVICE"), "com.example.task_demo")
        secrets_path = _env_path(_k("SECRETS_PATH"), None)

        api_base_url = (
            _first_env(_k("API_BASE_URL"), "API_BASE_URL", default="https://api.example.com")
            or "https://api.example.com"
        )
        api_key = _first_env(_k("API_KEY"), "API_KEY", default=None)
        analytics_key = _first_env(_k("ANALYTICS_KEY"), "ANALYTICS_KEY", default="dev-analytics-key") or ""
        crash_reporting_key = (
            _first_env(_k("CRASH_REPORTING_KEY"), "CRASH_REPORTING_KEY", default="dev-crash-key") or ""
        )

        is_ci = _detect_ci()

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file_level=log_file_level,
            data_dir=data_dir,
            console_enabled=console_enabled,
            seed_sample_tasks=seed_sample_tasks,
            secret_service=secret_service,
            secrets_path=secrets_path,
            api_base_url=api_base_url,
            api_key=api_key,
            analytics_key=analytics_key,
            crash_reporting_key=crash_reporting_key,
            is_ci=is_ci,
            build_configuration=_build_configuration(is_ci),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
