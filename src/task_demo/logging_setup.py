# src/task_demo/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "task_demo.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console shares the terminal with the REPL:
    - task_demo logs pass, except per-mutation TaskList chatter below INFO
    - everything else (incl. captured 'py.warnings') only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == "task_demo" or name.startswith("task_demo."):
            if name == "task_demo.tasks.task_list":
                return record.levelno >= logging.INFO
            return True
        return record.levelno >= logging.ERROR


def resolve_level(value: str | int | None, default: int) -> int:
    """Level from a name ("debug", "WARNING") or a number; unknown names give `default`."""
    if isinstance(value, int):
        return value
    if not value or not str(value).strip():
        return default
    level = logging.getLevelName(str(value).strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(
    *,
    log_dir: str | Path = ".local/task_demo",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Install a filtered stderr handler and a file handler under `log_dir`.

    Call this ONCE, very early. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file


def setup_logging_from_settings(settings) -> Path:
    """Apply TASKDEMO_LOG_LEVEL (console) and TASKDEMO_LOG_FILE_LEVEL (file) from Settings."""
    return setup_logging(
        log_dir=getattr(settings, "data_dir", None) or ".local/task_demo",
        console_level=resolve_level(getattr(settings, "log_level", None), logging.INFO),
        file_level=resolve_level(getattr(settings, "log_file_level", None), logging.DEBUG),
    )
