# src/task_demo/credentials/store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SERVICE = "com.example.task_demo"


class SecretStoreError(RuntimeError):
    """Backend failure while reading or writing a secret."""


class InMemorySecretStore:
    """
    Process-local secret store.

    Keys are namespaced by `service` so several stores can share one process
    without colliding (same idea as a keychain service name).
    """

    def __init__(self, service: str = DEFAULT_SERVICE) -> None:
        self.service = service
        self._items: dict[tuple[str, str], str] = {}

    def get(self, key: str) -> str | None:
        return self._items.get((self.service, key))

    def set(self, key: str, value: str) -> None:
        self._items[(self.service, key)] = value

    def delete(self, key: str) -> None:
        self._items.pop((self.service, key), None)


class JsonFileSecretStore:
    """
    Secret store backed by a private JSON file.

    Layout: {"<service>": {"<key>": "<value>", ...}, ...}
    Writes go to a temp file first and are moved into place, then the file is
    chmod'ed to 0600 (best-effort on platforms without POSIX modes).
    """

    def __init__(self, path: str | Path, service: str = DEFAULT_SERVICE) -> None:
        self._path = Path(path)
        self.service = service
        logger.info("JsonFileSecretStore ready path=%s service=%s", self._path, service)

    def _read_all(self) -> dict[str, dict[str, str]]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise SecretStoreError(f"failed to read secrets from {self._path}") from e
        if not isinstance(data, dict):
            raise SecretStoreError(f"secrets file {self._path} is not a JSON object")
        return data

    def _write_all(self, data: dict[str, dict[str, str]]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(".tmp")
            with contextlib.suppress(FileNotFoundError):
                tmp.unlink()
            # Created 0600 from the start so the secrets are never world-readable.
            fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(data, ensure_ascii=False, indent=2))
            os.replace(tmp, self._path)
        except OSError as e:
            raise SecretStoreError(f"failed to write secrets to {self._path}") from e
        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)

    def get(self, key: str) -> str | None:
        value = self._read_all().get(self.service, {}).get(key)
        if value is not None and not isinstance(value, str):
            raise SecretStoreError(f"secret {key!r} is not a string")
        return value

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data.setdefault(self.service, {})[key] = value
        self._write_all(data)
        logger.debug("Secret saved service=%s key=%s", self.service, key)

    def delete(self, key: str) -> None:
        data = self._read_all()
        bucket = data.get(self.service)
        if not bucket or key not in bucket:
            return
        del bucket[key]
        if not bucket:
            del data[self.service]
        self._write_all(data)
        logger.debug("Secret deleted service=%s key=%s", self.service, key)
