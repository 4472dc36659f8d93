# src/task_demo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The console and bootstrap depend on Protocols instead of concrete classes,
so secret backends can be swapped and faked in tests.
"""

from typing import Protocol


class SecretStore(Protocol):
    """
    Key/value store for credentials (tokens, API keys).

    - get: None when the key is absent
    - delete: removing a missing key is not an error
    - backend failures raise SecretStoreError
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...
