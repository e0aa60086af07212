"""OS keyring secret store.

Stores secrets through the ``keyring`` library (Secret Service on Linux,
Keychain on macOS, Credential Locker on Windows) under the ``envgg``
service name.

The keyring API cannot enumerate entries, so the store keeps a JSON list
of the keys it has written in a reserved entry. Keys written by other
tools resolve normally but are not listed.
"""

from __future__ import annotations

import json
from typing import Any, Callable, List, Optional, Tuple, TypeVar

import keyring
from keyring.errors import KeyringError, NoKeyringError, PasswordDeleteError

from envgg.exceptions import (
    InvalidSecretNameError,
    SecretNotFoundError,
    SecretStoreError,
    SecretStoreUnavailableError,
)
from envgg.logger import Logger, get_logger

from .base import NAMESPACE, is_valid_secret_name

INDEX_KEY = "__envgg_index__"

T = TypeVar("T")


class KeyringSecretStore:
    """Secret store backed by the OS keyring.

    Calls may block on an OS unlock prompt; no timeout is applied.

    Example:
        store = KeyringSecretStore()
        store.set("API_KEY", "xyz")
        store.get("API_KEY")  # "xyz"
    """

    def __init__(self, backend: Optional[Any] = None, logger: Optional[Logger] = None) -> None:
        """Initialize the keyring store.

        Args:
            backend: Object with get_password/set_password/delete_password,
                typically a keyring backend. Defaults to keyring.get_keyring().
            logger: Optional logger instance
        """
        self.namespace = NAMESPACE
        self._backend = backend
        self.logger = logger or get_logger()

    @property
    def backend(self) -> Any:
        if self._backend is None:
            self._backend = self._call(keyring.get_keyring, "open keyring")
        return self._backend

    def _call(self, fn: Callable[..., T], action: str, *args: Any) -> T:
        try:
            return fn(*args)
        except PasswordDeleteError as e:
            # args are (service, key)
            raise SecretNotFoundError(args[1]) from e
        except NoKeyringError as e:
            raise SecretStoreUnavailableError(
                f"No keyring backend available: {e}",
                details={"action": action},
            ) from e
        except KeyringError as e:
            self.logger.debug("Keyring operation failed", action=action, error=str(e))
            raise SecretStoreError(
                f"Keyring failed to {action}: {e}",
                details={"action": action},
            ) from e

    def _read_index(self) -> List[str]:
        raw = self._call(self.backend.get_password, "read key index", self.namespace, INDEX_KEY)
        if not raw:
            return []
        try:
            keys = json.loads(raw)
        except json.JSONDecodeError:
            keys = None
        if not isinstance(keys, list):
            self.logger.warning("Ignoring corrupt keyring key index")
            return []
        return sorted(k for k in keys if isinstance(k, str))

    def _write_index(self, keys: List[str]) -> None:
        self._call(
            self.backend.set_password,
            "write key index",
            self.namespace,
            INDEX_KEY,
            json.dumps(sorted(set(keys))),
        )

    def get(self, key: str) -> Optional[str]:
        if key == INDEX_KEY:
            return None
        self.logger.debug("Keyring lookup", key=key)
        return self._call(self.backend.get_password, f"read '{key}'", self.namespace, key)

    def set(self, key: str, value: str) -> None:
        if not is_valid_secret_name(key):
            raise InvalidSecretNameError(key)
        self._call(self.backend.set_password, f"store '{key}'", self.namespace, key, value)

        index = self._read_index()
        if key not in index:
            self._write_index(index + [key])
        self.logger.info("Stored secret", key=key)

    def delete(self, key: str) -> None:
        if key == INDEX_KEY:
            raise SecretNotFoundError(key)
        try:
            self._call(self.backend.delete_password, f"delete '{key}'", self.namespace, key)
        except SecretNotFoundError:
            self._forget(key)
            raise
        self._forget(key)
        self.logger.info("Deleted secret", key=key)

    def _forget(self, key: str) -> None:
        index = self._read_index()
        if key in index:
            self._write_index([k for k in index if k != key])

    def keys(self) -> List[str]:
        return self._read_index()

    def list(self) -> List[Tuple[str, str]]:
        pairs = []
        for key in self._read_index():
            value = self.get(key)
            # Removed outside envgg since it was indexed
            if value is not None:
                pairs.append((key, value))
        return pairs
