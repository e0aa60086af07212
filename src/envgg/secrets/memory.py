"""In-memory secret store.

Dict-backed store that doesn't persist anything. Used by the test suite
and selectable with ENVGG_SECRET_BACKEND=memory for dry runs.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Tuple

from envgg.exceptions import InvalidSecretNameError, SecretNotFoundError

from .base import NAMESPACE, is_valid_secret_name


class MemorySecretStore:
    """In-memory secret store backend.

    Example:
        store = MemorySecretStore({"API_KEY": "xyz"})
        store.get("API_KEY")  # "xyz"
    """

    def __init__(self, secrets: Optional[Mapping[str, str]] = None) -> None:
        """Initialize the store, optionally pre-populated.

        Pre-populated keys bypass name validation so tests can model
        entries written by other tools.
        """
        self.namespace = NAMESPACE
        self._store: Dict[str, str] = dict(secrets or {})
        self.lookups: List[str] = []

    def get(self, key: str) -> Optional[str]:
        self.lookups.append(key)
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        if not is_valid_secret_name(key):
            raise InvalidSecretNameError(key)
        self._store[key] = value

    def delete(self, key: str) -> None:
        if key not in self._store:
            raise SecretNotFoundError(key)
        del self._store[key]

    def keys(self) -> List[str]:
        return sorted(self._store)

    def list(self) -> List[Tuple[str, str]]:
        return sorted(self._store.items())

    def clear(self) -> None:
        """Clear all secrets from the store."""
        self._store.clear()
        self.lookups.clear()

    def __len__(self) -> int:
        """Return number of secrets in store."""
        return len(self._store)
