"""Secret store protocol.

Defines the capability interface the resolver depends on. Every store is
bound to the single ``envgg`` namespace; there is no per-project or
per-environment sub-namespacing.
"""

from __future__ import annotations

import re
from typing import List, Optional, Protocol, Tuple, runtime_checkable

NAMESPACE = "envgg"

# First character an uppercase letter, then uppercase letters, digits or underscores
_SECRET_NAME_RE = re.compile(r"^[A-Z][A-Z0-9_]*$")


def is_valid_secret_name(name: str) -> bool:
    """Return True if ``name`` is an acceptable SCREAMING_CASE secret name."""
    return bool(_SECRET_NAME_RE.match(name))


@runtime_checkable
class SecretStore(Protocol):
    """Protocol for secret store backends.

    Example:
        class MySecretStore:
            namespace = "envgg"

            def get(self, key: str) -> Optional[str]:
                ...
            # ... other methods

        store: SecretStore = MySecretStore()
    """

    namespace: str

    def get(self, key: str) -> Optional[str]:
        """Retrieve a secret value.

        Args:
            key: Lookup key within the namespace

        Returns:
            The stored value, or None if no such key exists

        Raises:
            SecretStoreError: If the backend itself fails
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Store or replace a secret value.

        Raises:
            InvalidSecretNameError: If key is not SCREAMING_CASE
        """
        ...

    def delete(self, key: str) -> None:
        """Remove a secret.

        Raises:
            SecretNotFoundError: If no such key exists
        """
        ...

    def keys(self) -> List[str]:
        """List stored keys, sorted."""
        ...

    def list(self) -> List[Tuple[str, str]]:
        """List stored (key, value) pairs, sorted by key."""
        ...
