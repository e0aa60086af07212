"""Secret store gateway for envgg.

All secrets live in the single keyring namespace ``envgg``.

Example:
    from envgg.secrets import create_secret_store

    store = create_secret_store("keyring")
    value = store.get("API_KEY")  # None when absent
"""

from .base import NAMESPACE, SecretStore, is_valid_secret_name
from .factory import create_secret_store
from .keyring_store import INDEX_KEY, KeyringSecretStore
from .memory import MemorySecretStore

__all__ = [
    "NAMESPACE",
    "SecretStore",
    "is_valid_secret_name",
    "MemorySecretStore",
    "KeyringSecretStore",
    "INDEX_KEY",
    "create_secret_store",
]
