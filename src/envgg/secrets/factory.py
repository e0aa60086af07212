"""Factory for creating secret stores.

Selects a backend by name, usually taken from ENVGG_SECRET_BACKEND.
"""

from __future__ import annotations

from typing import Optional

from envgg.exceptions import ConfigurationError
from envgg.logger import Logger

from .base import SecretStore
from .keyring_store import KeyringSecretStore
from .memory import MemorySecretStore


def create_secret_store(
    backend: str = "keyring",
    logger: Optional[Logger] = None,
) -> SecretStore:
    """Create a secret store for the named backend.

    Args:
        backend: "keyring" (OS keyring) or "memory" (empty, in-process)
        logger: Optional logger instance

    Returns:
        A SecretStore bound to the envgg namespace

    Raises:
        ConfigurationError: If the backend name is unknown
    """
    name = backend.lower()
    if name == "keyring":
        return KeyringSecretStore(logger=logger)
    if name == "memory":
        return MemorySecretStore()
    raise ConfigurationError(
        code="UNKNOWN_SECRET_BACKEND",
        message=f"Unknown secret backend: {backend}. Use 'keyring' or 'memory'",
        details={"backend": backend},
    )
