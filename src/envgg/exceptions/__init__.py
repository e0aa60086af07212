"""Exceptions for envgg.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for the user

Usage:
    from envgg.exceptions import EnvggError, SecretNotFoundError

    try:
        resolved = resolve_directives(directives, store)
    except SecretNotFoundError as e:
        print(e.variable_name, e.lookup_key, e.line_number)
"""

from envgg.exceptions.base import (
    CommandNotExecutableError,
    CommandNotFoundError,
    ConfigurationError,
    EmptyAliasError,
    EnvggError,
    EnvironmentFileError,
    EnvironmentFileNotFoundError,
    InvalidEnvironmentError,
    InvalidSecretNameError,
    MalformedDirectiveError,
    NoCommandSpecifiedError,
    ResourceNotFoundError,
    SecretNotFoundError,
    SecretStoreError,
    SecretStoreUnavailableError,
    ValidationError,
)

__all__ = [
    # Base exceptions
    "EnvggError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
    # Command line
    "NoCommandSpecifiedError",
    # Env files
    "EnvironmentFileNotFoundError",
    "EnvironmentFileError",
    "MalformedDirectiveError",
    "EmptyAliasError",
    # Secret store
    "SecretNotFoundError",
    "InvalidSecretNameError",
    "SecretStoreError",
    "SecretStoreUnavailableError",
    # Launch
    "CommandNotFoundError",
    "CommandNotExecutableError",
    "InvalidEnvironmentError",
]
