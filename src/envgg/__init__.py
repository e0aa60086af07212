"""envgg - run commands with env files backed by the OS keyring.

This package provides:
- environments: selection of .env / .env.development / .env.staging / .env.production
- directives: parsing env file lines into literal and keyring directives
- resolver: all-or-nothing resolution against a secret store
- launcher: running the command with the merged environment
- secrets: the "envgg" keyring namespace and an in-memory store
- config, logger, exceptions: settings, structured logging, structured errors
"""

__version__ = "0.1.0"

from envgg.config import Settings, get_settings, reset_settings

from envgg.directives import (
    Directive,
    DirectiveKind,
    parse_line,
    parse_text,
    read_directives,
    variable_names,
)

from envgg.environments import (
    EnvironmentAlias,
    EnvironmentSelection,
    alias_for_token,
    resolve_environment,
)

from envgg.exceptions import (
    CommandNotFoundError,
    EmptyAliasError,
    EnvggError,
    EnvironmentFileNotFoundError,
    MalformedDirectiveError,
    NoCommandSpecifiedError,
    SecretNotFoundError,
)

from envgg.launcher import ProcessRunner, SubprocessRunner, build_child_environment, launch

from envgg.logger import Logger, create_logger, get_logger

from envgg.resolver import ResolvedEnvironment, resolve_directives

from envgg.secrets import (
    NAMESPACE,
    KeyringSecretStore,
    MemorySecretStore,
    SecretStore,
    create_secret_store,
)

__all__ = [
    "__version__",
    # Environments
    "EnvironmentAlias",
    "EnvironmentSelection",
    "alias_for_token",
    "resolve_environment",
    # Directives
    "Directive",
    "DirectiveKind",
    "parse_line",
    "parse_text",
    "read_directives",
    "variable_names",
    # Resolution and launch
    "ResolvedEnvironment",
    "resolve_directives",
    "ProcessRunner",
    "SubprocessRunner",
    "build_child_environment",
    "launch",
    # Secrets
    "NAMESPACE",
    "SecretStore",
    "MemorySecretStore",
    "KeyringSecretStore",
    "create_secret_store",
    # Config
    "Settings",
    "get_settings",
    "reset_settings",
    # Logger
    "Logger",
    "create_logger",
    "get_logger",
    # Exceptions
    "EnvggError",
    "NoCommandSpecifiedError",
    "EnvironmentFileNotFoundError",
    "MalformedDirectiveError",
    "EmptyAliasError",
    "SecretNotFoundError",
    "CommandNotFoundError",
]
