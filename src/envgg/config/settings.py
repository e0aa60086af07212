"""Settings for envgg

Typed configuration read from ENVGG_* environment variables.

Design principles:
- The keyring namespace is fixed and is not a setting
- Environment variable overrides with sensible defaults
- Invalid values fail fast with a ConfigurationError
"""

import os
import shlex
from pathlib import Path
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from envgg.exceptions import ConfigurationError

SECRET_BACKENDS = ("keyring", "memory")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """envgg configuration with environment variable overrides"""

    secret_backend: str = Field(
        default="keyring",
        description="Secret store backend: keyring or memory",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Emit log records as JSON lines",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional file receiving a copy of the log output",
    )
    gui_command: Optional[str] = Field(
        default=None,
        description="Command line started by --open",
    )

    @field_validator("secret_backend")
    @classmethod
    def validate_secret_backend(cls, v: str) -> str:
        """Validate secret backend name"""
        if v.lower() not in SECRET_BACKENDS:
            raise ValueError(f"Secret backend must be one of: {', '.join(SECRET_BACKENDS)}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name"""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {', '.join(LOG_LEVELS)}")
        return v.upper()

    @field_validator("gui_command")
    @classmethod
    def validate_gui_command(cls, v: Optional[str]) -> Optional[str]:
        """Treat a blank command as unset"""
        if v is not None and not v.strip():
            return None
        return v

    def gui_argv(self) -> List[str]:
        """Split the GUI command line into argv form"""
        if not self.gui_command:
            raise ConfigurationError(
                code="GUI_NOT_CONFIGURED",
                message="No GUI manager configured. Set ENVGG_GUI_COMMAND to enable --open",
            )
        try:
            return shlex.split(self.gui_command)
        except ValueError as e:
            raise ConfigurationError(
                code="INVALID_SETTINGS",
                message=f"Cannot parse GUI command: {e}",
                details={"gui_command": self.gui_command},
            ) from e

    @classmethod
    def from_env(
        cls,
        prefix: str = "ENVGG",
        env: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        """Create settings from environment variables

        Args:
            prefix: Environment variable prefix
            env: Mapping to read instead of os.environ

        Environment variables:
            {prefix}_SECRET_BACKEND: keyring or memory (default: keyring)
            {prefix}_LOG_LEVEL: Logging level (default: WARNING)
            {prefix}_LOG_JSON: "true" for JSON logs
            {prefix}_LOG_FILE: Log file path
            {prefix}_GUI_COMMAND: Command line for --open

        Raises:
            ConfigurationError: If a value is invalid
        """
        env = os.environ if env is None else env
        log_file = env.get(f"{prefix}_LOG_FILE")

        try:
            return cls(
                secret_backend=env.get(f"{prefix}_SECRET_BACKEND", "keyring"),
                log_level=env.get(f"{prefix}_LOG_LEVEL", "WARNING"),
                log_json=env.get(f"{prefix}_LOG_JSON", "false").lower() == "true",
                log_file=Path(log_file) if log_file else None,
                gui_command=env.get(f"{prefix}_GUI_COMMAND"),
            )
        except PydanticValidationError as e:
            raise ConfigurationError(
                code="INVALID_SETTINGS",
                message=f"Invalid {prefix}_* configuration",
                details={"errors": [err["msg"] for err in e.errors()]},
            ) from e


_global_settings: Optional[Settings] = None


def get_settings(reload: bool = False) -> Settings:
    """
    Get or create the process-wide settings instance

    Args:
        reload: If True, reload settings from environment

    Returns:
        Settings instance
    """
    global _global_settings

    if _global_settings is None or reload:
        _global_settings = Settings.from_env()

    return _global_settings


def reset_settings() -> None:
    """Reset settings (primarily for testing)"""
    global _global_settings
    _global_settings = None
