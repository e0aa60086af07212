"""Base exception classes for envgg.

All envgg exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context (line numbers, paths, lookup keys)

Secret values never appear in messages or details.
"""

from typing import Any, Dict, Optional


class EnvggError(Exception):
    """Base exception for all envgg errors.

    Attributes:
        code: Machine-readable error code (e.g., "SECRET_NOT_FOUND")
        message: Human-readable error message
        details: Optional additional context for the user
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(EnvggError):
    """Base for user input errors (command line or env file contents)."""

    pass


class ResourceNotFoundError(EnvggError):
    """Base for errors where a file, secret or command does not exist."""

    pass


class ConfigurationError(EnvggError):
    """Base for configuration and setup errors."""

    pass


class NoCommandSpecifiedError(ValidationError):
    """Raised when no command remains after the optional environment token."""

    def __init__(self, environment: Optional[str] = None):
        details = {"environment": environment} if environment else None
        super().__init__(
            code="NO_COMMAND_SPECIFIED",
            message="No command specified",
            details=details,
        )
        self.environment = environment


class EnvironmentFileNotFoundError(ResourceNotFoundError):
    """Raised when an explicitly selected env file does not exist."""

    def __init__(self, path: Any):
        super().__init__(
            code="ENVIRONMENT_FILE_NOT_FOUND",
            message=f"Environment file not found: {path}",
            details={"path": str(path)},
        )
        self.path = path


class EnvironmentFileError(ConfigurationError):
    """Raised when an env file exists but cannot be read."""

    def __init__(self, path: Any, reason: str):
        super().__init__(
            code="ENVIRONMENT_FILE_UNREADABLE",
            message=f"Cannot read environment file {path}: {reason}",
            details={"path": str(path)},
        )
        self.path = path


class MalformedDirectiveError(ValidationError):
    """Raised when an env file line does not name a valid variable."""

    def __init__(self, line_number: int, line: str, reason: str):
        super().__init__(
            code="MALFORMED_DIRECTIVE",
            message=f"Line {line_number}: {reason}",
            details={"line_number": line_number, "line": line},
        )
        self.line_number = line_number


class EmptyAliasError(ValidationError):
    """Raised for ``NAME=$`` with nothing after the dollar sign."""

    def __init__(self, line_number: int, variable_name: str):
        super().__init__(
            code="EMPTY_ALIAS",
            message=f"Line {line_number}: empty keyring alias for {variable_name}",
            details={"line_number": line_number, "variable_name": variable_name},
        )
        self.line_number = line_number
        self.variable_name = variable_name


class SecretNotFoundError(ResourceNotFoundError):
    """Raised when the secret store holds no value for a lookup key."""

    def __init__(
        self,
        variable_name: str,
        lookup_key: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        lookup_key = lookup_key or variable_name
        if lookup_key == variable_name:
            message = f"Secret '{lookup_key}' not found in keyring"
        else:
            message = f"Secret '{lookup_key}' (for {variable_name}) not found in keyring"
        if line_number is not None:
            message = f"Line {line_number}: {message}"

        details: Dict[str, Any] = {"variable_name": variable_name, "lookup_key": lookup_key}
        if line_number is not None:
            details["line_number"] = line_number

        super().__init__(code="SECRET_NOT_FOUND", message=message, details=details)
        self.variable_name = variable_name
        self.lookup_key = lookup_key
        self.line_number = line_number


class InvalidSecretNameError(ValidationError):
    """Raised when a secret name is not SCREAMING_CASE."""

    def __init__(self, name: str):
        super().__init__(
            code="INVALID_SECRET_NAME",
            message=(
                f"Invalid secret name '{name}': must start with an uppercase letter "
                "and contain only uppercase letters, digits and underscores"
            ),
            details={"name": name},
        )
        self.name = name


class SecretStoreError(EnvggError):
    """Raised when the secret backend itself fails (locked, D-Bus error, ...)."""

    def __init__(self, message: str, code: str = "SECRET_STORE_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(code=code, message=message, details=details)


class SecretStoreUnavailableError(SecretStoreError):
    """Raised when no usable secret backend is installed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="SECRET_STORE_UNAVAILABLE", details=details)


class CommandNotFoundError(ResourceNotFoundError):
    """Raised when the command to launch cannot be located."""

    def __init__(self, command: str):
        super().__init__(
            code="COMMAND_NOT_FOUND",
            message=f"Command not found: {command}",
            details={"command": command},
        )
        self.command = command


class CommandNotExecutableError(EnvggError):
    """Raised when the command exists but cannot be executed."""

    def __init__(self, command: str, reason: str = "permission denied"):
        super().__init__(
            code="COMMAND_NOT_EXECUTABLE",
            message=f"Cannot execute {command}: {reason}",
            details={"command": command},
        )
        self.command = command


class InvalidEnvironmentError(ValidationError):
    """Raised when the child environment or argv cannot be passed to the OS."""

    def __init__(self, command: str, reason: str):
        super().__init__(
            code="INVALID_ENVIRONMENT",
            message=f"Cannot launch {command}: {reason}",
            details={"command": command},
        )
        self.command = command
