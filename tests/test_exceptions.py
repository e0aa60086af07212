"""Tests for the exception hierarchy.

These tests verify:
1. Exception structure (code, message, details)
2. Inheritance hierarchy
3. String representation
4. Dictionary conversion
"""

import pytest

from envgg.exceptions import (
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


class TestEnvggError:
    """Tests for base EnvggError class."""

    def test_basic_construction(self):
        error = EnvggError("TEST_CODE", "Test message")

        assert error.code == "TEST_CODE"
        assert error.message == "Test message"
        assert error.details == {}

    def test_str_without_details(self):
        assert str(EnvggError("TEST_CODE", "Test message")) == "TEST_CODE: Test message"

    def test_str_with_details(self):
        result = str(EnvggError("TEST_CODE", "Test message", details={"foo": "bar"}))
        assert "TEST_CODE" in result
        assert "foo" in result

    def test_args_contains_message(self):
        assert "The error message" in EnvggError("CODE", "The error message").args

    def test_to_dict(self):
        error = EnvggError("TEST_CODE", "Test message", details={"key": "value"})
        assert error.to_dict() == {
            "code": "TEST_CODE",
            "message": "Test message",
            "details": {"key": "value"},
        }


class TestHierarchy:
    """Each concrete error sits under the expected category."""

    @pytest.mark.parametrize(
        "error,base,code",
        [
            (NoCommandSpecifiedError(), ValidationError, "NO_COMMAND_SPECIFIED"),
            (EnvironmentFileNotFoundError(".env.production"), ResourceNotFoundError, "ENVIRONMENT_FILE_NOT_FOUND"),
            (EnvironmentFileError(".env", "is a directory"), ConfigurationError, "ENVIRONMENT_FILE_UNREADABLE"),
            (MalformedDirectiveError(3, "A B", "bad"), ValidationError, "MALFORMED_DIRECTIVE"),
            (EmptyAliasError(2, "KEY"), ValidationError, "EMPTY_ALIAS"),
            (SecretNotFoundError("KEY"), ResourceNotFoundError, "SECRET_NOT_FOUND"),
            (InvalidSecretNameError("key"), ValidationError, "INVALID_SECRET_NAME"),
            (SecretStoreError("broken"), EnvggError, "SECRET_STORE_ERROR"),
            (SecretStoreUnavailableError("none"), SecretStoreError, "SECRET_STORE_UNAVAILABLE"),
            (CommandNotFoundError("npm"), ResourceNotFoundError, "COMMAND_NOT_FOUND"),
            (CommandNotExecutableError("./x"), EnvggError, "COMMAND_NOT_EXECUTABLE"),
            (InvalidEnvironmentError("env", "embedded null byte"), ValidationError, "INVALID_ENVIRONMENT"),
        ],
    )
    def test_category_and_code(self, error, base, code):
        assert isinstance(error, base)
        assert isinstance(error, EnvggError)
        assert error.code == code

    def test_not_executable_is_not_a_lookup_failure(self):
        assert not isinstance(CommandNotExecutableError("./x"), ResourceNotFoundError)

    def test_can_be_caught_as_base(self):
        with pytest.raises(EnvggError):
            raise SecretNotFoundError("KEY")


class TestDomainErrors:
    """Context carried by the concrete errors."""

    def test_secret_not_found_by_name(self):
        error = SecretNotFoundError("API_KEY", line_number=4)

        assert error.lookup_key == "API_KEY"
        assert error.message == "Line 4: Secret 'API_KEY' not found in keyring"
        assert error.details == {"variable_name": "API_KEY", "lookup_key": "API_KEY", "line_number": 4}

    def test_secret_not_found_by_alias(self):
        error = SecretNotFoundError("APP_SECRET", "ALIAS", 2)

        assert error.variable_name == "APP_SECRET"
        assert error.lookup_key == "ALIAS"
        assert "ALIAS" in error.message
        assert "APP_SECRET" in error.message

    def test_secret_not_found_without_line(self):
        error = SecretNotFoundError("KEY")
        assert "line_number" not in error.details
        assert not error.message.startswith("Line")

    def test_malformed_directive_line(self):
        error = MalformedDirectiveError(12, "MY VAR=1", "variable name contains whitespace")
        assert error.line_number == 12
        assert error.message.startswith("Line 12:")
        assert error.details["line"] == "MY VAR=1"

    def test_environment_file_not_found_path(self):
        error = EnvironmentFileNotFoundError(".env.staging")
        assert error.details == {"path": ".env.staging"}
        assert ".env.staging" in error.message

    def test_no_command_specified_environment(self):
        assert NoCommandSpecifiedError().details == {}
        assert NoCommandSpecifiedError("staging").details == {"environment": "staging"}
