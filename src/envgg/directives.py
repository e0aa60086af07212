"""Env file directive parser.

Each non-blank, non-comment line of an env file is one directive:

    FOO=123            literal value "123"
    APP_SECRET         keyring lookup under the key "APP_SECRET"
    APP_SECRET=$ALIAS  keyring lookup under "ALIAS", exported as APP_SECRET

Whitespace around the first "=" is ignored. Literal values are otherwise
taken verbatim: no unquoting, no interpolation.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Union

from envgg.exceptions import (
    EmptyAliasError,
    EnvironmentFileError,
    EnvironmentFileNotFoundError,
    MalformedDirectiveError,
)
from envgg.logger import Logger, get_logger


class DirectiveKind(str, Enum):
    """How a directive's value is obtained."""

    LITERAL = "literal"
    KEYRING_BY_NAME = "keyring_by_name"
    KEYRING_BY_ALIAS = "keyring_by_alias"


@dataclass(frozen=True)
class Directive:
    """One parsed env file line.

    Attributes:
        line_number: 1-based line in the source file
        kind: Literal value or keyring lookup
        variable_name: Environment variable that will be set
        value_or_alias: The literal value, or the keyring lookup key
    """

    line_number: int
    kind: DirectiveKind
    variable_name: str
    value_or_alias: str

    @property
    def needs_secret(self) -> bool:
        return self.kind is not DirectiveKind.LITERAL


def _check_variable_name(name: str, line_number: int, line: str) -> None:
    if not name:
        raise MalformedDirectiveError(line_number, line, "missing variable name")
    if any(ch.isspace() for ch in name):
        raise MalformedDirectiveError(
            line_number, line, f"variable name '{name}' contains whitespace"
        )


def parse_line(line: str, line_number: int) -> Optional[Directive]:
    """Parse a single line.

    Returns:
        The directive, or None for blank lines and comments

    Raises:
        MalformedDirectiveError: If the variable name is empty or contains whitespace
        EmptyAliasError: For NAME=$ with nothing after the dollar sign
    """
    trimmed = line.strip()
    if not trimmed or trimmed.startswith("#"):
        return None

    name, sep, rhs = trimmed.partition("=")
    if not sep:
        _check_variable_name(trimmed, line_number, trimmed)
        return Directive(line_number, DirectiveKind.KEYRING_BY_NAME, trimmed, trimmed)

    name = name.strip()
    rhs = rhs.strip()
    _check_variable_name(name, line_number, trimmed)

    if rhs.startswith("$"):
        alias = rhs[1:].strip()
        if not alias:
            raise EmptyAliasError(line_number, name)
        return Directive(line_number, DirectiveKind.KEYRING_BY_ALIAS, name, alias)

    return Directive(line_number, DirectiveKind.LITERAL, name, rhs)


def parse_lines(lines: Iterable[str]) -> List[Directive]:
    """Parse lines in order, numbering them from 1."""
    directives = []
    for line_number, line in enumerate(lines, start=1):
        directive = parse_line(line, line_number)
        if directive is not None:
            directives.append(directive)
    return directives


def parse_text(text: str) -> List[Directive]:
    """Parse the full contents of an env file."""
    if text.startswith("\ufeff"):
        text = text[1:]
    return parse_lines(io.StringIO(text))


def read_directives(
    path: Union[Path, str],
    required: bool = False,
    logger: Optional[Logger] = None,
) -> List[Directive]:
    """Read and parse an env file.

    Args:
        path: Env file to read
        required: If False, a missing file yields no directives
        logger: Optional logger instance

    Raises:
        EnvironmentFileNotFoundError: If a required file does not exist
        EnvironmentFileError: If the file exists but cannot be read
        MalformedDirectiveError, EmptyAliasError: On invalid lines
    """
    path = Path(path)
    logger = logger or get_logger()

    try:
        with open(path, encoding="utf-8-sig") as f:
            directives = parse_lines(f)
    except FileNotFoundError:
        if required:
            raise EnvironmentFileNotFoundError(path) from None
        logger.info("No env file, continuing without it", path=str(path))
        return []
    except UnicodeDecodeError as e:
        raise EnvironmentFileError(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise EnvironmentFileError(path, e.strerror or str(e)) from e

    logger.debug("Parsed env file", path=str(path), directives=len(directives))
    return directives


def variable_names(directives: Iterable[Directive]) -> List[str]:
    """Unique variable names in first-seen order."""
    return list(dict.fromkeys(d.variable_name for d in directives))
