"""Environment selection.

Maps the optional environment token at the start of the command line to
the env file that should be read:

    (none)              -> .env
    d, development      -> .env.development
    s, staging          -> .env.staging
    p, production       -> .env.production

Any other first argument is the start of the command.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from envgg.exceptions import NoCommandSpecifiedError


class EnvironmentAlias(str, Enum):
    """Closed set of environments envgg knows how to select."""

    DEFAULT = "default"
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"

    @property
    def file_name(self) -> str:
        """Canonical env file name for this environment."""
        if self is EnvironmentAlias.DEFAULT:
            return ".env"
        return f".env.{self.value}"

    @property
    def is_default(self) -> bool:
        return self is EnvironmentAlias.DEFAULT


ALIAS_TOKENS: Dict[str, EnvironmentAlias] = {
    "d": EnvironmentAlias.DEVELOPMENT,
    "development": EnvironmentAlias.DEVELOPMENT,
    "s": EnvironmentAlias.STAGING,
    "staging": EnvironmentAlias.STAGING,
    "p": EnvironmentAlias.PRODUCTION,
    "production": EnvironmentAlias.PRODUCTION,
}


def alias_for_token(token: Optional[str]) -> Optional[EnvironmentAlias]:
    """Return the environment a token selects.

    A missing or empty token selects DEFAULT. Unrecognized tokens return
    None: they are not environment names.
    """
    if not token:
        return EnvironmentAlias.DEFAULT
    return ALIAS_TOKENS.get(token)


@dataclass(frozen=True)
class EnvironmentSelection:
    """Result of resolving the command line.

    Attributes:
        alias: Selected environment
        path: Env file path, relative to the working directory it was resolved in
        command: Program to run
        args: Arguments passed to the program
    """

    alias: EnvironmentAlias
    path: Path
    command: str
    args: Tuple[str, ...] = ()

    @property
    def explicit(self) -> bool:
        """True when the env file was requested by name on the command line."""
        return not self.alias.is_default


def resolve_environment(argv: Sequence[str], cwd: Optional[Path] = None) -> EnvironmentSelection:
    """Split argv into the selected environment and the command to run.

    Args:
        argv: Positional arguments, e.g. ["p", "npm", "start"]
        cwd: Directory the env file is looked up in (default: current directory)

    Returns:
        EnvironmentSelection for the remaining command

    Raises:
        NoCommandSpecifiedError: If nothing is left to execute
    """
    base = cwd if cwd is not None else Path.cwd()
    remaining = list(argv)
    alias = EnvironmentAlias.DEFAULT

    if remaining:
        selected = alias_for_token(remaining[0])
        if selected is not None and not selected.is_default:
            alias = selected
            remaining = remaining[1:]

    if not remaining:
        raise NoCommandSpecifiedError(None if alias.is_default else alias.value)

    return EnvironmentSelection(
        alias=alias,
        path=base / alias.file_name,
        command=remaining[0],
        args=tuple(remaining[1:]),
    )


def existing_environment_files(cwd: Optional[Path] = None) -> List[Tuple[EnvironmentAlias, Path]]:
    """List the supported env files present in a directory, in canonical order."""
    base = cwd if cwd is not None else Path.cwd()
    found = []
    for alias in EnvironmentAlias:
        path = base / alias.file_name
        if path.is_file():
            found.append((alias, path))
    return found
