"""envgg command line interface.

Run a command with environment variables from .env, .env.development,
.env.staging or .env.production, resolving secrets from the OS keyring.

USAGE:
    envgg [env] command...          run command with the selected env file
    envgg -l / --list               list secret names stored under "envgg"
    envgg -c / --current            list variables declared in env files here
    envgg -o / --open               start the configured GUI manager
    envgg --set KEY                 store a secret (value from prompt or stdin)
    envgg --delete KEY              remove a secret

EXIT STATUS:
    The launched command's exit status, unchanged. A child killed by
    signal N yields 128+N. envgg's own failures use 125; a command that
    cannot be executed yields 126 and a missing command 127.
"""

from __future__ import annotations

import argparse
import getpass
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from envgg.config import Settings, get_settings
from envgg.directives import read_directives, variable_names
from envgg.environments import existing_environment_files, resolve_environment
from envgg.exceptions import (
    CommandNotExecutableError,
    CommandNotFoundError,
    EnvggError,
    InvalidSecretNameError,
    NoCommandSpecifiedError,
    ValidationError,
)
from envgg.launcher import ProcessRunner, launch
from envgg.logger import Logger, create_logger, parse_level
from envgg.resolver import resolve_directives
from envgg.secrets import NAMESPACE, SecretStore, create_secret_store, is_valid_secret_name

EXIT_ERROR = 125
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127

EPILOG = """\
Where env is optional and can be: d, development, s, staging, p, production

Examples:
  envgg npm start             # .env
  envgg development npm start # .env.development
  envgg d npm start           # .env.development
  envgg p tsx src/index.ts    # .env.production

Env file lines:
  FOO=123             literal value
  APP_SECRET          keyring secret APP_SECRET
  APP_SECRET=$ALIAS   keyring secret ALIAS, exported as APP_SECRET
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envgg",
        description=(
            "Run commands with environment variables from .env, .env.development, "
            ".env.staging, or .env.production"
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    modes = parser.add_mutually_exclusive_group()
    modes.add_argument(
        "-l",
        "--list",
        action="store_true",
        help=f"List all secrets stored in the '{NAMESPACE}' namespace in system keyring",
    )
    modes.add_argument(
        "-o",
        "--open",
        action="store_true",
        help="Open the GUI manager (ENVGG_GUI_COMMAND)",
    )
    modes.add_argument(
        "-c",
        "--current",
        action="store_true",
        help="Print available environment variable names from supported .env files in current folder",
    )
    modes.add_argument("--set", metavar="KEY", help="Store a secret in the keyring")
    modes.add_argument("--delete", metavar="KEY", help="Remove a secret from the keyring")
    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="[env] command...",
    )
    return parser


def exit_status(status: int) -> int:
    """Map a child status to a process exit code (signal N -> 128+N)."""
    if status < 0:
        return 128 - status
    return status


def _print_current(cwd: Optional[Path], logger: Logger) -> int:
    env_files = existing_environment_files(cwd)
    if not env_files:
        print("No .env files found in current directory")
        return 0

    print(f"{len(env_files)} .env file(s) found")
    for _, path in env_files:
        try:
            names = variable_names(read_directives(path, required=True, logger=logger))
        except EnvggError as e:
            print(f"Error reading {path.name}: {e.message}", file=sys.stderr)
            continue
        if not names:
            print(f"\n{path.name}: No variables")
        else:
            print(f"\n{path.name}:")
            for name in names:
                print(name)
    return 0


def _read_secret_value(key: str, stdin: TextIO) -> str:
    if stdin.isatty():
        value = getpass.getpass(f"Value for {key}: ")
    else:
        value = stdin.readline().rstrip("\r\n")
    if not value:
        raise ValidationError(
            code="EMPTY_SECRET_VALUE",
            message=f"No value given for {key}",
            details={"key": key},
        )
    return value


def _run(
    args: List[str],
    settings: Settings,
    store: Optional[SecretStore],
    runner: Optional[ProcessRunner],
    cwd: Optional[Path],
    logger: Logger,
) -> int:
    if args and args[0] == "--":
        args = args[1:]

    selection = resolve_environment(args, cwd)
    logger.debug("Selected environment", environment=selection.alias.value, path=str(selection.path))

    directives = read_directives(selection.path, required=selection.explicit, logger=logger)
    if store is None:
        store = create_secret_store(settings.secret_backend, logger=logger)
    resolved = resolve_directives(directives, store, logger=logger)

    return exit_status(
        launch(resolved, selection.command, selection.args, runner=runner, logger=logger)
    )


def main(
    argv: Optional[Sequence[str]] = None,
    store: Optional[SecretStore] = None,
    runner: Optional[ProcessRunner] = None,
    cwd: Optional[Path] = None,
    stdin: Optional[TextIO] = None,
) -> int:
    """Entry point. Returns the process exit code.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])
        store: Secret store to use instead of the configured backend
        runner: Process runner to use instead of subprocess
        cwd: Directory holding the env files (default: current directory)
        stdin: Stream secret values are read from for --set
    """
    parser = build_parser()
    ns = parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    try:
        settings = get_settings()
    except EnvggError as e:
        print(f"envgg: error: {e}", file=sys.stderr)
        return EXIT_ERROR

    logger = create_logger(
        name="envgg",
        level=parse_level(settings.log_level),
        log_file=str(settings.log_file) if settings.log_file else None,
        json_format=settings.log_json,
    )

    try:
        if ns.current:
            return _print_current(cwd, logger)

        if ns.open:
            gui = settings.gui_argv()
            return exit_status(launch({}, gui[0], gui[1:], runner=runner, logger=logger))

        if store is None and (ns.list or ns.set is not None or ns.delete is not None):
            store = create_secret_store(settings.secret_backend, logger=logger)

        if ns.list:
            for key in store.keys():
                print(key)
            return 0

        if ns.set is not None:
            if not is_valid_secret_name(ns.set):
                raise InvalidSecretNameError(ns.set)
            store.set(ns.set, _read_secret_value(ns.set, stdin or sys.stdin))
            print(f"Stored {ns.set}")
            return 0

        if ns.delete is not None:
            store.delete(ns.delete)
            print(f"Deleted {ns.delete}")
            return 0

        return _run(ns.args, settings, store, runner, cwd, logger)

    except NoCommandSpecifiedError as e:
        parser.print_usage(sys.stderr)
        print(f"envgg: error: {e.message}", file=sys.stderr)
        return EXIT_ERROR
    except CommandNotFoundError as e:
        print(f"envgg: {e.message}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except CommandNotExecutableError as e:
        print(f"envgg: {e.message}", file=sys.stderr)
        return EXIT_NOT_EXECUTABLE
    except EnvggError as e:
        logger.debug("Aborting", code=e.code)
        print(f"envgg: error: {e.message}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
