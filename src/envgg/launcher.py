"""Command launcher.

Runs the target command with the resolved variables applied on top of
the inherited environment. Standard streams are inherited unchanged and
the child's exit status is returned verbatim.
"""

from __future__ import annotations

import os
import subprocess
from typing import Dict, Mapping, Optional, Protocol, Sequence, runtime_checkable

from envgg.exceptions import CommandNotExecutableError, CommandNotFoundError, InvalidEnvironmentError
from envgg.logger import Logger, get_logger


@runtime_checkable
class ProcessRunner(Protocol):
    """Capability that starts a process and waits for it."""

    def run(self, command: str, args: Sequence[str], env: Mapping[str, str]) -> int:
        """Run command to completion.

        Returns:
            Exit status; negative -N when the child was killed by signal N

        Raises:
            CommandNotFoundError: If the command cannot be located
            CommandNotExecutableError: If it exists but cannot be executed
            InvalidEnvironmentError: If argv or env cannot be passed to exec
        """
        ...


class SubprocessRunner:
    """ProcessRunner backed by subprocess with inherited stdio."""

    def run(self, command: str, args: Sequence[str], env: Mapping[str, str]) -> int:
        try:
            process = subprocess.Popen([command, *args], env=dict(env))
        except FileNotFoundError:
            raise CommandNotFoundError(command) from None
        except PermissionError as e:
            raise CommandNotExecutableError(command, e.strerror or "permission denied") from e
        except OSError as e:
            raise CommandNotExecutableError(command, e.strerror or str(e)) from e
        except ValueError as e:
            # NUL bytes cannot cross the exec boundary
            raise InvalidEnvironmentError(command, str(e)) from e

        while True:
            try:
                return process.wait()
            except KeyboardInterrupt:
                # The terminal delivered SIGINT to the child too; wait for it to exit
                continue


def build_child_environment(
    resolved: Mapping[str, str],
    base: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """Return the inherited environment with resolved entries applied on top.

    Neither input is modified.
    """
    env = dict(os.environ if base is None else base)
    env.update(resolved)
    return env


def launch(
    resolved: Mapping[str, str],
    command: str,
    args: Sequence[str] = (),
    runner: Optional[ProcessRunner] = None,
    base_env: Optional[Mapping[str, str]] = None,
    logger: Optional[Logger] = None,
) -> int:
    """Run command with the resolved environment and return its exit status.

    A nonzero status is a normal result, not an error.
    """
    logger = logger or get_logger()
    runner = runner or SubprocessRunner()
    env = build_child_environment(resolved, base_env)

    logger.debug("Launching command", command=command, argc=len(args), variables=len(resolved))
    status = runner.run(command, list(args), env)
    logger.debug("Command exited", command=command, status=status)
    return status
