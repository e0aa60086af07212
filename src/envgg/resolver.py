"""Resolution of directives into concrete values.

Resolution is all-or-nothing: one missing secret aborts the run, so a
command is never started with a silently incomplete environment.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from envgg.directives import Directive, DirectiveKind
from envgg.exceptions import SecretNotFoundError
from envgg.logger import Logger, get_logger
from envgg.secrets import SecretStore

ResolvedEnvironment = Dict[str, str]


def resolve_directives(
    directives: Iterable[Directive],
    store: SecretStore,
    logger: Optional[Logger] = None,
) -> ResolvedEnvironment:
    """Resolve directives in file order.

    Later directives for the same variable override earlier ones.

    Args:
        directives: Parsed directives
        store: Secret store consulted for keyring directives
        logger: Optional logger instance

    Returns:
        Mapping of variable name to value

    Raises:
        SecretNotFoundError: If any keyring lookup finds nothing
        SecretStoreError: If the backend fails
    """
    logger = logger or get_logger()
    resolved: ResolvedEnvironment = {}

    for directive in directives:
        if directive.kind is DirectiveKind.LITERAL:
            value = directive.value_or_alias
        else:
            value = store.get(directive.value_or_alias)
            if value is None:
                logger.debug(
                    "Secret not found",
                    variable=directive.variable_name,
                    lookup_key=directive.value_or_alias,
                    line_number=directive.line_number,
                )
                raise SecretNotFoundError(
                    directive.variable_name,
                    directive.value_or_alias,
                    directive.line_number,
                )

        if directive.variable_name in resolved:
            logger.debug(
                "Overriding earlier value",
                variable=directive.variable_name,
                line_number=directive.line_number,
            )
        resolved[directive.variable_name] = value

    logger.info("Resolved environment", variables=len(resolved))
    return resolved
