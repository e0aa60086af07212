"""
envgg Logger Module

Structured logging for envgg with session tracking and optional JSON output.
All output goes to stderr so the launched command owns stdout.

Usage:
    from envgg.logger import get_logger, create_logger

    logger = get_logger()
    logger.info("Resolved environment", variables=4)

    logger = create_logger(name="envgg", level=logging.DEBUG, json_format=True)

Environment Variables:
    ENVGG_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    ENVGG_LOG_FILE: Optional file path for log output
    ENVGG_LOG_JSON: Set to "true" for JSON output format
"""

import logging
import os
from typing import Optional, TextIO

from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix.

    Examples:
        "envgg" -> "ENVGG"
        "envgg-cli" -> "ENVGG_CLI"
    """
    return name.upper().replace("-", "_").replace(".", "_")


def parse_level(level_str: str, default: int = logging.WARNING) -> int:
    """Map a level name such as "debug" to its logging constant."""
    level = logging.getLevelName(level_str.strip().upper())
    return level if isinstance(level, int) else default


def create_logger(
    name: str = "envgg",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> Logger:
    """Create a new logger instance with the specified configuration.

    Parameters that are not provided are read from {PREFIX}_LOG_LEVEL,
    {PREFIX}_LOG_FILE and {PREFIX}_LOG_JSON, where PREFIX is derived
    from the name.

    Args:
        name: Logger name
        level: Logging level (defaults to WARNING or env var)
        log_file: Optional file path for log output
        json_format: If True, output logs as JSON
        stream: Output stream (default: stderr)

    Returns:
        A configured Logger instance
    """
    env_prefix = _get_env_prefix(name)

    if level is None:
        level = parse_level(os.environ.get(f"{env_prefix}_LOG_LEVEL", "WARNING"))

    if log_file is None:
        log_file = os.environ.get(f"{env_prefix}_LOG_FILE") or None

    if json_format is None:
        json_format = os.environ.get(f"{env_prefix}_LOG_JSON", "false").lower() == "true"

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
        stream=stream,
    )


def get_logger(name: str = "envgg") -> Logger:
    """Get a logger configured from environment variables.

    Args:
        name: Logger name

    Returns:
        A configured Logger instance
    """
    return create_logger(name=name)


__all__ = [
    # Interface
    "Logger",
    # Implementations
    "StructuredLogger",
    # Formatters (for custom use)
    "JsonFormatter",
    "TextFormatter",
    # Factory functions
    "create_logger",
    "get_logger",
    "parse_level",
]
