"""Configuration Module for envgg

Example:
    from envgg.config import get_settings

    settings = get_settings()
    store = create_secret_store(settings.secret_backend)
"""

from envgg.config.settings import (
    LOG_LEVELS,
    SECRET_BACKENDS,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "SECRET_BACKENDS",
    "LOG_LEVELS",
    "get_settings",
    "reset_settings",
]
