"""gmrc tool configuration and logging."""

from __future__ import annotations

from typing import Any

from gmrc.config.logging import configure_logging
from gmrc.config.logging import get_logger as _get_logger
from gmrc.config.settings import (
    AppSettings,
    clear_app_settings_cache,
    get_app_settings,
    set_app_settings,
)

__all__ = [
    "AppSettings",
    "clear_app_settings_cache",
    "configure_logging",
    "get_app_settings",
    "get_logger",
    "set_app_settings",
]

_logger_cache: dict[str, Any] = {}


def get_logger(name: str) -> Any:
    """Get a logger instance for ``name``.

    Getting a logger never configures logging; the CLI does that once at
    startup. Loggers are cached so module-level lookups share one instance.

    Args:
        name: Logger name (usually __name__).

    Returns:
        structlog logger emitting stdlib records.
    """
    if name not in _logger_cache:
        _logger_cache[name] = _get_logger(name)
    return _logger_cache[name]
