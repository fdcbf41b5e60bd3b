"""Logging configuration for gmrc.

Library modules log through ordinary stdlib loggers named after the module,
so an application importing gmrc keeps full control of where (and whether)
those records go. Only the command-line tool installs handlers, by calling
:func:`configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.processors import TimeStamper, add_log_level, format_exc_info
from structlog.stdlib import (
    ExtraAdder,
    ProcessorFormatter,
    add_logger_name,
    filter_by_level,
    render_to_log_kwargs,
)

from gmrc.config.settings import AppSettings

# Turns structlog calls into plain stdlib records; key-value pairs become
# record attributes.
_LOGGER_PROCESSORS: list[Any] = [
    merge_contextvars,
    filter_by_level,
    render_to_log_kwargs,
]


def _foreign_pre_chain(log_format: str) -> list[Any]:
    chain: list[Any] = [
        TimeStamper(fmt="iso"),
        add_log_level,
        add_logger_name,
        ExtraAdder(),
    ]
    if log_format in ("json", "structured"):
        chain.append(format_exc_info)
    return chain


def _build_formatter(log_format: str) -> ProcessorFormatter:
    """Create the stdlib formatter that renders gmrc records."""
    renderer: Any
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    elif log_format == "structured":
        renderer = structlog.processors.KeyValueRenderer(
            key_order=["timestamp", "level", "logger", "event"],
            drop_missing=True,
        )
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_foreign_pre_chain(log_format),
    )


def configure_logging(settings: AppSettings) -> None:
    """Configure logging based on settings.

    Replaces the root logger's handlers, so this is meant for the
    command-line entry point and not for code importing gmrc as a library.

    Args:
        settings: Tool settings containing logging configuration.

    Raises:
        ValueError: If the log level is not known to the logging module.
    """
    try:
        log_level = getattr(logging, settings.log_level.upper())
    except AttributeError as e:
        valid_levels = [
            name for name in logging.getLevelNamesMapping() if name != "NOTSET"
        ]
        raise ValueError(
            f"Invalid log level '{settings.log_level}'. "
            f"Valid levels are: {', '.join(sorted(valid_levels))}"
        ) from e

    formatter = _build_formatter(settings.log_format)

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    handlers.append(console_handler)

    if settings.log_file:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(settings.log_file),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)
    logging.getLogger().setLevel(log_level)


def get_logger(name: str) -> Any:
    """Get a structlog logger that emits stdlib records on logger ``name``.

    Works whether or not :func:`configure_logging` has run; without it the
    records follow whatever logging setup the host application has.

    Args:
        name: Logger name (usually __name__).

    Returns:
        structlog bound logger wrapping ``logging.getLogger(name)``.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_LOGGER_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
