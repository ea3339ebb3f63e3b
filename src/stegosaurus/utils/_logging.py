"""Logging utilities for Stegosaurus.

This module provides standalone structlog logger factories that write
JSON-formatted or text-formatted logs to a log file or stderr. Each logger is
self-contained and does not modify global structlog configuration.
"""

from __future__ import annotations

import logging
import sys
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TextIO, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

LogFormatType = Literal["json", "text"]


def _log_level_from_string(level: str, *, respect_env: bool = False) -> int:
    """Convert a log level string to a logging level integer.

    Args:
        level: Log level string (debug, info, warning, error).
        respect_env: If True, STEGOSAURUS_DEBUG overrides to DEBUG level.

    Returns:
        The logging level as an integer.
    """
    if respect_env and getenv("STEGOSAURUS_DEBUG", None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.INFO)


def _create_logger(
    stream: TextIO,
    *,
    log_level: int,
    log_format: LogFormatType = "text",
) -> FilteringBoundLogger:
    """Create a standalone structlog logger writing to `stream`.

    Args:
        stream: Open text stream receiving one line per event.
        log_level: Minimum level emitted.
        log_format: Output format, either "json" or "text".

    Returns:
        A configured FilteringBoundLogger instance.
    """
    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Text format: "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    wrapper_class = structlog.make_filtering_bound_logger(log_level)

    # wrap_logger leaves the global structlog configuration untouched
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.WriteLoggerFactory(file=stream)(),
            processors=processors,
            wrapper_class=wrapper_class,
            context_class=dict,
        ),
    )


def create_cli_logger(
    *,
    level: str = "info",
    log_format: LogFormatType = "text",
    log_file: str = "",
) -> FilteringBoundLogger:
    """Create a logger for CLI commands.

    Writes structured logs to `log_file` when given (opened in append mode,
    parent directories created), otherwise to stderr.

    The log level can be overridden by environment variables:
    - STEGOSAURUS_DEBUG: If set, enables DEBUG level logging regardless of config

    Args:
        level: Log level threshold (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to log file (stderr if empty).

    Returns:
        A FilteringBoundLogger instance configured for CLI logging.

    Raises:
        OSError: If the log file cannot be created or opened.
    """
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        stream: TextIO = log_path.open("a", encoding="utf-8")
    else:
        stream = sys.stderr

    return _create_logger(
        stream,
        log_level=_log_level_from_string(level, respect_env=True),
        log_format=log_format,
    )
