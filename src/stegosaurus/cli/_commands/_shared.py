# pyright: reportExplicitAny=false
"""Shared CLI utilities for commands.

This module provides common utilities used across CLI command implementations:
- Standardized exit codes and their mapping from exceptions
- Generic output formatters (JSON, table)
- Error reporting with an exit code
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Never

from rich.console import Console
from rich.markup import escape

from stegosaurus.exceptions import (
    ConfigLoadError,
    ConfigReadError,
    ConfigValidationError,
    FrontMatterFormatError,
    FrontMatterParseError,
    SiteIOError,
    TemplateCompileError,
    TemplateExecutionError,
)

# Type alias for formattable data - uses Any to match library signatures
FormattableData = dict[str, Any] | list[Any]

__all__ = [
    "ExitCode",
    "FormattableData",
    "exit_code_for_exception",
    "exit_with_error",
    "format_json",
    "format_table",
]


class ExitCode(IntEnum):
    """Standard exit codes for Stegosaurus CLI commands."""

    SUCCESS = 0
    LOAD_ERROR = 1
    VALIDATION_ERROR = 2
    NOT_FOUND = 3
    IO_ERROR = 4
    INTERNAL_ERROR = 5
    RENDER_ERROR = 6


def exit_code_for_exception(error: BaseException) -> ExitCode:
    """Map a build or configuration error to its exit code."""
    match error:
        case ConfigReadError() | ConfigLoadError():
            return ExitCode.LOAD_ERROR
        case (
            ConfigValidationError()
            | TemplateCompileError()
            | FrontMatterFormatError()
            | FrontMatterParseError()
        ):
            return ExitCode.VALIDATION_ERROR
        case FileNotFoundError():
            return ExitCode.NOT_FOUND
        case SiteIOError() | OSError():
            return ExitCode.IO_ERROR
        case TemplateExecutionError():
            return ExitCode.RENDER_ERROR
        case _:
            return ExitCode.INTERNAL_ERROR


def format_json(data: FormattableData) -> str:
    """Format data as indented JSON."""
    import orjson

    return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8")


def format_table(headers: list[str], rows: list[list[str]]) -> str:
    """Format data as a Markdown table.

    Args:
        headers: Column headers for the table.
        rows: List of rows, where each row is a list of cell values.

    Returns:
        Markdown table string representation.
    """
    from pytablewriter import MarkdownTableWriter

    writer = MarkdownTableWriter(
        headers=headers,
        value_matrix=rows,
        margin=1,
    )
    return writer.dumps()


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.INTERNAL_ERROR,
    *,
    console: Console | None = None,
) -> Never:
    """Print an error message and exit with the specified code.

    Args:
        message: The error message to display.
        code: The exit code to use (defaults to INTERNAL_ERROR).
        console: Optional Rich console for output. If not provided,
            a new stderr console will be created.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if console is None:
        console = Console(stderr=True)

    console.print(
        f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True
    )
    raise SystemExit(code)
