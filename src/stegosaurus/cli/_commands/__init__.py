"""Stegosaurus CLI commands."""
# pyright: reportUnusedCallResult=false

from __future__ import annotations

from typing import TYPE_CHECKING

from ._build import app as build_app
from ._context import CLIContext, OutputFormat
from ._plan import app as plan_app
from ._shared import (
    ExitCode,
    FormattableData,
    exit_code_for_exception,
    exit_with_error,
    format_json,
    format_table,
)

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "CLIContext",
    "ExitCode",
    "FormattableData",
    "OutputFormat",
    "build_app",
    "exit_code_for_exception",
    "exit_with_error",
    "format_json",
    "format_table",
    "plan_app",
    "register_commands",
]


def register_commands(app: App) -> None:
    app.command(build_app)
    app.command(plan_app)
