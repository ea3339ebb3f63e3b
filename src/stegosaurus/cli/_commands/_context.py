# pyright: reportUnusedCallResult=false
# ruff: noqa: TC003  # Path needed at runtime for dataclass field
"""CLI context for global state management.

This module provides thread-safe context management for CLI options and
loaded configuration. The CLIContext is set once at CLI startup and
made available to all commands via contextvars.
"""

from __future__ import annotations

import contextvars
import dataclasses
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rich.console import Console
    from structlog.typing import FilteringBoundLogger

    from stegosaurus.config import Config
    from stegosaurus.templating import SiteConfig


class OutputFormat(StrEnum):
    """Supported output formats for commands."""

    JSON = "json"
    TABLE = "table"
    PLAIN = "plain"


_current_cli_context: contextvars.ContextVar[CLIContext | None] = (
    contextvars.ContextVar("cli_context", default=None)
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI context with configuration and options.

    Attributes:
        config: Loaded settings.
        verbose: Enable verbose output with additional details.
        quiet: Suppress non-essential output.
        project_root: Directory site paths resolve against (cwd if None).
        logger: Structured logger for build progress.
        console: Console for command output (stdout if None).
    """

    config: Config = field(repr=False)
    verbose: bool = False
    quiet: bool = False
    project_root: Path | None = None
    logger: FilteringBoundLogger | None = field(default=None, repr=False)
    console: Console | None = field(default=None, repr=False)

    def site_config(
        self,
        *,
        template_dir: Path | None = None,
        output_dir: Path | None = None,
        context_file: Path | None = None,
    ) -> SiteConfig:
        """Build the site configuration, applying per-command path overrides.

        Override paths are resolved against the working directory.
        """
        site = self.config.site_config(self.project_root)
        overrides = {
            name: value.resolve()
            for name, value in (
                ("template_dir", template_dir),
                ("output_dir", output_dir),
                ("context_file", context_file),
            )
            if value is not None
        }
        return dataclasses.replace(site, **overrides) if overrides else site

    def get_console(self) -> Console:
        """Return the command output console."""
        if self.console is not None:
            return self.console
        from rich.console import Console

        return Console()

    @classmethod
    def get_current(cls) -> CLIContext:
        """Get current active CLIContext, or create a default if not set.

        Returns:
            The currently active CLIContext, or a default instance if none is set.
        """
        ctx = _current_cli_context.get()
        if ctx is not None:
            return ctx

        from stegosaurus.config import Config

        return cls(config=Config.from_dict({}))

    @classmethod
    def set_current(cls, ctx: CLIContext) -> None:
        """Set the current active CLIContext."""
        _current_cli_context.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Reset to default context.

        This is primarily useful for testing to ensure a clean state between tests.
        """
        _current_cli_context.set(None)
