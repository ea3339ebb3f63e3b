"""The command-line interface for Stegosaurus."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from stegosaurus.config import Config, ConfigError
from stegosaurus.utils import create_cli_logger

from ._commands import (
    CLIContext,
    exit_code_for_exception,
    exit_with_error,
    register_commands,
)

_HELP = "Render a directory of Jinja2 templates into a static file tree."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="stegosaurus",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[bool, Parameter(help="Enable verbose output")] = False,
        quiet: Annotated[bool, Parameter(help="Suppress non-essential output")] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to settings file")
        ] = None,
        project_root: Annotated[
            Path | None, Parameter(name="--project-root", help="Path to project root")
        ] = None,
    ) -> None:
        """Launch Stegosaurus with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            verbose: Enable verbose output with additional details.
            quiet: Suppress non-essential output.
            config: Explicit path to settings file.
            project_root: Directory holding templates, output and context file.
        """
        try:
            loaded_config = Config.load(config_path=config, project_root=project_root)
        except (ConfigError, OSError) as e:
            exit_with_error(
                f"Failed to load settings: {e}",
                exit_code_for_exception(e),
                console=error_console,
            )

        level = loaded_config.logging.level.value
        if verbose:
            level = "debug"
        elif quiet:
            level = "warning"
        try:
            cli_logger = create_cli_logger(
                level=level,
                log_format=loaded_config.logging.format.value,  # type: ignore[arg-type]
                log_file=loaded_config.logging.file,
            )
        except OSError as e:
            exit_with_error(
                f"Failed to open log file: {e}",
                exit_code_for_exception(e),
                console=error_console,
            )

        ctx = CLIContext(
            config=loaded_config,
            verbose=verbose,
            quiet=quiet,
            project_root=project_root,
            logger=cli_logger,
            console=console,
        )
        CLIContext.set_current(ctx)

        try:
            app(tokens)
        finally:
            CLIContext.reset()

    register_commands(app)
    return app


def main() -> None:
    """Default entrypoint for the `stegosaurus` CLI."""
    app = create_app()
    app.meta()


if __name__ == "__main__":
    main()
