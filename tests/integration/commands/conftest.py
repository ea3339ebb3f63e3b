from collections.abc import Callable

import pytest
from rich.console import Console

from stegosaurus.cli import CLIContext, create_app


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    import os  # noqa: PLC0415

    for key in list(os.environ):
        if key.startswith("STEGOSAURUS_"):
            monkeypatch.delenv(key)


@pytest.fixture
def stegosaurus_cli(console: Console) -> Callable[..., int]:
    """Run the CLI with global options and return the exit code.

    Arguments go through the meta app, so `--project-root`, `--config`,
    `--verbose` and `--quiet` are honored.
    """
    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        try:
            app.meta(list(args))
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0
        finally:
            CLIContext.reset()

    return _run
