"""Shared test fixtures for Stegosaurus tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from stegosaurus.templating import SiteConfig

WriteFile = Callable[[str, str | bytes], Path]


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Create an empty project layout.

    Structure:
        tmp_path/
            site/
                templates/
    """
    root = tmp_path / "site"
    (root / "templates").mkdir(parents=True)
    return root


@pytest.fixture
def site_config(site_root: Path) -> SiteConfig:
    """Return the default SiteConfig rooted at site_root."""
    return SiteConfig.at(site_root)


@pytest.fixture
def write_template(site_root: Path) -> WriteFile:
    """Return a function writing a file beneath the template root."""

    def _write(relative: str, content: str | bytes) -> Path:
        path = site_root / "templates" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_context(site_root: Path) -> Callable[[str], Path]:
    """Return a function writing the global context file."""

    def _write(content: str) -> Path:
        path = site_root / "context.yml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def console() -> Console:
    return Console(
        width=120,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
