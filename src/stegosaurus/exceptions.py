"""Stegosaurus exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class StegosaurusError(Exception):
    """Base exception for Stegosaurus errors."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(StegosaurusError):
    """Base exception for tool configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when the settings file cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source


# =============================================================================
# Site Build Exceptions
# =============================================================================


class SiteError(StegosaurusError):
    """Base exception for errors that abort a site build.

    Attributes:
        path: The file or directory the failure is attributed to.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and the offending path.

        Args:
            message: Human-readable error message.
            path: The file or directory the failure is attributed to.
        """
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path: Path | None = path


class ConfigReadError(SiteError):
    """Raised when the global context file exists but cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message, path=path)
        self.line: int | None = line
        self.column: int | None = column


class TemplateCompileError(SiteError):
    """Raised when a partial or template body fails to compile.

    Attributes:
        name: The template name the source was registered under.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        name: str | None = None,
    ) -> None:
        """Initialize with error message and template context."""
        super().__init__(message, path=path)
        self.name: str | None = name


class DuplicateTemplateError(TemplateCompileError):
    """Raised when two partials derive the same registration name.

    Attributes:
        existing_path: The file that registered the name first.
    """

    def __init__(
        self,
        message: str,
        *,
        name: str,
        path: Path | None = None,
        existing_path: Path | None = None,
    ) -> None:
        """Initialize with error message and both colliding files."""
        super().__init__(message, path=path, name=name)
        self.existing_path: Path | None = existing_path


class FrontMatterFormatError(SiteError):
    """Raised when an opening front-matter delimiter has no closing delimiter."""


class FrontMatterParseError(SiteError):
    """Raised when the front-matter block is not a valid YAML mapping."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message, path=path)
        self.line: int | None = line
        self.column: int | None = column


class TemplateExecutionError(SiteError):
    """Raised when a template fails while rendering."""


class SiteIOError(SiteError):
    """Raised when reading, writing, or copying a file fails."""
