"""Jinja2 Environment factory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jinja2 import BaseLoader, Environment


@dataclass(slots=True, frozen=True)
class EnvironmentConfig:
    """Configuration for Jinja2 Environment.

    Attributes:
        autoescape: Enable autoescaping (default: False for text templates).
        trim_blocks: Remove first newline after a block tag.
        lstrip_blocks: Strip leading whitespace before block tags.
        keep_trailing_newline: Preserve trailing newline in templates.
        strict_undefined: Fail rendering when a template references a
            value missing from the context.
    """

    autoescape: bool = False
    trim_blocks: bool = False
    lstrip_blocks: bool = False
    keep_trailing_newline: bool = True
    strict_undefined: bool = True


def create_environment(
    loader: BaseLoader,
    *,
    config: EnvironmentConfig | None = None,
) -> Environment:
    """Create a Jinja2 Environment around `loader`.

    The environment is configured for text templates by default, with no
    autoescaping, trailing newline preservation, and strict undefined values.

    Args:
        loader: Loader resolving template names.
        config: Optional environment configuration. If None, uses defaults.

    Returns:
        Configured Jinja2 Environment.
    """
    from jinja2 import Environment, StrictUndefined, Undefined  # noqa: PLC0415

    if config is None:
        config = EnvironmentConfig()

    return Environment(
        loader=loader,
        autoescape=config.autoescape,  # noqa: S701
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
        keep_trailing_newline=config.keep_trailing_newline,
        undefined=StrictUndefined if config.strict_undefined else Undefined,
    )
