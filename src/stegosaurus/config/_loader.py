# pyright: reportAny=false, reportExplicitAny=false
"""Settings sources: the TOML settings file and `STEGOSAURUS_*` variables."""

from __future__ import annotations

import os
import tomllib
from typing import TYPE_CHECKING, Any

import yaml

from stegosaurus.exceptions import ConfigLoadError
from stegosaurus.templating import MergeStrategy, merge_context

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

ENV_PREFIX = "STEGOSAURUS_"


def read_settings_file(path: Path) -> dict[str, Any]:
    """Parse a `stegosaurus.toml` file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigLoadError: If the file is not valid TOML.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        # lineno/colno only exist on newer interpreters; the message always has them
        raise ConfigLoadError(
            f"Failed to parse TOML file: {e}",
            path=path,
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
        ) from e


def settings_from_env(
    environ: Mapping[str, str] | None = None,
    prefix: str = ENV_PREFIX,
) -> dict[str, Any]:
    """Collect settings from `PREFIX_SECTION__KEY` environment variables.

    `STEGOSAURUS_SITE__OUTPUT_DIR=public` sets `site.output_dir`. Values are
    read as YAML scalars or flow collections, so `true`, `3` and `[a, b]` keep
    their types; anything YAML cannot parse stays a string. Names without a
    `__` separator, such as `STEGOSAURUS_DEBUG`, are not settings.

    Args:
        environ: Variables to read. Defaults to `os.environ`.
        prefix: Variable name prefix.

    Returns:
        Nested settings mapping.
    """
    if environ is None:
        environ = os.environ

    settings: dict[str, Any] = {}
    for name, raw in environ.items():
        if not name.startswith(prefix) or "__" not in name:
            continue
        *sections, key = name.removeprefix(prefix).lower().split("__")
        table = settings
        for section in sections:
            child = table.get(section)
            if not isinstance(child, dict):
                child = table[section] = {}
            table = child
        table[key] = _env_value(raw)
    return settings


def _env_value(raw: str) -> Any:
    if not raw:
        return raw
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


def merge_settings(layers: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Merge settings layers, later layers taking precedence.

    Tables present in several layers are merged key by key; any other value
    is replaced. The result shares no structure with the inputs.
    """
    merged: dict[str, Any] = {}
    for layer in layers:
        merged = merge_context(merged, layer, strategy=MergeStrategy.DEEP)  # pyright: ignore[reportArgumentType]
    return merged
