"""Template context loading, duplication, and front-matter merging."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import TYPE_CHECKING, Any, cast

import yaml

from stegosaurus.exceptions import ConfigReadError, FrontMatterParseError

from ._models import MergeStrategy

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

# Type aliases for YAML-shaped context data
type YAMLPrimitive = str | int | float | bool | date | datetime | bytes | None
type YAMLKey = str | int | float | bool | date | datetime | None
type YAMLValue = YAMLPrimitive | list[YAMLValue] | dict[YAMLKey, YAMLValue]
type Context = dict[YAMLKey, YAMLValue]

_IMMUTABLE_TYPES = (str, bytes, int, float, bool, date, datetime, time, frozenset)


def parse_yaml_mapping(
    data: bytes | str,
    *,
    path: Path | None = None,
    error_cls: type[ConfigReadError | FrontMatterParseError] = ConfigReadError,
) -> Context:
    """Parse a YAML document that must be a mapping.

    An empty document yields an empty mapping.

    Args:
        data: Raw YAML document.
        path: File the document came from, for diagnostics.
        error_cls: Exception raised on syntax errors or non-mapping documents.

    Returns:
        The parsed mapping.

    Raises:
        ConfigReadError: Default error for invalid documents.
        FrontMatterParseError: When requested via `error_cls`.
    """
    try:
        parsed = yaml.safe_load(data)  # pyright: ignore[reportAny]
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line = mark.line + 1 if mark is not None else None
        column = mark.column + 1 if mark is not None else None
        msg = f"Could not parse YAML: {e}"
        raise error_cls(msg, path=path, line=line, column=column) from e

    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        msg = f"Expected a YAML mapping, got {type(parsed).__name__}"  # pyright: ignore[reportAny]
        raise error_cls(msg, path=path)
    return cast("Context", parsed)


def load_context(path: Path) -> Context:
    """Load the global context document.

    Args:
        path: Path to the YAML context file.

    Returns:
        The parsed context, or an empty mapping if the file does not exist.

    Raises:
        ConfigReadError: If the file exists but cannot be read or parsed.
    """
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        return {}
    except OSError as e:
        msg = f"Could not read context file: {e}"
        raise ConfigReadError(msg, path=path) from e

    return parse_yaml_mapping(data, path=path)


def copy_context(value: Any) -> Any:  # pyright: ignore[reportAny, reportExplicitAny]
    """Recursively duplicate a context value.

    Mappings, lists, tuples, and sets are rebuilt so that the copy shares no
    mutable structure with the original. Immutable scalars are shared.

    Args:
        value: The value to copy.

    Returns:
        An independent copy of the value.

    Raises:
        TypeError: If the value is not part of the YAML value model.
    """
    if isinstance(value, dict):
        return {k: copy_context(v) for k, v in value.items()}  # pyright: ignore[reportUnknownVariableType]
    if isinstance(value, list):
        return [copy_context(item) for item in value]  # pyright: ignore[reportUnknownVariableType]
    if isinstance(value, tuple):
        return tuple(copy_context(item) for item in value)  # pyright: ignore[reportUnknownVariableType]
    if isinstance(value, set):
        return set(value)  # pyright: ignore[reportUnknownArgumentType]
    if value is None or isinstance(value, _IMMUTABLE_TYPES):
        return value
    msg = f"Cannot copy context value of type {type(value).__name__}"  # pyright: ignore[reportAny]
    raise TypeError(msg)


def _overlay_deep(target: dict[Any, Any], overlay: Mapping[Any, Any]) -> None:  # pyright: ignore[reportExplicitAny]
    for key, value in overlay.items():  # pyright: ignore[reportAny]
        current = target.get(key)  # pyright: ignore[reportAny]
        if isinstance(current, dict) and isinstance(value, dict):
            _overlay_deep(current, value)  # pyright: ignore[reportUnknownArgumentType]
        else:
            target[key] = copy_context(value)


def merge_context(
    base: Mapping[YAMLKey, YAMLValue],
    frontmatter: Mapping[YAMLKey, YAMLValue] | None,
    *,
    strategy: MergeStrategy = MergeStrategy.SHALLOW,
) -> Context:
    """Produce a per-file context from the root context and front matter.

    The base is duplicated first and never mutated. Front-matter keys replace
    or add entries; keys absent from the front matter keep their base value.

    Args:
        base: The root context.
        frontmatter: Parsed front matter, or None when the file has none.
        strategy: SHALLOW replaces overlapping top-level values wholesale;
            DEEP merges overlapping mappings recursively.

    Returns:
        A new context sharing no mutable structure with either input.
    """
    result = cast("Context", copy_context(dict(base)))
    if not frontmatter:
        return result

    if strategy is MergeStrategy.DEEP:
        _overlay_deep(result, frontmatter)
    else:
        for key, value in frontmatter.items():
            result[key] = copy_context(value)
    return result
