"""Front-matter splitting for template files.

A template may begin with a YAML document fenced by two delimiter lines::

    ---
    title: About
    ---
    <h1>{{ title }}</h1>

Only a delimiter on the very first line opens front matter. Both delimiter
lines, including their line endings, are removed from the returned body.
"""

from __future__ import annotations

import codecs
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from stegosaurus.exceptions import (
    FrontMatterFormatError,
    FrontMatterParseError,
    SiteIOError,
)

from ._context import parse_yaml_mapping

if TYPE_CHECKING:
    from pathlib import Path

    from ._context import Context

DELIMITER = "---"

_DELIMITER_PATTERN = rb"[ \t]*---[ \t]*(?:\r?\n|\Z)"
# match() anchors the opening line at an offset; ^ would not match after a BOM
_OPENING_LINE = re.compile(_DELIMITER_PATTERN)
_CLOSING_LINE = re.compile(rb"^" + _DELIMITER_PATTERN, re.MULTILINE)


@dataclass(frozen=True, slots=True)
class SplitResult:
    """A template body with its front matter removed.

    Attributes:
        body: Remaining template bytes.
        frontmatter: Parsed front matter, or None if the file has none.
    """

    body: bytes
    frontmatter: Context | None

    @property
    def has_frontmatter(self) -> bool:
        """Return True if the source began with a front-matter block."""
        return self.frontmatter is not None


def split_frontmatter(data: bytes, *, path: Path | None = None) -> SplitResult:
    """Strip a leading front-matter block from raw template bytes.

    Args:
        data: The full file contents.
        path: File the contents came from, for diagnostics.

    Returns:
        SplitResult with the body and parsed front matter. When the content
        does not start with a delimiter line, the body is `data` unchanged
        and `frontmatter` is None.

    Raises:
        FrontMatterFormatError: If the closing delimiter line is missing.
        FrontMatterParseError: If the block is not a valid YAML mapping.
    """
    start = len(codecs.BOM_UTF8) if data.startswith(codecs.BOM_UTF8) else 0
    opening = _OPENING_LINE.match(data, start)
    if opening is None:
        return SplitResult(body=data, frontmatter=None)

    closing = _CLOSING_LINE.search(data, opening.end())
    if closing is None:
        msg = f"Cannot find end of front matter (missing closing {DELIMITER!r} line)"
        raise FrontMatterFormatError(msg, path=path)

    document = data[opening.end() : closing.start()]
    frontmatter = parse_yaml_mapping(
        document, path=path, error_cls=FrontMatterParseError
    )
    return SplitResult(body=data[closing.end() :], frontmatter=frontmatter)


def load_frontmatter_file(path: Path) -> SplitResult:
    """Read a template file and split off its front matter.

    Args:
        path: Path to the template file.

    Returns:
        SplitResult for the file's contents.

    Raises:
        SiteIOError: If the file cannot be read.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        msg = f"Could not read template: {e}"
        raise SiteIOError(msg, path=path) from e
    return split_frontmatter(data, path=path)
