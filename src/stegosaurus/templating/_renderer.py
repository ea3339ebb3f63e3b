"""Per-file template rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jinja2 import TemplateError

from stegosaurus.exceptions import (
    SiteIOError,
    TemplateCompileError,
    TemplateExecutionError,
)

from ._context import merge_context
from ._frontmatter import load_frontmatter_file
from ._models import ROOT_TEMPLATE_NAME, MergeStrategy

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from structlog.typing import FilteringBoundLogger

    from ._context import YAMLKey, YAMLValue
    from ._namespace import TemplateNamespace


def render_file(
    source: Path,
    destination: Path,
    *,
    base: TemplateNamespace,
    context: Mapping[YAMLKey, YAMLValue],
    strategy: MergeStrategy = MergeStrategy.SHALLOW,
    logger: FilteringBoundLogger | None = None,
) -> Path:
    """Render one template file to `destination`.

    The file's front matter is merged into a copy of `context`, and its body
    is registered as the root template of a fresh clone of `base`, so neither
    the shared partials nor the root context are touched.

    Args:
        source: Template file to render.
        destination: Output file, overwritten if present.
        base: Namespace holding the shared partials.
        context: Root template context.
        strategy: How front matter is merged into the context.
        logger: Receives a `template_rendered` event.

    Returns:
        The destination path.

    Raises:
        FrontMatterFormatError: If the front matter is not closed.
        FrontMatterParseError: If the front matter is not a YAML mapping.
        TemplateCompileError: If the body is not valid template syntax.
        TemplateExecutionError: If rendering fails.
        SiteIOError: If the source cannot be read or the output written.
    """
    namespace = base.clone()
    split = load_frontmatter_file(source)
    file_context = merge_context(context, split.frontmatter, strategy=strategy)

    try:
        body = split.body.decode("utf-8")
    except UnicodeDecodeError as e:
        msg = f"Template is not valid UTF-8: {e}"
        raise TemplateCompileError(msg, path=source, name=ROOT_TEMPLATE_NAME) from e

    _ = namespace.register(ROOT_TEMPLATE_NAME, body, path=source)
    template = namespace.get_template(ROOT_TEMPLATE_NAME)

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("w", encoding="utf-8", newline="") as fp:
            template.stream(file_context).dump(fp)
    except TemplateError as e:
        # TemplateNotFound is also an OSError, so template errors are checked first
        msg = f"Error rendering template: {e}"
        raise TemplateExecutionError(msg, path=source) from e
    except OSError as e:
        msg = f"Could not write {destination}: {e}"
        raise SiteIOError(msg, path=source) from e
    except Exception as e:
        msg = f"Error rendering template: {type(e).__name__}: {e}"
        raise TemplateExecutionError(msg, path=source) from e

    if logger is not None:
        logger.info("template_rendered", path=str(source), output=str(destination))
    return destination
