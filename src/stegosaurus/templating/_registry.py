"""Base template registry: loads partials into a shared namespace."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stegosaurus.exceptions import SiteIOError, TemplateCompileError

from ._models import FileKind
from ._namespace import TemplateNamespace
from ._walker import plan_site

if TYPE_CHECKING:
    from collections.abc import Iterable

    from structlog.typing import FilteringBoundLogger

    from ._models import FileTask, SiteConfig


def load_base_templates(
    config: SiteConfig,
    *,
    tasks: Iterable[FileTask] | None = None,
    logger: FilteringBoundLogger | None = None,
) -> TemplateNamespace:
    """Register every partial under the template root in one namespace.

    A partial is registered under its file name with the partial prefix and
    template extension removed; its directory is not part of the name.

    Args:
        config: Site layout and conventions.
        tasks: Precomputed plan from `plan_site`. Planned afresh if omitted.
        logger: Receives a `template_loaded` event per partial.

    Returns:
        The base namespace holding all partials.

    Raises:
        DuplicateTemplateError: If two partials derive the same name.
        TemplateCompileError: If a partial is not valid template syntax.
        SiteIOError: If a partial cannot be read.
    """
    if tasks is None:
        tasks = plan_site(config)

    namespace = TemplateNamespace(config.environment)
    for task in tasks:
        if task.kind is not FileKind.PARTIAL:
            continue

        name = config.partial_name(task.source)
        try:
            source = task.source.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            msg = f"Template is not valid UTF-8: {e}"
            raise TemplateCompileError(msg, path=task.source, name=name) from e
        except OSError as e:
            msg = f"Could not read template: {e}"
            raise SiteIOError(msg, path=task.source) from e

        _ = namespace.register(name, source, path=task.source)
        if logger is not None:
            logger.info("template_loaded", path=str(task.source), name=name)

    return namespace
