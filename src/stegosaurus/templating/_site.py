"""Site build pipeline."""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

from stegosaurus.exceptions import SiteIOError

from ._context import load_context
from ._models import BuildResult, FileKind
from ._registry import load_base_templates
from ._renderer import render_file
from ._walker import copy_file, plan_site

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from ._models import SiteConfig


def clean_output(config: SiteConfig) -> None:
    """Remove the output root so the next build starts from nothing.

    Raises:
        SiteIOError: If the output root contains the template root or the
            context file, or cannot be removed.
    """
    output_dir = config.output_dir.resolve()
    for protected in (config.template_dir, config.context_file):
        if protected.resolve().is_relative_to(output_dir):
            msg = f"Refusing to clean output directory containing {protected}"
            raise SiteIOError(msg, path=config.output_dir)

    if not config.output_dir.exists():
        return
    try:
        shutil.rmtree(config.output_dir)
    except OSError as e:
        msg = f"Could not remove output directory: {e}"
        raise SiteIOError(msg, path=config.output_dir) from e


def build_site(
    config: SiteConfig,
    *,
    clean: bool = False,
    logger: FilteringBoundLogger | None = None,
) -> BuildResult:
    """Render the template tree into the output tree.

    Loads the global context once, registers every partial once, then renders
    or copies each remaining file in sorted order. The first error aborts the
    build; files already written are left in place.

    Args:
        config: Site layout and conventions.
        clean: Remove the output root before building.
        logger: Receives progress events.

    Returns:
        Summary of partials loaded and files written.

    Raises:
        SiteError: Any failure, naming the offending path.
    """
    context = load_context(config.context_file)
    if logger is not None:
        logger.debug(
            "context_loaded", path=str(config.context_file), keys=len(context)
        )

    tasks = plan_site(config)
    base = load_base_templates(config, tasks=tasks, logger=logger)

    if clean:
        clean_output(config)

    result = BuildResult()
    for task in tasks:
        if task.kind is FileKind.PARTIAL:
            result.partials.append(task.source)
        elif task.kind is FileKind.TEMPLATE and task.destination is not None:
            result.rendered.append(
                render_file(
                    task.source,
                    task.destination,
                    base=base,
                    context=context,
                    strategy=config.merge_strategy,
                    logger=logger,
                )
            )
        elif task.kind is FileKind.COPY and task.destination is not None:
            result.copied.append(
                copy_file(task.source, task.destination, logger=logger)
            )

    if logger is not None:
        logger.info(
            "build_finished",
            output=str(config.output_dir),
            rendered=len(result.rendered),
            copied=len(result.copied),
        )
    return result
