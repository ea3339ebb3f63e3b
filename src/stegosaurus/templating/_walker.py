"""Template tree traversal and static file copying."""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

from stegosaurus.exceptions import SiteIOError

from ._models import FileKind, FileTask

if TYPE_CHECKING:
    from pathlib import Path

    from structlog.typing import FilteringBoundLogger

    from ._models import SiteConfig


def iter_template_files(template_dir: Path) -> list[Path]:
    """List every file beneath `template_dir`, sorted by relative path.

    Directories are descended into but never returned.

    Raises:
        SiteIOError: If `template_dir` is not a directory.
    """
    if not template_dir.is_dir():
        msg = "Template directory does not exist"
        raise SiteIOError(msg, path=template_dir)

    files = [path for path in template_dir.rglob("*") if path.is_file()]
    return sorted(files, key=lambda path: path.relative_to(template_dir).parts)


def classify(path: Path, config: SiteConfig) -> FileKind:
    """Decide how a file under the template root is processed.

    Args:
        path: File beneath the template root.
        config: Site conventions.

    Returns:
        PARTIAL for escaped templates, SKIPPED for other escaped files,
        TEMPLATE for files carrying the template extension, COPY otherwise.
    """
    if path.name.startswith(config.partial_prefix):
        return FileKind.PARTIAL if config.is_template(path) else FileKind.SKIPPED
    if config.is_template(path):
        return FileKind.TEMPLATE
    return FileKind.COPY


def output_path(path: Path, config: SiteConfig) -> Path:
    """Mirror a file under the template root onto the output root.

    Template files lose their template extension.
    """
    destination = config.output_dir / path.relative_to(config.template_dir)
    if config.is_template(path):
        destination = destination.with_name(
            destination.name.removesuffix(config.extension)
        )
    return destination


def plan_site(config: SiteConfig) -> list[FileTask]:
    """Plan the work for every file under the template root.

    Args:
        config: Site layout and conventions.

    Returns:
        One FileTask per file, in sorted relative-path order. Partials and
        skipped files have no destination.

    Raises:
        SiteIOError: If the template root does not exist or contains the
            output root.
    """
    if config.output_dir.resolve().is_relative_to(config.template_dir.resolve()):
        msg = f"Output directory {config.output_dir} is inside the template directory"
        raise SiteIOError(msg, path=config.template_dir)

    tasks: list[FileTask] = []
    for path in iter_template_files(config.template_dir):
        kind = classify(path, config)
        destination = (
            output_path(path, config)
            if kind in (FileKind.TEMPLATE, FileKind.COPY)
            else None
        )
        tasks.append(FileTask(source=path, destination=destination, kind=kind))
    return tasks


def copy_file(
    source: Path,
    destination: Path,
    *,
    logger: FilteringBoundLogger | None = None,
) -> Path:
    """Copy a file byte-for-byte, creating parent directories as needed.

    An existing destination is overwritten. Permissions, links and special
    files get no special treatment.

    Raises:
        SiteIOError: If the file cannot be copied.
    """
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        _ = shutil.copyfile(source, destination)
    except OSError as e:
        msg = f"Could not copy to {destination}: {e}"
        raise SiteIOError(msg, path=source) from e

    if logger is not None:
        logger.info("file_copied", path=str(source), output=str(destination))
    return destination
