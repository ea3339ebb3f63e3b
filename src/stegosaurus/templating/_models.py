# ruff: noqa: TC003  # Path needed at runtime for dataclass fields
"""Value types shared by the site build pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from ._environment import EnvironmentConfig

ROOT_TEMPLATE_NAME = "<root>"
"""Name each file's own body is registered under for execution."""


class MergeStrategy(StrEnum):
    """How front matter is overlaid onto the root context.

    SHALLOW replaces top-level values wholesale. DEEP merges mappings that
    appear on both sides recursively; sequences and scalars are replaced.
    """

    SHALLOW = "shallow"
    DEEP = "deep"


class FileKind(StrEnum):
    """Classification of a file found under the template root."""

    PARTIAL = "partial"
    TEMPLATE = "template"
    COPY = "copy"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Run-scoped settings for one site build.

    Attributes:
        template_dir: Root of the template tree.
        output_dir: Root the output tree is written to.
        context_file: Global YAML context document (may not exist).
        partial_prefix: Leading character marking a file as a partial.
        extension: Extension marking a file as a template.
        merge_strategy: How front matter overlays the root context.
        environment: Jinja2 environment options.
    """

    template_dir: Path
    output_dir: Path
    context_file: Path
    partial_prefix: str = "_"
    extension: str = ".tmpl"
    merge_strategy: MergeStrategy = MergeStrategy.SHALLOW
    environment: EnvironmentConfig = field(default_factory=EnvironmentConfig)

    @classmethod
    def at(cls, root: Path, **overrides: object) -> SiteConfig:
        """Build a config using the default layout beneath `root`.

        Args:
            root: Project root holding `templates/`, `output/` and `context.yml`.
            **overrides: Field values replacing the defaults.

        Returns:
            SiteConfig rooted at `root`.
        """
        fields: dict[str, object] = {
            "template_dir": root / "templates",
            "output_dir": root / "output",
            "context_file": root / "context.yml",
        }
        fields.update(overrides)
        return cls(**fields)  # pyright: ignore[reportArgumentType]

    def is_partial(self, path: Path) -> bool:
        """Return True if the file name marks a partial template."""
        return path.name.startswith(self.partial_prefix) and self.is_template(path)

    def is_template(self, path: Path) -> bool:
        """Return True if the file name carries the template extension."""
        return path.suffix == self.extension

    def partial_name(self, path: Path) -> str:
        """Derive the registration name of a partial from its file name."""
        return path.name.removeprefix(self.partial_prefix).removesuffix(
            self.extension
        )


@dataclass(frozen=True, slots=True)
class FileTask:
    """One unit of work planned by the tree walker.

    Attributes:
        source: File under the template root.
        destination: Mirrored output path, or None for partials.
        kind: How the file is processed.
    """

    source: Path
    destination: Path | None
    kind: FileKind


@dataclass(slots=True)
class BuildResult:
    """Summary of a completed site build."""

    partials: list[Path] = field(default_factory=list)
    rendered: list[Path] = field(default_factory=list)
    copied: list[Path] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of files written to the output tree."""
        return len(self.rendered) + len(self.copied)
