"""Named template collections backed by a Jinja2 environment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from jinja2 import DictLoader, TemplateSyntaxError

from stegosaurus.exceptions import DuplicateTemplateError, TemplateCompileError

from ._environment import create_environment

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from jinja2 import Environment, Template

    from ._environment import EnvironmentConfig


@dataclass(frozen=True, slots=True)
class TemplateEntry:
    """A compiled template registered under a name.

    Attributes:
        name: Name the template is reachable by from other templates.
        source: Template source text.
        path: File the source was read from, if any.
    """

    name: str
    source: str
    path: Path | None = None


class TemplateNamespace:
    """A set of named templates sharing one lookup scope.

    Every registered template can include, import, or extend any other by
    name. Registration validates syntax eagerly and rejects duplicate names.
    Use `clone()` to obtain an independent copy before registering
    short-lived templates.
    """

    __slots__ = ("_entries", "_environment", "_sources")

    def __init__(self, config: EnvironmentConfig | None = None) -> None:
        """Create an empty namespace.

        Args:
            config: Jinja2 environment options shared by every template.
        """
        self._entries: dict[str, TemplateEntry] = {}
        self._sources: dict[str, str] = {}
        self._environment: Environment = create_environment(
            DictLoader(self._sources), config=config
        )

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[TemplateEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def names(self) -> list[str]:
        """Registered template names in registration order."""
        return list(self._entries)

    @property
    def environment(self) -> Environment:
        """The Jinja2 environment resolving names in this namespace."""
        return self._environment

    def register(
        self, name: str, source: str, *, path: Path | None = None
    ) -> TemplateEntry:
        """Compile `source` and register it under `name`.

        Args:
            name: Template name.
            source: Template source text.
            path: File the source was read from, for diagnostics.

        Returns:
            The registered entry.

        Raises:
            DuplicateTemplateError: If `name` is already registered.
            TemplateCompileError: If `source` is not valid template syntax.
        """
        existing = self._entries.get(name)
        if existing is not None:
            msg = f"Template {name!r} is already defined by {existing.path}"
            raise DuplicateTemplateError(
                msg, name=name, path=path, existing_path=existing.path
            )

        filename = str(path) if path is not None else None
        try:
            _ = self._environment.compile(source, name=name, filename=filename)
        except TemplateSyntaxError as e:
            msg = f"Invalid template syntax on line {e.lineno}: {e.message}"
            raise TemplateCompileError(msg, path=path, name=name) from e

        entry = TemplateEntry(name=name, source=source, path=path)
        self._entries[name] = entry
        self._sources[name] = source
        return entry

    def get_template(self, name: str) -> Template:
        """Load the compiled Jinja2 template registered under `name`.

        Raises:
            KeyError: If no template is registered under `name`.
        """
        if name not in self._entries:
            msg = f"Template {name!r} is not registered"
            raise KeyError(msg)
        return self._environment.get_template(name)

    def clone(self) -> TemplateNamespace:
        """Return an independent copy of this namespace.

        The copy shares compiled state with the original but owns its entry
        table: registering into either one never affects the other.
        """
        twin = TemplateNamespace.__new__(TemplateNamespace)
        twin._entries = dict(self._entries)  # noqa: SLF001
        twin._sources = dict(self._sources)  # noqa: SLF001
        twin._environment = self._environment.overlay(  # noqa: SLF001
            loader=DictLoader(twin._sources)  # noqa: SLF001
        )
        return twin
