# pyright: reportExplicitAny=false, reportAny=false
"""Validated Stegosaurus settings."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from stegosaurus.config._defaults import DEFAULT_CONFIG, SETTINGS_FILENAME
from stegosaurus.config._loader import (
    merge_settings,
    read_settings_file,
    settings_from_env,
)
from stegosaurus.config._models._logging import LoggingConfig
from stegosaurus.config._models._site import SiteSettings, TemplateSettings
from stegosaurus.exceptions import ConfigValidationError
from stegosaurus.templating import EnvironmentConfig, SiteConfig

if TYPE_CHECKING:
    from typing import Self


class Config(BaseModel):
    """Validated Stegosaurus settings.

    Build instances with `load()` (defaults, then the settings file, then
    `STEGOSAURUS_*` variables) or `from_dict()`.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    site: SiteSettings = Field(default_factory=SiteSettings)
    templates: TemplateSettings = Field(default_factory=TemplateSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, source: Path | None = None) -> Self:
        """Validate `data` laid over the defaults.

        Args:
            data: Partial settings mapping.
            source: Settings file `data` came from, for diagnostics.

        Raises:
            ConfigValidationError: For the first invalid value.
        """
        merged = merge_settings([DEFAULT_CONFIG, data])
        try:
            return cls.model_validate(merged)
        except ValidationError as e:
            error = e.errors()[0]
            key = ".".join(str(part) for part in error["loc"])
            ctx = error.get("ctx") or {}
            raise ConfigValidationError(
                f"Invalid configuration for '{key}': {error['msg']}",
                key=key,
                value=error.get("input"),
                expected=str(ctx.get("expected", error["type"])),
                source=str(source) if source is not None else None,
            ) from e

    @classmethod
    def load(
        cls,
        *,
        config_path: Path | None = None,
        project_root: Path | None = None,
        include_env: bool = True,
    ) -> Self:
        """Load settings for a project.

        Args:
            config_path: Explicit settings file. Must exist when given.
            project_root: Directory searched for `stegosaurus.toml` when no
                explicit path is given. Defaults to the working directory.
            include_env: Apply `STEGOSAURUS_SECTION__KEY` variables.

        Raises:
            FileNotFoundError: If `config_path` does not exist.
            ConfigLoadError: If the settings file is not valid TOML.
            ConfigValidationError: If a setting is invalid.
        """
        if config_path is None:
            root = project_root if project_root is not None else Path.cwd()
            candidate = root / SETTINGS_FILENAME
            config_path = candidate if candidate.is_file() else None

        layers: list[dict[str, Any]] = []
        if config_path is not None:
            layers.append(read_settings_file(config_path))
        if include_env:
            layers.append(settings_from_env())
        return cls.from_dict(merge_settings(layers), source=config_path)

    def site_config(self, project_root: Path | None = None) -> SiteConfig:
        """Build the run-scoped site configuration.

        Args:
            project_root: Directory relative site paths resolve against.
                Defaults to the working directory.

        Returns:
            SiteConfig with absolute paths.
        """
        root = (project_root if project_root is not None else Path.cwd()).resolve()
        templates = self.templates
        return SiteConfig(
            template_dir=root / self.site.template_dir,
            output_dir=root / self.site.output_dir,
            context_file=root / self.site.context_file,
            partial_prefix=templates.partial_prefix,
            extension=templates.extension,
            merge_strategy=templates.merge_strategy,
            environment=EnvironmentConfig(
                autoescape=templates.autoescape,
                trim_blocks=templates.trim_blocks,
                lstrip_blocks=templates.lstrip_blocks,
                keep_trailing_newline=templates.keep_trailing_newline,
                strict_undefined=templates.strict_undefined,
            ),
        )
