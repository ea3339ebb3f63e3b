"""Stegosaurus settings.

This module provides loading, validation, and typed access to the tool's
own settings (`stegosaurus.toml` and `STEGOSAURUS_*` environment variables).
Template data lives in the global context file, not here.

Example:
    >>> from stegosaurus.config import Config
    >>> config = Config.load()
    >>> config.site.output_dir
    'output'
"""

from stegosaurus.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
)

from ._defaults import DEFAULT_CONFIG, SETTINGS_FILENAME
from ._loader import ENV_PREFIX, merge_settings, read_settings_file, settings_from_env
from ._models import (
    Config,
    LogFormat,
    LoggingConfig,
    LogLevel,
    SiteSettings,
    TemplateSettings,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ENV_PREFIX",
    "SETTINGS_FILENAME",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "SiteSettings",
    "TemplateSettings",
    "merge_settings",
    "read_settings_file",
    "settings_from_env",
]
