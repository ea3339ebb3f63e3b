"""Configuration models."""

from ._config import Config
from ._logging import LogFormat, LoggingConfig, LogLevel
from ._site import SiteSettings, TemplateSettings

__all__ = [
    "Config",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "SiteSettings",
    "TemplateSettings",
]
