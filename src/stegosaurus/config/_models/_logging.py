"""Logging settings model."""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class LogLevel(StrEnum):
    """Minimum level of emitted build events."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Rendering of log lines: `key=value` text or one JSON object per line."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty logs to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.TEXT
    file: str = ""
