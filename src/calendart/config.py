"""Configuration utilities for CALENDART.

This module centralizes the environment-driven settings used to set up
logging for applications built on CALENDART. The domain itself reads no
configuration.
"""

import logging
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

LOG_LEVEL_ENV = "CALENDART_LOG_LEVEL"  # pragma: no mutate
LOGGER_LEVELS_ENV = "CALENDART_LOGGER_LEVELS"  # pragma: no mutate
LOG_DEBUG_ENV = "CALENDART_LOG_DEBUG"  # pragma: no mutate

DEFAULT_LOG_LEVEL = logging.WARNING

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"", "0", "false", "no", "off"})


class ConfigError(Exception):
    """Base class for configuration errors."""


class InvalidSettingError(ConfigError):
    """Raised when an environment setting cannot be parsed."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid {name} setting {value!r}: {reason}")
        self.name = name
        self.value = value
        self.reason = reason


class InvalidLogLevelError(InvalidSettingError):
    """Raised when a log level setting cannot be parsed."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__("log level", value, reason)


@dataclass(frozen=True)
class LoggingSettings:
    """How console logging should behave.

    Attributes:
        level: Threshold for loggers without an override.
        logger_levels: Per-logger thresholds. An override applies to the named
            logger and its children; the longest matching name wins.
        debug: Show logger names, timestamps and source paths, and lower the
            default threshold to DEBUG.
    """

    level: int = DEFAULT_LOG_LEVEL
    logger_levels: Mapping[str, int] = field(default_factory=dict)
    debug: bool = False

    @property
    def default_level(self) -> int:
        """Threshold for loggers without an override."""
        return logging.DEBUG if self.debug else self.level

    @property
    def lowest_level(self) -> int:
        """The lowest threshold in effect for any logger."""
        return min([self.default_level, *self.logger_levels.values()])

    def threshold_for(self, logger_name: str) -> int:
        """Threshold applying to records of `logger_name`."""
        matches = [
            name
            for name in self.logger_levels
            if logger_name == name or logger_name.startswith(f"{name}.")
        ]
        if not matches:
            return self.default_level
        return self.logger_levels[max(matches, key=len)]


def parse_level(value: str) -> int:
    """Convert a level name such as ``"debug"`` into its numeric level.

    Raises:
        InvalidLogLevelError: If `value` is not a standard logging level name.
    """
    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise InvalidLogLevelError(value, "unknown level name")
    return level


def parse_logger_levels(value: str) -> dict[str, int]:
    """Parse ``NAME=LEVEL`` pairs into a name->level dict.

    Pairs are separated by commas and/or whitespace; later pairs win.

    Args:
        value: The raw setting, e.g. ``"calendart=DEBUG, urllib3=ERROR"``.

    Returns:
        Mapping of logger names to numeric logging levels.

    Raises:
        InvalidLogLevelError: If a pair is malformed or names an unknown level.
    """
    levels: dict[str, int] = {}
    for item in (s for s in re.split(r"[,\s]+", value) if s):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise InvalidLogLevelError(item, "expected NAME=LEVEL")
        levels[name.strip()] = parse_level(level_str)
    return levels


def parse_flag(name: str, value: str) -> bool:
    """Read a yes/no setting such as ``"on"`` or ``"0"``.

    Raises:
        InvalidSettingError: If `value` is neither a true nor a false word.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise InvalidSettingError(name, value, "expected a yes/no value")


def load_logging_settings() -> LoggingSettings:
    """Read the logging settings from the environment.

    - `CALENDART_LOG_LEVEL`: default threshold (WARNING when unset).
    - `CALENDART_LOGGER_LEVELS`: ``NAME=LEVEL`` overrides.
    - `CALENDART_LOG_DEBUG`: yes/no debug formatting.

    Raises:
        InvalidSettingError: If any of the variables is malformed.
    """
    level_value = os.environ.get(LOG_LEVEL_ENV)
    return LoggingSettings(
        level=parse_level(level_value) if level_value else DEFAULT_LOG_LEVEL,
        logger_levels=parse_logger_levels(os.environ.get(LOGGER_LEVELS_ENV, "")),
        debug=parse_flag("debug", os.environ.get(LOG_DEBUG_ENV, "")),
    )
