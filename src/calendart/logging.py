"""Console logging for applications built on CALENDART.

A single Rich handler on the root logger renders every record. Which
records get through is decided by `calendart.config.LoggingSettings`: one
default threshold plus per-logger overrides, so that e.g. the repository
adapters can be traced at DEBUG while everything else stays at WARNING.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from calendart import config

# pylint: disable=too-few-public-methods

PROJECT_LOGGER = "calendart"

FORMATS = {
    False: "%(origin)s%(message)s",
    True: "%(asctime)s %(name)s: %(message)s",
}


class SettingsFilter(logging.Filter):
    """Let a record through only if it reaches its logger's threshold.

    Records kept are tagged with `record.origin`: empty for CALENDART loggers,
    a bracketed top-level name followed by a space for anything else
    (``"[urllib3] "``).
    """

    def __init__(self, settings: config.LoggingSettings) -> None:
        super().__init__()
        self.settings = settings

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno < self.settings.threshold_for(record.name):
            return False
        top = record.name.split(".")[0]
        record.origin = "" if top == PROJECT_LOGGER else f"[{top}] "
        return True


def build_console_handler(
    settings: config.LoggingSettings, *, color: bool = True
) -> RichHandler:
    """Build the stderr Rich handler described by `settings`.

    Debug settings add timestamps, logger names and source links.
    """
    handler = RichHandler(
        level=settings.lowest_level,
        console=Console(color_system="auto" if color else None, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    handler.setFormatter(logging.Formatter(FORMATS[settings.debug]))
    handler.addFilter(SettingsFilter(settings))
    return handler


def configure_logging(
    settings: config.LoggingSettings | None = None, *, color: bool = True
) -> RichHandler:
    """Attach a console handler for `settings` to the root logger.

    Args:
        settings: What to show. Read from the environment when None.
        color: Enable color output when True.

    Returns:
        RichHandler: The handler that was attached, so callers can remove it.

    Raises:
        InvalidSettingError: If the environment settings are malformed.
    """
    if settings is None:
        settings = config.load_logging_settings()

    handler = build_console_handler(settings, color=color)
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(settings.lowest_level)

    logging.getLogger(__name__).debug(
        "Console logging at %s, debug=%s, per-logger overrides: %s",
        logging.getLevelName(settings.default_level),
        settings.debug,
        {
            name: logging.getLevelName(lvl)
            for name, lvl in settings.logger_levels.items()
        },
    )
    return handler
