"""Logging for the buildinfo package.

Library code only asks for loggers; nothing is configured on import. The
CLI calls setup_logging() once to attach handlers to the package logger,
leaving the root logger to the host application.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from buildinfo.core.config.settings import LoggingSettings

PACKAGE_LOGGER = "buildinfo"

_console: Console | None = None

# Without handlers of its own, records propagate to whatever the host configured.
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(settings: LoggingSettings, level: str | None = None) -> logging.Logger:
    """Attach console (and optional file) handlers to the package logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        settings: Logging settings.
        level: Level overriding settings.level, e.g. from a --verbose flag.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    log_level = getattr(logging, (level or settings.level).upper())

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    handler: logging.Handler
    if settings.use_rich:
        handler = RichHandler(
            console=get_console(),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(settings.format))
    package_logger.addHandler(handler)

    if settings.file:
        settings.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        package_logger.addHandler(file_handler)

    package_logger.setLevel(log_level)
    # Handled here; keep records from being printed twice by root handlers.
    package_logger.propagate = False
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a module. Never configures handlers."""
    return logging.getLogger(name)


def get_console() -> Console:
    """Get the shared stderr Rich console."""
    global _console
    if _console is None:
        _console = Console(stderr=True)
    return _console
