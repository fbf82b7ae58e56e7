"""Logging module."""

from buildinfo.core.logger.logger import PACKAGE_LOGGER, get_console, get_logger, setup_logging

__all__ = ["PACKAGE_LOGGER", "get_console", "get_logger", "setup_logging"]
