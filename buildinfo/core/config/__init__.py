"""Configuration management for buildinfo."""

from buildinfo.core.config.loader import ConfigLoader
from buildinfo.core.config.settings import (
    BuilderSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ConfigLoader",
    "BuilderSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
