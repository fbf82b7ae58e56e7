"""Exception definitions module."""

from buildinfo.core.exceptions.errors import (
    BuildInfoError,
    ConfigurationError,
    InvalidBuildError,
)

__all__ = ["BuildInfoError", "InvalidBuildError", "ConfigurationError"]
