"""Custom exception definitions for buildinfo."""

from typing import Any


class BuildInfoError(Exception):
    """Base exception for all buildinfo errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class InvalidBuildError(BuildInfoError, ValueError):
    """Exception raised when a build cannot be assembled from the given fields."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid build error.

        Args:
            message: Error message.
            field: Name of the builder field that is missing or invalid.
            details: Additional error details.
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)
        self.field = field


class ConfigurationError(BuildInfoError):
    """Exception raised for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
