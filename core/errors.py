"""Domain exception hierarchy for the calculator application."""

from __future__ import annotations


class AppError(Exception):
    """Base class for all application errors."""


class ValidationError(AppError):
    """Raised when user-supplied input fails validation.

    ``field`` names the offending input so the UI can point at it.
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class ConfigurationError(AppError):
    """Raised when configuration values cannot be parsed."""
