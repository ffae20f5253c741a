"""Utilities package."""

from .exceptions import AppError, ConfigurationError, InputValidationError, UsageError
from .logging import configure_logging, get_logger

__all__ = [
    "AppError",
    "ConfigurationError",
    "InputValidationError",
    "UsageError",
    "configure_logging",
    "get_logger",
]
