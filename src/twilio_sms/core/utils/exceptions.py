from typing import Any


class AppError(Exception):
    """Base exception for application errors."""

    code = "ERROR"

    def __init__(self, message: str, details: Any = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigurationError(AppError):
    """Raised when mandatory credentials are missing from the environment."""

    code = "CONFIG"


class UsageError(AppError):
    """Raised when a required flag or the command itself is missing or unknown."""

    code = "USAGE"


class InputValidationError(AppError):
    """Raised when an input is present but violates a domain rule."""

    code = "VALIDATION"
