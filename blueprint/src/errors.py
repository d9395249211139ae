"""
Application error types.

Every error carries a message and, optionally, the exception that caused it.
"""

from typing import Optional


class BlueprintError(Exception):
    """Base class for errors raised by blueprint."""

    error_type = "unknown_error"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.error_type}: {self.message} (caused by: {self.cause})"
        return f"{self.error_type}: {self.message}"


class UserInputError(BlueprintError):
    """Invalid or unavailable user input."""

    error_type = "user_input_error"


class FileSystemError(BlueprintError):
    """A filesystem operation failed."""

    error_type = "file_system_error"


class GenerationError(BlueprintError):
    """Content could not be generated by the language model."""

    error_type = "api_error"


class ConfigError(BlueprintError):
    """Configuration or project info could not be loaded."""

    error_type = "config_error"
