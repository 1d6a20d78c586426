"""
Custom exceptions for the application.
"""

from typing import Iterable, Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised when reading or writing the underlying file fails."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class EditError(BaseAppError):
    """
    Base exception for failures of a file operation request.

    Carries every discovered error so callers can report them together
    instead of only the first one.
    """

    def __init__(self, message: str, errors: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.errors: list[str] = list(errors) if errors else [message]


class SchemaError(EditError):
    """Exception raised when an edit batch or option payload is malformed."""

    pass


class EditValidationError(EditError):
    """Exception raised when an instruction is semantically invalid."""

    pass


class ConflictError(EditError):
    """Exception raised when an instruction no longer matches the file content."""

    pass


class NotFoundError(EditError):
    """Exception raised when the target file does not exist."""

    pass


class AccessDeniedError(EditError):
    """Exception raised when a path escapes the accessible roots."""

    pass


class EncodingError(EditError):
    """Exception raised when bytes or text cannot be converted with an encoding."""

    pass


class AlreadyExistsError(EditError):
    """Exception raised when a move, copy or mkdir target is already taken."""

    pass
