"""
Custom exceptions for the application.
"""

import os


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised when a filesystem operation fails."""

    def __init__(
        self,
        reason: str,
        path: str | None = None,
        errno: int | None = None,
    ):
        """
        Initialize the error.

        Args:
            reason: Human-readable cause, usually the OS error text
            path: Path the failing operation was applied to
            errno: OS error code, if the failure came from the OS
        """
        self.reason = reason
        self.path = path
        self.errno = errno
        message = f"{reason}: '{path}'" if path else reason
        super().__init__(message)

    @classmethod
    def from_errno(cls, errno: int, path: str | None = None) -> "FileRepositoryError":
        """Build an error carrying the standard text for an OS error code."""
        return cls(os.strerror(errno), path=path, errno=errno)

    @classmethod
    def from_os_error(
        cls, error: OSError, path: str | None = None
    ) -> "FileRepositoryError":
        """Translate an OSError raised by the OS into a repository error."""
        reason = error.strerror or str(error)
        return cls(reason, path=path or error.filename, errno=error.errno)


class ActivityLogError(BaseAppError):
    """Exception raised when the activity log cannot be read or written."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
