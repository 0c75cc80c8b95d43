"""Home config domain exceptions."""

from pathlib import Path
from typing import Optional


class HomeConfigError(Exception):
    """Base exception for home config operations."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.message = message
        self.path = path


class PathResolutionError(HomeConfigError):
    """The platform config root could not be determined."""

    pass


class ConfigIOError(HomeConfigError):
    """Filesystem failure while reading or writing a config file."""

    def __init__(self, message: str, path: Optional[Path] = None, cause: Optional[BaseException] = None):
        super().__init__(message, path)
        self.cause = cause

    @property
    def not_found(self) -> bool:
        """True when the underlying failure is a missing file."""
        return isinstance(self.cause, FileNotFoundError)


class DecodeError(HomeConfigError):
    """Config contents are malformed for the format or do not match the requested type."""

    def __init__(self, message: str, format_name: str, path: Optional[Path] = None):
        super().__init__(message, path)
        self.format_name = format_name


class EncodeError(HomeConfigError):
    """A value cannot be represented in the requested format."""

    def __init__(self, message: str, format_name: str, path: Optional[Path] = None):
        super().__init__(message, path)
        self.format_name = format_name


class UnsupportedFormatError(HomeConfigError, ValueError):
    """No enabled format matches the requested name or file extension."""

    def __init__(
        self,
        message: str,
        format_name: Optional[str] = None,
        extension: Optional[str] = None,
        path: Optional[Path] = None,
    ):
        super().__init__(message, path)
        self.format_name = format_name
        self.extension = extension
