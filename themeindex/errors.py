"""Error codes and error handling utilities for themeindex."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for registry builds."""

    # File system errors
    FILE_NOT_FOUND = auto()
    FILE_ACCESS_DENIED = auto()
    DISK_FULL = auto()
    PATH_INVALID = auto()
    IO_FAILED = auto()

    # Configuration errors
    CONFIG_INVALID = auto()

    # Anything else
    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.FILE_NOT_FOUND: "The file or directory was not found.",
    ErrorCode.FILE_ACCESS_DENIED: "Access denied. Check file and folder permissions.",
    ErrorCode.DISK_FULL: "The destination disk is full. Free up space and try again.",
    ErrorCode.PATH_INVALID: "The specified path is invalid or inaccessible.",
    ErrorCode.IO_FAILED: "A filesystem operation failed.",
    ErrorCode.CONFIG_INVALID: "The themeindex configuration is invalid.",
    ErrorCode.OPERATION_FAILED: "Operation failed. See details for more information.",
}


@dataclass
class ThemeIndexError(Exception):
    """Base exception for themeindex with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f" (path: {self.path})")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f" [{details_str}]")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
        }


def classify_exception(exc: Exception, path: Path | None = None) -> ThemeIndexError:
    """Classify a generic exception into a ThemeIndexError with appropriate code."""
    if isinstance(exc, ThemeIndexError):
        return exc
    details = {"original": str(exc)}

    if isinstance(exc, FileNotFoundError):
        return ThemeIndexError(ErrorCode.FILE_NOT_FOUND, path=path, details=details)
    if isinstance(exc, PermissionError):
        return ThemeIndexError(ErrorCode.FILE_ACCESS_DENIED, path=path, details=details)
    if isinstance(exc, (NotADirectoryError, IsADirectoryError)):
        return ThemeIndexError(ErrorCode.PATH_INVALID, path=path, details=details)
    if isinstance(exc, OSError) and "no space left" in str(exc).lower():
        return ThemeIndexError(ErrorCode.DISK_FULL, path=path, details=details)
    if isinstance(exc, OSError):
        return ThemeIndexError(ErrorCode.IO_FAILED, path=path, details=details)

    return ThemeIndexError(
        ErrorCode.OPERATION_FAILED,
        message=f"{type(exc).__name__}: {exc}",
        path=path,
        details=details,
    )


def format_error_for_user(error: ThemeIndexError | Exception) -> str:
    """Format an error as a single console line."""
    if not isinstance(error, ThemeIndexError):
        error = classify_exception(error)
    original = error.details.get("original")
    parts = [error.message]
    if error.path:
        parts.append(f" {error.path}")
    if original and original != error.message:
        parts.append(f": {original}")
    return "".join(parts)
