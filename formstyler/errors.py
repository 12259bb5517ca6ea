"""Error codes and error handling utilities for formstyler."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for formstyler operations."""

    # File system errors
    FILE_NOT_FOUND = auto()
    FILE_ACCESS_DENIED = auto()
    DISK_FULL = auto()
    PATH_INVALID = auto()

    # Preset errors
    PRESET_INVALID = auto()
    PRESET_NOT_FOUND = auto()
    PRESET_DUPLICATE_CLASS = auto()

    # Import / export errors
    IMPORT_INVALID_JSON = auto()
    IMPORT_INVALID_FILE = auto()
    IMPORT_NO_PRESETS = auto()

    # Stylesheet errors
    CSS_WRITE_FAILED = auto()

    # Operation errors
    OPERATION_FAILED = auto()

    # Configuration errors
    CONFIG_INVALID = auto()
    CONFIG_PERMISSION_DENIED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.FILE_NOT_FOUND: "The file was not found. It may have been moved or deleted.",
    ErrorCode.FILE_ACCESS_DENIED: "Access denied. Check file permissions.",
    ErrorCode.DISK_FULL: "The destination disk is full. Free up space and try again.",
    ErrorCode.PATH_INVALID: "The specified path is invalid or inaccessible.",

    ErrorCode.PRESET_INVALID: "The style preset is invalid. It needs a title and a valid CSS class.",
    ErrorCode.PRESET_NOT_FOUND: "No style preset exists at that position.",
    ErrorCode.PRESET_DUPLICATE_CLASS: "Another style preset already uses this CSS class.",

    ErrorCode.IMPORT_INVALID_JSON: "Invalid JSON file. Please check the file and try again.",
    ErrorCode.IMPORT_INVALID_FILE: "This does not appear to be a valid formstyler export file.",
    ErrorCode.IMPORT_NO_PRESETS: "No valid presets found in the import file.",

    ErrorCode.CSS_WRITE_FAILED: "Failed to write the stylesheet. Check the output folder permissions.",

    ErrorCode.OPERATION_FAILED: "Operation failed. See details for more information.",

    ErrorCode.CONFIG_INVALID: "Configuration is invalid. Reset to defaults?",
    ErrorCode.CONFIG_PERMISSION_DENIED: "Cannot save configuration. Check folder permissions.",
}


@dataclass
class FormStylerError(Exception):
    """Base exception for formstyler with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


def classify_exception(exc: Exception, path: Path | None = None) -> FormStylerError:
    """Classify a generic exception into a FormStylerError with appropriate code."""
    if isinstance(exc, FormStylerError):
        return exc
    exc_name = type(exc).__name__
    exc_str = str(exc).lower()

    if isinstance(exc, FileNotFoundError) or "no such file" in exc_str:
        return FormStylerError(ErrorCode.FILE_NOT_FOUND, path=path, details={"original": exc_str})
    if isinstance(exc, PermissionError) or "permission denied" in exc_str:
        return FormStylerError(ErrorCode.FILE_ACCESS_DENIED, path=path, details={"original": exc_str})
    if "disk full" in exc_str or "no space left" in exc_str:
        return FormStylerError(ErrorCode.DISK_FULL, path=path, details={"original": exc_str})
    if isinstance(exc, (IsADirectoryError, NotADirectoryError)):
        return FormStylerError(ErrorCode.PATH_INVALID, path=path, details={"original": exc_str})
    if isinstance(exc, ValueError) and "preset" in exc_str:
        return FormStylerError(
            ErrorCode.PRESET_INVALID,
            message=str(exc),
            path=path,
            details={"original": exc_str},
        )

    return FormStylerError(
        ErrorCode.OPERATION_FAILED,
        message=f"{exc_name}: {exc}",
        path=path,
        details={"original": exc_str},
    )


def format_error_for_user(error: FormStylerError | Exception) -> str:
    """Format an error for display with an actionable suggestion."""
    if isinstance(error, FormStylerError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n{error.suggestion}")
        if error.path:
            parts.append(f"\nFile: {error.path}")
        return "".join(parts)

    return format_error_for_user(classify_exception(error))
