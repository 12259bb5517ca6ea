"""Tests for error classification and formatting."""

from __future__ import annotations

from pathlib import Path

from formstyler.errors import (
    ErrorCode,
    FormStylerError,
    classify_exception,
    format_error_for_user,
)
from formstyler.styles.models import PresetValidationError


def test_default_message_and_suggestion() -> None:
    error = FormStylerError(ErrorCode.PRESET_NOT_FOUND, details={"index": 4})

    assert error.message == "No style preset exists at that position."
    assert "Details: index=4" in str(error)
    assert error.to_dict()["code"] == "PRESET_NOT_FOUND"


def test_classify_os_errors() -> None:
    path = Path("/tmp/out.css")

    assert classify_exception(FileNotFoundError("gone"), path).code is ErrorCode.FILE_NOT_FOUND
    assert classify_exception(PermissionError("nope"), path).code is ErrorCode.FILE_ACCESS_DENIED
    assert classify_exception(OSError("No space left on device")).code is ErrorCode.DISK_FULL
    assert classify_exception(IsADirectoryError("dir")).code is ErrorCode.PATH_INVALID


def test_classify_preset_errors() -> None:
    error = classify_exception(PresetValidationError("Preset needs both a title and a CSS class"))

    assert error.code is ErrorCode.PRESET_INVALID
    assert error.message == "Preset needs both a title and a CSS class"


def test_classify_passes_through_and_falls_back() -> None:
    original = FormStylerError(ErrorCode.IMPORT_NO_PRESETS)

    assert classify_exception(original) is original
    fallback = classify_exception(RuntimeError("boom"))
    assert fallback.code is ErrorCode.OPERATION_FAILED
    assert fallback.message == "RuntimeError: boom"


def test_format_error_for_user() -> None:
    error = FormStylerError(
        ErrorCode.CSS_WRITE_FAILED,
        message="Could not write stylesheet",
        path=Path("/srv/css/formstyler.css"),
    )

    text = format_error_for_user(error)

    assert text.startswith("Could not write stylesheet\n")
    assert "Check the output folder permissions." in text
    assert text.endswith("File: /srv/css/formstyler.css")
    assert format_error_for_user(ValueError("bad preset")).startswith("bad preset")
