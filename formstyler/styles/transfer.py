"""Preset import and export documents."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable

from formstyler.errors import ErrorCode, FormStylerError
from formstyler.styles.constants import PROJECT_NAME, PROJECT_VERSION
from formstyler.styles.models import Preset
from formstyler.styles.validator import sanitize_presets


@dataclass(frozen=True, slots=True)
class MergeResult:
    """Outcome of merging imported presets into an existing list."""

    presets: list[Preset]
    imported: int
    updated: int

    def summary(self) -> str:
        return (
            f"Import successful! {self.imported} new styles imported, "
            f"{self.updated} existing styles updated."
        )


def build_export_document(
    presets: Iterable[Preset],
    *,
    site_url: str | None = None,
    exported_at: datetime | None = None,
) -> dict[str, Any]:
    stamp = exported_at if exported_at is not None else datetime.now()
    return {
        "format": PROJECT_NAME,
        "version": PROJECT_VERSION,
        "exported_at": stamp.strftime("%Y-%m-%d %H:%M:%S"),
        "site_url": site_url,
        "presets": [preset.to_dict() for preset in presets],
    }


def export_filename(now: datetime | None = None) -> str:
    stamp = now if now is not None else datetime.now()
    return f"{PROJECT_NAME}-export-{stamp:%Y-%m-%d-%H%M%S}.json"


def parse_import_document(text: str) -> list[Preset]:
    """Validate an export document and return its sanitized presets."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise FormStylerError(
            ErrorCode.IMPORT_INVALID_JSON,
            details={"error": str(exc)},
        ) from exc
    if not isinstance(data, dict) or data.get("format") != PROJECT_NAME:
        raise FormStylerError(ErrorCode.IMPORT_INVALID_FILE)

    items = data.get("presets")
    if not isinstance(items, list):
        raise FormStylerError(ErrorCode.IMPORT_NO_PRESETS)
    report = sanitize_presets(items)
    if not report.presets:
        raise FormStylerError(
            ErrorCode.IMPORT_NO_PRESETS,
            details={"rejected": len(report.errors)} if report.errors else {},
        )
    return report.presets


def merge_presets(existing: Iterable[Preset], incoming: Iterable[Preset]) -> MergeResult:
    """Replace presets that share a class in place and append the rest."""
    merged = list(existing)
    positions = {preset.css_class: index for index, preset in enumerate(merged)}
    imported = 0
    updated = 0
    for preset in incoming:
        index = positions.get(preset.css_class)
        if index is not None:
            merged[index] = preset
            updated += 1
            continue
        positions[preset.css_class] = len(merged)
        merged.append(preset)
        imported += 1
    return MergeResult(presets=merged, imported=imported, updated=updated)
