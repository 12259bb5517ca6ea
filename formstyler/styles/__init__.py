"""Style preset framework exports."""

from formstyler.styles.compiler import compile_presets
from formstyler.styles.escaping import escape_class_name, escape_font_family
from formstyler.styles.fonts import build_google_fonts_url, resolve_fonts
from formstyler.styles.models import (
    CompiledOutput,
    Preset,
    PresetValidationError,
    SkippedItem,
    StyleSettings,
)
from formstyler.styles.service import StyleService
from formstyler.styles.store import PresetStore
from formstyler.styles.validator import sanitize_preset, sanitize_settings

__all__ = [
    "CompiledOutput",
    "Preset",
    "PresetStore",
    "PresetValidationError",
    "SkippedItem",
    "StyleService",
    "StyleSettings",
    "build_google_fonts_url",
    "compile_presets",
    "escape_class_name",
    "escape_font_family",
    "resolve_fonts",
    "sanitize_preset",
    "sanitize_settings",
]
