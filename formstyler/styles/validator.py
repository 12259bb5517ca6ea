"""Sanitize raw preset input into trusted style settings."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from formstyler.styles.constants import (
    ALLOWED_FONTS,
    COLOR_FIELDS,
    COLOR_KEYWORDS,
    FONT_FAMILY_FIELDS,
    FONT_WEIGHT_FIELD,
    FONT_WEIGHTS,
    LINE_HEIGHT_FIELD,
    LINE_HEIGHT_RANGE,
    MAX_CLASS_LEN,
    MAX_TITLE_LEN,
    NUMERIC_FIELDS,
    NUMERIC_RANGES,
)
from formstyler.styles.escaping import HEX_COLOR_RE, escape_class_name, parse_rgb
from formstyler.styles.models import Preset, PresetValidationError, StyleSettings

_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_CLASS_STRIP_RE = re.compile(r"[^A-Za-z0-9_-]")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_WHITESPACE_RE = re.compile(r"\s+")
_TAG_RE = re.compile(r"<[^>]*>")


@dataclass
class SanitizeReport:
    """Presets that survived sanitizing plus why the others were dropped."""

    presets: list[Preset] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def sanitize_color_value(value: object) -> str | None:
    """Normalize a hex, rgb(), rgba() or keyword color; ``None`` if invalid."""
    if not isinstance(value, str):
        return None
    color = value.strip()
    if HEX_COLOR_RE.fullmatch(color):
        return color
    channels = parse_rgb(color)
    if channels is not None:
        red, green, blue, alpha = channels
        if alpha is None:
            return f"rgb({red}, {green}, {blue})"
        return f"rgba({red}, {green}, {blue}, {alpha:g})"
    if color.lower() in COLOR_KEYWORDS:
        return color.lower()
    return None


def _as_number(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and _NUMBER_RE.fullmatch(value.strip()):
        number = float(value.strip())
    else:
        return None
    return number if math.isfinite(number) else None


def _sanitize_numeric(name: str, value: object) -> int | None:
    number = _as_number(value)
    if number is None:
        return None
    low, high = NUMERIC_RANGES[name]
    return max(low, min(high, int(number)))


def _sanitize_weight(value: object) -> str | None:
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if isinstance(value, str) and value.strip() in FONT_WEIGHTS:
        return value.strip()
    return None


def _sanitize_line_height(value: object) -> float | None:
    number = _as_number(value)
    low, high = LINE_HEIGHT_RANGE
    if number is None or number < low or number > high:
        return None
    return number


def _sanitize_font(value: object) -> str | None:
    if isinstance(value, str) and value in ALLOWED_FONTS:
        return value
    return None


def sanitize_settings(raw: Mapping[str, Any]) -> StyleSettings:
    """Keep only recognized, range-checked fields from ``raw``.

    Unknown keys and values that fail their check are dropped; numeric
    values are clamped into their field's range.
    """
    clean: dict[str, Any] = {}
    for name in NUMERIC_FIELDS:
        if name in raw:
            number = _sanitize_numeric(name, raw[name])
            if number is not None:
                clean[name] = number
    for name in COLOR_FIELDS:
        if raw.get(name):
            color = sanitize_color_value(raw[name])
            if color is not None:
                clean[name] = color
    if raw.get(FONT_WEIGHT_FIELD):
        weight = _sanitize_weight(raw[FONT_WEIGHT_FIELD])
        if weight is not None:
            clean[FONT_WEIGHT_FIELD] = weight
    if LINE_HEIGHT_FIELD in raw:
        line_height = _sanitize_line_height(raw[LINE_HEIGHT_FIELD])
        if line_height is not None:
            clean[LINE_HEIGHT_FIELD] = line_height
    for name in FONT_FAMILY_FIELDS:
        if name in raw:
            font = _sanitize_font(raw[name])
            if font is not None:
                clean[name] = font
    return StyleSettings(**clean)


def sanitize_title(value: object) -> str:
    if not isinstance(value, str):
        return ""
    text = _TAG_RE.sub("", value)
    text = _CONTROL_RE.sub(" ", text)
    text = _WHITESPACE_RE.sub(" ", text).strip()
    return text[:MAX_TITLE_LEN].rstrip()


def sanitize_class_name(value: object) -> str:
    if not isinstance(value, str):
        return ""
    return _CLASS_STRIP_RE.sub("", value)[:MAX_CLASS_LEN]


def sanitize_preset(raw: object) -> Preset:
    """Sanitize one raw preset mapping into a :class:`Preset`."""
    if isinstance(raw, Preset):
        raw = raw.to_dict()
    if not isinstance(raw, Mapping):
        raise PresetValidationError(f"Preset must be an object, got {type(raw).__name__}")

    title = sanitize_title(raw.get("title"))
    css_class = sanitize_class_name(raw.get("css_class", raw.get("custom_class")))
    if not title or not css_class:
        raise PresetValidationError("Preset needs both a title and a CSS class")
    if escape_class_name(css_class) is None:
        raise PresetValidationError(f"Preset class {css_class!r} is not a valid CSS class name")

    settings = raw.get("settings")
    if settings is None:
        settings = {}
    if not isinstance(settings, Mapping):
        raise PresetValidationError(f"Preset {css_class!r}: settings must be an object")
    return Preset(title=title, css_class=css_class, settings=sanitize_settings(settings))


def sanitize_presets(items: Iterable[object]) -> SanitizeReport:
    """Sanitize a list of raw presets, collecting errors instead of raising."""
    report = SanitizeReport()
    for index, item in enumerate(items):
        try:
            report.presets.append(sanitize_preset(item))
        except PresetValidationError as exc:
            report.errors.append(f"preset #{index}: {exc}")
    return report
