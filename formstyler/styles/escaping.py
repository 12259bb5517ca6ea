"""Escaping and late sanity checks for values interpolated into CSS.

Every place the compiler writes a user-controlled value into CSS text goes
through one of these helpers. They are pure and never raise for well-typed
input; a rejected value comes back as ``None`` (or ``False``).
"""

from __future__ import annotations

import math
import re

from formstyler.styles.constants import COLOR_KEYWORDS

_CLASS_NAME_RE = re.compile(r"(?!-?[0-9])(?!-\Z)[A-Za-z0-9_-]+", re.ASCII)
_FONT_QUOTES_RE = re.compile(r"[\"']")
_FONT_UNSAFE_RE = re.compile(r"[^A-Za-z0-9 \-]")
_FONT_NEEDS_QUOTES_RE = re.compile(r"\s|^[0-9]", re.ASCII)
HEX_COLOR_RE = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")
_RGB_COLOR_RE = re.compile(
    r"rgba?\(\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*"
    r"(?:,\s*([0-9]*\.?[0-9]+|[0-9]+\.)\s*)?\)",
    re.IGNORECASE | re.ASCII,
)
_DIGITS_RE = re.compile(r"[0-9]+")
_DECIMAL_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")


def escape_font_family(raw: str) -> str:
    """Reduce a font family name to a token that is safe inside a declaration.

    Quotes are stripped, then anything outside ``[A-Za-z0-9 -]`` is removed.
    Names containing whitespace or starting with a digit come back wrapped in
    double quotes. Escaping an already escaped name returns it unchanged.
    """
    cleaned = _FONT_QUOTES_RE.sub("", raw)
    cleaned = _FONT_UNSAFE_RE.sub("", cleaned)
    if _FONT_NEEDS_QUOTES_RE.search(cleaned):
        return f'"{cleaned}"'
    return cleaned


def escape_class_name(raw: object) -> str | None:
    """Return ``raw`` when it is a valid CSS class token, else ``None``."""
    if not isinstance(raw, str) or not _CLASS_NAME_RE.fullmatch(raw):
        return None
    return raw


def parse_rgb(value: str) -> tuple[int, int, int, float | None] | None:
    """Split an ``rgb()``/``rgba()`` value into bounded channels."""
    match = _RGB_COLOR_RE.fullmatch(value)
    if match is None:
        return None
    red, green, blue = (int(match.group(index)) for index in (1, 2, 3))
    if red > 255 or green > 255 or blue > 255:
        return None
    alpha_raw = match.group(4)
    if alpha_raw is None:
        return red, green, blue, None
    alpha = float(alpha_raw)
    if alpha < 0 or alpha > 1:
        return None
    return red, green, blue, alpha


def is_css_color(value: object) -> bool:
    """Return True when ``value`` is one of the accepted color forms."""
    if not isinstance(value, str):
        return False
    if HEX_COLOR_RE.fullmatch(value):
        return True
    if value.lower() in COLOR_KEYWORDS:
        return True
    return parse_rgb(value) is not None


def plain_digits(value: object) -> str | None:
    """Render a non-negative integer as ASCII digits, or ``None``."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value) if value >= 0 else None
    if isinstance(value, str) and _DIGITS_RE.fullmatch(value):
        return value
    return None


def format_decimal(value: object) -> str | None:
    """Render a non-negative decimal such as a line height, or ``None``."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        text = str(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            return None
        text = f"{value:g}"
    elif isinstance(value, str):
        text = value
    else:
        return None
    if not _DECIMAL_RE.fullmatch(text):
        return None
    return text
