"""Compile style presets into scoped CSS."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Iterable, Mapping

from formstyler.styles.constants import FONT_WEIGHTS, PROJECT_NAME
from formstyler.styles.escaping import (
    escape_class_name,
    escape_font_family,
    format_decimal,
    is_css_color,
    plain_digits,
)
from formstyler.styles.fonts import resolve_fonts
from formstyler.styles.models import (
    CompiledOutput,
    Preset,
    SkippedItem,
    StyleSettings,
    settings_values,
)

_FIELD_TARGETS = ("input", "textarea", "select")
_FOCUS_TARGETS = ("input:focus", "textarea:focus", "select:focus")
_LABEL_TARGETS = ("label",)
_BUTTON_TARGETS = ("button",)
_BUTTON_HOVER_TARGETS = ("button:hover",)

BASE_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("label",), "display:block; margin-bottom:0.25rem; font-weight:500;"),
    (
        ("input", "select", "textarea", "button"),
        "width:100%; padding:0.5rem; margin-bottom:1rem; border:1px solid #ced4da; "
        "border-radius:0.375rem; font-size:1rem; height:auto !important;",
    ),
    (('input[type="radio"]', 'input[type="checkbox"]'), "width:auto; margin-right:0.5rem;"),
    (('input[type="checkbox"]', 'input[type="radio"]'), "margin-bottom:0;"),
    ((".form-group",), "margin-bottom:1rem;"),
    ((".form-inline",), "display:flex; align-items:center; gap:1rem; flex-wrap:wrap;"),
    ((".form-check",), "display:flex; align-items:center; margin-bottom:0.5rem;"),
    ((".form-check input",), "margin-right:0.5rem;"),
    ((".form-actions",), "display:flex; gap:1rem;"),
    (('input[type="range"]',), "width:100%;"),
)


def _pixels(value: Any) -> str | None:
    digits = plain_digits(value)
    return f"{digits}px" if digits is not None else None


def _color(value: Any) -> str | None:
    return value if is_css_color(value) else None


def _weight(value: Any) -> str | None:
    text = str(value) if isinstance(value, int) and not isinstance(value, bool) else value
    return text if isinstance(text, str) and text in FONT_WEIGHTS else None


def _font_family(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    escaped = escape_font_family(value)
    if not escaped.strip('" '):
        return "inherit"
    return f"{escaped}, sans-serif"


@dataclass(frozen=True, slots=True)
class OverrideRule:
    """Maps one settings field to a scoped declaration."""

    setting: str
    targets: tuple[str, ...]
    css_property: str
    render: Callable[[Any], str | None]


OVERRIDE_RULES: tuple[OverrideRule, ...] = (
    OverrideRule("input_border_radius", _FIELD_TARGETS, "border-radius", _pixels),
    OverrideRule("input_border_width", _FIELD_TARGETS, "border-width", _pixels),
    OverrideRule("input_border_color", _FIELD_TARGETS, "border-color", _color),
    OverrideRule("input_text_color", _FIELD_TARGETS, "color", _color),
    OverrideRule("input_bg_color", _FIELD_TARGETS, "background-color", _color),
    OverrideRule("input_focus_border_color", _FOCUS_TARGETS, "border-color", _color),
    OverrideRule("label_color", _LABEL_TARGETS, "color", _color),
    OverrideRule("button_border_radius", _BUTTON_TARGETS, "border-radius", _pixels),
    OverrideRule("button_bg_color", _BUTTON_TARGETS, "background-color", _color),
    OverrideRule("button_border_color", _BUTTON_TARGETS, "border-color", _color),
    OverrideRule("button_text_color", _BUTTON_TARGETS, "color", _color),
    OverrideRule("button_hover_bg_color", _BUTTON_HOVER_TARGETS, "background-color", _color),
    OverrideRule("button_hover_text_color", _BUTTON_HOVER_TARGETS, "color", _color),
    OverrideRule("button_hover_border_color", _BUTTON_HOVER_TARGETS, "border-color", _color),
    OverrideRule("button_font_size", _BUTTON_TARGETS, "font-size", _pixels),
    OverrideRule("button_font_weight", _BUTTON_TARGETS, "font-weight", _weight),
    OverrideRule("button_line_height", _BUTTON_TARGETS, "line-height", format_decimal),
    OverrideRule("input_font_family", _FIELD_TARGETS, "font-family", _font_family),
    OverrideRule("label_font_family", _LABEL_TARGETS, "font-family", _font_family),
    OverrideRule("button_font_family", _BUTTON_TARGETS, "font-family", _font_family),
)


def scoped_selector(css_class: str, targets: Iterable[str]) -> str:
    """Prefix every target with the preset class."""
    return ", ".join(f".{css_class} {target}" for target in targets)


def base_rules_block(css_class: str) -> str:
    """Return the layout defaults every preset starts from."""
    return "".join(
        f"{scoped_selector(css_class, targets)} {{ {declarations} }}\n"
        for targets, declarations in BASE_RULES
    )


def compile_preset_block(
    css_class: str,
    settings: StyleSettings | Mapping[str, Any] | None,
    skipped: list[SkippedItem] | None = None,
) -> str | None:
    """Compile one preset, or return ``None`` when its class is unusable.

    Fields that fail their late check are left out and, when ``skipped`` is
    given, recorded there.
    """
    scope = escape_class_name(css_class)
    if scope is None:
        if skipped is not None:
            skipped.append(SkippedItem(str(css_class), "invalid CSS class name"))
        return None

    values = settings_values(settings)
    lines = [base_rules_block(scope)]
    for rule in OVERRIDE_RULES:
        if rule.setting not in values:
            continue
        rendered = rule.render(values[rule.setting])
        if rendered is None:
            if skipped is not None:
                skipped.append(SkippedItem(scope, "value failed sanity check", rule.setting))
            continue
        selector = scoped_selector(scope, rule.targets)
        lines.append(f"{selector} {{ {rule.css_property}: {rendered} !important; }}\n")
    return "".join(lines)


def header_comment(generated_at: datetime) -> str:
    return f"/* Generated by {PROJECT_NAME} on {generated_at:%Y-%m-%d %H:%M:%S} */\n"


def compile_presets(
    presets: Iterable[Preset],
    *,
    generated_at: datetime | None = None,
) -> CompiledOutput:
    """Compile presets, in order, into one stylesheet.

    Only presets that produced a block contribute to ``fonts_needed``.
    """
    skipped: list[SkippedItem] = []
    blocks: list[str] = []
    emitted: list[Preset] = []
    for preset in presets:
        block = compile_preset_block(preset.css_class, preset.settings, skipped)
        if block is None:
            continue
        blocks.append(block)
        emitted.append(preset)

    stamp = generated_at if generated_at is not None else datetime.now()
    css = header_comment(stamp) + "\n" + "\n".join(blocks)
    return CompiledOutput(
        css=css,
        fonts_needed=resolve_fonts(emitted),
        skipped=tuple(skipped),
    )
