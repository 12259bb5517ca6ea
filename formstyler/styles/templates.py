"""Predesigned style templates."""

from __future__ import annotations

from formstyler.styles.models import Preset, PresetValidationError, StyleTemplate
from formstyler.styles.validator import sanitize_preset


def _template_settings(
    *,
    radius: str,
    border_width: str,
    border: str,
    text: str,
    background: str,
    focus: str,
    input_font: str,
    label: str,
    label_font: str,
    button: str,
    button_text: str,
    hover: str,
    hover_text: str,
    font_size: str,
    font_weight: str,
    line_height: str,
    button_font: str,
) -> dict[str, str]:
    return {
        "input_border_radius": radius,
        "input_border_width": border_width,
        "input_border_color": border,
        "input_text_color": text,
        "input_bg_color": background,
        "input_focus_border_color": focus,
        "input_font_family": input_font,
        "label_color": label,
        "label_font_family": label_font,
        "button_border_radius": radius,
        "button_border_color": button,
        "button_bg_color": button,
        "button_text_color": button_text,
        "button_hover_bg_color": hover,
        "button_hover_text_color": hover_text,
        "button_hover_border_color": hover,
        "button_font_size": font_size,
        "button_font_weight": font_weight,
        "button_line_height": line_height,
        "button_font_family": button_font,
    }


STYLE_TEMPLATES: tuple[StyleTemplate, ...] = (
    StyleTemplate(
        template_id="modern_minimal",
        name="Modern Minimal",
        description="Clean and minimalist design with subtle shadows",
        settings=_template_settings(
            radius="8", border_width="1", border="#e1e8ed", text="#2c3e50",
            background="#ffffff", focus="#3498db", input_font="Inter",
            label="#2c3e50", label_font="Inter", button="#3498db",
            button_text="#ffffff", hover="#2980b9", hover_text="#ffffff",
            font_size="16", font_weight="600", line_height="1.5", button_font="Inter",
        ),
    ),
    StyleTemplate(
        template_id="elegant_dark",
        name="Elegant Dark",
        description="Sophisticated dark theme with gold accents",
        settings=_template_settings(
            radius="4", border_width="1", border="#444444", text="#ffffff",
            background="#2a2a2a", focus="#d4af37", input_font="Playfair Display",
            label="#d4af37", label_font="Playfair Display", button="#d4af37",
            button_text="#1a1a1a", hover="#b8941f", hover_text="#1a1a1a",
            font_size="18", font_weight="700", line_height="1.4",
            button_font="Playfair Display",
        ),
    ),
    StyleTemplate(
        template_id="academic_classic",
        name="Academic Classic",
        description="Traditional university style with serif fonts",
        settings=_template_settings(
            radius="2", border_width="1", border="#8b7355", text="#333333",
            background="#fafafa", focus="#5d4e37", input_font="Merriweather",
            label="#5d4e37", label_font="Merriweather", button="#8b7355",
            button_text="#ffffff", hover="#5d4e37", hover_text="#ffffff",
            font_size="16", font_weight="600", line_height="1.5", button_font="Merriweather",
        ),
    ),
    StyleTemplate(
        template_id="corporate_blue",
        name="Corporate Blue",
        description="Professional and trustworthy design",
        settings=_template_settings(
            radius="3", border_width="1", border="#cfd8dc", text="#263238",
            background="#f5f5f5", focus="#1976d2", input_font="Roboto",
            label="#455a64", label_font="Roboto", button="#1976d2",
            button_text="#ffffff", hover="#1565c0", hover_text="#ffffff",
            font_size="15", font_weight="500", line_height="1.5", button_font="Roboto",
        ),
    ),
    StyleTemplate(
        template_id="university_crimson",
        name="University Crimson",
        description="Distinguished academic style with crimson accents",
        settings=_template_settings(
            radius="4", border_width="1", border="#cccccc", text="#212529",
            background="#ffffff", focus="#a51c30", input_font="Source Sans Pro",
            label="#212529", label_font="Source Sans Pro", button="#a51c30",
            button_text="#ffffff", hover="#871729", hover_text="#ffffff",
            font_size="16", font_weight="600", line_height="1.5",
            button_font="Source Sans Pro",
        ),
    ),
    StyleTemplate(
        template_id="ivy_league",
        name="Ivy League",
        description="Prestigious style with deep green and gold",
        settings=_template_settings(
            radius="3", border_width="1", border="#d4d4d4", text="#1a472a",
            background="#ffffff", focus="#1a472a", input_font="Roboto",
            label="#1a472a", label_font="Playfair Display", button="#1a472a",
            button_text="#ffffff", hover="#0f2818", hover_text="#ffffff",
            font_size="16", font_weight="500", line_height="1.5", button_font="Roboto",
        ),
    ),
    StyleTemplate(
        template_id="state_university",
        name="State University",
        description="Clean and accessible design for public institutions",
        settings=_template_settings(
            radius="4", border_width="2", border="#003366", text="#333333",
            background="#f8f9fa", focus="#0066cc", input_font="Open Sans",
            label="#003366", label_font="Open Sans", button="#003366",
            button_text="#ffffff", hover="#002244", hover_text="#ffffff",
            font_size="16", font_weight="600", line_height="1.5", button_font="Open Sans",
        ),
    ),
    StyleTemplate(
        template_id="stem_institute",
        name="STEM Institute",
        description="Modern tech-focused design for STEM programs",
        settings=_template_settings(
            radius="2", border_width="1", border="#e0e0e0", text="#424242",
            background="#fafafa", focus="#ff6f00", input_font="Roboto",
            label="#424242", label_font="Roboto", button="#ff6f00",
            button_text="#ffffff", hover="#e65100", hover_text="#ffffff",
            font_size="15", font_weight="500", line_height="1.5", button_font="Roboto",
        ),
    ),
)


def list_templates() -> list[StyleTemplate]:
    return list(STYLE_TEMPLATES)


def get_template(template_id: str) -> StyleTemplate | None:
    for template in STYLE_TEMPLATES:
        if template.template_id == template_id:
            return template
    return None


def preset_from_template(template_id: str, title: str, css_class: str) -> Preset:
    """Create a sanitized preset seeded from a template."""
    template = get_template(template_id)
    if template is None:
        raise PresetValidationError(f"Unknown style template: {template_id}")
    return sanitize_preset(
        {"title": title, "css_class": css_class, "settings": dict(template.settings)}
    )
