"""Tests for predesigned style templates."""

from __future__ import annotations

import pytest

from formstyler.styles.compiler import compile_presets
from formstyler.styles.models import PresetValidationError, StyleSettings
from formstyler.styles.templates import get_template, list_templates, preset_from_template
from formstyler.styles.validator import sanitize_settings


def test_templates_have_unique_ids() -> None:
    ids = [template.template_id for template in list_templates()]

    assert len(ids) == 8
    assert len(set(ids)) == len(ids)


@pytest.mark.parametrize("template", list_templates(), ids=lambda item: item.template_id)
def test_every_template_survives_sanitizing(template) -> None:
    settings = sanitize_settings(template.settings)

    assert set(settings.to_dict()) == set(StyleSettings.field_names())


def test_get_template() -> None:
    template = get_template("corporate_blue")

    assert template is not None
    assert template.name == "Corporate Blue"
    assert get_template("missing") is None


def test_preset_from_template() -> None:
    preset = preset_from_template("modern_minimal", "Signup", "signup-form")

    assert preset.title == "Signup"
    assert preset.css_class == "signup-form"
    assert preset.settings.input_border_radius == 8
    assert preset.settings.button_border_color == preset.settings.button_bg_color
    assert preset.settings.button_font_family == "Inter"

    output = compile_presets([preset])
    assert ".signup-form button:hover { background-color: #2980b9 !important; }" in output.css
    assert ("Inter", "600") in output.fonts_needed


def test_preset_from_unknown_template() -> None:
    with pytest.raises(PresetValidationError):
        preset_from_template("nope", "Title", "cls")
