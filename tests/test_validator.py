"""Tests for preset input sanitizing."""

from __future__ import annotations

import pytest

from formstyler.styles.models import Preset, PresetValidationError, StyleSettings
from formstyler.styles.validator import (
    sanitize_class_name,
    sanitize_color_value,
    sanitize_preset,
    sanitize_presets,
    sanitize_settings,
    sanitize_title,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("#FFF", "#FFF"),
        (" #3498db ", "#3498db"),
        ("rgb(1,2,3)", "rgb(1, 2, 3)"),
        ("RGB( 10 , 20 , 30 )", "rgb(10, 20, 30)"),
        ("rgba(0,0,0,.5)", "rgba(0, 0, 0, 0.5)"),
        ("rgba(255, 255, 255, 1)", "rgba(255, 255, 255, 1)"),
        ("Transparent", "transparent"),
        ("currentColor", "currentcolor"),
    ],
)
def test_colors_are_normalized(raw: str, expected: str) -> None:
    assert sanitize_color_value(raw) == expected


@pytest.mark.parametrize(
    "raw", ["#ggg", "red", "rgb(300, 0, 0)", "rgba(0, 0, 0, 2)", "url(javascript:x)", None, 12]
)
def test_invalid_colors_are_dropped(raw: object) -> None:
    assert sanitize_color_value(raw) is None


def test_numeric_fields_are_clamped() -> None:
    settings = sanitize_settings(
        {
            "input_border_radius": "150",
            "input_border_width": -3,
            "button_border_radius": 12.9,
            "button_font_size": "4",
        }
    )

    assert settings.input_border_radius == 100
    assert settings.input_border_width == 0
    assert settings.button_border_radius == 12
    assert settings.button_font_size == 8


def test_non_numeric_values_are_dropped() -> None:
    settings = sanitize_settings(
        {"input_border_radius": "8px", "input_border_width": True, "button_font_size": "nan"}
    )

    assert settings.is_empty()


def test_weight_line_height_and_fonts() -> None:
    settings = sanitize_settings(
        {
            "button_font_weight": 700,
            "button_line_height": "1.25",
            "input_font_family": "Open Sans",
            "label_font_family": "",
            "button_font_family": "Comic Sans MS",
        }
    )

    assert settings.button_font_weight == "700"
    assert settings.button_line_height == 1.25
    assert settings.input_font_family == "Open Sans"
    assert settings.label_font_family == ""
    assert settings.button_font_family is None


@pytest.mark.parametrize("value", ["bold", "950", "0", 650])
def test_invalid_weights_are_dropped(value: object) -> None:
    assert sanitize_settings({"button_font_weight": value}).button_font_weight is None


@pytest.mark.parametrize("value", ["0.4", "3.5", "1.5; color: red", None])
def test_invalid_line_heights_are_dropped(value: object) -> None:
    assert sanitize_settings({"button_line_height": value}).button_line_height is None


def test_unknown_and_empty_fields_are_ignored() -> None:
    settings = sanitize_settings({"label_color": "", "content": "x", "input_bg_color": "#fff"})

    assert settings.to_dict() == {"input_bg_color": "#fff"}


def test_title_is_stripped_of_markup_and_whitespace() -> None:
    assert sanitize_title("<b>Contact</b>\n   form\x00") == "Contact form"
    assert sanitize_title("x" * 200) == "x" * 120
    assert sanitize_title(None) == ""


def test_class_name_loses_unsafe_characters() -> None:
    assert sanitize_class_name("my class!{}") == "myclass"
    assert sanitize_class_name("a" * 80) == "a" * 64
    assert sanitize_class_name(5) == ""


def test_sanitize_preset() -> None:
    preset = sanitize_preset(
        {
            "title": " Contact ",
            "css_class": "lpfs-contact",
            "settings": {"input_border_radius": "8", "label_color": "#333"},
        }
    )

    assert preset == Preset(
        title="Contact",
        css_class="lpfs-contact",
        settings=StyleSettings(input_border_radius=8, label_color="#333"),
    )


def test_sanitize_preset_accepts_legacy_class_key() -> None:
    preset = sanitize_preset({"title": "Old", "custom_class": "old-form"})

    assert preset.css_class == "old-form"
    assert preset.settings.is_empty()


def test_sanitize_preset_accepts_preset_instances() -> None:
    original = Preset("Same", "same", StyleSettings(button_font_size=20))

    assert sanitize_preset(original) == original


@pytest.mark.parametrize(
    "raw",
    [
        "not a mapping",
        {"title": "", "css_class": "ok"},
        {"title": "No class", "css_class": "!!!"},
        {"title": "Digit", "css_class": "1bad"},
        {"title": "Bad settings", "css_class": "ok", "settings": ["x"]},
    ],
)
def test_sanitize_preset_rejects_unusable_input(raw: object) -> None:
    with pytest.raises(PresetValidationError):
        sanitize_preset(raw)


def test_sanitize_presets_collects_errors() -> None:
    report = sanitize_presets(
        [
            {"title": "Good", "css_class": "good"},
            {"title": "Bad", "css_class": "2bad"},
            42,
        ]
    )

    assert [preset.css_class for preset in report.presets] == ["good"]
    assert len(report.errors) == 2
    assert report.errors[0].startswith("preset #1:")
    assert report.errors[1].startswith("preset #2:")
