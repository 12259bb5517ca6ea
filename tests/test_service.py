"""Tests for the style service."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

import pytest

from formstyler.errors import FormStylerError
from formstyler.styles.models import Preset, PresetValidationError, StyleSettings
from formstyler.styles.service import StyleService
from formstyler.styles.store import PresetStore
from formstyler.styles.transfer import build_export_document

STAMP = datetime(2024, 1, 2, 3, 4, 5)


def _service(tmp_path: Path, **kwargs) -> StyleService:
    store = PresetStore(tmp_path / "presets.json")
    store.reload()
    return StyleService(store, tmp_path / "css", clock=lambda: STAMP, **kwargs)


def test_save_preset_writes_stylesheet_and_record(tmp_path: Path) -> None:
    service = _service(tmp_path, base_url="https://cdn.example.test/css/")

    index = service.save_preset(
        {"title": "Contact", "css_class": "contact", "settings": {"label_color": "#123456"}}
    )

    assert index == 0
    css = service.css_path.read_text(encoding="utf-8")
    assert css.startswith("/* Generated by formstyler on 2024-01-02 03:04:05 */\n")
    assert ".contact label { color: #123456 !important; }" in css
    assert service.stylesheet_reference() == {
        "url": "https://cdn.example.test/css/formstyler.css",
        "version": int(STAMP.timestamp()),
    }


def test_stylesheet_url_defaults_to_file_uri(tmp_path: Path) -> None:
    service = _service(tmp_path, css_filename="forms.css")

    path = service.generate_css_file()

    assert path == tmp_path / "css" / "forms.css"
    reference = service.stylesheet_reference()
    assert reference is not None
    assert reference["url"] == path.resolve().as_uri()


def test_compiled_output_is_cached_until_invalidated(tmp_path: Path) -> None:
    service = _service(tmp_path)
    service.store.add(Preset("One", "one"))

    first = service.compiled()
    assert service.compiled() is first

    service.invalidate()
    assert service.compiled() is not first


def test_mutations_regenerate_stylesheet(tmp_path: Path) -> None:
    service = _service(tmp_path)
    service.save_preset({"title": "One", "css_class": "one"})
    service.save_preset({"title": "Two", "css_class": "two"})

    service.update_preset(1, {"title": "Two", "css_class": "two", "settings": {"button_font_size": "18"}})
    assert ".two button { font-size: 18px !important; }" in service.css_path.read_text(encoding="utf-8")

    new_index = service.duplicate_preset(0)
    assert service.store.get(new_index).css_class == "one-copy"
    assert ".one-copy label" in service.css_path.read_text(encoding="utf-8")

    removed = service.delete_preset(0)
    assert removed.css_class == "one"
    assert ".one label" not in service.css_path.read_text(encoding="utf-8")


def test_invalid_presets_are_rejected(tmp_path: Path) -> None:
    service = _service(tmp_path)

    with pytest.raises(PresetValidationError):
        service.save_preset({"title": "Digits", "css_class": "1up"})
    service.save_preset({"title": "One", "css_class": "one"})
    with pytest.raises(FormStylerError):
        service.save_preset({"title": "Again", "css_class": "one"})
    assert len(service.presets()) == 1


def test_fonts_url(tmp_path: Path) -> None:
    service = _service(tmp_path)
    assert service.fonts_url() is None

    service.save_preset(
        {
            "title": "Fonts",
            "css_class": "fonts",
            "settings": {"button_font_family": "Roboto", "button_font_weight": "600"},
        }
    )

    assert service.fonts_url() == (
        "https://fonts.googleapis.com/css2?family=Roboto:wght@400;500;600;700&display=swap"
    )


def test_inline_styles(tmp_path: Path) -> None:
    service = _service(tmp_path)
    assert service.inline_styles() == ""

    service.store.add(Preset("One", "one"))
    service.invalidate()

    inline = service.inline_styles()
    assert inline.startswith('<style type="text/css">\n/* Generated by formstyler')
    assert inline.endswith("</style>\n")


def test_skipped_presets_are_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    (tmp_path / "presets.json").write_text(
        json.dumps([{"title": "Ok", "css_class": "ok"}]), encoding="utf-8"
    )
    store = PresetStore(tmp_path / "presets.json")
    store.reload()
    store._presets.append(Preset("Legacy", "9legacy", StyleSettings()))
    service = StyleService(store, tmp_path / "css", clock=lambda: STAMP)

    with caplog.at_level(logging.WARNING, logger="formstyler"):
        output = service.compiled()

    assert len(output.skipped) == 1
    assert "css compile: preset '9legacy' skipped" in caplog.text


def test_write_failure_returns_none(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    blocker = tmp_path / "css"
    blocker.write_text("not a directory", encoding="utf-8")
    service = _service(tmp_path)

    with caplog.at_level(logging.ERROR, logger="formstyler"):
        assert service.generate_css_file() is None

    assert "failed to write css file" in caplog.text
    assert service.stylesheet_reference() is None


def test_clear_cache_regenerates(tmp_path: Path) -> None:
    service = _service(tmp_path)
    service.save_preset({"title": "One", "css_class": "one"})
    service.css_path.write_text("stale", encoding="utf-8")

    path = service.clear_cache()

    assert path == service.css_path
    assert ".one label" in path.read_text(encoding="utf-8")


def test_export_and_import(tmp_path: Path) -> None:
    service = _service(tmp_path)
    service.save_preset({"title": "One", "css_class": "one"})

    exported = json.loads(service.export_text(site_url="https://example.test"))
    assert exported["format"] == "formstyler"
    assert exported["exported_at"] == "2024-01-02 03:04:05"
    assert [item["css_class"] for item in exported["presets"]] == ["one"]

    document = build_export_document(
        [
            Preset("One updated", "one", StyleSettings(label_color="#abcdef")),
            Preset("Two", "two"),
        ]
    )
    result = service.import_text(json.dumps(document))

    assert (result.imported, result.updated) == (1, 1)
    assert [preset.title for preset in service.presets()] == ["One updated", "Two"]
    assert ".one label { color: #abcdef !important; }" in service.css_path.read_text(encoding="utf-8")


def test_purge_removes_everything(tmp_path: Path) -> None:
    service = _service(tmp_path)
    service.save_preset({"title": "One", "css_class": "one"})
    assert service.css_path.exists()

    service.purge()

    assert service.presets() == []
    assert not service.store.path.exists()
    assert not (tmp_path / "css").exists()
