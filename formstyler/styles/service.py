"""Compiled stylesheet caching and static file output."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Mapping

from formstyler.styles.compiler import compile_presets
from formstyler.styles.constants import CSS_FILE_RECORD, CSS_FILENAME
from formstyler.styles.fonts import build_google_fonts_url
from formstyler.styles.models import CompiledOutput, Preset
from formstyler.styles.store import PresetStore
from formstyler.styles.transfer import (
    MergeResult,
    build_export_document,
    merge_presets,
    parse_import_document,
)
from formstyler.styles.validator import sanitize_preset

logger = logging.getLogger(__name__)


class StyleService:
    """Serve compiled preset CSS and keep the static stylesheet current.

    Every preset mutation goes through the store, drops the cached output
    and rewrites the stylesheet. The service is not thread-safe; callers
    serialize regeneration.
    """

    def __init__(
        self,
        store: PresetStore,
        output_dir: Path,
        *,
        css_filename: str = CSS_FILENAME,
        base_url: str | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._output_dir = Path(output_dir)
        self._css_filename = css_filename
        self._base_url = base_url
        self._clock = clock or datetime.now
        self._compiled: CompiledOutput | None = None
        self._fonts_url: str | None = None
        self._fonts_resolved = False

    @property
    def store(self) -> PresetStore:
        return self._store

    @property
    def css_path(self) -> Path:
        return self._output_dir / self._css_filename

    @property
    def record_path(self) -> Path:
        return self._output_dir / CSS_FILE_RECORD

    def presets(self) -> list[Preset]:
        return self._store.list_presets()

    def compiled(self) -> CompiledOutput:
        if self._compiled is None:
            output = compile_presets(self._store.list_presets(), generated_at=self._clock())
            for item in output.skipped:
                logger.warning("css compile: %s", item.describe())
            self._compiled = output
        return self._compiled

    def invalidate(self) -> None:
        self._compiled = None
        self._fonts_url = None
        self._fonts_resolved = False

    def fonts_url(self) -> str | None:
        if not self._fonts_resolved:
            self._fonts_url = build_google_fonts_url(self.compiled().fonts_needed)
            self._fonts_resolved = True
        return self._fonts_url

    def inline_styles(self) -> str:
        """Return the stylesheet wrapped for inline output in a page head."""
        if not self._store.list_presets():
            return ""
        return f'<style type="text/css">\n{self.compiled().css}</style>\n'

    def generate_css_file(self) -> Path | None:
        """Write the compiled stylesheet; return its path or ``None`` on failure."""
        css = self.compiled().css
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            self.css_path.write_text(css, encoding="utf-8")
        except OSError as exc:
            logger.error(
                "failed to write css file=%s content_length=%d error=%s",
                self.css_path,
                len(css),
                exc,
            )
            return None

        record = {"url": self._stylesheet_url(), "version": int(self._clock().timestamp())}
        try:
            self.record_path.write_text(json.dumps(record), encoding="utf-8")
        except OSError as exc:
            logger.error("failed to record css file version path=%s error=%s", self.record_path, exc)
            return None
        logger.info("css file generated file=%s size=%d", self.css_path, len(css))
        return self.css_path

    def delete_css_file(self) -> bool:
        for path in (self.css_path, self.record_path):
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                logger.error("failed to delete %s: %s", path, exc)
                return False
        return True

    def stylesheet_reference(self) -> dict[str, Any] | None:
        """Return the recorded ``{url, version}`` of the static stylesheet."""
        if not self.record_path.exists() or not self.css_path.exists():
            return None
        try:
            data = json.loads(self.record_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            return None
        if not isinstance(data, dict) or "url" not in data or "version" not in data:
            return None
        return {"url": data["url"], "version": data["version"]}

    def clear_cache(self) -> Path | None:
        """Drop cached output and rebuild the stylesheet from scratch."""
        self.invalidate()
        self.delete_css_file()
        path = self.generate_css_file()
        logger.info("cache cleared")
        return path

    def save_preset(self, raw: Mapping[str, Any] | Preset) -> int:
        preset = sanitize_preset(raw)
        index = self._store.add(preset)
        logger.info("style preset added title=%s class=%s", preset.title, preset.css_class)
        self._regenerate()
        return index

    def update_preset(self, index: int, raw: Mapping[str, Any] | Preset) -> None:
        preset = sanitize_preset(raw)
        self._store.update(index, preset)
        logger.info(
            "style preset updated index=%d title=%s class=%s",
            index,
            preset.title,
            preset.css_class,
        )
        self._regenerate()

    def delete_preset(self, index: int) -> Preset:
        removed = self._store.delete(index)
        logger.info("style preset deleted title=%s class=%s", removed.title, removed.css_class)
        self._regenerate()
        return removed

    def duplicate_preset(self, index: int) -> int:
        new_index = self._store.duplicate(index)
        original = self._store.get(index)
        duplicate = self._store.get(new_index)
        logger.info(
            "style preset duplicated original_class=%s duplicate_class=%s",
            original.css_class,
            duplicate.css_class,
        )
        self._regenerate()
        return new_index

    def export_text(self, *, site_url: str | None = None) -> str:
        presets = self._store.list_presets()
        document = build_export_document(presets, site_url=site_url, exported_at=self._clock())
        logger.info("styles exported preset_count=%d", len(presets))
        return json.dumps(document, indent=2)

    def import_text(self, text: str) -> MergeResult:
        incoming = parse_import_document(text)
        result = merge_presets(self._store.list_presets(), incoming)
        self._store.replace_all(result.presets)
        logger.info(
            "styles imported imported=%d updated=%d total=%d",
            result.imported,
            result.updated,
            len(result.presets),
        )
        self._regenerate()
        return result

    def purge(self) -> None:
        """Remove the stored presets and every generated file."""
        self.invalidate()
        self.delete_css_file()
        self._store.replace_all([])
        self._store.path.unlink(missing_ok=True)
        if self._output_dir.is_dir() and not any(self._output_dir.iterdir()):
            self._output_dir.rmdir()
        logger.info("presets and generated stylesheet removed")

    def _regenerate(self) -> None:
        self.invalidate()
        self.generate_css_file()

    def _stylesheet_url(self) -> str:
        if self._base_url:
            return f"{self._base_url.rstrip('/')}/{self._css_filename}"
        return self.css_path.resolve().as_uri()
