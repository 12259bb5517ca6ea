"""JSON file storage for style presets."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from formstyler.errors import ErrorCode, FormStylerError, classify_exception
from formstyler.styles.models import Preset
from formstyler.styles.validator import sanitize_presets

logger = logging.getLogger(__name__)

_MAX_STORE_BYTES = 2 * 1024 * 1024


class PresetStore:
    """Keeps the ordered preset list and persists it to a JSON file.

    Presets read from disk are sanitized again; entries that fail are
    dropped and reported through :meth:`load_errors`.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._presets: list[Preset] = []
        self._load_errors: list[str] = []

    @property
    def path(self) -> Path:
        return self._path

    def reload(self) -> None:
        self._presets = []
        self._load_errors = []
        if not self._path.exists():
            return
        try:
            size = self._path.stat().st_size
            if size > _MAX_STORE_BYTES:
                self._load_errors.append(
                    f"{self._path}: file exceeds max size ({_MAX_STORE_BYTES} bytes)"
                )
                return
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            self._load_errors.append(f"Unable to read presets from {self._path}: {exc}")
            return
        if not isinstance(data, list):
            self._load_errors.append(f"{self._path}: expected a JSON list of presets")
            return

        report = sanitize_presets(data)
        self._load_errors.extend(report.errors)
        seen: set[str] = set()
        for preset in report.presets:
            if preset.css_class in seen:
                self._load_errors.append(
                    f"Duplicate preset class {preset.css_class!r}; keeping the first one."
                )
                continue
            seen.add(preset.css_class)
            self._presets.append(preset)

    def load_errors(self) -> list[str]:
        return list(self._load_errors)

    def save(self) -> None:
        self._write(self._presets)

    def _write(self, presets: list[Preset]) -> None:
        payload = [preset.to_dict() for preset in presets]
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self._path.with_name(self._path.name + ".tmp")
            tmp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError as exc:
            raise classify_exception(exc, self._path) from exc
        logger.debug("saved %d presets to %s", len(presets), self._path)

    def list_presets(self) -> list[Preset]:
        return list(self._presets)

    def get(self, index: int) -> Preset:
        if index < 0 or index >= len(self._presets):
            raise FormStylerError(ErrorCode.PRESET_NOT_FOUND, details={"index": index})
        return self._presets[index]

    def find_by_class(self, css_class: str) -> int | None:
        for index, preset in enumerate(self._presets):
            if preset.css_class == css_class:
                return index
        return None

    def add(self, preset: Preset) -> int:
        """Append a preset and return its index."""
        self._ensure_class_free(preset.css_class)
        self._commit([*self._presets, preset])
        return len(self._presets) - 1

    def update(self, index: int, preset: Preset) -> None:
        self.get(index)
        self._ensure_class_free(preset.css_class, ignore_index=index)
        staged = list(self._presets)
        staged[index] = preset
        self._commit(staged)

    def delete(self, index: int) -> Preset:
        removed = self.get(index)
        staged = list(self._presets)
        del staged[index]
        self._commit(staged)
        return removed

    def duplicate(self, index: int) -> int:
        """Copy a preset under a fresh ``-copy`` class and return the new index."""
        original = self.get(index)
        base_class = f"{original.css_class}-copy"
        css_class = base_class
        existing = {preset.css_class for preset in self._presets}
        counter = 1
        while css_class in existing:
            css_class = f"{base_class}-{counter}"
            counter += 1
        copy = Preset(
            title=f"{original.title} - Copy",
            css_class=css_class,
            settings=original.settings,
        )
        self._commit([*self._presets, copy])
        return len(self._presets) - 1

    def replace_all(self, presets: list[Preset]) -> None:
        self._commit(list(presets))

    def _commit(self, presets: list[Preset]) -> None:
        """Write ``presets`` and keep them only once the file is saved."""
        self._write(presets)
        self._presets = presets

    def _ensure_class_free(self, css_class: str, *, ignore_index: int | None = None) -> None:
        found = self.find_by_class(css_class)
        if found is not None and found != ignore_index:
            raise FormStylerError(
                ErrorCode.PRESET_DUPLICATE_CLASS,
                details={"css_class": css_class},
            )
