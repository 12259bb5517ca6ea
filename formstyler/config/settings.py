"""Application settings stored in a YAML file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from formstyler.errors import ErrorCode, FormStylerError
from formstyler.styles.constants import CSS_FILENAME, PRESETS_FILENAME

LOG_LEVELS: tuple[str, ...] = ("debug", "info", "warning", "error")
DEFAULT_LOG_LEVEL = "error"


class AppSettings:
    """Wraps config.yaml for persistent app configuration."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = Path(config_path) if config_path else self._app_data_dir() / "config.yaml"
        self._data: dict[str, Any] = {}
        self.reload()

    @property
    def config_path(self) -> Path:
        return self._config_path

    def reload(self) -> None:
        if not self._config_path.exists():
            self._data = {}
            return
        try:
            data = yaml.safe_load(self._config_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise FormStylerError(
                ErrorCode.CONFIG_INVALID,
                path=self._config_path,
                details={"error": str(exc)},
            ) from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise FormStylerError(ErrorCode.CONFIG_INVALID, path=self._config_path)
        self._data = data

    def save(self) -> None:
        try:
            self._config_path.parent.mkdir(parents=True, exist_ok=True)
            self._config_path.write_text(
                yaml.safe_dump(self._data, default_flow_style=False, sort_keys=True),
                encoding="utf-8",
            )
        except OSError as exc:
            raise FormStylerError(
                ErrorCode.CONFIG_PERMISSION_DENIED,
                path=self._config_path,
                details={"error": str(exc)},
            ) from exc

    # -- storage --

    @property
    def presets_path(self) -> Path:
        raw = self._str_value("presets_path")
        return Path(raw).expanduser() if raw else self.app_data_dir / PRESETS_FILENAME

    @presets_path.setter
    def presets_path(self, value: str | Path) -> None:
        self._data["presets_path"] = str(value)

    # -- stylesheet output --

    @property
    def css_output_dir(self) -> Path:
        raw = self._str_value("css_output_dir")
        return Path(raw).expanduser() if raw else self.app_data_dir / "css"

    @css_output_dir.setter
    def css_output_dir(self, value: str | Path) -> None:
        self._data["css_output_dir"] = str(value)

    @property
    def css_filename(self) -> str:
        raw = self._str_value("css_filename")
        if not raw or "/" in raw or "\\" in raw or not raw.endswith(".css"):
            return CSS_FILENAME
        return raw

    @css_filename.setter
    def css_filename(self, value: str) -> None:
        self._data["css_filename"] = (value or "").strip() or CSS_FILENAME

    @property
    def css_base_url(self) -> str | None:
        return self._str_value("css_base_url") or None

    @css_base_url.setter
    def css_base_url(self, value: str | None) -> None:
        self._data["css_base_url"] = (value or "").strip()

    @property
    def load_google_fonts(self) -> bool:
        value = self._data.get("load_google_fonts", True)
        return value if isinstance(value, bool) else True

    @load_google_fonts.setter
    def load_google_fonts(self, value: bool) -> None:
        self._data["load_google_fonts"] = bool(value)

    # -- logging --

    @property
    def logging_enabled(self) -> bool:
        value = self._logging_section().get("enabled", False)
        return value if isinstance(value, bool) else False

    @logging_enabled.setter
    def logging_enabled(self, value: bool) -> None:
        self._logging_section(create=True)["enabled"] = bool(value)

    @property
    def log_level(self) -> str:
        raw = self._logging_section().get("level", DEFAULT_LOG_LEVEL)
        level = raw.strip().lower() if isinstance(raw, str) else ""
        return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL

    @log_level.setter
    def log_level(self, value: str) -> None:
        level = (value or "").strip().lower()
        if level not in LOG_LEVELS:
            level = DEFAULT_LOG_LEVEL
        self._logging_section(create=True)["level"] = level

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        return self._config_path.parent

    @property
    def log_dir(self) -> Path:
        return self.app_data_dir / "logs"

    def _str_value(self, key: str) -> str:
        value = self._data.get(key)
        return value.strip() if isinstance(value, str) else ""

    def _logging_section(self, *, create: bool = False) -> dict[str, Any]:
        section = self._data.get("logging")
        if isinstance(section, dict):
            return section
        if create:
            section = {}
            self._data["logging"] = section
            return section
        return {}

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "formstyler"
