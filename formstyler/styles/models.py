"""Style preset models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Mapping


class PresetValidationError(ValueError):
    """Raised when a preset cannot be sanitized into a usable shape."""


@dataclass(frozen=True, slots=True)
class StyleSettings:
    """Sanitized settings for one preset. ``None`` means unset."""

    input_border_radius: int | None = None
    input_border_width: int | None = None
    input_border_color: str | None = None
    input_text_color: str | None = None
    input_bg_color: str | None = None
    input_focus_border_color: str | None = None
    input_font_family: str | None = None
    label_color: str | None = None
    label_font_family: str | None = None
    button_border_radius: int | None = None
    button_border_color: str | None = None
    button_bg_color: str | None = None
    button_text_color: str | None = None
    button_hover_bg_color: str | None = None
    button_hover_text_color: str | None = None
    button_hover_border_color: str | None = None
    button_font_size: int | None = None
    button_font_weight: str | None = None
    button_line_height: float | None = None
    button_font_family: str | None = None

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(item.name for item in fields(cls))

    def to_dict(self) -> dict[str, Any]:
        """Return only the fields that are set."""
        return {key: value for key, value in asdict(self).items() if value is not None}

    def is_empty(self) -> bool:
        return not self.to_dict()


@dataclass(frozen=True, slots=True)
class Preset:
    """A named bundle of form styles bound to a CSS class."""

    title: str
    css_class: str
    settings: StyleSettings = field(default_factory=StyleSettings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "css_class": self.css_class,
            "settings": self.settings.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class SkippedItem:
    """A preset or single field the compiler refused to emit."""

    css_class: str
    reason: str
    setting: str | None = None

    def describe(self) -> str:
        if self.setting is None:
            return f"preset {self.css_class!r} skipped: {self.reason}"
        return f"preset {self.css_class!r} field {self.setting!r} skipped: {self.reason}"


@dataclass(frozen=True, slots=True)
class CompiledOutput:
    """Compiled stylesheet plus the web fonts it needs."""

    css: str
    fonts_needed: frozenset[tuple[str, str]] = frozenset()
    skipped: tuple[SkippedItem, ...] = ()


@dataclass(frozen=True, slots=True)
class StyleTemplate:
    """A predesigned settings bundle presets can start from."""

    template_id: str
    name: str
    description: str
    settings: Mapping[str, Any]


def settings_values(settings: StyleSettings | Mapping[str, Any] | None) -> dict[str, Any]:
    """Return the set fields of a settings record or plain mapping."""
    if settings is None:
        return {}
    if isinstance(settings, StyleSettings):
        return settings.to_dict()
    return {key: value for key, value in settings.items() if value is not None}
