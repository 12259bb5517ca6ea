"""Web font requirements for a set of presets."""

from __future__ import annotations

import re
from typing import Iterable
from urllib.parse import quote

from formstyler.styles.constants import (
    BUTTON_FONT_FIELD,
    FONT_FAMILY_FIELDS,
    FONT_WEIGHT_FIELD,
    FONT_WEIGHTS,
    GOOGLE_FONTS_BASE_URL,
)
from formstyler.styles.models import Preset, settings_values

_FAMILY_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9 \-]*")

BASE_WEIGHTS: tuple[str, ...] = ("400", "500")
BUTTON_WEIGHTS: tuple[str, ...] = ("600", "700")


def _requestable_family(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    family = value.strip()
    if not family or not _FAMILY_RE.fullmatch(family):
        return None
    return family


def resolve_fonts(presets: Iterable[Preset]) -> frozenset[tuple[str, str]]:
    """Return every (family, weight) pair the presets need loaded.

    Each family used anywhere gets 400 and 500. A family used for buttons
    with a button weight set also gets that weight plus 600 and 700.
    Weights outside the CSS 100-900 set are dropped.
    """
    needed: set[tuple[str, str]] = set()
    for preset in presets:
        values = settings_values(preset.settings)
        button_weight = values.get(FONT_WEIGHT_FIELD)
        if isinstance(button_weight, int) and not isinstance(button_weight, bool):
            button_weight = str(button_weight)
        for field_name in FONT_FAMILY_FIELDS:
            family = _requestable_family(values.get(field_name))
            if family is None:
                continue
            weights = list(BASE_WEIGHTS)
            if field_name == BUTTON_FONT_FIELD and button_weight:
                weights.append(button_weight)
                weights.extend(BUTTON_WEIGHTS)
            needed.update((family, weight) for weight in weights if weight in FONT_WEIGHTS)
    return frozenset(needed)


def group_font_weights(pairs: Iterable[tuple[str, str]]) -> dict[str, list[str]]:
    """Group (family, weight) pairs into sorted weights per family."""
    grouped: dict[str, set[str]] = {}
    for family, weight in pairs:
        grouped.setdefault(family, set()).add(weight)
    return {
        family: sorted(grouped[family], key=int)
        for family in sorted(grouped)
    }


def build_google_fonts_url(pairs: Iterable[tuple[str, str]]) -> str | None:
    """Build a Google Fonts css2 URL, or ``None`` when nothing is needed."""
    grouped = group_font_weights(pairs)
    if not grouped:
        return None
    families = [
        f"{quote(family, safe=' ').replace(' ', '+')}:wght@{';'.join(weights)}"
        for family, weights in grouped.items()
    ]
    return f"{GOOGLE_FONTS_BASE_URL}?family={'&family='.join(families)}&display=swap"
