"""Style preset field tables and limits."""

from __future__ import annotations

PROJECT_NAME = "formstyler"
PROJECT_VERSION = "1.0.0"

CSS_FILENAME = "formstyler.css"
CSS_FILE_RECORD = "css_file.json"
PRESETS_FILENAME = "presets.json"

NUMERIC_FIELDS: tuple[str, ...] = (
    "input_border_radius",
    "input_border_width",
    "button_border_radius",
    "button_font_size",
)

NUMERIC_RANGES: dict[str, tuple[int, int]] = {
    "input_border_radius": (0, 100),
    "input_border_width": (0, 20),
    "button_border_radius": (0, 100),
    "button_font_size": (8, 72),
}

COLOR_FIELDS: tuple[str, ...] = (
    "input_border_color",
    "input_text_color",
    "input_bg_color",
    "input_focus_border_color",
    "label_color",
    "button_bg_color",
    "button_border_color",
    "button_text_color",
    "button_hover_bg_color",
    "button_hover_text_color",
    "button_hover_border_color",
)

FONT_WEIGHT_FIELD = "button_font_weight"
LINE_HEIGHT_FIELD = "button_line_height"
LINE_HEIGHT_RANGE: tuple[float, float] = (0.5, 3.0)

FONT_FAMILY_FIELDS: tuple[str, ...] = (
    "input_font_family",
    "label_font_family",
    "button_font_family",
)
BUTTON_FONT_FIELD = "button_font_family"

FONT_WEIGHTS: dict[str, str] = {
    "100": "Thin",
    "200": "Extra Light",
    "300": "Light",
    "400": "Normal",
    "500": "Medium",
    "600": "Semi Bold",
    "700": "Bold",
    "800": "Extra Bold",
    "900": "Black",
}

COLOR_KEYWORDS: frozenset[str] = frozenset(
    {"transparent", "inherit", "initial", "unset", "currentcolor"}
)

# "" selects the inherited font.
ALLOWED_FONTS: tuple[str, ...] = (
    "",
    "Open Sans",
    "Roboto",
    "Lato",
    "Montserrat",
    "Oswald",
    "Source Sans Pro",
    "Raleway",
    "Poppins",
    "Nunito",
    "Ubuntu",
    "Playfair Display",
    "Merriweather",
    "Inter",
    "PT Sans",
    "Roboto Condensed",
    "Noto Sans",
    "Fira Sans",
    "Rubik",
    "Work Sans",
    "Crimson Text",
    "Libre Baskerville",
    "Roboto Slab",
    "Oxygen",
    "Titillium Web",
)

GOOGLE_FONTS_BASE_URL = "https://fonts.googleapis.com/css2"

MAX_TITLE_LEN = 120
MAX_CLASS_LEN = 64
