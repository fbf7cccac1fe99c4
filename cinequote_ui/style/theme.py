from __future__ import annotations

from dataclasses import asdict, dataclass
import re
from typing import Any, Mapping

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

_COLOR_TOKENS = (
    "background",
    "label_text",
    "button_bg",
    "button_text",
    "fallback_text",
)
_POSITIVE_TOKENS = (
    "button_size_px",
    "line_font_size_px",
    "grown_font_size_px",
    "shrunk_font_size_px",
    "shrunk_width_px",
)
_COORDINATE_TOKENS = (
    "fallback_x_px",
    "fallback_y_px",
)


@dataclass(frozen=True)
class StageTheme:
    """Token set shared by the prop factories, line helpers and render hosts."""

    background: str = "#101418"
    label_text: str = "#F8FAFC"
    button_bg: str = "#2B3442"
    button_text: str = "#F8FAFC"
    fallback_text: str = "#F43F5E"
    button_size_px: int = 300
    line_font_size_px: int = 24
    grown_font_size_px: int = 32
    shrunk_font_size_px: int = 16
    shrunk_width_px: int = 40
    fallback_x_px: int = 10
    fallback_y_px: int = 10


DEFAULT_THEME = StageTheme()


def validate_theme_tokens(overrides: Mapping[str, Any] | None = None) -> StageTheme:
    """Validate and merge user token overrides against the defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_THEME)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown theme token: {key}")
            raw[key] = value

    for key in _COLOR_TOKENS:
        if not isinstance(raw[key], str) or not _HEX_COLOR.match(raw[key]):
            raise ValueError(f"Token `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    for key in _POSITIVE_TOKENS:
        if not _is_int(raw[key]) or int(raw[key]) <= 0:
            raise ValueError(f"Token `{key}` must be a positive integer")

    for key in _COORDINATE_TOKENS:
        if not _is_int(raw[key]) or int(raw[key]) < 0:
            raise ValueError(f"Token `{key}` must be a non-negative integer")

    return StageTheme(
        background=str(raw["background"]),
        label_text=str(raw["label_text"]),
        button_bg=str(raw["button_bg"]),
        button_text=str(raw["button_text"]),
        fallback_text=str(raw["fallback_text"]),
        button_size_px=int(raw["button_size_px"]),
        line_font_size_px=int(raw["line_font_size_px"]),
        grown_font_size_px=int(raw["grown_font_size_px"]),
        shrunk_font_size_px=int(raw["shrunk_font_size_px"]),
        shrunk_width_px=int(raw["shrunk_width_px"]),
        fallback_x_px=int(raw["fallback_x_px"]),
        fallback_y_px=int(raw["fallback_y_px"]),
    )


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
