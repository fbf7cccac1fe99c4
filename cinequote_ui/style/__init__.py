"""Theme tokens for the cinequote stage."""

from .theme import DEFAULT_THEME, StageTheme, validate_theme_tokens

__all__ = [
    "DEFAULT_THEME",
    "StageTheme",
    "validate_theme_tokens",
]
