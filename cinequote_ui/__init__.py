"""Scene and animation engine for the cinequote quiz stage."""

from .choreography import grow_line, shrink_line
from .messages import QUIZ_MESSAGES, QuizMessage, parse_quiz_message
from .modifiers import (
    Interpolated,
    Modifier,
    Static,
    advance_modifier,
    interpolate,
    static,
    to_attribute,
)
from .props import Position, Prop, PropKind, advance_prop, button, empty_prop, label
from .render import RenderedElement, SceneRenderBatch, SceneRenderer, render_prop
from .scene import Scene, missing_prop
from .style.theme import DEFAULT_THEME, StageTheme, validate_theme_tokens
from .timing import TimeSpan

__all__ = [
    "DEFAULT_THEME",
    "Interpolated",
    "Modifier",
    "Position",
    "Prop",
    "PropKind",
    "QUIZ_MESSAGES",
    "QuizMessage",
    "RenderedElement",
    "Scene",
    "SceneRenderBatch",
    "SceneRenderer",
    "StageTheme",
    "Static",
    "TimeSpan",
    "advance_modifier",
    "advance_prop",
    "button",
    "empty_prop",
    "grow_line",
    "interpolate",
    "label",
    "missing_prop",
    "parse_quiz_message",
    "render_prop",
    "shrink_line",
    "static",
    "to_attribute",
    "validate_theme_tokens",
]
