from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Collection, Iterable, Literal

from .messages import QuizMessage
from .modifiers import Modifier, advance_modifier, static
from .style.theme import DEFAULT_THEME, StageTheme


PropKind = Literal["label", "button"]


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def statics(self) -> tuple[tuple[str, str], ...]:
        return (
            ("position", "absolute"),
            ("left", f"{self.x}px"),
            ("top", f"{self.y}px"),
        )


@dataclass(frozen=True)
class Prop:
    """Named visual element held by a Scene.

    Modifiers are kept newest-first; every setter returns a new Prop.
    """

    kind: PropKind = "label"
    message: QuizMessage = "noop"
    modifiers: tuple[Modifier, ...] = ()
    text: str = ""

    def add_modifier(self, modifier: Modifier) -> Prop:
        if modifier in self.modifiers:
            return self
        return replace(self, modifiers=(modifier,) + self.modifiers)

    def add_statics(self, pairs: Iterable[tuple[str, str]]) -> Prop:
        statics = tuple(static(name, value) for name, value in pairs)
        return replace(self, modifiers=statics + self.modifiers)

    def without_attributes(self, attributes: Collection[str]) -> Prop:
        kept = tuple(m for m in self.modifiers if m.attribute not in attributes)
        if len(kept) == len(self.modifiers):
            return self
        return replace(self, modifiers=kept)

    def set_text(self, text: str) -> Prop:
        return replace(self, text=text)

    def advance(self, now: int) -> Prop:
        advanced = tuple(advance_modifier(now, m) for m in self.modifiers)
        if advanced == self.modifiers:
            return self
        return replace(self, modifiers=advanced)


def advance_prop(now: int, prop: Prop) -> Prop:
    return prop.advance(now)


def empty_prop() -> Prop:
    return Prop(kind="label", message="noop", modifiers=(), text="")


def label(position: Position, text: str, *, theme: StageTheme = DEFAULT_THEME) -> Prop:
    """Single-line absolutely positioned text; clicking it asks for a hint."""

    return (
        Prop(kind="label", message="reveal_hint", text=text)
        .add_statics(position.statics())
        .add_statics(
            (
                ("white-space", "nowrap"),
                ("overflow", "hidden"),
                ("font-size", f"{theme.line_font_size_px}px"),
            )
        )
    )


def button(
    position: Position,
    text: str,
    message: QuizMessage,
    *,
    theme: StageTheme = DEFAULT_THEME,
) -> Prop:
    size = f"{theme.button_size_px}px"
    return (
        Prop(kind="button", message=message, text=text)
        .add_statics(position.statics())
        .add_statics((("width", size), ("height", size)))
    )
