from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

from .messages import QuizMessage
from .modifiers import to_attribute
from .props import Prop, PropKind


ElementTag = Literal["div", "button"]


@dataclass(frozen=True)
class RenderedElement:
    """Backend-agnostic description of one prop for a single frame."""

    name: str
    kind: PropKind
    tag: ElementTag
    text: str
    attributes: tuple[tuple[str, str], ...]
    message: QuizMessage

    def style(self) -> dict[str, str]:
        """Collapse attributes into a mapping; a later duplicate overrides an earlier one."""

        out: dict[str, str] = {}
        for name, value in self.attributes:
            out[name] = value
        return out


@dataclass(frozen=True)
class SceneRenderBatch:
    """Render list for a single pass; hosts should draw every element in one call."""

    timestamp: int
    elements: tuple[RenderedElement, ...]

    def find(self, name: str) -> RenderedElement | None:
        for element in self.elements:
            if element.name == name:
                return element
        return None


class SceneRenderer(Protocol):
    """Host that turns a render batch into on-screen output."""

    def draw_scene_batch(self, batch: SceneRenderBatch) -> None:
        ...


def render_prop(name: str, now: int, prop: Prop) -> RenderedElement:
    if prop.kind == "label":
        return _render_label(name, now, prop)
    if prop.kind == "button":
        return _render_button(name, now, prop)
    raise ValueError(f"unknown prop kind: {prop.kind}")


def _render_label(name: str, now: int, prop: Prop) -> RenderedElement:
    _ = now
    return RenderedElement(
        name=name,
        kind="label",
        tag="div",
        text=prop.text,
        attributes=tuple(to_attribute(m) for m in prop.modifiers),
        message=prop.message,
    )


def _render_button(name: str, now: int, prop: Prop) -> RenderedElement:
    _ = now
    return RenderedElement(
        name=name,
        kind="button",
        tag="button",
        text=prop.text,
        attributes=tuple(to_attribute(m) for m in prop.modifiers),
        message=prop.message,
    )
