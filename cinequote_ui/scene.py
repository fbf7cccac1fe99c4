from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
from types import MappingProxyType
from typing import Callable, Mapping

from .props import Position, Prop, advance_prop, label
from .render import RenderedElement, SceneRenderBatch, render_prop
from .style.theme import DEFAULT_THEME, StageTheme

LOGGER = logging.getLogger(__name__)


def missing_prop(name: str, *, theme: StageTheme = DEFAULT_THEME) -> Prop:
    """Visible placeholder substituted when a scene lookup misses.

    It is laid out like a label but carries `noop`, so clicking it never drives the quiz.
    """

    position = Position(theme.fallback_x_px, theme.fallback_y_px)
    placeholder = label(position, f"Missing prop: {name}", theme=theme).add_statics(
        (("color", theme.fallback_text),)
    )
    return replace(placeholder, message="noop")


@dataclass(frozen=True)
class Scene:
    """Immutable name -> Prop snapshot.

    Iteration follows insertion order; replacing an existing name keeps its slot.
    Every mutation returns a new Scene over a private copy of the mapping.
    """

    props: Mapping[str, Prop] = field(default_factory=dict)
    theme: StageTheme = field(default=DEFAULT_THEME, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "props", MappingProxyType(dict(self.props)))

    @classmethod
    def from_props(cls, props: Mapping[str, Prop], *, theme: StageTheme = DEFAULT_THEME) -> Scene:
        return cls(props=props, theme=theme)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scene):
            return NotImplemented
        return dict(self.props) == dict(other.props)

    def __hash__(self) -> int:
        return hash(frozenset(self.props.items()))

    def names(self) -> tuple[str, ...]:
        return tuple(self.props)

    def __contains__(self, name: object) -> bool:
        return name in self.props

    def __len__(self) -> int:
        return len(self.props)

    def prop_or_fallback(self, name: str) -> Prop:
        found = self.props.get(name)
        if found is not None:
            return found
        LOGGER.debug("prop `%s` not in scene; substituting placeholder", name)
        return missing_prop(name, theme=self.theme)

    def upsert(self, name: str, prop: Prop) -> Scene:
        merged = dict(self.props)
        merged[name] = prop
        return Scene(props=merged, theme=self.theme)

    def update_prop(self, name: str, fn: Callable[[Prop], Prop]) -> Scene:
        return self.upsert(name, fn(self.prop_or_fallback(name)))

    def set_text_of_prop(self, name: str, text: str) -> Scene:
        return self.update_prop(name, lambda prop: prop.set_text(text))

    def update(self, now: int) -> Scene:
        return Scene(
            props={name: advance_prop(now, prop) for name, prop in self.props.items()},
            theme=self.theme,
        )

    def render(self, now: int) -> list[RenderedElement]:
        return [render_prop(name, now, prop) for name, prop in self.props.items()]

    def render_batch(self, now: int) -> SceneRenderBatch:
        return SceneRenderBatch(timestamp=now, elements=tuple(self.render(now)))
