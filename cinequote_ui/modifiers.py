from __future__ import annotations

from dataclasses import dataclass, field, replace
import math
from typing import Literal, Union

from .timing import TimeSpan


ModifierKind = Literal["interpolated", "static"]


@dataclass(frozen=True)
class Interpolated:
    """A pixel attribute animated linearly across a TimeSpan.

    `current_value` is owned by `advance_modifier`; callers construct it through
    `interpolate(...)` so it starts at `start_value`.
    """

    attribute: str
    span: TimeSpan
    start_value: int
    end_value: int
    current_value: int
    kind: ModifierKind = field(default="interpolated", init=False)


@dataclass(frozen=True)
class Static:
    attribute: str
    value: str
    kind: ModifierKind = field(default="static", init=False)


Modifier = Union[Interpolated, Static]


def interpolate(
    attribute: str,
    *,
    start: int,
    duration: int,
    start_value: int,
    end_value: int,
) -> Interpolated:
    return Interpolated(
        attribute=attribute,
        span=TimeSpan(start=start, duration=duration),
        start_value=start_value,
        end_value=end_value,
        current_value=start_value,
    )


def static(attribute: str, value: str) -> Static:
    return Static(attribute=attribute, value=value)


def advance_modifier(now: int, modifier: Modifier) -> Modifier:
    if modifier.kind == "interpolated":
        ratio = modifier.span.ratio(now)
        delta = (modifier.end_value - modifier.start_value) * ratio
        current = _round_half_up(modifier.start_value + delta)
        if current == modifier.current_value:
            return modifier
        return replace(modifier, current_value=current)
    if modifier.kind == "static":
        return modifier
    raise ValueError(f"unknown modifier kind: {modifier.kind}")


def to_attribute(modifier: Modifier) -> tuple[str, str]:
    if modifier.kind == "interpolated":
        return (modifier.attribute, f"{modifier.current_value}px")
    if modifier.kind == "static":
        return (modifier.attribute, modifier.value)
    raise ValueError(f"unknown modifier kind: {modifier.kind}")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
