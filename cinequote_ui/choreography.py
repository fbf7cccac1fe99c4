from __future__ import annotations

from .modifiers import interpolate
from .scene import Scene

# Attributes the line transitions own; each transition replaces them so a prop
# never carries two modifiers for the same attribute.
_LINE_ATTRIBUTES = ("width", "font-size")


def shrink_line(scene: Scene, name: str, text: str) -> Scene:
    """Set a line's text and snap it to the compact width and font size."""

    theme = scene.theme
    return scene.set_text_of_prop(name, text).update_prop(
        name,
        lambda prop: prop.without_attributes(_LINE_ATTRIBUTES).add_statics(
            (
                ("width", f"{theme.shrunk_width_px}px"),
                ("font-size", f"{theme.shrunk_font_size_px}px"),
            )
        ),
    )


def grow_line(
    scene: Scene,
    name: str,
    text: str,
    *,
    now: int,
    duration_ms: int,
    start_width_px: int,
    end_width_px: int,
) -> Scene:
    """Set a line's text and start widening it; later `Scene.update` calls progress it.

    A running width animation on the same line is replaced, not stacked.
    """

    theme = scene.theme
    width = interpolate(
        "width",
        start=now,
        duration=duration_ms,
        start_value=start_width_px,
        end_value=end_width_px,
    )
    return scene.set_text_of_prop(name, text).update_prop(
        name,
        lambda prop: prop.without_attributes(_LINE_ATTRIBUTES)
        .add_statics((("font-size", f"{theme.grown_font_size_px}px"),))
        .add_modifier(width),
    )
