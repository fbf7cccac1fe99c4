from __future__ import annotations

import unittest

from cinequote_ui.messages import parse_quiz_message
from cinequote_ui.modifiers import Static, interpolate, static
from cinequote_ui.props import Position, Prop, advance_prop, button, empty_prop, label
from cinequote_ui.render import RenderedElement
from cinequote_ui.style.theme import validate_theme_tokens


class PropTests(unittest.TestCase):
    def test_add_modifier_prepends_and_dedups(self) -> None:
        m = static("color", "#ffffff")
        prop = empty_prop().add_modifier(m).add_modifier(m)
        self.assertEqual(prop.modifiers, (m,))

        other = static("width", "10px")
        prop = prop.add_modifier(other)
        self.assertEqual(prop.modifiers, (other, m))

    def test_add_modifier_keeps_interpolations_with_different_phase(self) -> None:
        first = interpolate("width", start=0, duration=100, start_value=0, end_value=10)
        second = interpolate("width", start=50, duration=100, start_value=0, end_value=10)
        prop = empty_prop().add_modifier(first).add_modifier(second)
        self.assertEqual(prop.modifiers, (second, first))

    def test_add_statics_prepends_in_order_without_dedup(self) -> None:
        prop = empty_prop().add_statics((("a", "1"),)).add_statics((("b", "2"), ("a", "1")))
        self.assertEqual(
            prop.modifiers,
            (Static("b", "2"), Static("a", "1"), Static("a", "1")),
        )

    def test_without_attributes_drops_every_match(self) -> None:
        width = interpolate("width", start=0, duration=10, start_value=0, end_value=5)
        prop = empty_prop().add_statics((("width", "1px"), ("color", "#ffffff"))).add_modifier(width)
        trimmed = prop.without_attributes(("width",))
        self.assertEqual(trimmed.modifiers, (Static("color", "#ffffff"),))
        self.assertIs(trimmed.without_attributes(("height",)), trimmed)

    def test_rendered_duplicates_resolve_to_the_later_entry(self) -> None:
        element = RenderedElement(
            name="Quote",
            kind="label",
            tag="div",
            text="",
            attributes=(("width", "1px"), ("color", "#ffffff"), ("width", "2px")),
            message="noop",
        )
        self.assertEqual(element.style(), {"width": "2px", "color": "#ffffff"})

    def test_set_text_replaces_only_text(self) -> None:
        prop = button(Position(1, 2), "Hint", "reveal_hint")
        renamed = prop.set_text("More")
        self.assertEqual(renamed.text, "More")
        self.assertEqual(renamed.modifiers, prop.modifiers)
        self.assertEqual(renamed.message, prop.message)
        self.assertEqual(prop.text, "Hint")

    def test_advance_prop_preserves_order(self) -> None:
        width = interpolate("width", start=0, duration=100, start_value=0, end_value=100)
        prop = empty_prop().add_modifier(width).add_statics((("color", "#000000"),))
        advanced = advance_prop(50, prop)
        self.assertEqual(advanced.modifiers[0], Static("color", "#000000"))
        self.assertEqual(advanced.modifiers[1].current_value, 50)
        self.assertEqual(prop.modifiers[1].current_value, 0)

    def test_label_factory(self) -> None:
        prop = label(Position(40, 60), "hello")
        self.assertEqual(prop.kind, "label")
        self.assertEqual(prop.message, "reveal_hint")
        self.assertEqual(prop.text, "hello")
        pairs = {(m.attribute, m.value) for m in prop.modifiers}
        self.assertIn(("position", "absolute"), pairs)
        self.assertIn(("left", "40px"), pairs)
        self.assertIn(("top", "60px"), pairs)
        self.assertIn(("white-space", "nowrap"), pairs)

    def test_button_factory_uses_fixed_box(self) -> None:
        prop = button(Position(0, 0), "Next", "next_quote")
        self.assertEqual(prop.kind, "button")
        self.assertEqual(prop.message, "next_quote")
        pairs = {(m.attribute, m.value) for m in prop.modifiers}
        self.assertIn(("width", "300px"), pairs)
        self.assertIn(("height", "300px"), pairs)

    def test_button_box_follows_theme(self) -> None:
        theme = validate_theme_tokens({"button_size_px": 120})
        prop = button(Position(0, 0), "Next", "next_quote", theme=theme)
        pairs = {(m.attribute, m.value) for m in prop.modifiers}
        self.assertIn(("width", "120px"), pairs)

    def test_empty_prop(self) -> None:
        prop = empty_prop()
        self.assertEqual(prop, Prop())
        self.assertEqual(prop.message, "noop")
        self.assertEqual(prop.modifiers, ())


class QuizMessageTests(unittest.TestCase):
    def test_parse_normalizes_host_strings(self) -> None:
        self.assertEqual(parse_quiz_message("reveal_hint"), "reveal_hint")
        self.assertEqual(parse_quiz_message("  Next-Quote "), "next_quote")

    def test_parse_rejects_unknown(self) -> None:
        self.assertIsNone(parse_quiz_message("explode"))
        self.assertIsNone(parse_quiz_message(3))


if __name__ == "__main__":
    unittest.main()
