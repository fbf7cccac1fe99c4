from __future__ import annotations

import unittest

from cinequote_ui.choreography import grow_line, shrink_line
from cinequote_ui.modifiers import interpolate
from cinequote_ui.props import Position, Prop, button, label
from cinequote_ui.scene import Scene, missing_prop
from cinequote_ui.style.theme import DEFAULT_THEME


class SceneTests(unittest.TestCase):
    def test_set_text_on_missing_name_uses_fallback(self) -> None:
        with self.assertLogs("cinequote_ui.scene", level="DEBUG"):
            scene = Scene().set_text_of_prop("Missing", "hello")
        self.assertIn("Missing", scene)
        prop = scene.props["Missing"]
        self.assertEqual(prop.text, "hello")
        self.assertEqual(prop.message, "noop")
        self.assertEqual(scene.render(0)[0].message, "noop")
        style = scene.render(0)[0].style()
        self.assertEqual(style["left"], f"{DEFAULT_THEME.fallback_x_px}px")
        self.assertEqual(style["top"], f"{DEFAULT_THEME.fallback_y_px}px")

    def test_missing_prop_names_the_key(self) -> None:
        self.assertEqual(missing_prop("Ghost").text, "Missing prop: Ghost")

    def test_scenes_hash_by_content(self) -> None:
        quote = label(Position(0, 0), "q")
        movie = label(Position(0, 40), "m")
        a = Scene.from_props({"Quote": quote, "Movie": movie})
        b = Scene.from_props({"Movie": movie, "Quote": quote})
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(hash(Scene()), hash(Scene()))
        self.assertEqual(len({a, b, Scene()}), 2)

    def test_set_text_on_existing_name_keeps_modifiers(self) -> None:
        original = label(Position(1, 1), "?")
        scene = Scene.from_props({"Quote": original}).set_text_of_prop("Quote", "hi")
        self.assertEqual(scene.props["Quote"].modifiers, original.modifiers)
        self.assertEqual(scene.props["Quote"].text, "hi")

    def test_mutations_return_new_scenes(self) -> None:
        base = Scene.from_props({"Quote": Prop(text="?")})
        changed = base.set_text_of_prop("Quote", "new")
        self.assertEqual(base.props["Quote"].text, "?")
        self.assertEqual(changed.props["Quote"].text, "new")
        with self.assertRaises(TypeError):
            base.props["Quote"] = Prop()  # type: ignore[index]

    def test_source_mapping_is_copied(self) -> None:
        source = {"Quote": Prop(text="?")}
        scene = Scene.from_props(source)
        source["Quote"] = Prop(text="changed")
        self.assertEqual(scene.props["Quote"].text, "?")

    def test_render_follows_insertion_order(self) -> None:
        scene = Scene.from_props(
            {
                "Zeta": label(Position(0, 0), "z"),
                "Alpha": button(Position(0, 0), "a", "next_quote"),
            }
        )
        scene = scene.upsert("Mid", label(Position(0, 0), "m")).upsert("Zeta", label(Position(0, 0), "z2"))
        self.assertEqual([e.name for e in scene.render(0)], ["Zeta", "Alpha", "Mid"])
        self.assertEqual(scene.names(), ("Zeta", "Alpha", "Mid"))

    def test_render_dispatches_on_kind(self) -> None:
        scene = Scene.from_props(
            {
                "Quote": label(Position(0, 0), "q"),
                "Next": button(Position(0, 0), "n", "next_quote"),
            }
        )
        quote, nxt = scene.render(0)
        self.assertEqual((quote.kind, quote.tag, quote.message), ("label", "div", "reveal_hint"))
        self.assertEqual((nxt.kind, nxt.tag, nxt.message), ("button", "button", "next_quote"))

    def test_update_is_idempotent_for_same_timestamp(self) -> None:
        width = interpolate("width", start=0, duration=1000, start_value=0, end_value=100)
        scene = Scene.from_props({"Quote": Prop().add_modifier(width), "Other": label(Position(0, 0), "x")})
        once = scene.update(333)
        self.assertEqual(once.update(333), once)
        self.assertNotEqual(once, scene)

    def test_render_batch_find(self) -> None:
        scene = Scene.from_props({"Quote": Prop(text="?")})
        batch = scene.render_batch(42)
        self.assertEqual(batch.timestamp, 42)
        self.assertIsNotNone(batch.find("Quote"))
        self.assertIsNone(batch.find("Nope"))


class ChoreographyTests(unittest.TestCase):
    def test_grow_line_scenario(self) -> None:
        scene = Scene.from_props({"Quote": Prop(text="?")})
        scene = grow_line(
            scene,
            "Quote",
            "Here's looking at you, kid.",
            now=0,
            duration_ms=1000,
            start_width_px=20,
            end_width_px=800,
        )
        self.assertEqual(scene.render(0)[0].style()["width"], "20px")
        self.assertEqual(scene.render(1000)[0].style()["width"], "20px")
        updated = scene.update(500)
        rendered = updated.render(500)[0]
        self.assertEqual(rendered.style()["width"], "410px")
        self.assertEqual(rendered.style()["font-size"], f"{DEFAULT_THEME.grown_font_size_px}px")
        self.assertEqual(rendered.text, "Here's looking at you, kid.")

    def test_shrink_line_snaps_style(self) -> None:
        scene = Scene.from_props({"Movie": label(Position(0, 0), "x")})
        scene = shrink_line(scene, "Movie", "?")
        style = scene.render(0)[0].style()
        self.assertEqual(style["width"], f"{DEFAULT_THEME.shrunk_width_px}px")
        self.assertEqual(style["font-size"], f"{DEFAULT_THEME.shrunk_font_size_px}px")
        self.assertEqual(scene.props["Movie"].text, "?")

    def test_grow_replaces_shrunk_style(self) -> None:
        scene = Scene.from_props({"Movie": label(Position(0, 0), "x")})
        scene = shrink_line(scene, "Movie", "?")
        scene = grow_line(scene, "Movie", "Casablanca", now=0, duration_ms=100, start_width_px=20, end_width_px=300)
        style = scene.update(100).render(100)[0].style()
        self.assertEqual(style["width"], "300px")
        self.assertEqual(style["font-size"], f"{DEFAULT_THEME.grown_font_size_px}px")

    def test_transitions_keep_one_modifier_per_attribute(self) -> None:
        scene = Scene.from_props({"Movie": label(Position(0, 0), "x")})
        scene = shrink_line(scene, "Movie", "?")
        scene = grow_line(scene, "Movie", "Casablanca", now=0, duration_ms=100, start_width_px=20, end_width_px=300)
        scene = grow_line(scene, "Movie", "Casablanca", now=50, duration_ms=100, start_width_px=20, end_width_px=300)
        names = [name for name, _ in scene.render(0)[0].attributes]
        self.assertEqual(len(names), len(set(names)))
        self.assertEqual(scene.update(100).render(100)[0].style()["width"], "160px")

    def test_grow_line_on_missing_name_falls_back(self) -> None:
        scene = grow_line(Scene(), "Nope", "hi", now=0, duration_ms=10, start_width_px=0, end_width_px=10)
        self.assertEqual(scene.props["Nope"].text, "hi")


if __name__ == "__main__":
    unittest.main()
