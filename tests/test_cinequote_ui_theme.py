import unittest

from cinequote_ui.style.theme import DEFAULT_THEME, validate_theme_tokens


class StageThemeTests(unittest.TestCase):
    def test_validate_theme_defaults(self) -> None:
        theme = validate_theme_tokens()
        self.assertEqual(theme, DEFAULT_THEME)

    def test_validate_theme_accepts_partial_override(self) -> None:
        theme = validate_theme_tokens({"button_bg": "#112233", "grown_font_size_px": 40})
        self.assertEqual(theme.button_bg, "#112233")
        self.assertEqual(theme.grown_font_size_px, 40)
        self.assertEqual(theme.label_text, DEFAULT_THEME.label_text)

    def test_validate_theme_rejects_unknown_token(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown theme token"):
            validate_theme_tokens({"unknown": "#112233"})

    def test_validate_theme_rejects_invalid_hex_color(self) -> None:
        with self.assertRaisesRegex(ValueError, "hex color"):
            validate_theme_tokens({"label_text": "white"})

    def test_validate_theme_rejects_non_positive_size(self) -> None:
        with self.assertRaisesRegex(ValueError, "positive integer"):
            validate_theme_tokens({"button_size_px": 0})
        with self.assertRaisesRegex(ValueError, "positive integer"):
            validate_theme_tokens({"shrunk_width_px": True})

    def test_validate_theme_rejects_negative_fallback_position(self) -> None:
        with self.assertRaisesRegex(ValueError, "non-negative"):
            validate_theme_tokens({"fallback_x_px": -5})


if __name__ == "__main__":
    unittest.main()
