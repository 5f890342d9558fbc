"""
Unit tests for color parsing, conversion, contrast, harmonies and random generation.
Run from project root: python -m pytest tests/ -v
Or: python -m unittest discover -s tests -p "test_*.py" -v
"""
import math
import sys
import unittest
from pathlib import Path

# Project root on path so "from pbix_theme. ..." works
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class TestParsing(unittest.TestCase):
    """Hex parsing and normalization."""

    def test_parse_hex_long_short_and_case(self):
        from pbix_theme.colors import parse_hex

        self.assertEqual(parse_hex("#0B6EFD"), (11, 110, 253))
        self.assertEqual(parse_hex("0b6efd"), (11, 110, 253))
        self.assertEqual(parse_hex("#abc"), (0xAA, 0xBB, 0xCC))
        self.assertEqual(parse_hex("  #FFF  "), (255, 255, 255))

    def test_parse_hex_rejects_malformed(self):
        from pbix_theme.colors import InvalidColorError, parse_hex

        for bad in ("#12", "#1234", "zzzzzz", "#gggggg", "", None, 123, "#0b6efd00"):
            with self.assertRaises(InvalidColorError):
                parse_hex(bad)

    def test_invalid_color_error_is_value_error(self):
        from pbix_theme.colors import InvalidColorError

        self.assertTrue(issubclass(InvalidColorError, ValueError))

    def test_normalize_hex(self):
        from pbix_theme.colors import InvalidColorError, normalize_hex

        self.assertEqual(normalize_hex("#ABC"), "#aabbcc")
        self.assertEqual(normalize_hex("abc", upper=True), "#AABBCC")
        self.assertEqual(normalize_hex("nope", default="#000000"), "#000000")
        with self.assertRaises(InvalidColorError):
            normalize_hex("nope")

    def test_rgb_hex_conversions(self):
        from pbix_theme.colors import hex_to_rgb, rgb_to_hex

        self.assertEqual(hex_to_rgb("#ef476f"), (239, 71, 111))
        self.assertEqual(rgb_to_hex(239, 71, 111), "#ef476f")
        self.assertEqual(rgb_to_hex(239, 71, 111, upper=True), "#EF476F")
        self.assertEqual(rgb_to_hex(300, -4, 127.6), "#ff0080")

    def test_is_valid_hex(self):
        from pbix_theme.colors import is_valid_hex

        self.assertTrue(is_valid_hex("#0fcfdf"))
        self.assertTrue(is_valid_hex("#FFF"))
        self.assertFalse(is_valid_hex("#0fcfd"))
        self.assertFalse(is_valid_hex(None))


class TestConversions(unittest.TestCase):
    """RGB/HSL round trips, luminance and contrast."""

    def test_rgb_to_hsl_primaries(self):
        from pbix_theme.colors import rgb_to_hsl

        h, s, l = rgb_to_hsl(255, 0, 0)
        self.assertAlmostEqual(h, 0.0)
        self.assertAlmostEqual(s, 1.0)
        self.assertAlmostEqual(l, 0.5)
        h, _, _ = rgb_to_hsl(0, 0, 255)
        self.assertAlmostEqual(h, 240.0)

    def test_rgb_to_hsl_gray_has_nan_hue(self):
        from pbix_theme.colors import hex_to_hsl, rgb_to_hsl

        h, s, l = rgb_to_hsl(128, 128, 128)
        self.assertTrue(math.isnan(h))
        self.assertEqual(s, 0.0)
        self.assertAlmostEqual(l, 128 / 255)
        self.assertEqual(hex_to_hsl("#808080")[0], 0.0)

    def test_hsl_to_rgb(self):
        from pbix_theme.colors import hsl_to_rgb

        self.assertEqual(hsl_to_rgb(120, 1.0, 0.5), (0, 255, 0))
        self.assertEqual(hsl_to_rgb(0, 0.0, 1.0), (255, 255, 255))
        self.assertEqual(hsl_to_rgb(360, 1.0, 0.5), (255, 0, 0))

    def test_luminance_and_contrast(self):
        from pbix_theme.colors import contrast_ratio, is_light_color, relative_luminance

        self.assertAlmostEqual(relative_luminance("#ffffff"), 1.0)
        self.assertAlmostEqual(relative_luminance("#000000"), 0.0)
        self.assertAlmostEqual(contrast_ratio("#000000", "#ffffff"), 21.0)
        self.assertAlmostEqual(contrast_ratio("#ffffff", "#000000"), 21.0)
        self.assertAlmostEqual(contrast_ratio("#777777", "#777777"), 1.0)
        self.assertTrue(is_light_color("#ffffff"))
        self.assertFalse(is_light_color("#0b6efd"))


class TestHarmonies(unittest.TestCase):
    """Hue rotations keep the base verbatim and derive lowercase hex."""

    def test_complementary_and_triadic(self):
        from pbix_theme.colors import complementary, triadic

        self.assertEqual(complementary("#FF0000"), ["#FF0000", "#00ffff"])
        self.assertEqual(triadic("#ff0000"), ["#ff0000", "#00ff00", "#0000ff"])

    def test_analogous_alternates_sides(self):
        from pbix_theme.colors import analogous

        colors = analogous("#ff0000", 3)
        self.assertEqual(colors, ["#ff0000", "#ff8000", "#ff0080"])
        self.assertEqual(len(analogous("#ff0000", 6)), 6)
        self.assertEqual(analogous("#ff0000", 1), ["#ff0000"])


class TestGeneration(unittest.TestCase):
    """Random palettes and shuffling with locks."""

    def test_generate_random_palette(self):
        from pbix_theme.colors import generate_random_palette, is_valid_hex

        colors = generate_random_palette(5)
        self.assertEqual(len(colors), 5)
        for c in colors:
            self.assertTrue(is_valid_hex(c.hex))
            self.assertEqual(len(c.hex), 7)
            self.assertFalse(c.locked)
        self.assertEqual(len({c.id for c in colors}), 5)
        self.assertEqual(generate_random_palette(0), [])

    def test_shuffle_unlocked_keeps_locked(self):
        from pbix_theme.colors import shuffle_unlocked
        from pbix_theme.schema import Color

        colors = [
            Color(hex="#111111", locked=True, id="a"),
            Color(hex="#222222", locked=False, id="b"),
        ]
        out = shuffle_unlocked(colors)
        self.assertEqual(len(out), 2)
        self.assertEqual(out[0], colors[0])
        self.assertEqual(out[1].id, "b")
        self.assertFalse(out[1].locked)
        # input list untouched
        self.assertEqual(colors[1].hex, "#222222")


if __name__ == "__main__":
    unittest.main()
