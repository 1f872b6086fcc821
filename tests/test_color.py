"""Tests for color parsing and lightness arithmetic."""

from __future__ import annotations

import unittest

from reportlab.lib import colors

from plannerpdf.color import BLACK, WHITE, Color
from plannerpdf.errors import InvalidArgumentShape


class ColorTests(unittest.TestCase):
    def test_parse_hex_with_and_without_hash(self) -> None:
        self.assertEqual(Color.parse("#FF0000"), Color(1.0, 0.0, 0.0))
        self.assertEqual(Color.parse("00ff00"), Color(0.0, 1.0, 0.0))

    def test_parse_reportlab_color_name(self) -> None:
        self.assertEqual(Color.parse("white"), WHITE)

    def test_parse_rejects_garbage(self) -> None:
        with self.assertRaisesRegex(ValueError, "invalid color value"):
            Color.parse("definitely-not-a-color")
        with self.assertRaises(ValueError):
            Color.parse("   ")

    def test_coerce_accepts_every_encoding(self) -> None:
        red = Color(1.0, 0.0, 0.0)
        self.assertEqual(Color.coerce(red), red)
        self.assertEqual(Color.coerce(colors.Color(1, 0, 0)), red)
        self.assertEqual(Color.coerce({"r": 255, "g": 0, "b": 0}), red)
        self.assertEqual(Color.coerce((255, 0, 0)), red)

    def test_coerce_rejects_malformed_shapes(self) -> None:
        with self.assertRaises(InvalidArgumentShape):
            Color.coerce({"r": 1, "g": 2})
        with self.assertRaises(InvalidArgumentShape):
            Color.coerce((1, 2))
        with self.assertRaises(ValueError):
            Color.coerce((256, 0, 0))

    def test_channels_are_validated(self) -> None:
        with self.assertRaises(ValueError):
            Color(1.5, 0.0, 0.0)

    def test_luminance_and_lightness(self) -> None:
        self.assertAlmostEqual(WHITE.luminance(), 1.0)
        self.assertAlmostEqual(Color(0, 1, 0).luminance(), 0.7152)
        self.assertTrue(WHITE.is_light())
        self.assertTrue(BLACK.is_dark())
        self.assertTrue(Color.parse("#505050").is_dark())

    def test_lighten_and_darken_move_toward_white_and_black(self) -> None:
        gray = Color(0.5, 0.5, 0.5)
        self.assertEqual(gray.lighten(0.5), Color(0.75, 0.75, 0.75))
        self.assertEqual(gray.darken(0.5), Color(0.25, 0.25, 0.25))
        self.assertEqual(gray.lighten(1.0), WHITE)
        self.assertEqual(gray.darken(1.0), BLACK)

    def test_hex_round_trip(self) -> None:
        self.assertEqual(Color.parse("#1A2B3C").to_hex(), "#1A2B3C")
        self.assertEqual(str(Color.from_rgb255(255, 128, 0)), "#FF8000")


if __name__ == "__main__":
    unittest.main()
