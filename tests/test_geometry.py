"""Tests for points, bounds and padding."""

from __future__ import annotations

import unittest

from plannerpdf.errors import InvalidArgumentShape, InvalidGeometry, PlannerError
from plannerpdf.geometry import (
    Bounds,
    Padding,
    Point,
    mm_to_points,
    points_to_mm,
    px_to_mm,
)


class PointTests(unittest.TestCase):
    def test_with_precision_rounds_both_coordinates(self) -> None:
        self.assertEqual(Point(1.23456, 9.87654).with_precision(2), Point(1.23, 9.88))

    def test_coerce_accepts_pair_and_mapping(self) -> None:
        self.assertEqual(Point.coerce((1, 2)), Point(1.0, 2.0))
        self.assertEqual(Point.coerce({"x": 3, "y": 4}), Point(3.0, 4.0))

    def test_coerce_rejects_malformed_shapes(self) -> None:
        with self.assertRaises(InvalidArgumentShape):
            Point.coerce((1, 2, 3))
        with self.assertRaises(InvalidArgumentShape):
            Point.coerce({"x": 1, "y": 2, "z": 3})
        with self.assertRaises(InvalidArgumentShape):
            Point.coerce((True, 2))
        with self.assertRaises(InvalidArgumentShape):
            Point.coerce("1,2")


class PaddingTests(unittest.TestCase):
    def test_css_shorthand_forms(self) -> None:
        self.assertEqual(Padding.coerce(2), Padding(2, 2, 2, 2))
        self.assertEqual(Padding.coerce([3]), Padding(3, 3, 3, 3))
        self.assertEqual(Padding.coerce([1, 2]), Padding(1, 2, 1, 2))
        self.assertEqual(Padding.coerce([1, 2, 3]), Padding(1, 2, 3, 2))
        self.assertEqual(Padding.coerce([1, 2, 3, 4]), Padding(1, 2, 3, 4))

    def test_named_fields_default_to_zero(self) -> None:
        self.assertEqual(Padding.coerce({"top": 5, "left": 1}), Padding(5, 0, 0, 1))

    def test_negation_flips_every_side(self) -> None:
        self.assertEqual(-Padding(1, 2, 3, 4), Padding(-1, -2, -3, -4))

    def test_rejects_malformed_padding(self) -> None:
        with self.assertRaises(InvalidArgumentShape):
            Padding.coerce([1, 2, 3, 4, 5])
        with self.assertRaises(InvalidArgumentShape):
            Padding.coerce({"up": 1})
        with self.assertRaises(InvalidArgumentShape):
            Padding.coerce(True)


class BoundsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.bounds = Bounds.from_coords(10, 20, 50, 80)

    def test_unordered_corners_raise(self) -> None:
        with self.assertRaises(InvalidGeometry):
            Bounds.from_coords(10, 0, 0, 10)
        with self.assertRaises(InvalidGeometry):
            Bounds.from_coords(0, 10, 10, 0)

    def test_geometry_errors_are_value_errors(self) -> None:
        self.assertTrue(issubclass(InvalidGeometry, PlannerError))
        self.assertTrue(issubclass(PlannerError, ValueError))

    def test_derived_accessors(self) -> None:
        self.assertEqual(self.bounds.width, 40)
        self.assertEqual(self.bounds.height, 60)
        self.assertEqual(self.bounds.lr, Point(50, 20))
        self.assertEqual(self.bounds.ul, Point(10, 80))
        self.assertEqual(self.bounds.center, Point(30, 50))
        self.assertEqual(self.bounds.to_coords(), (10, 20, 50, 80))

    def test_with_padding_shrinks_and_negative_grows(self) -> None:
        padded = self.bounds.with_padding([1, 2, 3, 4])
        self.assertEqual(padded, Bounds.from_coords(14, 23, 48, 79))
        self.assertEqual(self.bounds.with_padding(-1), Bounds.from_coords(9, 19, 51, 81))

    def test_with_padding_none_is_identity(self) -> None:
        self.assertIs(self.bounds.with_padding(None), self.bounds)

    def test_with_padding_round_trip(self) -> None:
        padding = Padding(1.5, 2.25, 3.75, 4.125)
        restored = self.bounds.with_padding(padding).with_padding(-padding)
        for actual, expected in zip(restored.to_coords(), self.bounds.to_coords(), strict=True):
            self.assertAlmostEqual(actual, expected)

    def test_collapsing_padding_raises(self) -> None:
        with self.assertRaises(InvalidGeometry):
            self.bounds.with_padding({"left": 30, "right": 11})
        self.assertEqual(self.bounds.with_padding({"left": 20, "right": 20}).width, 0)

    def test_input_is_never_mutated(self) -> None:
        source = Bounds.from_coords(0, 0, 10, 10)
        source.shift_by(5, 5)
        source.with_padding(1)
        source.scale_to(width=3)
        self.assertEqual(source, Bounds.from_coords(0, 0, 10, 10))

    def test_move_and_shift(self) -> None:
        self.assertEqual(self.bounds.move_to(0, 0), Bounds.from_coords(0, 0, 40, 60))
        self.assertEqual(self.bounds.shift_by(1, -1), Bounds.from_coords(11, 19, 51, 79))

    def test_scale_keeps_lower_left(self) -> None:
        self.assertEqual(self.bounds.scale_to(height=10), Bounds.from_coords(10, 20, 50, 30))
        self.assertEqual(
            self.bounds.scale_by_factor(0.25, 0.5), Bounds.from_coords(10, 20, 20, 50)
        )
        with self.assertRaises(InvalidGeometry):
            self.bounds.scale_to(width=-1)

    def test_union_and_envelope(self) -> None:
        other = Bounds.from_coords(0, 30, 20, 100)
        self.assertEqual(self.bounds.union(other), Bounds.from_coords(0, 20, 50, 100))
        self.assertEqual(
            Bounds.envelope([self.bounds, other]), Bounds.from_coords(0, 20, 50, 100)
        )
        with self.assertRaises(InvalidGeometry):
            Bounds.envelope([])

    def test_from_points(self) -> None:
        self.assertEqual(
            Bounds.from_points([(3, 4), (-1, 9), {"x": 2, "y": 0}]),
            Bounds.from_coords(-1, 0, 3, 9),
        )

    def test_coerce_accepts_every_encoding(self) -> None:
        expected = Bounds.from_coords(0, 0, 70, 70)
        self.assertEqual(Bounds.coerce((0, 0, 70, 70)), expected)
        self.assertEqual(Bounds.coerce(((0, 0), (70, 70))), expected)
        self.assertEqual(Bounds.coerce({"ll": (0, 0), "ur": {"x": 70, "y": 70}}), expected)
        self.assertEqual(Bounds.coerce({"llx": 0, "lly": 0, "urx": 70, "ury": 70}), expected)

    def test_coerce_rejects_ambiguous_mapping(self) -> None:
        with self.assertRaises(InvalidArgumentShape):
            Bounds.coerce({"ll": (0, 0), "ur": (1, 1), "llx": 0})
        with self.assertRaises(InvalidArgumentShape):
            Bounds.coerce((0, 0, 1))


class UnitConversionTests(unittest.TestCase):
    def test_mm_points_round_trip(self) -> None:
        self.assertAlmostEqual(mm_to_points(25.4), 72.0)
        self.assertAlmostEqual(points_to_mm(72.0), 25.4)

    def test_px_to_mm_uses_dpi(self) -> None:
        self.assertAlmostEqual(px_to_mm(300, 300), 25.4)
        with self.assertRaises(ValueError):
            px_to_mm(10, 0)
