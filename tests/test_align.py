"""Tests for alignment of bounds."""

from __future__ import annotations

import unittest

from plannerpdf.align import (
    CENTER,
    Align,
    HorizontalAlign,
    VerticalAlign,
    align_bounds,
    alignment_delta,
)
from plannerpdf.errors import InvalidArgumentShape
from plannerpdf.geometry import Bounds


class AlignBoundsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.outer = Bounds.from_coords(0, 0, 100, 50)
        self.src = Bounds.from_coords(5, 5, 25, 15)

    def test_center_alignment(self) -> None:
        self.assertEqual(
            align_bounds(self.src, self.outer, CENTER), Bounds.from_coords(40, 20, 60, 30)
        )

    def test_corner_alignments(self) -> None:
        self.assertEqual(
            align_bounds(self.src, self.outer, {"h": "left", "v": "top"}),
            Bounds.from_coords(0, 40, 20, 50),
        )
        self.assertEqual(
            align_bounds(self.src, self.outer, Align(HorizontalAlign.RIGHT, VerticalAlign.BOTTOM)),
            Bounds.from_coords(80, 0, 100, 10),
        )

    def test_omitted_axis_is_left_unchanged(self) -> None:
        self.assertEqual(
            align_bounds(self.src, self.outer, {"h": "right"}), Bounds.from_coords(80, 5, 100, 15)
        )
        self.assertEqual(align_bounds(self.src, self.outer, None), self.src)

    def test_size_is_preserved_when_larger_than_outer(self) -> None:
        wide = Bounds.from_coords(0, 0, 120, 10)
        aligned = align_bounds(wide, self.outer, CENTER)
        self.assertEqual(aligned.width, 120)
        self.assertEqual(aligned.ll.x, -10)

    def test_alignment_delta(self) -> None:
        self.assertEqual(alignment_delta(self.src, self.outer, CENTER), (35, 15))

    def test_bounds_align_to_accepts_coords(self) -> None:
        self.assertEqual(
            self.src.align_to((0, 0, 100, 50), {"v": "top"}), Bounds.from_coords(5, 40, 25, 50)
        )


class AlignCoerceTests(unittest.TestCase):
    def test_invalid_values_raise(self) -> None:
        with self.assertRaises(InvalidArgumentShape):
            Align.coerce({"h": "top"})
        with self.assertRaises(InvalidArgumentShape):
            Align.coerce({"x": "left"})
        with self.assertRaises(InvalidArgumentShape):
            Align.coerce("center")

    def test_mapping_is_parsed(self) -> None:
        self.assertEqual(
            Align.coerce({"h": "middle", "v": "middle"}),
            CENTER,
        )


if __name__ == "__main__":
    unittest.main()
