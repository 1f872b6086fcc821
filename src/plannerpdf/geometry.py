"""Geometry value types for page layout in millimeters."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .errors import InvalidArgumentShape, InvalidGeometry

_MM_PER_INCH = 25.4
_POINTS_PER_MM = 72.0 / _MM_PER_INCH

_BOUNDS_CORNER_KEYS = frozenset({"ll", "ur"})
_BOUNDS_FLAT_KEYS = frozenset({"llx", "lly", "urx", "ury"})
_PADDING_KEYS = ("top", "right", "bottom", "left")


def mm_to_points(value_mm: float) -> float:
    """Convert millimeters into PDF points."""
    return value_mm * _POINTS_PER_MM


def points_to_mm(value_pt: float) -> float:
    """Convert PDF points into millimeters."""
    return value_pt / _POINTS_PER_MM


def px_to_mm(value_px: float, dpi: float) -> float:
    """Convert device pixels at `dpi` into millimeters."""
    if dpi <= 0:
        msg = "dpi must be > 0."
        raise ValueError(msg)
    return (value_px / dpi) * _MM_PER_INCH


def is_number(value: Any) -> bool:
    """Return True for int/float values, rejecting booleans."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_number(value: Any, *, name: str) -> float:
    if not is_number(value):
        msg = f"{name} must be a number, got {value!r}."
        raise InvalidArgumentShape(msg)
    return float(value)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


@dataclass(frozen=True)
class Point:
    """2D point in page units."""

    x: float
    y: float

    def with_precision(self, digits: int) -> Point:
        return Point(round(self.x, digits), round(self.y, digits))

    def shift_by(self, x: float = 0.0, y: float = 0.0) -> Point:
        return Point(self.x + x, self.y + y)

    @classmethod
    def coerce(cls, value: Any) -> Point:
        """Normalize a `Point`, an `(x, y)` pair or an `{"x", "y"}` mapping."""
        if isinstance(value, Point):
            return value
        if isinstance(value, Mapping):
            keys = set(value)
            if keys != {"x", "y"}:
                msg = f"point mapping must have exactly the keys x and y, got {sorted(keys)}."
                raise InvalidArgumentShape(msg)
            return cls(
                _require_number(value["x"], name="point x"),
                _require_number(value["y"], name="point y"),
            )
        if _is_sequence(value):
            if len(value) != 2:
                msg = f"point sequence must have 2 elements, got {len(value)}."
                raise InvalidArgumentShape(msg)
            return cls(
                _require_number(value[0], name="point x"),
                _require_number(value[1], name="point y"),
            )
        msg = f"cannot interpret {value!r} as a point."
        raise InvalidArgumentShape(msg)


@dataclass(frozen=True)
class Padding:
    """Per-side padding; positive values shrink bounds, negative values grow them."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    def __neg__(self) -> Padding:
        return Padding(-self.top, -self.right, -self.bottom, -self.left)

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    @classmethod
    def coerce(cls, value: Any) -> Padding:
        """Normalize padding using CSS shorthand rules.

        Accepts a `Padding`, `None` (no padding), a number, a sequence of one
        to four numbers or a mapping of named sides (missing sides are 0).
        """
        if value is None:
            return cls()
        if isinstance(value, Padding):
            return value
        if is_number(value):
            amount = float(value)
            return cls(amount, amount, amount, amount)
        if isinstance(value, Mapping):
            unknown = sorted(str(key) for key in value if key not in _PADDING_KEYS)
            if unknown:
                msg = f"unknown padding key(s): {', '.join(unknown)}."
                raise InvalidArgumentShape(msg)
            return cls(
                **{
                    key: _require_number(value[key], name=f"padding {key}")
                    for key in _PADDING_KEYS
                    if key in value
                }
            )
        if _is_sequence(value):
            values = [_require_number(item, name="padding value") for item in value]
            if len(values) == 1:
                return cls(values[0], values[0], values[0], values[0])
            if len(values) == 2:
                vertical, horizontal = values
                return cls(vertical, horizontal, vertical, horizontal)
            if len(values) == 3:
                top, horizontal, bottom = values
                return cls(top, horizontal, bottom, horizontal)
            if len(values) == 4:
                return cls(*values)
            msg = f"padding sequence must have 1 to 4 elements, got {len(values)}."
            raise InvalidArgumentShape(msg)
        msg = f"cannot interpret {value!r} as padding."
        raise InvalidArgumentShape(msg)


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle described by its lower-left and upper-right corners."""

    ll: Point
    ur: Point

    def __post_init__(self) -> None:
        if self.ll.x > self.ur.x or self.ll.y > self.ur.y:
            msg = (
                f"bounds corners are unordered: ll=({self.ll.x}, {self.ll.y}) "
                f"ur=({self.ur.x}, {self.ur.y})."
            )
            raise InvalidGeometry(msg)

    @classmethod
    def from_coords(cls, llx: float, lly: float, urx: float, ury: float) -> Bounds:
        return cls(Point(llx, lly), Point(urx, ury))

    @property
    def width(self) -> float:
        return self.ur.x - self.ll.x

    @property
    def height(self) -> float:
        return self.ur.y - self.ll.y

    @property
    def lr(self) -> Point:
        return Point(self.ur.x, self.ll.y)

    @property
    def ul(self) -> Point:
        return Point(self.ll.x, self.ur.y)

    @property
    def center(self) -> Point:
        return Point(self.ll.x + self.width / 2, self.ll.y + self.height / 2)

    def to_coords(self) -> tuple[float, float, float, float]:
        return (self.ll.x, self.ll.y, self.ur.x, self.ur.y)

    def with_padding(self, padding: Any) -> Bounds:
        """Return bounds shrunk by `padding` (grown when the padding is negative)."""
        if padding is None:
            return self
        resolved = Padding.coerce(padding)
        width = self.width - resolved.horizontal
        height = self.height - resolved.vertical
        if width < 0 or height < 0:
            msg = f"padding {resolved} collapses bounds of size {self.width}x{self.height}."
            raise InvalidGeometry(msg)
        return Bounds.from_coords(
            self.ll.x + resolved.left,
            self.ll.y + resolved.bottom,
            self.ur.x - resolved.right,
            self.ur.y - resolved.top,
        )

    def with_precision(self, digits: int) -> Bounds:
        return Bounds(self.ll.with_precision(digits), self.ur.with_precision(digits))

    def move_to(self, x: float, y: float) -> Bounds:
        """Return bounds of the same size with the lower-left corner at `(x, y)`."""
        return Bounds.from_coords(x, y, x + self.width, y + self.height)

    def shift_by(self, x: float = 0.0, y: float = 0.0) -> Bounds:
        return Bounds(self.ll.shift_by(x, y), self.ur.shift_by(x, y))

    def scale_to(self, width: float | None = None, height: float | None = None) -> Bounds:
        """Resize to an absolute width/height, keeping the lower-left corner fixed."""
        new_width = self.width if width is None else width
        new_height = self.height if height is None else height
        if new_width < 0 or new_height < 0:
            msg = f"cannot scale bounds to negative size {new_width}x{new_height}."
            raise InvalidGeometry(msg)
        return Bounds.from_coords(
            self.ll.x, self.ll.y, self.ll.x + new_width, self.ll.y + new_height
        )

    def scale_by_factor(self, width: float = 1.0, height: float = 1.0) -> Bounds:
        """Resize by relative factors, keeping the lower-left corner fixed."""
        return self.scale_to(width=self.width * width, height=self.height * height)

    def align_to(self, outer: Any, align: Any) -> Bounds:
        from .align import align_bounds

        return align_bounds(self, Bounds.coerce(outer), align)

    def union(self, other: Bounds) -> Bounds:
        return Bounds.from_coords(
            min(self.ll.x, other.ll.x),
            min(self.ll.y, other.ll.y),
            max(self.ur.x, other.ur.x),
            max(self.ur.y, other.ur.y),
        )

    def contains(self, point: Any) -> bool:
        resolved = Point.coerce(point)
        return (
            self.ll.x <= resolved.x <= self.ur.x and self.ll.y <= resolved.y <= self.ur.y
        )

    @classmethod
    def envelope(cls, items: Iterable[Bounds]) -> Bounds:
        """Return the smallest bounds enclosing every item."""
        result: Bounds | None = None
        for item in items:
            result = item if result is None else result.union(item)
        if result is None:
            msg = "cannot compute the envelope of zero bounds."
            raise InvalidGeometry(msg)
        return result

    @classmethod
    def from_points(cls, points: Iterable[Any]) -> Bounds:
        resolved = [Point.coerce(point) for point in points]
        if not resolved:
            msg = "cannot compute bounds of zero points."
            raise InvalidGeometry(msg)
        return cls.from_coords(
            min(point.x for point in resolved),
            min(point.y for point in resolved),
            max(point.x for point in resolved),
            max(point.y for point in resolved),
        )

    @classmethod
    def coerce(cls, value: Any) -> Bounds:
        """Normalize the accepted bounds encodings.

        Accepted: a `Bounds`, `(llx, lly, urx, ury)`, `((llx, lly), (urx, ury))`,
        `{"ll", "ur"}` with point-like values or `{"llx", "lly", "urx", "ury"}`.
        """
        if isinstance(value, Bounds):
            return value
        if isinstance(value, Mapping):
            keys = set(value)
            if keys == _BOUNDS_CORNER_KEYS:
                return cls(Point.coerce(value["ll"]), Point.coerce(value["ur"]))
            if keys == _BOUNDS_FLAT_KEYS:
                return cls.from_coords(
                    _require_number(value["llx"], name="bounds llx"),
                    _require_number(value["lly"], name="bounds lly"),
                    _require_number(value["urx"], name="bounds urx"),
                    _require_number(value["ury"], name="bounds ury"),
                )
            msg = f"ambiguous or malformed bounds mapping keys: {sorted(map(str, keys))}."
            raise InvalidArgumentShape(msg)
        if _is_sequence(value):
            if len(value) == 4:
                return cls.from_coords(
                    *(_require_number(item, name="bounds coordinate") for item in value)
                )
            if len(value) == 2:
                return cls(Point.coerce(value[0]), Point.coerce(value[1]))
            msg = f"bounds sequence must have 2 or 4 elements, got {len(value)}."
            raise InvalidArgumentShape(msg)
        msg = f"cannot interpret {value!r} as bounds."
        raise InvalidArgumentShape(msg)
