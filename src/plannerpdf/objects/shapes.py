"""Geometric drawing objects: rectangles, polylines, polygons and circles."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields, replace
from typing import Any

from ..color import Color
from ..errors import InvalidArgumentShape, InvalidGeometry
from ..geometry import Bounds, Point, is_number
from ..link import Link
from ..style import DashPattern, LineCapStyle, LineJoinStyle, PaintMode, WindingOrder
from ..text_metrics import TextMeasurer
from .base import DrawingObjectMixin, normalize_common, normalize_paint, normalize_stroke, set_field


def _field_names(cls: type) -> set[str]:
    return {item.name for item in fields(cls)}


def _check_style_keys(cls: type, style: Mapping[str, Any], *, exclude: set[str]) -> None:
    allowed = _field_names(cls) - exclude
    unknown = sorted(str(key) for key in style if key not in allowed)
    if unknown:
        msg = f"unknown {cls.__name__.lower()} key(s): {', '.join(unknown)}."
        raise InvalidArgumentShape(msg)


@dataclass(frozen=True)
class Rect(DrawingObjectMixin):
    """Axis-aligned rectangle."""

    ll: Point
    ur: Point
    fill_color: Color | None = None
    outline_color: Color | None = None
    outline_thickness: float | None = None
    mode: PaintMode | None = None
    order: WindingOrder | None = None
    dash_pattern: DashPattern | None = None
    cap_style: LineCapStyle | None = None
    join_style: LineJoinStyle | None = None
    depth: int | None = None
    link: Link | None = None

    def __post_init__(self) -> None:
        corners = Bounds(Point.coerce(self.ll), Point.coerce(self.ur))
        set_field(self, "ll", corners.ll)
        set_field(self, "ur", corners.ur)
        normalize_paint(self)

    @classmethod
    def from_bounds(cls, bounds: Any, **style: Any) -> Rect:
        resolved = Bounds.coerce(bounds)
        return cls(resolved.ll, resolved.ur, **style)

    @classmethod
    def from_like(cls, value: Any) -> Rect:
        """Build a rect from a `Rect`, bounds or a mapping of rect attributes.

        A mapping may carry its corners as `ll`/`ur` or as `bounds`, but not both.
        """
        if isinstance(value, Rect):
            return value
        if isinstance(value, Mapping):
            style = dict(value)
            has_corners = "ll" in style or "ur" in style
            if "bounds" in style:
                if has_corners:
                    msg = "rect mapping cannot carry both 'bounds' and 'll'/'ur'."
                    raise InvalidArgumentShape(msg)
                bounds = style.pop("bounds")
                _check_style_keys(cls, style, exclude={"ll", "ur"})
                return cls.from_bounds(bounds, **style)
            if "ll" not in style or "ur" not in style:
                msg = "rect mapping requires both 'll' and 'ur' or 'bounds'."
                raise InvalidArgumentShape(msg)
            _check_style_keys(cls, style, exclude=set())
            return cls(**style)
        return cls.from_bounds(value)

    def bounds(self, measurer: TextMeasurer | None = None) -> Bounds:
        return Bounds(self.ll, self.ur)

    def with_bounds(self, bounds: Any) -> Rect:
        resolved = Bounds.coerce(bounds)
        return replace(self, ll=resolved.ll, ur=resolved.ur)

    def shift_by(self, x: float = 0.0, y: float = 0.0) -> Rect:
        return replace(self, ll=self.ll.shift_by(x, y), ur=self.ur.shift_by(x, y))


@dataclass(frozen=True)
class Line(DrawingObjectMixin):
    """Open polyline through `points`."""

    points: tuple[Point, ...]
    color: Color | None = None
    thickness: float | None = None
    dash_pattern: DashPattern | None = None
    cap_style: LineCapStyle | None = None
    join_style: LineJoinStyle | None = None
    depth: int | None = None
    link: Link | None = None

    def __post_init__(self) -> None:
        points = tuple(Point.coerce(point) for point in self.points)
        if len(points) < 2:
            msg = f"line requires at least 2 points, got {len(points)}."
            raise InvalidGeometry(msg)
        set_field(self, "points", points)
        set_field(self, "color", None if self.color is None else Color.coerce(self.color))
        normalize_stroke(self, thickness_field="thickness")
        normalize_common(self)

    def bounds(self, measurer: TextMeasurer | None = None) -> Bounds:
        return Bounds.from_points(self.points)

    def shift_by(self, x: float = 0.0, y: float = 0.0) -> Line:
        return replace(self, points=tuple(point.shift_by(x, y) for point in self.points))


@dataclass(frozen=True)
class Shape(DrawingObjectMixin):
    """Closed polygon through `points`."""

    points: tuple[Point, ...]
    fill_color: Color | None = None
    outline_color: Color | None = None
    outline_thickness: float | None = None
    mode: PaintMode | None = None
    order: WindingOrder | None = None
    dash_pattern: DashPattern | None = None
    cap_style: LineCapStyle | None = None
    join_style: LineJoinStyle | None = None
    depth: int | None = None
    link: Link | None = None

    def __post_init__(self) -> None:
        points = tuple(Point.coerce(point) for point in self.points)
        if len(points) < 3:
            msg = f"shape requires at least 3 points, got {len(points)}."
            raise InvalidGeometry(msg)
        set_field(self, "points", points)
        normalize_paint(self)

    def bounds(self, measurer: TextMeasurer | None = None) -> Bounds:
        return Bounds.from_points(self.points)

    def shift_by(self, x: float = 0.0, y: float = 0.0) -> Shape:
        return replace(self, points=tuple(point.shift_by(x, y) for point in self.points))


@dataclass(frozen=True)
class Circle(DrawingObjectMixin):
    """Circle of `radius` around `center`."""

    center: Point
    radius: float
    fill_color: Color | None = None
    outline_color: Color | None = None
    outline_thickness: float | None = None
    mode: PaintMode | None = None
    order: WindingOrder | None = None
    dash_pattern: DashPattern | None = None
    cap_style: LineCapStyle | None = None
    join_style: LineJoinStyle | None = None
    depth: int | None = None
    link: Link | None = None

    def __post_init__(self) -> None:
        set_field(self, "center", Point.coerce(self.center))
        if not is_number(self.radius) or self.radius < 0:
            msg = f"circle radius must be a number >= 0, got {self.radius!r}."
            raise InvalidGeometry(msg)
        normalize_paint(self)

    def bounds(self, measurer: TextMeasurer | None = None) -> Bounds:
        return Bounds.from_coords(
            self.center.x - self.radius,
            self.center.y - self.radius,
            self.center.x + self.radius,
            self.center.y + self.radius,
        )

    def shift_by(self, x: float = 0.0, y: float = 0.0) -> Circle:
        return replace(self, center=self.center.shift_by(x, y))


def _split_points(args: Sequence[Any]) -> list[Any]:
    if len(args) == 1 and isinstance(args[0], Sequence) and args[0] and not is_number(args[0][0]):
        return list(args[0])
    return list(args)


def line(*points: Any, **style: Any) -> Line:
    """Build a `Line` from point-likes given as arguments or as one sequence."""
    _check_style_keys(Line, style, exclude={"points"})
    return Line(tuple(_split_points(points)), **style)


def shape(*points: Any, **style: Any) -> Shape:
    """Build a `Shape` from point-likes given as arguments or as one sequence."""
    _check_style_keys(Shape, style, exclude={"points"})
    return Shape(tuple(_split_points(points)), **style)
