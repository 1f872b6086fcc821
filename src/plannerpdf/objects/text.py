"""Text drawing object positioned by its baseline origin."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from ..color import Color
from ..errors import InvalidArgumentShape
from ..geometry import Bounds, Point, is_number
from ..link import Link
from ..text_metrics import TextMeasurer, TextMetrics, default_text_measurer
from .base import DrawingObjectMixin, normalize_common, optional_color, set_field

_TEXT_KEYS = frozenset({"text", "x", "y", "point", "font", "size", "color", "depth", "link"})


@dataclass(frozen=True)
class Text(DrawingObjectMixin):
    """A run of text whose baseline starts at `(x, y)`.

    `font` and `size` (points) fall back to the measurer or theme defaults
    when unset.
    """

    x: float
    y: float
    text: str
    font: str | None = None
    size: float | None = None
    color: Color | None = None
    depth: int | None = None
    link: Link | None = None

    def __post_init__(self) -> None:
        if not is_number(self.x) or not is_number(self.y):
            msg = f"text position must be numeric, got ({self.x!r}, {self.y!r})."
            raise InvalidArgumentShape(msg)
        if not isinstance(self.text, str):
            msg = f"text must be a string, got {self.text!r}."
            raise InvalidArgumentShape(msg)
        if self.size is not None and (not is_number(self.size) or self.size <= 0):
            msg = f"text size must be a number > 0, got {self.size!r}."
            raise ValueError(msg)
        set_field(self, "color", optional_color(self.color))
        normalize_common(self)

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @classmethod
    def from_like(cls, value: Any) -> Text:
        """Build text from a string, a `Text` or a mapping of text attributes.

        A mapping positions the text with either `x`/`y` or `point`, never both.
        """
        if isinstance(value, Text):
            return value
        if isinstance(value, str):
            return cls(0.0, 0.0, value)
        if not isinstance(value, Mapping):
            msg = f"cannot interpret {value!r} as text."
            raise InvalidArgumentShape(msg)

        unknown = sorted(str(key) for key in value if key not in _TEXT_KEYS)
        if unknown:
            msg = f"unknown text key(s): {', '.join(unknown)}."
            raise InvalidArgumentShape(msg)

        attrs = dict(value)
        point = attrs.pop("point", None)
        if point is not None:
            if "x" in attrs or "y" in attrs:
                msg = "text mapping cannot carry both 'point' and 'x'/'y'."
                raise InvalidArgumentShape(msg)
            resolved = Point.coerce(point)
            attrs["x"] = resolved.x
            attrs["y"] = resolved.y
        attrs.setdefault("x", 0.0)
        attrs.setdefault("y", 0.0)
        attrs.setdefault("text", "")
        return cls(**attrs)

    def metrics(self, measurer: TextMeasurer | None = None) -> TextMetrics:
        return (measurer or default_text_measurer()).measure(self.text, self.font, self.size)

    def bounds(self, measurer: TextMeasurer | None = None) -> Bounds:
        metrics = self.metrics(measurer)
        return Bounds.from_coords(
            self.x,
            self.y - metrics.descent,
            self.x + metrics.advance_width,
            self.y + metrics.ascent,
        )

    def shift_by(self, x: float = 0.0, y: float = 0.0) -> Text:
        return replace(self, x=self.x + x, y=self.y + y)
