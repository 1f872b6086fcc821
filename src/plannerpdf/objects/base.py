"""Behaviour shared by every drawing object."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ..align import alignment_delta
from ..color import Color
from ..geometry import Bounds
from ..link import LinkAnnotation, coerce_link
from ..style import DashPattern, LineCapStyle, LineJoinStyle, PaintMode, WindingOrder, coerce_enum
from ..text_metrics import TextMeasurer


class DrawingObjectMixin:
    """Alignment, depth and link helpers built on `bounds()` and `shift_by()`."""

    depth: int | None
    link: Any

    def bounds(self, measurer: TextMeasurer | None = None) -> Bounds:
        raise NotImplementedError

    def shift_by(self, x: float = 0.0, y: float = 0.0) -> Any:
        raise NotImplementedError

    @property
    def effective_depth(self) -> int:
        return 0 if self.depth is None else self.depth

    def align_to(
        self, outer: Any, align: Any, measurer: TextMeasurer | None = None
    ) -> Any:
        """Return a copy moved so its bounds are aligned inside `outer`."""
        dx, dy = alignment_delta(self.bounds(measurer), Bounds.coerce(outer), align)
        return self.shift_by(dx, dy)

    def link_annotations(self, measurer: TextMeasurer | None = None) -> Iterator[LinkAnnotation]:
        if self.link is not None:
            yield LinkAnnotation(self.bounds(measurer), self.effective_depth, self.link)


def set_field(obj: object, name: str, value: Any) -> None:
    object.__setattr__(obj, name, value)


def normalize_common(obj: Any) -> None:
    if obj.depth is not None and (isinstance(obj.depth, bool) or not isinstance(obj.depth, int)):
        msg = f"depth must be an integer, got {obj.depth!r}."
        raise ValueError(msg)
    set_field(obj, "link", coerce_link(obj.link))


def optional_color(value: Any) -> Color | None:
    return None if value is None else Color.coerce(value)


def normalize_stroke(obj: Any, *, thickness_field: str = "outline_thickness") -> None:
    """Normalize the dash/cap/join attributes shared by every stroked object."""
    if obj.dash_pattern is not None:
        set_field(obj, "dash_pattern", DashPattern.coerce(obj.dash_pattern))
    set_field(obj, "cap_style", coerce_enum(obj.cap_style, LineCapStyle, name="cap style"))
    set_field(obj, "join_style", coerce_enum(obj.join_style, LineJoinStyle, name="join style"))
    thickness = getattr(obj, thickness_field)
    if thickness is not None and thickness < 0:
        msg = f"{thickness_field} must be >= 0."
        raise ValueError(msg)


def normalize_paint(obj: Any) -> None:
    """Normalize the fill/outline/mode attributes of closed objects."""
    set_field(obj, "fill_color", optional_color(obj.fill_color))
    set_field(obj, "outline_color", optional_color(obj.outline_color))
    set_field(obj, "mode", coerce_enum(obj.mode, PaintMode, name="paint mode"))
    set_field(obj, "order", coerce_enum(obj.order, WindingOrder, name="winding order"))
    normalize_stroke(obj)
    normalize_common(obj)
