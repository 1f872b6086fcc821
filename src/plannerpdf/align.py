"""Alignment of bounds within an outer region."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import InvalidArgumentShape
from .geometry import Bounds


class HorizontalAlign(str, Enum):
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"


class VerticalAlign(str, Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Align:
    """Horizontal and vertical alignment; `None` leaves that axis untouched."""

    h: HorizontalAlign | None = None
    v: VerticalAlign | None = None

    @classmethod
    def coerce(cls, value: Any) -> Align:
        """Normalize an `Align`, `None` or an `{"h", "v"}` mapping of names."""
        if value is None:
            return cls()
        if isinstance(value, Align):
            return value
        if isinstance(value, Mapping):
            unknown = sorted(str(key) for key in value if key not in ("h", "v"))
            if unknown:
                msg = f"unknown align key(s): {', '.join(unknown)}."
                raise InvalidArgumentShape(msg)
            return cls(
                h=_parse_axis(value.get("h"), HorizontalAlign, axis="h"),
                v=_parse_axis(value.get("v"), VerticalAlign, axis="v"),
            )
        msg = f"cannot interpret {value!r} as an alignment."
        raise InvalidArgumentShape(msg)


CENTER = Align(HorizontalAlign.MIDDLE, VerticalAlign.MIDDLE)


def _parse_axis(raw_value: Any, enum_type: type[Enum], *, axis: str) -> Any:
    if raw_value is None or isinstance(raw_value, enum_type):
        return raw_value
    try:
        return enum_type(raw_value)
    except ValueError as exc:
        valid = ", ".join(member.value for member in enum_type)
        msg = f"invalid {axis} alignment {raw_value!r}. Valid values: {valid}."
        raise InvalidArgumentShape(msg) from exc


def align_bounds(src: Bounds, outer: Bounds, align: Any) -> Bounds:
    """Return `src` moved inside `outer` according to `align`.

    The size of `src` is preserved; only the requested axes move.
    """
    resolved = Align.coerce(align)
    x = src.ll.x
    y = src.ll.y

    if resolved.h is HorizontalAlign.LEFT:
        x = outer.ll.x
    elif resolved.h is HorizontalAlign.MIDDLE:
        x = outer.ll.x + (outer.width - src.width) / 2
    elif resolved.h is HorizontalAlign.RIGHT:
        x = outer.ur.x - src.width

    if resolved.v is VerticalAlign.BOTTOM:
        y = outer.ll.y
    elif resolved.v is VerticalAlign.MIDDLE:
        y = outer.ll.y + (outer.height - src.height) / 2
    elif resolved.v is VerticalAlign.TOP:
        y = outer.ur.y - src.height

    return src.move_to(x, y)


def alignment_delta(src: Bounds, outer: Bounds, align: Any) -> tuple[float, float]:
    """Return the `(dx, dy)` shift that aligns `src` inside `outer`."""
    target = align_bounds(src, outer, align)
    return (target.ll.x - src.ll.x, target.ll.y - src.ll.y)
