"""Paint and stroke style values for drawing objects."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import InvalidArgumentShape
from .geometry import is_number

DEFAULT_DASH_LENGTH = 5.0


class PaintMode(str, Enum):
    CLIP = "clip"
    FILL = "fill"
    FILL_STROKE = "fill_stroke"
    STROKE = "stroke"

    @property
    def fills(self) -> bool:
        return self in (PaintMode.FILL, PaintMode.FILL_STROKE)

    @property
    def strokes(self) -> bool:
        return self in (PaintMode.STROKE, PaintMode.FILL_STROKE)


class WindingOrder(str, Enum):
    EVEN_ODD = "even_odd"
    NON_ZERO = "non_zero"


class LineCapStyle(str, Enum):
    BUTT = "butt"
    ROUND = "round"
    PROJECTING_SQUARE = "projecting_square"

    def to_reportlab(self) -> int:
        return _REPORTLAB_LINE_CAPS[self]


class LineJoinStyle(str, Enum):
    LIMIT = "limit"
    MITER = "miter"
    ROUND = "round"

    def to_reportlab(self) -> int:
        return _REPORTLAB_LINE_JOINS[self]


_REPORTLAB_LINE_CAPS = {
    LineCapStyle.BUTT: 0,
    LineCapStyle.ROUND: 1,
    LineCapStyle.PROJECTING_SQUARE: 2,
}

# reportlab has no separate miter-limit join; "limit" renders as bevel.
_REPORTLAB_LINE_JOINS = {
    LineJoinStyle.MITER: 0,
    LineJoinStyle.ROUND: 1,
    LineJoinStyle.LIMIT: 2,
}

DEFAULT_PAINT_MODE = PaintMode.FILL_STROKE
DEFAULT_WINDING_ORDER = WindingOrder.NON_ZERO
DEFAULT_LINE_CAP = LineCapStyle.BUTT
DEFAULT_LINE_JOIN = LineJoinStyle.MITER


@dataclass(frozen=True)
class DashPattern:
    """Alternating dash/gap lengths starting at `offset` into the pattern."""

    offset: float = 0.0
    segments: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(float(item) for item in self.segments))
        if any(item < 0 for item in self.segments):
            msg = "dash pattern segments must be >= 0."
            raise ValueError(msg)

    @property
    def is_solid(self) -> bool:
        return not self.segments

    @classmethod
    def dashed(cls, length: float = DEFAULT_DASH_LENGTH) -> DashPattern:
        return cls(0.0, (length,))

    @classmethod
    def coerce(cls, value: Any) -> DashPattern:
        """Normalize a dash pattern.

        Accepted: a `DashPattern`, `"solid"`, `"dashed"`, `"dashed:N"`, a
        sequence of segment lengths or an `{"offset", "segments"}` mapping.
        """
        if isinstance(value, DashPattern):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            if text == "solid":
                return cls()
            if text == "dashed":
                return cls.dashed()
            if text.startswith("dashed:"):
                raw_length = text.split(":", 1)[1]
                try:
                    length = float(raw_length)
                except ValueError as exc:
                    msg = f"invalid dash length '{raw_length}'."
                    raise InvalidArgumentShape(msg) from exc
                return cls.dashed(length)
            msg = f"unknown dash pattern '{value}'. Valid forms: solid, dashed, dashed:N."
            raise InvalidArgumentShape(msg)
        if isinstance(value, Mapping):
            unknown = sorted(str(key) for key in value if key not in ("offset", "segments"))
            if unknown:
                msg = f"unknown dash pattern key(s): {', '.join(unknown)}."
                raise InvalidArgumentShape(msg)
            return cls(
                offset=float(value.get("offset", 0.0)),
                segments=tuple(value.get("segments", ())),
            )
        if isinstance(value, Sequence) and all(is_number(item) for item in value):
            return cls(0.0, tuple(value))
        msg = f"cannot interpret {value!r} as a dash pattern."
        raise InvalidArgumentShape(msg)


def coerce_enum(value: Any, enum_type: type[Enum], *, name: str) -> Any:
    """Parse an optional enum value by member or by its string value."""
    if value is None or isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError as exc:
        valid = ", ".join(member.value for member in enum_type)
        msg = f"invalid {name} {value!r}. Valid values: {valid}."
        raise InvalidArgumentShape(msg) from exc
