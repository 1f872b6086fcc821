"""RGB colors with simple lightness arithmetic."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from reportlab.lib import colors

from .errors import InvalidArgumentShape
from .geometry import is_number

_LIGHT_THRESHOLD = 0.5


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


@dataclass(frozen=True)
class Color:
    """RGB color with channels in `[0, 1]`."""

    red: float
    green: float
    blue: float

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not is_number(value) or not 0.0 <= value <= 1.0:
                msg = f"color channel '{name}' must be between 0 and 1, got {value!r}."
                raise ValueError(msg)

    @classmethod
    def from_rgb255(cls, red: int, green: int, blue: int) -> Color:
        for value in (red, green, blue):
            if not is_number(value) or not 0 <= value <= 255:
                msg = f"8-bit color channel must be between 0 and 255, got {value!r}."
                raise ValueError(msg)
        return cls(red / 255, green / 255, blue / 255)

    def luminance(self) -> float:
        """Relative luminance using Rec. 709 coefficients."""
        return 0.2126 * self.red + 0.7152 * self.green + 0.0722 * self.blue

    def is_light(self) -> bool:
        return self.luminance() > _LIGHT_THRESHOLD

    def is_dark(self) -> bool:
        return not self.is_light()

    def lighten(self, factor: float) -> Color:
        """Move each channel toward white by `factor` (0 keeps, 1 gives white)."""
        return Color(
            _clamp(self.red + (1.0 - self.red) * factor),
            _clamp(self.green + (1.0 - self.green) * factor),
            _clamp(self.blue + (1.0 - self.blue) * factor),
        )

    def darken(self, factor: float) -> Color:
        """Move each channel toward black by `factor` (0 keeps, 1 gives black)."""
        return Color(
            _clamp(self.red * (1.0 - factor)),
            _clamp(self.green * (1.0 - factor)),
            _clamp(self.blue * (1.0 - factor)),
        )

    def to_rgb255(self) -> tuple[int, int, int]:
        return (
            round(self.red * 255),
            round(self.green * 255),
            round(self.blue * 255),
        )

    def to_hex(self) -> str:
        red, green, blue = self.to_rgb255()
        return f"#{red:02X}{green:02X}{blue:02X}"

    def to_reportlab(self) -> colors.Color:
        return colors.Color(self.red, self.green, self.blue)

    def __str__(self) -> str:
        return self.to_hex()

    @classmethod
    def coerce(cls, value: Any) -> Color:
        """Normalize a color from the accepted encodings.

        Accepted: a `Color`, a reportlab color, a hex string with or without
        a leading `#`, a reportlab color name, a sequence of three 0-255
        channels or an `{"r", "g", "b"}` mapping of 0-255 channels.
        """
        if isinstance(value, Color):
            return value
        if isinstance(value, colors.Color):
            return cls(_clamp(value.red), _clamp(value.green), _clamp(value.blue))
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, Mapping):
            if set(value) != {"r", "g", "b"}:
                msg = f"color mapping must have exactly the keys r, g and b, got {sorted(value)}."
                raise InvalidArgumentShape(msg)
            return cls.from_rgb255(value["r"], value["g"], value["b"])
        if isinstance(value, Sequence) and not isinstance(value, bytes):
            if len(value) != 3:
                msg = f"color sequence must have 3 elements, got {len(value)}."
                raise InvalidArgumentShape(msg)
            return cls.from_rgb255(*value)
        msg = f"cannot interpret {value!r} as a color."
        raise InvalidArgumentShape(msg)

    @classmethod
    def parse(cls, raw_value: str) -> Color:
        """Parse a hex string (`"#0080FF"`, `"0080ff"`) or a reportlab color name."""
        text = raw_value.strip()
        if not text:
            msg = "color string must be non-empty."
            raise ValueError(msg)
        hex_digits = text[1:] if text.startswith("#") else text
        if len(hex_digits) == 6 and all(ch in "0123456789abcdefABCDEF" for ch in hex_digits):
            parsed = colors.HexColor(f"#{hex_digits}")
        else:
            try:
                parsed = colors.toColor(text)
            except Exception as exc:  # noqa: BLE001
                msg = f"invalid color value '{raw_value}'."
                raise ValueError(msg) from exc
        return cls(_clamp(parsed.red), _clamp(parsed.green), _clamp(parsed.blue))


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
