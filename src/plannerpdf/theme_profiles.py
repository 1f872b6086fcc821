"""Theme profile schema and resolver."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .color import Color
from .config import (
    DEFAULT_BOLD_FONT_NAME,
    DEFAULT_FILL_COLOR,
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    DEFAULT_OUTLINE_COLOR,
    DEFAULT_OUTLINE_THICKNESS,
    DEFAULT_TEXT_COLOR,
)


@dataclass(frozen=True)
class Theme:
    """Resolved colors and fonts used for unset object styles."""

    fill_color: Color
    outline_color: Color
    text_color: Color
    line_color: Color
    outline_thickness: float
    font_name: str
    header_font_name: str
    font_size: float


@dataclass(frozen=True)
class ThemeProfile:
    """Serializable theme profile values."""

    fill_color: str = DEFAULT_FILL_COLOR
    outline_color: str = DEFAULT_OUTLINE_COLOR
    text_color: str = DEFAULT_TEXT_COLOR
    line_color: str = "#A0A0A0"
    outline_thickness: float = DEFAULT_OUTLINE_THICKNESS
    font_name: str = DEFAULT_FONT_NAME
    header_font_name: str = DEFAULT_BOLD_FONT_NAME
    font_size: float = DEFAULT_FONT_SIZE

    def to_theme(self) -> Theme:
        """Return a runtime theme with parsed color values."""
        return Theme(
            fill_color=_parse_color(self.fill_color, key="fill_color"),
            outline_color=_parse_color(self.outline_color, key="outline_color"),
            text_color=_parse_color(self.text_color, key="text_color"),
            line_color=_parse_color(self.line_color, key="line_color"),
            outline_thickness=_parse_positive(
                self.outline_thickness, key="outline_thickness", allow_zero=True
            ),
            font_name=_parse_font(self.font_name, key="font_name"),
            header_font_name=_parse_font(self.header_font_name, key="header_font_name"),
            font_size=_parse_positive(self.font_size, key="font_size"),
        )


_BUILTIN_THEME_PROFILES: dict[str, ThemeProfile] = {
    "default": ThemeProfile(),
    "light": ThemeProfile(
        fill_color="#D0D0D0",
        line_color="#C0C0C0",
    ),
    "contrast": ThemeProfile(
        fill_color="#000000",
        line_color="#404040",
        outline_thickness=1.5,
        font_name="Helvetica-Bold",
    ),
}


def available_theme_profiles() -> tuple[str, ...]:
    """Return built-in theme profile names."""
    return tuple(sorted(_BUILTIN_THEME_PROFILES))


def resolve_theme(
    *,
    profile: str = "default",
    theme_file: str | Path | None = None,
) -> Theme:
    """Resolve one built-in theme plus optional file overrides."""
    if profile not in _BUILTIN_THEME_PROFILES:
        valid = ", ".join(available_theme_profiles())
        msg = f"unknown theme profile '{profile}'. Valid profiles: {valid}."
        raise ValueError(msg)

    resolved_profile = _BUILTIN_THEME_PROFILES[profile]
    if theme_file is not None:
        resolved_profile = replace(resolved_profile, **_load_theme_file(Path(theme_file)))
    return resolved_profile.to_theme()


def _load_theme_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        msg = f"theme file '{path}' does not exist."
        raise ValueError(msg)

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"theme file '{path}' is not valid JSON: {exc}."
        raise ValueError(msg) from exc

    if not isinstance(payload, dict):
        msg = "theme file content must be a JSON object."
        raise ValueError(msg)

    allowed = set(ThemeProfile.__dataclass_fields__)
    unknown = sorted(key for key in payload if key not in allowed)
    if unknown:
        msg = f"unknown theme key(s): {', '.join(unknown)}."
        raise ValueError(msg)

    return payload


def _parse_color(raw_value: str, *, key: str) -> Color:
    if not isinstance(raw_value, str) or not raw_value.strip():
        msg = f"theme key '{key}' must be a non-empty color string."
        raise ValueError(msg)
    try:
        return Color.parse(raw_value)
    except ValueError as exc:
        msg = f"invalid color value '{raw_value}' for theme key '{key}'."
        raise ValueError(msg) from exc


def _parse_font(raw_value: str, *, key: str) -> str:
    if not isinstance(raw_value, str) or not raw_value.strip():
        msg = f"theme key '{key}' must be a non-empty font name string."
        raise ValueError(msg)
    return raw_value


def _parse_positive(raw_value: Any, *, key: str, allow_zero: bool = False) -> float:
    if isinstance(raw_value, bool) or not isinstance(raw_value, (int, float)):
        msg = f"theme key '{key}' must be a number."
        raise ValueError(msg)
    if raw_value < 0 or (raw_value == 0 and not allow_zero):
        bound = ">= 0" if allow_zero else "> 0"
        msg = f"theme key '{key}' must be {bound}."
        raise ValueError(msg)
    return float(raw_value)


DEFAULT_THEME = resolve_theme()
