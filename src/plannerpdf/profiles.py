"""Device profiles and page-size parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from .geometry import Bounds, mm_to_points, px_to_mm

_MM_PER_INCH = 25.4
_PAGE_SIZE_PATTERN = re.compile(
    r"^\s*(?P<width>\d+(?:\.\d+)?)\s*x\s*(?P<height>\d+(?:\.\d+)?)\s*(?P<unit>in|mm|px)\s*$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class DeviceProfile:
    """Physical page configuration for a target e-ink device."""

    name: str
    width_mm: float
    height_mm: float
    dpi: int = 300

    @classmethod
    def from_pixels(cls, name: str, width_px: int, height_px: int, dpi: int) -> DeviceProfile:
        return cls(
            name=name,
            width_mm=px_to_mm(width_px, dpi),
            height_mm=px_to_mm(height_px, dpi),
            dpi=dpi,
        )

    @property
    def page_bounds(self) -> Bounds:
        return Bounds.from_coords(0.0, 0.0, self.width_mm, self.height_mm)

    @property
    def pagesize(self) -> tuple[float, float]:
        """Page size in PDF points."""
        return (mm_to_points(self.width_mm), mm_to_points(self.height_mm))


DEVICE_PROFILES = {
    "nomad": DeviceProfile.from_pixels("Supernote Nomad", 1404, 1872, 300),
    "remarkable": DeviceProfile.from_pixels("reMarkable 2", 1404, 1872, 226),
    "scribe": DeviceProfile.from_pixels("Kindle Scribe", 1860, 2480, 300),
    "palma": DeviceProfile.from_pixels("BOOX Palma", 824, 1648, 300),
}

DEFAULT_DEVICE = "nomad"


def parse_page_size(raw_value: str, dpi: float) -> tuple[float, float]:
    """Parse `WxH{in|mm|px}` into `(width_mm, height_mm)`; pixels use `dpi`."""
    match = _PAGE_SIZE_PATTERN.match(raw_value)
    if match is None:
        msg = f"invalid page size '{raw_value}'. Expected WxH followed by in, mm or px."
        raise ValueError(msg)

    width = float(match.group("width"))
    height = float(match.group("height"))
    if width <= 0 or height <= 0:
        msg = f"page size '{raw_value}' must have a positive width and height."
        raise ValueError(msg)

    unit = match.group("unit").lower()
    if unit == "in":
        return (width * _MM_PER_INCH, height * _MM_PER_INCH)
    if unit == "px":
        return (px_to_mm(width, dpi), px_to_mm(height, dpi))
    return (width, height)


def resolve_device_profile(
    device: str = DEFAULT_DEVICE,
    size: str | None = None,
    dpi: int | None = None,
) -> DeviceProfile:
    """Resolve a built-in device, optionally overriding its page size and dpi."""
    if device not in DEVICE_PROFILES:
        msg = f"unknown device '{device}'. Valid devices: {', '.join(sorted(DEVICE_PROFILES))}."
        raise ValueError(msg)
    if dpi is not None and dpi <= 0:
        msg = "dpi must be > 0."
        raise ValueError(msg)

    profile = DEVICE_PROFILES[device]
    if dpi is not None:
        if size is None:
            width_px = round(profile.width_mm / _MM_PER_INCH * profile.dpi)
            height_px = round(profile.height_mm / _MM_PER_INCH * profile.dpi)
            profile = DeviceProfile.from_pixels(profile.name, width_px, height_px, dpi)
        else:
            profile = replace(profile, dpi=dpi)
    if size is not None:
        width_mm, height_mm = parse_page_size(size, profile.dpi)
        profile = replace(
            profile,
            name=f"{profile.name} ({size})",
            width_mm=width_mm,
            height_mm=height_mm,
        )
    return profile
