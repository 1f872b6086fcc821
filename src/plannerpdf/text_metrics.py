"""Text measurement capability used for text bounds."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from reportlab.pdfbase import pdfmetrics

from .config import DEFAULT_FONT_NAME, DEFAULT_FONT_SIZE
from .geometry import points_to_mm


@dataclass(frozen=True)
class TextMetrics:
    """Text extents in page units; `descent` is a positive distance below the baseline."""

    ascent: float
    descent: float
    advance_width: float

    @property
    def height(self) -> float:
        return self.ascent + self.descent


class TextMeasurer(Protocol):
    """Measures a run of text in a given font and size (points)."""

    def measure(self, text: str, font: str | None, size: float | None) -> TextMetrics: ...


class ReportLabTextMeasurer:
    """Measure text using reportlab's registered font metrics."""

    def __init__(
        self,
        default_font: str = DEFAULT_FONT_NAME,
        default_size: float = DEFAULT_FONT_SIZE,
    ) -> None:
        self.default_font = default_font
        self.default_size = default_size

    def measure(self, text: str, font: str | None, size: float | None) -> TextMetrics:
        font_name = font or self.default_font
        font_size = self.default_size if size is None else size
        try:
            width_pt = pdfmetrics.stringWidth(text, font_name, font_size)
            ascent_pt, descent_pt = pdfmetrics.getAscentDescent(font_name, font_size)
        except KeyError as exc:
            msg = f"unknown font '{font_name}'."
            raise ValueError(msg) from exc
        return TextMetrics(
            ascent=points_to_mm(ascent_pt),
            descent=points_to_mm(abs(descent_pt)),
            advance_width=points_to_mm(width_pt),
        )


_DEFAULT_MEASURER = ReportLabTextMeasurer()


def default_text_measurer() -> TextMeasurer:
    """Return the shared measurer backed by reportlab's standard fonts."""
    return _DEFAULT_MEASURER
