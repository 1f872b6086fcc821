"""Drawing primitives and backend adapters."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from reportlab.pdfgen import canvas

PointPt = tuple[float, float]
RectPt = tuple[float, float, float, float]


class DrawingPrimitives(Protocol):
    """Backend-agnostic drawing primitives in PDF points."""

    def set_fill_color(self, color: Any) -> None: ...
    def set_stroke_color(self, color: Any) -> None: ...
    def set_line_width(self, width: float) -> None: ...
    def set_line_cap(self, cap: int) -> None: ...
    def set_line_join(self, join: int) -> None: ...
    def set_dash(self, segments: Sequence[float], phase: float = 0) -> None: ...
    def set_font(self, font_name: str, size: float) -> None: ...
    def draw_string(self, x: float, y: float, text: str) -> None: ...
    def draw_path(
        self,
        points: Sequence[PointPt],
        *,
        closed: bool,
        fill: bool,
        stroke: bool,
        clip: bool = False,
        even_odd: bool = False,
    ) -> None: ...
    def draw_circle(
        self,
        x: float,
        y: float,
        radius: float,
        *,
        fill: bool,
        stroke: bool,
        clip: bool = False,
        even_odd: bool = False,
    ) -> None: ...
    def link_rect(self, destination: str, rect: RectPt) -> None: ...
    def link_uri(self, uri: str, rect: RectPt) -> None: ...
    def bookmark_page(self, key: str) -> None: ...
    def add_outline_entry(self, title: str, key: str, *, level: int) -> None: ...
    def save_state(self) -> None: ...
    def restore_state(self) -> None: ...
    def set_title(self, title: str) -> None: ...
    def show_page(self) -> None: ...
    def save(self) -> None: ...


class ReportLabPrimitives:
    """ReportLab-backed implementation of DrawingPrimitives."""

    def __init__(self, target: canvas.Canvas) -> None:
        self._target = target

    def set_fill_color(self, color: Any) -> None:
        self._target.setFillColor(color)

    def set_stroke_color(self, color: Any) -> None:
        self._target.setStrokeColor(color)

    def set_line_width(self, width: float) -> None:
        self._target.setLineWidth(width)

    def set_line_cap(self, cap: int) -> None:
        self._target.setLineCap(cap)

    def set_line_join(self, join: int) -> None:
        self._target.setLineJoin(join)

    def set_dash(self, segments: Sequence[float], phase: float = 0) -> None:
        self._target.setDash(list(segments), phase)

    def set_font(self, font_name: str, size: float) -> None:
        self._target.setFont(font_name, size)

    def draw_string(self, x: float, y: float, text: str) -> None:
        self._target.drawString(x, y, text)

    def _paint(self, path: Any, *, fill: bool, stroke: bool, clip: bool, even_odd: bool) -> None:
        fill_mode = canvas.FILL_EVEN_ODD if even_odd else canvas.FILL_NON_ZERO
        if clip:
            self._target.clipPath(path, stroke=int(stroke), fill=int(fill), fillMode=fill_mode)
        else:
            self._target.drawPath(path, stroke=int(stroke), fill=int(fill), fillMode=fill_mode)

    def draw_path(
        self,
        points: Sequence[PointPt],
        *,
        closed: bool,
        fill: bool,
        stroke: bool,
        clip: bool = False,
        even_odd: bool = False,
    ) -> None:
        path = self._target.beginPath()
        first, *rest = points
        path.moveTo(*first)
        for point in rest:
            path.lineTo(*point)
        if closed:
            path.close()
        self._paint(path, fill=fill, stroke=stroke, clip=clip, even_odd=even_odd)

    def draw_circle(
        self,
        x: float,
        y: float,
        radius: float,
        *,
        fill: bool,
        stroke: bool,
        clip: bool = False,
        even_odd: bool = False,
    ) -> None:
        path = self._target.beginPath()
        path.circle(x, y, radius)
        self._paint(path, fill=fill, stroke=stroke, clip=clip, even_odd=even_odd)

    def link_rect(self, destination: str, rect: RectPt) -> None:
        self._target.linkRect("", destination, rect, thickness=0)

    def link_uri(self, uri: str, rect: RectPt) -> None:
        self._target.linkURL(uri, rect, relative=0, thickness=0)

    def bookmark_page(self, key: str) -> None:
        self._target.bookmarkPage(key)

    def add_outline_entry(self, title: str, key: str, *, level: int) -> None:
        self._target.addOutlineEntry(title, key, level=level)

    def save_state(self) -> None:
        self._target.saveState()

    def restore_state(self) -> None:
        self._target.restoreState()

    def set_title(self, title: str) -> None:
        self._target.setTitle(title)

    def show_page(self) -> None:
        self._target.showPage()

    def save(self) -> None:
        self._target.save()


def create_reportlab_primitives(
    output_path: str,
    *,
    pagesize: tuple[float, float],
) -> ReportLabPrimitives:
    """Create a ReportLab-backed primitives renderer."""
    return ReportLabPrimitives(canvas.Canvas(output_path, pagesize=pagesize))
