"""Depth-ordered rendering of drawing objects onto drawing primitives."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .color import Color
from .drawing import DrawingPrimitives
from .geometry import Bounds, mm_to_points
from .link import GoToLink, UriLink
from .objects import (
    Circle,
    DrawingObject,
    Line,
    Rect,
    Shape,
    Text,
    draw_order,
    iter_link_annotations,
)
from .pages import Page
from .style import (
    DEFAULT_LINE_CAP,
    DEFAULT_LINE_JOIN,
    DEFAULT_PAINT_MODE,
    DEFAULT_WINDING_ORDER,
    DashPattern,
    LineCapStyle,
    LineJoinStyle,
    PaintMode,
    WindingOrder,
)
from .text_metrics import TextMeasurer
from .theme_profiles import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)


def page_bookmark(page_id: int) -> str:
    """Return the bookmark key that `GoToLink(page_id)` resolves to."""
    return f"page_{page_id}"


def _pt_rect(bounds: Bounds) -> tuple[float, float, float, float]:
    llx, lly, urx, ury = bounds.to_coords()
    return (mm_to_points(llx), mm_to_points(lly), mm_to_points(urx), mm_to_points(ury))


def _apply_stroke(
    pdf: DrawingPrimitives,
    *,
    color: Color,
    thickness: float,
    dash_pattern: DashPattern | None,
    cap_style: LineCapStyle | None,
    join_style: LineJoinStyle | None,
) -> None:
    pdf.set_stroke_color(color.to_reportlab())
    pdf.set_line_width(thickness)
    pdf.set_line_cap((cap_style or DEFAULT_LINE_CAP).to_reportlab())
    pdf.set_line_join((join_style or DEFAULT_LINE_JOIN).to_reportlab())
    if dash_pattern is None or dash_pattern.is_solid:
        pdf.set_dash((), 0)
    else:
        pdf.set_dash(dash_pattern.segments, dash_pattern.offset)


def _draw_closed(pdf: DrawingPrimitives, obj: Rect | Shape | Circle, theme: Theme) -> None:
    mode: PaintMode = obj.mode or DEFAULT_PAINT_MODE
    order: WindingOrder = obj.order or DEFAULT_WINDING_ORDER
    thickness = obj.outline_thickness
    pdf.set_fill_color((obj.fill_color or theme.fill_color).to_reportlab())
    _apply_stroke(
        pdf,
        color=obj.outline_color or theme.outline_color,
        thickness=theme.outline_thickness if thickness is None else thickness,
        dash_pattern=obj.dash_pattern,
        cap_style=obj.cap_style,
        join_style=obj.join_style,
    )
    paint = {
        "fill": mode.fills,
        "stroke": mode.strokes,
        "clip": mode is PaintMode.CLIP,
        "even_odd": order is WindingOrder.EVEN_ODD,
    }
    if isinstance(obj, Circle):
        pdf.draw_circle(
            mm_to_points(obj.center.x),
            mm_to_points(obj.center.y),
            mm_to_points(obj.radius),
            **paint,
        )
        return
    if isinstance(obj, Rect):
        bounds = obj.bounds()
        points = (bounds.ll, bounds.lr, bounds.ur, bounds.ul)
    else:
        points = obj.points
    pdf.draw_path(
        [(mm_to_points(point.x), mm_to_points(point.y)) for point in points],
        closed=True,
        **paint,
    )


def _draw_line(pdf: DrawingPrimitives, obj: Line, theme: Theme) -> None:
    _apply_stroke(
        pdf,
        color=obj.color or theme.outline_color,
        thickness=theme.outline_thickness if obj.thickness is None else obj.thickness,
        dash_pattern=obj.dash_pattern,
        cap_style=obj.cap_style,
        join_style=obj.join_style,
    )
    pdf.draw_path(
        [(mm_to_points(point.x), mm_to_points(point.y)) for point in obj.points],
        closed=False,
        fill=False,
        stroke=True,
    )


def _draw_text(pdf: DrawingPrimitives, obj: Text, theme: Theme) -> None:
    pdf.set_fill_color((obj.color or theme.text_color).to_reportlab())
    pdf.set_font(obj.font or theme.font_name, theme.font_size if obj.size is None else obj.size)
    pdf.draw_string(mm_to_points(obj.x), mm_to_points(obj.y), obj.text)


def render_objects(
    pdf: DrawingPrimitives,
    objects: Iterable[DrawingObject],
    *,
    theme: Theme = DEFAULT_THEME,
    measurer: TextMeasurer | None = None,
) -> int:
    """Draw `objects` in depth order, then emit their link annotations.

    Unset style attributes fall back to `theme`. Returns the number of leaf
    objects drawn.
    """
    pending = list(objects)
    ordered = draw_order(pending)
    for _depth, obj in ordered:
        if isinstance(obj, Text):
            _draw_text(pdf, obj, theme)
        elif isinstance(obj, Line):
            _draw_line(pdf, obj, theme)
        else:
            _draw_closed(pdf, obj, theme)

    annotations = sorted(iter_link_annotations(pending, measurer), key=lambda item: item.depth)
    for annotation in annotations:
        rect = _pt_rect(annotation.bounds)
        if isinstance(annotation.link, GoToLink):
            pdf.link_rect(page_bookmark(annotation.link.page), rect)
        elif isinstance(annotation.link, UriLink):
            pdf.link_uri(annotation.link.uri, rect)
    return len(ordered)


def render_page(
    pdf: DrawingPrimitives,
    page: Page,
    *,
    theme: Theme = DEFAULT_THEME,
    measurer: TextMeasurer | None = None,
) -> None:
    """Render one page, register its bookmark and advance the PDF cursor."""
    pdf.bookmark_page(page_bookmark(page.id))
    if page.outline_title is not None:
        pdf.add_outline_entry(page.outline_title, page_bookmark(page.id), level=page.outline_level)
    pdf.save_state()
    drawn = render_objects(pdf, page.objects, theme=theme, measurer=measurer)
    pdf.restore_state()
    logger.debug("rendered page %d (%s %s): %d objects", page.id, page.kind.value, page.date, drawn)
    pdf.show_page()
