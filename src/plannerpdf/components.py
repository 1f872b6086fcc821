"""Composite builders assembled from layout primitives and drawing objects."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .align import CENTER, Align, HorizontalAlign, VerticalAlign
from .color import BLACK, WHITE, Color
from .config import DAY_BADGE_FACTOR, DEFAULT_FILL_COLOR, WEEKDAY_LABELS
from .dates import Date, MonthGrid, WeekStart, week_order
from .errors import InvalidArgumentShape
from .geometry import Bounds, Point
from .grid import Grid
from .objects import DrawingObject, Group, Rect, Text, line
from .style import PaintMode
from .text_metrics import TextMeasurer

CALENDAR_ROWS = 13
CALENDAR_COLUMNS = 7
CALENDAR_WEEKS = 6
_INVALID_BLOCK_SHADE = 0.5

_LEFT_MIDDLE = Align(HorizontalAlign.LEFT, VerticalAlign.MIDDLE)
_LEFT_TOP = Align(HorizontalAlign.LEFT, VerticalAlign.TOP)


def rect_text(
    rect: Any,
    text: Any = None,
    *,
    align: Any = CENTER,
    margin: Any = None,
    padding: Any = None,
    measurer: TextMeasurer | None = None,
) -> Group:
    """Build a rect with text aligned on top of it.

    `margin` shrinks the rect itself; `padding` shrinks the region the text
    is aligned within.
    """
    base = Rect.from_like(rect)
    base = base.with_bounds(base.bounds().with_padding(margin))
    objects: list[DrawingObject] = [base]
    if text is not None:
        label = Text.from_like(text).align_to(
            base.bounds().with_padding(padding),
            CENTER if align is None else align,
            measurer,
        )
        objects.append(label)
    return Group(objects)


@dataclass(frozen=True)
class SectionHeader:
    """Header strip drawn across the top of a section."""

    text: str | None = None
    background: Color | None = None
    foreground: Color | None = None
    height: float | None = None

    @classmethod
    def coerce(cls, value: Any) -> SectionHeader:
        if value is None:
            return cls()
        if isinstance(value, SectionHeader):
            return value
        if isinstance(value, Mapping):
            unknown = sorted(str(key) for key in value if key not in cls.__dataclass_fields__)
            if unknown:
                msg = f"unknown section header key(s): {', '.join(unknown)}."
                raise InvalidArgumentShape(msg)
            return cls(**value)
        msg = f"cannot interpret {value!r} as a section header."
        raise InvalidArgumentShape(msg)


@dataclass(frozen=True)
class SectionContext:
    """Region below a section header and the group to populate it with."""

    bounds: Bounds
    group: Group


def section(
    bounds: Any,
    header: Any = None,
    *,
    padding: Any = None,
    outline_color: Any = None,
    outline_thickness: float | None = None,
    outline_dash_pattern: Any = None,
    outline_cap_style: Any = None,
    outline_join_style: Any = None,
    on_inner: Callable[[SectionContext], None] | None = None,
    measurer: TextMeasurer | None = None,
) -> Group:
    """Build a section: a filled header, a three-sided outline and inner content.

    The header height defaults to the height of its text. `on_inner` receives
    the bounds below the header, padded by `padding`, and an empty group to
    fill. The inner group is kept only when the callback adds objects.
    """
    region = Bounds.coerce(bounds)
    resolved_header = SectionHeader.coerce(header)

    header_height = resolved_header.height
    if header_height is None:
        header_height = Text.from_like(resolved_header.text or "").bounds(measurer).height
    header_bottom = region.ur.y - header_height

    header_text = None
    if resolved_header.text:
        header_text = Text(0.0, 0.0, resolved_header.text, color=resolved_header.foreground)
    objects: list[DrawingObject] = [
        rect_text(
            Rect(
                Point(region.ll.x, header_bottom),
                region.ur,
                fill_color=resolved_header.background,
                mode=PaintMode.FILL,
            ),
            header_text,
            measurer=measurer,
        ),
        line(
            (region.ll.x, header_bottom),
            (region.ll.x, region.ll.y),
            (region.ur.x, region.ll.y),
            (region.ur.x, header_bottom),
            color=outline_color,
            thickness=outline_thickness,
            dash_pattern=outline_dash_pattern,
            cap_style=outline_cap_style,
            join_style=outline_join_style,
        ),
    ]

    inner = Group()
    if on_inner is not None:
        inner_bounds = region.scale_to(height=region.height - header_height).with_padding(padding)
        on_inner(SectionContext(bounds=inner_bounds, group=inner))
    if len(inner):
        objects.append(inner)
    return Group(objects)


def lined_list(
    bounds: Any,
    rows: Sequence[str | None],
    *,
    line_color: Any = None,
    text_color: Any = None,
    measurer: TextMeasurer | None = None,
) -> Group:
    """Build one ruled row per entry with non-empty entries written on it."""
    if not rows:
        return Group()
    grid =Grid(Bounds.coerce(bounds), rows=len(rows), columns=1)
    objects: list[DrawingObject] = []
    for row_idx, row_text in enumerate(rows, start=1):
        cell = grid.cell(row_idx, 1)
        objects.append(line(cell.ll, cell.lr, color=line_color))
        if isinstance(row_text, str) and row_text:
            objects.append(
                Text(0.0, 0.0, row_text, color=text_color).align_to(cell, _LEFT_MIDDLE, measurer)
            )
    return Group(objects)


@dataclass(frozen=True)
class CalendarDayContext:
    """One day block of a month calendar; `date` is None for blocks outside the month."""

    date: Date | None
    week: int
    day_of_week: int
    bounds: Bounds
    group: Group


def _calendar_block(
    cell_bounds: Bounds,
    *,
    rect_style: Mapping[str, Any],
    text: Any = None,
    measurer: TextMeasurer | None = None,
) -> Group:
    return rect_text(Rect.from_bounds(cell_bounds, **rect_style), text, measurer=measurer)


def calendar_fill_colors(fill_color: Any, text_color: Any = None) -> tuple[Color, Color, Color]:
    """Return `(fill, invalid_fill, text)` colors for a month calendar.

    Blocks outside the month are shaded away from the fill by half of the
    remaining luminance; text defaults to black on light fills and white on
    dark ones.
    """
    fill = Color.coerce(fill_color)
    remaining = (1.0 - fill.luminance()) * _INVALID_BLOCK_SHADE
    invalid_fill = fill.darken(remaining) if fill.is_light() else fill.lighten(remaining)
    if text_color is None:
        resolved_text = BLACK if fill.is_light() else WHITE
    else:
        resolved_text = Color.coerce(text_color)
    return fill, invalid_fill, resolved_text


def month_calendar(
    bounds: Any,
    month: Any,
    *,
    fill_color: Any = DEFAULT_FILL_COLOR,
    text_color: Any = None,
    outline_thickness: float = 0.0,
    week_start: WeekStart | str = WeekStart.SUNDAY,
    on_day_block: Callable[[CalendarDayContext], DrawingObject | None] | None = None,
    measurer: TextMeasurer | None = None,
) -> Group:
    """Build a month calendar filling `bounds`.

    The grid has a weekday header row and six double-height week rows. Day
    blocks of the month are outlined with a quarter-size day badge in the top
    left corner; blocks outside the month are filled with a shaded color.
    `on_day_block` runs once per block in week-major order and any object it
    returns is added to that block's group.
    """
    month_date = Date.coerce(month)
    start = WeekStart(week_start)
    fill, invalid_fill, text_color = calendar_fill_colors(fill_color, text_color)

    grid = Grid(Bounds.coerce(bounds), rows=CALENDAR_ROWS, columns=CALENDAR_COLUMNS)
    cell_block = grid.map_cell(_calendar_block)
    objects: list[DrawingObject] = []

    for col, weekday in enumerate(week_order(start), start=1):
        objects.append(
            cell_block(
                1,
                col,
                rect_style={"fill_color": fill},
                text=Text(0.0, 0.0, WEEKDAY_LABELS[weekday.value], color=text_color),
                measurer=measurer,
            )
        )

    month_grid = MonthGrid(month_date.year, month_date.month, start)
    for cell in month_grid.cells(CALENDAR_WEEKS):
        block = cell_block(
            cell.week * 2,
            cell.day_of_week,
            height=2,
            rect_style={
                "fill_color": fill if cell.is_valid else invalid_fill,
                "outline_color": fill,
                "outline_thickness": outline_thickness,
                "mode": PaintMode.STROKE if cell.is_valid else PaintMode.FILL_STROKE,
            },
        )
        block_bounds = block.bounds(measurer)
        group = Group([block])

        if cell.is_valid:
            badge_bounds = block_bounds.scale_by_factor(DAY_BADGE_FACTOR, DAY_BADGE_FACTOR)
            badge = rect_text(
                Rect.from_bounds(badge_bounds, fill_color=fill),
                Text(0.0, 0.0, str(cell.day), color=text_color),
                measurer=measurer,
            ).align_to(block_bounds, _LEFT_TOP, measurer)
            group.push(badge)

        if on_day_block is not None:
            extra = on_day_block(
                CalendarDayContext(
                    date=cell.date,
                    week=cell.week,
                    day_of_week=cell.day_of_week,
                    bounds=block_bounds,
                    group=group,
                )
            )
            if extra is not None:
                group.push(extra)

        objects.append(group)

    return Group(objects)
