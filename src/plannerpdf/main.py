"""CLI and orchestration for planner PDF generation."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from .color import Color
from .components import (
    CalendarDayContext,
    SectionContext,
    calendar_fill_colors,
    lined_list,
    month_calendar,
    rect_text,
    section,
)
from .config import (
    DAILY_SECTION_GAP_MM,
    DEFAULT_FILENAME_TEMPLATE,
    MONTH_LABELS,
    PAGE_PADDING_MM,
    WEEKDAY_LABELS,
)
from .dates import MAX_DAY_COUNT, Date, WeekStart
from .drawing import create_reportlab_primitives
from .geometry import Bounds
from .grid import Grid
from .link import GoToLink
from .objects import Group, Rect, Text
from .pages import Page, PageHooks, PlannerPages
from .profiles import DEFAULT_DEVICE, DEVICE_PROFILES, DeviceProfile, resolve_device_profile
from .rendering import render_page
from .style import PaintMode
from .text_metrics import ReportLabTextMeasurer, TextMeasurer
from .theme_profiles import DEFAULT_THEME, Theme, available_theme_profiles, resolve_theme

logger = logging.getLogger(__name__)

HEADER_HEIGHT_MM = 14.0
NAV_WIDTH_MM = 18.0
HEADER_FONT_SIZE = 16.0
SECTION_PADDING = {"left": 2.0, "right": 2.0}
SCHEDULE_LABELS = tuple(f"{hour:02d}:00" for hour in range(6, 22))
DAILY_NOTE_ROWS = 18
WEEKLY_NOTE_ROWS = 3


def _validate_year(year: int) -> None:
    if isinstance(year, bool) or not isinstance(year, int):
        msg = "year must be an integer."
        raise TypeError(msg)
    if not 1 <= year <= 9999:
        msg = "year must be between 1 and 9999."
        raise ValueError(msg)


def expected_page_count(year: int, *, week_start: WeekStart | str = WeekStart.SUNDAY) -> int:
    """Return the total page count for month + week + day views."""
    _validate_year(year)
    return len(PlannerPages(year, week_start))


class PlannerLayout:
    """Default page hooks for monthly, weekly and daily pages.

    Every page gets a header strip with previous/next navigation. The header
    title links one level up: daily pages to their week, weekly pages to
    their month.
    """

    def __init__(
        self,
        device: DeviceProfile,
        *,
        theme: Theme = DEFAULT_THEME,
        week_start: WeekStart = WeekStart.SUNDAY,
        measurer: TextMeasurer | None = None,
    ) -> None:
        self.theme = theme
        self.week_start = week_start
        self.measurer = measurer or ReportLabTextMeasurer(theme.font_name, theme.font_size)
        _, _, self.header_text_color = calendar_fill_colors(theme.fill_color)

        content = device.page_bounds.with_padding(PAGE_PADDING_MM)
        rows = Grid(content, rows=content.height / HEADER_HEIGHT_MM, columns=1)
        self.header = rows.cell(1, 1)
        self.body = content.scale_to(
            height=content.height - HEADER_HEIGHT_MM - DAILY_SECTION_GAP_MM
        )

    def hooks(self) -> PageHooks:
        return PageHooks(
            on_monthly=self.draw_monthly,
            on_weekly=self.draw_weekly,
            on_daily=self.draw_daily,
        )

    def _header_label(self, text: str, color: Color | None = None) -> Text:
        return Text(
            0.0,
            0.0,
            text,
            font=self.theme.header_font_name,
            size=HEADER_FONT_SIZE,
            color=color,
        )

    def _header(
        self,
        title: str,
        *,
        planner: PlannerPages,
        page: Page,
        parent: Page | None = None,
    ) -> Group:
        nav = Grid(self.header, rows=1, columns=self.header.width / NAV_WIDTH_MM)
        prev_bounds = nav.cell(1, 1)
        next_bounds = nav.cell(1, nav.columns)

        title_block = rect_text(
            Rect(
                prev_bounds.lr,
                next_bounds.ul,
                fill_color=self.theme.fill_color,
                mode=PaintMode.FILL,
            ),
            self._header_label(title, self.header_text_color),
            measurer=self.measurer,
        )
        if parent is not None:
            title_block.link = GoToLink(parent.id)

        header = Group([title_block])
        for bounds, label, target in (
            (prev_bounds, "<", planner.prev_page(page)),
            (next_bounds, ">", planner.next_page(page)),
        ):
            if target is None:
                continue
            button = rect_text(
                Rect.from_bounds(bounds, mode=PaintMode.STROKE),
                self._header_label(label),
                measurer=self.measurer,
            )
            button.link = GoToLink(target.id)
            header.push(button)
        return header

    def _section(
        self,
        bounds: Bounds,
        title: str,
        *,
        on_inner: Callable[[SectionContext], None],
        dash_pattern: str | None = None,
    ) -> Group:
        return section(
            bounds,
            {
                "text": title,
                "background": self.theme.fill_color,
                "foreground": self.header_text_color,
            },
            padding=SECTION_PADDING,
            outline_color=self.theme.fill_color,
            outline_thickness=self.theme.outline_thickness,
            outline_dash_pattern=dash_pattern,
            on_inner=on_inner,
            measurer=self.measurer,
        )

    def _ruled(self, rows: Sequence[str]) -> Callable[[SectionContext], None]:
        def fill(context: SectionContext) -> None:
            context.group.push(
                lined_list(
                    context.bounds,
                    rows,
                    line_color=self.theme.line_color,
                    text_color=self.theme.text_color,
                    measurer=self.measurer,
                )
            )

        return fill

    def draw_monthly(self, page: Page, planner: PlannerPages) -> None:
        month_name = page.date.format("%B")
        page.outline_title = month_name
        page.push(self._header(f"{month_name.upper()} {planner.year}", planner=planner, page=page))

        def link_day(context: CalendarDayContext) -> None:
            if context.date is None:
                return None
            daily = planner.daily_page(context.date)
            if daily is not None:
                context.group.link = GoToLink(daily.id)
            return None

        page.push(
            month_calendar(
                self.body,
                page.date,
                fill_color=self.theme.fill_color,
                outline_thickness=self.theme.outline_thickness,
                week_start=self.week_start,
                on_day_block=link_day,
                measurer=self.measurer,
            )
        )

    def draw_weekly(self, page: Page, planner: PlannerPages) -> None:
        start = page.date
        # A clamped first week holds only the days up to its week end.
        remaining = 8 - start.weekday.number_from(self.week_start)
        days = [
            start.add_days(offset)
            for offset in range(remaining)
            if start.day_count + offset <= MAX_DAY_COUNT
        ]
        end = days[-1]
        page.outline_title = f"Week {start.calendar_week(self.week_start):02d}"
        title = (
            f"{MONTH_LABELS[start.month - 1]} {start.day:02d} - "
            f"{MONTH_LABELS[end.month - 1]} {end.day:02d}"
        )
        page.push(
            self._header(title, planner=planner, page=page, parent=planner.monthly_page(start))
        )

        rows = Grid(self.body, rows=7, columns=1)
        for row, day in enumerate(days, start=1):
            day_section = self._section(
                rows.cell(row, 1, padding={"bottom": DAILY_SECTION_GAP_MM / 2}),
                f"{WEEKDAY_LABELS[day.weekday.value]} {day.format('%m/%d')}",
                on_inner=self._ruled([""] * WEEKLY_NOTE_ROWS),
            )
            daily = planner.daily_page(day)
            if daily is not None:
                day_section.link = GoToLink(daily.id)
            page.push(day_section)

    def draw_daily(self, page: Page, planner: PlannerPages) -> None:
        day: Date = page.date
        page.push(
            self._header(
                day.format("%A %B %d").upper(),
                planner=planner,
                page=page,
                parent=planner.weekly_page(day),
            )
        )

        columns = Grid(self.body, rows=1, columns=3)
        gap = DAILY_SECTION_GAP_MM / 2
        page.push(
            self._section(
                columns.cell(1, 1, padding={"right": gap}),
                "SCHEDULE",
                on_inner=self._ruled(SCHEDULE_LABELS),
            )
        )
        page.push(
            self._section(
                columns.cell(1, 2, width=2, padding={"left": gap}),
                "NOTES",
                on_inner=self._ruled([""] * DAILY_NOTE_ROWS),
                dash_pattern="dashed:3",
            )
        )


def generate_planner(
    year: int = 2026,
    output_path: str | Path | None = None,
    *,
    device: str = DEFAULT_DEVICE,
    size: str | None = None,
    dpi: int | None = None,
    week_start: WeekStart | str = WeekStart.SUNDAY,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Generate a planner PDF and return the output path."""
    _validate_year(year)
    profile = resolve_device_profile(device=device, size=size, dpi=dpi)
    start = WeekStart(week_start)

    planner = PlannerPages(year, start)
    layout = PlannerLayout(profile, theme=theme, week_start=start)
    planner.populate(layout.hooks())

    destination = Path(output_path or DEFAULT_FILENAME_TEMPLATE.format(year=year))
    destination.parent.mkdir(parents=True, exist_ok=True)

    pdf = create_reportlab_primitives(str(destination), pagesize=profile.pagesize)
    pdf.set_title(f"Planner {year} ({profile.name})")
    for page in planner:
        render_page(pdf, page, theme=theme, measurer=layout.measurer)
    pdf.save()

    logger.info("wrote %d pages to %s", len(planner), destination)
    return destination


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a linked yearly planner PDF.")
    parser.add_argument("--year", type=int, default=2026, help="Year to render.")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output PDF path. Default: planner_<year>.pdf",
    )
    parser.add_argument(
        "--device",
        choices=sorted(DEVICE_PROFILES),
        default=DEFAULT_DEVICE,
        help="Target device profile.",
    )
    parser.add_argument(
        "--size",
        default=None,
        help="Page size override as WxH followed by in, mm or px (e.g. 1404x1872px).",
    )
    parser.add_argument(
        "--dpi",
        type=int,
        default=None,
        help="Pixel density used to convert px sizes. Default is device-specific.",
    )
    parser.add_argument(
        "--week-start",
        choices=[item.value for item in WeekStart],
        default=WeekStart.SUNDAY.value,
        help="First day of the week in calendars and weekly pages.",
    )
    parser.add_argument(
        "--theme-profile",
        choices=available_theme_profiles(),
        default="default",
        help="Built-in theme profile name.",
    )
    parser.add_argument(
        "--theme-file",
        type=Path,
        default=None,
        help="JSON file with theme overrides.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log page generation details.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(list(sys.argv[1:] if argv is None else argv))
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        resolved_theme = resolve_theme(profile=args.theme_profile, theme_file=args.theme_file)
        destination = generate_planner(
            year=args.year,
            output_path=args.output,
            device=args.device,
            size=args.size,
            dpi=args.dpi,
            week_start=args.week_start,
            theme=resolved_theme,
        )
    except ValueError as exc:
        parser.exit(status=2, message=f"error: {exc}\n")

    print(f"Generated planner at: {destination}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
