"""Planner page model: monthly, weekly and daily pages with sequential ids."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .dates import Date, WeekStart
from .objects import DrawingObject, Group
from .objects.group import require_drawing_object

logger = logging.getLogger(__name__)


class PageKind(str, Enum):
    MONTHLY = "monthly"
    WEEKLY = "weekly"
    DAILY = "daily"


@dataclass
class Page:
    """One planner page.

    `date` is the first day of the month for monthly pages, the first day of
    the week for weekly pages and the day itself for daily pages. `id` is the
    target of `GoToLink`.
    """

    id: int
    kind: PageKind
    date: Date
    objects: list[DrawingObject] = field(default_factory=list)
    outline_title: str | None = None
    outline_level: int = 0

    def push(self, obj: DrawingObject) -> None:
        require_drawing_object(obj)
        self.objects.append(obj)

    def extend(self, objects: list[DrawingObject] | Group) -> None:
        for obj in objects:
            self.push(obj)


PageHook = Callable[[Page, "PlannerPages"], None]


@dataclass(frozen=True)
class PageHooks:
    """Per-kind callbacks that populate pages; invoked in page id order."""

    on_monthly: PageHook | None = None
    on_weekly: PageHook | None = None
    on_daily: PageHook | None = None

    def for_kind(self, kind: PageKind) -> PageHook | None:
        if kind is PageKind.MONTHLY:
            return self.on_monthly
        if kind is PageKind.WEEKLY:
            return self.on_weekly
        return self.on_daily


class PlannerPages:
    """All pages of a yearly planner.

    Pages are generated monthly first, then weekly (every week touching the
    year), then daily, with ids assigned sequentially from 1.
    """

    def __init__(self, year: int, week_start: WeekStart | str = WeekStart.SUNDAY) -> None:
        self.year = year
        self.week_start = WeekStart(week_start)
        self._pages: list[Page] = []
        self._by_key: dict[tuple[PageKind, int], Page] = {}

        first_day = Date.from_ymd(year, 1, 1)
        last_day = Date.from_ymd(year, 12, 31)

        for month in range(1, 13):
            self._add(PageKind.MONTHLY, Date.from_ymd(year, month, 1))

        for week_start_date in self._week_starts(first_day, last_day):
            self._add(PageKind.WEEKLY, week_start_date)

        day = first_day
        while True:
            self._add(PageKind.DAILY, day)
            if day == last_day:
                break
            day = day.tomorrow()

        logger.info(
            "planned %d pages for %d (%d monthly, %d weekly, %d daily)",
            len(self._pages),
            year,
            len(self.pages_of_kind(PageKind.MONTHLY)),
            len(self.pages_of_kind(PageKind.WEEKLY)),
            len(self.pages_of_kind(PageKind.DAILY)),
        )

    def _week_starts(self, first_day: Date, last_day: Date) -> Iterator[Date]:
        offset = first_day.weekday.number_from(self.week_start) - 1
        for start_count in range(first_day.day_count - offset, last_day.day_count + 1, 7):
            # Weeks reaching before 0001-01-01 start on the first representable day.
            yield Date(max(start_count, 1))

    def _add(self, kind: PageKind, date: Date) -> Page:
        page = Page(id=len(self._pages) + 1, kind=kind, date=date)
        self._pages.append(page)
        self._by_key[(kind, date.day_count)] = page
        return page

    def __iter__(self) -> Iterator[Page]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def page(self, page_id: int) -> Page:
        if not 1 <= page_id <= len(self._pages):
            msg = f"unknown page id {page_id}."
            raise ValueError(msg)
        return self._pages[page_id - 1]

    def pages_of_kind(self, kind: PageKind) -> list[Page]:
        return [page for page in self._pages if page.kind is kind]

    def monthly_page(self, date: Any) -> Page | None:
        resolved = Date.coerce(date)
        return self._by_key.get((PageKind.MONTHLY, resolved.beginning_of_month().day_count))

    def weekly_page(self, date: Any) -> Page | None:
        resolved = Date.coerce(date)
        offset = resolved.weekday.number_from(self.week_start) - 1
        start_count = max(resolved.day_count - offset, 1)
        return self._by_key.get((PageKind.WEEKLY, start_count))

    def daily_page(self, date: Any) -> Page | None:
        resolved = Date.coerce(date)
        return self._by_key.get((PageKind.DAILY, resolved.day_count))

    def next_page(self, page: Page) -> Page | None:
        """Next page of the same kind, if any."""
        candidate = page.id + 1
        if candidate <= len(self._pages) and self._pages[candidate - 1].kind is page.kind:
            return self._pages[candidate - 1]
        return None

    def prev_page(self, page: Page) -> Page | None:
        """Previous page of the same kind, if any."""
        candidate = page.id - 1
        if candidate >= 1 and self._pages[candidate - 1].kind is page.kind:
            return self._pages[candidate - 1]
        return None

    def populate(self, hooks: PageHooks) -> None:
        """Run the per-kind hooks over every page in id order."""
        for page in self._pages:
            hook = hooks.for_kind(page.kind)
            if hook is not None:
                hook(page, self)
        logger.debug("populated %d pages", len(self._pages))
