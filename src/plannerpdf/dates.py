"""Calendar arithmetic and month-grid derivation.

Every `Date` is a single proleptic-Gregorian day count (1 = 0001-01-01);
year, month, day, ordinal, ISO week and weekday are projections of it.
"""

from __future__ import annotations

import calendar
import datetime
import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

from .errors import DateOutOfRange, InvalidArgumentShape

MIN_DAY_COUNT = datetime.date.min.toordinal()
MAX_DAY_COUNT = datetime.date.max.toordinal()
DAYS_PER_WEEK = 7
MAX_CALENDAR_WEEKS = 6


class WeekStart(str, Enum):
    SUNDAY = "sunday"
    MONDAY = "monday"


class Weekday(IntEnum):
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def short_name(self) -> str:
        return self.name[:3].lower()

    @property
    def long_name(self) -> str:
        return self.name.lower()

    def next_weekday(self) -> Weekday:
        return Weekday((self.value + 1) % DAYS_PER_WEEK)

    def prev_weekday(self) -> Weekday:
        return Weekday((self.value - 1) % DAYS_PER_WEEK)

    def number_from_monday(self) -> int:
        return self.value + 1

    def number_from_sunday(self) -> int:
        return (self.value + 1) % DAYS_PER_WEEK + 1

    def num_days_from_monday(self) -> int:
        return self.value

    def num_days_from_sunday(self) -> int:
        return (self.value + 1) % DAYS_PER_WEEK

    def number_from(self, week_start: WeekStart | str) -> int:
        """1-based position of this weekday in a week beginning on `week_start`."""
        if WeekStart(week_start) is WeekStart.SUNDAY:
            return self.number_from_sunday()
        return self.number_from_monday()

    def days_since(self, other: Weekday) -> int:
        """Days from `other` forward to this weekday (0-6)."""
        return (self.value - Weekday(other).value) % DAYS_PER_WEEK

    def __str__(self) -> str:
        return self.long_name

    @classmethod
    def parse(cls, value: Any) -> Weekday:
        """Parse a `Weekday`, a short or long English name ("mon", "Monday")."""
        if isinstance(value, Weekday):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            for member in cls:
                if text in (member.short_name, member.long_name):
                    return member
        msg = f"invalid weekday {value!r}."
        raise ValueError(msg)


def week_order(week_start: WeekStart | str) -> tuple[Weekday, ...]:
    """Weekdays in column order for a calendar beginning on `week_start`."""
    first = Weekday.SUNDAY if WeekStart(week_start) is WeekStart.SUNDAY else Weekday.MONDAY
    return tuple(Weekday((first.value + offset) % DAYS_PER_WEEK) for offset in range(7))


def _check_year_month(year: int, month: int) -> None:
    if not 1 <= month <= 12:
        msg = f"month must be between 1 and 12, got {month}."
        raise DateOutOfRange(msg)
    if not datetime.MINYEAR <= year <= datetime.MAXYEAR:
        msg = f"year must be between {datetime.MINYEAR} and {datetime.MAXYEAR}, got {year}."
        raise DateOutOfRange(msg)


@dataclass(frozen=True, order=True)
class Date:
    """Calendar date backed by a proleptic-Gregorian day count."""

    day_count: int

    def __post_init__(self) -> None:
        if isinstance(self.day_count, bool) or not isinstance(self.day_count, int):
            msg = f"day count must be an integer, got {self.day_count!r}."
            raise InvalidArgumentShape(msg)
        if not MIN_DAY_COUNT <= self.day_count <= MAX_DAY_COUNT:
            msg = f"day count {self.day_count} is outside {datetime.date.min}..{datetime.date.max}."
            raise DateOutOfRange(msg)

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> Date:
        try:
            return cls(datetime.date(year, month, day).toordinal())
        except (TypeError, ValueError) as exc:
            msg = f"{year}-{month}-{day} is not a valid date."
            raise DateOutOfRange(msg) from exc

    @classmethod
    def from_date(cls, value: datetime.date) -> Date:
        return cls(value.toordinal())

    @classmethod
    def coerce(cls, value: Any) -> Date:
        """Normalize a `Date`, `datetime.date`, ISO string or `{year, month, day}` mapping."""
        if isinstance(value, Date):
            return value
        if isinstance(value, datetime.datetime):
            return cls.from_date(value.date())
        if isinstance(value, datetime.date):
            return cls.from_date(value)
        if isinstance(value, str):
            try:
                return cls.from_date(datetime.date.fromisoformat(value.strip()))
            except ValueError as exc:
                msg = f"invalid ISO date '{value}'."
                raise DateOutOfRange(msg) from exc
        if isinstance(value, Mapping):
            if set(value) != {"year", "month", "day"}:
                msg = f"date mapping must have exactly year, month and day, got {sorted(value)}."
                raise InvalidArgumentShape(msg)
            return cls.from_ymd(value["year"], value["month"], value["day"])
        msg = f"cannot interpret {value!r} as a date."
        raise InvalidArgumentShape(msg)

    def to_date(self) -> datetime.date:
        return datetime.date.fromordinal(self.day_count)

    @property
    def year(self) -> int:
        return self.to_date().year

    @property
    def month(self) -> int:
        return self.to_date().month

    @property
    def day(self) -> int:
        return self.to_date().day

    @property
    def ordinal(self) -> int:
        """1-based day of the year."""
        return self.to_date().timetuple().tm_yday

    @property
    def week(self) -> int:
        """ISO 8601 week number."""
        return self.to_date().isocalendar()[1]

    @property
    def weekday(self) -> Weekday:
        return Weekday(self.to_date().weekday())

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def is_leap_year(self) -> bool:
        return calendar.isleap(self.year)

    def add_days(self, days: int) -> Date:
        return Date(self.day_count + days)

    def add_weeks(self, weeks: int) -> Date:
        return self.add_days(weeks * DAYS_PER_WEEK)

    def add_months(self, months: int) -> Date:
        """Shift by whole months, clamping the day to the target month's length."""
        year, month_index = divmod(self.year * 12 + (self.month - 1) + months, 12)
        month = month_index + 1
        _check_year_month(year, month)
        day = min(self.day, calendar.monthrange(year, month)[1])
        return Date.from_ymd(year, month, day)

    def tomorrow(self) -> Date:
        return self.add_days(1)

    def yesterday(self) -> Date:
        return self.add_days(-1)

    def next_week(self) -> Date:
        return self.add_weeks(1)

    def last_week(self) -> Date:
        return self.add_weeks(-1)

    def next_month(self) -> Date:
        return self.add_months(1)

    def last_month(self) -> Date:
        return self.add_months(-1)

    def beginning_of_year(self) -> Date:
        return Date.from_ymd(self.year, 1, 1)

    def end_of_year(self) -> Date:
        return Date.from_ymd(self.year, 12, 31)

    def beginning_of_month(self) -> Date:
        return Date.from_ymd(self.year, self.month, 1)

    def end_of_month(self) -> Date:
        return Date.from_ymd(self.year, self.month, self.days_in_month)

    def beginning_of_week(self, week_start: WeekStart | str = WeekStart.SUNDAY) -> Date:
        return self.add_days(-(self.weekday.number_from(week_start) - 1))

    def end_of_week(self, week_start: WeekStart | str = WeekStart.SUNDAY) -> Date:
        return self.beginning_of_week(week_start).add_days(DAYS_PER_WEEK - 1)

    def beginning_of_week_sunday(self) -> Date:
        return self.beginning_of_week(WeekStart.SUNDAY)

    def end_of_week_sunday(self) -> Date:
        return self.end_of_week(WeekStart.SUNDAY)

    def beginning_of_week_monday(self) -> Date:
        return self.beginning_of_week(WeekStart.MONDAY)

    def end_of_week_monday(self) -> Date:
        return self.end_of_week(WeekStart.MONDAY)

    def weeks_in_month(self, week_start: WeekStart | str = WeekStart.SUNDAY) -> int:
        """Number of calendar rows this date's month spans."""
        return MonthGrid(self.year, self.month, WeekStart(week_start)).weeks

    def weeks_in_month_sunday(self) -> int:
        return self.weeks_in_month(WeekStart.SUNDAY)

    def weeks_in_month_monday(self) -> int:
        return self.weeks_in_month(WeekStart.MONDAY)

    def calendar_week(self, week_start: WeekStart | str = WeekStart.SUNDAY) -> int:
        """Week of the year where week 1 contains January 1st.

        Weeks begin on `week_start`; a year can touch up to 54 such weeks.
        """
        offset = self.beginning_of_year().weekday.number_from(week_start) - 1
        return (self.ordinal - 1 + offset) // DAYS_PER_WEEK + 1

    def calendar_week_sunday(self) -> int:
        return self.calendar_week(WeekStart.SUNDAY)

    def calendar_week_monday(self) -> int:
        return self.calendar_week(WeekStart.MONDAY)

    def month_grid(self, week_start: WeekStart | str = WeekStart.SUNDAY) -> MonthGrid:
        return MonthGrid(self.year, self.month, WeekStart(week_start))

    def format(self, fmt: str) -> str:
        return self.to_date().strftime(fmt)

    def isoformat(self) -> str:
        return self.to_date().isoformat()

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class MonthGridCell:
    """One `(week, day_of_week)` slot of a month grid."""

    week: int
    day_of_week: int
    day: int | None
    date: Date | None

    @property
    def is_valid(self) -> bool:
        return self.date is not None


@dataclass(frozen=True)
class MonthGrid:
    """Week-of-month x day-of-week layout of one month.

    Weeks and days of week are 1-based; day of week 1 is `week_start`.
    """

    year: int
    month: int
    week_start: WeekStart = WeekStart.SUNDAY

    def __post_init__(self) -> None:
        _check_year_month(self.year, self.month)
        object.__setattr__(self, "week_start", WeekStart(self.week_start))

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def first_date(self) -> Date:
        return Date.from_ymd(self.year, self.month, 1)

    @property
    def last_date(self) -> Date:
        return Date.from_ymd(self.year, self.month, self.days_in_month)

    @property
    def start_day_of_week(self) -> int:
        return self.first_date.weekday.number_from(self.week_start)

    @property
    def end_day_of_week(self) -> int:
        return self.last_date.weekday.number_from(self.week_start)

    @property
    def weeks(self) -> int:
        return math.ceil((self.start_day_of_week - 1 + self.days_in_month) / DAYS_PER_WEEK)

    @property
    def weekdays(self) -> tuple[Weekday, ...]:
        return week_order(self.week_start)

    def _check_cell(self, week: int, day_of_week: int) -> None:
        if week < 1:
            msg = f"week must be >= 1, got {week}."
            raise ValueError(msg)
        if not 1 <= day_of_week <= DAYS_PER_WEEK:
            msg = f"day_of_week must be between 1 and 7, got {day_of_week}."
            raise ValueError(msg)

    def is_valid(self, week: int, day_of_week: int) -> bool:
        """Return True when the cell holds a day of this month."""
        self._check_cell(week, day_of_week)
        weeks = self.weeks
        return (
            (week == 1 and day_of_week >= self.start_day_of_week)
            or (week == weeks and day_of_week <= self.end_day_of_week)
            or 1 < week < weeks
        )

    def day_number(self, week: int, day_of_week: int) -> int:
        """Day of month for the cell; meaningful only for valid cells."""
        self._check_cell(week, day_of_week)
        return (week - 1) * DAYS_PER_WEEK + day_of_week - (self.start_day_of_week - 1)

    def date_at(self, week: int, day_of_week: int) -> Date | None:
        if not self.is_valid(week, day_of_week):
            return None
        return self.first_date.add_days(self.day_number(week, day_of_week) - 1)

    def cells(self, weeks: int = MAX_CALENDAR_WEEKS) -> Iterator[MonthGridCell]:
        """Yield every cell of a `weeks` x 7 grid in week-major order."""
        for week in range(1, weeks + 1):
            for day_of_week in range(1, DAYS_PER_WEEK + 1):
                date = self.date_at(week, day_of_week)
                yield MonthGridCell(
                    week=week,
                    day_of_week=day_of_week,
                    day=None if date is None else date.day,
                    date=date,
                )
