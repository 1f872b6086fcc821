"""Tests for calendar arithmetic and month grids."""

from __future__ import annotations

import datetime
import unittest

from plannerpdf.dates import (
    MAX_DAY_COUNT,
    Date,
    MonthGrid,
    Weekday,
    WeekStart,
    week_order,
)
from plannerpdf.errors import DateOutOfRange, InvalidArgumentShape


class WeekdayTests(unittest.TestCase):
    def test_numbering(self) -> None:
        self.assertEqual(Weekday.SUNDAY.number_from_sunday(), 1)
        self.assertEqual(Weekday.SATURDAY.number_from_sunday(), 7)
        self.assertEqual(Weekday.MONDAY.number_from_monday(), 1)
        self.assertEqual(Weekday.SUNDAY.number_from_monday(), 7)
        self.assertEqual(Weekday.SUNDAY.num_days_from_sunday(), 0)
        self.assertEqual(Weekday.SUNDAY.num_days_from_monday(), 6)

    def test_navigation_wraps(self) -> None:
        self.assertIs(Weekday.SUNDAY.next_weekday(), Weekday.MONDAY)
        self.assertIs(Weekday.MONDAY.prev_weekday(), Weekday.SUNDAY)

    def test_days_since(self) -> None:
        self.assertEqual(Weekday.SUNDAY.days_since(Weekday.MONDAY), 6)
        self.assertEqual(Weekday.MONDAY.days_since(Weekday.SUNDAY), 1)
        self.assertEqual(Weekday.FRIDAY.days_since(Weekday.FRIDAY), 0)

    def test_parse(self) -> None:
        self.assertIs(Weekday.parse("Mon"), Weekday.MONDAY)
        self.assertIs(Weekday.parse(" sunday "), Weekday.SUNDAY)
        self.assertEqual(str(Weekday.TUESDAY), "tuesday")
        with self.assertRaises(ValueError):
            Weekday.parse("funday")

    def test_week_order(self) -> None:
        self.assertEqual(week_order("sunday")[0], Weekday.SUNDAY)
        self.assertEqual(week_order(WeekStart.MONDAY)[-1], Weekday.SUNDAY)


class DateTests(unittest.TestCase):
    def test_projections(self) -> None:
        day = Date.from_ymd(2024, 2, 29)
        self.assertEqual((day.year, day.month, day.day), (2024, 2, 29))
        self.assertEqual(day.ordinal, 60)
        self.assertIs(day.weekday, Weekday.THURSDAY)
        self.assertEqual(day.days_in_month, 29)
        self.assertTrue(day.is_leap_year)
        self.assertEqual(str(day), "2024-02-29")

    def test_invalid_construction_raises(self) -> None:
        with self.assertRaises(DateOutOfRange):
            Date.from_ymd(2023, 2, 29)
        with self.assertRaises(DateOutOfRange):
            Date(0)
        with self.assertRaises(InvalidArgumentShape):
            Date(True)

    def test_arithmetic_leaving_range_raises(self) -> None:
        with self.assertRaises(DateOutOfRange):
            Date(MAX_DAY_COUNT).tomorrow()
        with self.assertRaises(DateOutOfRange):
            Date.from_ymd(1, 1, 1).yesterday()
        with self.assertRaises(DateOutOfRange):
            Date.from_ymd(9999, 12, 1).next_month()

    def test_add_months_clamps_day(self) -> None:
        self.assertEqual(Date.from_ymd(2024, 1, 31).next_month(), Date.from_ymd(2024, 2, 29))
        self.assertEqual(Date.from_ymd(2023, 3, 31).last_month(), Date.from_ymd(2023, 2, 28))
        self.assertEqual(Date.from_ymd(2023, 11, 15).add_months(3), Date.from_ymd(2024, 2, 15))

    def test_add_days_round_trip(self) -> None:
        start = Date.from_ymd(2023, 6, 15)
        for days in (-400, -1, 0, 1, 31, 1000):
            with self.subTest(days=days):
                self.assertEqual(start.add_days(days).add_days(-days), start)

    def test_day_count_is_consistent_with_projections(self) -> None:
        for value in (
            datetime.date(1, 1, 1),
            datetime.date(1900, 2, 28),
            datetime.date(2000, 2, 29),
            datetime.date(9999, 12, 31),
        ):
            with self.subTest(value=value):
                date = Date.from_date(value)
                self.assertEqual(Date.from_ymd(date.year, date.month, date.day), date)
                self.assertEqual(date.to_date(), value)

    def test_period_boundaries(self) -> None:
        day = Date.from_ymd(2024, 2, 29)
        self.assertEqual(day.beginning_of_year(), Date.from_ymd(2024, 1, 1))
        self.assertEqual(day.end_of_year(), Date.from_ymd(2024, 12, 31))
        self.assertEqual(day.beginning_of_month(), Date.from_ymd(2024, 2, 1))
        self.assertEqual(day.end_of_month(), Date.from_ymd(2024, 2, 29))
        self.assertEqual(day.beginning_of_week_sunday(), Date.from_ymd(2024, 2, 25))
        self.assertEqual(day.end_of_week_sunday(), Date.from_ymd(2024, 3, 2))
        self.assertEqual(day.beginning_of_week_monday(), Date.from_ymd(2024, 2, 26))
        self.assertEqual(day.end_of_week_monday(), Date.from_ymd(2024, 3, 3))

    def test_weeks_in_month(self) -> None:
        self.assertEqual(Date.from_ymd(2024, 2, 10).weeks_in_month_sunday(), 5)
        self.assertEqual(Date.from_ymd(2015, 2, 10).weeks_in_month_sunday(), 4)
        self.assertEqual(Date.from_ymd(2024, 6, 1).weeks_in_month_sunday(), 6)
        self.assertEqual(Date.from_ymd(2024, 6, 1).weeks_in_month_monday(), 5)

    def test_calendar_week(self) -> None:
        # 2023-01-01 is a Sunday.
        self.assertEqual(Date.from_ymd(2023, 1, 1).calendar_week_sunday(), 1)
        self.assertEqual(Date.from_ymd(2023, 1, 8).calendar_week_sunday(), 2)
        self.assertEqual(Date.from_ymd(2023, 1, 1).calendar_week_monday(), 1)
        self.assertEqual(Date.from_ymd(2023, 1, 2).calendar_week_monday(), 2)
        self.assertEqual(Date.from_ymd(2023, 12, 31).calendar_week_monday(), 53)

    def test_calendar_week_can_reach_54(self) -> None:
        # 2000 is a leap year starting on a Saturday.
        self.assertEqual(Date.from_ymd(2000, 12, 31).calendar_week_sunday(), 54)

    def test_iso_week(self) -> None:
        self.assertEqual(Date.from_ymd(2021, 1, 1).week, 53)
        self.assertEqual(Date.from_ymd(2021, 1, 4).week, 1)

    def test_coerce(self) -> None:
        expected = Date.from_ymd(2024, 2, 29)
        self.assertEqual(Date.coerce("2024-02-29"), expected)
        self.assertEqual(Date.coerce(datetime.date(2024, 2, 29)), expected)
        self.assertEqual(Date.coerce(datetime.datetime(2024, 2, 29, 12, 30)), expected)
        self.assertEqual(Date.coerce({"year": 2024, "month": 2, "day": 29}), expected)
        with self.assertRaises(DateOutOfRange):
            Date.coerce("2024-13-01")
        with self.assertRaises(InvalidArgumentShape):
            Date.coerce({"year": 2024, "month": 2})

    def test_ordering(self) -> None:
        self.assertLess(Date.from_ymd(2023, 12, 31), Date.from_ymd(2024, 1, 1))


class MonthGridTests(unittest.TestCase):
    def test_february_2024_sunday_first(self) -> None:
        grid = MonthGrid(2024, 2, WeekStart.SUNDAY)
        self.assertEqual(grid.start_day_of_week, 5)
        self.assertEqual(grid.weeks, 5)
        self.assertFalse(grid.is_valid(1, 4))
        self.assertTrue(grid.is_valid(1, 5))
        self.assertEqual(grid.day_number(1, 5), 1)
        self.assertTrue(grid.is_valid(5, 5))
        self.assertEqual(grid.day_number(5, 5), 29)
        self.assertFalse(grid.is_valid(5, 6))
        self.assertFalse(grid.is_valid(6, 1))

    def test_february_2024_monday_first(self) -> None:
        grid = MonthGrid(2024, 2, WeekStart.MONDAY)
        self.assertEqual(grid.start_day_of_week, 4)
        self.assertEqual(grid.date_at(1, 4), Date.from_ymd(2024, 2, 1))
        self.assertIsNone(grid.date_at(1, 3))

    def test_every_day_appears_exactly_once(self) -> None:
        for year in (1, 1900, 2000, 2023, 2024, 9999):
            for month in range(1, 13):
                for week_start in WeekStart:
                    with self.subTest(year=year, month=month, week_start=week_start):
                        grid = MonthGrid(year, month, week_start)
                        cells = list(grid.cells())
                        self.assertEqual(len(cells), 42)
                        days = [cell.day for cell in cells if cell.is_valid]
                        self.assertEqual(days, list(range(1, grid.days_in_month + 1)))
                        for cell in cells:
                            if cell.is_valid:
                                self.assertEqual(
                                    cell.date,
                                    Date.from_ymd(year, month, cell.day),
                                )
                                self.assertEqual(
                                    cell.date.weekday, grid.weekdays[cell.day_of_week - 1]
                                )

    def test_invalid_cell_arguments(self) -> None:
        grid = MonthGrid(2024, 2)
        with self.assertRaises(ValueError):
            grid.is_valid(0, 1)
        with self.assertRaises(ValueError):
            grid.is_valid(1, 8)
        with self.assertRaises(DateOutOfRange):
            MonthGrid(2024, 13)

    def test_date_month_grid_shortcut(self) -> None:
        grid = Date.from_ymd(2024, 2, 10).month_grid("monday")
        self.assertEqual((grid.year, grid.month, grid.week_start), (2024, 2, WeekStart.MONDAY))


if __name__ == "__main__":
    unittest.main()
