"""Pure calendar calculations — no UI dependencies."""

from __future__ import annotations

import calendar
from datetime import date
from typing import NamedTuple

# Indexed like date.weekday(): Monday is 0
DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


class MonthLayout(NamedTuple):
    """Everything a renderer needs to lay out one month."""

    year: int
    month: int
    label: str
    leading_blanks: int
    day_count: int
    weekday_labels: list[str]


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the month (proleptic Gregorian)."""
    return calendar.monthrange(year, month)[1]


def first_weekday_offset(year: int, month: int,
                         firstweekday: int = calendar.SUNDAY) -> int:
    """Return 0–6: position of the 1st of the month in its week row.

    Equals the number of blank cells before day 1.
    """
    return (date(year, month, 1).weekday() - firstweekday) % 7


def weekday_labels(firstweekday: int = calendar.SUNDAY) -> list[str]:
    """Short weekday names starting at *firstweekday*."""
    return [DAY_ABBR[(firstweekday + i) % 7] for i in range(7)]


def month_label(year: int, month: int) -> str:
    """Return e.g. ``"October 2026"``."""
    return f"{calendar.month_name[month]} {year}"


def month_layout(year: int, month: int,
                 firstweekday: int = calendar.SUNDAY) -> MonthLayout:
    """Return the label, blank count, day count and weekday row of a month."""
    return MonthLayout(
        year=year,
        month=month,
        label=month_label(year, month),
        leading_blanks=first_weekday_offset(year, month, firstweekday),
        day_count=days_in_month(year, month),
        weekday_labels=weekday_labels(firstweekday),
    )


def month_grid(year: int, month: int,
               firstweekday: int = calendar.SUNDAY) -> list[list[int | None]]:
    """Return a 6×7 grid for the given month.

    Each cell is a day number (1–31) or None for empty slots.
    Always 6 rows so the calendar height stays constant.
    """
    cal = calendar.Calendar(firstweekday=firstweekday)
    days = cal.itermonthdays(year, month)

    grid: list[list[int | None]] = []
    row: list[int | None] = []
    for d in days:
        row.append(d if d != 0 else None)
        if len(row) == 7:
            grid.append(row)
            row = []
    # Pad to exactly 6 rows
    while len(grid) < 6:
        grid.append([None] * 7)
    return grid


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1
