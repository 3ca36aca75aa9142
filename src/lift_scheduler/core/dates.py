"""
Training calendar generation.

Maps plan parameters (start date, duration, weekday set) onto an ordered
list of civil calendar dates.  No time-of-day or timezone is involved.
"""

import calendar
from datetime import date, timedelta
from typing import Iterable


def generate_training_dates(
    start: date,
    weeks: int,
    training_days: Iterable[int],
) -> list[date]:
    """
    Enumerate the training dates of a plan.

    Every day in [start, start + weeks*7) whose ISO weekday is in
    ``training_days`` is kept, in chronological order.

    Args:
        start: First calendar day of the plan (inclusive)
        weeks: Plan duration in weeks
        training_days: ISO weekday numbers (Monday=1 .. Sunday=7)

    Returns:
        Strictly increasing list of dates; empty when weeks <= 0 or
        no weekday is selected
    """
    days = frozenset(training_days)
    if weeks <= 0 or not days:
        return []

    end_exclusive = start + timedelta(days=weeks * 7)
    result: list[date] = []
    d = start
    while d < end_exclusive:
        if d.isoweekday() in days:
            result.append(d)
        d += timedelta(days=1)
    return result


def plan_end_date(start: date, weeks: int) -> date:
    """Return the last calendar day covered by a plan (inclusive)."""
    return start + timedelta(days=weeks * 7 - 1)


def build_month_grid(
    year: int,
    month: int,
    first_weekday: int = 1,
) -> list[list[date | None]]:
    """
    Lay out a month as rows of 7 cells for calendar display.

    Cells outside the month are None.  Grids that would have five rows
    or fewer are padded to six so the layout height stays stable.

    Args:
        year: Calendar year
        month: Month number (1-12)
        first_weekday: ISO weekday shown in the first column (Monday=1)

    Returns:
        List of weeks, each a list of 7 ``date | None`` cells
    """
    first_of_month = date(year, month, 1)
    days_in_month = calendar.monthrange(year, month)[1]
    leading = (first_of_month.isoweekday() - first_weekday + 7) % 7

    cells: list[date | None] = [None] * leading
    cells.extend(date(year, month, day) for day in range(1, days_in_month + 1))

    while len(cells) % 7 != 0:
        cells.append(None)
    if len(cells) <= 35:
        cells.extend([None] * (42 - len(cells)))

    return [cells[i:i + 7] for i in range(0, len(cells), 7)]
