# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Calendar helpers shared by the accounting components.

Conventions:
- Months are 1-based (1 = January .. 12 = December).
- Weekday indices follow ``date.weekday()``: 0 = Monday .. 6 = Sunday.
"""

from calendar import monthrange
from collections.abc import Iterable, Iterator
from datetime import date, timedelta

from timeledger.models.enums import Weekday
from timeledger.schemas.holiday import Holiday, HolidaysByYear

# Indexed by date.weekday(): WEEKDAYS[0] is Monday, WEEKDAYS[6] is Sunday
WEEKDAYS: tuple[Weekday, ...] = (
    Weekday.MON,
    Weekday.TUE,
    Weekday.WED,
    Weekday.THU,
    Weekday.FRI,
    Weekday.SAT,
    Weekday.SUN,
)

SATURDAY = 5
SUNDAY = 6


def weekday_of(day: date) -> Weekday:
    """Return the schedule key for a date (Monday -> ``Weekday.MON``)."""
    return WEEKDAYS[day.weekday()]


def is_weekend(day: date) -> bool:
    """Check whether a date is a Saturday or Sunday."""
    return day.weekday() in (SATURDAY, SUNDAY)


def is_chargeable(day: date, holidays: set[date]) -> bool:
    """A day counts against target hours and absences.

    Weekends and public holidays are never chargeable.
    """
    return not is_weekend(day) and day not in holidays


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date from ``start`` to ``end`` inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a month."""
    _, last_day = monthrange(year, month)
    return date(year, month, 1), date(year, month, last_day)


def previous_month(year: int, month: int) -> tuple[int, int]:
    """Return the (year, month) before the given one."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return the (year, month) after the given one."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def iter_months(
    start: tuple[int, int], end: tuple[int, int]
) -> Iterator[tuple[int, int]]:
    """Yield (year, month) pairs from ``start`` to ``end`` inclusive."""
    current = start
    while current <= end:
        yield current
        current = next_month(*current)


def as_date_set(holidays: Iterable[Holiday | date]) -> set[date]:
    """Normalize a holiday collection to a set of dates."""
    return {h.date if isinstance(h, Holiday) else h for h in holidays}


def holiday_dates(holidays_by_year: HolidaysByYear, year: int) -> set[date] | None:
    """Return the holiday dates of a year, or None if the year was not supplied."""
    if year not in holidays_by_year:
        return None
    return as_date_set(holidays_by_year[year])
