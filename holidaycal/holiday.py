"""Holiday definitions and the rules used to calculate their occurrences.

Standard holidays for countries are found in sibling modules named by ISO code.
All calculations assume a Gregorian calendar. Days are plain ``datetime.date``
values; a holiday that does not occur in a year is reported as ``None``.
"""

from __future__ import annotations

import calendar
import dataclasses
from dataclasses import dataclass
from datetime import date, timedelta
from enum import IntEnum
from typing import Callable, Optional, Tuple

HolidayFn = Callable[["Holiday", int], Optional[date]]


class ObservanceType(IntEnum):
    """The type of holiday or special day being observed."""

    UNKNOWN = 0  # value not set or not applicable
    PUBLIC = 1  # public / national / regional holiday
    BANK = 2  # bank holiday
    RELIGIOUS = 3  # religious holiday
    OTHER = 4  # all other holidays (school, work, etc.)


@dataclass(frozen=True)
class AltDay:
    """An alternative day to observe a holiday.

    ``day`` is a weekday number as in the ``calendar`` module (Monday is 0);
    ``offset`` is how many days the observance moves when the holiday falls
    on that weekday.
    """

    day: int
    offset: int


@dataclass(frozen=True)
class Holiday:
    """The type and occurrence rules of a holiday."""

    name: str = ""
    description: str = ""
    type: ObservanceType = ObservanceType.UNKNOWN
    start_year: int = 0
    end_year: int = 0
    except_years: Optional[Tuple[int, ...]] = None

    month: int = 0
    day: int = 0
    weekday: int = 0
    offset: int = 0
    calc_offset: int = 0
    julian: bool = False
    observed: Optional[Tuple[AltDay, ...]] = None
    func: Optional[HolidayFn] = None

    def clone(self, overrides: Optional[Holiday] = None) -> Holiday:
        """Return a copy, taking the set fields of ``overrides`` in place of ours.

        The fields taken from ``overrides`` are name, description, type,
        start_year, end_year, except_years and observed.
        """
        if overrides is None:
            return dataclasses.replace(self)
        changes = {}
        if overrides.name:
            changes["name"] = overrides.name
        if overrides.description:
            changes["description"] = overrides.description
        if overrides.type != ObservanceType.UNKNOWN:
            changes["type"] = overrides.type
        if overrides.start_year > 0:
            changes["start_year"] = overrides.start_year
        if overrides.end_year > 0:
            changes["end_year"] = overrides.end_year
        if overrides.except_years is not None:
            changes["except_years"] = overrides.except_years
        if overrides.observed is not None:
            changes["observed"] = overrides.observed
        return dataclasses.replace(self, **changes)

    def calc(self, year: int) -> Tuple[Optional[date], Optional[date]]:
        """Return the actual and observed days of the holiday in ``year``.

        Both are ``None`` when the holiday is not observed that year.
        """
        if (
            (self.start_year > 0 and year < self.start_year)
            or (self.end_year > 0 and year > self.end_year)
            or self.func is None
        ):
            return None, None
        if self.except_years and year in self.except_years:
            return None, None

        actual = self.func(self, year)
        if actual is None:
            return None, None
        if self.calc_offset:
            actual += timedelta(days=self.calc_offset)

        if self.observed is None:
            return actual, actual

        weekday = actual.weekday()
        for alt in self.observed:
            if alt.day == weekday:
                return actual, actual + timedelta(days=alt.offset)
        return actual, actual


def _normalized_date(year: int, month: int, day: int) -> date:
    """Build a date, letting an out-of-range day roll into adjacent months."""
    return date(year, month, 1) + timedelta(days=day - 1)


def _weekday_n(year: int, month: int, weekday: int, n: int) -> Optional[date]:
    """The nth ``weekday`` of a month; negative ``n`` counts from the end."""
    if n > 0:
        first = date(year, month, 1)
        result = first + timedelta(days=(weekday - first.weekday()) % 7 + 7 * (n - 1))
    elif n < 0:
        last = date(year, month, calendar.monthrange(year, month)[1])
        result = last - timedelta(days=(last.weekday() - weekday) % 7 + 7 * (-n - 1))
    else:
        return None
    return result if result.month == month else None


def _weekday_n_from(start: date, weekday: int, n: int) -> Optional[date]:
    """The nth ``weekday`` on or after ``start``; negative ``n`` looks back."""
    if n > 0:
        return start + timedelta(days=(weekday - start.weekday()) % 7 + 7 * (n - 1))
    if n < 0:
        return start - timedelta(days=(start.weekday() - weekday) % 7 + 7 * (-n - 1))
    return None


def calc_day_of_month(h: Holiday, year: int) -> date:
    """A holiday on a fixed day of a month, such as the 5th of November."""
    return _normalized_date(year, h.month, h.day)


def calc_weekday_offset(h: Holiday, year: int) -> Optional[date]:
    """A holiday on the nth weekday of a month, such as the third Wednesday of July."""
    return _weekday_n(year, h.month, h.weekday, h.offset)


def calc_weekday_from(h: Holiday, year: int) -> Optional[date]:
    """A holiday on a given weekday counted from a starting date."""
    return _weekday_n_from(_normalized_date(year, h.month, h.day), h.weekday, h.offset)


def calc_easter_offset(h: Holiday, year: int) -> date:
    """A holiday fixed relative to Easter (Julian Easter if ``h.julian``)."""
    if h.julian:
        # Meeus algorithm, shifted to the Gregorian calendar
        a = year % 4
        b = year % 7
        c = year % 19
        d = (19 * c + 15) % 30
        e = (2 * a + 4 * b - d + 34) % 7
        month = (d + e + 114) // 31
        day = (d + e + 114) % 31 + 1 + 13
    else:
        # Meeus/Jones/Butcher algorithm
        a = year % 19
        b = year // 100
        c = year % 100
        d = b // 4
        e = b % 4
        f = (b + 8) // 25
        g = (b - f + 1) // 3
        hh = (19 * a + b - d - g + 15) % 30
        i = c // 4
        k = c % 4
        l = (32 + 2 * e + 2 * i - hh - k) % 7
        m = (a + 11 * hh + 22 * l) // 451
        month = (hh + l - 7 * m + 114) // 31
        day = (hh + l - 7 * m + 114) % 31 + 1

    return _normalized_date(year, month, day + h.offset)