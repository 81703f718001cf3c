"""
Public holiday calendar.

Generates the national German public holidays, including the movable
feasts derived from Easter Sunday, and filters holiday lists by date
range and state.
"""

from datetime import date, timedelta
from typing import Iterable, List, Optional, Set

from .models import DateRange, Holiday


def easter_sunday(year: int) -> date:
    """Easter Sunday of the Gregorian calendar (Gauss / anonymous algorithm)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


def german_holidays(year: int) -> List[Holiday]:
    """National German public holidays for one year, ordered by date."""
    easter = easter_sunday(year)

    fixed = [
        (date(year, 1, 1), "Neujahr"),
        (date(year, 5, 1), "Tag der Arbeit"),
        (date(year, 10, 3), "Tag der Deutschen Einheit"),
        (date(year, 12, 24), "Heiligabend"),
        (date(year, 12, 25), "1. Weihnachtstag"),
        (date(year, 12, 26), "2. Weihnachtstag"),
        (date(year, 12, 31), "Silvester"),
    ]
    movable = [
        (easter - timedelta(days=2), "Karfreitag"),
        (easter + timedelta(days=1), "Ostermontag"),
        (easter + timedelta(days=39), "Christi Himmelfahrt"),
        (easter + timedelta(days=50), "Pfingstmontag"),
    ]

    holidays = [Holiday(date=d, name=name, national=True) for d, name in fixed + movable]
    return sorted(holidays, key=lambda h: h.date)


def holidays_for_years(start_year: int, end_year: int) -> List[Holiday]:
    """German holidays for every year from start_year to end_year (inclusive)."""
    holidays: List[Holiday] = []
    for year in range(start_year, end_year + 1):
        holidays.extend(german_holidays(year))
    return holidays


class HolidayCalendar:
    """A queryable set of holidays, optionally restricted to one state."""

    def __init__(self, holidays: Iterable[Holiday], state: Optional[str] = None):
        self.state = state
        self.holidays = sorted(
            (h for h in holidays if h.applies_to(state)), key=lambda h: h.date
        )

    def between(self, period: DateRange) -> List[Holiday]:
        return [h for h in self.holidays if period.contains(h.date)]

    def dates_between(self, period: DateRange) -> Set[date]:
        """Holiday dates falling inside the period."""
        return {h.date for h in self.between(period)}

    def __len__(self) -> int:
        return len(self.holidays)
