"""
Calendar helpers: date parsing, business-day counting and range overlap.
"""

from datetime import date, datetime, timedelta
from typing import Iterable, Iterator, Set, Union

from .errors import InvalidDateFormatError

DateLike = Union[date, str]

SATURDAY = 5
SUNDAY = 6


def parse_date(value: DateLike) -> date:
    """
    Normalize a date or an ISO 8601 string (YYYY-MM-DD) to a date.

    Raises:
        InvalidDateFormatError: If the value is neither
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), "%Y-%m-%d").date()
        except ValueError:
            pass
    raise InvalidDateFormatError(
        f"Dates must be in ISO 8601 format (YYYY-MM-DD), got: {value!r}. "
        f"Example: 2026-01-15"
    )


def normalize_holidays(holidays: Iterable[DateLike]) -> Set[date]:
    """Turn a mix of date objects and YYYY-MM-DD strings into a set of dates."""
    return {parse_date(h) for h in holidays}


def iter_days(start: date, end: date) -> Iterator[date]:
    """Iterate over every day from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


def is_working_day(day: date, holidays: Set[date]) -> bool:
    return not is_weekend(day) and day not in holidays


def business_days(start: DateLike, end: DateLike, holidays: Iterable[DateLike] = ()) -> int:
    """
    Count working days in an inclusive date range.

    Saturdays, Sundays and the given holidays are skipped.

    Args:
        start: First day of the range
        end: Last day of the range
        holidays: Holiday dates, as dates or YYYY-MM-DD strings

    Returns:
        Number of working days (0 for an empty or fully non-working range)
    """
    return len(working_days(parse_date(start), parse_date(end), holidays))


def working_days(start: date, end: date, holidays: Iterable[DateLike] = ()) -> list[date]:
    """List of the working days in an inclusive date range."""
    holiday_set = normalize_holidays(holidays)
    return [day for day in iter_days(start, end) if is_working_day(day, holiday_set)]


def ranges_overlap(start1: date, end1: date, start2: date, end2: date) -> bool:
    """Check if two inclusive date ranges share at least one day."""
    return start1 <= end2 and start2 <= end1


def overlap_days(start1: date, end1: date, start2: date, end2: date) -> int:
    """Number of days two inclusive date ranges have in common."""
    first = max(start1, start2)
    last = min(end1, end2)
    return max(0, (last - first).days + 1)
