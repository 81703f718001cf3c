"""
Daily team coverage reporting and staffing recommendations.
"""

import logging
import math
from datetime import date
from typing import Iterable, List, Optional, Sequence, Set

from .calendar import working_days
from .errors import EmptyRosterError
from .models import DailyCoverage, DateRange, Employee, VacationRequest

logger = logging.getLogger(__name__)

DEFAULT_CRITICAL_THRESHOLD = 70
DEFAULT_STAGGER_THRESHOLD = 80


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return int(math.floor(value + 0.5))


def mean_coverage(daily: Sequence[DailyCoverage]) -> float:
    if not daily:
        return 100.0
    return sum(day.coverage_percentage for day in daily) / len(daily)


class DailyCoverageReporter:
    """Computes per-day staffing levels and department gaps for a roster."""

    def __init__(self, roster: Sequence[Employee]):
        if not roster:
            raise EmptyRosterError(
                "Coverage is undefined for an organization without employees"
            )
        self.roster = list(roster)
        self._roster_ids = {emp.id for emp in self.roster}

    def day_report(
        self, day: date, approved_requests: Iterable[VacationRequest]
    ) -> DailyCoverage:
        """Staffing figures for one day, counting approved absences only."""
        absent_ids: Set[str] = {
            req.employee_id
            for req in approved_requests
            if req.is_approved and req.covers(day) and req.employee_id in self._roster_ids
        }

        roster_size = len(self.roster)
        on_vacation = len(absent_ids)
        available = roster_size - on_vacation

        absent_departments: List[str] = []
        present_departments: Set[str] = set()
        for emp in self.roster:
            if emp.department is None:
                continue
            if emp.id in absent_ids:
                if emp.department.value not in absent_departments:
                    absent_departments.append(emp.department.value)
            else:
                present_departments.add(emp.department.value)

        gaps = [dept for dept in absent_departments if dept not in present_departments]

        return DailyCoverage(
            date=day,
            coverage_percentage=round_half_up(available / roster_size * 100),
            available_employees=available,
            on_vacation_employees=on_vacation,
            gaps=gaps,
        )

    def report(
        self,
        period: DateRange,
        requests: Iterable[VacationRequest],
        holidays: Optional[Set[date]] = None,
        working_days_only: bool = False,
    ) -> List[DailyCoverage]:
        """
        Build the daily coverage series for a period.

        Args:
            period: Inclusive range to report on
            requests: Vacation requests; anything but approved ones is ignored
            holidays: Holiday dates, used when working_days_only is set
            working_days_only: Skip weekends and holidays

        Returns:
            One DailyCoverage per reported day, in date order
        """
        approved = [req for req in requests if req.is_approved and req.period.overlaps(period)]
        if working_days_only:
            days = working_days(period.start, period.end, holidays or ())
        else:
            days = period.days()

        daily = [self.day_report(day, approved) for day in days]

        logger.debug(
            "Coverage report %s..%s: %d day(s), %d approved request(s)",
            period.start,
            period.end,
            len(daily),
            len(approved),
        )
        return daily


def overall_coverage(daily: Sequence[DailyCoverage]) -> int:
    """Rounded mean of the daily coverage percentages."""
    return round_half_up(mean_coverage(daily))


def generate_recommendations(
    daily: Sequence[DailyCoverage],
    critical_threshold: int = DEFAULT_CRITICAL_THRESHOLD,
    stagger_threshold: int = DEFAULT_STAGGER_THRESHOLD,
) -> List[str]:
    """Turn a daily coverage series into short staffing advice."""
    recommendations = []

    critical_days = sum(1 for day in daily if day.coverage_percentage < critical_threshold)
    if critical_days > 0:
        recommendations.append(
            f"{critical_days} days with critical staffing (<{critical_threshold}%)"
        )

    gap_departments: List[str] = []
    for day in daily:
        for dept in day.gaps:
            if dept not in gap_departments:
                gap_departments.append(dept)
    if gap_departments:
        recommendations.append(f"Department gaps: {', '.join(gap_departments)}")

    if mean_coverage(daily) < stagger_threshold:
        recommendations.append(
            "Consider staggering vacation periods for better coverage"
        )

    if not recommendations:
        recommendations.append("Good staffing coverage during this period")

    return recommendations
