"""
Conflict detection and severity classification for vacation requests.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .errors import EmptyRosterError
from .models import DateRange, Employee, Severity, VacationRequest

logger = logging.getLogger(__name__)

CRITICAL_GAP_THRESHOLD = 75
HIGH_GAP_THRESHOLD = 50
MEDIUM_GAP_THRESHOLD = 25


def classify_severity(
    conflict_count: int, coverage_gap: float, critical_roles_count: int
) -> Severity:
    """
    Map conflict metrics to a severity tier.

    Any critical role among the conflicting employees makes the conflict
    critical, whatever the other numbers are.
    """
    if critical_roles_count > 0 or coverage_gap > CRITICAL_GAP_THRESHOLD:
        return Severity.CRITICAL
    if conflict_count > 2 or coverage_gap > HIGH_GAP_THRESHOLD:
        return Severity.HIGH
    if conflict_count > 1 or coverage_gap > MEDIUM_GAP_THRESHOLD:
        return Severity.MEDIUM
    return Severity.LOW


def coverage_gap_percentage(conflicting_count: int, roster_size: int) -> float:
    """Share of the roster tied up by conflicting requests, capped at 100."""
    if roster_size <= 0:
        raise EmptyRosterError("Cannot compute a coverage gap for an empty roster")
    return min(100.0, conflicting_count / roster_size * 100)


@dataclass
class ConflictReport:
    """Approved requests clashing with a target request, plus derived counts."""

    target: VacationRequest
    conflicting_requests: List[VacationRequest] = field(default_factory=list)
    affected_employees: List[str] = field(default_factory=list)
    total_overlap_days: int = 0
    departments_affected: List[str] = field(default_factory=list)
    critical_roles_affected: List[str] = field(default_factory=list)

    @property
    def conflict_count(self) -> int:
        return len(self.conflicting_requests)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicting_requests)


class ConflictDetector:
    """Finds overlapping vacation requests of different employees."""

    def __init__(self, roster: Iterable[Employee]):
        self.roster: Dict[str, Employee] = {emp.id: emp for emp in roster}

    @staticmethod
    def is_conflict(first: VacationRequest, second: VacationRequest) -> bool:
        """Two requests conflict if they overlap and belong to different employees."""
        return (
            first.id != second.id
            and first.employee_id != second.employee_id
            and first.organization_id == second.organization_id
            and first.period.overlaps(second.period)
        )

    def find_conflicts(
        self, target: VacationRequest, requests: Iterable[VacationRequest]
    ) -> ConflictReport:
        """
        Collect the approved requests that conflict with the target.

        Args:
            target: The request under review
            requests: Candidate requests, typically those intersecting the target range

        Returns:
            ConflictReport (empty when nothing conflicts)
        """
        report = ConflictReport(target=target)

        for req in requests:
            if not req.is_approved or not self.is_conflict(target, req):
                continue

            report.conflicting_requests.append(req)
            report.total_overlap_days += target.period.overlap_days(req.period)

            if req.employee_id not in report.affected_employees:
                report.affected_employees.append(req.employee_id)

            employee = self.roster.get(req.employee_id)
            if employee is None:
                logger.warning(
                    "Request %s belongs to employee %s who is not on the roster",
                    req.id,
                    req.employee_id,
                )
                continue

            if employee.department is not None:
                department = employee.department.value
                if department not in report.departments_affected:
                    report.departments_affected.append(department)

            if employee.is_admin:
                report.critical_roles_affected.append(employee.job_title or "Admin")

        logger.debug(
            "Request %s: %d conflicting request(s), %d overlapping day(s)",
            target.id,
            report.conflict_count,
            report.total_overlap_days,
        )
        return report

    def conflict_map(
        self, requests: Iterable[VacationRequest], window: Optional[DateRange] = None
    ) -> Dict[str, List[str]]:
        """
        Pairwise conflicts among all pending and approved requests.

        The relation is symmetric: B is listed under A iff A is listed under B.

        Returns:
            Dictionary mapping request id to the ids of its conflicting requests
        """
        active = [
            req
            for req in requests
            if req.is_active and (window is None or req.period.overlaps(window))
        ]
        conflicts: Dict[str, List[str]] = {req.id: [] for req in active}

        for i, first in enumerate(active):
            for second in active[i + 1 :]:
                if self.is_conflict(first, second):
                    conflicts[first.id].append(second.id)
                    conflicts[second.id].append(first.id)

        return conflicts

    @staticmethod
    def find_duplicate(
        employee_id: str, period: DateRange, requests: Iterable[VacationRequest]
    ) -> Optional[VacationRequest]:
        """Return an existing active request of the employee overlapping the period."""
        for req in requests:
            if (
                req.employee_id == employee_id
                and req.is_active
                and req.period.overlaps(period)
            ):
                return req
        return None
