"""
Coverage and conflict analysis over an organization snapshot.

CoverageAnalyzer is the entry point used by request handlers. It is a
pure function of the snapshot it was given: no I/O, no hidden state,
repeated calls with the same inputs return equal results.
"""

import logging
from typing import Dict, List, Optional, Sequence

from .balance import vacation_balance as compute_balance
from .calendar import DateLike, parse_date
from .conflicts import ConflictDetector, classify_severity, coverage_gap_percentage
from .coverage import DailyCoverageReporter, generate_recommendations, overall_coverage
from .errors import (
    EmployeeNotFoundError,
    NotFoundError,
    OrganizationNotFoundError,
    RequestNotFoundError,
)
from .holidays import HolidayCalendar
from .models import (
    AnalysisSettings,
    ConflictAnalysis,
    ConflictOutcome,
    CoverageSuggestion,
    DateRange,
    Employee,
    ImpactMetrics,
    OrganizationSnapshot,
    TeamCoverageAnalysis,
    VacationBalance,
)
from .scoring import CoverageScorer

logger = logging.getLogger(__name__)


class CoverageAnalyzer:
    """Answers conflict, suggestion and coverage questions for one organization."""

    def __init__(
        self,
        snapshot: OrganizationSnapshot,
        settings: Optional[AnalysisSettings] = None,
    ):
        self.snapshot = snapshot
        self.settings = settings or AnalysisSettings()
        self.scorer = CoverageScorer(max_suggestions=self.settings.max_suggestions)
        self.holidays = HolidayCalendar(snapshot.holidays, state=self.settings.holiday_state)

    @property
    def organization_id(self) -> str:
        return self.snapshot.organization.id

    @property
    def roster(self) -> List[Employee]:
        """Employees of the snapshot's organization, in snapshot order."""
        return [
            emp
            for emp in self.snapshot.employees
            if emp.organization_id == self.organization_id
        ]

    def conflict_analysis_for_request(self, request_id: str) -> ConflictOutcome:
        """
        Assess how a vacation request clashes with already approved vacations.

        The requesting employee is never among the coverage suggestions.

        Args:
            request_id: Id of the request under review

        Returns:
            ConflictOutcome carrying a ConflictAnalysis, or the no-conflict state

        Raises:
            RequestNotFoundError: If the request is unknown
            NotFoundError: If the request's organization or employee is unknown
        """
        request = self.snapshot.get_request(request_id)
        if request is None:
            raise RequestNotFoundError(f"Vacation request '{request_id}' not found")
        if request.organization_id != self.organization_id:
            raise NotFoundError(
                f"Vacation request '{request_id}' does not belong to "
                f"organization '{self.organization_id}'"
            )
        if self.snapshot.get_employee(request.employee_id) is None:
            raise EmployeeNotFoundError(
                f"Employee '{request.employee_id}' of request '{request_id}' not found"
            )

        roster = self.roster
        detector = ConflictDetector(roster)
        report = detector.find_conflicts(
            request, self.snapshot.requests_in_range(request.period)
        )

        if not report.has_conflicts:
            logger.debug("Request %s has no conflicts", request_id)
            return ConflictOutcome.no_conflict()

        coverage_gap = coverage_gap_percentage(len(report.affected_employees), len(roster))
        severity = classify_severity(
            report.conflict_count, coverage_gap, len(report.critical_roles_affected)
        )

        # The requester is about to be absent, never a candidate for covering
        candidates = [
            emp
            for emp in self._available_in(request.period)
            if emp.id != request.employee_id
        ]
        suggestions = self.scorer.rank(candidates, request.coverage_required)

        logger.info(
            "Request %s conflicts with %d request(s), severity %s",
            request_id,
            report.conflict_count,
            severity.value,
        )

        return ConflictOutcome.conflict(
            ConflictAnalysis(
                conflict_id=request.id,
                severity=severity,
                affected_employees=report.affected_employees,
                conflict_days=report.total_overlap_days,
                coverage_gap=coverage_gap,
                impact_metrics=ImpactMetrics(
                    total_affected_days=report.total_overlap_days,
                    departments_affected=report.departments_affected,
                    critical_roles_affected=report.critical_roles_affected,
                ),
                suggestions=suggestions,
            )
        )

    def coverage_suggestions(
        self,
        organization_id: str,
        start_date: DateLike,
        end_date: DateLike,
        required_skills: Sequence[str] = (),
    ) -> List[CoverageSuggestion]:
        """
        Rank employees who could cover work during a period.

        Employees with an approved vacation overlapping the period are never
        suggested.
        """
        self._check_organization(organization_id)
        period = self._period(start_date, end_date)
        return self.scorer.rank(self._available_in(period), required_skills)

    def team_coverage_analysis(
        self, organization_id: str, start_date: DateLike, end_date: DateLike
    ) -> TeamCoverageAnalysis:
        """
        Daily coverage of the whole organization with recommendations.

        Raises:
            OrganizationNotFoundError: If the organization is unknown
            EmptyRosterError: If the organization has no employees
        """
        self._check_organization(organization_id)
        period = self._period(start_date, end_date)

        reporter = DailyCoverageReporter(self.roster)
        daily = reporter.report(
            period,
            self.snapshot.requests_in_range(period),
            holidays=self.holidays.dates_between(period),
            working_days_only=self.settings.working_days_only,
        )

        return TeamCoverageAnalysis(
            start_date=period.start,
            end_date=period.end,
            overall_coverage=overall_coverage(daily),
            daily_coverage=daily,
            recommendations=generate_recommendations(
                daily,
                critical_threshold=self.settings.critical_coverage_threshold,
                stagger_threshold=self.settings.stagger_coverage_threshold,
            ),
        )

    def available_employees(
        self, organization_id: str, start_date: DateLike, end_date: DateLike
    ) -> List[Employee]:
        """Roster members without an approved vacation overlapping the period."""
        self._check_organization(organization_id)
        return self._available_in(self._period(start_date, end_date))

    def pending_conflicts(
        self, organization_id: str, start_date: DateLike, end_date: DateLike
    ) -> Dict[str, List[str]]:
        """Symmetric conflict map of the pending and approved requests in a period."""
        self._check_organization(organization_id)
        period = self._period(start_date, end_date)
        detector = ConflictDetector(self.roster)
        return detector.conflict_map(self.snapshot.requests_in_range(period), window=period)

    def vacation_balance(self, employee_id: str) -> VacationBalance:
        """
        Allowance, used and remaining vacation days of an employee.

        Used days are counted in working days, skipping weekends and the
        snapshot's holidays.
        """
        employee = self.snapshot.get_employee(employee_id)
        if employee is None or employee.organization_id != self.organization_id:
            raise EmployeeNotFoundError(f"Employee '{employee_id}' not found")

        holidays = {h.date for h in self.holidays.holidays}
        return compute_balance(
            employee, self.snapshot.organization, self.snapshot.requests, holidays
        )

    def _available_in(self, period: DateRange) -> List[Employee]:
        on_vacation = {
            req.employee_id
            for req in self.snapshot.requests_in_range(period)
            if req.is_approved
        }
        return [emp for emp in self.roster if emp.id not in on_vacation]

    def _check_organization(self, organization_id: str) -> None:
        if organization_id != self.organization_id:
            raise OrganizationNotFoundError(
                f"Organization '{organization_id}' not found"
            )

    @staticmethod
    def _period(start_date: DateLike, end_date: DateLike) -> DateRange:
        return DateRange(parse_date(start_date), parse_date(end_date))
