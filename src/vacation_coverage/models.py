"""
Data models for the vacation coverage engine.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .calendar import iter_days, overlap_days, ranges_overlap


class Department(str, Enum):
    """Departments an employee can belong to."""

    ENGINEERING = "engineering"
    SALES = "sales"
    MARKETING = "marketing"
    HR = "hr"
    FINANCE = "finance"
    OPERATIONS = "operations"
    SUPPORT = "support"


class Role(str, Enum):
    ADMIN = "admin"
    EMPLOYEE = "employee"
    TENANT_ADMIN = "tenant_admin"


class CoverageAvailability(str, Enum):
    """Whether an employee can step in for absent colleagues."""

    AVAILABLE = "available"
    LIMITED = "limited"
    UNAVAILABLE = "unavailable"


class RequestStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Severity(str, Enum):
    """Severity tiers for a vacation conflict."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


def _check_int(label: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{label} must be an integer, got {value!r}")


def _skill_tuple(label: str, value: Any) -> Tuple[str, ...]:
    """A single skill name or a sequence of them, as a tuple of strings."""
    if isinstance(value, str):
        return (value,)
    try:
        skills = tuple(value)
    except TypeError:
        raise ValueError(f"{label} must be a list of strings, got {value!r}") from None
    for skill in skills:
        if not isinstance(skill, str):
            raise ValueError(f"{label} must be a list of strings, got {value!r}")
    return skills


@dataclass(frozen=True)
class DateRange:
    """An inclusive range of calendar days."""

    start: date
    end: date

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError(
                f"End date {self.end} cannot be before start date {self.start}"
            )

    def contains(self, check_date: date) -> bool:
        """Check if a date falls within this range."""
        return self.start <= check_date <= self.end

    def overlaps(self, other: "DateRange") -> bool:
        return ranges_overlap(self.start, self.end, other.start, other.end)

    def overlap_days(self, other: "DateRange") -> int:
        """Number of days shared with another range (inclusive)."""
        return overlap_days(self.start, self.end, other.start, other.end)

    @property
    def duration_days(self) -> int:
        """Number of days in this range (inclusive)."""
        return (self.end - self.start).days + 1

    def days(self) -> Iterator[date]:
        """Iterate over every day of the range in order."""
        return iter_days(self.start, self.end)


@dataclass(frozen=True)
class Organization:
    """A tenant owning a roster and its vacation requests."""

    id: str
    name: str = ""
    default_vacation_days: int = 30

    def __post_init__(self):
        _check_int("Default vacation days", self.default_vacation_days)
        if not 1 <= self.default_vacation_days <= 365:
            raise ValueError(
                f"Default vacation days must be between 1 and 365, "
                f"got {self.default_vacation_days}"
            )


@dataclass(frozen=True)
class Employee:
    """A roster entry, read-only from the engine's point of view."""

    id: str
    name: str
    organization_id: str
    department: Optional[Department] = None
    role: Role = Role.EMPLOYEE
    skills: Tuple[str, ...] = ()
    current_workload: int = 50  # Percent of capacity already committed
    availability_for_coverage: CoverageAvailability = CoverageAvailability.AVAILABLE
    email: Optional[str] = None
    job_title: Optional[str] = None
    custom_vacation_days: Optional[int] = None

    def __post_init__(self):
        _check_int("Current workload", self.current_workload)
        if self.custom_vacation_days is not None:
            _check_int("Custom vacation days", self.custom_vacation_days)
        if not 0 <= self.current_workload <= 100:
            raise ValueError(
                f"Current workload must be between 0 and 100, got {self.current_workload}"
            )
        if self.custom_vacation_days is not None and not (
            0 <= self.custom_vacation_days <= 365
        ):
            raise ValueError(
                f"Custom vacation days must be between 0 and 365, "
                f"got {self.custom_vacation_days}"
            )
        # Accept plain strings and lists from callers, store the canonical types
        object.__setattr__(self, "role", Role(self.role))
        object.__setattr__(
            self,
            "availability_for_coverage",
            CoverageAvailability(self.availability_for_coverage),
        )
        if self.department is not None:
            object.__setattr__(self, "department", Department(self.department))
        object.__setattr__(self, "skills", _skill_tuple("Skills", self.skills))

    @property
    def display_name(self) -> str:
        return self.name.strip() or self.email or "Unknown User"

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


@dataclass(frozen=True)
class VacationRequest:
    """A vacation request covering an inclusive range of days."""

    id: str
    employee_id: str
    organization_id: str
    start_date: date
    end_date: date
    status: RequestStatus = RequestStatus.PENDING
    coverage_required: Tuple[str, ...] = ()
    priority: Priority = Priority.MEDIUM
    workload_impact: int = 50
    reason: Optional[str] = None

    def __post_init__(self):
        if self.end_date < self.start_date:
            raise ValueError(
                f"End date {self.end_date} cannot be before start date {self.start_date}"
            )
        _check_int("Workload impact", self.workload_impact)
        if not 0 <= self.workload_impact <= 100:
            raise ValueError(
                f"Workload impact must be between 0 and 100, got {self.workload_impact}"
            )
        object.__setattr__(self, "status", RequestStatus(self.status))
        object.__setattr__(self, "priority", Priority(self.priority))
        object.__setattr__(
            self,
            "coverage_required",
            _skill_tuple("Coverage required", self.coverage_required),
        )

    @property
    def period(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)

    @property
    def is_approved(self) -> bool:
        return self.status == RequestStatus.APPROVED

    @property
    def is_active(self) -> bool:
        """Pending and approved requests take part in analysis, rejected ones don't."""
        return self.status != RequestStatus.REJECTED

    def covers(self, check_date: date) -> bool:
        return self.start_date <= check_date <= self.end_date


@dataclass(frozen=True)
class Holiday:
    """A public holiday, either national or limited to one state."""

    date: date
    name: str
    national: bool = True
    state: Optional[str] = None

    def applies_to(self, state: Optional[str]) -> bool:
        """National holidays apply everywhere, regional ones only to their state."""
        return self.national or (state is not None and self.state == state)


@dataclass
class OrganizationSnapshot:
    """Materialized roster, requests and holidays of one organization."""

    organization: Organization
    employees: List[Employee] = field(default_factory=list)
    requests: List[VacationRequest] = field(default_factory=list)
    holidays: List[Holiday] = field(default_factory=list)

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        for emp in self.employees:
            if emp.id == employee_id:
                return emp
        return None

    def get_request(self, request_id: str) -> Optional[VacationRequest]:
        for req in self.requests:
            if req.id == request_id:
                return req
        return None

    def requests_in_range(self, period: DateRange) -> List[VacationRequest]:
        """Active requests of this organization intersecting the period."""
        return [
            req
            for req in self.requests
            if req.organization_id == self.organization.id
            and req.is_active
            and req.period.overlaps(period)
        ]


# Engine outputs


@dataclass
class CoverageSuggestion:
    """A ranked candidate for covering an absence."""

    employee_id: str
    employee_name: str
    score: float
    reason: str
    availability: CoverageAvailability
    skill_match: float
    workload_impact: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "userId": self.employee_id,
            "userName": self.employee_name,
            "score": self.score,
            "reason": self.reason,
            "availability": self.availability.value,
            "skillMatch": self.skill_match,
            "workloadImpact": self.workload_impact,
        }


@dataclass
class ImpactMetrics:
    total_affected_days: int
    departments_affected: List[str]
    critical_roles_affected: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalAffectedDays": self.total_affected_days,
            "departmentsAffected": list(self.departments_affected),
            "criticalRolesAffected": list(self.critical_roles_affected),
        }


@dataclass
class ConflictAnalysis:
    """Conflict assessment for a single vacation request."""

    conflict_id: str
    severity: Severity
    affected_employees: List[str]
    conflict_days: int
    coverage_gap: float
    impact_metrics: ImpactMetrics
    suggestions: List[CoverageSuggestion]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "conflictId": self.conflict_id,
            "severity": self.severity.value,
            "affectedUsers": list(self.affected_employees),
            "conflictDays": self.conflict_days,
            "coverageGap": self.coverage_gap,
            "impactMetrics": self.impact_metrics.to_dict(),
            "suggestions": [s.to_dict() for s in self.suggestions],
        }


@dataclass
class ConflictOutcome:
    """Result of a conflict check: either a conflict analysis or no conflict."""

    CONFLICT = "conflict"
    NO_CONFLICT = "no_conflict"

    status: str
    analysis: Optional[ConflictAnalysis] = None

    @classmethod
    def conflict(cls, analysis: ConflictAnalysis) -> "ConflictOutcome":
        return cls(status=cls.CONFLICT, analysis=analysis)

    @classmethod
    def no_conflict(cls) -> "ConflictOutcome":
        return cls(status=cls.NO_CONFLICT)

    @property
    def has_conflict(self) -> bool:
        return self.status == self.CONFLICT

    def to_dict(self) -> Dict[str, Any]:
        if self.analysis is None:
            return {"message": "No conflicts detected", "conflicts": []}
        return self.analysis.to_dict()


@dataclass
class DailyCoverage:
    """Staffing figures for a single day."""

    date: date
    coverage_percentage: int
    available_employees: int
    on_vacation_employees: int
    gaps: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "coveragePercentage": self.coverage_percentage,
            "availableUsers": self.available_employees,
            "onVacationUsers": self.on_vacation_employees,
            "gaps": list(self.gaps),
        }


@dataclass
class TeamCoverageAnalysis:
    """Coverage of a whole organization over a date range."""

    start_date: date
    end_date: date
    overall_coverage: int
    daily_coverage: List[DailyCoverage]
    recommendations: List[str]

    @property
    def days_with_gaps(self) -> List[DailyCoverage]:
        return [d for d in self.daily_coverage if d.gaps]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dateRange": {
                "startDate": self.start_date.isoformat(),
                "endDate": self.end_date.isoformat(),
            },
            "overallCoverage": self.overall_coverage,
            "dailyCoverage": [d.to_dict() for d in self.daily_coverage],
            "recommendations": list(self.recommendations),
        }


@dataclass
class VacationBalance:
    total_days: int
    used_days: int

    @property
    def remaining_days(self) -> int:
        return self.total_days - self.used_days

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalDays": self.total_days,
            "usedDays": self.used_days,
            "remainingDays": self.remaining_days,
        }


@dataclass
class AnalysisSettings:
    """Tunable thresholds of the analysis."""

    max_suggestions: int = 10
    critical_coverage_threshold: int = 70  # Days below this are critically staffed
    stagger_coverage_threshold: int = 80  # Mean below this suggests staggering
    working_days_only: bool = False  # Skip weekends and holidays in daily reports
    holiday_state: Optional[str] = None  # Regional holidays of this state also apply

    def __post_init__(self):
        if self.max_suggestions < 1:
            raise ValueError(
                f"max_suggestions must be at least 1, got {self.max_suggestions}"
            )
        for name in ("critical_coverage_threshold", "stagger_coverage_threshold"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"{name} must be between 0 and 100, got {value}")


@dataclass
class CoverageConfig:
    """Complete configuration: an organization snapshot and analysis settings."""

    snapshot: OrganizationSnapshot
    settings: AnalysisSettings = field(default_factory=AnalysisSettings)

    @property
    def organization(self) -> Organization:
        return self.snapshot.organization

    @property
    def employee_ids(self) -> List[str]:
        return [emp.id for emp in self.snapshot.employees]
