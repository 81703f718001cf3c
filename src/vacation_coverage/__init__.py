"""
Vacation Coverage - conflict detection and team coverage analysis for vacation requests.
"""

__version__ = "0.1.0"

from .analyzer import CoverageAnalyzer
from .calendar import business_days, overlap_days, ranges_overlap
from .config import ConfigLoader
from .conflicts import ConflictDetector, classify_severity
from .errors import (
    ConfigurationError,
    CoverageError,
    EmployeeNotFoundError,
    EmptyRosterError,
    InvalidDateFormatError,
    NotFoundError,
    OrganizationNotFoundError,
    RequestNotFoundError,
)
from .holidays import HolidayCalendar, german_holidays
from .models import (
    AnalysisSettings,
    ConflictAnalysis,
    ConflictOutcome,
    CoverageConfig,
    CoverageSuggestion,
    DailyCoverage,
    DateRange,
    Employee,
    Holiday,
    Organization,
    OrganizationSnapshot,
    Severity,
    TeamCoverageAnalysis,
    VacationBalance,
    VacationRequest,
)
from .reporter import CoverageReporter
from .scoring import CoverageScorer

__all__ = [
    "AnalysisSettings",
    "ConfigLoader",
    "ConfigurationError",
    "ConflictAnalysis",
    "ConflictDetector",
    "ConflictOutcome",
    "CoverageAnalyzer",
    "CoverageConfig",
    "CoverageError",
    "CoverageReporter",
    "CoverageScorer",
    "CoverageSuggestion",
    "DailyCoverage",
    "DateRange",
    "Employee",
    "EmployeeNotFoundError",
    "EmptyRosterError",
    "Holiday",
    "HolidayCalendar",
    "InvalidDateFormatError",
    "NotFoundError",
    "Organization",
    "OrganizationNotFoundError",
    "OrganizationSnapshot",
    "RequestNotFoundError",
    "Severity",
    "TeamCoverageAnalysis",
    "VacationBalance",
    "VacationRequest",
    "business_days",
    "classify_severity",
    "german_holidays",
    "overlap_days",
    "ranges_overlap",
]
