"""
Console output for coverage and conflict analyses.
"""

import pandas as pd
from typing import List

from .models import (
    ConflictOutcome,
    CoverageSuggestion,
    TeamCoverageAnalysis,
    VacationBalance,
)


class CoverageReporter:
    """Formats and displays analysis results."""

    DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

    def _print_title(self, title: str) -> None:
        print("=" * 80)
        print(title)
        print("=" * 80)

    def print_team_coverage(self, analysis: TeamCoverageAnalysis, quiet: bool = False) -> None:
        """Print the team coverage report."""
        self._print_title("TEAM COVERAGE ANALYSIS")

        print(f"\nPeriod: {analysis.start_date} to {analysis.end_date}")
        print(f"Overall Coverage: {analysis.overall_coverage}%")
        print(f"Days Reported: {len(analysis.daily_coverage)}")
        print(f"Days With Gaps: {len(analysis.days_with_gaps)}")
        print()

        if not quiet:
            self._print_daily_coverage(analysis)

        self._print_recommendations(analysis.recommendations)

    def _print_daily_coverage(self, analysis: TeamCoverageAnalysis) -> None:
        """Print day-by-day coverage table."""
        self._print_title("DAILY COVERAGE")

        if not analysis.daily_coverage:
            print("\n  No days in this period")
            print()
            return

        data = []
        for day in analysis.daily_coverage:
            data.append(
                {
                    "Date": day.date.strftime("%Y-%m-%d"),
                    "Day": self.DAY_NAMES[day.date.weekday()],
                    "Coverage %": day.coverage_percentage,
                    "Available": day.available_employees,
                    "On Vacation": day.on_vacation_employees,
                    "Gaps": ", ".join(day.gaps),
                }
            )

        df = pd.DataFrame(data).set_index("Date")
        print(df.to_string())
        print()

    def _print_recommendations(self, recommendations: List[str]) -> None:
        self._print_title("RECOMMENDATIONS")
        for recommendation in recommendations:
            print(f"  • {recommendation}")
        print()

    def print_conflict(self, outcome: ConflictOutcome) -> None:
        """Print the conflict analysis of a single request."""
        self._print_title("CONFLICT ANALYSIS")

        if not outcome.has_conflict:
            print("\n✓ No conflicts detected")
            print()
            return

        analysis = outcome.analysis
        metrics = analysis.impact_metrics
        print(f"\nRequest: {analysis.conflict_id}")
        print(f"Severity: {analysis.severity.value.upper()}")
        print(f"Affected Employees: {', '.join(analysis.affected_employees)}")
        print(f"Conflicting Days: {analysis.conflict_days}")
        print(f"Coverage Gap: {analysis.coverage_gap:.1f}%")
        if metrics.departments_affected:
            print(f"Departments Affected: {', '.join(metrics.departments_affected)}")
        if metrics.critical_roles_affected:
            print(f"Critical Roles Affected: {', '.join(metrics.critical_roles_affected)}")
        print()

        self.print_suggestions(analysis.suggestions)

    def print_suggestions(self, suggestions: List[CoverageSuggestion]) -> None:
        """Print ranked coverage suggestions."""
        self._print_title("COVERAGE SUGGESTIONS")

        if not suggestions:
            print("\n  No available employees in this period")
            print()
            return

        data = [
            {
                "Employee": s.employee_name,
                "Score": s.score,
                "Skill Match %": s.skill_match,
                "Workload %": s.workload_impact,
                "Availability": s.availability.value,
                "Reason": s.reason,
            }
            for s in suggestions
        ]

        df = pd.DataFrame(data)
        df.index = range(1, len(df) + 1)

        pd.options.display.float_format = "{:.1f}".format
        print(df.to_string())
        print()

    def print_balance(self, employee_name: str, balance: VacationBalance) -> None:
        self._print_title(f"VACATION BALANCE: {employee_name}")
        print(f"\n  Allowance: {balance.total_days} days")
        print(f"  Used:      {balance.used_days} days")
        print(f"  Remaining: {balance.remaining_days} days")
        print()
