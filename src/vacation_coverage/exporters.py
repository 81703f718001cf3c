"""
Export strategies for analysis results.

This module implements the Strategy Pattern for exporting analysis results
to various formats. Each exporter encapsulates a specific output format.
"""

import csv
import json
from abc import ABC, abstractmethod
from typing import Any, Dict

from .models import ConflictOutcome, TeamCoverageAnalysis


class ExportStrategy(ABC):
    """Abstract base class for export strategies."""

    @abstractmethod
    def export(self, filepath: str) -> None:
        """Export to the specified file.

        Args:
            filepath: Path to the output file
        """
        pass


class JSONExporter(ExportStrategy):
    """Exports any analysis result as JSON, using the API field names.

    Works with every result type providing ``to_dict()``.
    """

    def __init__(self, result: Any, indent: int = 2):
        self.result = result
        self.indent = indent

    def as_dict(self) -> Dict[str, Any]:
        if isinstance(self.result, list):
            return {"suggestions": [item.to_dict() for item in self.result]}
        return self.result.to_dict()

    def export(self, filepath: str) -> None:
        with open(filepath, "w") as f:
            json.dump(self.as_dict(), f, indent=self.indent, ensure_ascii=False)
            f.write("\n")

        print(f"\n✓ Analysis exported to {filepath}")


class DailyCoverageCSVExporter(ExportStrategy):
    """Exports a team coverage analysis as one CSV row per day.

    Output format: Date, Day_of_Week, Coverage_Percentage, Available,
    On_Vacation, Gaps (semicolon separated).
    """

    FIELDNAMES = [
        "Date",
        "Day_of_Week",
        "Coverage_Percentage",
        "Available",
        "On_Vacation",
        "Gaps",
    ]

    def __init__(self, analysis: TeamCoverageAnalysis):
        self.analysis = analysis

    def export(self, filepath: str) -> None:
        rows = [
            {
                "Date": day.date.isoformat(),
                "Day_of_Week": day.date.strftime("%a"),
                "Coverage_Percentage": day.coverage_percentage,
                "Available": day.available_employees,
                "On_Vacation": day.on_vacation_employees,
                "Gaps": ";".join(day.gaps),
            }
            for day in self.analysis.daily_coverage
        ]

        with open(filepath, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=self.FIELDNAMES)
            writer.writeheader()
            writer.writerows(rows)

        print(f"\n✓ Daily coverage exported to {filepath}")


class SuggestionsCSVExporter(ExportStrategy):
    """Exports the coverage suggestions of a conflict analysis, best first."""

    FIELDNAMES = ["Rank", "Employee_Id", "Employee", "Score", "Availability", "Reason"]

    def __init__(self, outcome: ConflictOutcome):
        self.outcome = outcome

    def export(self, filepath: str) -> None:
        suggestions = self.outcome.analysis.suggestions if self.outcome.has_conflict else []

        with open(filepath, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=self.FIELDNAMES)
            writer.writeheader()
            for rank, s in enumerate(suggestions, start=1):
                writer.writerow(
                    {
                        "Rank": rank,
                        "Employee_Id": s.employee_id,
                        "Employee": s.employee_name,
                        "Score": f"{s.score:.1f}",
                        "Availability": s.availability.value,
                        "Reason": s.reason,
                    }
                )

        print(f"\n✓ Suggestions exported to {filepath}")
