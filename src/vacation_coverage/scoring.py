"""
Coverage scoring: how well an employee could cover for an absent colleague.
"""

import logging
from typing import Iterable, List, Sequence

from .models import CoverageAvailability, CoverageSuggestion, Employee, Role

logger = logging.getLogger(__name__)

BASE_SCORE = 50
SKILL_WEIGHT = 0.4
WORKLOAD_WEIGHT = 0.2
DEFAULT_SKILL_MATCH = 75  # No required skills means anyone is compatible
LIMITED_WORKLOAD_THRESHOLD = 85
DEFAULT_MAX_SUGGESTIONS = 10

AVAILABILITY_BONUS = {
    CoverageAvailability.AVAILABLE: 25,
    CoverageAvailability.LIMITED: 15,
    CoverageAvailability.UNAVAILABLE: 0,
}
ROLE_BONUS = {Role.ADMIN: 15}
DEFAULT_ROLE_BONUS = 10


def skill_match(employee_skills: Iterable[str], required_skills: Sequence[str]) -> float:
    """
    Percentage of required skills covered by the employee.

    A skill matches when either name contains the other, ignoring case.
    Each required skill is counted at most once, so the result is within 0-100.
    """
    if not required_skills:
        return float(DEFAULT_SKILL_MATCH)

    skills = [s.lower() for s in employee_skills]
    matched = 0
    for required in required_skills:
        needle = required.lower()
        if any(needle in skill or skill in needle for skill in skills):
            matched += 1

    return matched / len(required_skills) * 100


def coverage_tier(employee: Employee) -> CoverageAvailability:
    """Availability as shown to the approver; heavy workload downgrades to limited."""
    if employee.availability_for_coverage == CoverageAvailability.UNAVAILABLE:
        return CoverageAvailability.UNAVAILABLE
    if employee.availability_for_coverage == CoverageAvailability.LIMITED:
        return CoverageAvailability.LIMITED
    if employee.current_workload > LIMITED_WORKLOAD_THRESHOLD:
        return CoverageAvailability.LIMITED
    return CoverageAvailability.AVAILABLE


def coverage_score(employee: Employee, required_skills: Sequence[str]) -> float:
    """Composite 0-100 suitability score for one candidate."""
    score = float(BASE_SCORE)
    score += min(skill_match(employee.skills, required_skills), 100) * SKILL_WEIGHT
    score += (100 - employee.current_workload) * WORKLOAD_WEIGHT
    score += AVAILABILITY_BONUS[employee.availability_for_coverage]
    score += ROLE_BONUS.get(employee.role, DEFAULT_ROLE_BONUS)
    return min(100.0, max(0.0, score))


def coverage_reason(
    employee: Employee,
    match: float,
    availability: CoverageAvailability,
    workload: int,
) -> str:
    """Short human-readable justification for a suggestion."""
    reasons = []

    if match > 80:
        reasons.append("Excellent skill match")
    elif match > 60:
        reasons.append("Good skill compatibility")
    elif match > 40:
        reasons.append("Partial skill match")

    if availability == CoverageAvailability.AVAILABLE:
        reasons.append("Fully available")
    elif availability == CoverageAvailability.LIMITED:
        reasons.append("Limited availability")

    if workload < 50:
        reasons.append("Low current workload")
    elif workload > 80:
        reasons.append("High workload impact")

    if employee.department is not None:
        reasons.append(f"{employee.department.value} department")

    return ", ".join(reasons) if reasons else "Available for coverage"


class CoverageScorer:
    """Scores and ranks coverage candidates for a set of required skills."""

    def __init__(self, max_suggestions: int = DEFAULT_MAX_SUGGESTIONS):
        if max_suggestions < 1:
            raise ValueError(f"max_suggestions must be at least 1, got {max_suggestions}")
        self.max_suggestions = max_suggestions

    def suggest(
        self, employee: Employee, required_skills: Sequence[str]
    ) -> CoverageSuggestion:
        match = skill_match(employee.skills, required_skills)
        availability = coverage_tier(employee)
        return CoverageSuggestion(
            employee_id=employee.id,
            employee_name=employee.display_name,
            score=coverage_score(employee, required_skills),
            reason=coverage_reason(
                employee, match, availability, employee.current_workload
            ),
            availability=availability,
            skill_match=match,
            workload_impact=employee.current_workload,
        )

    def rank(
        self, candidates: Iterable[Employee], required_skills: Sequence[str] = ()
    ) -> List[CoverageSuggestion]:
        """
        Score every candidate and keep the best ones.

        Candidates must already exclude employees on vacation during the
        window. Ties keep roster order.

        Returns:
            Suggestions sorted by descending score, at most max_suggestions
        """
        suggestions = [self.suggest(emp, required_skills) for emp in candidates]
        suggestions.sort(key=lambda s: s.score, reverse=True)

        logger.debug(
            "Scored %d candidate(s) for skills %s", len(suggestions), list(required_skills)
        )
        return suggestions[: self.max_suggestions]
