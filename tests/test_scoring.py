"""Tests for coverage scoring and ranking."""

import pytest

from vacation_coverage.models import CoverageAvailability, Employee
from vacation_coverage.scoring import (
    CoverageScorer,
    coverage_reason,
    coverage_score,
    coverage_tier,
    skill_match,
)

from conftest import ORG_ID


def employee(emp_id: str = "x", **kwargs) -> Employee:
    return Employee(id=emp_id, name=emp_id.title(), organization_id=ORG_ID, **kwargs)


class TestSkillMatch:
    def test_no_required_skills_is_baseline(self):
        assert skill_match(["python"], []) == 75

    def test_case_insensitive(self):
        assert skill_match(["Python", "Django"], ["python"]) == 100

    def test_partial_coverage(self):
        assert skill_match(["Python", "Django"], ["python", "java"]) == 50

    def test_substring_in_either_direction(self):
        assert skill_match(["PostgreSQL"], ["sql", "go"]) == 50
        assert skill_match(["sql"], ["postgresql"]) == 100

    def test_each_required_skill_counted_once(self):
        """Several matching candidate skills never push the match above 100."""
        assert skill_match(["python", "python3", "py"], ["python"]) == 100

    def test_no_candidate_skills(self):
        assert skill_match([], ["python"]) == 0


class TestCoverageScore:
    """Tests for the composite suitability score."""

    def test_components(self):
        emp = employee(current_workload=50)
        # 50 base + 0 skills + 10 workload + 25 available + 10 role
        assert coverage_score(emp, ["java"]) == pytest.approx(95)

    def test_limited_and_admin_bonuses(self):
        emp = employee(current_workload=50, availability_for_coverage="limited", role="admin")
        # 50 + 0 + 10 + 15 + 15
        assert coverage_score(emp, ["java"]) == pytest.approx(90)

    def test_clamped_to_hundred(self):
        emp = employee(current_workload=0, role="admin")
        assert coverage_score(emp, []) == 100

    def test_higher_workload_lowers_score(self):
        light = employee(current_workload=20, availability_for_coverage="unavailable")
        heavy = employee(current_workload=90, availability_for_coverage="unavailable")

        assert coverage_score(light, ["java"]) == pytest.approx(76)
        assert coverage_score(heavy, ["java"]) == pytest.approx(62)
        assert coverage_score(heavy, ["java"]) < coverage_score(light, ["java"])

    @pytest.mark.parametrize("skills", [[], ["python"], ["java", "sales"], ["a", "b", "c"]])
    def test_roster_scores_in_bounds(self, roster, skills):
        for emp in roster:
            assert 0 <= coverage_score(emp, skills) <= 100


class TestCoverageTier:
    def test_flagged_availability_wins(self, dan, eve):
        assert coverage_tier(dan) == CoverageAvailability.LIMITED
        assert coverage_tier(eve) == CoverageAvailability.UNAVAILABLE

    def test_heavy_workload_is_limited(self):
        assert coverage_tier(employee(current_workload=90)) == CoverageAvailability.LIMITED

    def test_normal_workload_is_available(self, alice):
        assert coverage_tier(alice) == CoverageAvailability.AVAILABLE


class TestCoverageReason:
    def test_excellent_match(self, alice):
        reason = coverage_reason(alice, 100, CoverageAvailability.AVAILABLE, 40)
        assert reason == (
            "Excellent skill match, Fully available, Low current workload, "
            "engineering department"
        )

    def test_limited_busy_employee(self, dan):
        reason = coverage_reason(dan, 0, CoverageAvailability.LIMITED, 90)
        assert reason == "Limited availability, High workload impact, support department"

    def test_good_and_partial_thresholds(self, bob):
        assert coverage_reason(bob, 75, CoverageAvailability.AVAILABLE, 60).startswith(
            "Good skill compatibility"
        )
        assert coverage_reason(bob, 50, CoverageAvailability.AVAILABLE, 60).startswith(
            "Partial skill match"
        )

    def test_default_reason(self):
        emp = employee(current_workload=60, availability_for_coverage="unavailable")
        reason = coverage_reason(emp, 0, CoverageAvailability.UNAVAILABLE, 60)
        assert reason == "Available for coverage"


class TestCoverageScorer:
    """Tests for ranking candidates."""

    def test_sorted_by_descending_score(self, roster):
        suggestions = CoverageScorer().rank(roster, ["java"])

        assert [s.employee_id for s in suggestions] == ["carol", "alice", "bob", "dan", "eve"]
        scores = [s.score for s in suggestions]
        assert scores == sorted(scores, reverse=True)

    def test_suggestion_fields(self, dan):
        suggestion = CoverageScorer().suggest(dan, ["customer"])

        assert suggestion.employee_name == "Dan Davis"
        assert suggestion.skill_match == 100
        assert suggestion.availability == CoverageAvailability.LIMITED
        assert suggestion.workload_impact == 90

    def test_top_ten_only(self):
        candidates = [
            employee(f"emp{i:02d}", current_workload=i, availability_for_coverage="unavailable")
            for i in range(12)
        ]
        suggestions = CoverageScorer().rank(candidates, ["java"])

        assert len(suggestions) == 10
        # Lowest workloads score highest
        assert suggestions[0].employee_id == "emp00"
        assert "emp11" not in [s.employee_id for s in suggestions]

    def test_custom_limit(self, roster):
        assert len(CoverageScorer(max_suggestions=2).rank(roster)) == 2

    def test_invalid_limit_raises(self):
        with pytest.raises(ValueError, match="at least 1"):
            CoverageScorer(max_suggestions=0)
