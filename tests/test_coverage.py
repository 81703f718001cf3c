"""Tests for daily coverage reporting and recommendations."""

import pytest
from datetime import date

from vacation_coverage.coverage import (
    DailyCoverageReporter,
    generate_recommendations,
    overall_coverage,
    round_half_up,
)
from vacation_coverage.errors import EmptyRosterError
from vacation_coverage.models import DailyCoverage, DateRange, Employee

from conftest import FRIDAY, MONDAY, ORG_ID, make_request

WEEK = DateRange(MONDAY, FRIDAY)


def day(percentage: int, gaps=None) -> DailyCoverage:
    return DailyCoverage(
        date=MONDAY,
        coverage_percentage=percentage,
        available_employees=0,
        on_vacation_employees=0,
        gaps=gaps or [],
    )


class TestDailyCoverageReporter:
    """Tests for per-day staffing figures."""

    def test_one_of_five_on_vacation(self, roster):
        requests = [make_request("r1", "bob", MONDAY, MONDAY)]
        report = DailyCoverageReporter(roster).day_report(MONDAY, requests)

        assert report.coverage_percentage == 80
        assert report.on_vacation_employees == 1
        assert report.available_employees == 4
        assert report.gaps == []

    def test_pending_and_rejected_requests_ignored(self, roster):
        requests = [
            make_request("r1", "bob", MONDAY, FRIDAY, "pending"),
            make_request("r2", "carol", MONDAY, FRIDAY, "rejected"),
        ]
        daily = DailyCoverageReporter(roster).report(WEEK, requests)
        assert all(d.coverage_percentage == 100 for d in daily)

    def test_overlapping_requests_of_one_employee_counted_once(self, roster):
        requests = [
            make_request("r1", "bob", MONDAY, FRIDAY),
            make_request("r2", "bob", date(2026, 1, 7), date(2026, 1, 7)),
        ]
        report = DailyCoverageReporter(roster).day_report(date(2026, 1, 7), requests)
        assert report.on_vacation_employees == 1

    def test_department_gap_when_whole_department_away(self, roster):
        requests = [
            make_request("r1", "alice", MONDAY, FRIDAY),
            make_request("r2", "bob", date(2026, 1, 8), date(2026, 1, 9)),
        ]
        daily = DailyCoverageReporter(roster).report(WEEK, requests)

        assert [d.gaps for d in daily] == [[], [], [], ["engineering"], ["engineering"]]
        assert daily[3].coverage_percentage == 60

    def test_single_member_department(self, roster):
        requests = [make_request("r1", "eve", MONDAY, MONDAY)]
        report = DailyCoverageReporter(roster).day_report(MONDAY, requests)
        assert report.gaps == ["hr"]

    def test_employee_without_department_never_a_gap(self):
        roster = [
            Employee(id="a", name="A", organization_id=ORG_ID),
            Employee(id="b", name="B", organization_id=ORG_ID),
        ]
        report = DailyCoverageReporter(roster).day_report(
            MONDAY, [make_request("r1", "a", MONDAY, MONDAY)]
        )
        assert report.gaps == []
        assert report.coverage_percentage == 50

    def test_every_calendar_day_reported_by_default(self, roster):
        period = DateRange(MONDAY, date(2026, 1, 11))
        daily = DailyCoverageReporter(roster).report(period, [])
        assert len(daily) == 7

    def test_working_days_only(self, roster):
        period = DateRange(MONDAY, date(2026, 1, 11))
        daily = DailyCoverageReporter(roster).report(
            period, [], holidays={date(2026, 1, 6)}, working_days_only=True
        )
        assert [d.date for d in daily] == [
            date(2026, 1, 5),
            date(2026, 1, 7),
            date(2026, 1, 8),
            date(2026, 1, 9),
        ]

    def test_half_percent_rounds_up(self):
        roster = [Employee(id=str(i), name=str(i), organization_id=ORG_ID) for i in range(8)]
        requests = [make_request(f"r{i}", str(i), MONDAY, MONDAY) for i in range(3)]
        report = DailyCoverageReporter(roster).day_report(MONDAY, requests)
        assert report.coverage_percentage == 63  # 62.5

    def test_empty_roster_raises(self):
        with pytest.raises(EmptyRosterError):
            DailyCoverageReporter([])


class TestOverallCoverage:
    def test_rounded_mean(self):
        assert overall_coverage([day(80), day(75), day(100)]) == 85

    def test_half_rounds_up(self):
        assert overall_coverage([day(80), day(81)]) == 81

    @pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (2.4, 2)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestRecommendations:
    """Tests for the textual staffing advice."""

    def test_good_coverage(self):
        assert generate_recommendations([day(100), day(90)]) == [
            "Good staffing coverage during this period"
        ]

    def test_critical_days_and_gaps(self):
        recommendations = generate_recommendations(
            [day(60, ["engineering"]), day(100)]
        )
        assert recommendations == [
            "1 days with critical staffing (<70%)",
            "Department gaps: engineering",
        ]

    def test_all_rules_fire_in_order(self):
        recommendations = generate_recommendations(
            [day(60, ["engineering"]), day(50, ["sales", "engineering"])]
        )
        assert recommendations == [
            "2 days with critical staffing (<70%)",
            "Department gaps: engineering, sales",
            "Consider staggering vacation periods for better coverage",
        ]

    def test_low_mean_without_critical_days(self):
        recommendations = generate_recommendations([day(75), day(75)])
        assert recommendations == [
            "Consider staggering vacation periods for better coverage"
        ]

    def test_custom_thresholds(self):
        recommendations = generate_recommendations(
            [day(85)], critical_threshold=90, stagger_threshold=50
        )
        assert recommendations == ["1 days with critical staffing (<90%)"]
