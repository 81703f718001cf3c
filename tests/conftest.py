"""Shared fixtures for vacation-coverage tests."""

import pytest
from datetime import date

from vacation_coverage.models import (
    Employee,
    Organization,
    OrganizationSnapshot,
    VacationRequest,
)

ORG_ID = "org-1"

MONDAY = date(2026, 1, 5)
FRIDAY = date(2026, 1, 9)


def make_request(
    request_id: str,
    employee_id: str,
    start: date,
    end: date,
    status: str = "approved",
    **kwargs,
) -> VacationRequest:
    """Build a vacation request of the test organization."""
    return VacationRequest(
        id=request_id,
        employee_id=employee_id,
        organization_id=ORG_ID,
        start_date=start,
        end_date=end,
        status=status,
        **kwargs,
    )


@pytest.fixture
def organization() -> Organization:
    return Organization(id=ORG_ID, name="Acme")


@pytest.fixture
def alice() -> Employee:
    """Engineer with a light workload."""
    return Employee(
        id="alice",
        name="Alice Adams",
        organization_id=ORG_ID,
        department="engineering",
        skills=("Python", "Django"),
        current_workload=40,
    )


@pytest.fixture
def bob() -> Employee:
    return Employee(
        id="bob",
        name="Bob Brown",
        organization_id=ORG_ID,
        department="engineering",
        skills=("python", "react"),
        current_workload=60,
    )


@pytest.fixture
def carol() -> Employee:
    """Admin heading the sales team."""
    return Employee(
        id="carol",
        name="Carol Clark",
        organization_id=ORG_ID,
        department="sales",
        role="admin",
        job_title="Sales Lead",
        skills=("negotiation",),
        current_workload=30,
    )


@pytest.fixture
def dan() -> Employee:
    """Busy support agent with limited coverage availability."""
    return Employee(
        id="dan",
        name="Dan Davis",
        organization_id=ORG_ID,
        department="support",
        skills=("customer support",),
        current_workload=90,
        availability_for_coverage="limited",
    )


@pytest.fixture
def eve() -> Employee:
    """HR employee who opted out of covering for others."""
    return Employee(
        id="eve",
        name="Eve Evans",
        organization_id=ORG_ID,
        department="hr",
        current_workload=20,
        availability_for_coverage="unavailable",
    )


@pytest.fixture
def roster(alice, bob, carol, dan, eve) -> list[Employee]:
    """Five employees across four departments."""
    return [alice, bob, carol, dan, eve]


@pytest.fixture
def snapshot(organization, roster) -> OrganizationSnapshot:
    """Snapshot without any vacation requests; tests append their own."""
    return OrganizationSnapshot(organization=organization, employees=roster)
