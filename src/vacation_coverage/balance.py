"""
Vacation allowance bookkeeping in working days.
"""

from datetime import date
from typing import Iterable, Set

from .calendar import business_days
from .models import Employee, Organization, VacationBalance, VacationRequest


def allowance(employee: Employee, organization: Organization) -> int:
    """Yearly allowance: the employee's override, else the organization default."""
    if employee.custom_vacation_days is not None:
        return employee.custom_vacation_days
    return organization.default_vacation_days


def used_days(
    employee: Employee, requests: Iterable[VacationRequest], holidays: Set[date]
) -> int:
    """Working days consumed by the employee's approved requests."""
    return sum(
        business_days(req.start_date, req.end_date, holidays)
        for req in requests
        if req.employee_id == employee.id and req.is_approved
    )


def vacation_balance(
    employee: Employee,
    organization: Organization,
    requests: Iterable[VacationRequest],
    holidays: Set[date],
) -> VacationBalance:
    return VacationBalance(
        total_days=allowance(employee, organization),
        used_days=used_days(employee, requests, holidays),
    )
