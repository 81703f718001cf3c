"""
Configuration loader for parsing YAML organization snapshots.
"""

import logging
import yaml
from pathlib import Path
from typing import Dict, Any, List
from datetime import date

from .calendar import parse_date
from .conflicts import ConflictDetector
from .errors import ConfigurationError, InvalidDateFormatError
from .holidays import holidays_for_years
from .models import (
    AnalysisSettings,
    CoverageConfig,
    Employee,
    Holiday,
    Organization,
    OrganizationSnapshot,
    VacationRequest,
)

logger = logging.getLogger(__name__)

__all__ = ["ConfigLoader", "ConfigurationError", "InvalidDateFormatError"]


class ConfigLoader:
    """Loads and validates an organization snapshot from a YAML file."""

    SETTINGS_KEYS = {
        "max_suggestions",
        "critical_coverage_threshold",
        "stagger_coverage_threshold",
        "working_days_only",
        "holiday_state",
    }

    def __init__(self, config_path: str | Path):
        """
        Initialize the ConfigLoader with a snapshot file path.

        Args:
            config_path: Path to the YAML snapshot file

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        self.config_path = Path(config_path)

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        self._raw_config: Dict[str, Any] | None = None
        self._config: CoverageConfig | None = None

    def load(self) -> CoverageConfig:
        """
        Load and parse the snapshot file.

        Returns:
            CoverageConfig with the organization snapshot and analysis settings

        Raises:
            InvalidDateFormatError: If dates are not in ISO 8601 format
            ConfigurationError: If the snapshot is invalid
        """
        with open(self.config_path, "r") as f:
            self._raw_config = yaml.safe_load(f) or {}

        if not isinstance(self._raw_config, dict):
            raise ConfigurationError(
                f"Top level of {self.config_path} must be a mapping"
            )

        self._config = self._parse_config()
        self._validate()

        logger.debug("Loaded snapshot from %s", self.config_path)
        return self._config

    def reload(self) -> CoverageConfig:
        """
        Reload the snapshot from the file.

        Useful if the file has been modified.
        """
        return self.load()

    @property
    def config(self) -> CoverageConfig:
        """
        Get the loaded configuration.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._config

    @property
    def raw_config(self) -> Dict[str, Any]:
        """
        Get the raw configuration dictionary.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        if self._raw_config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._raw_config

    def _parse_config(self) -> CoverageConfig:
        """Parse raw YAML data into a CoverageConfig object."""
        raw = self._raw_config

        organization = self._parse_organization(raw.get("organization"))
        settings = self._parse_settings(raw.get("settings") or {})
        holidays = self._parse_holidays(raw.get("holidays") or {})
        employees = self._parse_employees(raw.get("employees") or [], organization.id)
        requests = self._parse_requests(raw.get("requests") or [], organization.id)

        return CoverageConfig(
            snapshot=OrganizationSnapshot(
                organization=organization,
                employees=employees,
                requests=requests,
                holidays=holidays,
            ),
            settings=settings,
        )

    def _parse_organization(self, org_raw: Dict[str, Any] | None) -> Organization:
        if not org_raw or not org_raw.get("id"):
            raise ConfigurationError("Snapshot must define an organization with an 'id'")

        try:
            return Organization(
                id=str(org_raw["id"]),
                name=org_raw.get("name", ""),
                default_vacation_days=org_raw.get("default_vacation_days", 30),
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid organization: {e}") from e

    def _parse_settings(self, settings_raw: Dict[str, Any]) -> AnalysisSettings:
        unknown = set(settings_raw) - self.SETTINGS_KEYS
        if unknown:
            raise ConfigurationError(
                f"Unknown settings: {', '.join(sorted(unknown))}. "
                f"Valid settings: {', '.join(sorted(self.SETTINGS_KEYS))}"
            )

        try:
            return AnalysisSettings(**settings_raw)
        except ValueError as e:
            raise ConfigurationError(f"Invalid settings: {e}") from e

    def _parse_holidays(self, holidays_raw: Dict[str, Any]) -> List[Holiday]:
        """Parse explicit holidays and optionally generated German holidays."""
        holidays: List[Holiday] = []

        years = holidays_raw.get("generate_german") or []
        for year in years:
            if not isinstance(year, int):
                raise ConfigurationError(f"Holiday year must be an integer, got: {year!r}")
            holidays.extend(holidays_for_years(year, year))

        for hol_data in holidays_raw.get("dates") or []:
            day = self._parse_date(hol_data.get("date"), "Holiday date")
            state = hol_data.get("state")
            holidays.append(
                Holiday(
                    date=day,
                    name=hol_data.get("name", ""),
                    national=hol_data.get("national", state is None),
                    state=state,
                )
            )

        return holidays

    def _parse_employees(
        self, employees_raw: List[Dict[str, Any]], organization_id: str
    ) -> List[Employee]:
        """Parse roster entries from raw config."""
        employees = []

        for emp_data in employees_raw:
            emp_id = emp_data.get("id")
            if emp_id is None:
                raise ConfigurationError(f"Employee entry without 'id': {emp_data}")

            try:
                employees.append(
                    Employee(
                        id=str(emp_id),
                        name=emp_data.get("name", ""),
                        organization_id=str(
                            emp_data.get("organization_id", organization_id)
                        ),
                        department=emp_data.get("department"),
                        role=emp_data.get("role", "employee"),
                        skills=emp_data.get("skills") or (),
                        current_workload=emp_data.get("current_workload", 50),
                        availability_for_coverage=emp_data.get(
                            "availability_for_coverage", "available"
                        ),
                        email=emp_data.get("email"),
                        job_title=emp_data.get("job_title"),
                        custom_vacation_days=emp_data.get("custom_vacation_days"),
                    )
                )
            except ValueError as e:
                raise ConfigurationError(f"Invalid employee '{emp_id}': {e}") from e

        return employees

    def _parse_requests(
        self, requests_raw: List[Dict[str, Any]], organization_id: str
    ) -> List[VacationRequest]:
        """Parse vacation requests from raw config."""
        requests = []

        for req_data in requests_raw:
            req_id = req_data.get("id")
            if req_id is None:
                raise ConfigurationError(f"Request entry without 'id': {req_data}")

            start = self._parse_date(req_data.get("start_date"), f"Start date of request {req_id}")
            end = self._parse_date(req_data.get("end_date"), f"End date of request {req_id}")

            try:
                requests.append(
                    VacationRequest(
                        id=str(req_id),
                        employee_id=str(req_data.get("employee_id")),
                        organization_id=str(
                            req_data.get("organization_id", organization_id)
                        ),
                        start_date=start,
                        end_date=end,
                        status=req_data.get("status", "pending"),
                        coverage_required=req_data.get("coverage_required") or (),
                        priority=req_data.get("priority", "medium"),
                        workload_impact=req_data.get("workload_impact", 50),
                        reason=req_data.get("reason"),
                    )
                )
            except ValueError as e:
                raise ConfigurationError(f"Invalid request '{req_id}': {e}") from e

        return requests

    def _parse_date(self, value: Any, label: str) -> date:
        try:
            return parse_date(value)
        except InvalidDateFormatError as e:
            raise InvalidDateFormatError(f"{label}: {e}") from e

    def _validate(self) -> None:
        """
        Validate that the snapshot is internally consistent.

        Raises:
            ConfigurationError: If the snapshot has issues
        """
        snapshot = self._config.snapshot
        org_id = snapshot.organization.id

        self._check_unique("employee", [emp.id for emp in snapshot.employees])
        self._check_unique("request", [req.id for req in snapshot.requests])

        for emp in snapshot.employees:
            if emp.organization_id != org_id:
                raise ConfigurationError(
                    f"Employee '{emp.id}' belongs to organization '{emp.organization_id}', "
                    f"expected '{org_id}'"
                )

        employee_ids = set(self._config.employee_ids)
        for req in snapshot.requests:
            if req.employee_id not in employee_ids:
                raise ConfigurationError(
                    f"Request '{req.id}' references unknown employee '{req.employee_id}'"
                )
            if req.organization_id != org_id:
                raise ConfigurationError(
                    f"Request '{req.id}' belongs to organization '{req.organization_id}', "
                    f"expected '{org_id}'"
                )

        if not snapshot.employees:
            logger.warning("Snapshot %s has an empty roster", self.config_path)

        self._check_duplicate_requests()
        self._check_holiday_coverage()

    def _check_unique(self, kind: str, ids: List[str]) -> None:
        seen = set()
        for item_id in ids:
            if item_id in seen:
                raise ConfigurationError(f"Duplicate {kind} id '{item_id}'")
            seen.add(item_id)

    def _check_duplicate_requests(self) -> None:
        """Warn about active requests overlapping an earlier one of the same employee."""
        seen: List[VacationRequest] = []
        for req in self._config.snapshot.requests:
            if req.is_active:
                duplicate = ConflictDetector.find_duplicate(req.employee_id, req.period, seen)
                if duplicate is not None:
                    logger.warning(
                        "Request %s overlaps request %s of employee %s",
                        req.id,
                        duplicate.id,
                        req.employee_id,
                    )
                seen.append(req)

    def _check_holiday_coverage(self) -> None:
        """Warn about requests in years without any holiday data."""
        snapshot = self._config.snapshot
        holiday_years = {h.date.year for h in snapshot.holidays}

        for req in snapshot.requests:
            for year in {req.start_date.year, req.end_date.year}:
                if holiday_years and year not in holiday_years:
                    logger.warning(
                        "Request %s falls in %d, which has no holiday data",
                        req.id,
                        year,
                    )

    def get_summary(self) -> str:
        """
        Get a summary of the loaded snapshot.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        config = self.config
        snapshot = config.snapshot

        lines = [
            f"Configuration from: {self.config_path}",
            f"Organization: {snapshot.organization.name or snapshot.organization.id}",
            f"Employees: {len(snapshot.employees)}",
        ]

        departments: Dict[str, int] = {}
        for emp in snapshot.employees:
            name = emp.department.value if emp.department is not None else "(none)"
            departments[name] = departments.get(name, 0) + 1
        for name, count in departments.items():
            lines.append(f"  - {name}: {count} employees")

        approved = sum(1 for req in snapshot.requests if req.is_approved)
        lines.append(f"Vacation Requests: {len(snapshot.requests)} ({approved} approved)")
        lines.append(f"Holidays: {len(snapshot.holidays)}")

        return "\n".join(lines)
