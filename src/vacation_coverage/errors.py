"""Exception hierarchy for the vacation coverage engine."""

from http import HTTPStatus


class CoverageError(Exception):
    """Base class for all errors raised by the engine."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR
    error_code: str = "coverage_error"


class ConfigurationError(CoverageError):
    """Custom exception for snapshot and configuration errors."""

    status_code = HTTPStatus.BAD_REQUEST
    error_code = "invalid_configuration"


class InvalidDateFormatError(ConfigurationError):
    """Raised when a date is not in ISO 8601 format (YYYY-MM-DD)."""

    error_code = "invalid_date_format"


class NotFoundError(CoverageError, LookupError):
    """A referenced organization, employee or request does not exist."""

    status_code = HTTPStatus.NOT_FOUND
    error_code = "not_found"


class OrganizationNotFoundError(NotFoundError):
    error_code = "organization_not_found"


class EmployeeNotFoundError(NotFoundError):
    error_code = "employee_not_found"


class RequestNotFoundError(NotFoundError):
    error_code = "request_not_found"


class EmptyRosterError(CoverageError, ValueError):
    """Coverage is undefined for an organization without employees."""

    status_code = HTTPStatus.UNPROCESSABLE_ENTITY
    error_code = "empty_roster"
