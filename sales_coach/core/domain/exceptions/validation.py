"""Validation exceptions for Sales Coach."""

from .base import SalesCoachError


class ValidationError(SalesCoachError):
    """Input validation failed."""

    error_code = "SC_VAL_001"


class EmptyQueryError(ValidationError):
    """Query cannot be empty or whitespace only."""

    error_code = "SC_VAL_002"


class QueryTooLongError(ValidationError):
    """Query exceeds maximum allowed length."""

    error_code = "SC_VAL_003"
