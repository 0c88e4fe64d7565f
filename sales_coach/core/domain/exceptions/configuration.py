"""Configuration-related exceptions for Sales Coach."""

from .base import SalesCoachError


class ConfigurationError(SalesCoachError):
    """Configuration or environment variable errors."""

    error_code = "SC_CFG_001"


class MissingAPIKeyError(ConfigurationError):
    """Required API key is not configured."""

    error_code = "SC_CFG_002"
