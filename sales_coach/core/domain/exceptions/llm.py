"""LLM exceptions for Sales Coach."""

from .base import SalesCoachError


class LLMError(SalesCoachError):
    """Error calling the generative model."""

    error_code = "SC_LLM_001"


class LLMGenerationError(LLMError):
    """The model failed to produce a response."""

    error_code = "SC_LLM_002"


class LLMRateLimitError(LLMError):
    """Model quota or rate limit exhausted after retries."""

    error_code = "SC_LLM_003"
