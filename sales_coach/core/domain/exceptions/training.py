"""Training library and content analysis exceptions."""

from .base import SalesCoachError


class TrainingError(SalesCoachError):
    """Error in the training library."""

    error_code = "SC_TRN_001"


class DocumentNotFoundError(TrainingError):
    """No training document exists with the requested id."""

    error_code = "SC_TRN_002"


class AnalysisError(SalesCoachError):
    """Content analysis failed."""

    error_code = "SC_ANL_001"


class AnalysisParseError(AnalysisError):
    """The model's analysis could not be parsed as the expected JSON."""

    error_code = "SC_ANL_002"
