"""Training data ingestion and storage exceptions."""

from .base import SalesCoachError


class DataIngestionError(SalesCoachError):
    """Error while loading or processing training material."""

    error_code = "SC_DAT_001"


class DocumentStoreError(DataIngestionError):
    """The training document store could not be read or written."""

    error_code = "SC_DAT_002"


class PDFExtractionError(DataIngestionError):
    """Failed to extract text from a training PDF."""

    error_code = "SC_DAT_003"
