"""Custom exception hierarchy for Sales Coach.

Each exception includes an error code, the location it was raised from,
an optional cause and a JSON-ready representation. Import from this
package directly:

    from sales_coach.core.domain.exceptions import SalesCoachError, DocumentStoreError
"""

# Base classes
from .base import RaiseSite, SalesCoachError

# Configuration exceptions
from .configuration import ConfigurationError, MissingAPIKeyError

# Data ingestion exceptions
from .data_ingestion import DataIngestionError, DocumentStoreError, PDFExtractionError

# LLM exceptions
from .llm import LLMError, LLMGenerationError, LLMRateLimitError

# Training and analysis exceptions
from .training import AnalysisError, AnalysisParseError, DocumentNotFoundError, TrainingError

# Validation exceptions
from .validation import EmptyQueryError, QueryTooLongError, ValidationError

__all__ = [
    # Base
    "RaiseSite",
    "SalesCoachError",
    # Configuration
    "ConfigurationError",
    "MissingAPIKeyError",
    # Data Ingestion
    "DataIngestionError",
    "DocumentStoreError",
    "PDFExtractionError",
    # LLM
    "LLMError",
    "LLMGenerationError",
    "LLMRateLimitError",
    # Training
    "TrainingError",
    "DocumentNotFoundError",
    "AnalysisError",
    "AnalysisParseError",
    # Validation
    "ValidationError",
    "EmptyQueryError",
    "QueryTooLongError",
]
