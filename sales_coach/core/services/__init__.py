"""Core services: relevance selection, training library and coaching."""

from .coach_service import CoachService, ContentAnalysis
from .document_scorer import score_documents
from .document_selector import DocumentSelector
from .key_terms import extract_key_terms
from .training_library import TrainingLibraryService

__all__ = [
    "CoachService",
    "ContentAnalysis",
    "DocumentSelector",
    "TrainingLibraryService",
    "extract_key_terms",
    "score_documents",
]
