"""Outbound adapters for training material storage and ingestion."""

from .json_document_store import JSONDocumentStore
from .pdf_training_source import PDFTrainingSource

__all__ = ["JSONDocumentStore", "PDFTrainingSource"]
