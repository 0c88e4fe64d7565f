"""Ports the core services depend on."""

from .document_store_port import TrainingDocumentStorePort, TrainingSourcePort
from .llm_port import LLMPort

__all__ = ["LLMPort", "TrainingDocumentStorePort", "TrainingSourcePort"]
