"""FastAPI dependency providers."""

from ....composition.container import get_coach, get_document_store, get_library, get_selector

__all__ = ["get_coach", "get_document_store", "get_library", "get_selector"]
