"""Composition root wiring adapters to the core services."""

from __future__ import annotations

import logging
from functools import lru_cache

from ..adapters.llm.gemini_llm import GeminiLLMAdapter
from ..adapters.outbound.json_document_store import JSONDocumentStore
from ..adapters.outbound.pdf_training_source import PDFTrainingSource
from ..config.settings import settings
from ..core.services.coach_service import CoachService
from ..core.services.document_selector import DocumentSelector
from ..core.services.training_library import TrainingLibraryService

logger = logging.getLogger(__name__)


@lru_cache
def get_document_store() -> JSONDocumentStore:
    logger.info("Initializing JSONDocumentStore at %s", settings.training_documents_file)
    return JSONDocumentStore(settings.training_documents_file)


@lru_cache
def get_selector() -> DocumentSelector:
    return DocumentSelector(get_document_store())


@lru_cache
def get_library() -> TrainingLibraryService:
    logger.info("Initializing TrainingLibraryService...")
    return TrainingLibraryService(
        get_document_store(),
        PDFTrainingSource(settings.training_dir),
    )


@lru_cache
def get_llm() -> GeminiLLMAdapter:
    logger.info("Initializing GeminiLLMAdapter...")
    return GeminiLLMAdapter(
        api_key=settings.google_api_key,
        model=settings.llm_model,
        temperature=settings.llm_temperature,
        max_output_tokens=settings.llm_max_output_tokens,
    )


@lru_cache
def get_coach() -> CoachService:
    logger.info("Initializing CoachService...")
    return CoachService(
        llm=get_llm(),
        selector=get_selector(),
        library=get_library(),
        max_documents=settings.max_relevant_documents,
        preview_chars=settings.relevant_preview_chars,
    )
