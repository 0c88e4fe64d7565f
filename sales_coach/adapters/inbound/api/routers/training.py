"""Training library endpoints."""

import logging

from fastapi import APIRouter

from ..deps import get_library, get_selector
from ..models import (
    DocumentListResponse,
    DocumentResponse,
    DocumentSummaryModel,
    ErrorResponse,
    RefreshResponse,
    RelevantDocumentModel,
    SelectRequest,
    SelectResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/training", tags=["training"])


@router.post("/select", response_model=SelectResponse)
async def select_documents(request: SelectRequest) -> SelectResponse:
    """Return the training documents most relevant to a query.

    Never fails because of the corpus: an unavailable corpus gives an
    empty selection.
    """
    result = get_selector().select_relevant_documents(request.query, request.max_documents)
    return SelectResponse(
        documents=[RelevantDocumentModel(**doc.to_dict()) for doc in result.documents],
        categories=result.categories,
    )


@router.get(
    "/documents",
    response_model=DocumentListResponse,
    responses={503: {"model": ErrorResponse, "description": "Training store unavailable"}},
)
async def list_documents(category: str | None = None, query: str | None = None) -> DocumentListResponse:
    """List training documents, optionally filtered by category or text."""
    summaries = get_library().list_documents(category=category, query=query)
    documents = [DocumentSummaryModel(**summary.to_dict()) for summary in summaries]
    return DocumentListResponse(documents=documents, count=len(documents))


@router.get(
    "/documents/{document_id}",
    response_model=DocumentResponse,
    responses={404: {"model": ErrorResponse, "description": "Document not found"}},
)
async def get_document(document_id: str) -> DocumentResponse:
    """Get one training document with its full content."""
    document = get_library().get_document(document_id)
    return DocumentResponse(document=document.to_dict())


@router.post(
    "/refresh",
    response_model=RefreshResponse,
    responses={500: {"model": ErrorResponse, "description": "Refresh failed"}},
)
async def refresh_documents() -> RefreshResponse:
    """Reprocess the training PDFs."""
    count = get_library().refresh()
    logger.info("Training refresh complete: %d documents", count)
    return RefreshResponse(
        message=f"Successfully processed {count} training documents from PDFs",
        count=count,
    )
