"""Health check endpoints."""

from fastapi import APIRouter

from ..... import __version__
from ..deps import get_document_store
from ..models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(status="healthy", version=__version__, training_documents="not_checked")


@router.get("/ready", response_model=HealthResponse)
async def readiness_check() -> HealthResponse:
    """Readiness probe that checks the training corpus can be read."""
    try:
        count = len(get_document_store().load_documents())
        store_status = f"loaded ({count} docs)"
    except Exception as e:
        store_status = f"error: {str(e)}"

    return HealthResponse(status="ready", version=__version__, training_documents=store_status)
