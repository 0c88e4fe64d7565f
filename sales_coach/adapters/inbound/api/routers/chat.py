"""Coaching endpoints: chat, practice role-play and content analysis."""

import logging

from fastapi import APIRouter, HTTPException

from .....core.domain import ChatMessage, CoachMode
from .....core.domain.exceptions import SalesCoachError
from ..deps import get_coach
from ..models import (
    AnalyzeRequest,
    AnalyzeResponse,
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    RelevantDocumentModel,
    TokenUsageModel,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["coach"])


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        429: {"model": ErrorResponse, "description": "Model rate limit reached"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def chat(request: ChatRequest) -> ChatResponse:
    """Send a message to the sales coach or the practice prospect.

    Args:
        request: Message, history and persona.

    Returns:
        ChatResponse with the reply, token usage and reference documents.
    """
    try:
        coach = get_coach()
        history = [ChatMessage(role=m.role, content=m.content) for m in request.history]
        result = coach.respond(request.prompt, history=history, mode=CoachMode(request.type))

        return ChatResponse(
            response=result.text,
            token_usage=TokenUsageModel(**result.token_usage.to_dict()),
            documents=[RelevantDocumentModel(**doc.to_dict()) for doc in result.documents],
        )

    except SalesCoachError:
        raise
    except Exception as e:
        logger.exception("Error generating coach response: %s", e)
        raise HTTPException(
            status_code=500,
            detail="An error occurred while processing your message. Please try again.",
        )


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def analyze(request: AnalyzeRequest) -> AnalyzeResponse:
    """Score a sales conversation, pitch or script."""
    try:
        coach = get_coach()
        analysis, usage = coach.analyze(
            request.content_type,
            request.content,
            additional_context=request.additional_context,
        )
        return AnalyzeResponse(
            analysis=analysis.model_dump(by_alias=True),
            token_usage=TokenUsageModel(**usage.to_dict()),
        )

    except SalesCoachError:
        raise
    except Exception as e:
        logger.exception("Error analyzing content: %s", e)
        raise HTTPException(status_code=500, detail="Failed to analyze content")
