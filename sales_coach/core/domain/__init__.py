"""Domain models for Sales Coach.

- document: TrainingDocument, DocumentRelevance and the selection result
- coach: chat messages, coaching responses and grouped training data

All models are re-exported here:

    from sales_coach.core.domain import TrainingDocument, SelectionResult
"""

from .coach import (
    ChatMessage,
    CoachMode,
    CoachResponse,
    TokenUsage,
    TrainingData,
    TrainingExcerpt,
)
from .document import DocumentRelevance, RelevantDocument, SelectionResult, TrainingDocument

__all__ = [
    # Document models
    "TrainingDocument",
    "DocumentRelevance",
    "RelevantDocument",
    "SelectionResult",
    # Coaching models
    "ChatMessage",
    "CoachMode",
    "CoachResponse",
    "TokenUsage",
    "TrainingData",
    "TrainingExcerpt",
]
