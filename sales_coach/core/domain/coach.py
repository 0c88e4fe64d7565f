"""Coaching conversation and training-data models."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .document import RelevantDocument

# Rough characters-to-tokens ratio used for usage estimates
TOKENS_PER_CHAR = 0.25


class CoachMode(Enum):
    """Which persona the coach answers with.

    Attributes:
        CHAT: Direct sales-coach advice.
        PRACTICE: Role-play as a prospect in a practice scenario.
    """

    CHAT = "chat"
    PRACTICE = "practice"


@dataclass
class ChatMessage:
    """A single message in the chat history."""

    role: str
    content: str


@dataclass
class TokenUsage:
    """Estimated token usage for one model call."""

    prompt_tokens: int = 0
    completion_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens

    @classmethod
    def estimate(cls, prompt_chars: int, completion_chars: int) -> "TokenUsage":
        """Estimate usage from character counts."""
        return cls(
            prompt_tokens=math.ceil(prompt_chars * TOKENS_PER_CHAR),
            completion_tokens=math.ceil(completion_chars * TOKENS_PER_CHAR),
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "promptTokens": self.prompt_tokens,
            "completionTokens": self.completion_tokens,
            "totalTokens": self.total_tokens,
        }


@dataclass
class CoachResponse:
    """Response from the sales coach.

    Attributes:
        text: The generated reply.
        mode: Persona used for the reply.
        token_usage: Estimated token usage.
        documents: Training documents injected into the prompt.
    """

    text: str
    mode: CoachMode
    token_usage: TokenUsage
    documents: list[RelevantDocument] = field(default_factory=list)


@dataclass
class TrainingExcerpt:
    """A paragraph or summary pulled out of a training document."""

    id: str
    content: str
    source: str
    type: str = ""
    title: str = ""


@dataclass
class TrainingData:
    """Training material grouped by coaching topic.

    Used to enrich the coach's system prompt when the user's message
    mentions one of the topics.
    """

    objection_handling: list[TrainingExcerpt] = field(default_factory=list)
    closing_techniques: list[TrainingExcerpt] = field(default_factory=list)
    discovery_questions: list[TrainingExcerpt] = field(default_factory=list)
    value_propositions: list[TrainingExcerpt] = field(default_factory=list)
    sales_scripts: list[TrainingExcerpt] = field(default_factory=list)
    documents: list[dict[str, Any]] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (
            self.objection_handling
            or self.closing_techniques
            or self.discovery_questions
            or self.value_propositions
            or self.sales_scripts
            or self.documents
        )
