"""Sales coach orchestration: prompt enrichment, generation and analysis."""

import json
import logging
import re
from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from ..domain import (
    ChatMessage,
    CoachMode,
    CoachResponse,
    RelevantDocument,
    TokenUsage,
    TrainingData,
)
from ..domain.exceptions import AnalysisParseError, EmptyQueryError, QueryTooLongError
from ..domain.utils import content_preview, normalize_text
from ..ports.llm_port import LLMPort
from .document_selector import DocumentSelector
from .prompts import (
    ANALYSIS_REQUEST_PROMPT,
    CONTENT_ANALYSIS_PROMPT,
    PRACTICE_SCENARIO_PROMPT,
    RELEVANT_DOCUMENTS_FOOTER,
    RELEVANT_DOCUMENTS_HEADER,
    SALES_COACH_PROMPT,
)
from .training_library import TrainingLibraryService

logger = logging.getLogger(__name__)

MAX_PROMPT_LENGTH = 4000

_JSON_FENCE = re.compile(r"```json\n?|\n?```")


class AnalysisMetric(BaseModel):
    """One scored aspect of a sales conversation."""

    name: str
    score: float
    description: str = ""


class ContentAnalysis(BaseModel):
    """Structured performance analysis of sales content."""

    analysis_text: str = Field(..., alias="summary")
    overall_score: float = Field(..., alias="overallScore")
    metrics: list[AnalysisMetric]
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    actionable_tips: list[str] = Field(default_factory=list, alias="actionableTips")

    model_config = {"populate_by_name": True}

    @classmethod
    def fallback(cls) -> "ContentAnalysis":
        """Neutral analysis returned when the model output is unusable."""
        return cls(
            analysis_text="Error analyzing content. Please try again.",
            overall_score=75,
            metrics=[
                AnalysisMetric(name="Engagement", score=75, description="Level of audience engagement"),
                AnalysisMetric(
                    name="Objection Handling",
                    score=75,
                    description="Effectiveness in handling objections",
                ),
                AnalysisMetric(
                    name="Closing Techniques",
                    score=75,
                    description="Skill in closing opportunities",
                ),
                AnalysisMetric(
                    name="Product Knowledge",
                    score=75,
                    description="Understanding of product features and benefits",
                ),
            ],
            strengths=["Unable to analyze strengths"],
            improvements=["Unable to analyze improvements"],
            actionable_tips=["Please try analyzing the content again"],
        )


def parse_analysis(text: str) -> ContentAnalysis:
    """Parse the model's JSON analysis.

    Raises:
        AnalysisParseError: If the text is not the expected JSON object.
    """
    cleaned = _JSON_FENCE.sub("", text).strip()
    if not cleaned.startswith("{"):
        raise AnalysisParseError("Response is not in JSON format", context={"raw": text[:200]})

    try:
        data: dict[str, Any] = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise AnalysisParseError("Response is not valid JSON", cause=e) from e

    if not data.get("summary") or not data.get("overallScore") or not isinstance(
        data.get("metrics"), list
    ):
        raise AnalysisParseError("Missing required fields in JSON response")

    for metric in data["metrics"]:
        if isinstance(metric, dict) and not metric.get("description") and metric.get("name"):
            metric["description"] = f"Analysis of {str(metric['name']).lower()}"

    try:
        return ContentAnalysis.model_validate(data)
    except PydanticValidationError as e:
        raise AnalysisParseError("Analysis JSON has unexpected shape", cause=e) from e


class CoachService:
    """Answers sales questions grounded in the training library."""

    def __init__(
        self,
        llm: LLMPort,
        selector: DocumentSelector,
        library: TrainingLibraryService,
        max_documents: int = 3,
        preview_chars: int = 500,
    ) -> None:
        """Initialize the coach.

        Args:
            llm: Model used to generate replies.
            selector: Picks reference documents for each prompt.
            library: Source of topic-grouped training excerpts.
            max_documents: Reference documents injected per prompt.
            preview_chars: Characters of each document included.
        """
        self.llm = llm
        self.selector = selector
        self.library = library
        self.max_documents = max_documents
        self.preview_chars = preview_chars

    @staticmethod
    def _validate_prompt(prompt: str) -> str:
        if not prompt or not prompt.strip():
            raise EmptyQueryError("Prompt cannot be empty or whitespace only")
        if len(prompt) > MAX_PROMPT_LENGTH:
            raise QueryTooLongError(
                f"Prompt exceeds {MAX_PROMPT_LENGTH} characters",
                context={"length": len(prompt)},
            )
        return normalize_text(prompt)

    def format_relevant_documents(self, documents: list[RelevantDocument]) -> str:
        """Render selected documents as a system-prompt section."""
        if not documents:
            return ""

        section = RELEVANT_DOCUMENTS_HEADER
        for index, doc in enumerate(documents, start=1):
            section += f'\nDocument {index}: "{doc.title}" (Category: {doc.category})\n'
            section += f"Content: {content_preview(doc.content, self.preview_chars)}\n"
        return section + RELEVANT_DOCUMENTS_FOOTER

    @staticmethod
    def format_training_data(prompt: str, training_data: TrainingData) -> str:
        """Render the topic excerpts the prompt asks about."""
        lower_prompt = prompt.lower()
        section = ""

        topics = [
            ("objection", training_data.objection_handling, "Objection handling examples"),
            ("closing", training_data.closing_techniques, "Closing techniques"),
            ("question", training_data.discovery_questions, "Discovery questions"),
        ]
        for keyword, excerpts, heading in topics:
            if keyword in lower_prompt and excerpts:
                section += f"\n\n{heading}:\n"
                for i, item in enumerate(excerpts[:3], start=1):
                    section += f"\n{i}. {item.content}\n"

        if "script" in lower_prompt and training_data.sales_scripts:
            section += "\n\nSales scripts:\n"
            for i, item in enumerate(training_data.sales_scripts[:2], start=1):
                section += f"\n{i}. {item.title}: {item.content}\n"

        if training_data.documents:
            section += "\n\nReference docs:\n"
            for doc in training_data.documents:
                section += f"\n- {doc['title']} ({doc['category']})\n"

        return section

    def build_system_prompt(
        self,
        prompt: str,
        mode: CoachMode,
        documents: list[RelevantDocument],
        training_data: TrainingData,
    ) -> str:
        base = SALES_COACH_PROMPT if mode == CoachMode.CHAT else PRACTICE_SCENARIO_PROMPT
        return (
            base
            + self.format_relevant_documents(documents)
            + self.format_training_data(prompt, training_data)
        )

    def respond(
        self,
        prompt: str,
        history: list[ChatMessage] | None = None,
        mode: CoachMode = CoachMode.CHAT,
    ) -> CoachResponse:
        """Reply to a user message.

        Args:
            prompt: The user's message.
            history: Earlier turns of the conversation.
            mode: Coaching persona.

        Returns:
            CoachResponse with the reply and the documents used.

        Raises:
            EmptyQueryError: If the prompt is blank.
            QueryTooLongError: If the prompt is too long.
            LLMError: If generation fails.
        """
        prompt = self._validate_prompt(prompt)

        selection = self.selector.select_relevant_documents(prompt, self.max_documents)
        logger.debug("Relevant categories: %s", selection.categories)

        training_data = self.library.load_training_data()
        system_prompt = self.build_system_prompt(prompt, mode, selection.documents, training_data)

        text = self.llm.generate(prompt, system_prompt=system_prompt, history=history or [])

        return CoachResponse(
            text=text,
            mode=mode,
            token_usage=TokenUsage.estimate(len(prompt) + len(system_prompt), len(text)),
            documents=selection.documents,
        )

    def analyze(
        self,
        content_type: str,
        content: str,
        additional_context: str | None = None,
    ) -> tuple[ContentAnalysis, TokenUsage]:
        """Score a sales conversation, pitch or script.

        Args:
            content_type: What the content is ("text", "audio transcript", ...).
            content: The content itself.
            additional_context: Optional notes from the user.

        Returns:
            The analysis and estimated token usage. Unparseable model output
            yields the fallback analysis.

        Raises:
            EmptyQueryError: If there is no content.
            LLMError: If generation fails.
        """
        if not content or not content.strip():
            raise EmptyQueryError("Content to analyze cannot be empty")

        context_line = f"Additional context: {additional_context}\n" if additional_context else ""
        prompt = ANALYSIS_REQUEST_PROMPT.format(
            content_type=content_type or "text",
            content=normalize_text(content),
            additional_context=context_line,
        )

        text = self.llm.generate(prompt, system_prompt=CONTENT_ANALYSIS_PROMPT)
        usage = TokenUsage.estimate(len(prompt), len(text))

        try:
            return parse_analysis(text), usage
        except AnalysisParseError as e:
            logger.warning("Could not parse analysis response: %s", e.message)
            return ContentAnalysis.fallback(), usage
